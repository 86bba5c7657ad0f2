"""Shared fixtures for contribwriter tests."""

import shutil
import subprocess
from datetime import datetime

import pytest

# 2026-10-18 is a Sunday; its window runs 2025-10-12 .. 2026-10-18
NOW = datetime(2026, 10, 18, 12, 0, 0)

needs_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


class RecordingWriter:
    """Stand-in CommitWriter that records calls instead of running git."""

    def __init__(self, fail_at=None, exc=KeyboardInterrupt):
        self.commits = []
        self.calls = []
        self.fail_at = fail_at
        self.exc = exc

    def ensure_repository(self):
        self.calls.append('ensure_repository')
        return False

    def start_replacement(self):
        self.calls.append('start_replacement')
        return 'main'

    def finish_replacement(self):
        self.calls.append('finish_replacement')
        return 'main'

    def create(self, timestamp, message):
        if self.fail_at is not None and len(self.commits) + 1 == self.fail_at:
            raise self.exc()
        self.commits.append((timestamp, message))
        return f"{len(self.commits):040x}"


def quiet(*args, **kwargs):
    pass


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def writer():
    return RecordingWriter()


@pytest.fixture
def git_repo(tmp_path):
    """Initialized repository with a local identity and signing disabled."""
    repo = tmp_path / "repo"
    repo.mkdir()
    for cmd in (["git", "init", "--quiet"],
                ["git", "config", "user.name", "Test User"],
                ["git", "config", "user.email", "test@example.com"],
                ["git", "config", "commit.gpgsign", "false"]):
        subprocess.run(cmd, cwd=repo, check=True, stdout=subprocess.DEVNULL)
    return repo
