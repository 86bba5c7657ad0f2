"""Tests for the git-backed CommitWriter. Skipped without a git binary."""

import subprocess
from datetime import datetime, timezone

import pytest

from conftest import needs_git, quiet
from contribwriter.config import ACTIVITY_FILE, REPLACEMENT_BRANCH, Options
from contribwriter.errors import ExternalCommandFailure
from contribwriter.generator import build_plan, create_pattern
from contribwriter.git import REPLACE_TARGET_KEY, GitCommitWriter, git_date, run

pytestmark = needs_git


def git(repo, *args):
    return subprocess.run(["git", *args], cwd=repo, check=True, stdout=subprocess.PIPE,
                          text=True).stdout.strip()


class TestRun:
    def test_failure_carries_diagnostics(self, tmp_path):
        with pytest.raises(ExternalCommandFailure) as exc:
            run(["git", "rev-parse", "HEAD"], cwd=tmp_path)
        assert exc.value.returncode != 0
        assert exc.value.cmd == ["git", "rev-parse", "HEAD"]
        assert exc.value.output

    def test_git_date(self):
        ts = datetime(2026, 1, 4, 13, 5, 9, tzinfo=timezone.utc)
        assert git_date(ts) == "2026-01-04 13:05:09 +0000"


class TestGitCommitWriter:
    def test_ensure_repository(self, tmp_path):
        writer = GitCommitWriter(tmp_path / "fresh")
        assert writer.ensure_repository() is True
        assert writer.ensure_repository() is False

    def test_create_backdates_commit(self, git_repo):
        writer = GitCommitWriter(git_repo)
        (git_repo / ACTIVITY_FILE).write_text("one\n")
        ts = datetime(2025, 11, 2, 7, 30, 0, tzinfo=timezone.utc)
        sha = writer.create(ts, "AI: activity 1")
        assert sha == git(git_repo, "rev-parse", "HEAD")
        assert git(git_repo, "log", "-1", "--format=%at %ct %s") == f"{int(ts.timestamp())} {int(ts.timestamp())} AI: activity 1"
        assert writer.is_clean()

    def test_create_pattern_history(self, git_repo, now):
        plan = build_plan(".", Options.build(commits=3, use_utc=True), now=now)
        create_pattern(git_repo, plan, GitCommitWriter(git_repo), now=now, out=quiet)
        assert git(git_repo, "rev-list", "--count", "HEAD") == "3"
        dates = git(git_repo, "log", "--reverse", "--format=%at").split()
        assert dates == sorted(dates)
        assert dates == [str(int(c.timestamp.timestamp())) for c in plan.commits]

    def test_force_replace_rewrites_history(self, git_repo, now):
        writer = GitCommitWriter(git_repo)
        first = build_plan(".", Options.build(commits=4, use_utc=True), now=now)
        create_pattern(git_repo, first, writer, now=now, out=quiet)
        branch = writer.current_branch()

        second = build_plan(".", Options.build(commits=2, use_utc=True, force_replace=True), now=now)
        create_pattern(git_repo, second, writer, now=now, out=quiet)
        assert writer.current_branch() == branch
        assert git(git_repo, "rev-list", "--count", "HEAD") == "2"
        assert (git_repo / "README.md").exists()

    def test_replace_again_after_interrupted_replace(self, git_repo, now):
        class InterruptedWriter(GitCommitWriter):
            created = 0

            def create(self, timestamp, message):
                self.created += 1
                if self.created == 2:
                    raise KeyboardInterrupt()
                return super().create(timestamp, message)

        first = build_plan(".", Options.build(commits=4, use_utc=True), now=now)
        create_pattern(git_repo, first, GitCommitWriter(git_repo), now=now, out=quiet)
        branch = GitCommitWriter(git_repo).current_branch()

        replace = Options.build(commits=3, use_utc=True, force_replace=True)
        with pytest.raises(KeyboardInterrupt):
            create_pattern(git_repo, build_plan(".", replace, now=now), InterruptedWriter(git_repo),
                           now=now, out=quiet)
        assert GitCommitWriter(git_repo).current_branch() == REPLACEMENT_BRANCH

        writer = GitCommitWriter(git_repo)
        second = build_plan(".", replace, now=now)
        create_pattern(git_repo, second, writer, now=now, out=quiet)
        assert writer.current_branch() == branch
        assert git(git_repo, "rev-list", "--count", "HEAD") == str(len(second.commits))
        assert not writer.branch_exists(REPLACEMENT_BRANCH)
        res = subprocess.run(["git", "config", "--get", REPLACE_TARGET_KEY], cwd=git_repo,
                             stdout=subprocess.PIPE, text=True)
        assert res.returncode == 1 and res.stdout == ""
