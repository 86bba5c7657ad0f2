"""
Git side of the tool: one backdated commit per scheduled timestamp.

Every command runs to completion before the next one starts; the working
tree and HEAD are shared state and commits must land in timestamp order.
"""

import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import DEFAULT_BRANCH, REPLACEMENT_BRANCH
from .errors import ExternalCommandFailure

GIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"
REPLACE_TARGET_KEY = "contribwriter.replaceTarget"


def run(cmd, cwd=None, env=None, check=True) -> str:
    res = subprocess.run(cmd, cwd=cwd, env=env, stdout=subprocess.PIPE,
                         stderr=subprocess.STDOUT, text=True)
    if check and res.returncode != 0:
        raise ExternalCommandFailure(cmd, res.returncode, res.stdout)
    return res.stdout


def git_date(ts: datetime) -> str:
    if ts.tzinfo is None:
        ts = ts.astimezone()
    return ts.strftime(GIT_DATE_FORMAT)


class GitCommitWriter:
    """Creates commits in the repository at `repo_path` through the git CLI."""

    def __init__(self, repo_path):
        self.repo_path = Path(repo_path)
        self._replacing_branch: Optional[str] = None

    def git(self, *args, env=None, check=True) -> str:
        return run(["git", *args], cwd=self.repo_path, env=env, check=check)

    def is_repository(self) -> bool:
        return (self.repo_path / ".git").exists()

    def ensure_repository(self) -> bool:
        """Run `git init` when needed; True if a repository was created."""
        if self.is_repository():
            return False
        self.repo_path.mkdir(parents=True, exist_ok=True)
        self.git("init", "--quiet")
        return True

    def current_branch(self) -> str:
        # symbolic-ref works before the first commit, rev-parse does not
        out = self.git("symbolic-ref", "--short", "-q", "HEAD", check=False).strip()
        return out or DEFAULT_BRANCH

    def branch_exists(self, name: str) -> bool:
        res = subprocess.run(["git", "rev-parse", "--verify", "--quiet", f"refs/heads/{name}"],
                             cwd=self.repo_path, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        return res.returncode == 0

    def is_clean(self) -> bool:
        return not self.git("status", "--porcelain").strip()

    def start_replacement(self) -> str:
        """
        Begin a fresh history on an orphan branch. The index is emptied but
        working files stay on disk so they are recommitted with the pattern.

        The branch being replaced is recorded in the repository config, so a
        replacement interrupted while HEAD sits on the orphan branch can be
        started again and still lands on the original branch name.
        """
        branch = self.current_branch()
        if branch == REPLACEMENT_BRANCH:
            branch = self.git("config", "--get", REPLACE_TARGET_KEY, check=False).strip() or DEFAULT_BRANCH
            if self.branch_exists(REPLACEMENT_BRANCH):
                # git refuses to delete the checked-out branch
                self.git("checkout", "--quiet", "--detach")
        else:
            self.git("config", REPLACE_TARGET_KEY, branch)
        self._replacing_branch = branch
        if self.branch_exists(REPLACEMENT_BRANCH):
            self.git("branch", "-D", REPLACEMENT_BRANCH)
        if self.current_branch() != REPLACEMENT_BRANCH:
            self.git("checkout", "--quiet", "--orphan", REPLACEMENT_BRANCH)
        self.git("rm", "-r", "--cached", "--quiet", "--ignore-unmatch", ".")
        return self._replacing_branch

    def finish_replacement(self) -> str:
        """Move the replacement history onto the original branch name."""
        target = self._replacing_branch or DEFAULT_BRANCH
        if self.branch_exists(target):
            self.git("branch", "-D", target)
        self.git("branch", "-m", target)
        self.git("config", "--unset", REPLACE_TARGET_KEY, check=False)
        self._replacing_branch = None
        return target

    def create(self, timestamp: datetime, message: str) -> str:
        """Stage the work tree and commit it dated `timestamp`; returns the commit id."""
        iso = git_date(timestamp)
        env = os.environ.copy()
        env["GIT_AUTHOR_DATE"] = iso
        env["GIT_COMMITTER_DATE"] = iso
        self.git("add", "-A")
        self.git("commit", "--quiet", "-m", message, env=env)
        return self.git("rev-parse", "HEAD").strip()
