from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

from gitcore import ExecutionContext, GitClient

HAS_GIT = shutil.which("git") is not None


def git(cwd: Path, *args: str) -> str:
    """Run git for test setup and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def configure_identity(repo: Path) -> None:
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "commit.gpgsign", "false")


def commit_file(repo: Path, name: str, content: str, message: str) -> str:
    """Write *name*, commit it and return the new HEAD hash."""
    (repo / name).write_text(content, encoding="utf-8")
    git(repo, "add", "--", name)
    git(repo, "commit", "-q", "-m", message)
    return git(repo, "rev-parse", "HEAD").strip()


@pytest.fixture
def git_repo(temp_dir: Path) -> Path:
    """A repository on ``main`` with one commit of README.md."""
    if not HAS_GIT:
        pytest.skip("Requires git installed")
    repo = temp_dir / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    configure_identity(repo)
    commit_file(repo, "README.md", "hello\n", "initial")
    return repo


@pytest.fixture
def client() -> GitClient:
    return GitClient()


@pytest.fixture
def context(git_repo: Path) -> ExecutionContext:
    return ExecutionContext(working_dir=git_repo)
