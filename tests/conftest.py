"""Shared test fixtures for gitprompt tests."""

import os
import subprocess
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

from gitprompt.backend import FakeBackend
from gitprompt.config import Config, Shell


@dataclass(frozen=True, slots=True)
class GitRepo:
    """A real git repository driven through the git CLI."""

    root: Path

    def git(self, *args: str, check: bool = True) -> str:
        """Run a git command in the repository and return its stdout."""
        result = subprocess.run(  # noqa: S603 - Safe: controlled git args
            ["git", *args],  # noqa: S607
            cwd=str(self.root),
            capture_output=True,
            text=True,
            check=False,
        )
        if check and result.returncode != 0:
            msg = f"git {' '.join(args)} failed: {result.stderr}"
            raise RuntimeError(msg)
        return result.stdout.strip()

    def write(self, name: str, content: str = "content\n") -> Path:
        """Write a file relative to the repository root."""
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def commit(self, message: str = "commit") -> str:
        """Stage everything, commit, and return the new commit id."""
        self.git("add", "-A")
        self.git("commit", "-m", message)
        return self.head()

    def head(self) -> str:
        """Return the commit id HEAD points at."""
        return self.git("rev-parse", "HEAD")

    def conflict(self, name: str = "f.txt", *, branch: str = "other") -> None:
        """Leave ``name`` unmerged after a conflicting merge of ``branch``."""
        current = self.git("symbolic-ref", "--short", "HEAD")
        _ = self.write(name, "base\n")
        _ = self.commit(f"add {name}")
        self.git("checkout", "--quiet", "-b", branch)
        _ = self.write(name, f"{branch}\n")
        _ = self.commit(f"{branch} edit")
        self.git("checkout", "--quiet", current)
        _ = self.write(name, f"{current}\n")
        _ = self.commit(f"{current} edit")
        _ = self.git("merge", "--no-edit", branch, check=False)



def _configure(repo: GitRepo) -> GitRepo:
    repo.git("config", "user.name", "Test User")
    repo.git("config", "user.email", "test@example.com")
    repo.git("config", "commit.gpgsign", "false")
    return repo


def init_git_repo(path: Path, *, branch: str = "main") -> GitRepo:
    """Initialize a repository on the given branch with no commits."""
    path.mkdir(parents=True, exist_ok=True)
    repo = GitRepo(root=path)
    repo.git("init")
    repo.git("symbolic-ref", "HEAD", f"refs/heads/{branch}")
    return _configure(repo)


def clone_git_repo(source: GitRepo, path: Path) -> GitRepo:
    """Clone a repository; the clone tracks the source's current branch."""
    _ = subprocess.run(  # noqa: S603
        ["git", "clone", "--quiet", str(source.root), str(path)],  # noqa: S607
        capture_output=True,
        check=True,
    )
    return _configure(GitRepo(root=path))


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
    """A repository on ``main`` with one committed file."""
    repo = init_git_repo(tmp_path / "repo")
    _ = repo.write("README.md", "# test\n")
    _ = repo.commit("Initial commit")
    return repo


@pytest.fixture
def make_git_repo(tmp_path: Path) -> Callable[..., GitRepo]:
    """Return a factory creating empty repositories under tmp_path."""

    def _make(name: str = "repo", *, branch: str = "main") -> GitRepo:
        return init_git_repo(tmp_path / name, branch=branch)

    return _make


@pytest.fixture
def clone_repo(tmp_path: Path) -> Callable[..., GitRepo]:
    """Return a factory cloning a repository under tmp_path."""

    def _clone(source: GitRepo, name: str = "clone") -> GitRepo:
        return clone_git_repo(source, tmp_path / name)

    return _clone


@pytest.fixture
def fake_backend() -> FakeBackend:
    """A fake backend on branch ``main`` with no changes."""
    return FakeBackend.on_branch("main", commit="a" * 40)


@pytest.fixture
def plain_config() -> Config:
    """Default configuration without shell zero-width markers."""
    return Config(shell=Shell.NONE)


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep user config files, log files and GITPROMPT_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(home / ".local" / "state"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / ".cache"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for name in list(os.environ):
        if name.startswith("GITPROMPT_"):
            monkeypatch.delenv(name)
