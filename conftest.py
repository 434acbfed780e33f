"""Shared test fixtures for RepoScanner tests."""

import os
from types import SimpleNamespace

import git
import pytest

ACTOR = git.Actor("Test User", "test@example.com")
BASE_TIME = 1609459200  # 2021-01-01T00:00:00Z


def make_commit(repo: git.Repo, message: str, timestamp: int) -> git.Commit:
    """Commit a change to file.txt with a fixed committer date"""
    file_path = os.path.join(repo.working_tree_dir, "file.txt")
    with open(file_path, "a") as f:
        f.write(message + "\n")
    repo.index.add(["file.txt"])
    date = f"{timestamp} +0000"
    return repo.index.commit(message, author=ACTOR, committer=ACTOR,
                             author_date=date, commit_date=date)


def set_remote_branch(repo: git.Repo, branch: str, commit: git.Commit, remote: str = "origin") -> None:
    """Point refs/remotes/<remote>/<branch> at commit without touching the network"""
    if remote not in [r.name for r in repo.remotes]:
        repo.create_remote(remote, f"https://example.invalid/{remote}.git")
    git.Reference.create(repo, f"refs/remotes/{remote}/{branch}", commit, force=True)


@pytest.fixture
def git_helpers():
    return SimpleNamespace(make_commit=make_commit, set_remote_branch=set_remote_branch,
                           base_time=BASE_TIME)


@pytest.fixture
def make_repo():
    """
    Factory building a repository at path.

    commits: number of commits, one minute apart.
    remote_branch: origin branch to create, None for no remote at all.
    remote_commit: index of the commit the remote branch points at.

    Returns a namespace with repo, commits and path.
    """
    repos = []

    def _make(path, commits=1, remote_branch="master", remote_commit=-1):
        os.makedirs(path, exist_ok=True)
        repo = git.Repo.init(path)
        repos.append(repo)
        history = [make_commit(repo, f"commit {i}", BASE_TIME + i * 60) for i in range(commits)]
        if remote_branch is not None:
            if history:
                set_remote_branch(repo, remote_branch, history[remote_commit])
            else:
                repo.create_remote("origin", "https://example.invalid/origin.git")
        return SimpleNamespace(repo=repo, commits=history, path=str(path))

    yield _make

    for repo in repos:
        repo.close()
