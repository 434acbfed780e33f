"""
Repository inspection for RepoScanner

Classifies a single repository root by comparing the committer timestamp of
the checked out commit with the one of the remote tracking branch. Nothing is
fetched and nothing is written to the repository.
"""
import configparser
import os
from typing import Optional, Tuple

from git import Repo, SymbolicReference
from git.exc import GitError, ODBError

from .config import Config
from .errors import (
    CommitLookupError,
    InspectionError,
    NoCommitsCondition,
    NoRemoteCondition,
    RefResolutionError,
    RepoOpenError,
)
from .models import RepoStatus, ScanResult

# Everything GitPython and gitdb raise for missing or damaged repository data
GIT_ERRORS = (GitError, ODBError, ValueError, OSError)


class RepoInspector:
    """Determines the sync status of a git working copy"""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config(scan_path='.')

    def classify(self, path: str) -> RepoStatus:
        """Return the status of the repository rooted at path"""
        return self.inspect(path).status

    def inspect(self, path: str) -> ScanResult:
        """Classify a repository and keep the underlying cause as detail"""
        try:
            status, detail = self._classify(path)
        except InspectionError as e:
            return ScanResult(path, e.status, str(e))
        return ScanResult(path, status, detail)

    def _classify(self, path: str) -> Tuple[RepoStatus, str]:
        with self._open(path) as repo:
            self._resolve_head(repo)
            self._check_remotes(repo)
            local_sha = self._resolve_local_ref(repo)
            remote_ref, remote_sha = self._resolve_remote_ref(repo)
            local_time = self._committer_time(repo, local_sha)
            remote_time = self._committer_time(repo, remote_sha)

        # Timestamps, not hashes: equal commit times count as synced
        if local_time > remote_time:
            return RepoStatus.NOT_SYNCED, f"local commit is newer than {remote_ref}"
        if local_time < remote_time:
            return RepoStatus.NOT_SYNCED, f"local commit is older than {remote_ref}"
        return RepoStatus.SYNCED, ''

    def _open(self, path: str) -> Repo:
        try:
            repo = Repo(path)
        except GIT_ERRORS as e:
            raise RepoOpenError(f"cannot open repository: {e!r}") from e
        # A .git file may point at a git directory that no longer exists
        if not os.path.isdir(repo.git_dir):
            repo.close()
            raise RepoOpenError(f"cannot open repository: {repo.git_dir} is not a directory")
        return repo

    def _resolve_head(self, repo: Repo) -> str:
        try:
            return SymbolicReference.dereference_recursive(repo, 'HEAD')
        except GIT_ERRORS as e:
            raise NoCommitsCondition(f"HEAD does not resolve: {e}") from e

    def _check_remotes(self, repo: Repo) -> None:
        try:
            remotes = repo.remotes
        except GIT_ERRORS + (configparser.Error,) as e:
            raise NoRemoteCondition(f"cannot list remotes: {e}") from e
        if not remotes:
            raise NoRemoteCondition("no remotes configured")

    def _resolve_local_ref(self, repo: Repo) -> str:
        head = repo.head
        try:
            ref_path = 'HEAD' if head.is_detached else head.reference.path
            return SymbolicReference.dereference_recursive(repo, ref_path)
        except GIT_ERRORS + (TypeError,) as e:
            raise RefResolutionError(f"cannot resolve local reference: {e}") from e

    def _resolve_remote_ref(self, repo: Repo) -> Tuple[str, str]:
        """Return the first remote tracking branch that resolves, with its hexsha"""
        tried = []
        for branch in self.config.remote_branches:
            name = f"{self.config.remote_name}/{branch}"
            try:
                return name, SymbolicReference.dereference_recursive(repo, f"refs/remotes/{name}")
            except GIT_ERRORS:
                tried.append(name)
        raise RefResolutionError(f"no remote tracking branch found (tried {', '.join(tried)})")

    def _committer_time(self, repo: Repo, hexsha: str) -> int:
        try:
            obj = repo.rev_parse(hexsha)
        except GIT_ERRORS as e:
            raise CommitLookupError(f"cannot read commit {hexsha}: {e}") from e
        # References are not peeled: a tag object where a commit is expected is an error
        if obj.type != 'commit':
            raise CommitLookupError(f"cannot read commit {hexsha}: object is a {obj.type}")
        try:
            return obj.committed_date
        except GIT_ERRORS as e:
            raise CommitLookupError(f"cannot read commit {hexsha}: {e}") from e
