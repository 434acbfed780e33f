"""
Exceptions raised while scanning

TraversalError is fatal and aborts the whole scan. The InspectionError family
never leaves the inspector: each one is turned into the RepoStatus it carries.
"""
from .models import RepoStatus


class TraversalError(Exception):
    """A directory in the scanned tree could not be read"""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"cannot read {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class InspectionError(Exception):
    """A repository could not be fully inspected"""
    status = RepoStatus.ERROR


class RepoOpenError(InspectionError):
    pass


class NoCommitsCondition(InspectionError):
    status = RepoStatus.NO_COMMITS


class NoRemoteCondition(InspectionError):
    status = RepoStatus.NO_REMOTE


class RefResolutionError(InspectionError):
    pass


class CommitLookupError(InspectionError):
    pass
