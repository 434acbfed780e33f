"""
Data models for RepoScanner
"""
from dataclasses import dataclass
from enum import Enum


class RepoStatus(str, Enum):
    """Classification of a scanned directory; the value is the display label"""
    SYNCED = 'Synced'
    NOT_SYNCED = 'Not Synced'
    NO_REMOTE = 'No Remote'
    NO_COMMITS = 'No Commits'
    ERROR = 'Error'
    NO_REPO = 'No Repo'

    def __str__(self) -> str:
        return self.value


class Decision(Enum):
    """What the walker does with a visited directory"""
    DESCEND = 'descend'
    SKIP = 'skip'
    CLASSIFY = 'classify'


@dataclass(frozen=True)
class ScanResult:
    """Represents one classified directory"""
    path: str
    status: RepoStatus
    detail: str = ''  # underlying cause, only shown in verbose mode

    def line(self) -> str:
        return f"{self.path}: {self.status.value}"
