"""
Utility functions for RepoScanner
"""
import os
from pathlib import Path


def has_repo_marker(path: str, marker: str = '.git') -> bool:
    """Check if a directory is a repository root (marker may be a dir or a file)"""
    return os.path.exists(os.path.join(path, marker))


def contains_repo(path: str, marker: str = '.git') -> bool:
    """
    Check if the subtree rooted at path holds a repository root at any depth.

    Directories are visited in sorted order and the search stops at the first
    unreadable one, answering False even if a repository comes later.
    """
    errors = []
    for root, dirs, _ in os.walk(path, onerror=errors.append):
        if errors:
            return False
        if has_repo_marker(root, marker):
            return True
        dirs.sort()
    return False


def validate_path(path: str) -> bool:
    """Validate if path exists and is a directory"""
    try:
        path_obj = Path(path)
        return path_obj.exists() and path_obj.is_dir()
    except OSError:
        return False
