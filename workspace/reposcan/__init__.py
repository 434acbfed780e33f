"""
RepoScanner - reports the sync status of every git repository under a directory tree
"""

__version__ = "1.0.0"
