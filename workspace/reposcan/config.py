"""
Configuration management for RepoScanner
"""
from dataclasses import dataclass


@dataclass
class Config:
    """Configuration settings for a repository scan"""
    scan_path: str
    report_format: str = 'text'
    num_threads: int = 1
    verbose: bool = False
    show_progress: bool = False
    color: bool = True

    # Entry whose presence marks a repository root (directory, or file for worktrees)
    repo_marker = '.git'

    # Directory names that are never descended into
    skip_dirs = {'node_modules'}

    # Remote tracking branches tried in order
    remote_name = 'origin'
    remote_branches = ('master', 'main')
