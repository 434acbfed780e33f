"""
Core scanning functionality for RepoScanner
"""
import os
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Tuple, Union

from tqdm import tqdm

from .config import Config
from .errors import TraversalError
from .inspector import RepoInspector
from .models import Decision, RepoStatus, ScanResult
from .utils import contains_repo, has_repo_marker

# A walk slot is either a finished result or a repository path awaiting inspection
Slot = Union[ScanResult, str]


class RepoScanner:
    """Walks a directory tree and classifies every repository root in it"""

    def __init__(self, config: Config, inspector: Optional[RepoInspector] = None):
        self.config = config
        self.inspector = inspector or RepoInspector(config)

    def scan(self) -> List[ScanResult]:
        """
        Scan config.scan_path and return results in traversal order.

        Raises TraversalError if any directory of the walk cannot be read; no
        partial result list is returned in that case.
        """
        root = os.path.abspath(self.config.scan_path)
        self._log(f"🔍 Scanning path: {root}")

        slots: List[Slot] = []
        self._visit(root, os.path.basename(root), 0, slots)

        pending = [(i, slot) for i, slot in enumerate(slots) if not isinstance(slot, ScanResult)]
        self._log(f"📁 Found {len(pending)} repositories")
        self._inspect_all(pending, slots)

        results = [slot for slot in slots if isinstance(slot, ScanResult)]
        for result in results:
            if result.detail and result.status is RepoStatus.ERROR:
                self._log(f"⚠️  {result.path}: {result.detail}")
            elif result.detail:
                self._log(f"   {result.path}: {result.detail}")
        self._log(f"🎯 Scan complete! {len(results)} directories classified")
        return results

    def decide(self, path: str, name: str) -> Decision:
        """Traversal decision for a single visited directory"""
        if name in self.config.skip_dirs:
            return Decision.SKIP
        if has_repo_marker(path, self.config.repo_marker):
            return Decision.CLASSIFY
        return Decision.DESCEND

    def _visit(self, path: str, name: str, depth: int, slots: List[Slot]) -> None:
        # Only direct children of the root can be reported as holding no repository.
        # Directories between such a child and a deeper repository get no result.
        if depth == 1 and not contains_repo(path, self.config.repo_marker):
            slots.append(ScanResult(path, RepoStatus.NO_REPO))

        decision = self.decide(path, name)
        if decision is Decision.CLASSIFY:
            slots.append(path)
            return
        if decision is Decision.SKIP:
            return

        for child_path, child_name in self._list_subdirs(path):
            self._visit(child_path, child_name, depth + 1, slots)

    def _list_subdirs(self, path: str) -> List[Tuple[str, str]]:
        """Sorted (path, name) pairs of real subdirectories; symlinks are not followed"""
        try:
            with os.scandir(path) as it:
                entries = [e for e in it if e.is_dir(follow_symlinks=False)]
        except OSError as e:
            raise TraversalError(path, e) from e
        entries.sort(key=lambda e: e.name)
        return [(e.path, e.name) for e in entries]

    def _inspect_all(self, pending: List[Tuple[int, str]], slots: List[Slot]) -> None:
        """Replace every pending repository slot with its classification"""
        with tqdm(total=len(pending), desc="Inspecting repositories", unit="repo",
                  file=sys.stderr, disable=not self.config.show_progress) as pbar:
            if self.config.num_threads <= 1:
                for i, path in pending:
                    slots[i] = self.inspector.inspect(path)
                    pbar.update(1)
                return

            with ThreadPoolExecutor(max_workers=self.config.num_threads) as executor:
                futures = {executor.submit(self.inspector.inspect, path): i for i, path in pending}
                for future in as_completed(futures):
                    # Results go back into their walk slot, so order never depends on timing
                    slots[futures[future]] = future.result()
                    pbar.update(1)

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message, file=sys.stderr)
