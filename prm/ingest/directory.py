"""Breadth-first directory scan producing candidate path records."""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Deque, List, Sequence, Set
import logging
import time

from ..utils.fs import normalize_path, normalize_extensions, is_ignored
from ..utils.logging_helpers import log_progress

logger = logging.getLogger(__name__)


@dataclass
class DirectoryScanResult:
    """Results from a directory scan."""

    root: str = ""
    files: List[str] = field(default_factory=list)
    directories: int = 0
    skipped_directories: int = 0
    duration_seconds: float = 0.0


def scan_directory(
    top: Path | str,
    extensions: Sequence[str] = (),
    ignore_patterns: Sequence[str] = (),
    follow_symlinks: bool = False,
    progress_enabled: bool = False,
    progress_interval: int = 1000,
) -> DirectoryScanResult:
    """Collect absolute file paths below top, level by level.

    Args:
        top: Directory to scan
        extensions: Extensions to keep (".txt" or "txt"); empty keeps every file
        ignore_patterns: fnmatch patterns matched against entry names
        follow_symlinks: Descend into / collect symlinked entries
        progress_enabled: Log progress while walking
        progress_interval: Log progress every N directories

    Returns:
        DirectoryScanResult with files in discovery order

    Raises:
        FileNotFoundError: If top does not exist
        NotADirectoryError: If top is not a directory
        PermissionError: If top cannot be read
    """
    root = normalize_path(top)
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    exts = normalize_extensions(extensions)
    result = DirectoryScanResult(root=str(root))
    start = time.time()

    queue: Deque[Path] = deque([root])
    # Resolved directories already queued; stops symlink loops
    seen: Set[Path] = {root}
    while queue:
        current = queue.popleft()
        try:
            entries = sorted(current.iterdir(), key=lambda p: p.name)
        except OSError as e:
            if current == root:
                raise
            # Unreadable subdirectories are skipped, the walk goes on
            logger.debug(f"Skipping unreadable directory {current}: {e}")
            result.skipped_directories += 1
            continue

        result.directories += 1
        for entry in entries:
            if ignore_patterns and is_ignored(entry.name, ignore_patterns):
                continue
            try:
                if not follow_symlinks and entry.is_symlink():
                    continue
                if entry.is_dir():
                    target = entry.resolve()
                    if target in seen:
                        logger.debug(f"Skipping already visited directory {entry}")
                        continue
                    seen.add(target)
                    queue.append(entry)
                elif entry.is_file() and (not exts or entry.suffix.lower() in exts):
                    result.files.append(str(entry))
            except OSError:
                continue

        if progress_enabled and result.directories % max(1, progress_interval) == 0:
            log_progress(
                processed=result.directories,
                total=None,
                kept=len(result.files),
                rejected=result.skipped_directories,
                elapsed_seconds=time.time() - start,
                item_name="directories",
            )

    result.duration_seconds = time.time() - start
    return result


__all__ = ["DirectoryScanResult", "scan_directory"]
