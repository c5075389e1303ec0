"""Scan service: walk a directory tree and persist the candidate list."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..ingest.directory import scan_directory
from ..export.results import write_path_list
from ..utils.logging_helpers import format_summary

logger = logging.getLogger(__name__)


class ScanServiceResult:
    """Results from a scan operation."""

    def __init__(self):
        self.root = ""
        self.files: List[str] = []
        self.directories = 0
        self.skipped_directories = 0
        self.output_path: Optional[Path] = None
        self.duration_seconds = 0.0


def run_scan(
    config: Dict[str, Any],
    directory: Path | str,
    extensions: Optional[Sequence[str]] = None,
    output: Optional[Path | str] = None,
) -> ScanServiceResult:
    """Scan a directory and write the found paths to the scan list file.

    Args:
        config: Full configuration dict
        directory: Directory to scan
        extensions: Extension filter (overrides config scan.extensions)
        output: Output file (overrides config scan.output)

    Returns:
        ScanServiceResult with counts and the output path

    Raises:
        OSError: If the root directory cannot be read or the list cannot be written
    """
    scan_cfg = config.get('scan', {})
    logging_cfg = config.get('logging', {})
    if extensions is None:
        extensions = scan_cfg.get('extensions') or []
    output = output or scan_cfg.get('output') or 'scan_result.txt'

    scan = scan_directory(
        directory,
        extensions=extensions,
        ignore_patterns=scan_cfg.get('ignore_patterns') or [],
        follow_symlinks=bool(scan_cfg.get('follow_symlinks', False)),
        progress_enabled=bool(logging_cfg.get('progress_enabled', True)),
        progress_interval=int(logging_cfg.get('progress_interval', 1000)),
    )

    result = ScanServiceResult()
    result.root = scan.root
    result.files = scan.files
    result.directories = scan.directories
    result.skipped_directories = scan.skipped_directories
    result.duration_seconds = scan.duration_seconds

    logger.info(format_summary(
        found=len(scan.files),
        scanned=scan.directories,
        skipped=scan.skipped_directories,
        duration_seconds=scan.duration_seconds,
    ))

    result.output_path = write_path_list(scan.files, Path(output).resolve())
    logger.debug(f"Wrote {len(scan.files)} paths to {result.output_path}")
    return result


__all__ = ["ScanServiceResult", "run_scan"]
