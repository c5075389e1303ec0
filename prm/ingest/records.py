"""Loading candidate records from a scan list file."""

from __future__ import annotations
from pathlib import Path
from typing import List
import logging

from ..utils.fs import normalize_path

logger = logging.getLogger(__name__)


def load_records(path: Path | str) -> List[str]:
    """Read one record per line from a text file.

    Both "\\r\\n" (the scan writer's separator) and "\\n" line endings are
    accepted. Empty lines are kept so that record i is always line i.

    Raises:
        OSError: If the file is missing or unreadable
    """
    file = normalize_path(path)
    text = file.read_text(encoding='utf-8', errors='surrogateescape')
    records = [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]
    if records and records[-1] == '':
        records.pop()
    logger.debug(f"Loaded {len(records)} records from {file}")
    return records


__all__ = ["load_records"]
