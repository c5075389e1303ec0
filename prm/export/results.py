"""Writers for scan lists and ranking results."""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Sequence

from ..match.ranker import RankedRecord

SCAN_LIST_SEPARATOR = "\r\n"


def format_record(record: RankedRecord) -> str:
    """Render a ranked record as "best:second<TAB>text"."""
    return f"{record.best_score}:{record.second_best_score}\t{record.text}"


def write_ranking(records: Iterable[RankedRecord], path: Path | str) -> Path:
    """Write one formatted line per ranked record.

    Returns:
        Path of the written file
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open('w', encoding='utf-8', errors='surrogateescape', newline='') as fh:
        for record in records:
            fh.write(format_record(record) + "\n")
    return out


def write_path_list(paths: Sequence[str], path: Path | str) -> Path:
    """Write scanned paths joined by CRLF, the format load_records reads back."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open('w', encoding='utf-8', errors='surrogateescape', newline='') as fh:
        fh.write(SCAN_LIST_SEPARATOR.join(paths))
    return out


__all__ = ["SCAN_LIST_SEPARATOR", "format_record", "write_ranking", "write_path_list"]
