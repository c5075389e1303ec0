"""Candidate curation for the ranking engine.

Curation is a cheap structural pre-filter run before the aligner. It rejects
records that cannot possibly contain the pattern and trims the survivors to
the span the aligner actually needs, which keeps the score matrices small.
Rejections are silent: a record that fails curation is simply not a candidate.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .matcher import Matcher


@dataclass
class Candidate:
    """A record admitted by curation.

    working_text is folded and trimmed for scoring only; output always goes
    back to the source record through original_index.
    """
    original_index: int
    working_text: str
    best_score: int = 0
    second_best_score: int = 0


def contains_subsequence(pattern: str, text: str) -> bool:
    """Check that every pattern character occurs in text, in order.

    Each search starts right after the previous match.
    """
    pos = 0
    for ch in pattern:
        idx = text.find(ch, pos)
        if idx == -1:
            return False
        pos = idx + 1
    return True


def curate_record(matcher: Matcher, index: int, text: str) -> Optional[Candidate]:
    """Admit or reject a single record.

    Args:
        matcher: Matcher built for the current pattern
        index: Position of the record in the input sequence
        text: Unmodified record text

    Returns:
        Candidate with the trimmed working text, or None when rejected
    """
    folded = matcher.fold(text)

    first_idx = folded.find(matcher.first_symbol)
    if first_idx == -1:
        return None
    last_idx = folded.rfind(matcher.last_symbol)
    if last_idx == -1:
        return None
    if last_idx - first_idx + 1 < len(matcher):
        return None

    # Keep one character left of the first match so the aligner can see a
    # separator in front of it; clamp at the start of the string.
    start = max(first_idx - 1, 0)
    working = folded[start:last_idx + 1]

    if not contains_subsequence(matcher.pattern, working):
        return None
    return Candidate(original_index=index, working_text=working)


def curate_records(matcher: Matcher, records: Sequence[str]) -> List[Candidate]:
    """Curate a whole record list, preserving input order."""
    curated: List[Candidate] = []
    for index, text in enumerate(records):
        candidate = curate_record(matcher, index, text)
        if candidate is not None:
            curated.append(candidate)
    return curated


__all__ = ["Candidate", "contains_subsequence", "curate_record", "curate_records"]
