"""Deterministic ordering and top-K selection over scored candidates."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .curator import Candidate

DEFAULT_TOP_K = 20


@dataclass(frozen=True)
class RankedRecord:
    best_score: int
    second_best_score: int
    original_index: int
    text: str


def _rank_key(candidate: Candidate):
    # Exact (best, second) ties keep input order
    return (-candidate.best_score, -candidate.second_best_score, candidate.original_index)


def rank_candidates(
    candidates: Iterable[Candidate],
    records: Sequence[str],
    top_k: int = DEFAULT_TOP_K,
) -> List[RankedRecord]:
    """Order scored candidates and keep the first top_k.

    Ordering is best score descending, then second best descending, then
    original input position ascending, so the output does not depend on the
    order candidates were scored in.

    Args:
        candidates: Scored candidates, in any order
        records: Unmodified source records, indexed by original_index
        top_k: Maximum number of records to return

    Returns:
        Up to top_k RankedRecord entries carrying the unmodified record text

    Raises:
        ValueError: If top_k is smaller than 1
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")

    ordered = sorted(candidates, key=_rank_key)
    return [
        RankedRecord(
            best_score=c.best_score,
            second_best_score=c.second_best_score,
            original_index=c.original_index,
            text=records[c.original_index],
        )
        for c in ordered[:top_k]
    ]


__all__ = ["DEFAULT_TOP_K", "RankedRecord", "rank_candidates"]
