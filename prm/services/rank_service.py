"""Rank service: load a record list and rank it against a pattern.

Validation happens up front so that a bad pattern never touches the input
file, and an unreadable input file aborts before anything is written.
"""

from __future__ import annotations
import time
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..match.matcher import Matcher
from ..match.engine import RankingEngine
from ..match.ranker import RankedRecord
from ..ingest.records import load_records
from ..export.results import write_ranking

logger = logging.getLogger(__name__)


class RankServiceResult:
    """Results from a rank operation."""

    def __init__(self):
        self.records_total = 0
        self.curated = 0
        self.scored = 0
        self.timed_out = False
        self.ranked: List[RankedRecord] = []
        self.output_path: Optional[Path] = None
        self.duration_seconds = 0.0


def validate_pattern(pattern: str, min_length: int = 1) -> None:
    """Reject patterns the ranking engine should never see.

    Raises:
        ValueError: If the pattern is empty or shorter than min_length
    """
    if not pattern:
        raise ValueError("Matching pattern is empty")
    if len(pattern) < min_length:
        raise ValueError(
            f"Matching pattern is too short: {len(pattern)} < {min_length} characters"
        )


def run_ranking(
    config: Dict[str, Any],
    input_file: Path | str,
    pattern: str,
    top_k: Optional[int] = None,
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
    output: Optional[Path | str] = None,
) -> RankServiceResult:
    """Rank the records of input_file against pattern.

    Args:
        config: Full configuration dict
        input_file: Record list, one candidate per line
        pattern: Fuzzy pattern
        top_k: Records to keep (overrides config rank.top_k)
        workers: Scoring threads (overrides config rank.workers)
        timeout: Scoring timeout in seconds (overrides config rank.timeout)
        output: Result file (overrides config rank.output); None skips writing

    Returns:
        RankServiceResult with counts and ranked records

    Raises:
        ValueError: Invalid pattern or ranking parameters
        OSError: Input file missing/unreadable or output not writable
    """
    rank_cfg = config.get('rank', {})
    logging_cfg = config.get('logging', {})

    validate_pattern(pattern, int(rank_cfg.get('min_pattern_length', 1) or 1))
    matcher = Matcher.build(pattern, rank_cfg.get('matcher_kind', 'path'))
    engine = RankingEngine(
        matcher,
        top_k=int(top_k if top_k is not None else rank_cfg.get('top_k', 20)),
        workers=int(workers if workers is not None else rank_cfg.get('workers', 1)),
        timeout=timeout if timeout is not None else rank_cfg.get('timeout'),
        progress_enabled=bool(logging_cfg.get('progress_enabled', True)),
        progress_interval=int(logging_cfg.get('progress_interval', 1000)),
    )
    output = output or rank_cfg.get('output')

    start = time.time()
    records = load_records(input_file)
    logger.info(f"{len(records)} records loaded")

    engine_result = engine.rank(records)

    result = RankServiceResult()
    result.records_total = engine_result.records_total
    result.curated = engine_result.curated
    result.scored = engine_result.scored
    result.timed_out = engine_result.timed_out
    result.ranked = engine_result.ranked

    logger.info(f"{result.records_total} records curated to {result.curated}")

    if output:
        result.output_path = write_ranking(result.ranked, Path(output).resolve())
        logger.debug(f"Wrote {len(result.ranked)} ranked records to {result.output_path}")

    result.duration_seconds = time.time() - start
    logger.info(f"{result.duration_seconds * 1000:.0f} milliseconds elapsed")
    return result


__all__ = ["RankServiceResult", "validate_pattern", "run_ranking"]
