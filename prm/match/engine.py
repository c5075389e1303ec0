"""Ranking engine: curate, score, rank.

This module wires the matcher, curator, aligner and ranker into one pass over
a record list. Scoring can be fanned out across a thread pool; every scoring
result carries its candidate's original_index, so completion order never
reaches the ranker, and the ranker only runs once all scoring has finished.
"""

from __future__ import annotations
import time
import logging
from concurrent.futures import ThreadPoolExecutor, Future, wait, FIRST_COMPLETED
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .matcher import Matcher
from .curator import Candidate, curate_records
from .aligner import align
from .ranker import DEFAULT_TOP_K, RankedRecord, rank_candidates
from ..utils.logging_helpers import log_progress

logger = logging.getLogger(__name__)

# Tagged scoring result: (original_index, best, second_best)
ScoreResult = Tuple[int, int, int]


@dataclass
class EngineResult:
    """Results from one ranking pass."""

    records_total: int = 0
    curated: int = 0
    scored: int = 0
    timed_out: bool = False
    duration_seconds: float = 0.0
    ranked: List[RankedRecord] = field(default_factory=list)


def _score_one(matcher: Matcher, original_index: int, working_text: str) -> ScoreResult:
    best, second = align(matcher, working_text)
    return original_index, best, second


class RankingEngine:
    """Rank a record list against one matcher.

    Example usage:
        engine = RankingEngine(Matcher.build("abc"), top_k=20, workers=4)
        result = engine.rank(records)
        for record in result.ranked:
            print(record.best_score, record.text)
    """

    def __init__(
        self,
        matcher: Matcher,
        top_k: int = DEFAULT_TOP_K,
        workers: int = 1,
        timeout: Optional[float] = None,
        progress_enabled: bool = True,
        progress_interval: int = 1000,
    ):
        """Initialize the ranking engine.

        Args:
            matcher: Matcher built for the current pattern
            top_k: Number of records to keep after ranking
            workers: Scoring threads; 1 scores inline
            timeout: Stop dispatching scoring work after this many seconds
                (None or 0 disables)
            progress_enabled: Enable progress logging
            progress_interval: Log progress every N scored candidates
        """
        if top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {top_k}")
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.matcher = matcher
        self.top_k = top_k
        self.workers = workers
        self.timeout = timeout or None
        self.progress_enabled = progress_enabled
        self.progress_interval = max(1, progress_interval)

    def rank(self, records: Sequence[str]) -> EngineResult:
        """Run curation, scoring and ranking over records.

        Args:
            records: Unmodified candidate records; record i gets original_index i

        Returns:
            EngineResult with counts and the ranked top-K records
        """
        result = EngineResult(records_total=len(records))
        start = time.time()
        deadline = time.monotonic() + self.timeout if self.timeout else None

        candidates = curate_records(self.matcher, records)
        result.curated = len(candidates)
        logger.debug(f"{len(records)} records curated to {len(candidates)}")

        if self.workers > 1 and len(candidates) > 1:
            scores, result.timed_out = self._score_parallel(candidates, deadline)
        else:
            scores, result.timed_out = self._score_sequential(candidates, deadline)

        # Only fully scored candidates reach the ranker
        by_index: Dict[int, Candidate] = {c.original_index: c for c in candidates}
        scored: List[Candidate] = []
        for original_index, best, second in scores:
            candidate = by_index[original_index]
            candidate.best_score = best
            candidate.second_best_score = second
            scored.append(candidate)
        result.scored = len(scored)

        if result.timed_out:
            logger.warning(
                f"Scoring timed out after {self.timeout}s: "
                f"{result.scored}/{result.curated} candidates scored, the rest were dropped"
            )

        result.ranked = rank_candidates(scored, records, top_k=self.top_k)
        result.duration_seconds = time.time() - start
        return result

    def _expired(self, deadline: Optional[float]) -> bool:
        return deadline is not None and time.monotonic() >= deadline

    def _log_progress(self, processed: int, total: int, start: float) -> None:
        if self.progress_enabled and processed % self.progress_interval == 0:
            log_progress(
                processed=processed,
                total=total,
                elapsed_seconds=time.time() - start,
                item_name="candidates",
            )

    def _score_sequential(
        self, candidates: List[Candidate], deadline: Optional[float]
    ) -> Tuple[List[ScoreResult], bool]:
        scores: List[ScoreResult] = []
        start = time.time()
        for candidate in candidates:
            if self._expired(deadline):
                return scores, True
            scores.append(_score_one(self.matcher, candidate.original_index, candidate.working_text))
            self._log_progress(len(scores), len(candidates), start)
        return scores, False

    def _score_parallel(
        self, candidates: List[Candidate], deadline: Optional[float]
    ) -> Tuple[List[ScoreResult], bool]:
        """Fan scoring out over a thread pool with a bounded in-flight window."""
        scores: List[ScoreResult] = []
        window = self.workers * 4
        pending: Set[Future] = set()
        timed_out = False
        start = time.time()

        def collect(done: Set[Future]) -> None:
            for future in done:
                if future.cancelled():
                    continue
                scores.append(future.result())
                self._log_progress(len(scores), len(candidates), start)

        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix="prm-score") as executor:
            for candidate in candidates:
                if self._expired(deadline):
                    timed_out = True
                    break
                while len(pending) >= window:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    collect(done)
                pending.add(executor.submit(
                    _score_one, self.matcher, candidate.original_index, candidate.working_text
                ))

            if timed_out:
                # Queued work is dropped; in-flight work finishes and is kept
                for future in pending:
                    future.cancel()

            # Barrier: nothing is ranked before every dispatched future settles
            done, _ = wait(pending)
            collect(done)

        return scores, timed_out


__all__ = ["EngineResult", "RankingEngine"]
