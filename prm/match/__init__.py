"""Matching package: pattern matcher, curation, alignment scoring, ranking.

The pipeline runs strictly forward: records -> curator -> aligner -> ranker.
`engine.RankingEngine` drives the whole pass.
"""

from .matcher import MatcherKind, ScoringTable, SCORING_TABLES, Matcher
from .curator import Candidate, contains_subsequence, curate_record, curate_records
from .aligner import ScoreMatrix, align, score_candidate
from .ranker import DEFAULT_TOP_K, RankedRecord, rank_candidates
from .engine import EngineResult, RankingEngine

__all__ = [
    "MatcherKind",
    "ScoringTable",
    "SCORING_TABLES",
    "Matcher",
    "Candidate",
    "contains_subsequence",
    "curate_record",
    "curate_records",
    "ScoreMatrix",
    "align",
    "score_candidate",
    "DEFAULT_TOP_K",
    "RankedRecord",
    "rank_candidates",
    "EngineResult",
    "RankingEngine",
]
