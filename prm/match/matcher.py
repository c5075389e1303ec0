"""Pattern matcher: normalized pattern plus the scoring table it selects.

A Matcher is built once per ranking run and never mutated afterwards, so the
same instance can be shared by every scoring worker.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

# --- Matcher kinds ---------------------------------------------------------

class MatcherKind(str, Enum):
    PATH = "path"

# --- Scoring tables --------------------------------------------------------

@dataclass(frozen=True)
class ScoringTable:
    """Bonuses and penalties used by the aligner.

    Worked example (pattern "abc" vs working text "xabc"):
       - 'a' matches at column 2: 0 + match (5) = 5
       - 'b' follows diagonally: 5 + match (5) + consecutive (2) = 12
       - 'c' follows diagonally: 12 + match (5) + consecutive (2) = 19
       => best 19, second best 12
    """
    match_bonus: int = 5
    position_bonus: int = 2  # match on, or right after, a separator
    consecutive_bonus: int = 2
    gap_down: int = -2  # skip a pattern character
    gap_right: int = -2  # skip a candidate character
    gap_cross: int = -4  # substitution, skip + skip
    separators: Tuple[str, ...] = ("/", "\\")


SCORING_TABLES: Dict[MatcherKind, ScoringTable] = {
    MatcherKind.PATH: ScoringTable(),
}

# --- Matcher ---------------------------------------------------------------

@dataclass(frozen=True)
class Matcher:
    raw_pattern: str
    pattern: str
    case_sensitive: bool
    kind: MatcherKind
    table: ScoringTable

    @classmethod
    def build(cls, pattern: str, kind: MatcherKind | str = MatcherKind.PATH) -> Matcher:
        """Normalize a pattern and resolve its scoring table.

        Case sensitivity switches on as soon as the pattern holds a single
        uppercase character; otherwise pattern and candidates are lowercased.

        Raises:
            ValueError: If the pattern is empty or the kind is unknown.
        """
        if not pattern:
            raise ValueError("Matching pattern must contain at least one character")
        try:
            kind = MatcherKind(kind)
        except ValueError:
            known = ", ".join(k.value for k in MatcherKind)
            raise ValueError(f"Unknown matcher kind '{kind}' (known: {known})") from None

        case_sensitive = any(ch.isupper() for ch in pattern)
        normalized = pattern if case_sensitive else pattern.lower()
        return cls(
            raw_pattern=pattern,
            pattern=normalized,
            case_sensitive=case_sensitive,
            kind=kind,
            table=SCORING_TABLES[kind],
        )

    @property
    def first_symbol(self) -> str:
        return self.pattern[0]

    @property
    def last_symbol(self) -> str:
        return self.pattern[-1]

    def fold(self, text: str) -> str:
        """Apply the matcher's case folding to candidate text."""
        if self.case_sensitive:
            return text
        return text.lower()

    def __len__(self) -> int:
        return len(self.pattern)


__all__ = ["MatcherKind", "ScoringTable", "SCORING_TABLES", "Matcher"]
