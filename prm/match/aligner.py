from __future__ import annotations
"""Local-alignment scorer for curated candidates.

Fills a (|pattern|+1) x (|text|+1) score matrix, pattern on rows and working
text on columns, row 0 and column 0 held at zero. Matching cells earn the
table's match bonus plus separator and run bonuses; mismatching cells take the
best gap move floored at zero, so a poor path restarts instead of dragging a
penalty along.

The result is read from two watermarks kept over every match cell of the
fill, not from the bottom-right cell: the best alignment may end anywhere.

Scoring is pure. The same (pattern, text) pair always yields the same pair
of scores, which is what lets the engine fan candidates out to workers.
"""

from typing import List, Optional, Tuple

from .curator import Candidate
from .matcher import Matcher


class ScoreMatrix:
    """Zero-initialized 2D score table over a flat buffer.

    Every access goes through _offset(), which rejects coordinates outside
    the table instead of wrapping around like raw list indexing would.
    """

    __slots__ = ("rows", "cols", "_cells")

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Score matrix dimensions must be non-negative, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: List[int] = [0] * (rows * cols)

    def _offset(self, y: int, x: int) -> int:
        if not (0 <= y < self.rows and 0 <= x < self.cols):
            raise IndexError(f"Cell ({y}, {x}) outside {self.rows}x{self.cols} score matrix")
        return y * self.cols + x

    def __getitem__(self, key: Tuple[int, int]) -> int:
        return self._cells[self._offset(*key)]

    def __setitem__(self, key: Tuple[int, int], value: int) -> None:
        self._cells[self._offset(*key)] = value

    def reset(self, rows: Optional[int] = None, cols: Optional[int] = None) -> None:
        """Zero the table, optionally resizing it for reuse."""
        rows = self.rows if rows is None else rows
        cols = self.cols if cols is None else cols
        if rows < 0 or cols < 0:
            raise ValueError(f"Score matrix dimensions must be non-negative, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells = [0] * (rows * cols)


def align(matcher: Matcher, working_text: str, matrix: Optional[ScoreMatrix] = None) -> Tuple[int, int]:
    """Score one working text against the matcher's pattern.

    Args:
        matcher: Matcher built for the current pattern
        working_text: Curated (folded, trimmed) candidate text
        matrix: Optional matrix to reuse; it is reset before the fill

    Returns:
        (best, second_best) match-cell scores, second_best being the highest
        score strictly below best (0 when there is none)
    """
    pattern = matcher.pattern
    table = matcher.table
    separators = table.separators
    m = len(pattern)
    n = len(working_text)

    if matrix is None:
        matrix = ScoreMatrix(m + 1, n + 1)
    else:
        matrix.reset(m + 1, n + 1)

    best = 0
    second = 0
    for y in range(1, m + 1):
        cp = pattern[y - 1]
        for x in range(1, n + 1):
            ci = working_text[x - 1]
            top_left = matrix[y - 1, x - 1]

            if cp == ci:
                score = top_left + table.match_bonus
                if ci in separators:
                    score += table.position_bonus
                if x >= 2 and working_text[x - 2] in separators:
                    score += table.position_bonus
                if top_left >= table.match_bonus:
                    score += table.consecutive_bonus

                if score > best:
                    second = best
                    best = score
                elif second < score < best:
                    second = score
            else:
                score = max(
                    matrix[y - 1, x] + table.gap_down,
                    matrix[y, x - 1] + table.gap_right,
                    top_left + table.gap_cross,
                    0,
                )
            matrix[y, x] = score

    return best, second


def score_candidate(matcher: Matcher, candidate: Candidate) -> Candidate:
    """Fill in a candidate's scores in place and return it."""
    candidate.best_score, candidate.second_best_score = align(matcher, candidate.working_text)
    return candidate


__all__ = ["ScoreMatrix", "align", "score_candidate"]
