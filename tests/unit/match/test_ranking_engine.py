"""Unit tests for RankingEngine."""

import pytest
from prm.match import engine as engine_module
from prm.match.engine import RankingEngine
from prm.match.matcher import Matcher


class FakeClock:
    """Monotonic clock that jumps far ahead after a few readings."""

    def __init__(self, readings_before_expiry=1):
        self.calls = 0
        self.readings_before_expiry = readings_before_expiry

    def __call__(self):
        self.calls += 1
        return 0.0 if self.calls <= self.readings_before_expiry else 1000.0


@pytest.fixture
def records():
    return [
        "/src/none.md",
        "/src/xabc.txt",
        "/src/abc.py",
        "/SRC/ABC.PY",
        "/src/a/b/c.txt",
    ]


def test_rank_end_to_end(records):
    engine = RankingEngine(Matcher.build("abc"), progress_enabled=False)

    result = engine.rank(records)

    assert result.records_total == 5
    assert result.curated == 4
    assert result.scored == 4
    assert result.timed_out is False
    # "/abc" and "/a/b/c" both score 7, 14, 21; ties keep input order
    assert [(r.best_score, r.second_best_score, r.text) for r in result.ranked] == [
        (21, 14, "/src/abc.py"),
        (21, 14, "/SRC/ABC.PY"),
        (21, 14, "/src/a/b/c.txt"),
        (19, 12, "/src/xabc.txt"),
    ]


def test_case_sensitive_pattern_filters(records):
    engine = RankingEngine(Matcher.build("ABC"), progress_enabled=False)

    result = engine.rank(records)

    assert [r.text for r in result.ranked] == ["/SRC/ABC.PY"]


def test_no_candidates():
    engine = RankingEngine(Matcher.build("xyz"), progress_enabled=False)

    result = engine.rank(["abc", "def"])

    assert result.curated == 0
    assert result.ranked == []


def test_top_k_boundary():
    records = [f"/p/abc{i}" for i in range(25)]
    engine = RankingEngine(Matcher.build("abc"), top_k=20, progress_enabled=False)

    assert len(engine.rank(records).ranked) == 20
    assert len(engine.rank(records[:7]).ranked) == 7


def test_parallel_matches_sequential():
    records = [f"/root/{d}/{name}" for d in ("abc", "a_b_c", "cab", "zz") for name in ("abc.py", "xabc", "c", "a/b/c")]
    matcher = Matcher.build("abc")

    sequential = RankingEngine(matcher, workers=1, progress_enabled=False).rank(records)
    parallel = RankingEngine(matcher, workers=4, progress_enabled=False).rank(records)

    assert parallel.curated == sequential.curated
    assert parallel.scored == sequential.scored
    assert parallel.ranked == sequential.ranked


def test_sequential_timeout_drops_unscored(monkeypatch, records):
    monkeypatch.setattr(engine_module.time, "monotonic", FakeClock())
    engine = RankingEngine(Matcher.build("abc"), timeout=5, progress_enabled=False)

    result = engine.rank(records)

    assert result.timed_out is True
    assert result.curated == 4
    assert result.scored == 0
    assert result.ranked == []


def test_parallel_timeout_stops_dispatching(monkeypatch, records):
    monkeypatch.setattr(engine_module.time, "monotonic", FakeClock())
    engine = RankingEngine(Matcher.build("abc"), workers=2, timeout=5, progress_enabled=False)

    result = engine.rank(records)

    assert result.timed_out is True
    assert result.scored == 0
    assert result.ranked == []


def test_sequential_timeout_keeps_scored_prefix(monkeypatch, records):
    # One reading sets the deadline, two more let two candidates through
    monkeypatch.setattr(engine_module.time, "monotonic", FakeClock(readings_before_expiry=3))
    engine = RankingEngine(Matcher.build("abc"), timeout=5, progress_enabled=False)

    result = engine.rank(records)

    assert result.timed_out is True
    assert 1 <= result.scored <= result.curated - 1
    assert result.scored == 2
    assert [(r.best_score, r.second_best_score, r.text) for r in result.ranked] == [
        (21, 14, "/src/abc.py"),
        (19, 12, "/src/xabc.txt"),
    ]


def test_parallel_timeout_keeps_full_scores(monkeypatch, records):
    full = {
        r.original_index: (r.best_score, r.second_best_score)
        for r in RankingEngine(Matcher.build("abc"), progress_enabled=False).rank(records).ranked
    }
    monkeypatch.setattr(engine_module.time, "monotonic", FakeClock(readings_before_expiry=3))
    engine = RankingEngine(Matcher.build("abc"), workers=2, timeout=5, progress_enabled=False)

    result = engine.rank(records)

    assert result.timed_out is True
    # Two were dispatched; each is either cancelled while queued or kept whole
    assert result.scored <= 2
    assert len(result.ranked) == result.scored
    for r in result.ranked:
        assert (r.best_score, r.second_best_score) == full[r.original_index]


def test_zero_timeout_means_disabled(records):
    engine = RankingEngine(Matcher.build("abc"), timeout=0, progress_enabled=False)

    assert engine.timeout is None
    assert engine.rank(records).timed_out is False


def test_progress_logging(caplog):
    records = [f"/p/abc{i}" for i in range(4)]
    engine = RankingEngine(Matcher.build("abc"), progress_enabled=True, progress_interval=2)

    with caplog.at_level("INFO", logger="prm.utils.logging_helpers"):
        engine.rank(records)

    assert sum("candidates" in rec.getMessage() for rec in caplog.records) == 2


@pytest.mark.parametrize("kwargs", [{"top_k": 0}, {"workers": 0}])
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        RankingEngine(Matcher.build("abc"), **kwargs)
