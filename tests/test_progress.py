"""Tests for core/progress.py."""

from core.models import Goal, Progress
from core.progress import compute_progress


def test_progress_empty_ratio_zero():
    p = compute_progress(())
    assert p == Progress(done_count=0, total=0, ratio=0.0)


def test_progress_half_done():
    goals = [
        Goal(id="1", text="a", done=True),
        Goal(id="2", text="b"),
        Goal(id="3", text="c", done=True),
        Goal(id="4", text="d"),
    ]
    p = compute_progress(goals)
    assert p.done_count == 2
    assert p.total == 4
    assert p.ratio == 0.5


def test_progress_none_done():
    p = compute_progress([Goal(id="1", text="a")])
    assert p.ratio == 0.0
    assert p.total == 1


def test_progress_all_done():
    p = compute_progress([Goal(id="1", text="a", done=True)])
    assert p.ratio == 1.0


def test_progress_from_store(populated_store):
    p = compute_progress(populated_store.list())
    assert p.done_count == 1
    assert p.total == 3
    assert p.ratio == 1 / 3


def test_progress_accepts_generator():
    p = compute_progress(Goal(id=str(i), text="x", done=i % 2 == 0) for i in range(4))
    assert p.done_count == 2
    assert p.total == 4
