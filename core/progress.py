"""Completion progress derived from a goal snapshot."""

from __future__ import annotations

from typing import Iterable

from core.models import Goal, Progress


def compute_progress(goals: Iterable[Goal]) -> Progress:
    """Count done goals over the total.

    The ratio is 0.0 for an empty collection rather than a division error.
    """
    goals = list(goals)
    total = len(goals)
    done_count = sum(1 for g in goals if g.done)
    ratio = done_count / total if total else 0.0
    return Progress(done_count=done_count, total=total, ratio=ratio)
