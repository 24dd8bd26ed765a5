"""Goal collection state: normalisation, add/toggle/remove, snapshots."""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Iterator

from core.listeners import ListenerRegistry
from core.models import MAX_GOAL_LENGTH, Goal

logger = logging.getLogger(__name__)

Snapshot = tuple[Goal, ...]


# ── Text normalisation ────────────────────────────────────────


def normalize_goal_text(raw_text: str, max_length: int = MAX_GOAL_LENGTH) -> str:
    """Trim *raw_text* and cap it at *max_length* characters.

    Returns an empty string when nothing but whitespace was given. The cut
    text is trimmed again so a goal never ends in whitespace.
    """
    text = (raw_text or "").strip()
    if len(text) > max_length:
        text = text[:max_length].rstrip()
    return text


# ── Store ─────────────────────────────────────────────────────


class GoalStore:
    """Ordered, id-keyed goal collection. The only mutator of goal state.

    Every mutating call returns the current snapshot. Unknown ids and blank
    text are silent no-ops; subscribers are only notified when something
    actually changed.
    """

    def __init__(
        self,
        max_length: int = MAX_GOAL_LENGTH,
        listeners: ListenerRegistry | None = None,
    ) -> None:
        if max_length < 1:
            raise ValueError("max_length must be a positive integer")
        self.max_length = max_length
        self.listeners = listeners or ListenerRegistry()
        self._goals: list[Goal] = []
        self._ids = itertools.count(1)

    # ── Observation ───────────────────────────────────────────

    def list(self) -> Snapshot:
        return tuple(self._goals)

    def find(self, goal_id: str) -> Goal | None:
        """Find a goal by id."""
        for g in self._goals:
            if g.id == goal_id:
                return g
        return None

    def __len__(self) -> int:
        return len(self._goals)

    def __iter__(self) -> Iterator[Goal]:
        return iter(self.list())

    def __contains__(self, goal_id: object) -> bool:
        return any(g.id == goal_id for g in self._goals)

    def subscribe(self, callback: Callable[[Snapshot], None]) -> Callable[[], None]:
        """Call *callback* with the new snapshot after each change."""
        return self.listeners.add("goals_changed", callback)

    # ── Mutation ──────────────────────────────────────────────

    def add(self, raw_text: str) -> Snapshot:
        text = normalize_goal_text(raw_text, self.max_length)
        if not text:
            logger.debug("Ignoring add of blank goal text")
            return self.list()

        goal = Goal(id=str(next(self._ids)), text=text)
        self._goals.append(goal)
        logger.info("Added goal %s (%d chars)", goal.id, len(goal.text))
        return self._changed()

    def toggle(self, goal_id: str) -> Snapshot:
        for i, g in enumerate(self._goals):
            if g.id == goal_id:
                self._goals[i] = g.toggled()
                logger.debug("Goal %s done=%s", goal_id, self._goals[i].done)
                return self._changed()
        logger.debug("Ignoring toggle of unknown goal %s", goal_id)
        return self.list()

    def remove(self, goal_id: str) -> Snapshot:
        for i, g in enumerate(self._goals):
            if g.id == goal_id:
                self._goals.pop(i)
                logger.info("Removed goal %s", goal_id)
                return self._changed()
        logger.debug("Ignoring remove of unknown goal %s", goal_id)
        return self.list()

    def _changed(self) -> Snapshot:
        snapshot = self.list()
        self.listeners.emit("goals_changed", snapshot)
        return snapshot
