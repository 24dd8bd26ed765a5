"""Command/observation surface the presentation layer talks to.

A GoalSession pairs one GoalStore with one InputBuffer:

    session = GoalSession()
    session.change_input("  Buy milk ")
    goal = session.commit_input()       # Goal(id="1", text="Buy milk")
    session.toggle_goal(goal.id)
    session.progress                    # Progress(done_count=1, total=1, ratio=1.0)
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from core.goals import GoalStore, Snapshot
from core.input_buffer import InputBuffer
from core.listeners import ListenerRegistry
from core.models import MAX_GOAL_LENGTH, Goal, Progress
from core.progress import compute_progress

logger = logging.getLogger(__name__)


class GoalSession:
    def __init__(self, max_length: int = MAX_GOAL_LENGTH) -> None:
        self.listeners = ListenerRegistry()
        self.store = GoalStore(max_length=max_length, listeners=self.listeners)
        self.buffer = InputBuffer()

    # ── Observations ──────────────────────────────────────────

    @property
    def goals(self) -> Snapshot:
        return self.store.list()

    @property
    def progress(self) -> Progress:
        return compute_progress(self.store.list())

    @property
    def input_value(self) -> str:
        return self.buffer.value

    @property
    def can_commit(self) -> bool:
        return self.buffer.can_commit

    def view(self) -> dict[str, Any]:
        """Everything a renderer needs, as plain data."""
        return {
            "goals": [g.to_dict() for g in self.goals],
            "progress": self.progress.to_dict(),
            "input": self.input_value,
        }

    def subscribe(self, callback: Callable[[GoalSession], None]) -> Callable[[], None]:
        """Call *callback* with this session after any goal or input change."""
        unsub_goals = self.listeners.add("goals_changed", lambda _snapshot: callback(self))
        unsub_input = self.listeners.add("input_changed", lambda _value: callback(self))

        def unsubscribe() -> None:
            unsub_goals()
            unsub_input()

        return unsubscribe

    # ── Commands ──────────────────────────────────────────────

    def change_input(self, text: str) -> None:
        if text == self.buffer.value:
            return
        self.buffer.set_value(text)
        self.listeners.emit("input_changed", text)

    def commit_input(self) -> Goal | None:
        """Turn the buffered text into a goal. Returns the new goal, if any."""
        text = self.buffer.commit()
        if text is None:
            logger.debug("Ignoring commit of blank input")
            return None
        self.listeners.emit("input_changed", self.buffer.value)
        return self.store.add(text)[-1]

    def toggle_goal(self, goal_id: str) -> Snapshot:
        return self.store.toggle(goal_id)

    def remove_goal(self, goal_id: str) -> Snapshot:
        return self.store.remove(goal_id)
