"""In-process change listeners for GoalPad.

Listeners are plain callables registered against an event name and called
synchronously, in registration order, after the state they observe changed.

Event names:
- goals_changed: payload is the new goal snapshot (tuple of Goal)
- input_changed: payload is the new input buffer value (str)
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


VALID_EVENTS = {
    "goals_changed",
    "input_changed",
}

Listener = Callable[[Any], None]


class ListenerRegistry:
    """Callbacks keyed by event name."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {event: [] for event in VALID_EVENTS}

    def add(self, event: str, callback: Listener) -> Callable[[], None]:
        """Register *callback* for *event*. Returns a function that unregisters it."""
        if event not in VALID_EVENTS:
            raise ValueError(f"Unknown listener event: {event}")
        self._listeners[event].append(callback)

        def unsubscribe() -> None:
            try:
                self._listeners[event].remove(callback)
            except ValueError:
                pass  # already removed

        return unsubscribe

    def emit(self, event: str, payload: Any) -> int:
        """Call every listener registered for *event*.

        A listener that raises is logged and skipped; the remaining listeners
        still run. Returns the number of listeners that failed.
        """
        if event not in VALID_EVENTS:
            raise ValueError(f"Unknown listener event: {event}")

        failures = 0
        # Copy so a listener may unsubscribe itself while being called
        for callback in list(self._listeners[event]):
            try:
                callback(payload)
            except Exception:
                failures += 1
                logger.exception("Listener %r failed on %s", callback, event)
        return failures
