"""Uncommitted goal text as the user types it."""

from __future__ import annotations


class InputBuffer:
    """Holds the candidate text for the next goal.

    The value is stored exactly as typed; trimming only happens on commit.
    """

    def __init__(self, value: str = "") -> None:
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    @property
    def can_commit(self) -> bool:
        """Whether a commit would produce a goal right now."""
        return bool(self._value.strip())

    def set_value(self, value: str) -> None:
        self._value = value

    def commit(self) -> str | None:
        """Return the trimmed text and clear the buffer.

        Blank input returns None and leaves the value as it was.
        """
        text = self._value.strip()
        if not text:
            return None
        self._value = ""
        return text
