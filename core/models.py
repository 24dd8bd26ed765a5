"""Typed dataclasses for the GoalPad data model.

Models are frozen: a snapshot handed to the UI can never be mutated behind
the store's back. ``to_dict`` maps snake_case fields to the camelCase keys
used in observation payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


MAX_GOAL_LENGTH = 100


# ── Goal ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Goal:
    id: str
    text: str
    done: bool = False

    def toggled(self) -> Goal:
        """Return a copy with ``done`` flipped; id and text are kept."""
        return replace(self, done=not self.done)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "done": self.done}


# ── Progress ──────────────────────────────────────────────────


@dataclass(frozen=True)
class Progress:
    done_count: int = 0
    total: int = 0
    ratio: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "doneCount": self.done_count,
            "total": self.total,
            "ratio": self.ratio,
        }
