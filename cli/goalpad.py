#!/usr/bin/env python3
"""GoalPad TUI — personal goal list powered by Textual."""

from __future__ import annotations

import logging
import sys

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.logging import TextualHandler
from textual.widgets import (
    Button,
    Checkbox,
    Footer,
    Header,
    Input,
    Label,
    ProgressBar,
    Static,
)

from core import Goal, GoalSession, Progress, Settings, load_settings
from core.settings import config_path

logger = logging.getLogger(__name__)


EMPTY_SUBTITLE = "No goals yet — add one below!"


# ── Formatting ─────────────────────────────────────────────────


def format_percent(ratio: float) -> str:
    return f"{round(ratio * 100)}%"


def progress_subtitle(progress: Progress) -> str:
    if progress.total == 0:
        return EMPTY_SUBTITLE
    return f"{progress.done_count} of {progress.total} completed"


# ── Stylesheet ─────────────────────────────────────────────────

CSS = """
Screen {
    background: $surface;
}

#progress-row {
    height: auto;
    padding: 0 2;
    margin: 1 0 0 0;
}

#progress-bar {
    width: 1fr;
}

#progress-label {
    width: auto;
    margin: 0 0 0 1;
}

#goal-list {
    height: 1fr;
    padding: 0 1;
}

#empty-state {
    height: 1fr;
    content-align: center middle;
    text-align: center;
    color: $text-muted;
}

.goal-row {
    height: auto;
    margin: 0 0 1 0;
    padding: 0 1;
    border: tall $primary-background-darken-2;
}

.goal-row Checkbox {
    width: auto;
    min-width: 4;
    height: auto;
    padding: 0 1 0 0;
}

.goal-text {
    width: 1fr;
    height: auto;
    padding: 1 0 0 0;
}

.goal-done .goal-text {
    text-style: strike;
    color: $text-muted;
}

.delete-btn {
    min-width: 5;
    width: 5;
}

#input-row {
    dock: bottom;
    height: auto;
    padding: 1 1;
    border-top: tall $primary-background-darken-2;
}

#goal-input {
    width: 1fr;
}

#add-button {
    margin: 0 0 0 1;
}
"""


# ── Custom widgets ─────────────────────────────────────────────


class GoalRow(Horizontal):
    """A single goal: done checkbox + text + delete button."""

    def __init__(self, goal: Goal, **kwargs) -> None:
        super().__init__(**kwargs)
        self.goal = goal

    @property
    def goal_id(self) -> str:
        return self.goal.id

    def compose(self) -> ComposeResult:
        yield Checkbox(value=self.goal.done)
        yield Label(self.goal.text, markup=False, classes="goal-text")
        yield Button("✕", variant="error", classes="delete-btn")

    def on_mount(self) -> None:
        self.add_class("goal-row")
        if self.goal.done:
            self.add_class("goal-done")


# ── Main app ───────────────────────────────────────────────────


class GoalPadApp(App):
    """GoalPad — keep a short list of goals and watch them get done."""

    TITLE = "GoalPad"
    CSS = CSS

    BINDINGS = [
        Binding("escape", "blur_focus", "Back"),
        Binding("q", "quit_app", "Quit"),
        Binding("ctrl+q", "quit_app", "Quit", show=False, priority=True),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self.session = GoalSession(max_length=self.settings.max_goal_length)
        self._unsubscribe: list = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(
            ProgressBar(total=1, show_eta=False, show_percentage=False, id="progress-bar"),
            Label("0%", id="progress-label"),
            id="progress-row",
        )
        yield Static(
            "Start adding your goals!\nType something below and press Add",
            id="empty-state",
        )
        yield VerticalScroll(id="goal-list", can_focus=False)
        yield Horizontal(
            Input(
                placeholder="Add a new goal...",
                max_length=self.settings.max_goal_length,
                id="goal-input",
            ),
            Button("Add", variant="primary", id="add-button", disabled=True),
            id="input-row",
        )
        yield Footer()

    async def on_mount(self) -> None:
        self.title = self.settings.title
        self._unsubscribe = [
            self.session.store.subscribe(self._on_goals_change),
            self.session.listeners.add("input_changed", self._on_input_value_change),
        ]
        await self._sync_goals()
        self._sync_header()
        self.query_one("#goal-input", Input).focus()

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []

    # ── Rendering ──────────────────────────────────────────────

    def _on_goals_change(self, snapshot: tuple[Goal, ...]) -> None:
        self._sync_header()
        self.call_later(self._sync_goals)

    def _on_input_value_change(self, value: str) -> None:
        self.query_one("#add-button", Button).disabled = not self.session.can_commit

    def _sync_header(self) -> None:
        """Update sub_title, progress bar and Add button from the session."""
        progress = self.session.progress
        self.sub_title = progress_subtitle(progress)

        row = self.query_one("#progress-row", Horizontal)
        row.display = progress.total > 0
        if progress.total > 0:
            self.query_one("#progress-bar", ProgressBar).update(
                total=progress.total, progress=progress.done_count
            )
            self.query_one("#progress-label", Label).update(format_percent(progress.ratio))

        self.query_one("#add-button", Button).disabled = not self.session.can_commit

    async def _sync_goals(self) -> None:
        """(Re)build the goal rows from the current snapshot."""
        goals = self.session.goals
        goal_list = self.query_one("#goal-list", VerticalScroll)
        await goal_list.remove_children()
        if goals:
            await goal_list.mount_all([GoalRow(g) for g in goals])
        goal_list.display = bool(goals)
        self.query_one("#empty-state", Static).display = not goals

    # ── Commands ───────────────────────────────────────────────

    @on(Input.Changed, "#goal-input")
    def _on_input_change(self, event: Input.Changed) -> None:
        self.session.change_input(event.value)

    @on(Input.Submitted, "#goal-input")
    def _on_input_submit(self, event: Input.Submitted) -> None:
        self._commit()

    @on(Button.Pressed, "#add-button")
    def _on_add_pressed(self, event: Button.Pressed) -> None:
        self._commit()

    def _commit(self) -> None:
        goal = self.session.commit_input()
        if goal is None:
            return
        self.query_one("#goal-input", Input).value = self.session.input_value

    @on(Checkbox.Changed)
    def _on_goal_toggle(self, event: Checkbox.Changed) -> None:
        row = event.checkbox.parent
        if not isinstance(row, GoalRow):
            return
        # Rows are rebuilt later, so row.goal may be stale; compare to the store
        current = self.session.store.find(row.goal_id)
        if current is not None and current.done != event.value:
            self.session.toggle_goal(row.goal_id)

    @on(Button.Pressed, ".delete-btn")
    def _on_goal_delete(self, event: Button.Pressed) -> None:
        row = event.button.parent
        if isinstance(row, GoalRow):
            self.session.remove_goal(row.goal_id)

    # ── Actions ────────────────────────────────────────────────

    def action_blur_focus(self) -> None:
        self.set_focus(None)

    def action_quit_app(self) -> None:
        self.exit()


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    path = config_path()
    if path is not None and not path.exists():
        print(f"Config not found: {path}")
        print("Unset GOALPAD_CONFIG or point it at a YAML file.")
        sys.exit(1)

    settings = load_settings(path)
    logging.basicConfig(
        level=settings.log_level,
        handlers=[TextualHandler()],
        format="%(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Starting GoalPad (max goal length %d)", settings.max_goal_length)
    app = GoalPadApp(settings)
    app.run()


if __name__ == "__main__":
    main()
