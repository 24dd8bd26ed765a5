"""Tests for core/listeners.py — listener registry."""

import logging

import pytest

from core.listeners import ListenerRegistry


def test_emit_calls_in_order():
    registry = ListenerRegistry()
    calls = []
    registry.add("input_changed", lambda v: calls.append(("first", v)))
    registry.add("input_changed", lambda v: calls.append(("second", v)))
    assert registry.emit("input_changed", "abc") == 0
    assert calls == [("first", "abc"), ("second", "abc")]


def test_emit_without_listeners():
    assert ListenerRegistry().emit("goals_changed", ()) == 0


def test_unknown_event():
    registry = ListenerRegistry()
    with pytest.raises(ValueError):
        registry.add("on_focus_start", print)
    with pytest.raises(ValueError):
        registry.emit("on_focus_start", None)


def test_failing_listener_is_logged(caplog):
    registry = ListenerRegistry()
    calls = []

    def broken(_value):
        raise RuntimeError("boom")

    registry.add("goals_changed", broken)
    registry.add("goals_changed", calls.append)

    with caplog.at_level(logging.ERROR, logger="core.listeners"):
        failures = registry.emit("goals_changed", ())

    assert failures == 1
    assert calls == [()]
    assert "goals_changed" in caplog.text


def test_listener_can_unsubscribe_itself():
    registry = ListenerRegistry()
    calls = []
    holder = {}

    def once(value):
        calls.append(value)
        holder["unsub"]()

    holder["unsub"] = registry.add("input_changed", once)
    registry.emit("input_changed", "a")
    registry.emit("input_changed", "b")
    assert calls == ["a"]
