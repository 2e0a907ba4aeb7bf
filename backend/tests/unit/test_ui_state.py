"""Unit tests for the UI state store."""

import json

import pytest

from salonflow.client.ui_state import (
    SetSidebarOpen,
    SetTheme,
    ToggleSidebar,
    ToggleTheme,
    UIState,
    UIStateStore,
    reduce,
)


def test_reduce_is_pure():
    state = UIState()

    toggled = reduce(state, ToggleTheme())

    assert state.theme == "dark"
    assert toggled.theme == "light"
    assert reduce(toggled, ToggleSidebar()).sidebar_open is False
    assert reduce(state, SetSidebarOpen(open=False)).sidebar_open is False


def test_hydrate_defaults_when_no_file(tmp_path):
    store = UIStateStore(tmp_path / "ui-state.json")

    assert store.hydrate() == UIState(theme="dark", sidebar_open=True)
    assert store.hydrated


def test_dispatch_persists_and_notifies(tmp_path):
    path = tmp_path / "nested" / "ui-state.json"
    store = UIStateStore(path)
    store.hydrate()
    seen = []
    store.subscribe(seen.append)

    store.dispatch(SetTheme(theme="light"))

    assert json.loads(path.read_text("utf-8")) == {"theme": "light", "sidebar_open": True}
    assert seen == [UIState(theme="light", sidebar_open=True)]


def test_hydrate_reads_persisted_state_once(tmp_path):
    path = tmp_path / "ui-state.json"
    path.write_text(json.dumps({"theme": "light", "sidebar_open": False}), "utf-8")
    store = UIStateStore(path)

    assert store.hydrate().theme == "light"
    path.write_text(json.dumps({"theme": "dark", "sidebar_open": True}), "utf-8")
    assert store.hydrate().theme == "light"


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "ui-state.json"
    path.write_text("{not json", "utf-8")

    assert UIStateStore(path).hydrate() == UIState()


def test_dispatch_before_hydrate_is_refused(tmp_path):
    with pytest.raises(RuntimeError):
        UIStateStore(tmp_path / "ui-state.json").dispatch(ToggleTheme())


def test_no_op_action_does_not_write(tmp_path):
    path = tmp_path / "ui-state.json"
    store = UIStateStore(path)
    store.hydrate()

    store.dispatch(SetTheme(theme="dark"))

    assert not path.exists()
