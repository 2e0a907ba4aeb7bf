"""Process-scoped UI preferences (theme, sidebar).

The store is hydrated once from a JSON file, changed only through
``dispatch``, and written back after every change.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

Theme = Literal["light", "dark"]


class UIState(BaseModel):
    """Persisted shape of the UI preferences."""

    model_config = ConfigDict(frozen=True)

    theme: Theme = "dark"
    sidebar_open: bool = True


@dataclass(frozen=True)
class SetTheme:
    theme: Theme


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class SetSidebarOpen:
    open: bool


@dataclass(frozen=True)
class ToggleSidebar:
    pass


UIAction = Union[SetTheme, ToggleTheme, SetSidebarOpen, ToggleSidebar]


def reduce(state: UIState, action: UIAction) -> UIState:
    """Pure transition function: current state + action → next state."""
    if isinstance(action, SetTheme):
        return state.model_copy(update={"theme": action.theme})
    if isinstance(action, ToggleTheme):
        return state.model_copy(update={"theme": "light" if state.theme == "dark" else "dark"})
    if isinstance(action, SetSidebarOpen):
        return state.model_copy(update={"sidebar_open": action.open})
    if isinstance(action, ToggleSidebar):
        return state.model_copy(update={"sidebar_open": not state.sidebar_open})
    raise TypeError(f"Unknown UI action: {type(action).__name__}")


class UIStateStore:
    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._state = UIState()
        self._hydrated = False
        self._listeners: list[Callable[[UIState], None]] = []

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def hydrated(self) -> bool:
        return self._hydrated

    def hydrate(self) -> UIState:
        """Load persisted preferences. Only the first call reads the file."""
        if self._hydrated:
            return self._state
        if self._path.exists():
            try:
                self._state = UIState.model_validate_json(self._path.read_text("utf-8"))
            except (OSError, ValidationError) as exc:
                logger.warning("Ignoring unreadable UI state at %s: %s", self._path, exc)
        self._hydrated = True
        return self._state

    def subscribe(self, listener: Callable[[UIState], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, action: UIAction) -> UIState:
        """The only way to change UI state. Persists and notifies on change."""
        if not self._hydrated:
            raise RuntimeError("UIStateStore.dispatch called before hydrate()")
        next_state = reduce(self._state, action)
        if next_state == self._state:
            return self._state
        self._state = next_state
        self._persist()
        for listener in list(self._listeners):
            listener(next_state)
        return next_state

    def _persist(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(self._state.model_dump_json(indent=2), "utf-8")
