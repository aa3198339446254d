"""A stack of game states with deferred push, pop, change and clear."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any


class State(ABC):
    """One screen or mode of the game.

    The lifecycle hooks keep ``entered`` and ``covered`` up to date;
    subclasses that override them should call the base version.
    """

    game: Any = None
    entered: bool = False
    covered: bool = False

    @abstractmethod
    def handle_event(self, event: Any) -> None:
        """React to an input event."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the state's logic."""

    @abstractmethod
    def render(self, target: Any) -> None:
        """Draw the state."""

    def on_enter(self) -> None:
        """Called when the state becomes active."""
        self.entered = True
        self.covered = False

    def on_exit(self) -> None:
        """Called when the state is removed."""
        self.entered = False
        self.covered = False

    def on_pause(self) -> None:
        """Called when another state covers this one."""
        self.covered = True

    def on_resume(self) -> None:
        """Called when the state is uncovered again."""
        self.covered = False

    def is_paused(self) -> bool:
        return False

    def is_transparent(self) -> bool:
        """Whether the states beneath should still be drawn."""
        return False


class _Op(Enum):
    PUSH = "push"
    POP = "pop"
    CHANGE = "change"
    CLEAR = "clear"


class StateMachine:
    """Holds states on a stack; changes are queued and applied before the next event or update."""

    def __init__(self, game: Any = None) -> None:
        self.game = game
        self._states: list[State] = []
        self._pending: list[tuple[_Op, State | None]] = []
        self.last_popped: State | None = None

    def __len__(self) -> int:
        return len(self._states)

    @property
    def has_states(self) -> bool:
        return bool(self._states)

    # -- loop ----------------------------------------------------------

    def handle_event(self, event: Any) -> None:
        self._process_pending()
        state = self.current()
        if state is not None:
            state.handle_event(event)

    def update(self, dt: float) -> None:
        self._process_pending()
        state = self.current()
        if state is not None and not state.is_paused():
            state.update(dt)

    def render(self, target: Any) -> None:
        """Draw the top state and every state beneath it up to the first opaque one."""
        start = 0
        for index in range(len(self._states) - 1, -1, -1):
            if not self._states[index].is_transparent():
                start = index
                break
        for state in self._states[start:]:
            state.render(target)

    # -- queued operations ---------------------------------------------

    def push(self, state: State) -> None:
        self._pending.append((_Op.PUSH, state))

    def pop(self) -> None:
        self._pending.append((_Op.POP, None))

    def change(self, state: State) -> None:
        self._pending.append((_Op.CHANGE, state))

    def clear(self) -> None:
        self._pending.append((_Op.CLEAR, None))

    def _process_pending(self) -> None:
        while self._pending:
            op, state = self._pending.pop(0)
            if op is _Op.PUSH and state is not None:
                self._do_push(state)
            elif op is _Op.POP:
                self._do_pop()
            elif op is _Op.CHANGE and state is not None:
                self._remove_top()
                self._enter(state)
            elif op is _Op.CLEAR:
                while self._states:
                    self._remove_top()

    def _enter(self, state: State) -> None:
        state.game = self.game
        self._states.append(state)
        state.on_enter()

    def _do_push(self, state: State) -> None:
        top = self.current()
        if top is not None:
            top.on_pause()
        self._enter(state)

    def _remove_top(self) -> None:
        if self._states:
            state = self._states.pop()
            state.on_exit()
            self.last_popped = state

    def _do_pop(self) -> None:
        if not self._states:
            return
        self._remove_top()
        top = self.current()
        if top is not None:
            top.on_resume()

    # -- queries and control -------------------------------------------

    def current(self) -> State | None:
        return self._states[-1] if self._states else None

    def previous(self) -> State | None:
        return self._states[-2] if len(self._states) >= 2 else None

    def pause_current(self) -> None:
        state = self.current()
        if state is not None:
            state.on_pause()

    def resume_current(self) -> None:
        state = self.current()
        if state is not None:
            state.on_resume()

    def is_current_paused(self) -> bool:
        state = self.current()
        return state.is_paused() if state is not None else False