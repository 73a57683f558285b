"""
State Store Module

Observable slot holding the current ``ViewState``. ``dispatch`` is the only
writer; any number of readers may subscribe.
"""

import logging
from typing import Callable, List, Optional

from .state import Event, ViewState, reduce


logger = logging.getLogger(__name__)


Listener = Callable[[ViewState], None]


class StateStore:
    """Single-writer, multiple-reader holder for the screen state."""

    def __init__(self, initial: Optional[ViewState] = None):
        self._state = initial or ViewState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, event: Event) -> ViewState:
        """
        Reduce an event into the current state and notify subscribers.

        Listeners are only called when the state actually changed.

        Returns:
            The state after the event.
        """
        previous = self._state
        self._state = reduce(previous, event)
        logger.debug(f"{type(event).__name__}: {self._state}")

        if self._state != previous:
            self._notify()
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for state changes.

        Returns:
            Callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception(f"State listener {listener!r} failed")
