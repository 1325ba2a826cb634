from __future__ import annotations

import logging

from typing import Any, Callable, Generic, Optional, TypeVar


__all__ = (
    "Listener",
    "Reducer",
    "ReducerBase",
    "StateFactory",
    "Unsubscribe",

    "combine_reducers",
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


Reducer = Callable[[Optional[S], A], S]
Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
StateFactory = Callable[[], S]


class ReducerBase(Generic[S, A]):
    def apply(self, state: Optional[S], action: A) -> S:
        raise NotImplementedError

    def __call__(self, state: Optional[S], action: A) -> S:
        return self.apply(state, action)


def combine_reducers(**reducers: Reducer) -> Reducer[dict[str, Any], Any]:
    """Build a reducer over a dict whose keys are each owned by one reducer.

    The previous dict is returned as-is when no slice changed identity.
    """
    for key, reducer in reducers.items():
        if not callable(reducer):
            raise TypeError(f"Reducer for key {key!r} is not callable")

    def combined(
        state: Optional[dict[str, Any]],
        action: Any
    ) -> dict[str, Any]:
        previous = state or {}
        next_state: dict[str, Any] = {}
        changed = state is None or previous.keys() != reducers.keys()

        for key, reducer in reducers.items():
            previous_slice = previous.get(key)
            next_slice = reducer(previous_slice, action)

            if next_slice is not previous_slice:
                changed = True

            next_state[key] = next_slice

        if not changed:
            return previous

        logger.debug("combined reducer produced new state for %r", action)

        return next_state

    return combined
