from __future__ import annotations

import logging

from typing import Generic, Optional, TypeVar

from ._errors import InvalidReducerError
from ._reducer import Listener, Reducer, StateFactory


__all__ = (
    "Store",
    "Subscription",

    "create_store",
)


A = TypeVar("A")
S = TypeVar("S")


logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by `Store.subscribe`.

    Calling the handle (or `unsubscribe`) removes exactly this registration.
    Further calls do nothing.
    """

    __slots__ = ("_store", "listener", "active")

    def __init__(self, store: Store, listener: Listener) -> None:
        self._store = store
        self.listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return

        self.active = False
        self._store._remove(self)

    def __call__(self) -> None:
        self.unsubscribe()

    def __repr__(self) -> str:
        return f"Subscription(listener={self.listener!r}, active={self.active})"


class Store(Generic[S, A]):
    _reducer: Reducer
    _state: Optional[S]
    _subscriptions: list[Subscription]

    def __init__(
        self,
        reducer: Reducer,
        initial_state: Optional[S] = None
    ) -> None:
        if not callable(reducer):
            raise InvalidReducerError(
                f"Reducer must be callable, got {type(reducer).__name__}"
            )

        self._reducer = reducer
        self._state = initial_state
        self._subscriptions = []

    @property
    def state(self) -> Optional[S]:
        return self._state

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    def get_state(self) -> Optional[S]:
        return self._state

    def dispatch(self, action: A) -> A:
        logger.debug("dispatching %r", action)

        self._state = self._reducer(self._state, action)
        self._notify()

        return action

    def subscribe(self, listener: Listener) -> Subscription:
        if not callable(listener):
            raise TypeError(
                f"Listener must be callable, got {type(listener).__name__}"
            )

        subscription = Subscription(self, listener)
        self._subscriptions.append(subscription)

        logger.debug("subscribed %r", listener)

        return subscription

    def _remove(self, subscription: Subscription) -> None:
        # Identity lookup, the same listener may hold several registrations.
        for index, candidate in enumerate(self._subscriptions):
            if candidate is subscription:
                del self._subscriptions[index]
                logger.debug("unsubscribed %r", subscription.listener)
                return

    def _notify(self) -> None:
        for subscription in tuple(self._subscriptions):
            if subscription.active:
                subscription.listener()


def create_store(
    reducer: Reducer,
    initial_state_factory: Optional[StateFactory] = None
) -> Store[S, A]:
    initial_state = None

    if initial_state_factory is not None:
        initial_state = initial_state_factory()

    return Store(reducer, initial_state)
