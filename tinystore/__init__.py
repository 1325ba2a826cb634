from ._errors import InvalidReducerError, StoreError
from ._reducer import (
    Listener,
    Reducer,
    ReducerBase,
    StateFactory,
    Unsubscribe,
    combine_reducers
)
from ._store import Store, Subscription, create_store


__all__ = (
    "InvalidReducerError",
    "Listener",
    "Reducer",
    "ReducerBase",
    "StateFactory",
    "Store",
    "StoreError",
    "Subscription",
    "Unsubscribe",

    "combine_reducers",
    "create_store",
)
