from __future__ import annotations

from typing import Optional

import pytest

from tinystore import ReducerBase, Store, combine_reducers

from .helpers import counter


class Toggle(ReducerBase[bool, str]):
    def apply(self, state: Optional[bool], action: str) -> bool:
        value = bool(state)

        if action == "toggle":
            return not value

        return value


def test_reducer_base_is_callable() -> None:
    store = Store(Toggle())

    store.dispatch("toggle")
    assert store.state is True

    store.dispatch("other")
    assert store.state is True


def test_reducer_base_requires_apply() -> None:
    with pytest.raises(NotImplementedError):
        ReducerBase()(None, "action")


def test_combine_reducers_routes_slices() -> None:
    store = Store(combine_reducers(count=counter, light=Toggle()))

    store.dispatch("inc")
    assert store.state == {"count": 1, "light": False}

    store.dispatch("toggle")
    assert store.state == {"count": 1, "light": True}


def test_combine_reducers_keeps_state_for_unknown_actions() -> None:
    reducer = combine_reducers(count=counter, light=Toggle())
    state = reducer(None, "init")

    assert reducer(state, "unknown") is state


def test_combine_reducers_drops_unknown_keys() -> None:
    reducer = combine_reducers(count=counter)

    assert reducer({"count": 2, "stale": True}, "unknown") == {"count": 2}


def test_combine_reducers_rejects_non_callable() -> None:
    with pytest.raises(TypeError):
        combine_reducers(count=1)
