from __future__ import annotations

import argparse
import logging
import os

from enum import Enum
from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ._store import Store


__all__ = (
    "Action",
    "Tamagotchi",

    "main",
    "reducer",
)


logger = logging.getLogger(__name__)


class Action(str, Enum):
    FEED = "feed"
    PLAY = "play"
    SLEEP = "sleep"


class Tamagotchi(BaseModel):
    model_config = ConfigDict(frozen=True)

    hunger: int = Field(default=50, ge=0, le=100)
    happiness: int = Field(default=50, ge=0, le=100)
    sleeping: bool = False

    def __str__(self) -> str:
        sleeping = str(self.sleeping).lower()

        return (
            f"{{ hunger: {self.hunger}, happiness: {self.happiness}, "
            f"sleeping: {sleeping} }}"
        )


def _as_percent(value: int) -> int:
    return max(0, min(100, value))


def reducer(state: Optional[Tamagotchi], action: Any) -> Tamagotchi:
    value = state if state is not None else Tamagotchi()

    if not isinstance(action, Action):
        return value

    if action is Action.FEED:
        if value.sleeping:
            return value

        return value.model_copy(update={"hunger": _as_percent(value.hunger - 20)})

    if action is Action.PLAY:
        if value.sleeping:
            return value

        return value.model_copy(
            update={"happiness": _as_percent(value.happiness + 20)}
        )

    if action is Action.SLEEP:
        return value.model_copy(update={"sleeping": True})

    return value


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tinystore-demo",
        description="Drive a Tamagotchi through a store and print every update."
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("TINYSTORE_LOG_LEVEL", "WARNING"),
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper
    )

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(level=args.log_level)

    store: Store[Tamagotchi, Action] = Store(reducer)

    unsubscribe = store.subscribe(
        lambda: print(f"SUBSCRIBER 01: {store.state}")
    )
    store.subscribe(lambda: print(f"SUBSCRIBER 02: {store.state}"))

    store.dispatch(Action.FEED)
    store.dispatch(Action.PLAY)
    store.dispatch(Action.FEED)

    unsubscribe()
    logger.info("first subscriber removed")

    store.dispatch(Action.FEED)
    store.dispatch(Action.PLAY)
    store.dispatch(Action.SLEEP)
    store.dispatch(Action.PLAY)

    return 0
