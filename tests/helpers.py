from __future__ import annotations

from typing import Optional


def counter(state: Optional[int], action: str) -> int:
    value = state if state is not None else 0

    if action == "inc":
        return value + 1

    if action == "dec":
        return value - 1

    return value
