from __future__ import annotations

import pytest

from tinystore import Store

from .helpers import counter


@pytest.fixture
def store() -> Store[int, str]:
    return Store(counter)
