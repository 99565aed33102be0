from __future__ import annotations

import pytest

from utils.logger import Logger
from utils.pattern import Singleton


@pytest.fixture(autouse=True)
def fresh_logger():
    # Each test gets a logger bound to its own captured stderr
    yield
    Singleton.drop(Logger)
