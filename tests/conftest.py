from __future__ import annotations

from collections.abc import Iterator

import pytest

from prettypy.layout import get_default_options, set_default_options
from prettypy.logging import configure_logging


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging() -> None:
    configure_logging(verbosity=0)


@pytest.fixture(autouse=True)
def _restore_default_options() -> Iterator[None]:
    previous = get_default_options()
    yield
    set_default_options(previous)
