"""Tracing of the chain of assets being resolved."""

import contextvars
from contextlib import contextmanager
import logging
from time import perf_counter
from typing import Generator


_LOGGER = logging.getLogger(__name__)

# No public API
__all__: list[str] = []


_asset_path: contextvars.ContextVar[tuple[str, ...]] = contextvars.ContextVar(
    "asset_path", default=()
)


@contextmanager
def asset_trace(name: str) -> Generator[tuple[str, ...], None, None]:
    """Push an asset name onto the resolution path while it is computed.

    Yields the full path from the requested asset down to this one.
    """
    path = _asset_path.get() + (name,)
    token = _asset_path.set(path)
    label = " > ".join(path)
    t1 = perf_counter()
    _LOGGER.debug("[Asset] > %s", label)
    try:
        yield path
    finally:
        t2 = perf_counter()
        _asset_path.reset(token)
        _LOGGER.debug("[Asset] < %s (%0.3fs)", label, (t2 - t1))


def resolution_path() -> tuple[str, ...]:
    """Return the names of the assets currently being resolved, outermost first."""
    return _asset_path.get()
