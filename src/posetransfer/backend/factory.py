"""Backend selection by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from posetransfer.backend.gemini import GeminiBackend
from posetransfer.backend.mock import MockBackend
from posetransfer.backend.proxy import ProxyBackend

if TYPE_CHECKING:
    from posetransfer.config import AppConfig

BACKEND_NAMES = ("gemini", "proxy", "mock")


def create_backend(name: str, config: AppConfig) -> GeminiBackend | ProxyBackend | MockBackend:
    """Build the backend called *name* from *config*.

    Raises
    ------
    ValueError
        If *name* is not one of :data:`BACKEND_NAMES`.
    """
    if name == "gemini":
        return GeminiBackend(config.gemini)
    if name == "proxy":
        return ProxyBackend(config.proxy)
    if name == "mock":
        return MockBackend()
    msg = f"Unknown backend '{name}' (choose from: {', '.join(BACKEND_NAMES)})"
    raise ValueError(msg)
