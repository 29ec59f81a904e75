"""Image generation backends."""

from posetransfer.backend.base import (
    GenerationBackend,
    GenerationError,
    GenerationRequest,
    GenerationResult,
)
from posetransfer.backend.factory import create_backend
from posetransfer.backend.gemini import GeminiBackend
from posetransfer.backend.mock import MockBackend
from posetransfer.backend.proxy import ProxyBackend

__all__ = [
    "GeminiBackend",
    "GenerationBackend",
    "GenerationError",
    "GenerationRequest",
    "GenerationResult",
    "MockBackend",
    "ProxyBackend",
    "create_backend",
]
