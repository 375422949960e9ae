"""Public package exports for the Enigma API client."""

from .client import EnigmaClient
from .config import EnigmaClientConfig
from .core.errors import (
    EnigmaApiError,
    EnigmaClientClosedError,
    EnigmaDecodeError,
    EnigmaServerError,
    EnigmaTransportError,
    EnigmaValidationError,
)
from .queries.enums import Conjunction, Operation, SortDirection

__all__ = [
    "EnigmaClient",
    "EnigmaClientConfig",
    "EnigmaApiError",
    "EnigmaTransportError",
    "EnigmaClientClosedError",
    "EnigmaValidationError",
    "EnigmaServerError",
    "EnigmaDecodeError",
    "Conjunction",
    "Operation",
    "SortDirection",
]
