"""Shared helpers for client bootstrap."""

from __future__ import annotations

from .config import API_VERSION, ROOT_URL, EnigmaClientConfig
from .core.errors import EnigmaValidationError
from .queries.enums import Endpoint


def validate_client_config(config: EnigmaClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise EnigmaValidationError(str(exc)) from exc


def validate_api_key(api_key: str) -> str:
    if not isinstance(api_key, str):
        raise EnigmaValidationError("api_key must be str")
    if api_key.strip() == "":
        raise EnigmaValidationError("api_key is required")
    return api_key


def build_base_uri(endpoint: Endpoint, api_key: str) -> str:
    """``<root>/<version>/<endpoint>/<api key>``."""
    return "/".join((ROOT_URL, API_VERSION, endpoint.value, api_key))


__all__ = [
    "validate_client_config",
    "validate_api_key",
    "build_base_uri",
]
