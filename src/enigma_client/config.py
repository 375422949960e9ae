"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

ROOT_URL = "https://api.enigma.io"
API_VERSION = "v2"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class PaginationConfig:
    """Page iteration guardrails."""

    max_pages: int = 10_000

    def validate(self) -> None:
        if self.max_pages < 1:
            raise ValueError("pagination.max_pages must be >= 1")


@dataclass(slots=True, frozen=True)
class EnigmaClientConfig:
    """Runtime configuration for the Enigma client."""

    user_agent: str = "enigma-api-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)

    def validate(self) -> None:
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        self.transport.validate()
        self.pagination.validate()


__all__ = [
    "ROOT_URL",
    "API_VERSION",
    "TransportConfig",
    "PaginationConfig",
    "EnigmaClientConfig",
]
