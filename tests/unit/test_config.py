from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from enigma_client.config import (
    API_VERSION,
    ROOT_URL,
    EnigmaClientConfig,
    PaginationConfig,
    TransportConfig,
)


def test_root_and_version_constants():
    assert ROOT_URL == "https://api.enigma.io"
    assert API_VERSION == "v2"


def test_config_is_immutable():
    cfg = EnigmaClientConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.transport = TransportConfig(timeout_read_seconds=1.0)


def test_default_config_is_valid():
    EnigmaClientConfig().validate()


def test_config_validate_rejects_empty_user_agent():
    with pytest.raises(ValueError, match="user_agent"):
        EnigmaClientConfig(user_agent="").validate()


@pytest.mark.parametrize(
    "field",
    [
        "timeout_connect_seconds",
        "timeout_read_seconds",
        "timeout_write_seconds",
        "timeout_pool_seconds",
    ],
)
def test_config_validate_rejects_non_positive_timeouts(field):
    cfg = EnigmaClientConfig(transport=TransportConfig(**{field: 0.0}))
    with pytest.raises(ValueError, match=f"transport.{field} must be > 0"):
        cfg.validate()


def test_config_validate_rejects_zero_max_pages():
    cfg = EnigmaClientConfig(pagination=PaginationConfig(max_pages=0))
    with pytest.raises(ValueError, match="pagination.max_pages"):
        cfg.validate()
