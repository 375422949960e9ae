from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from enigma_client import EnigmaClient  # noqa: E402
from tests.shared.client_fakes import RecordingTransport  # noqa: E402
from tests.shared.payloads import API_KEY  # noqa: E402


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport: RecordingTransport) -> EnigmaClient:
    return EnigmaClient(API_KEY, transport=transport)
