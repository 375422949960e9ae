from __future__ import annotations

from collections.abc import Sequence

from enigma_client.config import EnigmaClientConfig


class Response:
    def __init__(self, status_code: int, payload: object, *, reason_phrase: str = ""):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self._payload = payload

    def json(self) -> object:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


Step = Response | Exception


class SyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls = 0
        self.urls: list[str] = []
        self.closed = False

    def get(self, url: str):
        self.calls += 1
        self.urls.append(url)
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def close(self):
        self.closed = True


def build_config() -> EnigmaClientConfig:
    cfg = EnigmaClientConfig()
    cfg.validate()
    return cfg
