from __future__ import annotations

import json as jsonlib
from typing import Any, Callable

import pytest

import food_advice.serve.handler as handler_mod


class _FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code
        self.reason_phrase = "OK" if status_code == 200 else "Error"


class FakeUpstream:
    """Replaces httpx.Client in the handler module and records every POST."""

    def __init__(self, body: Any, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.calls: list[dict[str, Any]] = []

    def __call__(self, timeout: float | None = None) -> "FakeUpstream":  # stands in for the class
        self.timeout = timeout
        return self

    def __enter__(self) -> "FakeUpstream":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        return None

    def post(self, url: str, headers: dict[str, str] | None = None, json: dict[str, Any] | None = None) -> _FakeResponse:  # noqa: A002
        self.calls.append({"url": url, "headers": headers, "json": json})
        if isinstance(self.body, Exception):
            raise self.body
        text = self.body if isinstance(self.body, str) else jsonlib.dumps(self.body)
        return _FakeResponse(text, self.status_code)


@pytest.fixture
def upstream(monkeypatch: pytest.MonkeyPatch) -> Callable[..., FakeUpstream]:
    """Install a fake upstream answering with ``body`` (dict, raw text or exception)."""

    def install(body: Any, status_code: int = 200) -> FakeUpstream:
        fake = FakeUpstream(body, status_code)
        monkeypatch.setattr(handler_mod.httpx, "Client", fake)
        return fake

    return install
