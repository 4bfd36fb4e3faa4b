from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from typing import Any

import httpx
import pytest

from sanora_studio.generation.client import GenerationClient


class RecordingSleep:
    """Async sleep stand-in that records requested delays without waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class ScriptedEndpoint:
    """MockTransport handler replaying a script of responses/exceptions."""

    def __init__(self, script: Iterable[Any]) -> None:
        self.script = list(script)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.script[min(len(self.requests), len(self.script)) - 1]
        if isinstance(step, Exception):
            raise step
        if isinstance(step, httpx.Response):
            return httpx.Response(step.status_code, headers=step.headers, content=step.content)
        return httpx.Response(200, json=step)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def body(self, index: int = 0) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


def candidate(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def server_error(status: int = 500) -> httpx.Response:
    return httpx.Response(status, text="upstream says no")


@pytest.fixture()
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def make_client(sleep: RecordingSleep) -> Callable[..., tuple[GenerationClient, ScriptedEndpoint]]:
    def _make(*script: Any, **kwargs: Any) -> tuple[GenerationClient, ScriptedEndpoint]:
        endpoint = ScriptedEndpoint(script)
        client = GenerationClient(
            api_key="test-key",
            model="test-model",
            base_url="https://gen.example.test/v1beta",
            transport=httpx.MockTransport(endpoint),
            sleep=sleep,
            **kwargs,
        )
        return client, endpoint

    return _make
