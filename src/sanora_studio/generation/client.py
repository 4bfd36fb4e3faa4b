"""Client for the remote generateContent endpoint.

Each call runs the attempt loop below on its own:

    Attempting(n) --success--> Done(text | None)
    Attempting(n) --failure, n < max--> wait base * 2**(n-1) --> Attempting(n + 1)
    Attempting(n) --failure, n == max--> wait base * 2**(n-1) --> Failed

Every failure class (4xx, 5xx, transport, bad JSON) is retried the same way.
"""
from __future__ import annotations
import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from sanora_studio.common.config import Settings
from sanora_studio.common.schema import GenerationRequest
from sanora_studio.generation.errors import GenerationExhausted, TransientRequestFailure

LOGGER = logging.getLogger("sanora.generation.client")

SleepFn = Callable[[float], Awaitable[Any]]


def extract_text(data: Any) -> str | None:
    """Return candidates[0].content.parts[0].text, or None if any step is missing."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class GenerationClient:
    """Generate text from a (prompt, system instruction) pair.

    Holds configuration only; no connection or state is shared between calls,
    so concurrent ``generate`` coroutines never wait on each other.
    """

    def __init__(
        self,
        api_key: str,
        model: str = Settings.model,
        base_url: str = Settings.base_url,
        *,
        max_attempts: int = 5,
        backoff_base_s: float = 1.0,
        timeout_s: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.max_attempts = max_attempts
        self.backoff_base_s = backoff_base_s
        self.timeout_s = timeout_s
        self._transport = transport
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "GenerationClient":
        return cls(
            api_key=settings.api_key,
            model=settings.model,
            base_url=settings.base_url,
            max_attempts=settings.max_attempts,
            backoff_base_s=settings.backoff_base_s,
            timeout_s=settings.timeout_s,
            **kwargs,
        )

    @property
    def url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def backoff_delay(self, attempt: int) -> float:
        """Seconds to wait after failed attempt ``attempt`` (1-indexed): 1, 2, 4, 8, 16 at base 1s."""
        return self.backoff_base_s * (2 ** (attempt - 1))

    async def generate(self, prompt: str, system_instruction: str) -> str | None:
        """
        Generate text for the prompt under the given system instruction.

        Args:
            prompt: Content request, passed through as-is.
            system_instruction: Persona/format contract, passed through as-is.

        Returns:
            The first candidate's text unchanged, or None when the response
            holds no candidate text.

        Raises:
            GenerationExhausted: all attempts failed.
        """
        request = GenerationRequest(prompt=prompt, system_instruction=system_instruction)
        return await self.generate_request(request)

    async def generate_request(self, request: GenerationRequest) -> str | None:
        payload = request.to_payload()
        last_error: TransientRequestFailure | None = None

        for attempt in range(1, self.max_attempts + 1):
            start = time.monotonic()
            try:
                data = await self._attempt(attempt, payload)
            except TransientRequestFailure as e:
                last_error = e
                delay = self.backoff_delay(attempt)
                LOGGER.warning(
                    "Generation attempt %d/%d failed (%s); backing off %.1fs",
                    attempt,
                    self.max_attempts,
                    e,
                    delay,
                )
                await self._sleep(delay)
                continue

            text = extract_text(data)
            latency_ms = int((time.monotonic() - start) * 1000)
            if text is None:
                LOGGER.info("Generation returned no candidate text (attempt %d, %dms)", attempt, latency_ms)
            else:
                LOGGER.debug("Generation succeeded on attempt %d (%dms, %d chars)", attempt, latency_ms, len(text))
            return text

        LOGGER.error("Generation failed after %d attempts: %s", self.max_attempts, last_error)
        raise GenerationExhausted(self.max_attempts, last_error)

    async def _attempt(self, attempt: int, payload: dict[str, Any]) -> Any:
        """One POST; raises TransientRequestFailure on any failure."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport) as client:
                r = await client.post(
                    self.url,
                    params={"key": self.api_key},
                    headers={"Content-Type": "application/json"},
                    json=payload,
                )
        except httpx.HTTPError as e:
            raise TransientRequestFailure(attempt, f"{type(e).__name__}: {e}") from e

        if not r.is_success:
            raise TransientRequestFailure(attempt, f"HTTP {r.status_code}", status_code=r.status_code)
        try:
            return r.json()
        except ValueError as e:
            raise TransientRequestFailure(attempt, "invalid JSON body", status_code=r.status_code) from e
