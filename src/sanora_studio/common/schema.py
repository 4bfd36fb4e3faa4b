"""Dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

@dataclass(frozen=True)
class GenerationRequest:
    """A prompt plus the system instruction that frames it."""
    prompt: str
    system_instruction: str

    def to_payload(self) -> dict[str, Any]:
        """Request body in the shape expected by the generateContent endpoint."""
        return {
            "contents": [{"parts": [{"text": self.prompt}]}],
            "systemInstruction": {"parts": [{"text": self.system_instruction}]},
        }


@dataclass
class CopyDraft:
    """Outcome of one copy-drafting call site.

    Exactly one of: ``text`` set (success), nothing set (model returned no
    text), ``error`` set (all attempts failed).
    """
    kind: str
    text: str | None = None
    error: str | None = None
    latency_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def empty(self) -> bool:
        return self.error is None and not self.text
