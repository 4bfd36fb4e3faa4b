"""Error types raised by the generation client."""
from __future__ import annotations


class GenerationError(Exception):
    """Base class for generation failures."""


class TransientRequestFailure(GenerationError):
    """One failed attempt: transport error, non-2xx status or unparseable body."""

    def __init__(self, attempt: int, message: str, status_code: int | None = None) -> None:
        super().__init__(f"attempt {attempt}: {message}")
        self.attempt = attempt
        self.status_code = status_code


class GenerationExhausted(GenerationError):
    """Every attempt in the budget failed."""

    def __init__(self, attempts: int, last_error: TransientRequestFailure | None = None) -> None:
        super().__init__(f"Failed to generate content after {attempts} attempts")
        self.attempts = attempts
        self.last_error = last_error
