"""Contracts of the hosted services the studio talks to.

The hosted document store and auth service are external; only their call
shapes are declared here so callers can be given real clients or fakes.
"""
from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

Document = dict[str, Any]
Snapshot = list[Document]
Unsubscribe = Callable[[], None]


@dataclass(frozen=True)
class Session:
    uid: str
    anonymous: bool = True


class DocumentStore(Protocol):
    def subscribe(
        self,
        collection_path: str,
        on_snapshot: Callable[[Snapshot], None],
        on_error: Callable[[Exception], None] | None = None,
    ) -> Unsubscribe:
        """Push the full document set now and on every remote change."""
        ...

    def add(self, collection_path: str, fields: Document) -> str:
        """Create a document and return its id."""
        ...

    def delete(self, collection_path: str, document_id: str) -> None:
        ...


class AuthService(Protocol):
    def sign_in_anonymously(self) -> Session:
        ...

    def sign_in_with_token(self, token: str) -> Session:
        ...

    def on_session_change(self, callback: Callable[[Session | None], None]) -> Unsubscribe:
        """Invoke callback with the current session now and on every change."""
        ...
