"""Projects, services and leads as read and written by the admin panel."""
from __future__ import annotations
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from sanora_studio.studio.collaborators import (
    AuthService,
    Document,
    DocumentStore,
    Session,
    Snapshot,
    Unsubscribe,
)

LOGGER = logging.getLogger("sanora.studio.catalog")

PROJECTS = "projects"
SERVICES = "services"
LEADS = "leads"
COLLECTIONS = (PROJECTS, SERVICES, LEADS)


@dataclass(frozen=True)
class Project:
    id: str
    name: str
    location: str
    image: str = ""

    @classmethod
    def from_document(cls, doc: Document) -> "Project":
        return cls(
            id=str(doc.get("id", "")),
            name=str(doc.get("name", "")),
            location=str(doc.get("location", "")),
            image=str(doc.get("image", "")),
        )


@dataclass(frozen=True)
class Service:
    id: str
    title: str
    description: str = ""

    @classmethod
    def from_document(cls, doc: Document) -> "Service":
        return cls(
            id=str(doc.get("id", "")),
            title=str(doc.get("title", "")),
            description=str(doc.get("description", "")),
        )


@dataclass(frozen=True)
class Lead:
    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    message: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, doc: Document) -> "Lead":
        known = {"id", "name", "email", "phone", "message"}
        return cls(
            id=str(doc.get("id", "")),
            name=str(doc.get("name", "")),
            email=str(doc.get("email", "")),
            phone=str(doc.get("phone", "")),
            message=str(doc.get("message", "")),
            extra={k: v for k, v in doc.items() if k not in known},
        )


DEFAULT_PROJECTS: tuple[Project, ...] = (
    Project("dp1", "The Oak Pavilion", "Vancouver, BC",
            "https://images.unsplash.com/photo-1600210492486-724fe5c67fb0?auto=format&fit=crop&q=80&w=1200"),
    Project("dp2", "Wasabi Minimalist", "Kyoto, JP",
            "https://images.unsplash.com/photo-1588854337221-4cf9fa96059c?auto=format&fit=crop&q=80&w=800"),
    Project("dp3", "Antique Brass Loft", "London, UK",
            "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?auto=format&fit=crop&q=80&w=800"),
    Project("dp4", "Terrace Sanctuary", "Mumbai, IN",
            "https://images.unsplash.com/photo-1618221195710-dd6b41faaea6?auto=format&fit=crop&q=80&w=800"),
)

DEFAULT_SERVICES: tuple[Service, ...] = (
    Service("ds1", "Timber Architecture",
            "Specializing in sustainable wood-based interior structural design and custom cabinetry."),
    Service("ds2", "Antique Metal Craft",
            "Curated brass, bronze, and copper finishes to add timeless character to modern spaces."),
    Service("ds3", "Biophilic Palettes",
            "Nature-inspired color consulting focused on yellow-green hues and earth tones."),
)


def sign_in(auth: AuthService, token: str | None = None) -> Session:
    """Token sign-in when a token is available, anonymous otherwise."""
    if token:
        return auth.sign_in_with_token(token)
    return auth.sign_in_anonymously()


def _now_ms() -> int:
    return int(time.time() * 1000)


class StudioCatalog:
    """Live view of the studio's collections plus the admin write operations.

    Empty project/service collections are replaced by the built-in defaults;
    leads have none.
    """

    def __init__(self, store: DocumentStore, app_id: str, clock: Callable[[], int] = _now_ms) -> None:
        self.store = store
        self.app_id = app_id
        self._clock = clock
        self.projects: list[Project] = list(DEFAULT_PROJECTS)
        self.services: list[Service] = list(DEFAULT_SERVICES)
        self.leads: list[Lead] = []
        self.session: Session | None = None

    def collection_path(self, name: str) -> str:
        if name not in COLLECTIONS:
            raise ValueError(f"unknown collection: {name}")
        return f"artifacts/{self.app_id}/public/data/{name}"

    def apply_snapshot(self, name: str, snapshot: Snapshot) -> None:
        if name == PROJECTS:
            self.projects = [Project.from_document(d) for d in snapshot] or list(DEFAULT_PROJECTS)
        elif name == SERVICES:
            self.services = [Service.from_document(d) for d in snapshot] or list(DEFAULT_SERVICES)
        else:
            self.leads = [Lead.from_document(d) for d in snapshot]

    def watch(self, on_change: Callable[[str], None] | None = None) -> Unsubscribe:
        """
        Subscribe to all collections.

        Args:
            on_change: Called with the collection name after each snapshot.

        Returns:
            A callable that cancels all three subscriptions.
        """
        unsubs: list[Unsubscribe] = []
        for name in COLLECTIONS:
            def _on_snapshot(snapshot: Snapshot, name: str = name) -> None:
                self.apply_snapshot(name, snapshot)
                if on_change is not None:
                    on_change(name)

            def _on_error(err: Exception, name: str = name) -> None:
                LOGGER.error("Subscription to %s failed: %s", name, err)

            try:
                unsubs.append(self.store.subscribe(self.collection_path(name), _on_snapshot, _on_error))
            except Exception:
                for unsub in unsubs:
                    unsub()
                raise

        def _unsubscribe_all() -> None:
            for unsub in unsubs:
                unsub()

        return _unsubscribe_all

    def _can_write(self, action: str) -> bool:
        if self.session is None:
            LOGGER.warning("Skipping %s: no signed-in session", action)
            return False
        return True

    def add_project(self, fields: Document) -> str | None:
        """Add a project; skipped (returns None) without a session."""
        if not self._can_write("add_project"):
            return None
        return self.store.add(self.collection_path(PROJECTS), {**fields, "createdAt": self._clock()})

    def add_lead(self, fields: Document) -> str | None:
        if not self._can_write("add_lead"):
            return None
        return self.store.add(self.collection_path(LEADS), {**fields, "timestamp": self._clock()})

    def delete(self, name: str, document_id: str) -> None:
        if not self._can_write("delete"):
            return
        self.store.delete(self.collection_path(name), document_id)

    def follow_session(self, auth: AuthService, on_change: Callable[[str], None] | None = None) -> Unsubscribe:
        """Watch the collections while a session exists; stop on sign-out."""
        active: list[Unsubscribe] = []

        def _on_session(session: Session | None) -> None:
            self.session = session
            while active:
                active.pop()()
            if session is not None:
                LOGGER.info("Session %s active; subscribing to studio collections", session.uid)
                active.append(self.watch(on_change))

        stop_auth = auth.on_session_change(_on_session)

        def _stop() -> None:
            stop_auth()
            self.session = None
            while active:
                active.pop()()

        return _stop
