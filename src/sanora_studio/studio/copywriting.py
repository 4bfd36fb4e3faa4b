"""Copy-drafting call sites: design concepts, project blurbs, service copy.

Each call site builds its prompt pair, awaits the generation client and
returns a CopyDraft. Exhaustion stops here and becomes ``CopyDraft.error``.
"""
from __future__ import annotations
import logging
import time
from typing import Protocol

from sanora_studio.common.schema import CopyDraft, GenerationRequest
from sanora_studio.common.templates import build_request
from sanora_studio.generation.errors import GenerationExhausted
from sanora_studio.studio.catalog import Project, Service

LOGGER = logging.getLogger("sanora.studio.copywriting")

CONCEPT = "concept"
PROJECT_BLURB = "project_blurb"
SERVICE_COPY = "service_copy"

GENERATION_FAILED = "Generation failed. Please try again."


class Generator(Protocol):
    async def generate_request(self, request: GenerationRequest) -> str | None:
        ...


async def _draft(client: Generator, kind: str, request: GenerationRequest) -> CopyDraft:
    start = time.monotonic()
    try:
        text = await client.generate_request(request)
    except GenerationExhausted as e:
        LOGGER.error("Drafting %s failed: %s", kind, e)
        return CopyDraft(kind=kind, error=GENERATION_FAILED, latency_ms=int((time.monotonic() - start) * 1000))
    return CopyDraft(kind=kind, text=text, latency_ms=int((time.monotonic() - start) * 1000))


async def draft_concept(client: Generator, brief: str) -> CopyDraft:
    """Design concept for a free-form brief. A blank brief is not sent."""
    if not brief.strip():
        return CopyDraft(kind=CONCEPT)
    return await _draft(client, CONCEPT, build_request(CONCEPT, brief=brief))


async def draft_project_blurb(client: Generator, project: Project) -> CopyDraft:
    request = build_request(PROJECT_BLURB, name=project.name, location=project.location)
    return await _draft(client, PROJECT_BLURB, request)


async def draft_service_copy(client: Generator, service: Service) -> CopyDraft:
    request = build_request(SERVICE_COPY, title=service.title, description=service.description)
    return await _draft(client, SERVICE_COPY, request)
