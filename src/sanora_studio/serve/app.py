"""FastAPI service exposing the copy-drafting call sites.

Endpoints:
- GET /health
- POST /concepts        { "brief": "..." }
- POST /projects/blurb  { "name": "...", "location": "..." }
- POST /services/copy   { "title": "...", "description": "..." }
"""
from __future__ import annotations
import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel, Field

from sanora_studio.common.config import Settings, load_settings
from sanora_studio.common.logging_setup import set_level, setup_logging
from sanora_studio.common.schema import CopyDraft
from sanora_studio.generation.client import GenerationClient
from sanora_studio.studio.catalog import Project, Service
from sanora_studio.studio.copywriting import draft_concept, draft_project_blurb, draft_service_copy

LOGGER = logging.getLogger("sanora.serve.app")


class ConceptIn(BaseModel):
    brief: str = Field(min_length=1)

class ProjectBlurbIn(BaseModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)

class ServiceCopyIn(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""

class DraftOut(BaseModel):
    kind: str
    text: str | None = None
    latency_ms: int


def get_client(request: Request) -> GenerationClient:
    return request.app.state.generation_client


def _to_response(draft: CopyDraft) -> DraftOut:
    if not draft.ok:
        raise HTTPException(status_code=502, detail="Upstream generation failed")
    return DraftOut(kind=draft.kind, text=draft.text, latency_ms=draft.latency_ms)


def create_app(settings: Settings | None = None, client: GenerationClient | None = None) -> FastAPI:
    """
    Build the API around one GenerationClient.

    Args:
        settings: Loaded from configs/env when omitted.
        client: Built from settings when omitted; tests pass a fake-backed one.
    """
    settings = settings or load_settings()
    client = client or GenerationClient.from_settings(settings)

    app = FastAPI(title="SANORA Studio copy drafting")
    app.state.settings = settings
    app.state.generation_client = client
    LOGGER.info("Serving drafts with model %s", client.model)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "model": client.model}

    @app.post("/concepts", response_model=DraftOut)
    async def concepts(body: ConceptIn, gen: GenerationClient = Depends(get_client)) -> DraftOut:
        return _to_response(await draft_concept(gen, body.brief))

    @app.post("/projects/blurb", response_model=DraftOut)
    async def project_blurb(body: ProjectBlurbIn, gen: GenerationClient = Depends(get_client)) -> DraftOut:
        project = Project(id="", name=body.name, location=body.location)
        return _to_response(await draft_project_blurb(gen, project))

    @app.post("/services/copy", response_model=DraftOut)
    async def service_copy(body: ServiceCopyIn, gen: GenerationClient = Depends(get_client)) -> DraftOut:
        service = Service(id="", title=body.title, description=body.description)
        return _to_response(await draft_service_copy(gen, service))

    return app


def main() -> None:
    import uvicorn

    setup_logging()
    settings = load_settings()
    set_level(settings.log_level)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
