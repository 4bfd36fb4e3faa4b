from __future__ import annotations

import asyncio

from conftest import candidate, server_error
from sanora_studio.studio.catalog import DEFAULT_PROJECTS, DEFAULT_SERVICES
from sanora_studio.studio.copywriting import (
    GENERATION_FAILED,
    draft_concept,
    draft_project_blurb,
    draft_service_copy,
)


def test_concept_success(make_client) -> None:
    client, endpoint = make_client(candidate("The Canopy Reading Room."))
    draft = asyncio.run(draft_concept(client, "A sun-drenched library"))
    assert draft.ok
    assert draft.kind == "concept"
    assert draft.text == "The Canopy Reading Room."
    assert endpoint.body()["contents"][0]["parts"][0]["text"] == "A sun-drenched library"


def test_blank_brief_is_not_sent(make_client) -> None:
    client, endpoint = make_client(candidate("unused"))
    draft = asyncio.run(draft_concept(client, "   "))
    assert draft.empty
    assert endpoint.calls == 0


def test_project_blurb_uses_project_fields(make_client) -> None:
    client, endpoint = make_client(candidate("Oak and light."))
    draft = asyncio.run(draft_project_blurb(client, DEFAULT_PROJECTS[0]))
    assert draft.text == "Oak and light."
    prompt = endpoint.body()["contents"][0]["parts"][0]["text"]
    assert "The Oak Pavilion" in prompt
    assert "Vancouver, BC" in prompt


def test_service_copy_uses_service_fields(make_client) -> None:
    client, endpoint = make_client(candidate("Brass, patiently aged."))
    draft = asyncio.run(draft_service_copy(client, DEFAULT_SERVICES[1]))
    assert draft.ok
    prompt = endpoint.body()["contents"][0]["parts"][0]["text"]
    assert "Antique Metal Craft" in prompt


def test_exhaustion_becomes_visible_error(make_client, sleep) -> None:
    client, endpoint = make_client(server_error())
    draft = asyncio.run(draft_project_blurb(client, DEFAULT_PROJECTS[2]))
    assert not draft.ok
    assert draft.error == GENERATION_FAILED
    assert draft.text is None
    assert endpoint.calls == 5
    assert sum(sleep.delays) == 31


def test_empty_model_output_is_not_an_error(make_client) -> None:
    client, _ = make_client({"candidates": []})
    draft = asyncio.run(draft_concept(client, "A terrace garden"))
    assert draft.ok
    assert draft.empty
