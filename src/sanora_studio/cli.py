"""Draft studio copy from the command line.

    sanora-draft concept --brief "A sun-drenched library with a view of the forest"
    sanora-draft blurb --name "The Oak Pavilion" --location "Vancouver, BC"
    sanora-draft service --title "Timber Architecture" --description "..."
"""
from __future__ import annotations
import argparse
import asyncio
import logging
import sys

from sanora_studio.common.config import load_settings
from sanora_studio.common.logging_setup import set_level, setup_logging
from sanora_studio.common.schema import CopyDraft
from sanora_studio.generation.client import GenerationClient
from sanora_studio.studio.catalog import Project, Service
from sanora_studio.studio.copywriting import draft_concept, draft_project_blurb, draft_service_copy

LOGGER = logging.getLogger("sanora.cli")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Draft SANORA marketing copy with the generation API")
    ap.add_argument("--cfg", default=None, help="Config path (default: $SANORA_CONFIG or configs/studio.yaml)")
    sub = ap.add_subparsers(dest="kind", required=True)

    concept = sub.add_parser("concept", help="Design concept from a brief")
    concept.add_argument("--brief", required=True)

    blurb = sub.add_parser("blurb", help="Marketing blurb for a project")
    blurb.add_argument("--name", required=True)
    blurb.add_argument("--location", required=True)

    service = sub.add_parser("service", help="Website copy for a service")
    service.add_argument("--title", required=True)
    service.add_argument("--description", default="")
    return ap


async def run(args: argparse.Namespace, client: GenerationClient) -> CopyDraft:
    if args.kind == "concept":
        return await draft_concept(client, args.brief)
    if args.kind == "blurb":
        return await draft_project_blurb(client, Project(id="", name=args.name, location=args.location))
    return await draft_service_copy(client, Service(id="", title=args.title, description=args.description))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    settings = load_settings(args.cfg)
    set_level(settings.log_level)

    draft = asyncio.run(run(args, GenerationClient.from_settings(settings)))
    LOGGER.info("Latency: %sms", draft.latency_ms)
    if not draft.ok:
        print(draft.error, file=sys.stderr)
        return 1
    print(draft.text or "")
    return 0


if __name__ == "__main__":
    sys.exit(main())
