"""Prompt templating helpers and the studio's prompt/system-instruction pairs."""
from __future__ import annotations
import re
from dataclasses import dataclass

from sanora_studio.common.schema import GenerationRequest

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


@dataclass(frozen=True)
class PromptTemplate:
    prompt: str
    system_instruction: str


TEMPLATES: dict[str, PromptTemplate] = {
    "concept": PromptTemplate(
        prompt="{{brief}}",
        system_instruction=(
            "You are SANORA's lead interior architect. Based on the user's brief, "
            "provide a sophisticated design concept including: "
            "1. A poetic name for the space. "
            "2. A 3-sentence description of the atmosphere. "
            "3. Suggested materials (mention wood types, antique finishes). "
            "4. A specific biophilic color accent (like wasabi, olive, or sage). "
            "Keep it professional and architectural."
        ),
    ),
    "project_blurb": PromptTemplate(
        prompt=(
            'Write a short, luxury-focused marketing blurb for a project named "{{name}}" '
            'located in "{{location}}". Focus on organic materials and high-end design.'
        ),
        system_instruction=(
            "You are a professional architectural copywriter. Write exactly two "
            "sentences. Be elegant and sophisticated."
        ),
    ),
    "service_copy": PromptTemplate(
        prompt=(
            'Rewrite the description of the studio service "{{title}}" for the website. '
            'Current description: "{{description}}". Emphasise craft, natural materials '
            "and timeless finishes."
        ),
        system_instruction=(
            "You are a professional architectural copywriter. Write at most three "
            "sentences. Be elegant and sophisticated."
        ),
    ),
}


def render_prompt(template: str, **fields: str) -> str:
    """
    Render fields into the template.

    Args:
        template: Template content containing {{name}} placeholders.
        fields: Values for every placeholder in the template.

    Returns:
        Rendered prompt. Values are inserted verbatim.

    Raises:
        KeyError: a placeholder has no value.
    """
    def _sub(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in fields:
            raise KeyError(f"missing template field: {name}")
        return str(fields[name])

    return _PLACEHOLDER.sub(_sub, template)


def build_request(kind: str, **fields: str) -> GenerationRequest:
    """Build the GenerationRequest for one of the named templates."""
    try:
        tpl = TEMPLATES[kind]
    except KeyError:
        raise ValueError(f"unknown template kind: {kind}") from None
    return GenerationRequest(
        prompt=render_prompt(tpl.prompt, **fields),
        system_instruction=render_prompt(tpl.system_instruction, **fields),
    )
