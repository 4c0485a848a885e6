"""Guided-writing templates offered by the story editor toolbar."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StoryTemplate:
    label: str
    body: str


STORY_TEMPLATES: dict[str, StoryTemplate] = {
    "intro": StoryTemplate(
        label="Introduction",
        body="## Introduction\nSum up the core value of your project or product in one paragraph.",
    ),
    "features": StoryTemplate(
        label="Features",
        body="## Features\n- Key benefit 1\n- Key benefit 2\n- Key benefit 3",
    ),
    "production": StoryTemplate(
        label="Production & Shipping",
        body=(
            "## Production & Shipping Plan\n"
            "Describe the production schedule, quality checks, and shipping plan step by step."
        ),
    ),
    "risks": StoryTemplate(
        label="Risks",
        body="## Risks and Mitigation\nExplain the risks you foresee and how you will respond to them.",
    ),
}


def template_for(key: str) -> StoryTemplate:
    try:
        return STORY_TEMPLATES[key]
    except KeyError:
        raise KeyError(f"Unknown story template: {key!r}") from None


__all__ = ["STORY_TEMPLATES", "StoryTemplate", "template_for"]
