"""Prompt templating helpers."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger("food_advice.templates")

PromptTemplate = dict[str, Any]

BUILTIN_TEMPLATES: dict[str, PromptTemplate] = {
    "inline": {
        "system": None,
        "user": (
            "Dame 3 consejos muy cortos en español para cocinar o aprovechar: {{food}}. "
            "Solo los consejos, sin introducción."
        ),
    },
    "system": {
        "system": (
            "Eres un asistente de cocina. Responde siempre en español con exactamente "
            "3 consejos muy cortos para cocinar o aprovechar el alimento que indique el "
            "usuario. Usa una lista numerada (1., 2., 3.), un consejo por línea. "
            "No escribas introducción, razonamiento, conclusión ni emojis."
        ),
        "user": "{{food}}",
    },
}

def load_templates(path: str = "configs/prompts.yaml") -> dict[str, PromptTemplate]:
    """
    Load prompt strategies, overriding the built-ins with entries from a YAML file.

    Args:
        path: YAML file with a top-level ``strategies`` mapping.

    Returns:
        Mapping of strategy name to ``{"system": str | None, "user": str}``.
    """
    templates = {name: dict(tpl) for name, tpl in BUILTIN_TEMPLATES.items()}
    cfg_path = Path(path)
    if not cfg_path.exists():
        LOGGER.warning("Prompt file %s not found; using built-in prompts", path)
        return templates

    with open(cfg_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    for name, tpl in (cfg.get("strategies") or {}).items():
        if not isinstance(tpl, dict) or not isinstance(tpl.get("user"), str):
            raise ValueError(f"Prompt strategy {name!r} in {path} needs a 'user' string")
        merged = templates.get(name, {"system": None})
        merged.update({"system": tpl.get("system", merged.get("system")), "user": tpl["user"]})
        templates[name] = merged
    return templates

def render_prompt(template: str, food: str) -> str:
    """
    Render the food name into a template.

    Args:
        template: Template content containing {{food}}.
        food: Food name from the request.

    Returns:
        Rendered prompt.
    """
    return template.replace("{{food}}", food)

def build_messages(template: PromptTemplate, food: str) -> list[dict[str, str]]:
    """Chat messages for one strategy: optional system instruction, then the user turn."""
    messages = []
    if template.get("system"):
        messages.append({"role": "system", "content": render_prompt(template["system"], food)})
    messages.append({"role": "user", "content": render_prompt(template["user"], food)})
    return messages
