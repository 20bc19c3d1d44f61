"""Probe prompt templates and builders."""

from citeprobe.core.prompts.builder import (
    AUDIENCES,
    build_prompt,
    generate_validation_probes,
    get_template,
    resolve_category,
)
from citeprobe.core.prompts.templates import TEMPLATES, list_probe_categories

__all__ = [
    "AUDIENCES",
    "TEMPLATES",
    "build_prompt",
    "generate_validation_probes",
    "get_template",
    "list_probe_categories",
    "resolve_category",
]
