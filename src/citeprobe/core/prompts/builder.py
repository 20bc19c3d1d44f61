"""Prompt builder — expands probe templates into provider prompts."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

from citeprobe.core.models import Competitor, GeneratedProbe, ProbeCategory
from citeprobe.core.prompts.templates import FALLBACK_TEMPLATE, TEMPLATES

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"\{(\w+)\}")

AUDIENCES: tuple[str, ...] = (
    "startups",
    "small businesses",
    "enterprise companies",
    "freelancers",
)
MAX_COMPARED_COMPETITORS: int = 3


def resolve_category(category: ProbeCategory | str) -> ProbeCategory | None:
    """Map a category or its string value to a ProbeCategory, or None if unknown."""
    if isinstance(category, ProbeCategory):
        return category
    try:
        return ProbeCategory(category)
    except ValueError:
        return None


def get_template(category: ProbeCategory | str) -> str | None:
    resolved = resolve_category(category)
    return TEMPLATES[resolved] if resolved is not None else None


def build_prompt(
    query: str,
    category: ProbeCategory | str,
    variables: Mapping[str, str] | None = None,
) -> str:
    """Expand the template for ``category`` into a prompt.

    ``{query}`` is always filled from ``query``; other placeholders are filled
    from ``variables`` when they have a non-empty value and from ``query``
    otherwise, so no placeholder survives. Unknown categories fall back to a
    generic prompt about ``query``.
    """
    query = query or ""
    template = get_template(category)
    if template is None:
        logger.debug("Unknown probe category %r, using fallback prompt", category)
        template = FALLBACK_TEMPLATE

    values: dict[str, str] = {"query": query}
    if variables:
        values.update({k: str(v) for k, v in variables.items() if v})

    return PLACEHOLDER.sub(lambda m: values.get(m.group(1)) or query, template)


def _probe(
    category: ProbeCategory, query: str, variables: dict[str, str]
) -> GeneratedProbe:
    return GeneratedProbe(
        category=category,
        prompt=build_prompt(query, category, variables),
        variables=variables,
    )


def generate_validation_probes(
    brand_name: str,
    category: str,
    competitors: Sequence[str | Competitor] = (),
) -> list[GeneratedProbe]:
    """Generate the full validation probe set for a brand in a category.

    Order: best-of and top-list, then difference and when-to-use against each
    of the first three competitors (blank names are skipped but still use a
    slot), problem-solving, one probe per audience, beginner, budget,
    enterprise, and finally pros-cons on the brand itself.
    """
    capped = list(competitors)[:MAX_COMPARED_COMPETITORS]
    names = [c.name if isinstance(c, Competitor) else c for c in capped]
    names = [n for n in names if n]

    probes = [
        _probe(ProbeCategory.best_of, category, {"query": category}),
        _probe(ProbeCategory.top_list, category, {"query": category}),
    ]

    for competitor in names:
        pair = {"option1": brand_name, "option2": competitor}
        probes.append(_probe(ProbeCategory.difference, category, dict(pair)))
        probes.append(_probe(ProbeCategory.when_to_use, category, dict(pair)))

    probes.append(_probe(
        ProbeCategory.problem_solving,
        category,
        {"problem": f"choosing the right {category}", "category": category},
    ))

    for audience in AUDIENCES:
        probes.append(_probe(
            ProbeCategory.for_audience,
            category,
            {"category": category, "audience": audience},
        ))

    for single in (ProbeCategory.beginner, ProbeCategory.budget, ProbeCategory.enterprise):
        probes.append(_probe(single, category, {"category": category}))

    probes.append(_probe(ProbeCategory.pros_cons, category, {"subject": brand_name}))

    logger.debug(
        "Generated %d validation probes for %r (%d competitors compared)",
        len(probes), brand_name, len(names),
    )
    return probes
