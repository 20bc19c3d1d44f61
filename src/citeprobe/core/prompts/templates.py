"""Prompt templates for every probe category."""

from __future__ import annotations

from types import MappingProxyType

from citeprobe.core.models import CategoryType, ProbeCategory, ProbeCategoryInfo

STANDARD_TEMPLATES: dict[ProbeCategory, str] = {
    ProbeCategory.best_of: (
        "What are the best {query}? Please provide a detailed list with recommendations."
    ),
    ProbeCategory.top_list: (
        "What are the top 10 {query}? Rank them from best to worst with brief explanations."
    ),
    ProbeCategory.comparison: (
        "Compare the leading {query}. What are the pros and cons of each?"
    ),
    ProbeCategory.how_to: (
        "How do I choose the right {query}? "
        "What factors should I consider and what do you recommend?"
    ),
    ProbeCategory.recommendation: (
        "I need a recommendation for {query}. What would you suggest and why?"
    ),
    ProbeCategory.alternative: (
        "What are the best alternatives for {query}? Compare them in detail."
    ),
}

VALIDATION_TEMPLATES: dict[ProbeCategory, str] = {
    ProbeCategory.difference: (
        "What is the difference between {option1} and {option2}? "
        "Explain the key distinctions."
    ),
    ProbeCategory.when_to_use: (
        "When should I use {option1} instead of {option2}? "
        "Describe the situations where each is the better fit."
    ),
    ProbeCategory.problem_solving: (
        "What is the best way to handle {problem}? "
        "Which {category} tools would you recommend?"
    ),
    ProbeCategory.for_audience: (
        "What is the best {category} for {audience}? Explain why it fits their needs."
    ),
    ProbeCategory.beginner: (
        "What is the easiest {category} for beginners to get started with?"
    ),
    ProbeCategory.budget: (
        "What is the most affordable {category} that is still high quality?"
    ),
    ProbeCategory.enterprise: (
        "Which {category} is best suited for large enterprises, and why?"
    ),
    ProbeCategory.pros_cons: (
        "What are the pros and cons of {subject}? Give an honest assessment."
    ),
    ProbeCategory.what_is: (
        "What is {subject} and what is it used for?"
    ),
    ProbeCategory.use_case: (
        "Which {category} is best for {requirement}? Recommend specific options."
    ),
}

TEMPLATES = MappingProxyType({**STANDARD_TEMPLATES, **VALIDATION_TEMPLATES})
"""Read-only mapping of every probe category to its template."""

FALLBACK_TEMPLATE = (
    "Tell me about {query}. What are the leading options and what would you recommend?"
)

_LABELS: dict[ProbeCategory, tuple[str, str]] = {
    ProbeCategory.best_of: ("Best Of", "Asks for the best options in a category"),
    ProbeCategory.top_list: ("Top 10 List", "Asks for a ranked top-10 list"),
    ProbeCategory.comparison: ("Comparison", "Compares the leading options"),
    ProbeCategory.how_to: ("How To Choose", "Asks how to choose and what to pick"),
    ProbeCategory.recommendation: ("Recommendation", "Asks for a direct recommendation"),
    ProbeCategory.alternative: ("Alternatives", "Asks for alternatives to an option"),
    ProbeCategory.difference: ("Difference", "Difference between two named options"),
    ProbeCategory.when_to_use: ("When To Use", "When one option beats another"),
    ProbeCategory.problem_solving: ("Problem Solving", "Tools that solve a specific problem"),
    ProbeCategory.for_audience: ("For Audience", "Best option for a specific audience"),
    ProbeCategory.beginner: ("Beginner", "Easiest option to get started with"),
    ProbeCategory.budget: ("Budget", "Most affordable quality option"),
    ProbeCategory.enterprise: ("Enterprise", "Best option for large organizations"),
    ProbeCategory.pros_cons: ("Pros and Cons", "Honest assessment of a named option"),
    ProbeCategory.what_is: ("What Is", "Definition of a named option"),
    ProbeCategory.use_case: ("Use Case", "Best option for a stated requirement"),
}


def list_probe_categories() -> list[ProbeCategoryInfo]:
    """List every category with its label and whether it is a validation probe."""
    return [
        ProbeCategoryInfo(
            category=category,
            label=_LABELS[category][0],
            description=_LABELS[category][1],
            type=(
                CategoryType.validation
                if category in VALIDATION_TEMPLATES
                else CategoryType.standard
            ),
        )
        for category in ProbeCategory
    ]
