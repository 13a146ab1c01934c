"""Rule-based category inference."""

from __future__ import annotations

from time_analyzer.categories import CATEGORY_RULES, DEFAULT_CATEGORY, FALLBACK_TERMS
from time_analyzer.schema import Category, ClassifiedEntry, TimeEntry


def classify(description: str) -> Category:
    """Return the first category whose keyword occurs anywhere in the text.

    Matching is plain substring containment on the lowercased description, so
    "recall" counts as a "call". Primary rules are tried in table order, then
    the single-term fallbacks, then ``Miscellaneous``.
    """

    text = description.lower()

    for category, keywords in CATEGORY_RULES:
        if any(keyword in text for keyword in keywords):
            return category

    for term, category in FALLBACK_TERMS:
        if term in text:
            return category

    return DEFAULT_CATEGORY


def classify_entry(entry: TimeEntry) -> ClassifiedEntry:
    return ClassifiedEntry(
        minutes=entry.minutes,
        description=entry.description,
        source_value=entry.source_value,
        source_unit=entry.source_unit,
        category=classify(entry.description),
    )


def classify_entries(entries: list[TimeEntry]) -> list[ClassifiedEntry]:
    """Attach a category to each entry, preserving order."""

    return [classify_entry(entry) for entry in entries]
