"""
Multi-term advocate search.

Every record is flattened into one lower-cased, space-joined string:
    first name, last name, city, degree, each specialty,
    years of experience, phone number

A query is split on whitespace into lower-cased tokens and a record is kept
only if *every* token is a substring of that string (boolean AND, no scoring).
Matching is plain substring containment, so "john" also matches "Johnson" and
a token may straddle the space between two adjacent fields.

Structured filters (specialty / city / minimum experience) narrow the set
before the text match.

Public API:
    tokenize(raw)                          → list[str]
    searchable_text(advocate)              → str
    filter_advocates(advocates, query)     → list[dict]
    apply_filters(advocates, specialty, city, min_experience) → list[dict]
    search_advocates(advocates, query, ...) → list[dict]
    specialty_options(advocates) / city_options(advocates) → list[str]
"""

from collections.abc import Sequence
from typing import Any

Advocate = dict[str, Any]


def tokenize(raw: str) -> list[str]:
    """Lower-case the query and split it on runs of whitespace."""
    return raw.lower().split()


def searchable_text(advocate: Advocate) -> str:
    """Flatten one advocate into the string that query tokens are tested against."""
    parts = [
        advocate["firstName"].lower(),
        advocate["lastName"].lower(),
        advocate["city"].lower(),
        advocate["degree"].lower(),
        *(s.lower() for s in advocate["specialties"]),
        str(advocate["yearsOfExperience"]),
        str(advocate["phoneNumber"]),
    ]
    return " ".join(parts)


def filter_advocates(advocates: Sequence[Advocate], query: str) -> list[Advocate]:
    """
    Keep the advocates whose searchable text contains every query token.

    Always pass the full record set: filtering an already-filtered list would
    make edits to the query (e.g. backspace) lose records for good.

    An empty or whitespace-only query returns every advocate. Relative order
    is preserved.
    """
    tokens = tokenize(query)
    if not tokens:
        return list(advocates)

    results = []
    for advocate in advocates:
        text = searchable_text(advocate)
        if all(token in text for token in tokens):
            results.append(advocate)
    return results


def apply_filters(
    advocates: Sequence[Advocate],
    specialty: str | None = None,
    city: str | None = None,
    min_experience: int | None = None,
) -> list[Advocate]:
    """
    Equality pre-filter on structured fields. Criteria left as None are ignored.

    specialty:      case-insensitive match against any listed specialty
    city:           case-insensitive match against city
    min_experience: yearsOfExperience must be at least this value
    """
    results = []
    for a in advocates:
        if city and a["city"].lower() != city.lower():
            continue
        if specialty and specialty.lower() not in (s.lower() for s in a["specialties"]):
            continue
        if min_experience is not None and a["yearsOfExperience"] < min_experience:
            continue
        results.append(a)
    return results


def search_advocates(
    advocates: Sequence[Advocate],
    query: str,
    specialty: str | None = None,
    city: str | None = None,
    min_experience: int | None = None,
) -> list[Advocate]:
    """Structured filters first, then the multi-term text match."""
    candidates = apply_filters(advocates, specialty=specialty, city=city,
                               min_experience=min_experience)
    return filter_advocates(candidates, query)


def specialty_options(advocates: Sequence[Advocate]) -> list[str]:
    return sorted({s for a in advocates for s in a["specialties"] if s})


def city_options(advocates: Sequence[Advocate]) -> list[str]:
    return sorted({a["city"] for a in advocates if a["city"]})
