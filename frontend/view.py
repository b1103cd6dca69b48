"""
Presentation helpers for the Streamlit page, kept free of Streamlit calls.
"""

from collections.abc import Sequence
from typing import Any

Advocate = dict[str, Any]

NO_ADVOCATES = (
    "No advocates available",
    "There are currently no advocates in the system. Please check back later.",
)
NO_MATCHES = (
    "No advocates found",
    "Try adjusting your search terms or reset the search to see all advocates.",
)


def advocate_rows(advocates: Sequence[Advocate]) -> list[dict[str, str]]:
    """One table row per advocate, columns in display order."""
    return [
        {
            "Name": f"{a['firstName']} {a['lastName']}",
            "Location": a["city"],
            "Credentials": a["degree"],
            "Specialties": ", ".join(a["specialties"]),
            "Experience": f"{a['yearsOfExperience']} years",
            "Contact": str(a["phoneNumber"]),
        }
        for a in advocates
    ]


def result_summary(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} advocates"


def empty_state(total: int, shown: int) -> tuple[str, str] | None:
    """(heading, message) for an empty table, or None when there are rows."""
    if total == 0:
        return NO_ADVOCATES
    if shown == 0:
        return NO_MATCHES
    return None
