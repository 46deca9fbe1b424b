"""
Pure derivations over the in-memory advocate collection.

Everything here is side-effect free: the listing view keeps the state and
calls these functions to compute what to show.

Order is always the order the endpoint returned; filtering is stable and
pagination is a plain slice of the filtered list.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from advocates.schemas import Advocate


def unique_cities(advocates: Sequence[Advocate]) -> list[str]:
    """
    Distinct cities across the full collection, sorted ascending.
    """
    return sorted({advocate.city for advocate in advocates})


def matches_search(advocate: Advocate, search_term: str) -> bool:
    if not search_term:
        return True

    needle = search_term.lower()
    fields = (
        advocate.first_name,
        advocate.last_name,
        advocate.city,
        advocate.degree,
        *advocate.specialties,
        str(advocate.years_of_experience),
    )
    return any(needle in field.lower() for field in fields)


def matches_location(advocate: Advocate, city: str) -> bool:
    return not city or advocate.city == city


def filter_advocates(
    advocates: Sequence[Advocate],
    *,
    search_term: str = "",
    city: str = "",
) -> list[Advocate]:
    if not search_term and not city:
        return list(advocates)
    return [
        advocate
        for advocate in advocates
        if matches_search(advocate, search_term) and matches_location(advocate, city)
    ]


def total_pages(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    return math.ceil(count / page_size)


def paginate(filtered: Sequence[Advocate], *, page: int, page_size: int) -> list[Advocate]:
    """
    Slice `filtered` to the 1-based `page`. Pages past the end are empty.
    """
    if page_size < 1:
        raise ValueError("page_size must be >= 1")
    if page < 1:
        return []
    start = (page - 1) * page_size
    return list(filtered[start : start + page_size])
