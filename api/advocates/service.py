"""
Advocate directory business logic.

Reads the full table through the repository and reshapes each storage row
into the display shape served to the listing view.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from . import repository, schemas

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch advocates"


class AdvocateQueryError(RuntimeError):
    """
    Raised for any failure while reading or reshaping advocate rows.
    """


def _parse_specialties(value: Any) -> list[str]:
    # asyncpg hands jsonb back as text unless a codec is registered.
    if value is None:
        return []
    if isinstance(value, str):
        value = json.loads(value) if value.strip() else []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"specialties must be a list, got {type(value).__name__}")
    return [str(item) for item in value]


def _required_text(row: dict[str, Any], column: str) -> str:
    value = row[column]
    if value is None:
        raise ValueError(f"advocate column {column} is NULL")
    return str(value)


def to_advocate(row: dict[str, Any]) -> schemas.Advocate:
    return schemas.Advocate(
        first_name=_required_text(row, "first_name"),
        last_name=_required_text(row, "last_name"),
        city=_required_text(row, "city"),
        degree=_required_text(row, "degree"),
        specialties=_parse_specialties(row.get("specialties")),
        years_of_experience=_required_text(row, "years_of_experience"),
        phone_number=_required_text(row, "phone_number"),
    )


async def list_advocates() -> list[schemas.Advocate]:
    try:
        rows = await repository.list_advocates()
        advocates = [to_advocate(row) for row in rows]
    except Exception as exc:
        logger.exception("advocates_fetch_failed")
        raise AdvocateQueryError(FETCH_ERROR_MESSAGE) from exc

    logger.info("advocates_fetched count=%s", len(advocates))
    return advocates
