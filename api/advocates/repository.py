"""
Advocate persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_advocates() -> list[dict[str, Any]]:
    """
    Return every advocate row. The whole table is always returned;
    filtering and paging happen in the listing view.
    """
    return await db.fetch_all(
        """
        SELECT id, first_name, last_name, city, degree, specialties,
               years_of_experience, phone_number, created_at
        FROM advocates
        ORDER BY id ASC
        """
    )
