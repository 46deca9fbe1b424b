"""
Display formatting for advocate cards and pagination labels.
"""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"\D")


def format_phone_number(phone_number: str) -> str:
    """
    Format a 10-digit US number as "(555) 123-4567"; return anything else unchanged.
    """
    digits = _NON_DIGITS.sub("", phone_number or "")
    if len(digits) != 10:
        return phone_number
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def years_label(years_of_experience: str, template: str) -> str:
    return template.replace("{years}", str(years_of_experience))


def page_label(current: int, total: int, template: str) -> str:
    return template.replace("{current}", str(current)).replace("{total}", str(total))
