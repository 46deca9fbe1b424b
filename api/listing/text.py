"""
User-facing strings for the advocate listing page.
"""

from __future__ import annotations

TITLE = "Solace Advocates"

SEARCH_PLACEHOLDER = "Search advocates..."
SEARCH_ARIA_LABEL = "Search advocates"
CLEAR_BUTTON = "Clear"
LOCATION_PLACEHOLDER = "All Locations"
LOCATION_ARIA_LABEL = "Filter by location"

PAGINATION_PREVIOUS = "Previous"
PAGINATION_NEXT = "Next"
PAGINATION_PAGE_OF = "Page {current} of {total}"

SPECIALTIES_TITLE = "Specialties"
YEARS_EXPERIENCE = "{years} years exp."

RETRY_BUTTON = "Retry"
GENERIC_ERROR = "An error occurred"
