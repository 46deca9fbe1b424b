"""
Advocate listing view.

`ListingView` owns the page state (fetched collection, search term, location
filter, current page, loading/error flags) and exposes the user actions the
page supports. Rendering is left to the caller: `snapshot()` returns a plain
description of what the page shows right now.

Used endpoint:
- GET /api/advocates  -> {"data": [{...}, ...]} or {"error": "..."}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from advocates.schemas import Advocate
from core import settings

from . import derive, formatters, text

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch advocates"
SKELETON_CARD_COUNT = 6


class ListingFetchError(RuntimeError):
    pass


@dataclass(frozen=True)
class AdvocateCard:
    full_name: str
    city: str
    degree: str
    specialties: tuple[str, ...]
    experience_label: str
    phone_href: str
    phone_display: str


@dataclass(frozen=True)
class Pagination:
    page: int
    total_pages: int
    label: str
    has_previous: bool
    has_next: bool


@dataclass(frozen=True)
class ListingSnapshot:
    title: str
    search_term: str
    location_filter: str
    location_options: tuple[str, ...]
    is_loading: bool
    search_placeholder: str
    search_aria_label: str
    location_aria_label: str
    clear_label: str
    specialties_title: str
    skeleton_count: int = 0
    cards: tuple[AdvocateCard, ...] = ()
    pagination: Pagination | None = None
    error: str | None = None
    retry_label: str | None = None


def _to_card(advocate: Advocate) -> AdvocateCard:
    return AdvocateCard(
        full_name=f"{advocate.first_name} {advocate.last_name}",
        city=advocate.city,
        degree=advocate.degree,
        specialties=tuple(advocate.specialties),
        experience_label=formatters.years_label(advocate.years_of_experience, text.YEARS_EXPERIENCE),
        phone_href=f"tel:{advocate.phone_number}",
        phone_display=formatters.format_phone_number(advocate.phone_number),
    )


def _parse_payload(payload: Any) -> list[Advocate]:
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise ListingFetchError(FETCH_ERROR_MESSAGE)
    return [Advocate.model_validate(item) for item in payload["data"]]


@dataclass
class ListingView:
    base_url: str = field(default_factory=settings.advocates_api_base_url)
    page_size: int = field(default_factory=settings.advocates_page_size)
    transport: httpx.AsyncBaseTransport | None = None
    # No timeout: a hung request keeps the view in its loading state.
    timeout_s: float | None = None

    all_advocates: list[Advocate] = field(default_factory=list)
    search_term: str = ""
    location_filter: str = ""
    page: int = 1
    is_loading: bool = False
    error: str | None = None

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    # -- fetching ---------------------------------------------------------

    async def load(self) -> None:
        """
        Fetch the full collection once. Failures land in `self.error`.
        """
        self.is_loading = True
        self.error = None
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                transport=self.transport,
                timeout=self.timeout_s,
            ) as client:
                resp = await client.get("/api/advocates")

            if not resp.is_success:
                raise ListingFetchError(FETCH_ERROR_MESSAGE)

            self.all_advocates = _parse_payload(resp.json())
        except (httpx.HTTPError, ListingFetchError, ValueError) as exc:
            logger.warning("listing_fetch_failed base_url=%s error=%s", self.base_url, exc)
            self.error = str(exc) or text.GENERIC_ERROR
        finally:
            self.is_loading = False

    async def retry(self) -> None:
        await self.load()

    async def clear(self) -> None:
        """
        Reset search and location, then fetch the collection again.
        """
        self.search_term = ""
        self.location_filter = ""
        await self.load()

    # -- user input -------------------------------------------------------

    def set_search_term(self, term: str) -> None:
        self.search_term = term
        self.page = 1

    def set_location_filter(self, city: str) -> None:
        # Unlike search, the page is kept; a page past the end shows no cards.
        self.location_filter = city

    def go_to_page(self, page: int) -> None:
        self.page = min(max(page, 1), max(self.total_pages, 1))

    def next_page(self) -> None:
        self.go_to_page(self.page + 1)

    def previous_page(self) -> None:
        self.go_to_page(self.page - 1)

    # -- derived state ----------------------------------------------------

    @property
    def unique_cities(self) -> list[str]:
        return derive.unique_cities(self.all_advocates)

    @property
    def filtered_advocates(self) -> list[Advocate]:
        return derive.filter_advocates(
            self.all_advocates,
            search_term=self.search_term,
            city=self.location_filter,
        )

    @property
    def total_pages(self) -> int:
        return derive.total_pages(len(self.filtered_advocates), self.page_size)

    @property
    def paginated_advocates(self) -> list[Advocate]:
        return derive.paginate(self.filtered_advocates, page=self.page, page_size=self.page_size)

    def snapshot(self) -> ListingSnapshot:
        location_options = (text.LOCATION_PLACEHOLDER, *self.unique_cities)
        base = {
            "title": text.TITLE,
            "search_term": self.search_term,
            "location_filter": self.location_filter,
            "location_options": location_options,
            "is_loading": self.is_loading,
            "search_placeholder": text.SEARCH_PLACEHOLDER,
            "search_aria_label": text.SEARCH_ARIA_LABEL,
            "location_aria_label": text.LOCATION_ARIA_LABEL,
            "clear_label": text.CLEAR_BUTTON,
            "specialties_title": text.SPECIALTIES_TITLE,
        }

        if self.error:
            return ListingSnapshot(**base, error=self.error, retry_label=text.RETRY_BUTTON)

        if self.is_loading:
            return ListingSnapshot(**base, skeleton_count=SKELETON_CARD_COUNT)

        total = self.total_pages
        pagination = None
        if total > 1:
            pagination = Pagination(
                page=self.page,
                total_pages=total,
                label=formatters.page_label(self.page, total, text.PAGINATION_PAGE_OF),
                has_previous=self.page > 1,
                has_next=self.page < total,
            )
        return ListingSnapshot(
            **base,
            cards=tuple(_to_card(a) for a in self.paginated_advocates),
            pagination=pagination,
        )
