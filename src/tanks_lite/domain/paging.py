from __future__ import annotations

import logging
import math
from typing import Iterable

logger = logging.getLogger(__name__)


DEFAULT_PAGE_SIZE_OPTIONS: tuple[int, ...] = (10, 25, 50)


def normalize_page_size_options(options: Iterable[int] | None) -> tuple[int, ...]:
    """
    Normalize configured page-size options.

    Drops non-positive values, removes duplicates and sorts ascending.
    Falls back to DEFAULT_PAGE_SIZE_OPTIONS when nothing usable remains.

    Args:
        options: Configured options (None means "use the defaults")

    Returns:
        Non-empty ascending tuple of positive page sizes
    """
    if options is None:
        return DEFAULT_PAGE_SIZE_OPTIONS

    configured = list(options)
    usable = sorted({value for value in configured if value > 0})
    if not usable:
        logger.debug(
            "No usable page size options, falling back to defaults",
            extra={"options": configured},
        )
        return DEFAULT_PAGE_SIZE_OPTIONS

    return tuple(usable)


def resolve_page_size(options: tuple[int, ...], initial_page_size: int | None) -> int:
    """
    Pick the starting page size.

    Returns initial_page_size when it is one of the options, otherwise the
    smallest option. Invalid values are ignored silently.
    """
    if initial_page_size is not None and initial_page_size in options:
        return initial_page_size

    if initial_page_size is not None:
        logger.debug(
            "Initial page size is not a configured option",
            extra={"initial_page_size": initial_page_size, "options": options},
        )
    return options[0]


def count_pages(item_count: int, page_size: int) -> int:
    """Number of pages needed for item_count items (at least 1)."""
    return max(1, math.ceil(item_count / page_size))


class Pagination:
    """
    Page / page-size state for a client-side paginated list.

    Invariants (hold after every public method returns):
        - page_size is one of options
        - 1 <= page <= total_pages
        - total_pages == max(1, ceil(filtered_count / page_size))

    filtered_count only changes through reconcile(), which the owner calls
    whenever the filtered result changes (new data, new query).
    """

    def __init__(
        self,
        options: Iterable[int] | None = None,
        initial_page_size: int | None = None,
    ) -> None:
        self._options = normalize_page_size_options(options)
        self._page_size = resolve_page_size(self._options, initial_page_size)
        self._page = 1
        self._filtered_count = 0

    @property
    def options(self) -> tuple[int, ...]:
        return self._options

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_pages(self) -> int:
        return count_pages(self._filtered_count, self._page_size)

    @property
    def has_previous(self) -> bool:
        return self._page > 1

    @property
    def has_next(self) -> bool:
        return self._page < self.total_pages

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Return to the first page (used when the query changes)."""
        self._page = 1

    def set_page_size(self, page_size: int) -> bool:
        """
        Switch to another configured page size and return to page 1.

        Returns:
            True if the page size was accepted, False if it is not an option
        """
        if page_size not in self._options:
            logger.debug(
                "Ignoring page size that is not a configured option",
                extra={"page_size": page_size, "options": self._options},
            )
            return False

        self._page_size = page_size
        self._page = 1
        return True

    def set_options(self, options: Iterable[int] | None) -> None:
        """
        Replace the configured page-size options.

        If the active page size is no longer an option, the smallest option
        becomes active and the page resets to 1.
        """
        self._options = normalize_page_size_options(options)
        if self._page_size not in self._options:
            self._page_size = self._options[0]
            self._page = 1

    def next_page(self) -> None:
        self._page = min(self.total_pages, self._page + 1)

    def prev_page(self) -> None:
        self._page = max(1, self._page - 1)

    def first_page(self) -> None:
        self._page = 1

    def last_page(self) -> None:
        self._page = self.total_pages

    def go_to_page(self, page: int) -> None:
        """Jump to a page, clamped into [1, total_pages]."""
        self._page = min(max(1, page), self.total_pages)

    def reconcile(self, filtered_count: int) -> None:
        """
        Record the size of the filtered result and clamp the page.

        Must run after every filter or data change, before rendering.
        """
        self._filtered_count = max(0, filtered_count)
        if self._page > self.total_pages:
            self._page = self.total_pages
