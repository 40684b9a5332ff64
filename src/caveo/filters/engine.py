"""
Filter and sort facade for the cellar screen.

The presentation layer passes the live search text, its filter state and the
selected sort option and gets back the wines to display. Nothing here keeps
state between calls.
"""
from dataclasses import dataclass
from typing import Iterable

from caveo.catalog.models import Wine
from caveo.catalog.store import Catalog
from caveo.filters.advanced import matches_advanced_filters
from caveo.filters.options import CellarSortOption
from caveo.filters.quick import matches_quick_filters
from caveo.filters.search import matches_search
from caveo.filters.sorting import sort_wines
from caveo.filters.state import CellarFilterState
from caveo.utils import get_config, logger


@dataclass(frozen=True)
class CellarView:
    """
    Result of a cellar list evaluation.

    Attributes:
        wines: Wines to display, filtered and sorted.
        active_filter_count: Number of active quick and advanced filters, shown as the filter badge.
    """
    wines: tuple[Wine, ...]
    active_filter_count: int


def default_sort_option() -> CellarSortOption:
    """Sort option configured in `cellar.default_sort`."""
    return CellarSortOption(get_config().cellar.default_sort)


def is_included(
        wine: Wine,
        search_text: str,
        state: CellarFilterState,
        catalog: Catalog,
        current_year: int | None = None,
) -> bool:
    """
    Decide whether a wine is shown.

    Args:
        wine: Wine to test
        search_text: Live search text
        state: Current filter state, read only
        catalog: Catalog used for ratings and open bottle lookups
        current_year: Year used by the drinking window checks, defaults to the current calendar year

    Returns:
        True if the wine matches the search, the quick filters and the advanced filters
    """
    return (
        matches_search(wine, search_text)
        and matches_quick_filters(wine, state.selected_quick_filters, catalog, current_year)
        and matches_advanced_filters(wine, state.advanced_filters, catalog, current_year)
    )


def filter_wines(
        wines: Iterable[Wine],
        search_text: str,
        state: CellarFilterState,
        catalog: Catalog,
        current_year: int | None = None,
) -> list[Wine]:
    """Keep the wines that pass `is_included`, in input order."""
    return [w for w in wines if is_included(w, search_text, state, catalog, current_year)]


def filtered_wines(
        catalog: Catalog,
        search_text: str = "",
        state: CellarFilterState | None = None,
        current_year: int | None = None,
) -> list[Wine]:
    """All catalog wines matching the search text and filter state, in catalog order."""
    state = state if state is not None else CellarFilterState()
    return filter_wines(catalog.wines, search_text, state, catalog, current_year)


def visible_wines(
        catalog: Catalog,
        search_text: str = "",
        state: CellarFilterState | None = None,
        sort_option: CellarSortOption | str | None = None,
        current_year: int | None = None,
) -> CellarView:
    """
    Compute the cellar list: filter the catalog, then sort the result.

    Args:
        catalog: Loaded catalog
        search_text: Live search text
        state: Current filter state, an empty state when omitted
        sort_option: Sort option, defaults to the configured one
        current_year: Year used by the drinking window checks

    Returns:
        The wines to display and the active filter count
    """
    state = state if state is not None else CellarFilterState()
    option = CellarSortOption(sort_option) if sort_option is not None else default_sort_option()

    matching = filter_wines(catalog.wines, search_text, state, catalog, current_year)
    wines = sort_wines(matching, option, catalog)
    logger.debug(
        f"Cellar view: {len(wines)}/{len(catalog.wines)} wines, "
        f"{state.active_filter_count} active filters, sorted by {option.value}"
    )
    return CellarView(wines=tuple(wines), active_filter_count=state.active_filter_count)
