"""Sort engine for the cellar list."""
from typing import Callable, Iterable

from caveo.catalog.models import Wine
from caveo.catalog.store import Catalog
from caveo.filters.derived import drink_window_start_or_fallback
from caveo.filters.options import CellarSortOption


def _sort_key(option: CellarSortOption, catalog: Catalog) -> tuple[Callable[[Wine], object], bool]:
    """Returns the key function and the `reverse` flag of a sort option."""
    if option is CellarSortOption.RECENTLY_ADDED:
        return (lambda w: w.id), True
    if option is CellarSortOption.DRINK_WINDOW_SOONEST:
        return drink_window_start_or_fallback, False
    if option is CellarSortOption.RATING_HIGH_TO_LOW:
        def rating_key(w: Wine):
            average = catalog.average_rating(w)
            return -(average if average is not None else -1), w.producer
        return rating_key, False
    if option is CellarSortOption.PRICE_ASCENDING:
        return (lambda w: w.price.amount if w.price is not None else float("inf")), False
    if option is CellarSortOption.PRICE_DESCENDING:
        return (lambda w: w.price.amount if w.price is not None else 0), True
    if option is CellarSortOption.VINTAGE_NEWEST:
        return (lambda w: w.vintage if w.vintage is not None else float("-inf")), True
    if option is CellarSortOption.VINTAGE_OLDEST:
        return (lambda w: w.vintage if w.vintage is not None else float("inf")), False
    if option is CellarSortOption.QUANTITY_HIGH_TO_LOW:
        return (lambda w: w.quantity), True
    return (lambda w: w.quantity), False


def sort_wines(wines: Iterable[Wine], option: CellarSortOption | str, catalog: Catalog) -> list[Wine]:
    """
    Order wines by a sort option.

    The sort is stable, wines that compare equal keep their relative order.
    Missing values sort last: no price, no vintage, no rating and no drinking window.

    Args:
        wines: Wines to sort
        option: Sort option or its value
        catalog: Catalog used for average ratings

    Returns:
        New sorted list
    """
    key, reverse = _sort_key(CellarSortOption(option), catalog)
    return sorted(wines, key=key, reverse=reverse)
