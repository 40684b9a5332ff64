"""
Per-wine derived values used by the filters and the sort engine.

All functions are pure: they read a wine, and where needed the catalog, and never
store anything on the wine itself.
"""
from typing import TYPE_CHECKING

from caveo.catalog.models import DrinkWindow, Wine, WineStyle
from caveo.filters.options import (
    BottleClosure,
    DataCompletenessFlag,
    DrinkReadinessOption,
    OpenBottleFreshnessStatus,
    ServingHint,
    WineInventoryStatus,
)
from caveo.utils import get_current_year

if TYPE_CHECKING:
    from caveo.catalog.store import Catalog

# Open bottles past this many days are flagged
FRESHNESS_WARNING_DAYS = 3

# Every bottle in the mock catalog is a standard bottle
DEFAULT_BOTTLE_SIZE_ML = 750

_FAVOURITE_STYLES = {WineStyle.RED, WineStyle.SPARKLING}


def drink_readiness(window: DrinkWindow, current_year: int | None = None) -> DrinkReadinessOption:
    """
    Classify a drinking window against the current year.

    Args:
        window: Drinking window, either bound may be missing
        current_year: Year to evaluate in, defaults to the current calendar year

    Returns:
        too_young before the window opens, past_peak after it closes, closing in its
        last year and optimal otherwise (including windows without any bounds)
    """
    year = current_year if current_year is not None else get_current_year()
    if window.from_year is not None and year < window.from_year:
        return DrinkReadinessOption.TOO_YOUNG
    if window.to_year is not None:
        if year > window.to_year:
            return DrinkReadinessOption.PAST_PEAK
        if year == window.to_year:
            return DrinkReadinessOption.CLOSING
    return DrinkReadinessOption.OPTIMAL


def wine_statuses(wine: Wine, catalog: "Catalog") -> set[WineInventoryStatus]:
    """Inventory statuses of a wine: in stock or depleted, plus open when a bottle is open."""
    statuses = {WineInventoryStatus.IN_STOCK if wine.quantity > 0 else WineInventoryStatus.DEPLETED}
    if catalog.open_bottle(wine) is not None:
        statuses.add(WineInventoryStatus.OPEN)
    return statuses


def freshness_status(wine: Wine, catalog: "Catalog") -> OpenBottleFreshnessStatus | None:
    """Freshness of the wine's open bottle, None when no bottle is open."""
    bottle = catalog.open_bottle(wine)
    if bottle is None:
        return None
    if bottle.days_open <= FRESHNESS_WARNING_DAYS:
        return OpenBottleFreshnessStatus.WITHIN_RECOMMENDATION
    return OpenBottleFreshnessStatus.WARNING_EXCEEDED


def closure_for(wine: Wine) -> BottleClosure:
    """Closure type, derived from the wine style."""
    if wine.style in (WineStyle.SPARKLING, WineStyle.WHITE):
        return BottleClosure.SCREWCAP
    if wine.style in (WineStyle.SWEET, WineStyle.FORTIFIED):
        return BottleClosure.OTHER
    return BottleClosure.CORK


def bottle_size_ml(wine: Wine) -> int:
    return DEFAULT_BOTTLE_SIZE_ML


def serving_hints(wine: Wine) -> set[ServingHint]:
    hints = set()
    if wine.style in (WineStyle.RED, WineStyle.FORTIFIED):
        hints.add(ServingHint.DECANT)
    if wine.style in (WineStyle.SPARKLING, WineStyle.WHITE):
        hints.add(ServingHint.SERVING_TEMPERATURE)
    return hints


def completeness_flags(wine: Wine) -> set[DataCompletenessFlag]:
    """Missing-data flags of a wine."""
    flags = set()
    if not wine.appellation.strip():
        flags.add(DataCompletenessFlag.MISSING_APPELLATION)
    if not wine.grapes:
        flags.add(DataCompletenessFlag.MISSING_GRAPES)
    if not wine.locations:
        flags.add(DataCompletenessFlag.MISSING_LOCATION)
    return flags


def wine_tags(wine: Wine) -> set[str]:
    # no tag metadata in the catalog yet (organic, biodynamic, ...)
    return set()


def is_favourite_style(wine: Wine) -> bool:
    return wine.style in _FAVOURITE_STYLES


def drink_window_start_or_fallback(wine: Wine) -> float:
    """Start of the drinking window, else its end, else infinity."""
    if wine.drink_window.from_year is not None:
        return wine.drink_window.from_year
    if wine.drink_window.to_year is not None:
        return wine.drink_window.to_year
    return float("inf")
