"""
Advanced filter evaluation.

Each active field of the form is an independent check and all of them must pass.
A check that needs data the wine does not have (no price, no rating, no open
bottle, no parseable tasting date) rejects the wine.
"""
from caveo.catalog.models import Wine
from caveo.catalog.store import Catalog
from caveo.filters.derived import (
    bottle_size_ml,
    closure_for,
    completeness_flags,
    freshness_status,
    is_favourite_style,
    serving_hints,
    wine_tags,
)
from caveo.filters.grapes import grape_matches
from caveo.filters.options import (
    DrinkWindowRelativeOption,
    OpenBottleFreshnessStatus,
    SmartFilterPreset,
)
from caveo.filters.state import AdvancedFilterState
from caveo.utils import get_current_year


def matches_preset(
        preset: SmartFilterPreset,
        wine: Wine,
        catalog: Catalog,
        current_year: int | None = None,
) -> bool:
    """
    Evaluate a smart filter preset.

    Args:
        preset: Preset to evaluate
        wine: Wine to test
        catalog: Catalog used for ratings and open bottle lookups
        current_year: Year used for the drinking window presets

    Returns:
        Whether the wine matches the preset
    """
    year = current_year if current_year is not None else get_current_year()
    window = wine.drink_window

    if preset is SmartFilterPreset.DRINK_READY_TODAY:
        if window.from_year is not None and year < window.from_year:
            return False
        if window.to_year is not None and year > window.to_year:
            return False
        return True
    if preset is SmartFilterPreset.EXPIRING_SOON:
        return window.to_year is not None and window.to_year - year <= 0
    if preset is SmartFilterPreset.RESTOCK_FAVORITES:
        return is_favourite_style(wine) and wine.quantity <= 2
    if preset is SmartFilterPreset.UNRATED:
        return catalog.average_rating(wine) is None
    if preset is SmartFilterPreset.MISSING_METADATA:
        return bool(completeness_flags(wine))
    return freshness_status(wine, catalog) is OpenBottleFreshnessStatus.WARNING_EXCEEDED


def _matches_relative_window(option: DrinkWindowRelativeOption, wine: Wine, year: int) -> bool:
    # year granularity: "six" and "twelve" months both mean at most one calendar year ahead
    window = wine.drink_window
    if option is DrinkWindowRelativeOption.READY_WITHIN_SIX_MONTHS:
        return window.from_year is None or window.from_year - year <= 1
    return window.to_year is not None and window.to_year - year <= 1


def matches_advanced_filters(
        wine: Wine,
        filters: AdvancedFilterState,
        catalog: Catalog,
        current_year: int | None = None,
) -> bool:
    """
    Check a wine against the advanced filter form.

    Args:
        wine: Wine to test
        filters: Advanced filter state, unset fields impose no constraint
        catalog: Catalog used for ratings and open bottle lookups
        current_year: Year used for the relative drinking window and presets

    Returns:
        True if the wine passes every active check
    """
    if filters.producers and wine.producer not in filters.producers:
        return False

    name_query = filters.wine_name_query.strip().lower()
    if name_query and name_query not in wine.name.lower() and name_query not in wine.producer.lower():
        return False

    if filters.styles and wine.style not in filters.styles:
        return False

    if filters.grapes and not any(grape_matches(g, wine.grapes) for g in filters.grapes):
        return False

    if not filters.include_nv and wine.vintage is None:
        return False

    if filters.vintage_range is not None:
        if wine.vintage is None or not filters.vintage_range.contains(wine.vintage):
            return False

    if filters.abv_range is not None:
        if wine.abv is None or not filters.abv_range.contains(wine.abv):
            return False

    if filters.drink_window_range is not None:
        window = wine.drink_window
        lower = window.from_year if window.from_year is not None else float("-inf")
        upper = window.to_year if window.to_year is not None else float("inf")
        if not filters.drink_window_range.overlaps(lower, upper):
            return False

    if filters.relative_drink_window is not None:
        year = current_year if current_year is not None else get_current_year()
        if not _matches_relative_window(filters.relative_drink_window, wine, year):
            return False

    if filters.closures and closure_for(wine) not in filters.closures:
        return False

    if filters.bottle_sizes and bottle_size_ml(wine) not in filters.bottle_sizes:
        return False

    if filters.countries and wine.country not in filters.countries:
        return False

    if filters.regions and wine.region not in filters.regions:
        return False

    if filters.appellations and wine.appellation not in filters.appellations:
        return False

    if filters.storage_locations and filters.storage_locations.isdisjoint(wine.locations):
        return False

    if filters.serving_hints and filters.serving_hints.isdisjoint(serving_hints(wine)):
        return False

    if filters.quantity_filter is not None and not filters.quantity_filter.matches(wine.quantity):
        return False

    if filters.price_range is not None:
        if wine.price is None or not filters.price_range.contains(wine.price.amount):
            return False

    if filters.min_rating is not None or filters.is_rated is not None:
        average = catalog.average_rating(wine)
        if filters.min_rating is not None and (average is None or average < filters.min_rating):
            return False
        if filters.is_rated is not None and (average is not None) != filters.is_rated:
            return False

    if filters.last_tasted_range is not None:
        last_tasted = catalog.last_tasting_date(wine)
        if last_tasted is None or not filters.last_tasted_range.contains(last_tasted):
            return False

    if filters.has_notes is not None and catalog.has_notes(wine) != filters.has_notes:
        return False

    if filters.open_days_range is not None or filters.preservation_methods:
        bottle = catalog.open_bottle(wine)
        if bottle is None:
            return False
        if filters.open_days_range is not None and not filters.open_days_range.contains(bottle.days_open):
            return False
        if filters.preservation_methods and bottle.preservation not in filters.preservation_methods:
            return False

    if filters.freshness_statuses:
        status = freshness_status(wine, catalog)
        if status is None or status not in filters.freshness_statuses:
            return False

    if filters.tags and filters.tags.isdisjoint(wine_tags(wine)):
        return False

    # all selected flags must be present, unlike the any-of multi-selects above
    if filters.completeness_flags and not filters.completeness_flags <= completeness_flags(wine):
        return False

    if filters.smart_preset is not None and not matches_preset(filters.smart_preset, wine, catalog, current_year):
        return False

    return True
