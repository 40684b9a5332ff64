"""Option lists and bounds shown by the advanced filter form, derived from the catalog."""
from dataclasses import dataclass, field
from datetime import date, timedelta

from caveo.catalog.store import Catalog
from caveo.filters.state import ClosedRange
from caveo.utils import get_config, parse_iso_date

TAG_OPTIONS = ("Organic", "Biodynamic", "Natural wine", "Collection", "Gift", "Rarity")

# Fallback bounds for catalogs without the corresponding data
_EARLIEST_YEAR = 1980
_DEFAULT_MAX_PRICE = 500.0


@dataclass(frozen=True)
class AdvancedFilterFacets:
    """
    Selectable values of the advanced filter form.

    Attributes:
        producers: Distinct producers, sorted.
        grapes: Distinct grapes, sorted.
        countries: Distinct countries, sorted.
        regions: Distinct regions, sorted.
        appellations: Distinct non-blank appellations, sorted.
        locations: Distinct storage locations, sorted case-insensitively.
        quality_levels: Quality levels (no catalog data yet).
        vineyard_sites: Vineyard sites (no catalog data yet).
        bottle_sizes: Bottle sizes in ml.
        tags: Metadata tags.
        vintage_bounds: Oldest to newest vintage.
        drink_window_bounds: Earliest to latest drinking window year.
        price_bounds: Cheapest to most expensive bottle.
        tasting_bounds: Earliest to latest parseable tasting date.
    """
    producers: list[str]
    grapes: list[str]
    countries: list[str]
    regions: list[str]
    appellations: list[str]
    locations: list[str]
    bottle_sizes: list[int]
    vintage_bounds: ClosedRange[int]
    drink_window_bounds: ClosedRange[int]
    price_bounds: ClosedRange[float]
    tasting_bounds: ClosedRange[date]
    quality_levels: list[str] = field(default_factory=list)
    vineyard_sites: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=lambda: list(TAG_OPTIONS))


def _distinct(values) -> list[str]:
    return sorted({v for v in values if v and v.strip()})


def build_facets(catalog: Catalog, today: date | None = None) -> AdvancedFilterFacets:
    """
    Collect the advanced filter form options for a catalog.

    Args:
        catalog: Catalog the options are derived from
        today: Reference date for the fallback bounds, defaults to today

    Returns:
        Facets with sorted option lists and min/max bounds
    """
    today = today or date.today()
    current_year = today.year
    wines = catalog.wines

    years = [w.vintage for w in wines if w.vintage is not None]
    vintage_bounds = ClosedRange[int](
        lower=min(years, default=_EARLIEST_YEAR),
        upper=max(years, default=current_year),
    )

    from_years = [w.drink_window.from_year for w in wines if w.drink_window.from_year is not None]
    to_years = [w.drink_window.to_year for w in wines if w.drink_window.to_year is not None]
    drink_window_bounds = ClosedRange[int](
        lower=min(min(from_years, default=_EARLIEST_YEAR), min(to_years, default=_EARLIEST_YEAR)),
        upper=max(max(from_years, default=current_year), max(to_years, default=current_year)),
    )

    prices = [w.price.amount for w in wines if w.price is not None]
    price_bounds = ClosedRange[float](lower=min(prices, default=0.0), upper=max(prices, default=_DEFAULT_MAX_PRICE))

    dates = [d for d in (parse_iso_date(r.date) for r in catalog.ratings) if d is not None]
    if dates:
        tasting_bounds = ClosedRange[date](lower=min(dates), upper=max(dates))
    else:
        tasting_bounds = ClosedRange[date](lower=today - timedelta(days=365), upper=today)

    return AdvancedFilterFacets(
        producers=_distinct(w.producer for w in wines),
        grapes=_distinct(g for w in wines for g in w.grapes),
        countries=_distinct(w.country for w in wines),
        regions=_distinct(w.region for w in wines),
        appellations=_distinct(w.appellation for w in wines),
        locations=catalog.locations(),
        bottle_sizes=list(get_config().cellar.bottle_size_options),
        vintage_bounds=vintage_bounds,
        drink_window_bounds=drink_window_bounds,
        price_bounds=price_bounds,
        tasting_bounds=tasting_bounds,
    )
