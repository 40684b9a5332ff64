"""Cellar dashboard counts that depend on derived values."""
from caveo.catalog.store import Catalog
from caveo.filters.derived import drink_readiness
from caveo.filters.options import DrinkReadinessOption
from caveo.utils import get_current_year


def _readiness_count(catalog: Catalog, readiness: DrinkReadinessOption, current_year: int | None) -> int:
    year = current_year if current_year is not None else get_current_year()
    return sum(1 for w in catalog.wines if drink_readiness(w.drink_window, year) is readiness)


def ready_count(catalog: Catalog, current_year: int | None = None) -> int:
    """Number of wines whose drinking window contains the current year and does not end in it."""
    return _readiness_count(catalog, DrinkReadinessOption.OPTIMAL, current_year)


def closing_count(catalog: Catalog, current_year: int | None = None) -> int:
    """Number of wines whose drinking window ends this year."""
    return _readiness_count(catalog, DrinkReadinessOption.CLOSING, current_year)
