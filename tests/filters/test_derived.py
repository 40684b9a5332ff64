"""Tests for per-wine derived values."""
import pytest

from caveo.catalog import DrinkWindow, WineStyle
from caveo.filters import (
    BottleClosure,
    DataCompletenessFlag,
    DrinkReadinessOption,
    OpenBottleFreshnessStatus,
    ServingHint,
    WineInventoryStatus,
    drink_readiness,
)
from caveo.filters.derived import (
    closure_for,
    completeness_flags,
    drink_window_start_or_fallback,
    freshness_status,
    serving_hints,
    wine_statuses,
)


class TestDrinkReadiness:
    def test_open_ended_window(self):
        window = DrinkWindow(from_year=2023)
        assert drink_readiness(window, 2022) is DrinkReadinessOption.TOO_YOUNG
        assert drink_readiness(window, 2024) is DrinkReadinessOption.OPTIMAL

    def test_window_without_start(self):
        window = DrinkWindow(to_year=2024)
        assert drink_readiness(window, 2024) is DrinkReadinessOption.CLOSING
        assert drink_readiness(window, 2025) is DrinkReadinessOption.PAST_PEAK

    def test_last_year_is_closing_not_optimal(self):
        window = DrinkWindow(from_year=2020, to_year=2024)
        assert drink_readiness(window, 2023) is DrinkReadinessOption.OPTIMAL
        assert drink_readiness(window, 2024) is DrinkReadinessOption.CLOSING

    def test_single_year_window(self):
        window = DrinkWindow(from_year=2024, to_year=2024)
        assert drink_readiness(window, 2023) is DrinkReadinessOption.TOO_YOUNG
        assert drink_readiness(window, 2024) is DrinkReadinessOption.CLOSING

    def test_no_data_is_optimal(self):
        assert drink_readiness(DrinkWindow(), 1990) is DrinkReadinessOption.OPTIMAL


def test_wine_statuses(catalog, wines):
    assert wine_statuses(wines[0], catalog) == {WineInventoryStatus.IN_STOCK}
    assert wine_statuses(wines[1], catalog) == {WineInventoryStatus.IN_STOCK, WineInventoryStatus.OPEN}
    assert wine_statuses(wines[3], catalog) == {WineInventoryStatus.DEPLETED, WineInventoryStatus.OPEN}


def test_freshness_status(catalog, wines):
    assert freshness_status(wines[1], catalog) is OpenBottleFreshnessStatus.WITHIN_RECOMMENDATION
    assert freshness_status(wines[3], catalog) is OpenBottleFreshnessStatus.WARNING_EXCEEDED
    assert freshness_status(wines[0], catalog) is None


@pytest.mark.parametrize("style, closure", [
    (WineStyle.SPARKLING, BottleClosure.SCREWCAP),
    (WineStyle.WHITE, BottleClosure.SCREWCAP),
    (WineStyle.SWEET, BottleClosure.OTHER),
    (WineStyle.FORTIFIED, BottleClosure.OTHER),
    (WineStyle.RED, BottleClosure.CORK),
    (WineStyle.ROSE, BottleClosure.CORK),
    (WineStyle.ORANGE, BottleClosure.CORK),
])
def test_closure_follows_style(make_wine, style, closure):
    assert closure_for(make_wine(style=style)) is closure


def test_serving_hints(make_wine):
    assert serving_hints(make_wine(style=WineStyle.FORTIFIED)) == {ServingHint.DECANT}
    assert serving_hints(make_wine(style=WineStyle.WHITE)) == {ServingHint.SERVING_TEMPERATURE}
    assert serving_hints(make_wine(style=WineStyle.ROSE)) == set()


def test_completeness_flags(make_wine):
    assert completeness_flags(make_wine()) == set()
    assert completeness_flags(make_wine(appellation=" ", grapes=(), locations=())) == {
        DataCompletenessFlag.MISSING_APPELLATION,
        DataCompletenessFlag.MISSING_GRAPES,
        DataCompletenessFlag.MISSING_LOCATION,
    }


def test_drink_window_start_or_fallback(make_wine):
    assert drink_window_start_or_fallback(make_wine(drink_window=DrinkWindow(from_year=2022, to_year=2030))) == 2022
    assert drink_window_start_or_fallback(make_wine(drink_window=DrinkWindow(to_year=2030))) == 2030
    assert drink_window_start_or_fallback(make_wine()) == float("inf")
