from datetime import date

from caveo.catalog import Catalog
from caveo.filters import build_facets
from caveo.filters.facets import TAG_OPTIONS


def test_option_lists_are_sorted_and_distinct(catalog):
    facets = build_facets(catalog, today=date(2024, 5, 1))
    assert facets.producers == ["Becker", "Billecart-Salmon", "Loosen", "Moric", "Wittmann"]
    assert facets.grapes == ["Blaufränkisch", "Chardonnay", "Pinot Noir", "Riesling", "Spätburgunder"]
    assert facets.countries == ["Austria", "France", "Germany"]
    assert facets.appellations == ["Champagne AOC", "Mittelburgenland", "Schweigen", "Wehlen"]
    assert facets.locations == ["cellar shelf 3", "fridge", "Rack A1", "Rack B2"]


def test_fixed_options(catalog):
    facets = build_facets(catalog, today=date(2024, 5, 1))
    assert facets.bottle_sizes == [375, 750, 1500]
    assert facets.tags == list(TAG_OPTIONS)
    assert facets.tags == ["Organic", "Biodynamic", "Natural wine", "Collection", "Gift", "Rarity"]
    assert facets.quality_levels == [] and facets.vineyard_sites == []


def test_bounds(catalog):
    facets = build_facets(catalog, today=date(2024, 5, 1))
    assert (facets.vintage_bounds.lower, facets.vintage_bounds.upper) == (2017, 2022)
    assert (facets.drink_window_bounds.lower, facets.drink_window_bounds.upper) == (2021, 2045)
    assert (facets.price_bounds.lower, facets.price_bounds.upper) == (20.0, 115.0)
    assert facets.tasting_bounds.lower == date(2023, 9, 14)
    assert facets.tasting_bounds.upper == date(2024, 2, 17)


def test_empty_catalog_uses_fallback_bounds():
    facets = build_facets(Catalog.empty(), today=date(2024, 5, 1))
    assert facets.producers == []
    assert (facets.vintage_bounds.lower, facets.vintage_bounds.upper) == (1980, 2024)
    assert (facets.drink_window_bounds.lower, facets.drink_window_bounds.upper) == (1980, 2024)
    assert (facets.price_bounds.lower, facets.price_bounds.upper) == (0.0, 500.0)
    assert facets.tasting_bounds.lower == date(2023, 5, 2)
    assert facets.tasting_bounds.upper == date(2024, 5, 1)
