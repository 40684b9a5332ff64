"""Shared fixtures: a small in-memory catalog evaluated in a fixed year."""
import pytest

from caveo.catalog import Catalog, DrinkWindow, OpenBottle, PreservationMethod, Rating, Wine, WinePrice, WineStyle

CURRENT_YEAR = 2024


def _make_wine(wine_id: str = "1", **overrides) -> Wine:
    fields = dict(
        producer="Producer",
        name="Cuvée",
        vintage=2020,
        style=WineStyle.RED,
        region="Pfalz",
        appellation="Schweigen",
        country="Germany",
        grapes=("Riesling",),
        abv=13.0,
        drink_window=DrinkWindow(),
        locations=("Rack A1",),
        quantity=1,
        price=WinePrice(amount=25.0),
    )
    fields.update(overrides)
    return Wine(id=wine_id, **fields)


@pytest.fixture
def make_wine():
    """Factory for wines with sensible defaults."""
    return _make_wine


@pytest.fixture
def year() -> int:
    return CURRENT_YEAR


@pytest.fixture
def wines() -> list[Wine]:
    return [
        _make_wine(
            "1", producer="Becker", name="Kammerberg", vintage=2018, style=WineStyle.RED,
            region="Pfalz", appellation="Schweigen", country="Germany", grapes=("Spätburgunder",),
            abv=13.5, drink_window=DrinkWindow(from_year=2022, to_year=2032), locations=("Rack A1",),
            quantity=3, price=WinePrice(amount=78.0),
        ),
        _make_wine(
            "2", producer="Billecart-Salmon", name="Brut Réserve", vintage=None, style=WineStyle.SPARKLING,
            region="Champagne", appellation="Champagne AOC", country="France", grapes=("Pinot Noir", "Chardonnay"),
            abv=12.0, drink_window=DrinkWindow(), locations=("fridge",), quantity=2, price=WinePrice(amount=49.9),
        ),
        _make_wine(
            "3", producer="Loosen", name="Sonnenuhr Auslese", vintage=2019, style=WineStyle.SWEET,
            region="Mosel", appellation="Wehlen", country="Germany", grapes=("Riesling",), abv=7.5,
            drink_window=DrinkWindow(from_year=2025, to_year=2045), locations=("Rack B2",), quantity=6,
            price=WinePrice(amount=20.0),
        ),
        _make_wine(
            "4", producer="Moric", name="Alte Reben", vintage=2017, style=WineStyle.RED,
            region="Burgenland", appellation="Mittelburgenland", country="Austria", grapes=("Blaufränkisch",),
            abv=13.0, drink_window=DrinkWindow(from_year=2021, to_year=2024),
            locations=("Rack A1", "cellar shelf 3"), quantity=0, price=WinePrice(amount=115.0),
        ),
        _make_wine(
            "5", producer="Wittmann", name="Grauburgunder", vintage=2022, style=WineStyle.WHITE,
            region="Rheinhessen", appellation="", country="Germany", grapes=(), abv=None,
            drink_window=DrinkWindow(to_year=2026), locations=(), quantity=1, price=None,
        ),
    ]


@pytest.fixture
def catalog(wines) -> Catalog:
    """
    Wine 1: red, optimal, rated 4.25 with notes.
    Wine 2: sparkling NV, open 2 days (argon), rated 5.0 without notes and with an unparseable date.
    Wine 3: sweet, too young, rated 3.5 with notes.
    Wine 4: red, closing, depleted, open 5 days (vacuum), unrated.
    Wine 5: white, no appellation, grapes, location or price, unrated.
    """
    open_bottles = [
        OpenBottle(wine_id="2", opened_at="2024-05-02", preservation=PreservationMethod.ARGON, days_open=2),
        OpenBottle(wine_id="4", opened_at="2024-04-29", preservation=PreservationMethod.VACUUM, days_open=5),
    ]
    ratings = [
        Rating(wine_id="1", stars=4.5, notes="Cherry, forest floor.", date="2024-02-17"),
        Rating(wine_id="1", stars=4.0, notes="", date="2023-11-03"),
        Rating(wine_id="2", stars=5.0, notes="   ", date="not-a-date"),
        Rating(wine_id="3", stars=3.5, notes="Peach and slate.", date="2023-09-14"),
    ]
    return Catalog(wines, open_bottles, ratings)


@pytest.fixture
def ids():
    """Returns the ids of a wine sequence, to compare results compactly."""
    def _ids(wines) -> list[str]:
        return [w.id for w in wines]
    return _ids
