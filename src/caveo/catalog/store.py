"""Catalog store"""
from collections import defaultdict
from datetime import date
from typing import Iterable

from caveo.catalog.models import OpenBottle, Rating, Wine
from caveo.utils import logger, parse_iso_date


class Catalog:
    """Read-only store for the loaded wines, open bottles and ratings."""

    def __init__(
            self,
            wines: Iterable[Wine] = (),
            open_bottles: Iterable[OpenBottle] = (),
            ratings: Iterable[Rating] = (),
    ):
        """
        Initialize the catalog.

        Args:
            wines: Wine records, in document order. The first record wins on duplicate ids.
            open_bottles: Open bottles, at most one per wine. The first record wins.
            ratings: Ratings, in document order
        """
        wines_by_id: dict[str, Wine] = {}
        for wine in wines:
            if wine.id in wines_by_id:
                logger.warning(f"Duplicate wine id {wine.id!r} ignored")
                continue
            wines_by_id[wine.id] = wine
        self._wines_by_id = wines_by_id
        self._wines = tuple(wines_by_id.values())

        bottles_by_wine: dict[str, OpenBottle] = {}
        for bottle in open_bottles:
            bottles_by_wine.setdefault(bottle.wine_id, bottle)
        self._open_bottles = bottles_by_wine

        self._ratings = tuple(ratings)
        ratings_by_wine: dict[str, list[Rating]] = defaultdict(list)
        for rating in self._ratings:
            ratings_by_wine[rating.wine_id].append(rating)
        self._ratings_by_wine = {wine_id: tuple(items) for wine_id, items in ratings_by_wine.items()}

        self._average_cache: dict[str, float | None] = {}

    @classmethod
    def empty(cls) -> "Catalog":
        """Returns a catalog without any records."""
        return cls()

    @property
    def wines(self) -> tuple[Wine, ...]:
        return self._wines

    @property
    def open_bottles(self) -> tuple[OpenBottle, ...]:
        return tuple(self._open_bottles.values())

    @property
    def ratings(self) -> tuple[Rating, ...]:
        return self._ratings

    @property
    def is_empty(self) -> bool:
        return not self._wines and not self._open_bottles and not self._ratings

    def __len__(self) -> int:
        return len(self._wines)

    def wine(self, wine_id: str) -> Wine | None:
        """Get wine by ID."""
        return self._wines_by_id.get(wine_id)

    def open_bottle(self, wine: Wine) -> OpenBottle | None:
        """Get the open bottle of a wine, if any."""
        return self._open_bottles.get(wine.id)

    def ratings_for(self, wine: Wine) -> tuple[Rating, ...]:
        """Get all ratings of a wine, in document order."""
        return self._ratings_by_wine.get(wine.id, ())

    def average_rating(self, wine: Wine) -> float | None:
        """
        Get the mean star rating of a wine.

        Args:
            wine: Wine to look up

        Returns:
            Arithmetic mean of all ratings, or None if the wine was never rated
        """
        if wine.id not in self._average_cache:
            ratings = self.ratings_for(wine)
            average = sum(r.stars for r in ratings) / len(ratings) if ratings else None
            self._average_cache[wine.id] = average
        return self._average_cache[wine.id]

    def last_tasting_date(self, wine: Wine) -> date | None:
        """
        Get the most recent tasting date of a wine.

        Ratings whose date is not a valid `YYYY-MM-DD` string are ignored.

        Returns:
            Latest parseable rating date, or None if there is none
        """
        dates = []
        for rating in self.ratings_for(wine):
            parsed = parse_iso_date(rating.date)
            if parsed is None:
                logger.debug(f"Skipping unparseable rating date {rating.date!r} for wine {wine.id}")
                continue
            dates.append(parsed)
        return max(dates) if dates else None

    def has_notes(self, wine: Wine) -> bool:
        """Whether at least one rating of the wine carries non-blank notes."""
        return any(r.notes.strip() for r in self.ratings_for(wine))

    def locations(self) -> list[str]:
        """Distinct storage locations across all wines, sorted case-insensitively."""
        return sorted({loc for wine in self._wines for loc in wine.locations}, key=str.casefold)

    def top_rated_count(self, threshold: float = 4.5) -> int:
        """Number of individual ratings at or above the threshold."""
        return sum(1 for r in self._ratings if r.stars >= threshold)
