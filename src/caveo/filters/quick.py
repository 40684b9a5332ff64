"""Quick filters: single-tap options grouped by category.

Selections inside a category are OR-combined, categories are AND-combined.
"""
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Iterable

from caveo.catalog.models import Wine, WineStyle
from caveo.catalog.store import Catalog
from caveo.filters.derived import drink_readiness, wine_statuses
from caveo.filters.options import (
    DrinkReadinessOption,
    PriceBucket,
    QuickFilterCategory,
    RatingQuickFilter,
    VintageBucket,
    WineInventoryStatus,
)

_VALUE_TYPES = {
    QuickFilterCategory.STYLE: WineStyle,
    QuickFilterCategory.STATUS: WineInventoryStatus,
    QuickFilterCategory.DRINK_READINESS: DrinkReadinessOption,
    QuickFilterCategory.RATING: RatingQuickFilter,
    QuickFilterCategory.VINTAGE: VintageBucket,
    QuickFilterCategory.PRICE: PriceBucket,
}


@dataclass(frozen=True)
class QuickFilterOption:
    """
    A selectable quick filter value, tagged with its category.

    Attributes:
        category: Category the option belongs to.
        value: Enum member of the category's vocabulary, or the location label for location options.
    """
    category: QuickFilterCategory
    value: Any

    def __post_init__(self):
        category = QuickFilterCategory(self.category)
        object.__setattr__(self, "category", category)
        value_type = _VALUE_TYPES.get(category)
        if value_type is None:
            if not isinstance(self.value, str):
                raise TypeError(f"Location option expects a string, got {type(self.value).__name__}")
        elif not isinstance(self.value, value_type):
            # raises ValueError for values outside the category vocabulary
            object.__setattr__(self, "value", value_type(self.value))

    @classmethod
    def style(cls, style: WineStyle) -> "QuickFilterOption":
        return cls(QuickFilterCategory.STYLE, style)

    @classmethod
    def status(cls, status: WineInventoryStatus) -> "QuickFilterOption":
        return cls(QuickFilterCategory.STATUS, status)

    @classmethod
    def readiness(cls, readiness: DrinkReadinessOption) -> "QuickFilterOption":
        return cls(QuickFilterCategory.DRINK_READINESS, readiness)

    @classmethod
    def rating(cls, rating: RatingQuickFilter) -> "QuickFilterOption":
        return cls(QuickFilterCategory.RATING, rating)

    @classmethod
    def vintage(cls, bucket: VintageBucket) -> "QuickFilterOption":
        return cls(QuickFilterCategory.VINTAGE, bucket)

    @classmethod
    def price(cls, bucket: PriceBucket) -> "QuickFilterOption":
        return cls(QuickFilterCategory.PRICE, bucket)

    @classmethod
    def location(cls, location: str) -> "QuickFilterOption":
        return cls(QuickFilterCategory.LOCATION, location)

    @property
    def id(self) -> str:
        value = self.value if self.category is QuickFilterCategory.LOCATION else self.value.value
        return f"{self.category.value}-{value}"

    @property
    def label(self) -> str:
        if self.category is QuickFilterCategory.LOCATION:
            return self.value
        if self.category is QuickFilterCategory.STYLE:
            return self.value.display_name
        return self.value.label


@dataclass(frozen=True)
class QuickFilterGroup:
    """
    One row of quick filter chips.

    Attributes:
        category: Category shared by all options of the group.
        options: Options in display order.
    """
    category: QuickFilterCategory
    options: tuple[QuickFilterOption, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return self.category.label


def build_groups(catalog: Catalog) -> list[QuickFilterGroup]:
    """
    Build the quick filter groups offered for a catalog.

    The location group lists the distinct storage locations of all wines, sorted
    case-insensitively, and is left out when no wine has a location.

    Args:
        catalog: Catalog the options are derived from

    Returns:
        Groups in display order: style, status, drink readiness, rating, vintage, price, location
    """
    groups = [
        QuickFilterGroup(QuickFilterCategory.STYLE, tuple(QuickFilterOption.style(s) for s in WineStyle)),
        QuickFilterGroup(QuickFilterCategory.STATUS, tuple(QuickFilterOption.status(s) for s in WineInventoryStatus)),
        QuickFilterGroup(
            QuickFilterCategory.DRINK_READINESS,
            tuple(QuickFilterOption.readiness(r) for r in DrinkReadinessOption),
        ),
        QuickFilterGroup(QuickFilterCategory.RATING, tuple(QuickFilterOption.rating(r) for r in RatingQuickFilter)),
        QuickFilterGroup(QuickFilterCategory.VINTAGE, tuple(QuickFilterOption.vintage(b) for b in VintageBucket)),
        QuickFilterGroup(QuickFilterCategory.PRICE, tuple(QuickFilterOption.price(b) for b in PriceBucket)),
    ]

    locations = catalog.locations()
    if locations:
        groups.append(
            QuickFilterGroup(QuickFilterCategory.LOCATION, tuple(QuickFilterOption.location(loc) for loc in locations))
        )

    return groups


def _matches_rating(option: RatingQuickFilter, average: float | None) -> bool:
    if option is RatingQuickFilter.UNRATED:
        return average is None
    if average is None:
        return False
    if option is RatingQuickFilter.MINIMUM_FOUR:
        return average >= 4
    return average >= 4.5


def _matches_category(
        category: QuickFilterCategory,
        values: list[Any],
        wine: Wine,
        catalog: Catalog,
        current_year: int | None,
) -> bool:
    """Whether the wine satisfies at least one of the selected values of a category."""
    if category is QuickFilterCategory.STYLE:
        return wine.style in values
    if category is QuickFilterCategory.STATUS:
        return not wine_statuses(wine, catalog).isdisjoint(values)
    if category is QuickFilterCategory.DRINK_READINESS:
        return drink_readiness(wine.drink_window, current_year) in values
    if category is QuickFilterCategory.RATING:
        average = catalog.average_rating(wine)
        return any(_matches_rating(v, average) for v in values)
    if category is QuickFilterCategory.VINTAGE:
        return any(bucket.contains(wine.vintage) for bucket in values)
    if category is QuickFilterCategory.PRICE:
        amount = wine.price.amount if wine.price is not None else None
        return any(bucket.contains(amount) for bucket in values)
    return any(location in wine.locations for location in values)


def matches_quick_filters(
        wine: Wine,
        selected: Iterable[QuickFilterOption],
        catalog: Catalog,
        current_year: int | None = None,
) -> bool:
    """
    Check a wine against the selected quick filters.

    Args:
        wine: Wine to test
        selected: Selected quick filter options
        catalog: Catalog used for ratings and open bottle lookups
        current_year: Year used for drink readiness, defaults to the current calendar year

    Returns:
        True if every category with a selection has at least one matching option
    """
    grouped: dict[QuickFilterCategory, list[Any]] = defaultdict(list)
    for option in selected:
        grouped[option.category].append(option.value)

    return all(
        _matches_category(category, values, wine, catalog, current_year)
        for category, values in grouped.items()
    )
