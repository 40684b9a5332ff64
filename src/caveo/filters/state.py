"""Filter state owned by the cellar screen: quick filter selections and the advanced filter form."""
from datetime import date
from typing import TYPE_CHECKING, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from caveo.catalog.models import PreservationMethod, Wine, WineStyle
from caveo.exceptions import InvalidRangeError
from caveo.filters.options import (
    BottleClosure,
    DataCompletenessFlag,
    DrinkWindowRelativeOption,
    OpenBottleFreshnessStatus,
    QuantityComparator,
    ServingHint,
    SmartFilterPreset,
)
from caveo.filters.quick import QuickFilterOption

if TYPE_CHECKING:
    from caveo.catalog.store import Catalog

T = TypeVar("T")


class ClosedRange(BaseModel, Generic[T]):
    """Inclusive range between two comparable bounds."""
    model_config = ConfigDict(frozen=True)

    lower: T = Field(..., description="Lower bound, inclusive")
    upper: T = Field(..., description="Upper bound, inclusive")

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.lower > self.upper:
            raise InvalidRangeError(self.lower, self.upper)
        return self

    def contains(self, value) -> bool:
        return self.lower <= value <= self.upper

    def overlaps(self, lower, upper) -> bool:
        """Whether the range shares at least one point with `[lower, upper]`."""
        return self.lower <= upper and lower <= self.upper


class QuantityFilter(BaseModel):
    """Comparison of a wine's bottle count against a fixed value."""
    model_config = ConfigDict(frozen=True)

    comparator: QuantityComparator = Field(QuantityComparator.AT_LEAST, description="Comparison operator")
    value: int = Field(0, ge=0, description="Bottle count to compare against")

    def matches(self, quantity: int) -> bool:
        if self.comparator is QuantityComparator.AT_LEAST:
            return quantity >= self.value
        if self.comparator is QuantityComparator.EQUAL:
            return quantity == self.value
        return quantity <= self.value


class AdvancedFilterState(BaseModel):
    """
    Multi-field advanced filter form.

    Every field defaults to "no constraint". Multi-selects are any-of, except
    `completeness_flags` which requires all selected flags.
    """

    # Wine
    producers: set[str] = Field(default_factory=set, description="Exact producer names")
    wine_name_query: str = Field("", description="Substring of the wine name or producer")
    styles: set[WineStyle] = Field(default_factory=set, description="Wine styles")
    grapes: set[str] = Field(default_factory=set, description="Grape names, synonyms included")
    include_nv: bool = Field(True, description="Whether non-vintage wines are shown")
    vintage_range: ClosedRange[int] | None = Field(None, description="Vintage years")
    abv_range: ClosedRange[float] | None = Field(None, description="Alcohol by volume")
    drink_window_range: ClosedRange[int] | None = Field(None, description="Years overlapping the drinking window")
    relative_drink_window: DrinkWindowRelativeOption | None = Field(None, description="Drinking window relative to now")
    closures: set[BottleClosure] = Field(default_factory=set, description="Bottle closures")
    bottle_sizes: set[int] = Field(default_factory=set, description="Bottle sizes in ml")

    # Origin
    countries: set[str] = Field(default_factory=set, description="Countries")
    regions: set[str] = Field(default_factory=set, description="Regions")
    appellations: set[str] = Field(default_factory=set, description="Appellations")
    quality_levels: set[str] = Field(default_factory=set, description="Quality levels (no catalog data yet)")
    vineyard_sites: set[str] = Field(default_factory=set, description="Vineyard sites (no catalog data yet)")
    serving_hints: set[ServingHint] = Field(default_factory=set, description="Serving hints")

    # Inventory and value
    quantity_filter: QuantityFilter | None = Field(None, description="Bottle count comparison")
    storage_locations: set[str] = Field(default_factory=set, description="Storage locations")
    price_range: ClosedRange[float] | None = Field(None, description="Price per bottle")

    # Ratings
    min_rating: float | None = Field(None, ge=0, le=5, description="Minimum average rating")
    is_rated: bool | None = Field(None, description="Whether the wine has at least one rating")
    last_tasted_range: ClosedRange[date] | None = Field(None, description="Date of the latest tasting")
    has_notes: bool | None = Field(None, description="Whether a rating carries tasting notes")

    # Open bottles
    open_days_range: ClosedRange[int] | None = Field(None, description="Days the bottle has been open")
    preservation_methods: set[PreservationMethod] = Field(default_factory=set, description="Preservation methods")
    freshness_statuses: set[OpenBottleFreshnessStatus] = Field(default_factory=set, description="Open bottle freshness")

    # Metadata
    tags: set[str] = Field(default_factory=set, description="Metadata tags")
    completeness_flags: set[DataCompletenessFlag] = Field(default_factory=set, description="Required missing-data flags")
    smart_preset: SmartFilterPreset | None = Field(None, description="Named composite filter")

    @property
    def active_filter_count(self) -> int:
        """Number of fields that differ from their "no constraint" default."""
        count = 0
        for name in type(self).model_fields:
            value = getattr(self, name)
            if name == "wine_name_query":
                count += 1 if value.strip() else 0
            elif name == "include_nv":
                count += 0 if value else 1
            elif isinstance(value, (set, frozenset)):
                count += 1 if value else 0
            else:
                count += 0 if value is None else 1
        return count

    def reset(self) -> None:
        """Restore every field to its default."""
        for name, field in type(self).model_fields.items():
            setattr(self, name, field.get_default(call_default_factory=True))


class CellarFilterState(BaseModel):
    """Complete filter state of a cellar screen session."""

    selected_quick_filters: set[QuickFilterOption] = Field(default_factory=set, description="Selected quick filters")
    advanced_filters: AdvancedFilterState = Field(default_factory=AdvancedFilterState, description="Advanced filters")

    @property
    def active_filter_count(self) -> int:
        """Quick filter selections plus active advanced filter fields, shown as the filter badge."""
        return len(self.selected_quick_filters) + self.advanced_filters.active_filter_count

    def toggle(self, option: QuickFilterOption) -> None:
        """Select a quick filter option, or deselect it when already selected."""
        if option in self.selected_quick_filters:
            self.selected_quick_filters.remove(option)
        else:
            self.selected_quick_filters.add(option)

    def clear(self) -> None:
        """Drop all quick filter selections and reset the advanced filters."""
        self.selected_quick_filters.clear()
        self.advanced_filters.reset()

    def filtered_wines(self, catalog: "Catalog", search_text: str = "", current_year: int | None = None) -> list[Wine]:
        """Catalog wines passing the search text and this state, in catalog order."""
        from caveo.filters.engine import filtered_wines

        return filtered_wines(catalog, search_text, self, current_year)
