"""
Cellar filtering, search and sorting.

Modules:
- options: enumerated filter and sort vocabularies
- derived: per-wine derived values (readiness, closure, freshness, ...)
- quick: quick filter options, groups and matching
- state: quick selections and the advanced filter form
- advanced: advanced filter and smart preset evaluation
- sorting: sort engine
- engine: filter/sort facade used by the presentation layer
- facets: advanced filter form options
- stats: dashboard counts
"""

from .options import (
    BottleClosure,
    CellarSortOption,
    DataCompletenessFlag,
    DrinkReadinessOption,
    DrinkWindowRelativeOption,
    OpenBottleFreshnessStatus,
    PriceBucket,
    QuantityComparator,
    QuickFilterCategory,
    RatingQuickFilter,
    ServingHint,
    SmartFilterPreset,
    VintageBucket,
    WineInventoryStatus,
)
from .derived import drink_readiness
from .quick import QuickFilterGroup, QuickFilterOption, build_groups, matches_quick_filters
from .state import AdvancedFilterState, CellarFilterState, ClosedRange, QuantityFilter
from .search import matches_search
from .advanced import matches_advanced_filters, matches_preset
from .sorting import sort_wines
from .engine import CellarView, filter_wines, filtered_wines, is_included, visible_wines
from .facets import AdvancedFilterFacets, build_facets
from .stats import closing_count, ready_count

__all__ = [
    # Vocabularies
    "BottleClosure",
    "CellarSortOption",
    "DataCompletenessFlag",
    "DrinkReadinessOption",
    "DrinkWindowRelativeOption",
    "OpenBottleFreshnessStatus",
    "PriceBucket",
    "QuantityComparator",
    "QuickFilterCategory",
    "RatingQuickFilter",
    "ServingHint",
    "SmartFilterPreset",
    "VintageBucket",
    "WineInventoryStatus",

    # State
    "AdvancedFilterState",
    "CellarFilterState",
    "ClosedRange",
    "QuantityFilter",
    "QuickFilterGroup",
    "QuickFilterOption",

    # Engine
    "build_groups",
    "drink_readiness",
    "matches_search",
    "matches_quick_filters",
    "matches_advanced_filters",
    "matches_preset",
    "is_included",
    "filter_wines",
    "filtered_wines",
    "visible_wines",
    "sort_wines",
    "CellarView",

    # Form options
    "AdvancedFilterFacets",
    "build_facets",

    # Dashboard
    "ready_count",
    "closing_count",
]
