"""Enumerated vocabularies of the cellar filters and sort options."""
from enum import Enum


class QuickFilterCategory(str, Enum):
    """Category of a quick filter option, one chip row per category."""

    STYLE = "style"
    STATUS = "status"
    DRINK_READINESS = "drink_readiness"
    RATING = "rating"
    VINTAGE = "vintage"
    PRICE = "price"
    LOCATION = "location"

    @property
    def label(self) -> str:
        return _CATEGORY_TITLES[self]


_CATEGORY_TITLES = {
    QuickFilterCategory.STYLE: "Style",
    QuickFilterCategory.STATUS: "Status",
    QuickFilterCategory.DRINK_READINESS: "Drink readiness",
    QuickFilterCategory.RATING: "Rating",
    QuickFilterCategory.VINTAGE: "Vintage",
    QuickFilterCategory.PRICE: "Price",
    QuickFilterCategory.LOCATION: "Location",
}


class WineInventoryStatus(str, Enum):
    IN_STOCK = "in_stock"
    OPEN = "open"
    DEPLETED = "depleted"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    WineInventoryStatus.IN_STOCK: "In stock",
    WineInventoryStatus.OPEN: "Open",
    WineInventoryStatus.DEPLETED: "Depleted",
}


class DrinkReadinessOption(str, Enum):
    TOO_YOUNG = "too_young"
    OPTIMAL = "optimal"
    CLOSING = "closing"
    PAST_PEAK = "past_peak"

    @property
    def label(self) -> str:
        return _READINESS_LABELS[self]


_READINESS_LABELS = {
    DrinkReadinessOption.TOO_YOUNG: "Too young",
    DrinkReadinessOption.OPTIMAL: "Ready",
    DrinkReadinessOption.CLOSING: "Closing",
    DrinkReadinessOption.PAST_PEAK: "Past peak",
}


class RatingQuickFilter(str, Enum):
    MINIMUM_FOUR = "minimum_four"
    MINIMUM_FOUR_POINT_FIVE = "minimum_four_point_five"
    UNRATED = "unrated"

    @property
    def label(self) -> str:
        return _RATING_LABELS[self]


_RATING_LABELS = {
    RatingQuickFilter.MINIMUM_FOUR: "≥4★",
    RatingQuickFilter.MINIMUM_FOUR_POINT_FIVE: "≥4.5★",
    RatingQuickFilter.UNRATED: "Unrated",
}


class VintageBucket(str, Enum):
    NON_VINTAGE = "non_vintage"
    FROM_2015_TO_2018 = "2015_2018"
    FROM_2019_TO_2021 = "2019_2021"
    FROM_2022_ON = "2022_plus"

    @property
    def label(self) -> str:
        return _VINTAGE_LABELS[self]

    def contains(self, vintage: int | None) -> bool:
        """Whether a vintage falls into the bucket, bounds are inclusive."""
        if self is VintageBucket.NON_VINTAGE:
            return vintage is None
        if vintage is None:
            return False
        if self is VintageBucket.FROM_2015_TO_2018:
            return 2015 <= vintage <= 2018
        if self is VintageBucket.FROM_2019_TO_2021:
            return 2019 <= vintage <= 2021
        return vintage >= 2022


_VINTAGE_LABELS = {
    VintageBucket.NON_VINTAGE: "NV",
    VintageBucket.FROM_2015_TO_2018: "2015–2018",
    VintageBucket.FROM_2019_TO_2021: "2019–2021",
    VintageBucket.FROM_2022_ON: "2022+",
}


class PriceBucket(str, Enum):
    UP_TO_TWENTY = "up_to_20"
    TWENTY_TO_FIFTY = "20_to_50"
    FIFTY_TO_ONE_HUNDRED = "50_to_100"
    ABOVE_ONE_HUNDRED = "above_100"

    @property
    def label(self) -> str:
        return _PRICE_LABELS[self]

    def contains(self, amount: float | None) -> bool:
        """Whether a price falls into the bucket, wines without a price never do."""
        if amount is None:
            return False
        if self is PriceBucket.UP_TO_TWENTY:
            return amount <= 20
        if self is PriceBucket.TWENTY_TO_FIFTY:
            return 20 < amount <= 50
        if self is PriceBucket.FIFTY_TO_ONE_HUNDRED:
            return 50 < amount <= 100
        return amount > 100


_PRICE_LABELS = {
    PriceBucket.UP_TO_TWENTY: "≤20€",
    PriceBucket.TWENTY_TO_FIFTY: "20–50€",
    PriceBucket.FIFTY_TO_ONE_HUNDRED: "50–100€",
    PriceBucket.ABOVE_ONE_HUNDRED: ">100€",
}


class DrinkWindowRelativeOption(str, Enum):
    READY_WITHIN_SIX_MONTHS = "ready_within_six_months"
    ENDING_WITHIN_TWELVE_MONTHS = "ending_within_twelve_months"


class QuantityComparator(str, Enum):
    AT_LEAST = "at_least"
    EQUAL = "equal"
    AT_MOST = "at_most"

    @property
    def symbol(self) -> str:
        return {"at_least": "≥", "equal": "=", "at_most": "≤"}[self.value]


class BottleClosure(str, Enum):
    CORK = "cork"
    SCREWCAP = "screwcap"
    OTHER = "other"


class ServingHint(str, Enum):
    DECANT = "decant"
    SERVING_TEMPERATURE = "serving_temperature"


class DataCompletenessFlag(str, Enum):
    MISSING_APPELLATION = "missing_appellation"
    MISSING_GRAPES = "missing_grapes"
    MISSING_LOCATION = "missing_location"


class SmartFilterPreset(str, Enum):
    """Named composite predicates offered on top of the advanced filter form."""

    DRINK_READY_TODAY = "drink_ready_today"
    EXPIRING_SOON = "expiring_soon"
    RESTOCK_FAVORITES = "restock_favorites"
    UNRATED = "unrated"
    MISSING_METADATA = "missing_metadata"
    OPEN_BOTTLE_WARNING = "open_bottle_warning"

    @property
    def label(self) -> str:
        return _PRESET_LABELS[self]


_PRESET_LABELS = {
    SmartFilterPreset.DRINK_READY_TODAY: "Ready today",
    SmartFilterPreset.EXPIRING_SOON: "Expiring soon",
    SmartFilterPreset.RESTOCK_FAVORITES: "Restock",
    SmartFilterPreset.UNRATED: "Unrated",
    SmartFilterPreset.MISSING_METADATA: "Missing metadata",
    SmartFilterPreset.OPEN_BOTTLE_WARNING: "Open bottles, critical",
}


class OpenBottleFreshnessStatus(str, Enum):
    WITHIN_RECOMMENDATION = "within_recommendation"
    WARNING_EXCEEDED = "warning_exceeded"


class CellarSortOption(str, Enum):
    RECENTLY_ADDED = "recently_added"
    DRINK_WINDOW_SOONEST = "drink_window_soonest"
    RATING_HIGH_TO_LOW = "rating_high_to_low"
    PRICE_ASCENDING = "price_ascending"
    PRICE_DESCENDING = "price_descending"
    VINTAGE_NEWEST = "vintage_newest"
    VINTAGE_OLDEST = "vintage_oldest"
    QUANTITY_HIGH_TO_LOW = "quantity_high_to_low"
    QUANTITY_LOW_TO_HIGH = "quantity_low_to_high"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS = {
    CellarSortOption.RECENTLY_ADDED: "Recently added",
    CellarSortOption.DRINK_WINDOW_SOONEST: "Drinking window",
    CellarSortOption.RATING_HIGH_TO_LOW: "Rating",
    CellarSortOption.PRICE_ASCENDING: "Price ↑",
    CellarSortOption.PRICE_DESCENDING: "Price ↓",
    CellarSortOption.VINTAGE_NEWEST: "Newest vintage",
    CellarSortOption.VINTAGE_OLDEST: "Oldest vintage",
    CellarSortOption.QUANTITY_HIGH_TO_LOW: "Most bottles",
    CellarSortOption.QUANTITY_LOW_TO_HIGH: "Fewest bottles",
}
