"""Data models for the wine cellar catalog."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class WineStyle(str, Enum):
    """Wine style classification."""

    RED = "red"
    WHITE = "white"
    ROSE = "rose"
    SPARKLING = "sparkling"
    SWEET = "sweet"
    ORANGE = "orange"
    FORTIFIED = "fortified"

    @property
    def display_name(self) -> str:
        return _STYLE_NAMES[self]


_STYLE_NAMES = {
    WineStyle.RED: "Red",
    WineStyle.WHITE: "White",
    WineStyle.ROSE: "Rosé",
    WineStyle.SPARKLING: "Sparkling",
    WineStyle.SWEET: "Sweet",
    WineStyle.ORANGE: "Orange",
    WineStyle.FORTIFIED: "Fortified",
}


class PreservationMethod(str, Enum):
    """How an open bottle is kept between pours."""

    CORK = "cork"
    VACUUM = "vacuum"
    ARGON = "argon"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class WinePrice(BaseModel):
    """Purchase price of a bottle."""
    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., ge=0, description="Price per bottle")
    currency: str = Field("EUR", description="Currency code (e.g., EUR, USD)")

    @property
    def formatted(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


class DrinkWindow(BaseModel):
    """Inclusive year range in which a wine is ready to drink, either bound may be unknown."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_year: int | None = Field(None, alias="from", description="First year of the drinking window")
    to_year: int | None = Field(None, alias="to", description="Last year of the drinking window")

    @property
    def has_data(self) -> bool:
        return self.from_year is not None or self.to_year is not None

    @property
    def label(self) -> str:
        if self.from_year is not None and self.to_year is not None:
            return f"{self.from_year}–{self.to_year}"
        if self.from_year is not None:
            return f"from {self.from_year}"
        if self.to_year is not None:
            return f"until {self.to_year}"
        return "no drinking window"


class Wine(BaseModel):
    """Wine catalog model."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique wine identifier")
    producer: str = Field("", description="Producer/winery name")
    name: str = Field("", description="Wine name or cuvée")
    vintage: int | None = Field(None, description="Vintage year (empty for non-vintage wines)")
    style: WineStyle = Field(WineStyle.RED, description="Wine style")
    region: str = Field("", description="Wine region")
    appellation: str = Field("", description="Specific appellation")
    country: str = Field("", description="Country of origin")
    grapes: tuple[str, ...] = Field((), description="Grape varieties, in blend order")
    abv: float | None = Field(None, ge=0, le=100, description="Alcohol by volume in percent")
    drink_window: DrinkWindow = Field(default_factory=DrinkWindow, description="Drinking window")
    locations: tuple[str, ...] = Field((), description="Storage location labels (e.g., Rack A3)")
    quantity: int = Field(0, ge=0, description="Unopened bottles in the cellar")
    price: WinePrice | None = Field(None, description="Purchase price per bottle")

    @property
    def vintage_label(self) -> str:
        return str(self.vintage) if self.vintage is not None else "NV"

    @property
    def subtitle_line(self) -> str:
        parts = [self.vintage_label, self.region, self.appellation]
        return " · ".join(part for part in parts if part)

    @property
    def style_label(self) -> str:
        return self.style.display_name

    @property
    def location_summary(self) -> str:
        return ", ".join(self.locations) if self.locations else "No location"


class OpenBottle(BaseModel):
    """A bottle currently open, tracked separately from the unopened quantity."""
    model_config = ConfigDict(frozen=True)

    wine_id: str = Field(..., description="Foreign key to the wine")
    opened_at: str = Field("", description="Date the bottle was opened (YYYY-MM-DD)")
    preservation: PreservationMethod = Field(PreservationMethod.CORK, description="Preservation method")
    days_open: int = Field(0, ge=0, description="Days since the bottle was opened")

    @property
    def badge_text(self) -> str:
        return "1 day open" if self.days_open == 1 else f"{self.days_open} days open"


class Rating(BaseModel):
    """Tasting rating for a wine."""
    model_config = ConfigDict(frozen=True)

    wine_id: str = Field(..., description="Foreign key to the wine")
    stars: float = Field(..., ge=0, le=5, multiple_of=0.5, description="Star rating, 0-5 in half steps")
    notes: str = Field("", description="Free-text tasting notes")
    date: str = Field("", description="Tasting date (YYYY-MM-DD)")


class CatalogDocument(BaseModel):
    """Shape of the static catalog document."""

    wines: list[Wine] = Field(default_factory=list, description="Wine records")
    open_bottles: list[OpenBottle] = Field(default_factory=list, description="Open bottles")
    ratings: list[Rating] = Field(default_factory=list, description="Ratings, in document order")
