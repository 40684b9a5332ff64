class CatalogError(Exception):
    """Base error for the cellar catalog."""
    def __init__(self, message: str | None = None) -> None:
        self.message = message or "Catalog error"
        super().__init__(self.message)


class CatalogLoadError(CatalogError):
    """The catalog document could not be read or decoded."""
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load catalog from {source}: {reason}")


class InvalidRangeError(ValueError):
    """A closed range was built with its lower bound above its upper bound."""
    def __init__(self, lower, upper) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(f"Invalid range: lower bound {lower} is greater than upper bound {upper}")
