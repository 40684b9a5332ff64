"""Free-text search over the visible fields of a wine."""
from caveo.catalog.models import Wine


def search_haystack(wine: Wine) -> list[str]:
    """Fields the search text is matched against."""
    return [
        wine.producer,
        wine.name,
        wine.subtitle_line,
        wine.region,
        wine.appellation,
        wine.country,
        *wine.grapes,
        *wine.locations,
    ]


def matches_search(wine: Wine, search_text: str | None) -> bool:
    """
    Case-insensitive substring search.

    Args:
        wine: Wine to test
        search_text: Raw search text, surrounding whitespace is ignored

    Returns:
        True for blank search text or when any field contains the query
    """
    query = (search_text or "").strip().lower()
    if not query:
        return True
    return any(query in field.lower() for field in search_haystack(wine))
