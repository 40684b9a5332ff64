"""Grape name matching with a fixed synonym table.

Synonyms are loaded from `data/grape_synonyms.json`, keyed by the lower-cased
filter term. Lookup only goes from the filter term to its synonyms.
"""
import json
from pathlib import Path
from typing import Dict, Iterable, Set

_DATA_DIR = Path(__file__).parent / "data"


def _load_synonyms(filename: str) -> Dict[str, Set[str]]:
    """Load the synonym table and lower-case every entry."""
    with open(_DATA_DIR / filename, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return {key.lower(): {s.lower() for s in synonyms} for key, synonyms in raw.items()}


GRAPE_SYNONYMS: Dict[str, Set[str]] = _load_synonyms("grape_synonyms.json")


def synonyms_for(grape: str) -> Set[str]:
    """Synonyms of a grape name (lower-cased), empty when the name is not in the table."""
    return GRAPE_SYNONYMS.get(grape.strip().lower(), set())


def grape_matches(grape: str, wine_grapes: Iterable[str]) -> bool:
    """
    Check whether a filter grape matches any of a wine's grapes.

    Args:
        grape: Grape selected in the filter
        wine_grapes: Grapes of the wine

    Returns:
        True on a case-insensitive exact match or when one of the filter grape's synonyms is among the wine's grapes
    """
    normalized = {g.strip().lower() for g in wine_grapes}
    term = grape.strip().lower()
    if term in normalized:
        return True
    return not normalized.isdisjoint(synonyms_for(term))
