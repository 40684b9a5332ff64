"""Catalog package: wine cellar models, the read-only store and its loader."""

from .models import (
    CatalogDocument,
    DrinkWindow,
    OpenBottle,
    PreservationMethod,
    Rating,
    Wine,
    WinePrice,
    WineStyle,
)
from .store import Catalog
from .loader import load_catalog, parse_catalog_document

__all__ = [
    'Catalog',
    'CatalogDocument',
    'DrinkWindow',
    'OpenBottle',
    'PreservationMethod',
    'Rating',
    'Wine',
    'WinePrice',
    'WineStyle',
    'load_catalog',
    'parse_catalog_document',
]
