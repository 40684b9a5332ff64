"""Loads the static catalog document into an in-memory Catalog."""
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from caveo.catalog.models import CatalogDocument
from caveo.catalog.store import Catalog
from caveo.exceptions import CatalogLoadError
from caveo.utils import get_default_catalog_path, logger


def parse_catalog_document(payload: str | bytes | dict[str, Any], source: str = "<memory>") -> Catalog:
    """
    Decode a catalog document.

    Args:
        payload: JSON text or an already decoded mapping with `wines`, `open_bottles` and `ratings` lists
        source: Name of the document, used in error messages

    Returns:
        Catalog holding the decoded records

    Raises:
        CatalogLoadError: If the payload is not valid JSON or does not match the catalog schema
    """
    try:
        if isinstance(payload, (str, bytes)):
            document = CatalogDocument.model_validate_json(payload)
        else:
            document = CatalogDocument.model_validate(payload)
    except ValidationError as e:
        raise CatalogLoadError(source, f"{e.error_count()} validation error(s): {e}") from e

    # foreign keys are trusted, dangling ones only show up in the debug log
    wine_ids = {wine.id for wine in document.wines}
    dangling = [r.wine_id for r in document.ratings if r.wine_id not in wine_ids]
    dangling += [b.wine_id for b in document.open_bottles if b.wine_id not in wine_ids]
    if dangling:
        logger.debug(f"Catalog {source} references unknown wine ids: {sorted(set(dangling))}")

    return Catalog(document.wines, document.open_bottles, document.ratings)


def load_catalog(path: str | Path | None = None) -> Catalog:
    """
    Load the catalog from a JSON file.

    A missing, unreadable or malformed document never propagates: the failure is
    logged and an empty catalog is returned.

    Args:
        path: Path to the catalog document, defaults to the configured catalog

    Returns:
        The loaded catalog, or an empty one on failure
    """
    path = Path(path) if path else get_default_catalog_path()
    if not path.exists():
        logger.warning(f"Catalog document not found at {path}, starting with an empty catalog")
        return Catalog.empty()

    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        catalog = parse_catalog_document(payload, source=str(path))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Failed to decode catalog {path}: {e}")
        return Catalog.empty()
    except (CatalogLoadError, OSError) as e:
        logger.error(f"Failed to load catalog {path}: {e}")
        return Catalog.empty()

    logger.info(
        f"Loaded catalog from {path}: {len(catalog.wines)} wines, "
        f"{len(catalog.open_bottles)} open bottles, {len(catalog.ratings)} ratings"
    )
    return catalog
