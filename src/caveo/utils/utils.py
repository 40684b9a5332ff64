import os
from datetime import date, datetime
from functools import lru_cache
from pathlib import Path

from omegaconf import DictConfig, OmegaConf

from caveo.utils.env import CAVEO_CATALOG_PATH

# Bundled mock document, used when neither env nor config point elsewhere
BUNDLED_CATALOG_PATH = Path(__file__).resolve().parents[1] / "catalog" / "data" / "catalog.json"

_DEFAULT_CONFIG = {
    "catalog": {"path": None},
    "cellar": {
        "default_sort": "recently_added",
        "bottle_size_options": [375, 750, 1500],
    },
}


def find_project_root(marker="pyproject.toml"):
    """
    Walks up from the current working directory to find the project root.
    The marker can be a file or folder like '.git' or 'pyproject.toml'
    """
    current_path = os.path.abspath(os.getcwd())
    while current_path != os.path.dirname(current_path):
        if marker in os.listdir(current_path):
            return current_path
        current_path = os.path.dirname(current_path)
    raise FileNotFoundError(f"Project root with {marker} not found.")


def get_project_root() -> Path:
    """Returns the project root path."""
    return Path(find_project_root())


@lru_cache(maxsize=1)
def get_config() -> DictConfig:
    """
    Returns the app config object, loaded once per process and read-only.
    Values from `app_config.yml` in the project root override the built-in defaults,
    a missing config file leaves the defaults in place.
    """
    cfg = OmegaConf.create(_DEFAULT_CONFIG)
    try:
        config_path = get_project_root() / "app_config.yml"
    except FileNotFoundError:
        config_path = None
    if config_path is not None and config_path.exists():
        cfg = OmegaConf.merge(cfg, OmegaConf.load(config_path))
    OmegaConf.set_readonly(cfg, True)
    return cfg


def get_default_catalog_path() -> Path:
    """Returns the catalog document path: env override, then config, then the bundled mock data."""
    if CAVEO_CATALOG_PATH:
        return Path(CAVEO_CATALOG_PATH)
    configured = get_config().catalog.path
    if configured:
        path = Path(configured)
        if not path.is_absolute():
            try:
                path = get_project_root() / path
            except FileNotFoundError:
                pass
        return path
    return BUNDLED_CATALOG_PATH


def get_current_year() -> int:
    """Returns the current calendar year."""
    return datetime.now().year


def parse_iso_date(date_str: str | None) -> date | None:
    """
    Parse a `YYYY-MM-DD` date string.

    Returns:
        The parsed date, or None for blank or malformed input
    """
    if not date_str:
        return None
    try:
        return datetime.strptime(date_str.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None
