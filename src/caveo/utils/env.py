"""Environment overrides, read from the process environment and an optional `.env` file."""
import os

from dotenv import load_dotenv

# values already set in the environment win over the .env file
load_dotenv(override=False)

# Overrides the catalog document configured in app_config.yml
CAVEO_CATALOG_PATH = os.environ.get("CAVEO_CATALOG_PATH", "")
