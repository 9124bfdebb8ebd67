"""
Menu Recommender — Configuration: paths, column names, load behaviour.
"""
import os
from pathlib import Path


def _env_list(name: str, default: list[str]) -> list[str]:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return [part.strip() for part in raw.split(",") if part.strip()]


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ---------------------------------------------------------------------------
# Paths: override with MENU_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("MENU_DATA_DIR", str(Path.cwd() / "data")))

# Menu source fetched at startup: local path or http(s) URL
MENU_SOURCE = os.environ.get("MENU_SOURCE", str(_data_dir / "menu.csv"))
FETCH_TIMEOUT = float(os.environ.get("MENU_FETCH_TIMEOUT", "10"))

# Load the built-in sample menu when the startup source can't be read
MENU_SAMPLE_FALLBACK = _env_flag("MENU_SAMPLE_FALLBACK", True)

# ---------------------------------------------------------------------------
# Delimiter: fixed per deployment, or detected from the filename
# ---------------------------------------------------------------------------
MENU_DELIMITER = os.environ.get("MENU_DELIMITER", "")
DEFAULT_DELIMITER = ","
SEMICOLON_DELIMITER = ";"
# Filename substrings (case-insensitive) of exports known to use semicolons
SEMICOLON_FILE_MARKERS = _env_list("MENU_SEMICOLON_MARKERS", ["lovis"])

# ---------------------------------------------------------------------------
# Columns
# ---------------------------------------------------------------------------
# A MenuItem can't exist without these, whatever else is configured
CORE_FIELDS = ["Name", "Category", "Flavor"]
REQUIRED_FIELDS = _env_list("MENU_REQUIRED_FIELDS", CORE_FIELDS)
NUMERIC_FIELDS = _env_list("MENU_NUMERIC_FIELDS", ["Price"])

# Source column → MenuItem attribute
FIELD_MAP = {
    "Name": "name",
    "Category": "category",
    "Flavor": "flavor",
    "Description": "description",
    "Photo": "photo",
    "Price": "price",
}

# ---------------------------------------------------------------------------
# Catalog index
# ---------------------------------------------------------------------------
INCLUDE_ALL_SENTINEL = _env_flag("MENU_INCLUDE_ALL", True)
ALL_CATEGORIES_LABEL = os.environ.get("MENU_ALL_LABEL", "All Categories")

# ---------------------------------------------------------------------------
# Uploads: accepted when either the MIME type or the suffix says CSV
# ---------------------------------------------------------------------------
CSV_CONTENT_TYPES = {"text/csv"}
CSV_SUFFIX = ".csv"
