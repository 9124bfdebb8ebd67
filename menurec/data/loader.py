"""
Menu source fetching, upload checks, delimiter detection, CSV parsing.
"""
from __future__ import annotations

import io
import warnings
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd
import requests

from menurec.config import (
    CORE_FIELDS, CSV_CONTENT_TYPES, CSV_SUFFIX, DEFAULT_DELIMITER, FETCH_TIMEOUT,
    MENU_DELIMITER, NUMERIC_FIELDS, REQUIRED_FIELDS, SEMICOLON_DELIMITER,
    SEMICOLON_FILE_MARKERS,
)
from menurec.data.errors import FormatError, SchemaError, TransportError, UnsupportedFileError
from menurec.data.normalize import normalize_rows
from menurec.data.schemas import MenuItem


# ---------------------------------------------------------------------------
# Delimiter detection
# ---------------------------------------------------------------------------

def detect_delimiter(filename: str, markers: Iterable[str] = SEMICOLON_FILE_MARKERS) -> str:
    """Pick the delimiter from the filename alone.

    Files whose name contains a known marker are semicolon-separated,
    everything else is comma-separated. The content is never sniffed.
    """
    name = (filename or "").lower()
    if any(marker.lower() in name for marker in markers):
        return SEMICOLON_DELIMITER
    return DEFAULT_DELIMITER


def resolve_delimiter(filename: str, delimiter: Optional[str] = None) -> str:
    """Explicit argument, then MENU_DELIMITER, then filename detection."""
    if delimiter:
        return delimiter
    if MENU_DELIMITER:
        return MENU_DELIMITER
    return detect_delimiter(filename)


# ---------------------------------------------------------------------------
# Upload validation
# ---------------------------------------------------------------------------

def validate_upload(filename: Optional[str], content_type: Optional[str] = None) -> None:
    """Reject anything that is neither text/csv nor named *.csv."""
    if not filename:
        raise UnsupportedFileError("No file provided")
    media_type = (content_type or "").split(";")[0].strip().lower()
    if media_type not in CSV_CONTENT_TYPES and not filename.lower().endswith(CSV_SUFFIX):
        raise UnsupportedFileError(f"File must be a CSV (got '{filename}')")


# ---------------------------------------------------------------------------
# Fetching
# ---------------------------------------------------------------------------

def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_source(source: str, timeout: float = FETCH_TIMEOUT) -> str:
    """Return the raw text of a local CSV path or an http(s) URL."""
    if _is_url(source):
        try:
            resp = requests.get(source, timeout=timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Failed to load menu data: {exc}") from exc
        if not resp.ok:
            raise TransportError(f"Failed to load menu data: {resp.status_code}")
        resp.encoding = resp.encoding or "utf-8"
        return resp.text

    path = Path(source)
    if not path.is_file():
        raise TransportError(f"Failed to load menu data: {source} not found")
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise TransportError(f"Failed to load menu data: {exc}") from exc


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_csv_text(text: str, delimiter: str = DEFAULT_DELIMITER) -> pd.DataFrame:
    """Tokenize delimited text with a header row into a string-typed frame.

    Blank lines are skipped. Cells are kept as raw strings (no NA guessing);
    trimming is left to the normalizer. A row with more fields than the
    header is a format error, not a truncated row.
    """
    text = text.lstrip("\ufeff")
    if not text.strip():
        raise FormatError("Error parsing menu data: file is empty")
    try:
        with warnings.catch_warnings():
            # pandas only warns when index_col=False cuts off extra fields
            warnings.simplefilter("error", pd.errors.ParserWarning)
            return pd.read_csv(
                io.StringIO(text),
                sep=delimiter,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                index_col=False,
            )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, pd.errors.ParserWarning) as exc:
        raise FormatError(f"Error parsing menu data: {exc}") from exc


def check_schema(columns: Iterable[str], required: Iterable[str] = REQUIRED_FIELDS) -> None:
    """Raise SchemaError if any required header is absent (after trimming)."""
    present = {str(c).strip() for c in columns}
    wanted = list(dict.fromkeys([*CORE_FIELDS, *required]))
    missing = [col for col in wanted if col not in present]
    if missing:
        raise SchemaError(missing)


def load_menu_text(
    text: str,
    filename: str = "",
    delimiter: Optional[str] = None,
    required_fields: Iterable[str] = REQUIRED_FIELDS,
    numeric_fields: Iterable[str] = NUMERIC_FIELDS,
) -> tuple[list[MenuItem], int]:
    """Raw CSV text → (validated items, dropped-row count).

    Format and schema problems raise; bad rows are only counted.
    """
    required_fields = list(required_fields)
    df = parse_csv_text(text, resolve_delimiter(filename, delimiter))
    check_schema(df.columns, required_fields)
    return normalize_rows(df.to_dict("records"), required_fields, numeric_fields)
