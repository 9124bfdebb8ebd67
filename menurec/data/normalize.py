"""
Header/value trimming, numeric coercion, required-field validation.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

import pandas as pd

from menurec.config import CORE_FIELDS, FIELD_MAP, NUMERIC_FIELDS, REQUIRED_FIELDS
from menurec.data.schemas import MenuItem


# ---------------------------------------------------------------------------
# Trimming
# ---------------------------------------------------------------------------

def _strip_value(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def trim_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Strip whitespace from every header name and every string cell."""
    df = df.rename(columns=lambda c: str(c).strip())
    for col in df.columns:
        if not pd.api.types.is_numeric_dtype(df[col]):
            df[col] = df[col].map(_strip_value)
    return df


def _present(series: pd.Series) -> pd.Series:
    """True where a cell holds a non-empty value."""
    return series.notna() & (series.astype(str).str.strip() != "")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def normalize_frame(
    df: pd.DataFrame,
    required_fields: Iterable[str] = REQUIRED_FIELDS,
    numeric_fields: Iterable[str] = NUMERIC_FIELDS,
) -> tuple[pd.DataFrame, int]:
    """Trim, coerce and validate a raw frame.

    Returns the surviving rows and the number of rows dropped. A row survives
    only if every required field is non-empty and every numeric field either
    is blank or parses as a finite number. Blank numeric cells become NaN.
    """
    if len(df) == 0:
        return df, 0

    df = trim_frame(df)
    keep = pd.Series(True, index=df.index)
    required = list(dict.fromkeys([*CORE_FIELDS, *required_fields]))

    for col in required:
        if col not in df.columns:
            keep[:] = False
            break
        keep &= _present(df[col])

    for col in numeric_fields:
        if col not in df.columns:
            continue
        raw = df[col]
        blank = ~_present(raw)
        cleaned = raw.where(blank, raw.astype(str).str.replace(r"[\$,]", "", regex=True))
        numbers = pd.to_numeric(cleaned.where(~blank), errors="coerce")
        # inf, -inf and overflowing values like 1e400 count as failed conversions
        numbers = numbers.where(numbers.abs() != float("inf"))
        keep &= blank | numbers.notna()
        df[col] = numbers

    dropped = int((~keep).sum())
    return df[keep].reset_index(drop=True), dropped


def frame_to_items(df: pd.DataFrame) -> list[MenuItem]:
    """Build MenuItems from a frame that already passed normalize_frame."""
    items = []
    for row in df.to_dict("records"):
        fields = {}
        for col, attr in FIELD_MAP.items():
            value = row.get(col)
            if value is None or (not isinstance(value, str) and pd.isna(value)):
                continue
            fields[attr] = float(value) if attr == "price" else str(value)
        items.append(MenuItem(**fields))
    return items


def normalize_rows(
    raw_rows: Iterable[Mapping[str, Any]],
    required_fields: Iterable[str] = REQUIRED_FIELDS,
    numeric_fields: Iterable[str] = NUMERIC_FIELDS,
) -> tuple[list[MenuItem], int]:
    """Raw parsed rows → validated MenuItems plus the dropped-row count.

    Never raises for bad rows; they are left out and counted.
    """
    rows = [{str(k).strip(): v for k, v in row.items()} for row in raw_rows]
    if not rows:
        return [], 0
    df, dropped = normalize_frame(pd.DataFrame.from_records(rows), required_fields, numeric_fields)
    if dropped:
        print(f"  Dropped {dropped:,} invalid row(s)")
    return frame_to_items(df), dropped
