"""Bridge between two-column key/value tables and mappings."""

from __future__ import annotations

from typing import Any, List, Mapping, MutableMapping, Tuple

import pandas as pd

from maphelpers.config import DEFAULT_FRAME_COLS
from maphelpers.exceptions import InvalidArgument
from maphelpers.ops.mutation import put_pairs

KEY_COL, VALUE_COL = DEFAULT_FRAME_COLS

_KEY_ALIASES = ("key", "keys", "name", "field")
_VALUE_ALIASES = ("value", "values", "val")


def normalize_pairs_frame(df: pd.DataFrame, key_col: str = KEY_COL, value_col: str = VALUE_COL) -> pd.DataFrame:
    """Resolve key/value columns by alias, strip string keys and drop blank keys."""
    if df is None:
        raise InvalidArgument("normalize_pairs_frame: DataFrame is None.")

    df = df.rename(columns={c: str(c).strip() for c in df.columns}).copy()
    aliases = {alias: key_col for alias in _KEY_ALIASES}
    aliases.update({alias: value_col for alias in _VALUE_ALIASES})
    for col in list(df.columns):
        target = aliases.get(col.lower())
        if target and target not in df.columns:
            df = df.rename(columns={col: target})

    missing = [c for c in (key_col, value_col) if c not in df.columns]
    if missing:
        raise InvalidArgument(f"Missing key/value columns: {missing}")

    out = df[[key_col, value_col]].copy()
    out[key_col] = out[key_col].map(lambda k: k.strip() if isinstance(k, str) else k)
    keep = out[key_col].notna() & (out[key_col] != "")
    return out[keep].reset_index(drop=True)


def pairs_from_frame(df: pd.DataFrame, key_col: str = KEY_COL, value_col: str = VALUE_COL) -> List[Tuple[Any, Any]]:
    """Return ``(key, value)`` tuples in row order."""
    out = normalize_pairs_frame(df, key_col, value_col)
    return list(zip(out[key_col].tolist(), out[value_col].tolist()))


def mapping_from_frame(
    df: pd.DataFrame,
    mapping: MutableMapping,
    key_col: str = KEY_COL,
    value_col: str = VALUE_COL,
) -> MutableMapping:
    """Load a key/value table into the caller's ``mapping``; later rows win."""
    return put_pairs(mapping, pairs_from_frame(df, key_col, value_col))


def mapping_to_frame(mapping: Mapping, key_col: str = KEY_COL, value_col: str = VALUE_COL) -> pd.DataFrame:
    """Tabulate a mapping's entries in iteration order."""
    keys, values = [], []
    for key, value in mapping.items():
        keys.append(key)
        values.append(value)
    return pd.DataFrame({key_col: pd.Series(keys, dtype="object"), value_col: pd.Series(values, dtype="object")})


__all__ = ["mapping_from_frame", "mapping_to_frame", "normalize_pairs_frame", "pairs_from_frame"]
