"""Configuration models and constants shared across the helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_FRAME_COLS = ["Key", "Value"]
FORMAT_STYLES = ("percent", "brace")


@dataclass(frozen=True)
class MappingFormat:
    entry_format: str = "%s=%s"
    prefix: str = ""
    suffix: str = ""
    first_entry_format: Optional[str] = None  # falls back to entry_format
    last_entry_format: Optional[str] = None  # falls back to entry_format
    style: str = "percent"  # "percent" | "brace"


# "[a=1, b=2]"
BRACKETED = MappingFormat(
    entry_format=", %s=%s",
    prefix="[",
    suffix="]",
    first_entry_format="%s=%s",
)

# "{'a': 1, 'b': 2}"
DICT_LITERAL = MappingFormat(
    entry_format=", {!r}: {!r}",
    prefix="{",
    suffix="}",
    first_entry_format="{!r}: {!r}",
    style="brace",
)
