"""Render a mapping's entries into a single string with per-position templates."""

from __future__ import annotations

from typing import Mapping, Optional

from maphelpers.config import FORMAT_STYLES, MappingFormat
from maphelpers.exceptions import FormatError, InvalidArgument


def format_mapping(
    mapping: Mapping,
    prefix: str,
    first_entry_format: Optional[str],
    entry_format: str,
    last_entry_format: Optional[str],
    suffix: str,
    *,
    style: str = "percent",
) -> str:
    """
    Build ``prefix + entry_1 + ... + entry_n + suffix`` in iteration order.

    Each template receives the entry's key and value as its two positional
    arguments. ``first_entry_format`` and ``last_entry_format`` fall back to
    ``entry_format`` when ``None``; on a single-entry mapping the first-entry
    template takes precedence over the last-entry one.
    """
    if style not in FORMAT_STYLES:
        raise InvalidArgument(f"Unknown format style {style!r}; expected one of {FORMAT_STYLES}.")

    size = len(mapping)
    parts = [prefix]
    for idx, (key, value) in enumerate(mapping.items(), start=1):
        if idx == 1 and first_entry_format is not None:
            template = first_entry_format
        elif idx == size and last_entry_format is not None:
            template = last_entry_format
        else:
            template = entry_format
        parts.append(_render_entry(template, key, value, style, idx))
    parts.append(suffix)
    return "".join(parts)


def format_with_config(mapping: Mapping, fmt: MappingFormat) -> str:
    """Render ``mapping`` using a stored :class:`MappingFormat` bundle."""
    return format_mapping(
        mapping,
        fmt.prefix,
        fmt.first_entry_format,
        fmt.entry_format,
        fmt.last_entry_format,
        fmt.suffix,
        style=fmt.style,
    )


def _render_entry(template: str, key: object, value: object, style: str, idx: int) -> str:
    try:
        if style == "brace":
            return template.format(key, value)
        return template % (key, value)
    except (TypeError, ValueError, IndexError, KeyError, AttributeError, OverflowError) as exc:
        raise FormatError(f"Entry {idx}: template {template!r} cannot render (key, value): {exc}") from exc


__all__ = ["format_mapping", "format_with_config"]
