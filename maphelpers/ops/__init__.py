"""Mapping mutation and formatting helpers."""

from .formatting import format_mapping, format_with_config
from .mutation import put_if_present, put_into_map, put_pairs, remove_keys

__all__ = [
    "format_mapping",
    "format_with_config",
    "put_if_present",
    "put_into_map",
    "put_pairs",
    "remove_keys",
]
