"""Stateless helpers for bulk updates and formatting of caller-owned mappings."""

from .config import BRACKETED, DICT_LITERAL, MappingFormat
from .exceptions import FormatError, InvalidArgument, MapHelpersError
from .ops import format_mapping, format_with_config, put_if_present, put_into_map, put_pairs, remove_keys

__all__ = [
    "BRACKETED",
    "DICT_LITERAL",
    "FormatError",
    "InvalidArgument",
    "MapHelpersError",
    "MappingFormat",
    "format_mapping",
    "format_with_config",
    "put_if_present",
    "put_into_map",
    "put_pairs",
    "remove_keys",
]
