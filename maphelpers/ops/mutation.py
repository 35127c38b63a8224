"""In-place bulk and conditional updates on caller-owned mappings.

None of these helpers lock the mapping. Callers sharing a mapping across
threads must synchronise around each call; in particular the membership
check and the store in :func:`put_if_present` are two separate steps.
"""

from __future__ import annotations

import logging
from typing import Iterable, MutableMapping, Optional, Sequence, Tuple, TypeVar, Union

from maphelpers.exceptions import InvalidArgument

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")
D = TypeVar("D")
M = TypeVar("M", bound=MutableMapping)


def put_into_map(mapping: M, key_value_pairs: Sequence[object]) -> M:
    """
    Store alternating ``key, value, key, value, ...`` items into ``mapping``.

    Items are applied in order, so a repeated key keeps its later value. An odd
    number of items is rejected before anything is written. Errors raised by
    the mapping itself propagate unchanged. Returns ``mapping`` for chaining.
    """
    if len(key_value_pairs) % 2:
        raise InvalidArgument(
            f"The number of items must be even (key/value pairs), got {len(key_value_pairs)}."
        )

    for idx in range(0, len(key_value_pairs), 2):
        mapping[key_value_pairs[idx]] = key_value_pairs[idx + 1]

    logger.debug("put_into_map stored %d pairs", len(key_value_pairs) // 2)
    return mapping


def put_pairs(mapping: M, pairs: Iterable[Tuple[K, V]]) -> M:
    """Store explicit ``(key, value)`` pairs into ``mapping`` in order and return it."""
    count = 0
    for key, value in pairs:
        mapping[key] = value
        count += 1

    logger.debug("put_pairs stored %d pairs", count)
    return mapping


def remove_keys(mapping: M, keys_to_remove: Iterable[object]) -> M:
    """Remove each listed key if present; absent keys are ignored. Returns ``mapping``."""
    removed = 0
    for key in keys_to_remove:
        if key in mapping:
            del mapping[key]
            removed += 1

    logger.debug("remove_keys removed %d entries", removed)
    return mapping


def put_if_present(
    mapping: MutableMapping[K, V],
    key: K,
    value: V,
    default: Optional[D] = None,
) -> Union[V, D, None]:
    """Overwrite ``key`` only when it already exists.

    Returns the previous value, or ``default`` when ``key`` is absent and the
    mapping was left untouched.
    """
    if key not in mapping:
        return default
    previous = mapping[key]
    mapping[key] = value
    return previous


__all__ = ["put_into_map", "put_pairs", "put_if_present", "remove_keys"]
