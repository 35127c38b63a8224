"""Data-layer helpers."""

from .frames import mapping_from_frame, mapping_to_frame, normalize_pairs_frame, pairs_from_frame

__all__ = ["mapping_from_frame", "mapping_to_frame", "normalize_pairs_frame", "pairs_from_frame"]
