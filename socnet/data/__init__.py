"""Loading follow relations from files and DataFrames."""

from .loader import pairs_from_frame, parse_follow_pairs, read_follow_pairs

__all__ = [
    "pairs_from_frame",
    "parse_follow_pairs",
    "read_follow_pairs",
]
