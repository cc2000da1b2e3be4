"""Turn follow data files and tables into ``(follower, followee)`` pairs."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from socnet.exceptions import MalformedInputError
from socnet.graph.model import FollowPair

logger = logging.getLogger(__name__)

DEFAULT_FOLLOWER_COLUMN = "follower"
DEFAULT_FOLLOWEE_COLUMN = "followee"


def parse_follow_pairs(text: str) -> List[FollowPair]:
    """Split whitespace-separated tokens into ``follower followee`` pairs.

    Line breaks carry no meaning; ``"a b\\nc d"`` and ``"a b c d"`` parse the
    same way.
    """
    tokens = text.split()
    if len(tokens) % 2:
        raise MalformedInputError(
            f"follow data has an odd number of names ({len(tokens)}); "
            f"last name {tokens[-1]!r} has no followee"
        )
    return list(zip(tokens[0::2], tokens[1::2]))


def read_follow_pairs(path: Union[str, Path]) -> List[FollowPair]:
    """Read a follow data file."""
    path = Path(path)
    if not path.exists():
        logger.error(f"Follow data file not found: {path}")
        raise FileNotFoundError(f"follow data file not found: {path}")
    if not path.is_file():
        raise MalformedInputError(f"follow data path is not a regular file: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"follow data file {path} is not valid UTF-8: {exc}") from exc
    pairs = parse_follow_pairs(text)
    logger.info(f"Loaded {len(pairs)} follow pairs from {path}")
    return pairs


def pairs_from_frame(
    frame: pd.DataFrame,
    *,
    follower_col: str = DEFAULT_FOLLOWER_COLUMN,
    followee_col: str = DEFAULT_FOLLOWEE_COLUMN,
) -> List[FollowPair]:
    """Extract pairs from a DataFrame, preserving row order."""

    missing = [col for col in (follower_col, followee_col) if col not in frame.columns]
    if missing:
        raise MalformedInputError(f"follow frame is missing columns: {', '.join(missing)}")

    edges = frame[[follower_col, followee_col]]
    blank = edges.isna() | edges.astype(str).apply(lambda col: col.str.strip() == "")
    bad_rows = blank.any(axis=1)
    if bad_rows.any():
        first = edges.index[bad_rows.to_numpy()][0]
        raise MalformedInputError(
            f"follow frame has {int(bad_rows.sum())} rows with a missing name (first at index {first})"
        )

    return [
        (str(follower), str(followee))
        for follower, followee in edges.itertuples(index=False, name=None)
    ]
