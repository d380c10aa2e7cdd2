"""Pawn structure figures used by evaluation."""

from collections import Counter
from collections.abc import Iterable

from chessmoves.game.position import Position


def duplicated_files(positions: Iterable[Position]) -> dict[int, int]:
    """Files holding two or more of the given positions, with their counts."""
    counts = Counter(pos.x for pos in positions)
    return {file: count for file, count in sorted(counts.items()) if count >= 2}


def count_duplicated_files(positions: Iterable[Position]) -> int:
    """Count positions that share a file with at least one other.

    Every position on a shared file counts, including the first one: three
    pawns on the c-file contribute 3, not 2.
    """
    return sum(duplicated_files(positions).values())
