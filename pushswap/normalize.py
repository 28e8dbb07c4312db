"""Replacing values by their ranks."""

from __future__ import annotations

from typing import Iterable


def normalize(values: Iterable[int]) -> list[int]:
    """Return the rank of each value: the smallest becomes 0, the largest n - 1.

    The values are expected to be distinct; equal values get distinct
    ranks in their order of appearance.
    """
    items = list(values)
    ranks = [0] * len(items)
    for rank, position in enumerate(sorted(range(len(items)), key=items.__getitem__)):
        ranks[position] = rank
    return ranks