from __future__ import annotations

from typing import Iterable, Iterator, List

import numpy as np


class IndexSet:
    """Set of point indices in [0, capacity), backed by a boolean mask.

    Iteration is always in ascending index order, so anything derived from an
    IndexSet is deterministic across runs.
    """

    __slots__ = ("_mask", "_size")

    def __init__(self, capacity: int):
        self._mask = np.zeros(max(0, capacity), dtype=bool)
        self._size = 0

    @classmethod
    def from_mask(cls, mask: np.ndarray) -> "IndexSet":
        s = cls(0)
        s._mask = np.array(mask, dtype=bool)
        s._size = int(np.count_nonzero(s._mask))
        return s

    @classmethod
    def from_indices(cls, capacity: int, indices: Iterable[int]) -> "IndexSet":
        s = cls(capacity)
        for i in indices:
            s.add(i)
        return s

    @property
    def capacity(self) -> int:
        return self._mask.shape[0]

    def add(self, index: int) -> None:
        if not self._mask[index]:
            self._mask[index] = True
            self._size += 1

    def __contains__(self, index) -> bool:
        return 0 <= index < self._mask.shape[0] and bool(self._mask[index])

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(np.flatnonzero(self._mask).tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, IndexSet):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __repr__(self) -> str:
        return f"IndexSet({self.to_list()})"

    def to_list(self) -> List[int]:
        return np.flatnonzero(self._mask).tolist()


def intersect(a: IndexSet, b: IndexSet) -> IndexSet:
    """Intersection of two index sets.

    Walks the smaller set and tests membership in the larger one. The result
    does not depend on which operand is walked.
    """

    if len(b) < len(a):
        a, b = b, a

    result = IndexSet(max(a.capacity, b.capacity))
    for x in a:
        if x in b:
            result.add(x)
    return result
