from __future__ import annotations
from typing import Callable, Hashable, Iterable, List, Optional, Set, TypeVar

T = TypeVar("T", bound=Hashable)


class OrderedSet:
    """Insertion-ordered set: a hash set for membership plus a list for order."""

    def __init__(self, values: Iterable = ()):
        self._seen: Set = set()
        self._order: List = []
        for v in values:
            self.add(v)

    def add(self, value) -> bool:
        if value in self._seen:
            return False
        self._seen.add(value)
        self._order.append(value)
        return True

    def __contains__(self, value) -> bool:
        return value in self._seen

    def __iter__(self):
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def to_list(self) -> List:
        return list(self._order)


def unique_ordered(values: Iterable[T], keep: Optional[Callable[[T], bool]] = None) -> List[T]:
    """Dedup keeping first occurrence, then drop entries rejected by `keep`."""
    out = OrderedSet(values)
    if keep is None:
        return out.to_list()
    return [v for v in out if keep(v)]
