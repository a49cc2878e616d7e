"""Insertion-ordered set used for protocol phases."""

from typing import Dict, Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class OrderedSet(Generic[T]):
    """
    Set that remembers first-insertion order.

    Adding an existing member is a no-op and does not move it.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: Dict[T, None] = {}
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        if item not in self._items:
            self._items[item] = None

    def update(self, items: Iterable[T]) -> None:
        for item in items:
            self.add(item)

    def to_list(self) -> List[T]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"
