"""
Non-empty sequence used to collect one or more accumulated errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class NonEmpty(Generic[T]):
    """
    Ordered sequence holding at least one item.

    Stored as a head plus a (possibly empty) tuple tail, so an empty
    instance cannot be constructed.
    """

    head: T
    tail: tuple[T, ...] = ()

    @classmethod
    def pure(cls, item: T) -> NonEmpty[T]:
        return cls(item)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> NonEmpty[T]:
        """Build from any iterable; raises ValueError if it yields nothing."""
        collected = tuple(items)
        if not collected:
            raise ValueError("NonEmpty requires at least one item")
        return cls(collected[0], collected[1:])

    def cons(self, item: T) -> NonEmpty[T]:
        return NonEmpty(item, (self.head, *self.tail))

    def concat(self, other: NonEmpty[T]) -> NonEmpty[T]:
        return NonEmpty(self.head, (*self.tail, other.head, *other.tail))

    def to_list(self) -> list[T]:
        return [self.head, *self.tail]

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def __repr__(self) -> str:
        return f"NonEmpty({self.to_list()!r})"


def cons(item: T, items: NonEmpty[T]) -> NonEmpty[T]:
    """Prepend ``item`` to ``items``."""
    return items.cons(item)
