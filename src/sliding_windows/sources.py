"""Input adapters that report how many elements remain."""

from __future__ import annotations

from collections.abc import Sized
from typing import Iterable, Iterator, Optional, Protocol, Tuple, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

SizeHint = Tuple[int, Optional[int]]


@runtime_checkable
class Source(Protocol[T_co]):
    """Iterator contract consumed by :class:`~sliding_windows.adaptor.SlidingWindows`."""

    def __next__(self) -> T_co:  # pragma: no cover - interface only
        ...

    def size_hint(self) -> SizeHint:  # pragma: no cover - interface only
        ...


class IteratorSource(Iterator[T]):
    """Wraps any iterable and tracks how much of it has been consumed.

    Sized inputs (lists, tuples, ranges, ...) report an exact estimate.
    Inputs with their own ``size_hint()`` are asked directly, everything
    else reports ``(0, None)``.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iterable = iterable
        self._length = len(iterable) if isinstance(iterable, Sized) else None
        self._iterator = iter(iterable)
        self._consumed = 0
        self._exhausted = False

    def __iter__(self) -> "IteratorSource[T]":
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        try:
            value = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            raise
        self._consumed += 1
        return value

    def size_hint(self) -> SizeHint:
        if self._exhausted:
            return (0, 0)
        if self._length is not None:
            remaining = max(self._length - self._consumed, 0)
            return (remaining, remaining)
        hint = getattr(self._iterable, "size_hint", None)
        if callable(hint):
            return hint()
        return (0, None)


def as_source(iterable: Iterable[T]) -> Source[T]:
    """Return ``iterable`` unchanged if it already is a :class:`Source`."""

    if isinstance(iterable, Source):
        return iterable
    return IteratorSource(iterable)
