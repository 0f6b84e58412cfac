"""Iteration engine yielding sliding windows over an input sequence."""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .errors import ReentrancyError
from .sources import SizeHint, as_source
from .storage import Storage
from .window import Window

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EXHAUSTED = object()


def _sliding_count(bound: int, size: int) -> int:
    if bound == 0:
        return 0
    if bound >= size:
        return bound - size + 1
    return 1


class SlidingWindows(Generic[T]):
    """Pulls elements from ``iterable`` into ``storage`` and yields windows.

    ``produce_next()`` is the low-level protocol: it returns the next
    :class:`~sliding_windows.window.Window` or ``None`` once the input is
    exhausted, and raises :class:`~sliding_windows.errors.ReentrancyError`
    if the previous window is still alive. Iterating the adaptor with
    ``for`` releases each window before the next one is produced, so loop
    bodies never have to.

    Elements that do not complete a window at the end of the input are
    dropped. The adaptor is fused: once finished it stays finished.

    Example::

        >>> storage = Storage(3)
        >>> [window.to_list() for window in SlidingWindows(range(5), storage)]
        [[0, 1, 2], [1, 2, 3], [2, 3, 4]]
    """

    def __init__(self, iterable: Iterable[T], storage: Storage[T]) -> None:
        # the storage may still hold elements from an earlier run
        storage.clear()
        self._source = as_source(iterable)
        self._storage = storage
        self._finished = storage.window_size == 0
        if storage.capacity_policy == "hint":
            storage.reserve(self._source.size_hint()[1])

    @property
    def storage(self) -> Storage[T]:
        return self._storage

    @property
    def finished(self) -> bool:
        return self._finished

    def produce_next(self) -> Optional[Window[T]]:
        if self._finished:
            return None

        storage = self._storage
        if storage.in_use:
            # checked before pulling so the element is not lost
            raise ReentrancyError("produce_next")
        while True:
            element = next(self._source, _EXHAUSTED)
            if element is _EXHAUSTED:
                self._finished = True
                logger.debug("Input exhausted; %d trailing elements dropped", len(storage) % storage.window_size)
                return None
            if storage.push(element):  # type: ignore[arg-type]
                return storage.new_window()

    def size_hint(self) -> SizeHint:
        """Estimate how many windows are left from the input's own estimate."""

        size = self._storage.window_size
        if size == 0:
            return (0, None)
        lower, upper = self._source.size_hint()
        return (
            _sliding_count(lower, size),
            None if upper is None else _sliding_count(upper, size),
        )

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def __iter__(self) -> Iterator[Window[T]]:
        while True:
            window = self.produce_next()
            if window is None:
                return
            try:
                yield window
            finally:
                window.release()


def sliding_windows(
    iterable: Iterable[T],
    storage: Storage[T] | int,
    **options: object,
) -> SlidingWindows[T]:
    """Wrap ``iterable`` in a :class:`SlidingWindows` adaptor.

    ``storage`` may be an existing :class:`Storage` (reused, cleared first)
    or a window size, in which case ``options`` are passed to ``Storage``.
    """

    if isinstance(storage, int):
        storage = Storage(storage, **options)  # type: ignore[arg-type]
    elif options:
        raise TypeError("Storage options cannot be combined with an existing Storage")
    return SlidingWindows(iterable, storage)
