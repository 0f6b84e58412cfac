"""Backing storage shared by every window of a sliding iteration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, List, TypeVar

from .errors import ReentrancyError, SlidingWindowError, StorageConsumedError

if TYPE_CHECKING:
    from .config import WindowConfig
    from .window import Window

logger = logging.getLogger(__name__)

T = TypeVar("T")

STRATEGIES = ("ring", "shift", "drain")
CAPACITY_POLICIES = ("exact", "double", "hint")


class Storage(Generic[T]):
    """Holds the elements of the current window and hands out views into them.

    Only one :class:`~sliding_windows.window.Window` may be alive per storage.
    Every operation that touches the elements checks this and raises
    :class:`~sliding_windows.errors.ReentrancyError` while a window is
    outstanding.

    Three strategies keep the buffer up to date once it is full:

    ``ring``
        Exactly ``window_size`` slots; the oldest slot is overwritten and the
        logical start advances modulo ``window_size``.
    ``shift``
        The first element is deleted before appending (linear per push).
    ``drain``
        Elements are appended until the list reaches ``capacity``, then
        everything before the current window is dropped in a single pass.

    The capacity policy (``exact``, ``double`` or ``hint``) only matters for
    ``drain``; ``hint`` uses the ``size_hint`` given at construction, else the
    input length announced through :meth:`reserve`, and falls back to
    ``double`` when nothing is known.
    """

    def __init__(
        self,
        window_size: int,
        *,
        strategy: str = "ring",
        capacity: str = "double",
        size_hint: int | None = None,
        data: List[T] | None = None,
    ) -> None:
        if window_size < 0:
            raise ValueError("window_size must be non-negative")
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy '{strategy}' (expected one of {', '.join(STRATEGIES)})")
        if capacity not in CAPACITY_POLICIES:
            raise ValueError(
                f"Unknown capacity policy '{capacity}' (expected one of {', '.join(CAPACITY_POLICIES)})"
            )
        self.window_size = int(window_size)
        self.strategy = strategy
        self.capacity_policy = capacity
        self._size_hint = size_hint
        self._reserved: int | None = None
        self._data: List[T] = data if data is not None else []
        # prior contents of a reused allocation are discarded
        self._data.clear()
        self._offset = 0
        self._in_use = False
        self._consumed = False

    @classmethod
    def exact(cls, window_size: int, *, strategy: str = "ring") -> "Storage[T]":
        """Storage that never holds more than ``window_size`` elements."""

        return cls(window_size, strategy=strategy, capacity="exact")

    @classmethod
    def from_list(cls, values: List[T], window_size: int, **options: object) -> "Storage[T]":
        """Reuse ``values`` as the backing list. Its contents are removed."""

        return cls(window_size, data=values, **options)  # type: ignore[arg-type]

    @classmethod
    def from_config(cls, config: "WindowConfig") -> "Storage[T]":
        return cls(
            config.window_size,
            strategy=config.strategy,
            capacity=config.capacity,
            size_hint=config.size_hint,
        )

    @property
    def capacity(self) -> int:
        if self.capacity_policy == "exact":
            return self.window_size
        if self.capacity_policy == "hint":
            hint = self._size_hint if self._size_hint is not None else self._reserved
            if hint is not None:
                return max(self.window_size, hint)
        return 2 * self.window_size

    @property
    def in_use(self) -> bool:
        """True while a window into this storage has not been released."""

        return self._in_use

    @property
    def is_full(self) -> bool:
        return len(self) == self.window_size

    def __len__(self) -> int:
        if self.strategy == "ring":
            return len(self._data)
        return len(self._data) - self._offset

    def __repr__(self) -> str:
        return (
            f"Storage(window_size={self.window_size}, strategy={self.strategy!r}, "
            f"capacity={self.capacity_policy!r}, len={len(self)}, in_use={self._in_use})"
        )

    def _check(self, operation: str) -> None:
        if self._consumed:
            raise StorageConsumedError(operation)
        if self._in_use:
            raise ReentrancyError(operation)

    def reserve(self, size_hint: int | None) -> None:
        """Announce how many elements the input will deliver, if known."""

        self._check("reserve")
        self._reserved = size_hint

    def push(self, element: T) -> bool:
        """Insert ``element``; return True once a full window is available."""

        self._check("push")
        size = self.window_size
        data = self._data
        if size == 0:
            return True

        if len(self) < size:
            # filling phase after creation or clear()
            data.append(element)
            return len(self) == size

        if self.strategy == "ring":
            data[self._offset] = element
            self._offset = (self._offset + 1) % size
        elif self.strategy == "shift":
            del data[0]
            data.append(element)
        else:
            if len(data) >= self.capacity:
                dropped = self._offset + 1
                del data[:dropped]
                self._offset = 0
                logger.debug("Compacted storage: dropped %d stale elements", dropped)
            else:
                self._offset += 1
            data.append(element)
        return True

    def new_window(self) -> "Window[T]":
        """Mark the storage as borrowed and return a view of the current window."""

        from .window import Window

        self._check("new_window")
        if not self.is_full:
            raise SlidingWindowError(
                f"new_window() needs {self.window_size} elements, storage holds {len(self)}"
            )
        self._in_use = True
        return Window(self, self._data, self._offset, self.window_size, wraps=self.strategy == "ring")

    def _release(self) -> None:
        self._in_use = False

    def clear(self) -> None:
        self._check("clear")
        if self._data:
            logger.debug("Clearing %d stale elements from storage", len(self._data))
        self._data.clear()
        self._offset = 0

    def into_list(self) -> List[T]:
        """Consume the storage and return its backing list in physical order.

        The list is the same object that backed every window, so a later
        storage can reuse it through :meth:`from_list`. For the ``ring``
        strategy the elements are rotated by the logical start; for
        ``drain`` the stale prefix before the last window is included.
        """

        self._check("into_list")
        self._consumed = True
        return self._data
