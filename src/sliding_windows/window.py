"""Views into the storage of a sliding iteration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Iterable, Iterator, List, Sequence, TypeVar, overload

from .errors import UseAfterReleaseError

if TYPE_CHECKING:
    from .storage import Storage

T = TypeVar("T")


class Slot(Generic[T]):
    """Mutable handle to one element of a window, yielded by :meth:`Window.iter_mut`."""

    __slots__ = ("_window", "_index")

    def __init__(self, window: "Window[T]", index: int) -> None:
        self._window = window
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> T:
        return self._window[self._index]

    @value.setter
    def value(self, new_value: T) -> None:
        self._window[self._index] = new_value

    def __repr__(self) -> str:
        return f"Slot({self._index})"


class Window(Generic[T]):
    """A fixed-size window over the elements held by a :class:`Storage`.

    Windows never copy elements: indexing reads from and writes to the
    storage's backing list, so writes are visible to later windows that
    still cover the element. A window owns the storage until it is
    released, either explicitly, by leaving a ``with`` block, or when the
    window is garbage collected. Accessing a released window raises
    :class:`~sliding_windows.errors.UseAfterReleaseError`.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, storage: "Storage[T]", data: List[T], offset: int, size: int, *, wraps: bool) -> None:
        self._storage: "Storage[T] | None" = storage
        self._data = data
        self._offset = offset
        self._size = size
        self._wraps = wraps

    def _physical(self, index: int) -> int:
        if self._storage is None:
            raise UseAfterReleaseError()
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("Window index out of range")
        if self._wraps:
            return (self._offset + index) % self._size
        return self._offset + index

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: int | slice) -> T | List[T]:
        if isinstance(index, slice):
            if self._storage is None:
                raise UseAfterReleaseError()
            return [self[i] for i in range(*index.indices(self._size))]
        return self._data[self._physical(index)]

    @overload
    def __setitem__(self, index: int, value: T) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[T]) -> None: ...

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            if self._storage is None:
                raise UseAfterReleaseError()
            positions = range(*index.indices(self._size))
            values = list(value)
            if len(values) != len(positions):
                raise ValueError(
                    f"cannot assign {len(values)} values to a window slice of {len(positions)} elements"
                )
            for position, item in zip(positions, values):
                self._data[self._physical(position)] = item
            return
        self._data[self._physical(index)] = value

    def __len__(self) -> int:
        return self._size

    def iter(self) -> Iterator[T]:
        """Iterate the elements in logical order, starting at the oldest."""

        if self._storage is None:
            raise UseAfterReleaseError()
        return self._iter()

    def _iter(self) -> Iterator[T]:
        for index in range(self._size):
            yield self._data[self._physical(index)]

    __iter__ = iter

    def iter_mut(self) -> Iterator[Slot[T]]:
        """Iterate writable :class:`Slot` handles in logical order."""

        if self._storage is None:
            raise UseAfterReleaseError()
        return (Slot(self, index) for index in range(self._size))

    def to_list(self) -> List[T]:
        return list(self.iter())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Window):
            other = other.to_list()
        elif not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        if len(other) != self._size:
            return False
        return all(mine == theirs for mine, theirs in zip(self.iter(), other))

    @property
    def released(self) -> bool:
        return self._storage is None

    def release(self) -> None:
        """Give the storage back. Only the first call has an effect."""

        storage, self._storage = self._storage, None
        if storage is not None:
            storage._release()

    def __enter__(self) -> "Window[T]":
        if self._storage is None:
            raise UseAfterReleaseError()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        self.release()

    def __repr__(self) -> str:
        if self._storage is None:
            return "Window(<released>)"
        return f"Window({self.to_list()!r})"
