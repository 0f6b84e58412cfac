"""Exceptions raised when the single-view contract of a storage is broken."""

from __future__ import annotations


class SlidingWindowError(RuntimeError):
    """Base class for programming errors detected by the window machinery."""


class ReentrancyError(SlidingWindowError):
    """A storage was touched while a window into it was still alive."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() called before previous Window was released")


class UseAfterReleaseError(SlidingWindowError):
    """A window was accessed after it released its storage."""

    def __init__(self) -> None:
        super().__init__("Window accessed after release")


class StorageConsumedError(SlidingWindowError):
    """A storage was used after its backing list was handed back via ``into_list``."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() called on a Storage consumed by into_list()")
