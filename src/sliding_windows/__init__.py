"""Sliding windows over any iterable, backed by a single reusable buffer.

No element is ever copied: every window is a view into one
:class:`Storage`, and only one window may be alive at a time. Iterating a
:class:`SlidingWindows` adaptor with ``for`` releases each window before the
next one is produced.
"""

from importlib import metadata

from .adaptor import SlidingWindows, sliding_windows
from .config import WindowConfig, load_window_config
from .errors import ReentrancyError, SlidingWindowError, StorageConsumedError, UseAfterReleaseError
from .sources import IteratorSource, Source, as_source
from .storage import CAPACITY_POLICIES, STRATEGIES, Storage
from .window import Slot, Window

try:
    __version__ = metadata.version("sliding-windows")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.1.0"

__all__ = [
    "SlidingWindows",
    "sliding_windows",
    "Storage",
    "STRATEGIES",
    "CAPACITY_POLICIES",
    "Window",
    "Slot",
    "Source",
    "IteratorSource",
    "as_source",
    "WindowConfig",
    "load_window_config",
    "SlidingWindowError",
    "ReentrancyError",
    "UseAfterReleaseError",
    "StorageConsumedError",
    "__version__",
]
