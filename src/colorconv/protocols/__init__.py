"""Protocol definitions for colorconv observers and events."""

from .events import ColorEvent
from .observers import ColorObserver

__all__ = [
    # Events
    "ColorEvent",
    # Observers
    "ColorObserver",
]
