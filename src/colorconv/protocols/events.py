"""Domain events for the observer pattern."""

from enum import Enum


class ColorEvent(Enum):
    """Events from the synchronization controller."""

    COLOR_CHANGED = "color_changed"  # An edit was committed, all three views re-derived
    EDIT_REJECTED = "edit_rejected"  # An edit failed validation, previous color kept
    RESET = "reset"                  # Controller returned to its seed color
