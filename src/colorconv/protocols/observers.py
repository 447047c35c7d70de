"""Observer protocol definitions for color events."""

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from .events import ColorEvent

if TYPE_CHECKING:
    from colorconv.exceptions import ColorError
    from colorconv.models import ColorState


@runtime_checkable
class ColorObserver(Protocol):
    """
    Observer that receives color synchronization events.

    Presentation layers implement this to re-render the representations
    that were not edited.
    """

    def on_color_event(
        self,
        event: ColorEvent,
        state: "ColorState",
        error: Optional["ColorError"] = None,
    ) -> None:
        """
        Handle a committed, rejected or reset edit.

        Args:
            event: The type of color event
            state: Current color after the event (unchanged for EDIT_REJECTED)
            error: The rejection reason for EDIT_REJECTED, else None

        Note:
            Called synchronously from inside the edit call, after the new
            state is committed.
        """
        ...
