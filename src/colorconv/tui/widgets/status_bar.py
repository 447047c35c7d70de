"""Status bar showing which representation is authoritative."""

from typing import Optional

from textual.widgets import Static

from colorconv.models import ColorSource, RangePolicy


class StatusBar(Static):
    """
    One-line status: last edited representation, range policy, and the
    most recent rejection message if the last edit failed.
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.rejected {
        background: $error;
    }
    """

    def update_state(
        self,
        source: ColorSource,
        policy: RangePolicy,
        error_message: Optional[str] = None,
    ) -> None:
        """
        Update all status information.

        Args:
            source: Representation the user edited last
            policy: Active range policy
            error_message: Why the last edit was rejected, if it was
        """
        text = f"Editing: {source.value.upper()} | Range: {policy.value}"
        if error_message:
            text += f" | {error_message}"
            self.add_class("rejected")
        else:
            self.remove_class("rejected")
        self.update(text)
