"""Input panels for the three color representations."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Input, Label


class ColorPanel(Vertical):
    """
    Titled row of inputs for one representation.

    Input ids are "<prefix>-<channel>" (e.g. "rgb-r"), or just the prefix
    when the representation has a single field (HEX).
    """

    DEFAULT_CSS = """
    ColorPanel {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }

    ColorPanel.source {
        border: round $accent;
    }

    ColorPanel Horizontal {
        height: auto;
    }

    ColorPanel Input {
        width: 1fr;
    }
    """

    def __init__(self, title: str, prefix: str, channels: tuple[str, ...] = ()) -> None:
        super().__init__(id=f"{prefix}-panel")
        self.border_title = title
        self._prefix = prefix
        self._channels = channels

    def compose(self) -> ComposeResult:
        with Horizontal():
            if not self._channels:
                yield Input(id=self._prefix, placeholder="#rrggbb")
            for channel in self._channels:
                yield Label(f"{channel.upper()} ")
                yield Input(id=f"{self._prefix}-{channel}", placeholder=channel)
