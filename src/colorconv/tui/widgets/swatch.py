"""Color swatch preview widget."""

from textual.widgets import Static

from colorconv.models import ColorState


class ColorSwatch(Static):
    """Block filled with the current color, labelled with its HEX value."""

    DEFAULT_CSS = """
    ColorSwatch {
        height: 5;
        content-align: center middle;
        text-style: bold;
        margin: 1 0;
    }
    """

    def show_state(self, state: ColorState) -> None:
        """Repaint with the given color."""
        self.styles.background = state.hex
        # Dark text on light colors, light text on dark ones
        self.styles.color = "black" if state.hsl.l > 55 else "white"
        self.update(state.hex)
