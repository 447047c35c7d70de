"""Interactive color converter."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input

from colorconv.core import ColorSyncController
from colorconv.exceptions import ColorError, handle_errors
from colorconv.models import ColorSource, ColorState, HslChannel, RgbChannel
from colorconv.protocols import ColorEvent

from .widgets import ColorPanel, ColorSwatch, StatusBar

logger = logging.getLogger(__name__)


class ColorConverterApp(App):
    """
    Textual front end for ColorSyncController.

    A pure UI layer: every keystroke in an input is forwarded to the
    controller, and the controller's observer callback repaints the other
    inputs. Repaints are done with Input.Changed suppressed, so writing a
    derived value into a field never looks like a user edit.

    Implements ColorObserver via structural subtyping (no explicit
    inheritance to avoid metaclass conflicts between App and Protocol).
    """

    TITLE = "Color Converter"

    BINDINGS = [
        Binding("ctrl+r", "reset", "Reset", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(self, controller: ColorSyncController):
        super().__init__()
        self.controller = controller
        # Input currently being edited by the user; it is never repainted
        self._editing_input: Optional[str] = None
        self._last_error: Optional[str] = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield ColorPanel("HEX", "hex")
        yield ColorPanel("RGB", "rgb", tuple(c.value for c in RgbChannel))
        yield ColorPanel("HSL", "hsl", tuple(c.value for c in HslChannel))
        yield ColorSwatch()
        yield StatusBar()
        yield Footer()

    def on_mount(self) -> None:
        self.controller.register_observer(self)
        self._render_state(self.controller.current_state())

    def on_unmount(self) -> None:
        self.controller.unregister_observer(self)

    # =================================================================
    # ColorObserver Protocol Implementation
    # =================================================================

    def on_color_event(
        self,
        event: ColorEvent,
        state: ColorState,
        error: Optional[ColorError] = None,
    ) -> None:
        """Repaint after a controller event."""
        if event is ColorEvent.EDIT_REJECTED:
            self._last_error = error.user_message if error else "Invalid input"
            self._update_status(state)
            return

        self._last_error = None
        self._render_state(state)

    # =================================================================
    # User input
    # =================================================================

    def on_input_changed(self, event: Input.Changed) -> None:
        input_id = event.input.id
        if input_id is None:
            return

        self._editing_input = input_id
        try:
            self._apply_edit(input_id, event.value)
        finally:
            self._editing_input = None

    def on_input_blurred(self, event: Input.Blurred) -> None:
        """Replace what was typed with the committed value (clamped, wrapped, normalized).

        After a rejected edit the typed text stays so it can be corrected.
        """
        if event.input.id is None or self.controller.rejected_input is not None:
            return
        self._render_state(self.controller.current_state())

    @handle_errors(operation_name="apply edit", re_raise=False, log_level=logging.DEBUG)
    def _apply_edit(self, input_id: str, value: str) -> None:
        """Forward one field edit to the controller.

        Rejections are reported through on_color_event, so they are only
        logged here.
        """
        if input_id == "hex":
            self.controller.on_hex_edited(value)
        elif input_id.startswith("rgb-"):
            self.controller.on_rgb_channel_edited(input_id.removeprefix("rgb-"), value)
        elif input_id.startswith("hsl-"):
            self.controller.on_hsl_channel_edited(input_id.removeprefix("hsl-"), value)

    def action_reset(self) -> None:
        """Return to the seed color."""
        self.controller.reset()

    # =================================================================
    # Rendering
    # =================================================================

    def _render_state(self, state: ColorState) -> None:
        values = {"hex": state.hex}
        values.update({f"rgb-{c.value}": str(getattr(state.rgb, c.value)) for c in RgbChannel})
        values.update({f"hsl-{c.value}": str(getattr(state.hsl, c.value)) for c in HslChannel})

        with self.prevent(Input.Changed):
            for input_id, value in values.items():
                if input_id == self._editing_input:
                    continue
                field = self.query_one(f"#{input_id}", Input)
                if field.value != value:
                    field.value = value

        for source in ColorSource:
            self.query_one(f"#{source.value}-panel", ColorPanel).set_class(
                source is state.source, "source"
            )

        self.query_one(ColorSwatch).show_state(state)
        self._update_status(state)

    def _update_status(self, state: ColorState) -> None:
        self.query_one(StatusBar).update_state(
            state.source, self.controller.range_policy, self._last_error
        )
