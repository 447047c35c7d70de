"""Smoke tests for the TUI using Textual's test framework."""

import pytest
from textual.widgets import Input

from colorconv.core import ColorSyncController
from colorconv.models import ColorSource
from colorconv.tui import ColorConverterApp
from colorconv.tui.widgets import ColorPanel, StatusBar


def field(app, input_id):
    return app.query_one(f"#{input_id}", Input).value


@pytest.fixture
def app():
    return ColorConverterApp(ColorSyncController())


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUI:
    """Drive the converter through its inputs."""

    async def test_initial_render(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            assert field(app, "hex") == "#ff5733"
            assert [field(app, f"rgb-{c}") for c in "rgb"] == ["255", "87", "51"]
            assert [field(app, f"hsl-{c}") for c in "hsl"] == ["11", "100", "60"]
            assert app.query_one("#hex-panel", ColorPanel).has_class("source")

    async def test_hsl_edit_updates_other_fields(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            app.query_one("#hsl-l", Input).value = "10"
            await pilot.pause()

            assert app.controller.last_edited is ColorSource.HSL
            assert field(app, "hex") == "#330900"
            assert [field(app, f"rgb-{c}") for c in "rgb"] == ["51", "9", "0"]
            assert field(app, "hsl-l") == "10"
            assert app.query_one("#hsl-panel", ColorPanel).has_class("source")

    async def test_rgb_edit_updates_other_fields(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            app.query_one("#rgb-g", Input).value = "0"
            await pilot.pause()

            assert field(app, "hex") == "#ff0033"
            assert app.controller.last_edited is ColorSource.RGB

    async def test_invalid_hex_keeps_text_and_color(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            app.query_one("#hex", Input).value = "#12"
            await pilot.pause()

            assert field(app, "hex") == "#12"
            assert field(app, "rgb-r") == "255"
            assert app.controller.current_state().hex == "#ff5733"
            assert app.controller.rejected_input == "#12"
            assert app.query_one(StatusBar).has_class("rejected")

    async def test_reset(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            app.query_one("#hex", Input).value = "#000000"
            await pilot.pause()
            assert field(app, "rgb-r") == "0"

            app.action_reset()
            await pilot.pause()

            assert field(app, "hex") == "#ff5733"
            assert field(app, "rgb-r") == "255"
            assert not app.query_one(StatusBar).has_class("rejected")

    async def test_clamped_value_shown_after_leaving_field(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            hue = app.query_one("#hsl-h", Input)
            hue.focus()
            await pilot.pause()
            hue.value = "-30"
            await pilot.pause()

            # While typing, the field keeps the raw text
            assert hue.value == "-30"
            assert app.controller.current_state().hsl.h == 330

            app.query_one("#hex", Input).focus()
            await pilot.pause()

            assert hue.value == "330"

    async def test_hex_normalized_after_leaving_field(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            hex_input = app.query_one("#hex", Input)
            hex_input.focus()
            await pilot.pause()
            hex_input.value = "F0A"
            await pilot.pause()

            app.query_one("#rgb-r", Input).focus()
            await pilot.pause()

            assert hex_input.value == "#ff00aa"

    async def test_rejected_text_kept_after_leaving_field(self, app):
        async with app.run_test() as pilot:
            await pilot.pause()

            red = app.query_one("#rgb-r", Input)
            red.focus()
            await pilot.pause()
            red.value = "abc"
            await pilot.pause()

            app.query_one("#hex", Input).focus()
            await pilot.pause()

            assert red.value == "abc"
            assert field(app, "hex") == "#ff5733"
