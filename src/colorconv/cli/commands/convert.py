"""Conversion commands: hex, rgb, hsl."""

from typing import Optional

import click

from colorconv.core import ColorSyncController
from colorconv.exceptions import ColorError, collect_errors
from colorconv.models import RangePolicy

from ..output import echo_error, echo_state, load_config

# Negative numbers ("-30") must reach the command as arguments, not options
NUMERIC_ARGS = {"ignore_unknown_options": True}

json_option = click.option("--json", "as_json", is_flag=True, help="Print a JSON object instead of text")
policy_option = click.option(
    "--policy",
    type=click.Choice([p.value for p in RangePolicy], case_sensitive=False),
    default=None,
    help="Override range_policy from the config (clamp or reject)",
)


def _controller(ctx: click.Context, policy: Optional[str] = None) -> ColorSyncController:
    config = load_config(ctx.obj.get("config_path"))
    if policy:
        config = config.model_copy(update={"range_policy": RangePolicy(policy.lower())})
    return ColorSyncController.from_config(config)


@click.command(name="hex")
@click.argument("values", nargs=-1, required=True)
@json_option
@click.pass_context
def hex_command(ctx: click.Context, values: tuple[str, ...], as_json: bool):
    """
    Convert one or more HEX colors.

    \b
    Examples:
      colorconv hex '#ff5733'
      colorconv hex f0a 336699 --json
    """
    controller = _controller(ctx)
    collector = collect_errors("convert hex colors")

    for index, value in enumerate(values):
        with collector.try_operation(value):
            controller.on_hex_edited(value)
            if index and not as_json:
                click.echo()
            echo_state(controller.current_state(), as_json)

    if collector.has_errors:
        click.echo(collector.get_summary(), err=True)
        ctx.exit(1)


@click.command(name="rgb", context_settings=NUMERIC_ARGS)
@click.argument("r")
@click.argument("g")
@click.argument("b")
@policy_option
@json_option
@click.pass_context
def rgb_command(ctx: click.Context, r: str, g: str, b: str, policy: Optional[str], as_json: bool):
    """
    Convert an RGB color (channels 0-255).

    \b
    Examples:
      colorconv rgb 255 87 51
      colorconv rgb 300 0 0 --policy reject
    """
    controller = _controller(ctx, policy)
    try:
        controller.on_rgb_edited(r, g, b)
    except ColorError as e:
        echo_error(e)
        ctx.exit(1)
    echo_state(controller.current_state(), as_json)


@click.command(name="hsl", context_settings=NUMERIC_ARGS)
@click.argument("h")
@click.argument("s")
@click.argument("l")
@policy_option
@json_option
@click.pass_context
def hsl_command(ctx: click.Context, h: str, s: str, l: str, policy: Optional[str], as_json: bool):
    """
    Convert an HSL color (hue in degrees, saturation/lightness in percent).

    Hue wraps around, so -30 and 330 are the same color.

    \b
    Examples:
      colorconv hsl 11 100 60
      colorconv hsl -30 50 50 --json
    """
    controller = _controller(ctx, policy)
    try:
        controller.on_hsl_edited(h, s, l)
    except ColorError as e:
        echo_error(e)
        ctx.exit(1)
    echo_state(controller.current_state(), as_json)
