"""Config command group: show, set, reset, validate, path."""

from typing import Optional

import click
from pydantic import ValidationError

from colorconv.exceptions import wrap_pydantic_error
from colorconv.models import DEFAULT_CONFIG_PATH, AppConfig, RangePolicy
from colorconv.utils import PydanticPersistence

from ..output import echo_error, load_config


def _config_path(ctx: click.Context):
    return ctx.obj.get("config_path") or DEFAULT_CONFIG_PATH


@click.group(name="config")
def config():
    """Configure colorconv settings."""
    pass


@config.command(name="show")
@click.option("--field", "-f", type=click.Choice(list(AppConfig.model_fields)), default=None,
              help="Show a single field")
@click.pass_context
def show(ctx: click.Context, field: Optional[str]):
    """Display configuration values."""
    app_config = load_config(_config_path(ctx))
    values = app_config.model_dump(mode="json")

    for name, value in values.items():
        if field and name != field:
            continue
        click.echo(f"{name}: {value}")


@config.command(name="set")
@click.option("--seed-color", "-c", default=None, help="Color shown when a session starts (e.g. #ff5733)")
@click.option(
    "--range-policy",
    "-p",
    type=click.Choice([p.value for p in RangePolicy], case_sensitive=False),
    default=None,
    help="clamp: pin out-of-range edits to the bound; reject: refuse them",
)
@click.pass_context
def set_values(ctx: click.Context, seed_color: Optional[str], range_policy: Optional[str]):
    """Update configuration values and save."""
    updates = {}
    if seed_color is not None:
        updates["seed_color"] = seed_color
    if range_policy is not None:
        updates["range_policy"] = range_policy.lower()

    if not updates:
        click.echo("Nothing to update. Run 'colorconv config set --help' for options.", err=True)
        ctx.exit(1)

    path = _config_path(ctx)
    current = load_config(path)
    try:
        updated = AppConfig.model_validate({**current.model_dump(mode="json"), **updates})
    except ValidationError as e:
        echo_error(wrap_pydantic_error(e, str(path)))
        ctx.exit(1)

    updated.save(path)
    saved = updated.model_dump(mode="json")
    for name in updates:
        click.echo(f"{name}: {saved[name]}")
    click.echo(f"Saved to {path}")


@config.command(name="reset")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def reset(ctx: click.Context, yes: bool):
    """Reset configuration to defaults."""
    path = _config_path(ctx)
    if not yes:
        click.confirm(f"Reset {path} to defaults?", abort=True)

    AppConfig().save(path)
    click.echo(f"Configuration reset: {path}")


@config.command(name="validate")
@click.pass_context
def validate(ctx: click.Context):
    """Check the config file for errors."""
    path = _config_path(ctx)
    is_valid, error = PydanticPersistence.validate_json(path, AppConfig)
    if is_valid:
        click.echo(f"[OK] {path}")
    else:
        click.echo(f"[FAIL] {error}", err=True)
        ctx.exit(1)


@config.command(name="path")
@click.pass_context
def path(ctx: click.Context):
    """Print the config file location."""
    click.echo(str(_config_path(ctx)))
