"""Configuration commands."""

import typer

from todoist_cli.config import get_config_manager
from todoist_cli.utils.typer_helpers import SuggestingGroup

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration commands")


@app.command("path")
@command_wrapper
def config_path() -> None:
    """Show where the config file is read from."""
    print(get_config_manager().path)


@app.command("check")
@command_wrapper
def check_config() -> None:
    """Check that the config file can be loaded."""
    manager = get_config_manager()
    config = manager.config
    typer.echo(f"{manager.path}: OK (endpoint {config.endpoint})")
