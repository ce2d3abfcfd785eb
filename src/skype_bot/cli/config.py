"""CLI: skype-bot config show|set"""

import json

import click
from rich.console import Console
from rich.table import Table

from skype_bot.config import BotConfig, load_config, save_config
from skype_bot.errors import ConfigError

console = Console()


def _load_config() -> BotConfig:
    from skype_bot.cli.main import _load_config
    return _load_config()


@click.group()
def config():
    """Configuration commands."""


@config.command("show")
@click.option("--json-output", "--json", is_flag=True)
def config_show(json_output):
    """Show the effective configuration (secret masked)."""
    data = _load_config().masked()
    if json_output:
        click.echo(json.dumps(data, indent=2))
        return
    table = Table(title="Configuration")
    table.add_column("Option", style="bold")
    table.add_column("Value")
    for name, value in data.items():
        table.add_row(name, "" if value is None else str(value))
    console.print(table)


@config.command("set")
@click.argument("key", type=click.Choice(sorted(BotConfig.model_fields)))
@click.argument("value")
def config_set(key, value):
    """Set one option in the config file."""
    # file contents only, so environment overrides are not written back
    try:
        cfg = load_config(use_env=False)
    except ConfigError as e:
        console.print(f"[red]{e.message}[/red]")
        raise SystemExit(1)
    try:
        updated = type(cfg)(**{**cfg.model_dump(), key: value})
    except ValueError as e:
        console.print(f"[red]Invalid value for {key}: {e}[/red]")
        raise SystemExit(1)
    path = save_config(updated)
    console.print(f"[green]{key} saved to {path}[/green]")
