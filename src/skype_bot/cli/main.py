"""
Skype bot CLI: `skype-bot` command.

Commands:
  skype-bot config show|set       Inspect or edit ~/.skype-bot/config.json
  skype-bot validate KIND FILE    Validate a calling or messaging JSON payload
  skype-bot classify FILE         Turn a webhook delivery into events
  skype-bot send TO MESSAGE       Send a text message through the messaging API
"""

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install skype-bot-sdk[cli]")

import json
from pathlib import Path
from typing import Any

from skype_bot.config import BotConfig, load_config
from skype_bot.errors import ConfigError
from skype_bot.logging import setup_logging

console = Console()


def _load_config() -> BotConfig:
    try:
        return load_config()
    except ConfigError as e:
        console.print(f"[red]{e.message}[/red]")
        raise SystemExit(1)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON in {path}: {e}[/red]")
        raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
@click.option("--debug", is_flag=True, help="Log SDK debug output to stderr")
def main(debug: bool):
    """Skype bot CLI: validate payloads, classify webhooks, send messages."""
    setup_logging(debug=debug)


# Register subcommands from separate modules
from skype_bot.cli.config import config  # noqa: E402
from skype_bot.cli.send import send_cmd  # noqa: E402
from skype_bot.cli.validate import classify_cmd, validate_cmd  # noqa: E402

main.add_command(config)
main.add_command(validate_cmd)
main.add_command(classify_cmd)
main.add_command(send_cmd)


if __name__ == "__main__":
    main()
