"""CLI: skype-bot send"""

import click
from rich.console import Console

from skype_bot.errors import ConfigError, SkypeBotError
from skype_bot.messaging import MessagingClient

console = Console()


def _load_config():
    from skype_bot.cli.main import _load_config
    return _load_config()


@click.command("send")
@click.argument("to")
@click.argument("message")
def send_cmd(to, message):
    """Send a text MESSAGE to the conversation TO."""
    try:
        client = MessagingClient.from_config(_load_config())
    except ConfigError as e:
        console.print(f"[red]{e.message}. Run `skype-bot config set` first.[/red]")
        raise SystemExit(1)
    try:
        with console.status("Sending..."):
            client.send_message(to, message)
    except SkypeBotError as e:
        console.print(f"[red]{e}[/red]")
        for error in getattr(e, "errors", None) or []:
            console.print(f"  [dim]{error}[/dim]")
        raise SystemExit(1)
    finally:
        client.close()
    console.print(f"[green]Message sent to {to}.[/green]")
