"""CLI: skype-bot validate|classify"""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from skype_bot.errors import SkypeBotError
from skype_bot.models.activity import WebhookMessage
from skype_bot.models.attachment import Attachment
from skype_bot.models.conversation import Conversation, ConversationResult
from skype_bot.models.notifications import NotificationResponse, instantiate_notification
from skype_bot.models.workflow import Workflow
from skype_bot.webhooks import process_request_data

console = Console()

KINDS = {
    "workflow": Workflow.populate,
    "conversation": Conversation.populate,
    "result": ConversationResult.populate,
    "notification": instantiate_notification,
    "notification-response": NotificationResponse.populate,
    "activity": WebhookMessage.populate,
    "attachment": Attachment.populate,
}


def _read_json(path: Path):
    from skype_bot.cli.main import _read_json
    return _read_json(path)


@click.command("validate")
@click.argument("kind", type=click.Choice(sorted(KINDS)))
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate_cmd(kind, file):
    """Validate a JSON payload of the given KIND."""
    data = _read_json(file)
    try:
        model = KINDS[kind](data)
    except SkypeBotError as e:
        console.print(f"[red]Could not build {kind}: {escape(e.message)}[/red]")
        raise SystemExit(1)

    errors = model.validate()
    if not errors:
        console.print(f"[green]Valid {kind}.[/green]")
        return
    table = Table(title=f"{len(errors)} validation error(s)")
    table.add_column("#", justify="right")
    table.add_column("Error")
    for i, error in enumerate(errors, 1):
        table.add_row(str(i), escape(error))
    console.print(table)
    raise SystemExit(1)


@click.command("classify")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--bot-id", required=True, help="Bot id used to spot the bot in member changes")
@click.option("--json-output", "--json", is_flag=True)
def classify_cmd(file, bot_id, json_output):
    """Classify a webhook delivery into events."""
    events = process_request_data(bot_id, file.read_bytes())
    if json_output:
        rows = []
        for event in events:
            if event.is_error:
                payload = {"message": event.event_object.message, "activity": event.event_object.activity}
            else:
                payload = event.event_object.model_dump(by_alias=True, exclude_none=True, mode="json")
            rows.append({"type": event.type.value, "replyTo": event.reply_to, "event": payload})
        click.echo(json.dumps(rows, indent=2))
        return

    table = Table(title=f"Events ({len(events)})")
    table.add_column("Type", style="bold")
    table.add_column("Reply to")
    table.add_column("Detail")
    for event in events:
        if event.is_error:
            detail = f"[red]{escape(event.event_object.message)}[/red]"
        else:
            detail = escape(json.dumps(event.event_object.model_dump(by_alias=True, exclude_none=True, mode="json")))
        table.add_row(event.type.value, event.reply_to or "", detail)
    console.print(table)
