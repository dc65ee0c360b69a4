"""Guard CLI commands — check and resolve."""

import asyncio
import json
from pathlib import Path
from typing import Any

import click
import yaml

from hookkit.config import HooksConfig
from hookkit.core.paths import MISSING, resolve_path, split_path
from hookkit.errors import ForbiddenFieldChange
from hookkit.hooks import HookContext, HookPhase, Method, prevent_update_changes


def _load_document(path: Path) -> Any:
    """Load a YAML or JSON document (JSON is parsed as YAML)."""
    try:
        return yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise click.ClickException(f"Cannot parse {path}: {e}") from e


def _validate_field_path(ctx, param, value: str) -> str:
    try:
        split_path(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    return value


@click.command()
@click.argument("field_path", callback=_validate_field_path)
@click.argument("snapshot_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("payload_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(field_path: str, snapshot_file: Path, payload_file: Path):
    """Check that PAYLOAD_FILE leaves FIELD_PATH of SNAPSHOT_FILE unchanged."""
    snapshot = _load_document(snapshot_file)
    payload = _load_document(payload_file)

    guard = prevent_update_changes(lambda _ctx: snapshot, field_path, HooksConfig.from_env())
    context = HookContext(
        phase=HookPhase.BEFORE,
        method=Method.UPDATE,
        data=payload,
        params={"provider": "cli"},
    )

    try:
        asyncio.run(guard(context))
    except ForbiddenFieldChange as e:
        click.echo(click.style(e.message, fg="red"), err=True)
        raise SystemExit(1)

    click.echo(click.style(f"Field {field_path} unchanged.", fg="green"))


@click.command()
@click.argument("field_path", callback=_validate_field_path)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def resolve(field_path: str, file: Path):
    """Print the value at FIELD_PATH in FILE as JSON."""
    value = resolve_path(_load_document(file), field_path)
    if value is MISSING:
        click.echo("<missing>")
        return
    click.echo(json.dumps(value, indent=2, sort_keys=True, default=str))
