from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import structlog
import typer
import yaml

from flowguard.config import configure_logging, level_from_name
from flowguard.core.engine import validate_node, validate_workflow
from flowguard.core.loader import find_snapshots, load_snapshot
from flowguard.models.settings import FlowguardConfig
from flowguard.models.validation import ValidationResult
from flowguard.nodes import default_registry

app = typer.Typer(name="flowguard", help="Workflow graph validation")
logger = structlog.get_logger()


@app.callback()
def _setup() -> None:
    config = FlowguardConfig()
    configure_logging(level=level_from_name(config.log_level), json_output=config.json_logs)


def _report(result: ValidationResult, ok_message: str, as_json: bool) -> None:
    """Print a result and exit non-zero when it carries errors."""
    if as_json:
        typer.echo(result.model_dump_json(by_alias=True, indent=2))
    elif result.is_valid:
        typer.echo(ok_message)
    else:
        for error in result.errors:
            typer.echo(f"[{error.id}] {error.message}")
        typer.echo(f"{len(result.errors)} validation error(s)")

    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command()
def validate(
    snapshot_path: str = typer.Argument(help="Path to a workflow snapshot (.json, .yaml)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Validate a saved workflow snapshot."""
    path = Path(snapshot_path)
    if not path.exists():
        typer.echo(f"File not found: {snapshot_path}", err=True)
        raise typer.Exit(code=1)

    try:
        snapshot = load_snapshot(path)
    except (ValueError, yaml.YAMLError) as e:
        typer.echo(f"Invalid snapshot: {e}", err=True)
        raise typer.Exit(code=1)

    result = validate_workflow(snapshot.nodes, snapshot.edges)
    logger.debug("cli.validated", path=str(path), valid=result.is_valid)
    _report(result, f"Valid workflow: {snapshot_path}", as_json)


@app.command(name="validate-all")
def validate_all(
    directory: Optional[str] = typer.Argument(
        None, help="Directory of snapshots (defaults to FLOWGUARD_SNAPSHOTS_DIR)"
    ),
) -> None:
    """Validate every snapshot in a directory."""
    path = Path(directory or FlowguardConfig().snapshots_dir)
    if not path.is_dir():
        typer.echo(f"Directory not found: {path}", err=True)
        raise typer.Exit(code=1)

    snapshot_paths = find_snapshots(path)
    failed = 0
    for snapshot_path in snapshot_paths:
        try:
            snapshot = load_snapshot(snapshot_path)
        except (ValueError, yaml.YAMLError) as e:
            failed += 1
            reason = str(e).partition("\n")[0]
            typer.echo(f"invalid  {snapshot_path} (unreadable: {reason})")
            continue

        result = validate_workflow(snapshot.nodes, snapshot.edges)
        if result.is_valid:
            typer.echo(f"ok       {snapshot_path}")
        else:
            failed += 1
            typer.echo(f"invalid  {snapshot_path} ({len(result.errors)} error(s))")

    typer.echo(f"{len(snapshot_paths) - failed}/{len(snapshot_paths)} snapshot(s) valid")
    if failed:
        raise typer.Exit(code=1)


@app.command(name="check-node")
def check_node(
    kind: str = typer.Argument(help="Node kind, e.g. form, conditional, api"),
    data_json: str = typer.Option("{}", "--data", "-d", help="JSON node payload"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
) -> None:
    """Validate a single node's configuration."""
    try:
        data = json.loads(data_json)
    except json.JSONDecodeError as e:
        typer.echo(f"Invalid JSON data: {e}", err=True)
        raise typer.Exit(code=1)

    if not isinstance(data, dict):
        typer.echo("Node data must be a JSON object", err=True)
        raise typer.Exit(code=1)

    _report(validate_node(kind, data), f"Valid {kind} node", as_json)


@app.command()
def kinds() -> None:
    """List node kinds that have a validator."""
    for kind in default_registry.list_kinds():
        typer.echo(kind)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Server host"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Server port"),
) -> None:
    """Start the validation HTTP server."""
    import uvicorn

    config = FlowguardConfig()
    uvicorn.run(
        "flowguard.server:app",
        host=host or config.host,
        port=port or config.port,
        reload=False,
    )


def main() -> None:
    """CLI entrypoint."""
    app()
