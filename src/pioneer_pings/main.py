"""CLI entrypoint for pioneer-pings."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict

import typer
from rich import print

from pioneer_pings.adapters import RecordingSubmissionClient
from pioneer_pings.cli import CliPingHandler
from pioneer_pings.config import settings
from pioneer_pings.diagnostics import LoggingDiagnosticSink, NullDiagnosticSink
from pioneer_pings.dispatcher import PingDispatch, PingDispatcher
from pioneer_pings.errors import ValidationError
from pioneer_pings.keys import KeySelector

app = typer.Typer(help="Compose research-panel telemetry pings against a dry-run host")


@app.callback()
def _configure_logging() -> None:
    logging.basicConfig(level=settings.log_level.upper())


def _build_handler() -> CliPingHandler:
    diagnostics = LoggingDiagnosticSink() if settings.diagnostics_enabled else NullDiagnosticSink()
    dispatcher = PingDispatcher(client=RecordingSubmissionClient(), diagnostics=diagnostics)
    return CliPingHandler(dispatcher)


def _resolve_participant_id(participant_id: str | None) -> str:
    resolved = participant_id or settings.participant_id
    if not resolved:
        print({"error": "No participant id. Pass --participant-id or set PIONEER_PINGS_PARTICIPANT_ID."})
        raise typer.Exit(code=1)
    return resolved


def _print_dispatch(dispatch: PingDispatch) -> None:
    result = asdict(dispatch)
    result["status"] = dispatch.status.value
    print({"ping": result})


@app.command("show-config")
def show_config() -> None:
    """Show effective runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "participant_id": settings.participant_id,
            "diagnostics_enabled": settings.diagnostics_enabled,
        }
    )


@app.command("select-key")
def select_key(namespace: str) -> None:
    """Show the key id and public key pings in NAMESPACE are sealed with."""
    key = KeySelector().select_key(namespace)
    print({"namespace": namespace, "key_id": key.key_id, "public_key": key.public_key.to_dict()})


@app.command()
def enroll(
    participant_id: str = typer.Option(None, help="Participant id"),
    study_id: str = typer.Option(None, help="Study id; omit for program enrollment"),
) -> None:
    """Send an enrollment ping."""
    handler = _build_handler()
    try:
        dispatch = handler.enroll(_resolve_participant_id(participant_id), study_id)
    except ValidationError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    _print_dispatch(dispatch)


@app.command()
def unenroll(
    participant_id: str = typer.Option(None, help="Participant id"),
    study_id: str = typer.Option(None, help="Study id the participant leaves"),
) -> None:
    """Send a deletion-request ping for a study."""
    handler = _build_handler()
    try:
        dispatch = handler.unenroll(_resolve_participant_id(participant_id), study_id)
    except ValidationError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    _print_dispatch(dispatch)


@app.command()
def demographics(
    answers: str = typer.Argument(..., help='Survey answers as JSON, e.g. \'{"age": "25-34"}\''),
    participant_id: str = typer.Option(None, help="Participant id"),
) -> None:
    """Send a demographic-survey ping."""
    try:
        parsed = json.loads(answers)
    except json.JSONDecodeError as exc:
        print({"error": f"Answers are not valid JSON: {exc}"})
        raise typer.Exit(code=1)
    if not isinstance(parsed, dict):
        print({"error": "Answers must be a JSON object"})
        raise typer.Exit(code=1)

    handler = _build_handler()
    try:
        dispatch = handler.submit_demographics(_resolve_participant_id(participant_id), parsed)
    except ValidationError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    _print_dispatch(dispatch)


if __name__ == "__main__":
    app()
