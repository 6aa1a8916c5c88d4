from pathlib import Path
from typing import Optional

import typer

from reftoken.application.engine import ReferenceEngine, ReferenceSources
from reftoken.config import load_engine_config
from reftoken.domain.events import EventBus
from reftoken.infrastructure.sources import FixtureError, ReferenceFixture, load_reference_fixture
from reftoken.logger import get_logger, setup_logger
from reftoken.presentation.app import ReferenceDemoApp

SAMPLE_FIXTURE = ReferenceFixture(
    variables=["API_BASE", "API_TOKEN", "REGION", "USER_NAME"],
    records=[
        {"id": "abc123", "title": "Example request", "full_id": "3f2b9c1e-0000-4000-8000-00000000abc1"},
        {"id": "def456", "title": "Health check"},
        {"id": "ghi789", "title": "Nightly export"},
    ],
    secrets=[{"ref_id": "k7f2a9c1", "value": "s3cr3t", "label": "prod-db"}],
    labels=[
        {"kind": "page", "id": "p1", "label": "Runbook"},
        {"kind": "var", "id": "v1", "label": "Region"},
        {"kind": "command", "id": "c1", "label": "Deploy"},
    ],
)

cli = typer.Typer(
    name="reftoken",
    help="Reference-aware text input: inline references, completion and locked secrets",
    epilog="""
    Examples:
    $ reftoken demo
    $ reftoken demo --fixture refs.json --debug
    """,
    add_completion=False,
)


@cli.callback()
def callback() -> None:
    """reftoken command line."""


@cli.command()
def demo(
    fixture: Optional[Path] = typer.Option(None, "--fixture", "-f", help="JSON fixture with variables, records and secrets"),
    text: str = typer.Option("", "--text", help="Initial text of the input"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Open the interactive reference input."""
    config = load_engine_config()
    setup_logger(
        log_file=config.log_file,
        log_level="DEBUG" if debug else config.log_level,
        console_output=config.console_output,
    )
    logger = get_logger("main")

    try:
        reference_fixture = load_reference_fixture(fixture) if fixture is not None else SAMPLE_FIXTURE
    except FixtureError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    store, directory = reference_fixture.build_sources()
    event_bus = EventBus()
    engine = ReferenceEngine(
        ReferenceSources(variables=store, ids=store, uuids=store, secrets=store, labels=directory),
        config=config,
        event_bus=event_bus,
    )

    logger.info(f"Starting demo (max_suggestions={config.max_suggestions})")
    ReferenceDemoApp(engine, event_bus=event_bus, initial_text=text).run()


def run() -> None:
    cli()


if __name__ == "__main__":
    run()
