"""Mini README: Entry point CLI for Budget Jump.

This script exposes a Typer CLI to serve the HTTP interface, play a headless
deterministic run with the scripted autopilot, and inspect the persisted
game-score record. Settings come from ``BUDGETJUMP_`` environment variables
or a ``.env`` file when available.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
import uvicorn

from budgetjump.configuration import get_settings
from budgetjump.finance import GameLedger, JsonLedgerStore, LedgerPersistenceError
from budgetjump.game import ConfigurationError, GameEngine, GameState, ScoreReporter
from budgetjump.game.autopilot import AutoPilot
from budgetjump.logging_utils import configure_root_logger

cli = typer.Typer(help="Play and manage the Budget Jump mini-game.")


def _configure_logging(verbose: bool) -> None:
    configure_root_logger(logging.DEBUG if verbose else logging.WARNING)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: Optional[bool] = typer.Option(
        None,
        "--production/--development",
        help="Use production server settings (disable auto-reload). Defaults to BUDGETJUMP_ENVIRONMENT.",
    ),
) -> None:
    """Serve the game interface using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    if production is None:
        production = settings.is_production
    configure_root_logger(logging.INFO if production else logging.DEBUG)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Budget Jump on {effective_host}:{effective_port}.\n"
        f"Open http://{browser_host}:{effective_port}/docs to try the game API."
    )
    uvicorn.run(
        "budgetjump.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def simulate(
    seed: int = typer.Option(7, help="Seed for obstacle spawning."),
    max_ticks: int = typer.Option(20_000, min=1, help="Stop after this many ticks."),
    autopilot: bool = typer.Option(True, help="Let the scripted player jump."),
    lead_distance: float = typer.Option(36.0, help="Autopilot jump distance."),
    record: bool = typer.Option(False, help="Record the final score in the ledger."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every transition."),
) -> None:
    """Play one headless run and print its summary."""

    _configure_logging(verbose)
    settings = get_settings()
    ledger = None
    if record:
        try:
            ledger = GameLedger.from_store(
                JsonLedgerStore(settings.ledger_path), badge_threshold=settings.badge_threshold
            )
        except LedgerPersistenceError as error:
            typer.echo(f"Ledger unavailable, score will not be recorded: {error}", err=True)

    engine = GameEngine(
        settings.game_tuning(), rng=random.Random(seed), reporter=ScoreReporter(ledger)
    )
    pilot = AutoPilot(lead_distance=lead_distance) if autopilot else None
    try:
        engine.start_game()
    except ConfigurationError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=2) from error

    for _ in range(max_ticks):
        if pilot is not None:
            pilot.step(engine)
        engine.tick()
        if engine.state is not GameState.PLAYING:
            break

    snapshot = engine.snapshot()
    typer.echo(f"State: {snapshot.state.value}")
    typer.echo(f"Ticks: {snapshot.ticks}")
    typer.echo(f"Score: {snapshot.score}")
    typer.echo(f"Badges earned this run: {snapshot.session_badge_estimate}")
    typer.echo(f"Final speed: {snapshot.game_speed:.3f}")
    if ledger is not None and engine.state is GameState.GAME_OVER:
        typer.echo(
            f"High score: {ledger.record.high_score} | "
            f"Lifetime badges: {ledger.record.lifetime_badge_count}"
        )


@cli.command()
def scoreboard() -> None:
    """Show the persisted game-score record and unlocked achievements."""

    _configure_logging(False)
    settings = get_settings()
    try:
        ledger = GameLedger.from_store(
            JsonLedgerStore(settings.ledger_path), badge_threshold=settings.badge_threshold
        )
    except LedgerPersistenceError as error:
        typer.echo(str(error), err=True)
        raise typer.Exit(code=1) from error

    record = ledger.record
    typer.echo(f"High score: {record.high_score}")
    typer.echo(f"Lifetime badges: {record.lifetime_badge_count}")
    typer.echo(f"Financial Focus title: {'yes' if record.has_special_title else 'no'}")
    unlocked = ledger.unlocked_achievements()
    if unlocked:
        typer.echo("Unlocked achievements:")
        for achievement in unlocked:
            typer.echo(f"  - {achievement.title} ({achievement.unlocked_on})")
    else:
        typer.echo("No achievements unlocked yet.")


if __name__ == "__main__":
    cli()
