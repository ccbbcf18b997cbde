"""CLI entry point."""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO at the table: you against up to three computer seats")


def _settings(seats: Optional[int], seed: Optional[int]):
    """Settings from the environment, with command line options applied on top."""
    from unotable.config import Settings

    try:
        settings = Settings.from_env()
        if seats is not None:
            settings = dataclasses.replace(settings, seats=seats)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if seed is not None:
        settings = dataclasses.replace(settings, seed=seed)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings


@app.command()
def play(
    seats: Optional[int] = typer.Option(None, "--seats", "-n", help="Number of seats, 2-4 (you are seat 0)"),
    delay: Optional[float] = typer.Option(
        None,
        "--delay",
        "-d",
        help="Seconds to pause before each computer turn",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Play a round in the terminal."""
    from unotable.agents.human_agent import HumanAgent
    from unotable.gateway.console import ConsoleRenderer, LoggingAudio
    from unotable.orchestration.game_runner import GameRunner

    settings = _settings(seats, seed)
    seed = settings.seed
    while True:
        runner = GameRunner(
            HumanAgent(name="You"),
            seat_count=settings.seats,
            seed=seed,
            hand_size=settings.hand_size,
            presentation_delay=settings.presentation_delay if delay is None else delay,
            render=ConsoleRenderer(),
            audio=LoggingAudio(),
        )
        result = runner.run()
        typer.echo(f"Winner: {result.winner_name or 'None'}")
        if not typer.confirm("Play again?", default=False):
            break
        # A fixed seed would deal the same round again
        seed = None


@app.command()
def simulate(
    rounds: int = typer.Option(100, "--rounds", "-r", help="Number of rounds"),
    seats: Optional[int] = typer.Option(None, "--seats", "-n", help="Number of seats, 2-4"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run headless rounds with a random stand-in for seat 0."""
    from unotable.orchestration.series import run_series

    settings = _settings(seats, seed)
    wins = run_series(
        seat_count=settings.seats,
        num_rounds=rounds,
        seed=settings.seed,
        hand_size=settings.hand_size,
    )
    typer.echo("Series results:")
    for name, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {w} wins")


if __name__ == "__main__":
    app()
