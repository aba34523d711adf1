#!/usr/bin/env python3
"""Preview, simulate, or record Elo rating changes for a pickup game."""

from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from domain.ratings.common import InvalidInputError, Player, TeamRatingsUpdateResult
from domain.ratings.elo.calculator import EloCalculationOptions
from domain.ratings.elo.config import load_elo_system_config
from domain.ratings.elo.constants import K_FACTOR
from domain.ratings.elo.team_ratings import (
    analyze_rating_gap,
    simulate_game_outcomes,
    update_team_ratings,
)

DEFAULT_CONFIG_PATH = ROOT_DIR / "configs" / "elo" / "default.toml"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Pickup-game Elo previews.",
)

PlayerOption = Annotated[
    list[str],
    typer.Option(help="Player as ID:NAME:RATING. Repeat once per player."),
]
ConfigOption = Annotated[
    Path,
    typer.Option("--config", help="Elo preset TOML file."),
]
KFactorOption = Annotated[
    float | None,
    typer.Option("--k-factor", help="Override the preset K-factor."),
]


def _parse_player(raw: str) -> Player:
    parts = raw.split(":")
    if len(parts) != 3:
        raise typer.BadParameter(f"player '{raw}' must look like ID:NAME:RATING")
    player_id, name, rating_raw = parts
    try:
        rating = float(rating_raw)
    except ValueError:
        raise typer.BadParameter(f"player '{raw}' has a non-numeric rating") from None
    return Player(id=player_id, name=name, rating=rating)


def _load_options(config: Path, k_factor: float | None) -> EloCalculationOptions:
    try:
        options = load_elo_system_config(config).options
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    if k_factor is None:
        return options
    try:
        return replace(options, k_factor=k_factor)
    except InvalidInputError as exc:
        raise typer.BadParameter(f"--k-factor: {exc}") from exc


def _echo_result(result: TeamRatingsUpdateResult) -> None:
    typer.echo(
        f"team1_avg={result.team1_average_rating:.2f} "
        f"team2_avg={result.team2_average_rating:.2f} "
        f"expected_team1={result.expected_score_team1:.3f} "
        f"expected_team2={result.expected_score_team2:.3f}"
    )
    for label, changes in (("team1", result.team1_changes), ("team2", result.team2_changes)):
        for change in changes:
            typer.echo(
                f"  {label} {change.player_name:<16} "
                f"{change.old_rating:8.2f} -> {change.new_rating:8.2f} "
                f"({change.rating_change:+.2f})"
            )


@app.command("analyze")
def analyze(
    team1_avg: Annotated[float, typer.Option("--team1-avg", help="Team 1 average rating.")],
    team2_avg: Annotated[float, typer.Option("--team2-avg", help="Team 2 average rating.")],
    k_factor: Annotated[float, typer.Option("--k-factor")] = K_FACTOR,
) -> None:
    """Show the favored team and the possible swings for a rating gap."""
    try:
        analysis = analyze_rating_gap(team1_avg, team2_avg, k_factor)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc

    favored = "even" if analysis.favored_team is None else f"team{analysis.favored_team}"
    typer.echo(f"rating_gap={analysis.rating_gap:+.2f} favored={favored}")
    typer.echo(
        f"expected team1={analysis.expected_score_team1:.3f} "
        f"team2={analysis.expected_score_team2:.3f}"
    )
    typer.echo(f"team1 win={analysis.team1_max_gain:+.2f} loss={analysis.team1_max_loss:+.2f}")
    typer.echo(f"team2 win={analysis.team2_max_gain:+.2f} loss={analysis.team2_max_loss:+.2f}")


@app.command("simulate")
def simulate(
    team1: PlayerOption,
    team2: PlayerOption,
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    k_factor: KFactorOption = None,
) -> None:
    """Print rating changes for both possible winners."""
    options = _load_options(config, k_factor)
    try:
        outcomes = simulate_game_outcomes(
            [_parse_player(raw) for raw in team1],
            [_parse_player(raw) for raw in team2],
            options,
        )
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc

    typer.echo("if team1 wins:")
    _echo_result(outcomes.team1_wins)
    typer.echo("if team2 wins:")
    _echo_result(outcomes.team2_wins)


@app.command("record")
def record(
    team1: PlayerOption,
    team2: PlayerOption,
    winner: Annotated[int, typer.Option("--winner", help="Winning team: 1 or 2.")],
    config: ConfigOption = DEFAULT_CONFIG_PATH,
    k_factor: KFactorOption = None,
) -> None:
    """Compute the post-game ratings for a finished game."""
    if winner not in (1, 2):
        raise typer.BadParameter("--winner must be 1 or 2")
    options = _load_options(config, k_factor)
    try:
        result = update_team_ratings(
            [_parse_player(raw) for raw in team1],
            [_parse_player(raw) for raw in team2],
            winner == 1,
            options,
        )
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _echo_result(result)


if __name__ == "__main__":
    app()
