"""Team-level Elo for pickup games.

Each side's strength is the average of its players' ratings, so uneven rosters
(3v5) and partial participation need no special handling: every player on a
team receives the same update, driven by the team-average expected score.
"""

from __future__ import annotations

from collections.abc import Sequence

from domain.ratings.common import (
    GameOutcome,
    InvalidInputError,
    Player,
    PlayerRatingChange,
    RatingGapAnalysis,
    SimulatedOutcomes,
    TeamRatingsUpdateResult,
)
from domain.ratings.elo.calculator import (
    DEFAULT_OPTIONS,
    EloCalculationOptions,
    calculate_expected_score,
    calculate_new_rating,
    calculate_team_rating,
    get_initial_rating,
    require_rating,
    round_half_up,
)
from domain.ratings.elo.constants import FAVORED_TEAM_THRESHOLD, K_FACTOR


def _validate_roster(players: Sequence[Player], team_label: str) -> None:
    if not isinstance(players, Sequence) or isinstance(players, (str, bytes)) or not players:
        raise InvalidInputError(
            f"{team_label} must have at least one player",
            field=f"{team_label}.players",
        )

    for index, player in enumerate(players):
        if not isinstance(player, Player):
            raise InvalidInputError(
                f"{team_label} entry {index} is not a Player: {player!r}",
                field=f"{team_label}.players",
            )
        if not isinstance(player.id, str) or not player.id:
            raise InvalidInputError(
                f"Invalid player id at index {index} in {team_label}",
                field=f"{team_label}.id",
            )
        if not isinstance(player.name, str) or not player.name:
            raise InvalidInputError(
                f"Invalid player name at index {index} in {team_label}",
                field=f"{team_label}.name",
            )
        require_rating(player.rating, f"{team_label}.rating")


def _team_changes(
    players: Sequence[Player],
    *,
    expected_score: float,
    actual_score: float,
    options: EloCalculationOptions,
) -> tuple[PlayerRatingChange, ...]:
    changes: list[PlayerRatingChange] = []
    for player in players:
        new_rating = calculate_new_rating(
            player.rating,
            expected_score,
            actual_score,
            options.k_factor,
            options,
        )
        changes.append(
            PlayerRatingChange(
                player_id=player.id,
                player_name=player.name,
                old_rating=player.rating,
                new_rating=new_rating,
                rating_change=new_rating - player.rating,
            )
        )
    return tuple(changes)


def update_team_ratings(
    team1_players: Sequence[Player],
    team2_players: Sequence[Player],
    team1_won: bool,
    options: EloCalculationOptions | None = None,
) -> TeamRatingsUpdateResult:
    """Compute every player's new rating after one completed game.

    Raises ``InvalidInputError`` naming the team and field of the first
    malformed roster entry. The input rosters are left untouched.
    """
    options = options or DEFAULT_OPTIONS

    _validate_roster(team1_players, "team1")
    _validate_roster(team2_players, "team2")

    team1_average = calculate_team_rating([player.rating for player in team1_players])
    team2_average = calculate_team_rating([player.rating for player in team2_players])

    team1_expected = calculate_expected_score(rating=team1_average, opponent_rating=team2_average)
    team2_expected = calculate_expected_score(rating=team2_average, opponent_rating=team1_average)

    team1_actual = GameOutcome.WIN if team1_won else GameOutcome.LOSS
    team2_actual = GameOutcome.LOSS if team1_won else GameOutcome.WIN

    return TeamRatingsUpdateResult(
        team1_changes=_team_changes(
            team1_players,
            expected_score=team1_expected,
            actual_score=team1_actual,
            options=options,
        ),
        team2_changes=_team_changes(
            team2_players,
            expected_score=team2_expected,
            actual_score=team2_actual,
            options=options,
        ),
        team1_average_rating=team1_average,
        team2_average_rating=team2_average,
        expected_score_team1=team1_expected,
        expected_score_team2=team2_expected,
    )


def create_new_player(id: str, name: str) -> Player:
    """Build a roster entry for someone without a rating yet."""
    if not isinstance(id, str) or not id:
        raise InvalidInputError("Player id must be a non-empty string", field="id")
    if not isinstance(name, str) or not name:
        raise InvalidInputError("Player name must be a non-empty string", field="name")
    return Player(id=id, name=name, rating=get_initial_rating())


def analyze_rating_gap(
    team1_average_rating: float,
    team2_average_rating: float,
    k_factor: float = K_FACTOR,
) -> RatingGapAnalysis:
    """Describe how the average-rating gap shapes the possible rating swings.

    ``favored_team`` stays ``None`` for gaps under 50 points. Max gain/loss are
    the uncapped ``k * (actual - expected)`` values for a win and a loss.
    """
    team1_expected = calculate_expected_score(
        rating=team1_average_rating,
        opponent_rating=team2_average_rating,
    )
    team2_expected = calculate_expected_score(
        rating=team2_average_rating,
        opponent_rating=team1_average_rating,
    )
    rating_gap = team1_average_rating - team2_average_rating

    favored_team: int | None = None
    if abs(rating_gap) >= FAVORED_TEAM_THRESHOLD:
        favored_team = 1 if rating_gap > 0 else 2

    return RatingGapAnalysis(
        rating_gap=round_half_up(rating_gap, 2),
        favored_team=favored_team,
        expected_score_team1=round_half_up(team1_expected, 3),
        expected_score_team2=round_half_up(team2_expected, 3),
        team1_max_gain=round_half_up(k_factor * (GameOutcome.WIN - team1_expected), 2),
        team1_max_loss=round_half_up(k_factor * (GameOutcome.LOSS - team1_expected), 2),
        team2_max_gain=round_half_up(k_factor * (GameOutcome.WIN - team2_expected), 2),
        team2_max_loss=round_half_up(k_factor * (GameOutcome.LOSS - team2_expected), 2),
    )


def simulate_game_outcomes(
    team1_players: Sequence[Player],
    team2_players: Sequence[Player],
    options: EloCalculationOptions | None = None,
) -> SimulatedOutcomes:
    """Preview both possible results before a game is submitted."""
    return SimulatedOutcomes(
        team1_wins=update_team_ratings(team1_players, team2_players, True, options),
        team2_wins=update_team_ratings(team1_players, team2_players, False, options),
    )


__all__ = [
    "analyze_rating_gap",
    "create_new_player",
    "simulate_game_outcomes",
    "update_team_ratings",
]
