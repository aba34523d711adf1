"""Shared types for the pickup-game rating engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidInputError(ValueError):
    """Raised when a rating calculation receives input it cannot use.

    ``field`` names the offending argument (``"expected_score"``) or roster
    field (``"team2.rating"``) so callers can map it to a user-facing message.
    """

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class GameOutcome(float, Enum):
    """Actual score from one side's perspective."""

    WIN = 1.0
    DRAW = 0.5
    LOSS = 0.0


@dataclass(frozen=True)
class Player:
    """A game participant and their rating immediately before the game."""

    id: str
    name: str
    rating: float


@dataclass(frozen=True)
class PlayerRatingChange:
    """Audit triple for one player after one game."""

    player_id: str
    player_name: str
    old_rating: float
    new_rating: float
    rating_change: float


@dataclass(frozen=True)
class TeamRatingsUpdateResult:
    team1_changes: tuple[PlayerRatingChange, ...]
    team2_changes: tuple[PlayerRatingChange, ...]
    team1_average_rating: float
    team2_average_rating: float
    expected_score_team1: float
    expected_score_team2: float

    @property
    def team1_total_change(self) -> float:
        return sum(change.rating_change for change in self.team1_changes)

    @property
    def team2_total_change(self) -> float:
        # Only mirrors team1_total_change when both rosters are the same size.
        return sum(change.rating_change for change in self.team2_changes)


@dataclass(frozen=True)
class RatingGapAnalysis:
    """Pre-game view of how the average-rating gap shapes possible swings."""

    rating_gap: float
    favored_team: int | None
    expected_score_team1: float
    expected_score_team2: float
    team1_max_gain: float
    team1_max_loss: float
    team2_max_gain: float
    team2_max_loss: float


@dataclass(frozen=True)
class SimulatedOutcomes:
    team1_wins: TeamRatingsUpdateResult
    team2_wins: TeamRatingsUpdateResult


__all__ = [
    "GameOutcome",
    "InvalidInputError",
    "Player",
    "PlayerRatingChange",
    "RatingGapAnalysis",
    "SimulatedOutcomes",
    "TeamRatingsUpdateResult",
]
