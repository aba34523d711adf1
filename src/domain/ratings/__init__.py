"""Rating-system domain modules."""

from domain.ratings.common import (
    GameOutcome,
    InvalidInputError,
    Player,
    PlayerRatingChange,
    RatingGapAnalysis,
    SimulatedOutcomes,
    TeamRatingsUpdateResult,
)

__all__ = [
    "GameOutcome",
    "InvalidInputError",
    "Player",
    "PlayerRatingChange",
    "RatingGapAnalysis",
    "SimulatedOutcomes",
    "TeamRatingsUpdateResult",
]
