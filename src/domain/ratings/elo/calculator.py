"""Pairwise Elo primitives: expected score, single-rating update, team average."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from math import floor, isfinite

from domain.ratings.common import GameOutcome, InvalidInputError
from domain.ratings.elo.constants import (
    ELO_BASE,
    ELO_DIVISOR,
    INITIAL_ELO,
    K_FACTOR,
    MAX_ELO_RATING,
    MAX_RATING_CHANGE,
    MIN_ELO_RATING,
)

_VALID_ACTUAL_SCORES = frozenset(outcome.value for outcome in GameOutcome)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_finite(value: object, field: str) -> float:
    if not _is_number(value) or not isfinite(value):
        raise InvalidInputError(f"{field} must be a finite number, got {value!r}", field=field)
    return float(value)


def require_rating(value: object, field: str) -> float:
    """Return ``value`` as a float, rejecting non-finite or negative ratings."""
    rating = _require_finite(value, field)
    if rating < 0.0:
        raise InvalidInputError(f"{field} must be non-negative, got {rating}", field=field)
    return rating


def round_half_up(value: float, digits: int) -> float:
    """Round to ``digits`` decimals with exact ties going towards +infinity."""
    scale = 10**digits
    return floor(value * scale + 0.5) / scale


@dataclass(frozen=True)
class EloCalculationOptions:
    k_factor: float = K_FACTOR
    min_rating: float = MIN_ELO_RATING
    max_rating: float = MAX_ELO_RATING
    max_rating_change: float = MAX_RATING_CHANGE

    def __post_init__(self) -> None:
        if _require_finite(self.k_factor, "k_factor") <= 0.0:
            raise InvalidInputError(f"k_factor must be > 0, got {self.k_factor}", field="k_factor")
        if _require_finite(self.max_rating_change, "max_rating_change") <= 0.0:
            raise InvalidInputError(
                f"max_rating_change must be > 0, got {self.max_rating_change}",
                field="max_rating_change",
            )
        if _require_finite(self.min_rating, "min_rating") < 0.0:
            raise InvalidInputError(
                f"min_rating must be >= 0, got {self.min_rating}",
                field="min_rating",
            )
        if _require_finite(self.max_rating, "max_rating") <= self.min_rating:
            raise InvalidInputError(
                f"min_rating must be < max_rating, got {self.min_rating} >= {self.max_rating}",
                field="min_rating",
            )


DEFAULT_OPTIONS = EloCalculationOptions()


def calculate_expected_score(rating: float, opponent_rating: float) -> float:
    """Compute the Elo expected score (win probability) for one side.

    The lower-rated side is evaluated with the formula and the higher-rated
    side takes the complement, so swapping the arguments always yields scores
    that sum to exactly 1.0.
    """
    rating = require_rating(rating, "rating")
    opponent_rating = require_rating(opponent_rating, "opponent_rating")

    exponent = abs(opponent_rating - rating) / ELO_DIVISOR
    try:
        underdog_expected = 1.0 / (1.0 + ELO_BASE**exponent)
    except OverflowError:
        # Gap too large for a double; the underdog's chance is effectively nil.
        underdog_expected = 0.0

    if rating <= opponent_rating:
        return underdog_expected
    return 1.0 - underdog_expected


def calculate_new_rating(
    current_rating: float,
    expected_score: float,
    actual_score: float,
    k_factor: float = K_FACTOR,
    options: EloCalculationOptions | None = None,
) -> float:
    """Apply one Elo update: ``current + k * (actual - expected)``.

    The raw change is capped at ``options.max_rating_change`` in either
    direction, the resulting rating is clamped to
    ``[options.min_rating, options.max_rating]`` and rounded to two decimals.
    ``actual_score`` is 1 for a win, 0.5 for a draw and 0 for a loss.
    """
    options = options or DEFAULT_OPTIONS

    current_rating = _require_finite(current_rating, "current_rating")
    expected_score = _require_finite(expected_score, "expected_score")
    if expected_score < 0.0 or expected_score > 1.0:
        raise InvalidInputError(
            f"expected_score must be between 0 and 1, got {expected_score}",
            field="expected_score",
        )
    if not _is_number(actual_score) or float(actual_score) not in _VALID_ACTUAL_SCORES:
        raise InvalidInputError(
            f"actual_score must be 0 (loss), 0.5 (draw) or 1 (win), got {actual_score!r}",
            field="actual_score",
        )
    k_factor = _require_finite(k_factor, "k_factor")
    if k_factor <= 0.0:
        raise InvalidInputError(f"k_factor must be > 0, got {k_factor}", field="k_factor")

    rating_change = k_factor * (float(actual_score) - expected_score)
    if abs(rating_change) > options.max_rating_change:
        rating_change = options.max_rating_change if rating_change > 0.0 else -options.max_rating_change

    new_rating = max(options.min_rating, min(current_rating + rating_change, options.max_rating))
    return round_half_up(new_rating, 2)


def calculate_team_rating(player_ratings: Sequence[float]) -> float:
    """Return the mean of a roster's ratings, rounded to two decimals."""
    if (
        not isinstance(player_ratings, Sequence)
        or isinstance(player_ratings, (str, bytes))
        or not player_ratings
    ):
        raise InvalidInputError(
            "player_ratings must be a non-empty sequence of ratings",
            field="player_ratings",
        )

    ratings = [
        require_rating(rating, f"player_ratings[{index}]")
        for index, rating in enumerate(player_ratings)
    ]
    return round_half_up(sum(ratings) / float(len(ratings)), 2)


def get_initial_rating() -> float:
    return INITIAL_ELO


def is_valid_rating(rating: object, options: EloCalculationOptions | None = None) -> bool:
    """Check that ``rating`` is finite and inside the configured bounds."""
    options = options or DEFAULT_OPTIONS
    if not _is_number(rating) or not isfinite(rating):
        return False
    return options.min_rating <= rating <= options.max_rating


__all__ = [
    "DEFAULT_OPTIONS",
    "EloCalculationOptions",
    "calculate_expected_score",
    "calculate_new_rating",
    "calculate_team_rating",
    "get_initial_rating",
    "is_valid_rating",
    "require_rating",
    "round_half_up",
]
