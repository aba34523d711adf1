"""Elo rating modules."""

from domain.ratings.elo.calculator import (
    EloCalculationOptions,
    calculate_expected_score,
    calculate_new_rating,
    calculate_team_rating,
    get_initial_rating,
    is_valid_rating,
)
from domain.ratings.elo.config import (
    EloSystemConfig,
    load_elo_system_config,
    load_elo_system_configs,
)
from domain.ratings.elo.constants import (
    ELO_BASE,
    ELO_DIVISOR,
    INITIAL_ELO,
    K_FACTOR,
    MAX_ELO_RATING,
    MAX_RATING_CHANGE,
    MIN_ELO_RATING,
)
from domain.ratings.elo.team_ratings import (
    analyze_rating_gap,
    create_new_player,
    simulate_game_outcomes,
    update_team_ratings,
)

__all__ = [
    "ELO_BASE",
    "ELO_DIVISOR",
    "EloCalculationOptions",
    "EloSystemConfig",
    "INITIAL_ELO",
    "K_FACTOR",
    "MAX_ELO_RATING",
    "MAX_RATING_CHANGE",
    "MIN_ELO_RATING",
    "analyze_rating_gap",
    "calculate_expected_score",
    "calculate_new_rating",
    "calculate_team_rating",
    "create_new_player",
    "get_initial_rating",
    "is_valid_rating",
    "load_elo_system_config",
    "load_elo_system_configs",
    "simulate_game_outcomes",
    "update_team_ratings",
]
