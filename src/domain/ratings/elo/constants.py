"""Default constants for pickup-game Elo."""

from __future__ import annotations

INITIAL_ELO = 1500.0
K_FACTOR = 20.0

# A 400-point gap gives the favorite an expected score of ~0.91.
ELO_DIVISOR = 400.0
ELO_BASE = 10.0

MIN_ELO_RATING = 100.0
MAX_ELO_RATING = 3000.0
MAX_RATING_CHANGE = 50.0

# Average-rating gaps below this are reported as even matchups.
FAVORED_TEAM_THRESHOLD = 50.0

__all__ = [
    "ELO_BASE",
    "ELO_DIVISOR",
    "FAVORED_TEAM_THRESHOLD",
    "INITIAL_ELO",
    "K_FACTOR",
    "MAX_ELO_RATING",
    "MAX_RATING_CHANGE",
    "MIN_ELO_RATING",
]
