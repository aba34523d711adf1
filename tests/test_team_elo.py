"""Unit tests for team-level Elo updates and pre-game analysis."""

from __future__ import annotations

import math

import pytest

from domain.ratings.common import InvalidInputError, Player
from domain.ratings.elo.calculator import EloCalculationOptions
from domain.ratings.elo.team_ratings import (
    analyze_rating_gap,
    create_new_player,
    simulate_game_outcomes,
    update_team_ratings,
)


def _roster(prefix: str, ratings: list[float]) -> list[Player]:
    return [
        Player(id=f"{prefix}{index}", name=f"{prefix.upper()} Player {index}", rating=rating)
        for index, rating in enumerate(ratings, start=1)
    ]


def test_one_v_one_even_match() -> None:
    result = update_team_ratings(
        [Player(id="1", name="Alice", rating=1500.0)],
        [Player(id="2", name="Bob", rating=1500.0)],
        True,
    )

    assert result.team1_changes[0].new_rating == 1510.0
    assert result.team1_changes[0].rating_change == 10.0
    assert result.team2_changes[0].new_rating == 1490.0
    assert result.team2_changes[0].rating_change == -10.0
    assert result.expected_score_team1 == 0.5
    assert result.expected_score_team2 == 0.5


def test_change_records_carry_audit_triple() -> None:
    team1 = _roster("a", [1512.5, 1600.0])
    team2 = _roster("b", [1480.25])

    result = update_team_ratings(team1, team2, False)

    for player, change in zip(team1, result.team1_changes):
        assert change.player_id == player.id
        assert change.player_name == player.name
        assert change.old_rating == player.rating
        assert change.new_rating == pytest.approx(change.old_rating + change.rating_change)
    assert result.team2_changes[0].player_id == "b1"


def test_expected_scores_are_complementary() -> None:
    result = update_team_ratings(
        _roster("a", [1600.0, 1650.0, 1700.0]),
        _roster("b", [1500.0, 1450.0, 1500.0]),
        True,
    )
    assert result.expected_score_team1 + result.expected_score_team2 == 1.0
    assert result.team1_average_rating == 1650.0
    assert result.team2_average_rating == pytest.approx(1483.33)


def test_every_teammate_gets_the_same_change() -> None:
    result = update_team_ratings(
        _roster("a", [1400.0, 1500.0, 1600.0, 1550.0, 1450.0]),
        _roster("b", [1500.0, 1500.0, 1500.0, 1500.0, 1500.0]),
        True,
    )

    team1_deltas = {round(change.rating_change, 2) for change in result.team1_changes}
    team2_deltas = {round(change.rating_change, 2) for change in result.team2_changes}
    assert team1_deltas == {10.0}
    assert team2_deltas == {-10.0}


def test_three_v_five_upset() -> None:
    favorites = _roster("a", [1650.0, 1700.0, 1750.0])
    underdogs = _roster("b", [1500.0, 1450.0, 1550.0, 1500.0, 1500.0])

    result = update_team_ratings(favorites, underdogs, False)

    assert result.team1_average_rating == 1700.0
    assert result.team2_average_rating == 1500.0
    assert result.expected_score_team1 > 0.7
    assert len(result.team1_changes) == 3
    assert len(result.team2_changes) == 5
    for change in result.team1_changes:
        assert change.rating_change < -10.0
    for change in result.team2_changes:
        assert change.rating_change > 10.0


def test_uneven_rosters_do_not_conserve_points() -> None:
    result = update_team_ratings(
        _roster("a", [1500.0, 1500.0, 1500.0]),
        _roster("b", [1500.0, 1500.0, 1500.0, 1500.0, 1500.0]),
        True,
    )

    assert result.team1_total_change == pytest.approx(30.0)
    assert result.team2_total_change == pytest.approx(-50.0)


def test_equal_rosters_conserve_points() -> None:
    result = update_team_ratings(
        _roster("a", [1550.0, 1620.0]),
        _roster("b", [1480.0, 1510.0]),
        False,
    )
    assert result.team1_total_change + result.team2_total_change == pytest.approx(0.0, abs=0.05)


def test_options_k_factor_and_bounds_are_applied() -> None:
    options = EloCalculationOptions(k_factor=40.0, max_rating=1515.0)
    result = update_team_ratings(
        _roster("a", [1500.0, 1490.0]),
        _roster("b", [1500.0, 1490.0]),
        True,
        options,
    )

    assert result.team1_changes[0].new_rating == 1515.0
    assert result.team1_changes[1].new_rating == 1510.0
    assert result.team2_changes[0].rating_change == pytest.approx(-20.0)


def test_update_does_not_mutate_rosters() -> None:
    team1 = _roster("a", [1500.0, 1600.0])
    team2 = _roster("b", [1450.0])
    team1_before = list(team1)
    team2_before = list(team2)

    update_team_ratings(team1, team2, True)

    assert team1 == team1_before
    assert team2 == team2_before


@pytest.mark.parametrize(
    ("team1", "team2", "field"),
    [
        ([], _roster("b", [1500.0]), "team1.players"),
        (_roster("a", [1500.0]), [], "team2.players"),
        ([Player(id="", name="Alice", rating=1500.0)], _roster("b", [1500.0]), "team1.id"),
        (_roster("a", [1500.0]), [Player(id="2", name="", rating=1500.0)], "team2.name"),
        (_roster("a", [1500.0]), [Player(id="2", name="Bob", rating=-1.0)], "team2.rating"),
        ([Player(id="1", name="Alice", rating=math.inf)], _roster("b", [1500.0]), "team1.rating"),
        ([{"id": "1", "name": "Alice", "rating": 1500.0}], _roster("b", [1500.0]), "team1.players"),
    ],
)
def test_update_rejects_malformed_rosters(
    team1: list[Player],
    team2: list[Player],
    field: str,
) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        update_team_ratings(team1, team2, True)
    assert excinfo.value.field == field


def test_update_reports_first_violation_only() -> None:
    team1 = [Player(id="", name="", rating=-1.0)]
    with pytest.raises(InvalidInputError, match="team1") as excinfo:
        update_team_ratings(team1, [], True)
    assert excinfo.value.field == "team1.id"


def test_create_new_player_uses_initial_rating() -> None:
    player = create_new_player("player123", "John Doe")
    assert player == Player(id="player123", name="John Doe", rating=1500.0)


@pytest.mark.parametrize(
    ("player_id", "name", "field"),
    [("", "John", "id"), (None, "John", "id"), ("p1", "", "name"), ("p1", 7, "name")],
)
def test_create_new_player_rejects_bad_fields(player_id: object, name: object, field: str) -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        create_new_player(player_id, name)  # type: ignore[arg-type]
    assert excinfo.value.field == field


def test_analyze_rating_gap_dead_zone() -> None:
    analysis = analyze_rating_gap(1525.0, 1500.0)
    assert analysis.rating_gap == 25.0
    assert analysis.favored_team is None


def test_analyze_rating_gap_favored_team() -> None:
    analysis = analyze_rating_gap(1600.0, 1400.0)

    assert analysis.rating_gap == 200.0
    assert analysis.favored_team == 1
    assert analysis.expected_score_team1 == 0.76
    assert analysis.expected_score_team2 == 0.24
    assert analysis.team1_max_gain == pytest.approx(4.8, abs=0.01)
    assert analysis.team1_max_loss == pytest.approx(-15.2, abs=0.01)
    assert analysis.team2_max_gain == pytest.approx(15.2, abs=0.01)
    assert analysis.team2_max_loss == pytest.approx(-4.8, abs=0.01)

    assert analyze_rating_gap(1400.0, 1450.0).favored_team == 2


def test_analyze_rating_gap_scales_with_k_factor() -> None:
    baseline = analyze_rating_gap(1500.0, 1500.0)
    doubled = analyze_rating_gap(1500.0, 1500.0, k_factor=40.0)
    assert baseline.team1_max_gain == 10.0
    assert doubled.team1_max_gain == 20.0
    assert doubled.team2_max_loss == -20.0


def test_analyze_rating_gap_rejects_negative_average() -> None:
    with pytest.raises(InvalidInputError):
        analyze_rating_gap(-10.0, 1500.0)


def test_simulate_game_outcomes_is_idempotent() -> None:
    team1 = [Player(id="1", name="Alice", rating=1500.0)]
    team2 = [Player(id="2", name="Bob", rating=1500.0)]

    first = simulate_game_outcomes(team1, team2)
    second = simulate_game_outcomes(team1, team2)

    assert first == second
    assert team1[0].rating == 1500.0
    assert team2[0].rating == 1500.0
    assert first.team1_wins.team1_changes[0].rating_change > 0.0
    assert first.team2_wins.team1_changes[0].rating_change < 0.0
    assert first.team1_wins.team1_changes[0].rating_change == pytest.approx(
        -first.team2_wins.team1_changes[0].rating_change
    )


def test_simulate_game_outcomes_honours_options() -> None:
    team1 = _roster("a", [1500.0])
    team2 = _roster("b", [1500.0])

    outcomes = simulate_game_outcomes(team1, team2, EloCalculationOptions(k_factor=40.0))

    assert outcomes.team1_wins.team1_changes[0].rating_change == pytest.approx(20.0)
    assert outcomes.team2_wins.team2_changes[0].rating_change == pytest.approx(20.0)


def test_tied_ratings_round_half_up() -> None:
    result = update_team_ratings(
        [Player(id="1", name="Alice", rating=1500.125)],
        [Player(id="2", name="Bob", rating=1500.125)],
        True,
    )

    assert result.team1_average_rating == 1500.13
    assert result.team1_changes[0].new_rating == 1510.13
    assert result.team2_changes[0].new_rating == 1490.13
    assert analyze_rating_gap(1500.125, 1500.0).rating_gap == 0.13


def test_negative_rating_change_cap_is_rejected() -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        update_team_ratings(
            _roster("a", [1500.0]),
            _roster("b", [1500.0]),
            True,
            EloCalculationOptions(max_rating_change=-5.0),
        )
    assert excinfo.value.field == "max_rating_change"
