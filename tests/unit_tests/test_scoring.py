from typing import List

import pytest

from bowling import TurnResult


def _scores(game, player) -> List[int]:
    player_game = game.get_player_game(player)
    return [player_game.get_cumulative_score(n) for n in range(1, 11)]


@pytest.mark.parametrize(
    "shots, expected",
    [
        ([10] * 12, [30, 60, 90, 120, 150, 180, 210, 240, 270, 300]),
        (
            [9, 1] * 9 + [9, 1, 9],
            [19, 38, 57, 76, 95, 114, 133, 152, 171, 190],
        ),
        (
            [0, 0] * 9 + [10, 10, 10],
            [0, 0, 0, 0, 0, 0, 0, 0, 0, 30],
        ),
        (
            [0, 0] * 8 + [7, 3] + [10, 10, 10],
            [0, 0, 0, 0, 0, 0, 0, 0, 20, 50],
        ),
        (
            [7, 3, 5, 4] + [0, 0] * 8,
            [15, 24, 24, 24, 24, 24, 24, 24, 24, 24],
        ),
        (
            [10, 7, 3, 7, 2] + [0, 0] * 7,
            [20, 37, 46, 46, 46, 46, 46, 46, 46, 46],
        ),
        (
            [10, 10, 4, 2] + [0, 0] * 7,
            [24, 40, 46, 46, 46, 46, 46, 46, 46, 46],
        ),
        (
            [0, 0] * 8 + [10] + [10, 3, 7],
            [0, 0, 0, 0, 0, 0, 0, 0, 23, 43],
        ),
    ],
)
def test_complete_single_player_games(make_game, roll, shots, expected):
    game = make_game("Ann")
    results = roll(game, shots)
    assert results[-1] is TurnResult.GAME_OVER
    assert _scores(game, game.players[0]) == expected
    assert game.get_player_game(game.players[0]).total_score == expected[-1]


def test_perfect_game_scores_300(make_game, roll):
    game = make_game("Ann")
    roll(game, [10] * 12)
    assert game.get_player_game(game.players[0]).get_cumulative_score(10) == 300


def test_tenth_frame_triple_strike_contributes_thirty(make_game, roll):
    game = make_game("Ann", "Bob")
    ann, bob = game.players
    roll(game, [0, 0] * 18)
    assert roll(game, [10, 10, 10]) == [TurnResult.ANOTHER_SHOT, TurnResult.ANOTHER_SHOT, TurnResult.PLAYER_FINISHED]
    assert _scores(game, ann)[9] - _scores(game, ann)[8] == 30


def test_strike_bonus_waits_for_the_next_frame(make_game, roll):
    game = make_game("Ann", "Bob")
    ann, bob = game.players

    game.submit_turn(10)
    assert game.get_player_game(ann).get_cumulative_score(1) == 10

    roll(game, [4, 3])
    assert game.get_player_game(ann).get_cumulative_score(1) == 10
    assert game.get_player_game(bob).get_cumulative_score(1) == 7

    game.submit_turn(5)
    assert game.get_player_game(ann).get_cumulative_score(1) == 15
    assert game.get_player_game(ann).get_cumulative_score(2) == 20

    game.submit_turn(2)
    assert _scores(game, ann)[:2] == [17, 24]


def test_strike_bonus_reaches_past_a_following_strike(make_game, roll):
    game = make_game("Ann")
    ann = game.players[0]

    roll(game, [10, 10])
    # Second bonus shot not thrown yet
    assert _scores(game, ann)[:2] == [20, 30]

    game.submit_turn(3)
    assert _scores(game, ann)[:3] == [23, 36, 39]

    game.submit_turn(4)
    assert _scores(game, ann)[:3] == [23, 40, 47]


def test_spare_bonus_counts_next_shot_only(make_game, roll):
    game = make_game("Ann")
    ann = game.players[0]

    roll(game, [3, 7])
    assert _scores(game, ann)[0] == 10

    game.submit_turn(4)
    assert _scores(game, ann)[:2] == [14, 18]

    game.submit_turn(5)
    assert _scores(game, ann)[:2] == [14, 23]


def test_scores_after_first_pending_frame_stay_zero(make_game, roll):
    game = make_game("Ann")
    roll(game, [3, 4, 2])
    assert _scores(game, game.players[0]) == [7, 9, 0, 0, 0, 0, 0, 0, 0, 0]


def test_only_the_moving_player_is_recalculated(make_game, roll):
    game = make_game("Ann", "Bob")
    ann, bob = game.players
    roll(game, [3, 3])
    roll(game, [10])
    assert _scores(game, ann)[0] == 6
    assert _scores(game, bob)[0] == 10


def test_reading_scores_is_idempotent(make_game, roll):
    game = make_game("Ann", "Bob")
    roll(game, [10, 4, 5, 3, 7])
    for player in game.players:
        first = dict(game.get_player_game(player).cumulative_scores)
        second = dict(game.get_player_game(player).cumulative_scores)
        assert first == second
        assert _scores(game, player) == _scores(game, player)
