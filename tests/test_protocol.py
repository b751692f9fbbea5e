import io

import pytest

from gemesis.chips import Action, ChipSet, Move
from gemesis.constants import NOBLE_SCORE, card_bonus, card_points
from gemesis.game import PlayerState
from gemesis.protocol import (
    format_final_move,
    log_arbiter,
    read_game_state,
    read_player_state,
)

SAMPLE = """2 2 5
4 4 4 4 4 5
36 1 2 3 4
26 41 42 43 44
16 71 72 0 74
3 1 2 3
0 0 0 0 0 0
0
0
0
1 0 0 0 0 1
1 11
2 -1 60
0
"""


def test_read_game_state_sample():
    game = read_game_state(io.StringIO(SAMPLE))
    assert game.player_count == 2
    assert game.current_player == 1
    assert list(game.chips) == [4, 4, 4, 4, 4, 5]
    assert game.cards == {1, 2, 3, 4, 41, 42, 43, 44, 71, 72, 74}
    assert game.nobles == {1, 2, 3}

    first, second = game.players[:2]
    assert first.score == 0
    assert first.cards == set()
    assert second.cards == {11}
    assert second.score == card_points(11)
    assert second.chips.bonus(card_bonus(11)) == 1
    assert second.chips.gems == [1, 0, 0, 0, 0]
    assert second.chips.gold == 1
    assert second.res == {60}
    assert second.secret_res == 1


def test_read_game_state_awards_qualifying_nobles():
    owned = [1, 6, 11, 2, 7, 12, 3, 8, 13]
    text = (
        "2 1 1\n4 4 4 4 4 5\n"
        "36 16 17 18 19\n26 41 42 43 44\n16 71 72 73 74\n"
        "2 6 1\n"
        "0 0 0 0 0 0\n0\n0\n0\n"
        f"0 0 0 0 0 0\n{len(owned)} {' '.join(map(str, owned))}\n0\n0\n"
    )
    game = read_game_state(io.StringIO(text))
    player = game.players[1]
    assert player.nobles == {6}
    assert game.nobles == {1}
    assert player.score == sum(card_points(c) for c in owned) + NOBLE_SCORE


def test_truncated_input_raises():
    with pytest.raises(ValueError):
        read_game_state(io.StringIO("2 1"))


def test_bad_player_count_raises():
    with pytest.raises(ValueError):
        read_game_state(io.StringIO(SAMPLE.replace("2 2 5", "7 2 5", 1)))


@pytest.mark.parametrize(
    "move, expected",
    [
        (Move(Action.NO_ACTION), "1 0\n"),
        (Move(Action.TAKE_3_DIFF_GEMS, 3, ChipSet([1, 0, 1, 0, 1, 0])), "1 3 0 2 4 \n"),
        (Move(Action.TAKE_3_DIFF_GEMS, 0, ChipSet()), "1 0 \n"),
        (Move(Action.TAKE_2_SAME_GEMS, 3), "2 3\n"),
        (Move(Action.RES_CARD, 7), "3 7\n"),
        (Move(Action.BUY_CARD, 11), "4 11\n"),
    ],
)
def test_format_final_move(move, expected):
    assert format_final_move(move) == expected


def test_log_arbiter_writes_kibitz(capsys):
    log_arbiter("Best win probability: 0.5")
    captured = capsys.readouterr()
    assert captured.err == "kibitz Best win probability: 0.5\n"
    assert captured.out == ""