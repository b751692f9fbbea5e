import pytest

from gemesis.chips import Action, ChipSet, FullChipSet, Move
from gemesis.constants import NOBLE_SCORE, SCORE_ENDGAME, card_bonus, card_points
from gemesis.game import GameState, PlayerState
from gemesis.log import GameError


def make_game(bank=(4, 4, 4, 4, 4, 5), cards=(), nobles=(), player_count=2):
    game = GameState(player_count=player_count)
    game.chips = ChipSet(bank)
    game.cards = set(cards)
    game.nobles = set(nobles)
    return game


def chip_total(game):
    return game.chips.total + sum(
        p.chips.total for p in game.players[: game.player_count]
    )


def test_buy_visible_card_and_undo():
    game = make_game(bank=(4, 4, 4, 0, 4, 5), cards={11, 1})
    player = game.players[0]
    player.chips = FullChipSet([0, 0, 0, 4, 0, 0])
    saved = game.copy()
    move = Move(Action.BUY_CARD, 11, ChipSet([0, 0, 0, 4, 0, 0]))

    game.apply_move(move)
    assert player.score == card_points(11)
    assert 11 in player.cards
    assert 11 not in game.cards
    assert game.chips[3] == 4
    assert player.chips.bonus(card_bonus(11)) == 1
    assert chip_total(game) == chip_total(saved)

    game.unapply_move(move)
    assert game == saved
    assert 11 in game.cards


def test_buy_with_gold_conserves_chips_and_undoes():
    game = make_game(bank=(4, 4, 4, 2, 4, 3), cards={11})
    player = game.players[0]
    player.chips = FullChipSet([0, 0, 0, 2, 0, 2])
    saved = game.copy()
    move = Move(Action.BUY_CARD, 11, ChipSet([0, 0, 0, 2, 0, 0]))

    game.apply_move(move)
    assert player.chips.gold == 0
    assert game.chips.gold == saved.chips.gold + saved.players[0].chips.gold
    assert chip_total(game) == chip_total(saved)

    game.unapply_move(move)
    assert game == saved


def test_buy_reserved_card_returns_to_reserve_on_undo():
    game = make_game(cards={1})
    player = game.players[0]
    player.chips = FullChipSet([0, 0, 0, 4, 0, 0])
    player.res = {11}
    saved = game.copy()
    move = Move(Action.BUY_CARD, 11, ChipSet([0, 0, 0, 4, 0, 1]))

    game.apply_move(move)
    assert player.res == set()
    assert 11 in player.cards

    game.unapply_move(move)
    assert player.res == {11}
    assert 11 not in game.cards
    assert game == saved


def test_buying_grants_noble_and_undo_returns_it():
    game = make_game(cards={2}, nobles={1, 2})
    player = game.players[0]
    for _ in range(4):
        player.chips.add_bonus(0)
    for _ in range(3):
        player.chips.add_bonus(1)
    saved = game.copy()
    move = Move(Action.BUY_CARD, 2, ChipSet([0, 0, 0, 0, 0, 0]))

    game.apply_move(move)
    assert player.nobles == {1}
    assert game.nobles == {2}
    assert player.score == NOBLE_SCORE + card_points(2)

    game.unapply_move(move)
    assert player.nobles == set()
    assert game.nobles == {1, 2}
    assert game == saved


def test_take_three_round_trip():
    game = make_game()
    saved = game.copy()
    data = ChipSet([1, 0, 1, 0, 1, 0])
    move = Move(Action.TAKE_3_DIFF_GEMS, 3, data)
    game.apply_move(move)
    assert game.players[0].chips.total == data.total
    assert game.chips.total == saved.chips.total - data.total
    game.unapply_move(move)
    assert game == saved


def test_take_two_round_trip():
    game = make_game()
    saved = game.copy()
    move = Move(Action.TAKE_2_SAME_GEMS, 3, ChipSet())
    game.apply_move(move)
    assert game.players[0].chips[3] == 2
    assert game.chips[3] == saved.chips[3] - 2
    game.unapply_move(move)
    assert game == saved


def test_reserve_round_trip_with_gold():
    game = make_game(cards={7, 8})
    saved = game.copy()
    move = Move(Action.RES_CARD, 7, ChipSet([0, 0, 0, 0, 0, 1]))
    game.apply_move(move)
    assert game.players[0].res == {7}
    assert game.players[0].chips.gold == 1
    assert game.cards == {8}
    game.unapply_move(move)
    assert game == saved


def test_no_action_raises():
    game = make_game()
    with pytest.raises(GameError):
        game.apply_move(Move(Action.NO_ACTION))
    with pytest.raises(GameError):
        game.unapply_move(Move(Action.NO_ACTION))


def test_next_and_prev_player_wrap():
    game = make_game(player_count=3)
    game.current_player = game.player_count - 1
    assert game.next_player() == 0
    game.current_player = 0
    assert game.prev_player() == game.player_count - 1
    game.current_player = game.prev_player()
    assert game.next_player() == 0


def test_is_end_game_only_on_last_player():
    game = make_game()
    game.players[0].score = SCORE_ENDGAME
    game.current_player = 0
    assert game.is_end_game() is False
    game.current_player = 1
    assert game.is_end_game() is True
    game.players[0].score = SCORE_ENDGAME - 1
    assert game.is_end_game() is False


def test_is_in_game():
    game = make_game(cards={5})
    game.players[1].cards = {6}
    game.players[0].res = {7}
    assert game.is_in_game(5)
    assert game.is_in_game(6)
    assert game.is_in_game(7)
    assert not game.is_in_game(8)


def test_copy_is_independent():
    game = make_game(cards={5})
    clone = game.copy()
    clone.cards.add(9)
    clone.players[0].chips.mod_chip(0, 1)
    assert game.cards == {5}
    assert game.players[0].chips[0] == 0
    assert not (clone == game)


def test_describe_lists_state():
    game = make_game(cards={12, 3}, nobles={4})
    game.players[0].score = 7
    text = game.describe()
    assert "<<<GAMEBOARD>>>" in text
    assert "Cards: 3 12" in text
    assert "Nobles: 4" in text
    assert text.count("<PLAYER>") == game.player_count
    assert "Score: 7" in game.players[0].describe()


def test_player_equality_ignores_nobles():
    first = PlayerState(score=3)
    second = PlayerState(score=3, nobles={1})
    assert first == second
    second.res.add(4)
    assert not (first == second)