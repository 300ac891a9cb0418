import random

from arenalegends.userdata import GameData, UserData


def test_default_deck():
    assert UserData().chosen_cards == {0, 1, 2, 3, 4, 5, 9, 10}


def test_init_game_resets_counters():
    data = UserData()
    data.selected_card = 3
    data.init_game(random.Random(7))
    assert data.elixir == 7
    assert data.selected_card == 0


def test_init_game_splits_deck_into_queue_and_pile():
    data = UserData()
    data.init_game(random.Random(1))
    assert len(data.next_card_queue) == 4
    assert len(data.available_cards) == len(data.chosen_cards) - 4
    assert set(data.next_card_queue) | set(data.available_cards) == data.chosen_cards
    assert not set(data.next_card_queue) & set(data.available_cards)


def test_init_game_is_reproducible_with_seed():
    first, second = UserData(), UserData()
    first.init_game(random.Random(42))
    second.init_game(random.Random(42))
    assert list(first.next_card_queue) == list(second.next_card_queue)
    assert first.available_cards == second.available_cards


def test_init_game_uses_custom_deck():
    data = UserData(chosen_cards={11, 6, 7, 8, 2})
    data.init_game()
    assert sorted(list(data.next_card_queue) + data.available_cards) == [2, 6, 7, 8, 11]


def test_game_data_defaults():
    game = GameData()
    assert game.elixir_speed == 0.5
    assert game.a is not game.b
    assert game.a.chosen_cards == game.b.chosen_cards