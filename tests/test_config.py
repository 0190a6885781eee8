import pytest

from doce.config import (
    DECK_SIZE,
    HAND_SIZE,
    PLAYER_COUNT,
    WINNING_SCORE,
    MenuOption,
    Power,
    Profile,
    deck_composition,
    menu_entries,
)


def test_deck_composition_fills_the_deck():
    assert sum(deck_composition().values()) == DECK_SIZE == 40


def test_deck_composition_covers_every_power():
    assert set(deck_composition()) == set(Power)


def test_deck_composition_pinned_counts():
    counts = deck_composition()
    assert counts[Power.SUMAR_1] == 10
    assert counts[Power.ESPEJO] == 4


def test_deck_composition_returns_a_copy():
    counts = deck_composition()
    counts[Power.SUMAR_2] = 0
    assert deck_composition()[Power.SUMAR_2] == 6


def test_power_order_and_names():
    looked_up = [Power(member.value) for member in Power]
    assert [p.name for p in looked_up] == [
        "SUMAR_2", "SUMAR_1", "RESTAR_1", "RESTAR_2", "REP_TURNO", "ESPEJO",
    ]


def test_profile_names_and_ai_flag():
    looked_up = [Profile(member.value) for member in Profile]
    assert [p.name for p in looked_up] == ["HUMANO", "IA_FACIL", "IA_NORMAL", "IA_DIFICIL"]
    human = Profile(Profile.HUMANO.value)
    assert human is Profile.HUMANO
    assert not human.is_ai
    assert all(p.is_ai for p in looked_up if p is not Profile.HUMANO)


def test_menu_entries():
    assert menu_entries() == [
        (MenuOption.JUGAR, "JUGAR"),
        (MenuOption.VER_RANKING, "VER_RANKING"),
        (MenuOption.SALIR, "SALIR"),
    ]


def test_menu_option_from_letter():
    assert MenuOption("A") is MenuOption.JUGAR
    assert MenuOption("C") is MenuOption.SALIR
    with pytest.raises(ValueError):
        MenuOption("D")


def test_game_sizes():
    assert (PLAYER_COUNT, HAND_SIZE, WINNING_SCORE) == (2, 3, 12)
    assert sum(deck_composition().values()) == DECK_SIZE