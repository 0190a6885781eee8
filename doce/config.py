"""Game constants, player profiles, card powers and main-menu options."""

from __future__ import annotations

from enum import Enum, IntEnum

GROUP_CODE = "handler"
REPORT_PREFIX = "informe-juego_"
REPORT_EXTENSION = ".txt"

PLAYER_COUNT = 2
HAND_SIZE = 3
DECK_SIZE = 40
WINNING_SCORE = 12

TITLE = "--- Bienvenido a DoCe ---"


class Profile(IntEnum):
    """Who controls a player: a human or one of the AI difficulty levels."""

    HUMANO = 0
    IA_FACIL = 1
    IA_NORMAL = 2
    IA_DIFICIL = 3

    @property
    def is_ai(self) -> bool:
        return self is not Profile.HUMANO


class Power(IntEnum):
    """The power printed on a card."""

    SUMAR_2 = 0
    SUMAR_1 = 1
    RESTAR_1 = 2
    RESTAR_2 = 3
    REP_TURNO = 4
    ESPEJO = 5


_CARDS_PER_POWER = {
    Power.SUMAR_2: 6,
    Power.SUMAR_1: 10,
    Power.RESTAR_1: 8,
    Power.RESTAR_2: 6,
    Power.REP_TURNO: 6,
    Power.ESPEJO: 4,
}


class MenuOption(str, Enum):
    """Main-menu choices, keyed by the letter the user types."""

    JUGAR = "A"
    VER_RANKING = "B"
    SALIR = "C"


def deck_composition() -> dict[Power, int]:
    """Return how many cards of each power make up a full deck."""
    return dict(_CARDS_PER_POWER)


def menu_entries() -> list[tuple[MenuOption, str]]:
    """Return the main-menu options in display order with their labels."""
    return [(option, option.name) for option in MenuOption]