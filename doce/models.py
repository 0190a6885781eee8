"""Cards, hands, players and recorded plays."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from doce.config import HAND_SIZE, WINNING_SCORE, Power

MAX_NAME_LENGTH = 49


@dataclass(frozen=True)
class Card:
    """A single card, defined by its power."""

    power: Power


@dataclass
class Hand:
    """The cards a player holds; always exactly HAND_SIZE of them."""

    cards: list[Card]

    def __post_init__(self) -> None:
        self.cards = list(self.cards)
        if len(self.cards) != HAND_SIZE:
            raise ValueError(
                f"a hand holds exactly {HAND_SIZE} cards, got {len(self.cards)}"
            )

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]


@dataclass
class Player:
    """A player's name, accumulated score and current hand."""

    name: str
    score: int = 0
    hand: Optional[Hand] = field(default=None)

    def __post_init__(self) -> None:
        if len(self.name) > MAX_NAME_LENGTH:
            raise ValueError(
                f"player name longer than {MAX_NAME_LENGTH} characters"
            )

    @property
    def is_winner(self) -> bool:
        return self.score >= WINNING_SCORE


@dataclass(frozen=True)
class Play:
    """One recorded move of a game."""

    number: int
    player_name: str
    card_played: str
    accumulated_score: int