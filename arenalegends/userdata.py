"""Per-player and per-match game state."""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field

_DEFAULT_DECK = (0, 1, 2, 3, 4, 5, 9, 10)
_HAND_SIZE = 4


@dataclass
class UserData:
    """A player's chosen deck, draw pile, upcoming cards and elixir."""

    chosen_cards: set[int] = field(default_factory=lambda: set(_DEFAULT_DECK))
    available_cards: list[int] = field(default_factory=list)
    next_card_queue: deque[int] = field(default_factory=deque)
    elixir: float = 0.0
    selected_card: int = 0

    def init_game(self, rng: random.Random | None = None) -> None:
        """Reset elixir and selection, shuffle the deck and queue the first cards."""
        rng = rng if rng is not None else random.SystemRandom()
        self.elixir = 7
        self.selected_card = 0
        self.available_cards.extend(sorted(self.chosen_cards))
        rng.shuffle(self.available_cards)
        for _ in range(_HAND_SIZE):
            self.next_card_queue.append(self.available_cards.pop())


@dataclass
class GameData:
    """State shared by the whole match: both players and the elixir rate."""

    a: UserData = field(default_factory=UserData)
    b: UserData = field(default_factory=UserData)
    elixir_speed: float = 0.5