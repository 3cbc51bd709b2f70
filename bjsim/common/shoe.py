"""
This module contains the Shoe class, the multi-deck pool of cards a blackjack
game deals from.

Cards are dealt sequentially from a cursor rather than popped, so a reshuffle
puts every card, dealt or not, back into play.

>>> import random
>>> shoe = Shoe(num_decks=6, rng=random.Random(7))
>>> shoe.cards_remaining
312
>>> _ = shoe.deal()
>>> shoe.cards_remaining
311
"""

import random
from typing import List, Optional

from bjsim.common.card import Card
from bjsim.common.deck import Deck


class EmptyDeckError(Exception):
    """Raised when a card is requested from a shoe with no cards left to deal."""

    pass


class Shoe:
    def __init__(self, num_decks: int = 6, rng: Optional[random.Random] = None):
        """
        Initialize a Shoe instance.

        :param num_decks: Number of 52-card decks to combine (default is 6)
        :param rng: Random generator used for every shuffle. Pass a seeded
                    ``random.Random`` for reproducible orderings.
        """
        if num_decks < 1:
            raise ValueError("Number of decks must be at least 1")

        self.num_decks = num_decks
        self.rng = rng if rng is not None else random.Random()
        self.cards: List[Card] = []
        self.next_card_index = 0

        self.initialize_shoe()

    def initialize_shoe(self):
        """Initialize the shoe with the specified number of decks and shuffle."""
        self.cards = []
        for _ in range(self.num_decks):
            self.cards.extend(Deck().cards)
        self.shuffle()

    @property
    def total_cards(self) -> int:
        return len(self.cards)

    @property
    def cards_remaining(self) -> int:
        """Number of cards left to deal before the shoe is exhausted."""
        return len(self.cards) - self.next_card_index

    def shuffle(self):
        """Shuffle all cards in the shoe, including dealt ones, and reset the next card index."""
        self.rng.shuffle(self.cards)
        self.next_card_index = 0

    def deal(self) -> Card:
        """
        Deal the next card from the shoe.

        :return: The next Card
        :raises EmptyDeckError: If every card has already been dealt
        """
        if self.next_card_index >= len(self.cards):
            raise EmptyDeckError(
                f"No cards remaining in shoe of {self.num_decks} deck(s)."
            )

        card = self.cards[self.next_card_index]
        self.next_card_index += 1
        return card

    def __repr__(self) -> str:
        return f"Shoe(num_decks={self.num_decks}, cards_remaining={self.cards_remaining})"

    def __str__(self) -> str:
        return f"Shoe of {self.num_decks} deck(s), {self.cards_remaining} cards remaining"
