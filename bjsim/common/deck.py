"""
A single 52-card set: thirteen ranks, four of each.

A `Shoe` is assembled from several of these. On its own a deck deals from the
end of its list, so a fresh, unshuffled deck deals its last King first.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
<Card.KING: 'K'>
>>> deck.size
51
"""

import random
from typing import List, Optional, Union

from bjsim.common.card import Card

SUITS_PER_DECK = 4


class Deck:
    """One standard set of cards, dealt from the end."""

    # Built once, copied into every new deck
    _default_deck = [card for _ in range(SUITS_PER_DECK) for card in Card]

    def __init__(self, cards: Union[List[Card], None] = None):
        """
        :param cards: Cards to start from, the last one is dealt first. A full
                      set is used when omitted.
        """
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = cards.copy()

    def initialize_default_deck(self) -> List[Card]:
        return self._default_deck.copy()

    def shuffle(self, rng: Optional[random.Random] = None):
        """Permute the remaining cards with `rng`, or the `random` module when not given."""
        (rng or random).shuffle(self.cards)
        return self

    def deal(self, num_cards=1) -> Union[Card, List[Card]]:
        """
        Remove cards from the end of the deck.

        :return: A single card when `num_cards` is 1, otherwise a list.
        :raises IndexError: If the deck runs out of cards.
        """
        if num_cards == 1:
            return self.cards.pop()
        return [self.cards.pop() for _ in range(num_cards)]

    @property
    def size(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def reset(self):
        """Put every card back, unshuffled."""
        self.cards = self.initialize_default_deck()

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"
