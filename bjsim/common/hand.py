"""
Card containers shared by every hand type.

`AbstractHand` owns the ordered list of cards and knows how to grow and shrink
it. `Hand` adds the debug and display forms. Game rules such as scoring live
in subclasses, see `bjsim.blackjack.hand`.
"""
from abc import ABC
from typing import Iterable, List, Optional

from bjsim.common.card import Card


class AbstractHand(ABC):
    """Ordered cards held by one participant, oldest first."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        # Copy, the caller may hand us a tuple or a list it keeps using.
        self._cards: List[Card] = list(cards) if cards is not None else []

    @property
    def cards(self) -> List[Card]:
        return self._cards

    def add_card(self, card: Card) -> None:
        """Append `card` after the cards already held."""
        self._cards.append(card)

    def remove_card(self, card: Card) -> None:
        """
        Take the first copy of `card` out of the hand.

        :raises ValueError: If the hand holds no such card
        """
        try:
            self._cards.remove(card)
        except ValueError as exc:
            raise ValueError(f"Card {card} not found in hand.") from exc

    def __len__(self) -> int:
        return len(self._cards)


class Hand(AbstractHand):
    """A hand that prints as its ranks, e.g. ``A, 10``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.cards!r})"

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self.cards)
