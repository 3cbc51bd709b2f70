"""
BlackjackHand: a hand of cards with blackjack valuation and splitting.
"""

from typing import Iterable, Optional

from bjsim.common.card import Card
from bjsim.common.hand import Hand

BLACKJACK = 21
# An ace may be promoted from 1 to 11 while the raw total stays at or below this.
ACE_PROMOTION_LIMIT = 11
ACE_PROMOTION = 10


class InvalidSplitError(Exception):
    """Raised when a hand that is not a splittable pair is split."""

    pass


class EmptyHandError(Exception):
    """Raised when a hand with no cards is asked for its face-up card."""

    pass


class BlackjackHand(Hand):
    """A hand in the game of Blackjack."""

    def __init__(self, cards: Optional[Iterable[Card]] = None, is_split: bool = False):
        super().__init__(cards)
        self._is_split = is_split

    @property
    def raw_value(self) -> int:
        """Sum of the card values with every ace counted as 1."""
        return sum(card.rank_value for card in self._cards)

    @property
    def has_ace(self) -> bool:
        return Card.ACE in self._cards

    def value(self) -> int:
        """
        Calculate the best value of the hand.

        All aces count as 1, then one ace is promoted to 11 if the raw total
        leaves room for it. Two aces can never both be 11 in the same hand.
        """
        total = self.raw_value
        if total <= ACE_PROMOTION_LIMIT and self.has_ace:
            total += ACE_PROMOTION
        return total

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace counted as 11)."""
        return self.has_ace and self.raw_value <= ACE_PROMOTION_LIMIT

    @property
    def is_bust(self) -> bool:
        return self.value() > BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Determine if the hand is a natural: two cards totalling 21."""
        return len(self._cards) == 2 and self.value() == BLACKJACK

    @property
    def can_split(self) -> bool:
        """Check if the hand is two cards of equal value (a King and a Ten count as a pair)."""
        return (
            len(self._cards) == 2
            and self._cards[0].rank_value == self._cards[1].rank_value
        )

    @property
    def is_initial_hand(self) -> bool:
        """The two dealt cards, before any hit or split."""
        return len(self._cards) == 2 and not self._is_split

    @property
    def just_split(self) -> bool:
        """A split-off hand still waiting for its mandatory second card."""
        return len(self._cards) == 1

    @property
    def is_split(self) -> bool:
        """Return whether this hand was created from a split."""
        return self._is_split

    @property
    def face_up_card(self) -> Card:
        """The first card dealt to the hand."""
        if not self._cards:
            raise EmptyHandError("Hand has no cards, so there is no face-up card.")
        return self._cards[0]

    @property
    def split_card(self) -> Card:
        """The card a split would move into the new hand."""
        if not self.can_split:
            raise InvalidSplitError(
                f"Hand is not eligible to be split. Hand = [{self}]"
            )
        return self._cards[-1]

    def split(self) -> "BlackjackHand":
        """
        Split the pair, leaving one card here and returning a new hand holding the other.

        :raises InvalidSplitError: If the hand is not a two-card pair
        """
        card = self.split_card
        self._cards.pop()
        self._is_split = True
        return BlackjackHand([card], is_split=True)
