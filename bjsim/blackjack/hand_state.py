"""
This module provides the `HandState` class, the wager and progress of one
player hand during a round.

A `HandState` wraps a `BlackjackHand` together with the bet riding on it and
two flags, `finished` and `surrendered`. It is the only place where moves are
gated: once a hand is finished every further move raises `IllegalMoveError`,
and doubling down or surrendering is only allowed on the two dealt cards.
"""

from decimal import Decimal

from bjsim.blackjack.hand import BlackjackHand
from bjsim.common.card import Card


class IllegalMoveError(Exception):
    """Raised when a move is made on a finished hand or out of sequence."""

    pass


class HandState:
    """The state of one hand during a round: cards, bet and progress."""

    def __init__(self, hand: BlackjackHand, bet: Decimal):
        if bet < 0:
            raise ValueError(f"Bet must be non-negative, got {bet}")
        self.hand = hand
        self.bet = bet
        self._finished = False
        self._surrendered = False

    def hit(self, card: Card):
        """Add a card, finishing the hand if it busts."""
        self._check_not_finished("hit")
        self.hand.add_card(card)
        if self.hand.is_bust:
            self._finished = True

    def double_down(self, card: Card):
        """Double the bet, take exactly one card and finish the hand, bust or not."""
        self._check_not_finished("double down")
        if not self.is_initial_hand:
            raise IllegalMoveError("Can't double down after a move has been made on the hand.")
        self.bet *= 2
        self.hand.add_card(card)
        self._finished = True

    def split(self) -> "HandState":
        """
        Split the hand into two, each liable for the full bet.

        This hand keeps one card and is left waiting for its second card.

        :return: The new hand holding the other card
        :raises IllegalMoveError: If the hand is finished
        :raises InvalidSplitError: If the hand is not a pair
        """
        self._check_not_finished("split")
        return HandState(self.hand.split(), self.bet)

    def stand(self):
        self._check_not_finished("stand")
        self._finished = True

    def surrender(self):
        """Give up the two dealt cards for half the bet back."""
        self._check_not_finished("surrender")
        if not self.is_initial_hand:
            raise IllegalMoveError("Can't surrender after a move has been made on the hand.")
        self._finished = True
        self._surrendered = True

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def surrendered(self) -> bool:
        return self._surrendered

    def total_value(self) -> int:
        """Best value of the hand. A surrendered hand is worth 0."""
        if self._surrendered:
            return 0
        return self.hand.value()

    @property
    def is_soft(self) -> bool:
        return self.hand.is_soft

    @property
    def is_bust(self) -> bool:
        return self.total_value() > 21

    @property
    def is_blackjack(self) -> bool:
        return self.hand.is_blackjack

    @property
    def can_split(self) -> bool:
        return self.hand.can_split

    @property
    def just_split(self) -> bool:
        return self.hand.just_split

    @property
    def is_initial_hand(self) -> bool:
        return self.hand.is_initial_hand

    @property
    def split_card(self) -> Card:
        return self.hand.split_card

    @property
    def face_up_card(self) -> Card:
        return self.hand.face_up_card

    def _check_not_finished(self, move: str):
        if self._finished:
            raise IllegalMoveError(
                f"Cannot {move}: the hand [{self.hand}] is already finished."
            )

    def __repr__(self) -> str:
        return (
            f"HandState({self.hand!r}, bet={self.bet}, "
            f"finished={self._finished}, surrendered={self._surrendered})"
        )
