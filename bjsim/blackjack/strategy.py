from abc import ABC, abstractmethod
from decimal import Decimal

from bjsim.blackjack.action import Move
from bjsim.blackjack.hand_state import HandState
from bjsim.common.card import Card

ALWAYS = frozenset(range(2, 12))


def _between(low: int, high: int) -> frozenset:
    """Dealer upcard values from low to high inclusive, an ace counting as 11."""
    return frozenset(range(low, high + 1))


class Strategy(ABC):
    @abstractmethod
    def next_move(self, hand: HandState, dealer_up_card: Card, bank: Decimal) -> Move:
        """
        Decide the next move for a hand.

        :param hand: The hand being played
        :param dealer_up_card: The dealer's visible card
        :param bank: Money the player has left to cover a split or double down
        """
        pass


class DealerStrategy(Strategy):
    """Stands on 17 or more, soft 17 included, otherwise hits."""

    def next_move(self, hand: HandState, dealer_up_card: Card = None, bank: Decimal = None) -> Move:
        if hand.total_value() >= 17:
            return Move.STAND
        return Move.HIT


class BookStrategy(Strategy):
    """
    Basic strategy from fixed lookup tables.

    Tables map a hand to the dealer upcard values, an ace counting as 11, for
    which the move applies. The rules are tried in order and the first match
    wins, so a pair that should be split is split before doubling is considered.
    """

    # Hard totals only, a soft hand never surrenders.
    SURRENDER = {
        15: frozenset({10}),
        16: _between(9, 11),
    }

    SPLIT = {
        Card.ACE: ALWAYS,
        Card.EIGHT: ALWAYS,
        Card.SEVEN: _between(2, 7),
        Card.THREE: _between(2, 7),
        Card.TWO: _between(2, 7),
        Card.NINE: _between(2, 6) | {8, 9},
        Card.SIX: _between(2, 6),
        Card.FOUR: _between(5, 6),
    }

    SOFT_DOUBLE = {
        13: _between(5, 6),
        14: _between(5, 6),
        15: _between(4, 6),
        16: _between(4, 6),
        17: _between(3, 6),
        18: _between(3, 6),
    }

    HARD_DOUBLE = {
        9: _between(3, 6),
        10: _between(2, 9),
        11: _between(2, 10),
    }

    SOFT_STAND = {
        18: _between(2, 8),
        19: ALWAYS,
        20: ALWAYS,
    }

    HARD_STAND = {
        12: _between(4, 6),
        13: _between(2, 6),
        14: _between(2, 6),
        15: _between(2, 6),
        16: _between(2, 6),
        17: ALWAYS,
        18: ALWAYS,
        19: ALWAYS,
        20: ALWAYS,
        21: ALWAYS,
    }

    def next_move(self, hand: HandState, dealer_up_card: Card, bank: Decimal) -> Move:
        total = hand.total_value()
        soft = hand.is_soft
        dealer_value = dealer_up_card.max_value

        if hand.is_blackjack:
            return Move.STAND

        if hand.is_initial_hand and self.should_surrender(total, soft, dealer_value):
            return Move.SURRENDER

        if (
            hand.can_split
            and self._can_afford(hand, bank)
            and self.should_split(hand.split_card, dealer_value)
        ):
            return Move.SPLIT

        if (
            hand.is_initial_hand
            and self._can_afford(hand, bank)
            and self.should_double_down(total, soft, dealer_value)
        ):
            return Move.DOUBLE_DOWN

        if self.should_stand(total, soft, dealer_value):
            return Move.STAND

        return Move.HIT

    def should_surrender(self, total: int, soft: bool, dealer_value: int) -> bool:
        if soft:
            return False
        return dealer_value in self.SURRENDER.get(total, ())

    def should_split(self, split_card: Card, dealer_value: int) -> bool:
        return dealer_value in self.SPLIT.get(split_card, ())

    def should_double_down(self, total: int, soft: bool, dealer_value: int) -> bool:
        table = self.SOFT_DOUBLE if soft else self.HARD_DOUBLE
        return dealer_value in table.get(total, ())

    def should_stand(self, total: int, soft: bool, dealer_value: int) -> bool:
        table = self.SOFT_STAND if soft else self.HARD_STAND
        return dealer_value in table.get(total, ())

    @staticmethod
    def _can_afford(hand: HandState, bank: Decimal) -> bool:
        return bank >= hand.bet
