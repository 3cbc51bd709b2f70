"""
This module provides the `Player` and `Dealer` classes for a game of Blackjack.

The `Player` class represents a player in the game. It keeps a bank that
persists across rounds and, while a round is open, the hands it is playing
together with a cursor on the hand currently being played. Moves always apply
to that active hand; the cursor moves on as soon as the hand is finished. A
player's strategy decides its moves, except that a freshly split hand always
takes its second card first.

The `Dealer` class represents the dealer in the game. It is a `Player` with no
bank and no wager that plays a single hand per round.

Exceptions:
    - `UninitializedRoundError`: Raised when a player is asked to act before a round has started.
    - `DoubleRoundStartError`: Raised when a round is started before the previous one was ended.

This module is part of the `bjsim` package.
"""

from decimal import Decimal
from typing import List, Optional, Tuple

from bjsim.blackjack.action import Move
from bjsim.blackjack.decision_logger import decision_logger
from bjsim.blackjack.hand import BlackjackHand
from bjsim.blackjack.hand_state import HandState, IllegalMoveError
from bjsim.blackjack.strategy import DealerStrategy, Strategy
from bjsim.common.actor import Actor
from bjsim.common.card import Card


class UninitializedRoundError(Exception):
    """Raised when a player is asked to act before a round has started."""

    pass


class DoubleRoundStartError(Exception):
    """Raised when a round is started while the previous round is still open."""

    pass


class _RoundState:
    """The hands a player holds during one round and which of them is being played."""

    def __init__(self, hand: HandState, dealer_up_card: Card):
        self.hands: List[HandState] = [hand]
        self.active_index = 0
        self.dealer_up_card = dealer_up_card

    @property
    def active_hand(self) -> HandState:
        if self.active_index >= len(self.hands):
            raise IllegalMoveError("Every hand in this round has already been played.")
        return self.hands[self.active_index]

    def add_split_hand(self, hand: HandState):
        self.hands.append(hand)

    def advance(self):
        """Move the cursor past finished hands."""
        while self.active_index < len(self.hands) and self.hands[self.active_index].finished:
            self.active_index += 1

    def has_unfinished_hands(self) -> bool:
        return any(not hand.finished for hand in self.hands)


class Player(Actor):
    """A player in a game of Blackjack."""

    def __init__(
        self,
        strategy: Strategy,
        initial_money: Decimal = Decimal("100.00"),
        name: str = "Player",
    ):
        """Creates a new player with the given strategy and starting bank."""
        super().__init__(name, initial_money)
        self.strategy = strategy
        self._round: Optional[_RoundState] = None

    def start_round(self, hand: BlackjackHand, bet: Decimal, dealer_up_card: Card):
        """
        Open a round with the dealt hand, debiting the bet from the bank.

        :raises DoubleRoundStartError: If the previous round was not ended
        """
        if self._round is not None:
            raise DoubleRoundStartError(
                f"{self.name} cannot start a new round without ending the previous round."
            )
        self._round = _RoundState(HandState(hand, bet), dealer_up_card)
        self.charge(bet)

    def end_round(self) -> Tuple[HandState, ...]:
        """Close the round, returning every hand played in it, splits in split order."""
        final_hands = tuple(self._current_round().hands)
        self._round = None
        return final_hands

    @property
    def round_started(self) -> bool:
        return self._round is not None

    @property
    def hands(self) -> Tuple[HandState, ...]:
        return tuple(self._current_round().hands)

    @property
    def active_hand_index(self) -> int:
        return self._current_round().active_index

    @property
    def active_hand(self) -> HandState:
        """Returns the hand being played."""
        return self._current_round().active_hand

    def next_move(self) -> Move:
        """Decides the next move for the active hand."""
        round_state = self._current_round()
        hand = round_state.active_hand

        # A split hand is always dealt its second card before anything else.
        if hand.just_split:
            move = Move.HIT
        else:
            move = self.strategy.next_move(hand, round_state.dealer_up_card, self.bank)

        decision_logger.log_move(
            self.name, round_state.active_index, hand, round_state.dealer_up_card, move
        )
        return move

    def hit(self, card: Card):
        """Player chooses to take another card."""
        self.active_hand.hit(card)
        self._advance()

    def stand(self):
        """Player chooses to stand."""
        self.active_hand.stand()
        self._advance()

    def double_down(self, card: Card):
        """Double the active hand's bet and take exactly one more card."""
        hand = self.active_hand
        bet = hand.bet
        hand.double_down(card)
        self.charge(bet)
        self._advance()

    def split(self):
        """Split the active hand, debiting the new hand's bet. The original hand stays active."""
        round_state = self._current_round()
        split_hand = round_state.active_hand.split()
        self.charge(split_hand.bet)
        round_state.add_split_hand(split_hand)

    def surrender(self):
        """Player chooses to surrender, getting half the bet back at payout."""
        self.active_hand.surrender()
        self._advance()

    def has_unfinished_hands(self) -> bool:
        """Check if any hand in the round is still being played."""
        return self._current_round().has_unfinished_hands()

    def reset(self):
        """Restore the starting bank and drop any open round."""
        self.bank = self.initial_money
        self._round = None

    def _advance(self):
        self._current_round().advance()

    def _current_round(self) -> _RoundState:
        if self._round is None:
            raise UninitializedRoundError(
                f"Round not started for {self.name}: start_round() must be called first."
            )
        return self._round


class Dealer(Player):
    """A dealer in a game of Blackjack."""

    def __init__(self, strategy: Optional[Strategy] = None, name: str = "Dealer"):
        super().__init__(strategy or DealerStrategy(), Decimal("0"), name)

    def start_round(self, hand: BlackjackHand, bet: Decimal = Decimal("0"), dealer_up_card: Card = None):
        """The dealer never wagers and is its own upcard."""
        super().start_round(hand, Decimal("0"), hand.face_up_card)

    @property
    def face_up_card(self) -> Card:
        """Returns the dealer's face-up card."""
        return self._current_round().hands[0].face_up_card

    def has_blackjack(self) -> bool:
        return self._current_round().hands[0].is_blackjack
