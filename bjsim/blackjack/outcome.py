"""
Resolution of a finished player hand against the dealer's final hand.

The checks in `get_outcome` run in a fixed priority order, first match wins:

1. Dealer blackjack: push against a player blackjack, otherwise a loss.
2. Player surrendered.
3. Player blackjack.
4. Player bust, a loss even if the dealer busts too.
5. Dealer bust.
6. Higher total wins, equal totals push.
"""

from enum import Enum

from bjsim.blackjack.hand_state import HandState


class HandOutcome(Enum):
    """Terminal classification of a player hand against the dealer."""

    WIN = "win"
    BLACKJACK_WIN = "blackjack"
    PUSH = "push"
    LOSS = "loss"
    SURRENDER = "surrender"


def get_outcome(player_hand: HandState, dealer_hand: HandState) -> HandOutcome:
    """Classify `player_hand` against the dealer's final hand."""
    if dealer_hand.is_blackjack:
        return HandOutcome.PUSH if player_hand.is_blackjack else HandOutcome.LOSS

    if player_hand.surrendered:
        return HandOutcome.SURRENDER

    if player_hand.is_blackjack:
        return HandOutcome.BLACKJACK_WIN

    if player_hand.is_bust:
        return HandOutcome.LOSS

    if dealer_hand.is_bust:
        return HandOutcome.WIN

    player_total = player_hand.total_value()
    dealer_total = dealer_hand.total_value()
    if player_total > dealer_total:
        return HandOutcome.WIN
    if player_total == dealer_total:
        return HandOutcome.PUSH
    return HandOutcome.LOSS
