"""
Logging for blackjack decisions and round results.
Tracks every move chosen and the bankroll change of every round.
"""

import logging
import os
from collections import Counter
from decimal import Decimal
from typing import Any, Dict, Iterable

from bjsim.blackjack.action import Move
from bjsim.blackjack.hand_state import HandState
from bjsim.common.card import Card


class DecisionLogger:
    """Logs the decisions and round results of a simulation."""

    def __init__(self, log_level=logging.WARNING):
        self.logger = logging.getLogger("bjsim.decisions")
        # Check environment variable to silence logging in long simulations
        if os.environ.get("BJSIM_DISABLE_LOGGING", "").lower() in (
            "1",
            "true",
            "yes",
        ):
            self.logger.setLevel(logging.ERROR)
        else:
            self.logger.setLevel(log_level)

        # Add console handler if none exists
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        self.move_counts: Counter = Counter()
        self.rounds_logged = 0

    def set_level(self, level):
        """Set the logging level."""
        self.logger.setLevel(level)

    def log_move(
        self,
        actor_name: str,
        hand_index: int,
        hand: HandState,
        dealer_up_card: Card,
        move: Move,
    ):
        """Log a move with the hand it was chosen for."""
        self.move_counts[move] += 1
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                f"Decision for {actor_name} hand {hand_index}: {hand.hand} "
                f"(value={hand.total_value()}, soft={hand.is_soft}) "
                f"vs dealer {dealer_up_card}"
            )
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(f"{actor_name} move = [{move.value}]")

    def log_reshuffle(self, cards_remaining: int):
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(f"Reshuffling shoe with {cards_remaining} cards remaining")

    def log_round_start(self, round_num: int):
        """Log the start of a new round."""
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(f"=== Round {round_num} starting ===")

    def log_round_end(self, bank_delta: Decimal, outcomes: Iterable):
        """Log the end of a round with its outcomes and the net change to the bank."""
        self.rounds_logged += 1
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(
                f"Round ended with outcomes {[o.value for o in outcomes]}; "
                f"over the round the player's bank changed by [{bank_delta}]"
            )

    def get_decision_summary(self) -> Dict[str, Any]:
        """Get a summary of all decisions made."""
        return {
            "total_decisions": sum(self.move_counts.values()),
            "rounds": self.rounds_logged,
            "by_move": {move.value: count for move, count in self.move_counts.items()},
            "split_count": self.move_counts[Move.SPLIT],
            "surrender_count": self.move_counts[Move.SURRENDER],
        }

    def reset(self):
        self.move_counts.clear()
        self.rounds_logged = 0


# Global logger instance
decision_logger = DecisionLogger()
