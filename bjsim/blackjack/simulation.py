"""
Simulation of blackjack at three scales.

- `RoundSimulator` plays a single round: deal, play every player hand, play
  the dealer, then settle each player hand.
- `GameSimulator` plays rounds until the player can no longer cover the
  minimum bet and reports how many rounds were played.
- `MonteCarloSimulator` plays many independent games and summarises the
  number of rounds each one lasted.
"""

import logging
from collections import Counter
from decimal import Decimal
from typing import Callable, List

from bjsim.blackjack.action import Move
from bjsim.blackjack.actor import Dealer, Player
from bjsim.blackjack.decision_logger import decision_logger
from bjsim.blackjack.hand import BlackjackHand
from bjsim.blackjack.hand_state import HandState
from bjsim.blackjack.outcome import HandOutcome, get_outcome
from bjsim.blackjack.rules import Rules
from bjsim.blackjack.stats import SimulationResult, SimulationStats
from bjsim.common.shoe import Shoe

logger = logging.getLogger(__name__)

Evaluator = Callable[[HandState, HandState], HandOutcome]


class RoundSimulator:
    """Plays one full round of blackjack between a player and the dealer."""

    def __init__(self, rules: Rules, evaluator: Evaluator = get_outcome):
        self.rules = rules
        self.evaluator = evaluator

    def play_round(
        self, player: Player, dealer: Dealer, shoe: Shoe, bet: Decimal
    ) -> List[HandOutcome]:
        """
        Play a round and pay out the player's hands.

        :return: The outcome of each player hand, splits in split order
        """
        bank_at_start = player.bank
        self._deal(player, dealer, shoe, bet)

        # Dealer blackjack ends the round before anyone plays.
        if not dealer.has_blackjack():
            self._play_hands(player, shoe)
            self._play_hands(dealer, shoe)

        outcomes = self._settle(player, dealer)
        decision_logger.log_round_end(player.bank - bank_at_start, outcomes)
        return outcomes

    def _deal(self, player: Player, dealer: Dealer, shoe: Shoe, bet: Decimal):
        dealer.start_round(self._initial_hand(shoe))
        player.start_round(self._initial_hand(shoe), bet, dealer.face_up_card)

    @staticmethod
    def _initial_hand(shoe: Shoe) -> BlackjackHand:
        return BlackjackHand([shoe.deal(), shoe.deal()])

    @staticmethod
    def _play_hands(actor: Player, shoe: Shoe):
        while actor.has_unfinished_hands():
            move = actor.next_move()

            if move is Move.HIT:
                actor.hit(shoe.deal())
            elif move is Move.STAND:
                actor.stand()
            elif move is Move.DOUBLE_DOWN:
                actor.double_down(shoe.deal())
            elif move is Move.SPLIT:
                actor.split()
            elif move is Move.SURRENDER:
                actor.surrender()
            else:
                raise ValueError(f"Unknown move: {move}")

    def _settle(self, player: Player, dealer: Dealer) -> List[HandOutcome]:
        player_hands = player.end_round()
        dealer_hand = dealer.end_round()[0]

        outcomes = []
        for hand in player_hands:
            outcome = self.evaluator(hand, dealer_hand)
            player.pay(self.rules.payout(outcome, hand.bet))
            outcomes.append(outcome)
        return outcomes


class GameSimulator:
    """Plays rounds until the player's bank no longer covers the minimum bet."""

    def __init__(
        self,
        round_simulator: RoundSimulator,
        player: Player,
        dealer: Dealer,
        shoe: Shoe,
        min_bet: Decimal,
        reshuffle_threshold: int = 50,
    ):
        self.round_simulator = round_simulator
        self.player = player
        self.dealer = dealer
        self.shoe = shoe
        self.min_bet = min_bet
        self.reshuffle_threshold = reshuffle_threshold
        self.outcomes: Counter = Counter()

    def play_game(self) -> int:
        """
        Play one bankroll lifetime.

        Player and dealer are reset afterwards so the simulator can be reused.

        :return: The number of rounds played
        """
        self.outcomes = Counter()
        rounds_played = 0

        while self.player.can_afford(self.min_bet):
            if self.shoe.cards_remaining < self.reshuffle_threshold:
                decision_logger.log_reshuffle(self.shoe.cards_remaining)
                self.shoe.shuffle()

            decision_logger.log_round_start(rounds_played + 1)
            outcomes = self.round_simulator.play_round(
                self.player, self.dealer, self.shoe, self.min_bet
            )
            if outcomes:
                self.outcomes.update(outcomes)
            rounds_played += 1

        self.player.reset()
        self.dealer.reset()
        return rounds_played


class MonteCarloSimulator:
    """Plays many independent games and summarises how long each one lasted."""

    def __init__(self, game: GameSimulator):
        self.game = game

    def collect(self, number_of_runs: int) -> SimulationStats:
        """Play `number_of_runs` games, returning the raw per-game results."""
        results = SimulationStats()
        for run in range(number_of_runs):
            rounds = self.game.play_game()
            results.update(rounds, self.game.outcomes)
            logger.debug("Game %d lasted %d rounds", run + 1, rounds)
        return results

    def run(self, number_of_runs: int) -> SimulationResult:
        """Play `number_of_runs` games and return the median, mean and standard deviation of their lengths."""
        if number_of_runs < 1:
            raise ValueError("Number of runs must be at least 1")
        return self.collect(number_of_runs).report()
