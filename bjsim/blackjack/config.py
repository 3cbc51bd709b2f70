"""
Configuration of a simulation and the wiring of one simulation replica.

Each call to `create_monte_carlo_simulator` builds a fully independent set of
collaborators (shoe, player, dealer and simulators), so replicas can run on
separate processes without sharing state.
"""

import random
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from bjsim.blackjack.actor import Dealer, Player
from bjsim.blackjack.rules import Rules
from bjsim.blackjack.simulation import GameSimulator, MonteCarloSimulator, RoundSimulator
from bjsim.blackjack.strategy import BookStrategy, DealerStrategy, Strategy
from bjsim.common.shoe import Shoe


@dataclass
class SimulationConfig:
    num_decks: int = 6
    starting_bank: Decimal = Decimal("100.00")
    min_bet: Decimal = Decimal("10.00")
    player_strategy: Strategy = field(default_factory=BookStrategy)
    trials: int = 10_000
    seed: Optional[int] = None
    reshuffle_threshold: int = 50

    def validate(self) -> "SimulationConfig":
        if self.num_decks < 1:
            raise ValueError("Number of decks must be at least 1")
        if self.starting_bank < 0:
            raise ValueError(f"Starting bank must be non-negative, got {self.starting_bank}")
        if self.min_bet <= 0:
            raise ValueError(f"Minimum bet must be positive, got {self.min_bet}")
        if self.trials < 1:
            raise ValueError("Number of trials must be at least 1")
        return self

    def rules(self) -> Rules:
        return Rules(
            num_decks=self.num_decks,
            min_bet=self.min_bet,
            reshuffle_threshold=self.reshuffle_threshold,
        )


def create_monte_carlo_simulator(
    config: SimulationConfig, rng: Optional[random.Random] = None
) -> MonteCarloSimulator:
    """Wire one independent simulation replica from the configuration."""
    config.validate()
    rules = config.rules()

    if rng is None:
        rng = random.Random(config.seed)

    shoe = Shoe(num_decks=rules.num_decks, rng=rng)
    player = Player(config.player_strategy, config.starting_bank)
    dealer = Dealer(DealerStrategy())
    game = GameSimulator(
        RoundSimulator(rules),
        player,
        dealer,
        shoe,
        rules.min_bet,
        reshuffle_threshold=rules.reshuffle_threshold,
    )
    return MonteCarloSimulator(game)
