#!/usr/bin/env python3
"""Profile the bankroll simulation to identify performance bottlenecks."""

import cProfile
import io
import pstats
import random
from decimal import Decimal

from bjsim.blackjack.config import SimulationConfig, create_monte_carlo_simulator
from bjsim.blackjack.strategy import BookStrategy


def profile_games(num_games: int = 1000):
    """Profile a fixed-seed run of games."""
    config = SimulationConfig(
        num_decks=6,
        starting_bank=Decimal("100.00"),
        min_bet=Decimal("10.00"),
        player_strategy=BookStrategy(),
        trials=num_games,
        seed=1234,
    )
    simulator = create_monte_carlo_simulator(config, random.Random(config.seed))

    profiler = cProfile.Profile()
    profiler.enable()

    result = simulator.run(num_games)

    profiler.disable()

    print(f"Simulation Results = [{result}]\n")

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats("cumulative")
    ps.print_stats(50)  # Top 50 functions
    print(s.getvalue())

    # Also print by total time
    print("\n\n=== BY TOTAL TIME ===\n")
    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats("tottime")
    ps.print_stats(30)  # Top 30 functions
    print(s.getvalue())


if __name__ == "__main__":
    print("Profiling game execution...")
    profile_games()
