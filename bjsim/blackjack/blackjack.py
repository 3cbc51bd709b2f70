"""
This module is used to run a Monte Carlo simulation of how long a blackjack
bankroll survives.

A simulation plays the configured number of independent games. Each game
starts the player with a fresh bank and plays rounds at the minimum bet until
the bank can no longer cover it. The median, mean and standard deviation of
the number of rounds each game lasted are printed at the end.

Command line arguments select the table and bankroll settings, for example
`--num_games 10000 --num_decks 6 --starting_bank 100.00 --min_bet 10.00`.
`--single_cpu` runs every game in this process instead of a process pool,
`--vis` draws a histogram of game lengths and `--profile` prints a cProfile
report of the run.
"""

import argparse
import cProfile
import io
import logging
import multiprocessing
import pstats
import random
import time
from decimal import Decimal
from typing import List, Optional

import matplotlib.pyplot as plt

from bjsim.blackjack.config import SimulationConfig, create_monte_carlo_simulator
from bjsim.blackjack.decision_logger import decision_logger
from bjsim.blackjack.stats import SimulationResult, SimulationStats
from bjsim.blackjack.strategy import BookStrategy, DealerStrategy

STRATEGIES = {
    "book": BookStrategy,
    "dealer": DealerStrategy,
}


def play_game_batch(config: SimulationConfig, num_games: int, batch_index: int = 0) -> SimulationStats:
    """
    Play a batch of games on a replica of its own, to be executed in a separate process.
    """
    seed = None if config.seed is None else config.seed + batch_index
    simulator = create_monte_carlo_simulator(config, random.Random(seed))
    return simulator.collect(num_games)


def split_batches(num_games: int, workers: int) -> List[int]:
    """Spread games as evenly as possible over the workers, dropping empty batches."""
    games_per_cpu, remainder = divmod(num_games, workers)
    batches = [games_per_cpu + (1 if i < remainder else 0) for i in range(workers)]
    return [batch for batch in batches if batch > 0]


def run_simulation(config: SimulationConfig, single_cpu: bool = False, workers: Optional[int] = None) -> SimulationStats:
    """Run every trial of the configured simulation and return the merged results."""
    config.validate()

    if single_cpu:
        return play_game_batch(config, config.trials)

    workers = workers or multiprocessing.cpu_count()
    game_batches = split_batches(config.trials, workers)

    with multiprocessing.Pool(len(game_batches)) as pool:
        batch_args = [
            (config, game_count, batch_index)
            for batch_index, game_count in enumerate(game_batches)
        ]
        batch_results = pool.starmap(play_game_batch, batch_args)

    results = SimulationStats()
    for batch_result in batch_results:
        results.merge(batch_result)
    return results


def plot_round_counts(round_counts: List[int], result: SimulationResult):
    """Draw a histogram of the number of rounds each game lasted."""
    fig, ax = plt.subplots()
    ax.hist(round_counts, bins="auto", color="b", alpha=0.7)
    ax.axvline(result.median, color="r", linestyle="--", label=f"median {result.median:g}")
    ax.axvline(result.mean, color="g", linestyle=":", label=f"mean {result.mean:.2f}")
    ax.set_title("Bankroll Survival")
    ax.set_xlabel("Rounds played before going broke")
    ax.set_ylabel("Games")
    ax.grid(True)
    ax.legend()
    plt.show()
    return fig


def create_config(args) -> SimulationConfig:
    """Create the SimulationConfig object based on the command line arguments."""
    return SimulationConfig(
        num_decks=args.num_decks,
        starting_bank=args.starting_bank,
        min_bet=args.min_bet,
        player_strategy=STRATEGIES[args.strat](),
        trials=args.num_games,
        seed=args.seed,
    ).validate()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate how many rounds a blackjack bankroll survives."
    )
    parser.add_argument(
        "--num_games", type=int, default=10_000, help="Number of games to simulate"
    )
    parser.add_argument(
        "--num_decks", type=int, default=6, help="Number of decks in the shoe"
    )
    parser.add_argument(
        "--starting_bank",
        type=Decimal,
        default=Decimal("100.00"),
        help="Bank the player starts every game with",
    )
    parser.add_argument(
        "--min_bet", type=Decimal, default=Decimal("10.00"), help="Minimum bet amount"
    )
    parser.add_argument(
        "--strat",
        type=str,
        choices=sorted(STRATEGIES),
        default="book",
        help="Pick the player strategy. 'book' for basic strategy, 'dealer' to play like the dealer",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible shuffles"
    )
    parser.add_argument(
        "--single_cpu",
        action="store_true",
        help="If provided, run the simulations on a single CPU instead of a process pool.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes (defaults to the CPU count)",
    )
    parser.add_argument(
        "--vis",
        action="store_true",
        help="Show a histogram of game lengths once the simulation ends.",
        default=False,
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run the simulation with profiling to analyze performance.",
        default=False,
    )
    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for decision and round logging",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """
    Main function to start the simulation.

    It parses the command line, runs the configured number of games and prints
    the statistics of the number of rounds each game lasted.
    """
    args = build_parser().parse_args(argv)
    decision_logger.set_level(getattr(logging, args.log_level))
    config = create_config(args)

    profiler = None
    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()

    start_time = time.time()
    # Profiling only sees this process, so keep the games in it.
    results = run_simulation(
        config, single_cpu=args.single_cpu or args.profile, workers=args.workers
    )
    duration = time.time() - start_time
    result = results.report()

    print(f"Simulation Results = [{result}]")
    print(f"Games simulated: {result.trials:,}")
    print(f"Shortest game: {result.min_rounds:,} rounds")
    print(f"Longest game: {result.max_rounds:,} rounds")
    lower, upper = result.confidence_interval
    print(f"95% confidence interval for the mean: [{lower:.2f}, {upper:.2f}]")
    for outcome, count in result.outcomes.items():
        print(f"{outcome.capitalize()}: {count:,}")
    print(f"\nDuration of simulation: {duration:.2f} seconds")
    if duration > 0:
        print(f"Games simulated per second: {result.trials / duration:,.2f}")

    if args.profile and profiler is not None:
        profiler.disable()
        s = io.StringIO()
        ps = pstats.Stats(profiler, stream=s).sort_stats("tottime")
        ps.print_stats(30)
        print(s.getvalue())

    if args.vis:
        plot_round_counts(results.round_counts, result)

    return result


if __name__ == "__main__":
    main()
