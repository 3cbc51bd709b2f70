"""
This module contains the SimulationStats class which is responsible for
collecting the results of simulated games and reducing them to summary
statistics.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
import scipy.stats as stats

from bjsim.blackjack.outcome import HandOutcome

CONFIDENCE = 0.95


@dataclass(frozen=True)
class SimulationResult:
    """Summary of the number of rounds a bankroll survived across many games."""

    median: float
    mean: float
    standard_deviation: float
    trials: int = 0
    min_rounds: int = 0
    max_rounds: int = 0
    confidence_interval: Tuple[float, float] = (0.0, 0.0)
    outcomes: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "median": self.median,
            "mean": self.mean,
            "standard_deviation": self.standard_deviation,
            "trials": self.trials,
            "min_rounds": self.min_rounds,
            "max_rounds": self.max_rounds,
            "confidence_interval": list(self.confidence_interval),
            "outcomes": dict(self.outcomes),
        }

    def __str__(self) -> str:
        return (
            f"median={self.median}, mean={self.mean}, "
            f"standardDeviation={self.standard_deviation}"
        )


class SimulationStats:
    """
    A class that holds the per-game results of a simulation.
    """

    def __init__(self, round_counts: Optional[Iterable[int]] = None):
        self.round_counts: List[int] = list(round_counts or [])
        self.outcomes: Counter = Counter()

    def update(self, rounds_played: int, outcomes: Optional[Counter] = None):
        """Record one finished game."""
        self.round_counts.append(rounds_played)
        if outcomes:
            self.outcomes.update(outcomes)

    def merge(self, other: "SimulationStats") -> "SimulationStats":
        """Fold the games of another, independent run into this one."""
        self.round_counts.extend(other.round_counts)
        self.outcomes.update(other.outcomes)
        return self

    @property
    def games_played(self) -> int:
        return len(self.round_counts)

    def report(self) -> SimulationResult:
        """
        Reduce the collected round counts to a SimulationResult.

        :raises ValueError: If no game has been recorded
        """
        if not self.round_counts:
            raise ValueError("Cannot report statistics for a simulation with no games.")

        counts = np.asarray(self.round_counts, dtype=float)
        n = counts.size
        mean = float(np.mean(counts))
        std = float(np.std(counts, ddof=1)) if n > 1 else 0.0

        if std > 0:
            sem = std / np.sqrt(n)
            lower, upper = stats.t.interval(CONFIDENCE, n - 1, loc=mean, scale=sem)
            interval = (float(lower), float(upper))
        else:
            interval = (mean, mean)

        return SimulationResult(
            median=float(np.median(counts)),
            mean=mean,
            standard_deviation=std,
            trials=n,
            min_rounds=int(counts.min()),
            max_rounds=int(counts.max()),
            confidence_interval=interval,
            outcomes={
                outcome.value: self.outcomes[outcome]
                for outcome in HandOutcome
                if self.outcomes[outcome]
            },
        )
