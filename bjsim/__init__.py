"""
bjsim: a Monte Carlo simulator measuring how long a blackjack bankroll lasts
under a fixed betting and playing strategy.
"""

__version__ = "0.1.0"
