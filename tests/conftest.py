"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures and configuration for testing components.
"""

import random

import pytest

from bjsim.blackjack.decision_logger import decision_logger


# Reset the decision tallies before each test
@pytest.fixture(scope="function", autouse=True)
def reset_decision_logger():
    """Reset the global decision logger before and after each test."""
    decision_logger.reset()
    yield
    decision_logger.reset()


@pytest.fixture
def rng():
    """A seeded generator so shuffles are reproducible."""
    return random.Random(42)
