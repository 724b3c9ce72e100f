"""
Decision Velocity Estimators

Decision velocity is the time between an item first appearing and being
marked as a decision. Boards do not record that timestamp pair yet, so the
scorecard goes through an estimator interface and ships a placeholder.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional

from ..common.config import ScorecardConfig


class VelocityEstimator(ABC):
    """Estimates average decision velocity in days"""

    @abstractmethod
    def estimate(self, decisions_count: int) -> float:
        """
        Args:
            decisions_count: Number of decision events on the board(s)

        Returns:
            Average days from first mention to decision; 0 when there are no decisions
        """


class RandomVelocityEstimator(VelocityEstimator):
    """
    Placeholder estimator: a bounded pseudo-random value in [1, 4) days.

    This is an approximation, not a measurement.
    """

    LOW = 1.0
    HIGH = 4.0

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def estimate(self, decisions_count: int) -> float:
        if decisions_count <= 0:
            return 0.0
        return self.LOW + self._rng.random() * (self.HIGH - self.LOW)


class FixedVelocityEstimator(VelocityEstimator):
    """Deterministic stub returning the same value whenever decisions exist"""

    def __init__(self, days: float = 2.0):
        self._days = days

    def estimate(self, decisions_count: int) -> float:
        if decisions_count <= 0:
            return 0.0
        return self._days


def get_velocity_estimator(config: Optional[ScorecardConfig] = None) -> VelocityEstimator:
    """Build the estimator selected in configuration"""
    config = config or ScorecardConfig()
    if config.velocity_mode == "fixed":
        return FixedVelocityEstimator(days=config.fixed_velocity_days)
    return RandomVelocityEstimator()
