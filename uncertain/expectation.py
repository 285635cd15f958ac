"""Sample estimation of the expected value of an uncertain value."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

_SEED = 0xCAFEF00DD15EA5E5

STEP = 10
MAXS = 1000


def _new_rng() -> np.random.Generator:
    return np.random.Generator(np.random.PCG64(_SEED))


def mean_standard_deviation(diff_sum: float, steps: float) -> float:
    """Estimate ``sqrt(var(E(x)))`` from a Welford sum of squared differences."""
    return math.sqrt(diff_sum) / steps


class ConvergenceError(Exception):
    """Raised when the expected value did not reach the desired precision."""

    def __init__(self, *, sample_mean: float, diff_sum: float, steps: float, precision: float):
        self.sample_mean = sample_mean
        self.diff_sum = diff_sum
        self.steps = steps
        self.precision = precision
        super().__init__(
            f"Expected value {self.non_converged_value()} +/- {self.two_sigma_error()} "
            f"did not converge to desired precision {self.desired_precision()}"
        )

    def non_converged_value(self) -> float:
        """The estimate obtained, less precise than was asked for."""
        return self.sample_mean

    def two_sigma_error(self) -> float:
        """Two sigma confidence interval around the estimate, assuming iid samples."""
        std = mean_standard_deviation(self.diff_sum, self.steps)
        return std + std

    def desired_precision(self) -> float:
        """The precision that was asked for."""
        return self.precision


def compute(src: Any, precision: float) -> float:
    """Estimate the expectation of ``src`` to within ``precision``.

    Uses Welford's online algorithm, checking after every batch of ``STEP``
    samples whether the two sigma interval is within ``precision``.
    Raises :class:`ConvergenceError` after ``STEP * MAXS`` samples otherwise.
    """
    rng = _new_rng()

    sample_mean = 0.0
    diff_sum = 0.0
    steps = 0.0

    epoch = 0
    for _ in range(MAXS):
        for _ in range(STEP):
            sample = float(src.sample(rng, epoch))
            epoch += 1
            prev_mean = sample_mean
            steps += 1.0
            sample_mean = prev_mean + (sample - prev_mean) / steps
            diff_sum += (sample - prev_mean) * (sample - sample_mean)

        std = mean_standard_deviation(diff_sum, steps)
        if std + std <= precision:
            return sample_mean

    raise ConvergenceError(
        sample_mean=sample_mean,
        diff_sum=diff_sum,
        steps=steps,
        precision=precision,
    )