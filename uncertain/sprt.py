"""Wald's sequential probability ratio test for boolean uncertain values."""

from __future__ import annotations

import math
from typing import Any

import numpy as np

_SEED = 0xCAFEF00DD15EA5E5

D0 = 0.999
D1 = 0.999

STEP = 10
MAXS = 1000


def _new_rng() -> np.random.Generator:
    return np.random.Generator(np.random.PCG64(_SEED))


def accept_likelihood(prob: float, val: bool) -> float:
    """Likelihood of observing ``val`` under the accepting hypothesis."""
    p = 0.5 * (1.0 + prob)
    return p if val else 1.0 - p


def reject_likelihood(prob: float, val: bool) -> float:
    """Likelihood of observing ``val`` under the rejecting hypothesis."""
    p = 0.5 * prob
    return p if val else 1.0 - p


def log_likelihood_ratio(prob: float, val: bool) -> float:
    """Log of the ratio between the rejecting and accepting likelihoods."""
    return math.log(reject_likelihood(prob, val)) - math.log(accept_likelihood(prob, val))


def compute(src: Any, prob: float) -> bool:
    """Test whether ``src`` yields ``True`` with probability at least ``prob``.

    ``src`` must provide ``sample(rng, epoch)``; samples are taken in batches
    of ``STEP`` until the likelihood ratio crosses a decision boundary or
    ``STEP * MAXS`` samples have been drawn.
    """
    rng = _new_rng()

    upper_ln = math.log(D1 / (1.0 - D1))
    lower_ln = math.log((1.0 - D0) / D0)
    ratio_ln = 0.0

    epoch = 0
    for _ in range(MAXS):
        for _ in range(STEP):
            val = bool(src.sample(rng, epoch))
            ratio_ln += log_likelihood_ratio(prob, val)
            epoch += 1
        if ratio_ln > upper_ln or ratio_ln < lower_ln:
            break

    return ratio_ln < lower_ln