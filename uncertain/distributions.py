"""Uncertain values backed by random distributions and fixed values."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from .base import Rng, Uncertain

T = TypeVar("T")


class Distribution(Uncertain[T], Generic[T]):
    """An uncertain value drawn from a random distribution.

    ``sampler`` is called with a :class:`numpy.random.Generator` and returns
    one independent draw, for example ``lambda rng: rng.normal(5.0, 2.0)``.
    Every call to :meth:`sample` produces a fresh draw; wrap the value with
    :meth:`~uncertain.base.Uncertain.into_ref` to reuse it within one
    computation.
    """

    def __init__(self, sampler: Callable[[Rng], T]):
        if not callable(sampler):
            raise TypeError(f"sampler must be callable, got {type(sampler).__name__}")
        self._sampler = sampler

    def sample(self, rng: Rng, epoch: int) -> T:
        return self._sampler(rng)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._sampler!r})"


class PointMass(Uncertain[T], Generic[T]):
    """An uncertain value which always yields the same value."""

    def __init__(self, value: T):
        self.value = value

    def sample(self, rng: Rng, epoch: int) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"