"""The uncertain value interface and the adapters built on top of it."""

from __future__ import annotations

import abc
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

import numpy as np

from . import expectation, sprt

T = TypeVar("T")
O = TypeVar("O")

Rng = np.random.Generator


class Uncertain(abc.ABC, Generic[T]):
    """A value that is only known through samples of its distribution.

    Computations on uncertain values are lazy: they build a network which is
    sampled only when a question is asked with :meth:`pr` or :meth:`expect`.
    """

    @abc.abstractmethod
    def sample(self, rng: Rng, epoch: int) -> T:
        """Draw one sample for the given epoch.

        Values meant to be reused within one computation must return the same
        sample when asked repeatedly for the same epoch; see :meth:`into_ref`.
        """

    def pr(self, probability: float) -> bool:
        """Decide whether ``True`` comes up with at least ``probability``.

        Uses Wald's sequential probability ratio test. Raises ``ValueError``
        unless ``0 < probability < 1``.
        """
        if probability <= 0.0 or probability >= 1.0:
            raise ValueError(f"Probability {probability!r} must be in (0, 1)")
        return sprt.compute(self, probability)

    def expect(self, precision: float) -> float:
        """Estimate the expected value to within ``precision``.

        Raises ``ValueError`` if ``precision <= 0`` and
        :class:`~uncertain.expectation.ConvergenceError` if the estimate does
        not converge.
        """
        if precision <= 0:
            raise ValueError("Precision must be larger than 0")
        return expectation.compute(self, precision)

    def into_boxed(self) -> "BoxedUncertain[T]":
        """Wrap this value in an opaque uncertain value."""
        return BoxedUncertain(self)

    def into_ref(self) -> "RefUncertain[T]":
        """Wrap this value with a per-epoch cache so it can be reused."""
        return RefUncertain(self)

    def map(self, func: Callable[[T], O]) -> "Map[O]":
        """Transform every sample with ``func``."""
        return Map(self, func)

    def flat_map(self, func: Callable[[T], "Uncertain[O]"]) -> "FlatMap[O]":
        """Sample an uncertain value chosen by ``func`` from each sample."""
        return FlatMap(self, func)

    def join(self, other: "Uncertain[Any]", func: Callable[[T, Any], O]) -> "Join[O]":
        """Combine samples of ``self`` and ``other`` with ``func``."""
        return Join(self, other, func)

    def not_(self) -> "Not":
        """Negate the boolean samples."""
        return Not(self)

    def and_(self, other: "Uncertain[Any]") -> "And":
        """Logical and; ``other`` is not sampled when ``self`` is false."""
        return And(self, other)

    def or_(self, other: "Uncertain[Any]") -> "Or":
        """Logical or; ``other`` is not sampled when ``self`` is true."""
        return Or(self, other)

    def add(self, other: "Uncertain[Any]") -> "Sum":
        """Sum of the two uncertain values."""
        return Sum(self, other)

    def sub(self, other: "Uncertain[Any]") -> "Difference":
        """Difference of the two uncertain values."""
        return Difference(self, other)

    def mul(self, other: "Uncertain[Any]") -> "Product":
        """Product of the two uncertain values."""
        return Product(self, other)

    def div(self, other: "Uncertain[Any]") -> "Ratio":
        """Ratio of the two uncertain values."""
        return Ratio(self, other)


class BoxedUncertain(Uncertain[T]):
    """An opaque uncertain value delegating to the one it wraps."""

    def __init__(self, contained: Uncertain[T]):
        self._contained = contained

    def sample(self, rng: Rng, epoch: int) -> T:
        return self._contained.sample(rng, epoch)


class RefUncertain(Uncertain[T]):
    """An uncertain value that returns one shared sample per epoch."""

    def __init__(self, contained: Uncertain[T]):
        self._contained = contained
        self._cache: Optional[Tuple[int, T]] = None

    def sample(self, rng: Rng, epoch: int) -> T:
        cache = self._cache
        if cache is not None and cache[0] == epoch:
            value = cache[1]
        else:
            value = self._contained.sample(rng, epoch)
        self._cache = (epoch, value)
        return value


class Map(Uncertain[O]):
    """Applies a function to every sample."""

    def __init__(self, uncertain: Uncertain[Any], func: Callable[[Any], O]):
        self._uncertain = uncertain
        self._func = func

    def sample(self, rng: Rng, epoch: int) -> O:
        return self._func(self._uncertain.sample(rng, epoch))


class FlatMap(Uncertain[O]):
    """Samples the uncertain value produced by a function of each sample."""

    def __init__(self, uncertain: Uncertain[Any], func: Callable[[Any], Uncertain[O]]):
        self._uncertain = uncertain
        self._func = func

    def sample(self, rng: Rng, epoch: int) -> O:
        value = self._uncertain.sample(rng, epoch)
        return self._func(value).sample(rng, epoch)


class Join(Uncertain[O]):
    """Combines samples of two uncertain values with a function."""

    def __init__(self, a: Uncertain[Any], b: Uncertain[Any], func: Callable[[Any, Any], O]):
        self._a = a
        self._b = b
        self._func = func

    def sample(self, rng: Rng, epoch: int) -> O:
        a = self._a.sample(rng, epoch)
        b = self._b.sample(rng, epoch)
        return self._func(a, b)


class Not(Uncertain[bool]):
    """Boolean negation of an uncertain value."""

    def __init__(self, uncertain: Uncertain[Any]):
        self._uncertain = uncertain

    def sample(self, rng: Rng, epoch: int) -> bool:
        return not bool(self._uncertain.sample(rng, epoch))


class _Binary(Uncertain[Any]):
    def __init__(self, a: Uncertain[Any], b: Uncertain[Any]):
        self._a = a
        self._b = b


class And(_Binary):
    """Short-circuiting logical and of two uncertain values."""

    def sample(self, rng: Rng, epoch: int) -> bool:
        return bool(self._a.sample(rng, epoch)) and bool(self._b.sample(rng, epoch))


class Or(_Binary):
    """Short-circuiting logical or of two uncertain values."""

    def sample(self, rng: Rng, epoch: int) -> bool:
        return bool(self._a.sample(rng, epoch)) or bool(self._b.sample(rng, epoch))


class Sum(_Binary):
    """Sum of two uncertain values."""

    def sample(self, rng: Rng, epoch: int) -> Any:
        return self._a.sample(rng, epoch) + self._b.sample(rng, epoch)


class Difference(_Binary):
    """Difference of two uncertain values."""

    def sample(self, rng: Rng, epoch: int) -> Any:
        return self._a.sample(rng, epoch) - self._b.sample(rng, epoch)


class Product(_Binary):
    """Product of two uncertain values."""

    def sample(self, rng: Rng, epoch: int) -> Any:
        return self._a.sample(rng, epoch) * self._b.sample(rng, epoch)


class Ratio(_Binary):
    """Ratio of two uncertain values."""

    def sample(self, rng: Rng, epoch: int) -> Any:
        return self._a.sample(rng, epoch) / self._b.sample(rng, epoch)