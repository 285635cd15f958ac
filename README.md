# uncertain

Computation with uncertain values.

Values such as sensor readings or estimates are rarely known exactly.
`uncertain` lets you compute with them much as with ordinary numbers, and
then ask yes/no questions about the result with a known level of
confidence.

It is a library only: there is no command-line tool.

## Installing

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

The only runtime dependency is `numpy`.

## Modules

* `uncertain.base` – the abstract class `Uncertain` and the values built
  by combining others (`Map`, `FlatMap`, `Join`, `Not`, `And`, `Or`,
  `Sum`, `Difference`, `Product`, `Ratio`, `RefUncertain`,
  `BoxedUncertain`). `Rng` is an alias of `numpy.random.Generator`.
* `uncertain.distributions` – `Distribution` and `PointMass`, the sources
  of uncertain values.
* `uncertain.sprt` – the sequential probability ratio test behind `pr`.
* `uncertain.expectation` – the expected-value estimate behind `expect`,
  and `ConvergenceError`.

The package's `__init__` exports nothing; import from these modules.

## How it works

Combining uncertain values does not compute anything right away. It
builds a network describing the computation, which is sampled only when a
question is asked:

* `pr(probability)` tests the hypothesis "this value is true with
  probability at least `probability`" using Wald's sequential probability
  ratio test. Samples are drawn in batches of 10 until a decision is
  reached or 10,000 samples have been drawn. Each sample is converted
  with `bool()`. `probability` must lie strictly between 0 and 1,
  otherwise `ValueError` is raised.
* `expect(precision)` estimates the expected value of a numeric value
  (each sample is converted with `float()`). It returns as soon as, after
  a batch of 10 samples, twice the estimated standard deviation of the
  mean is no larger than `precision`. If that has not happened after
  10,000 samples, `uncertain.expectation.ConvergenceError` is raised; it
  carries the estimate (`non_converged_value()`), its two-sigma error
  (`two_sigma_error()`) and the precision asked for
  (`desired_precision()`). `precision` must be positive, otherwise
  `ValueError` is raised.

Every query creates a fresh `numpy.random.Generator` from a fixed seed, so
the same question about the same value always gets the same answer.

## Sources

```python
from uncertain.distributions import Distribution, PointMass

x = Distribution(lambda rng: rng.normal(5.0, 2.0))
coin = Distribution(lambda rng: rng.random() < 0.8)
five = PointMass(5.0)
```

`Distribution` takes a callable that receives a `numpy.random.Generator`
and returns one draw; each `sample` call makes a fresh draw. `PointMass`
always yields the value it was given.

## Combining values

| method | result |
| --- | --- |
| `map(func)` | `func` applied to each sample |
| `flat_map(func)` | `func(sample)` returns an uncertain value, which is then sampled |
| `join(other, func)` | `func(a, b)` on samples of both values |
| `add`, `sub`, `mul`, `div` | `+`, `-`, `*`, `/` on samples of both values |
| `not_()` | `not` of each sample |
| `and_(other)`, `or_(other)` | logical and/or; `other` is not sampled when the first value decides the result |
| `into_ref()` | a value that gives one shared sample per epoch |
| `into_boxed()` | an opaque wrapper around the value |
| `pr(probability)` | hypothesis test on a boolean value |
| `expect(precision)` | expected value of a numeric value |

## Example

```python
from uncertain.distributions import Distribution, PointMass

x = Distribution(lambda rng: rng.normal(5.0, 2.0))
y = Distribution(lambda rng: rng.normal(7.0, 3.0))

distance = x.sub(y).map(abs)
is_it_far = distance.map(lambda d: d > 2.0)

is_it_far.pr(0.5)   # True
is_it_far.pr(0.9)   # False

assert PointMass(5).add(PointMass(9)).map(lambda s: s == 14).pr(0.99999)
assert PointMass(False).not_().pr(0.99999)
assert PointMass(5.0).expect(0.01) == 5.0
```

## Reusing a value

Within one evaluation every use of a value must see the same sample,
otherwise `x - x` would not be zero. A `Distribution` draws afresh on
every call, so wrap it with `into_ref()` before using it more than once:

```python
from uncertain.distributions import Distribution

x = Distribution(lambda rng: rng.binomial(100, 0.5)).into_ref()
assert x.sub(x).map(lambda d: d == 0).pr(0.9999)
```

## Writing your own source

Subclass `uncertain.base.Uncertain` and implement `sample(rng, epoch)`.
`rng` is the query's `numpy.random.Generator`; `epoch` numbers the
samples of one query, starting at 0. A value that may be reused within
one computation must return the same sample for the same epoch.

```python
from uncertain.base import Uncertain

class Die(Uncertain):
    def sample(self, rng, epoch):
        return int(rng.integers(1, 7))

Die().expect(0.1)   # close to 3.5
```

## Reference

The approach follows the paper *Uncertain&lt;T&gt;: A First-Order Type for
Uncertain Data* (ASPLOS 2014).