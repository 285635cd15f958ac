import pytest

from uncertain import expectation
from uncertain.expectation import ConvergenceError


class _Normal:
    def __init__(self, mean, std):
        self.mean = mean
        self.std = std

    def sample(self, rng, epoch):
        return rng.normal(self.mean, self.std)


class _Constant:
    def __init__(self, value):
        self.value = value
        self.epochs = []

    def sample(self, rng, epoch):
        self.epochs.append(epoch)
        return self.value


class _Counter:
    def sample(self, rng, epoch):
        return float(epoch)


@pytest.mark.parametrize("val", [0.0, 1.0, 5.0, 17.0, 23525.108213])
def test_simple_expectation(val):
    mu = expectation.compute(_Normal(val, 1.0), 0.1)
    assert abs(mu - val) < 0.1


def test_failed_expectation():
    x = _Normal(0.0, 1000.0)
    with pytest.raises(ConvergenceError) as info:
        expectation.compute(x, 0.1)
    assert info.value.two_sigma_error() > 0.1

    mu = expectation.compute(x, 100.0)
    assert abs(mu) < 100.0


@pytest.mark.parametrize("var", [1000.0, 5000.0, 10_000.0, 23452345.0, 23245.0])
def test_errors_are_correct(var):
    with pytest.raises(ConvergenceError) as info:
        expectation.compute(_Normal(0.0, var), 0.1)
    err = info.value

    have_err = err.two_sigma_error() / 2.0
    want_err = var / (expectation.STEP * expectation.MAXS) ** 0.5
    assert abs(have_err - want_err) / abs(want_err) < 0.03

    assert abs(err.non_converged_value()) < 1.5 * err.two_sigma_error()
    assert err.two_sigma_error() > err.desired_precision()


def test_constant_converges_exactly():
    src = _Constant(5.0)
    assert expectation.compute(src, 0.01) == 5.0
    assert src.epochs == list(range(expectation.STEP))


def test_counter_does_not_converge():
    with pytest.raises(ConvergenceError) as info:
        expectation.compute(_Counter(), 0.1)
    err = info.value
    assert err.desired_precision() == 0.1
    assert err.steps == expectation.STEP * expectation.MAXS
    assert err.two_sigma_error() > 0.1


def test_error_message_mentions_values():
    with pytest.raises(ConvergenceError) as info:
        expectation.compute(_Counter(), 0.1)
    err = info.value
    message = str(err)
    assert message.startswith("Expected value ")
    assert str(err.non_converged_value()) in message
    assert message.endswith("did not converge to desired precision 0.1")


def test_mean_standard_deviation():
    assert expectation.mean_standard_deviation(4.0, 2.0) == 1.0
    assert expectation.mean_standard_deviation(0.0, 10.0) == 0.0


def test_convergence_error_accessors():
    err = ConvergenceError(sample_mean=1.0, diff_sum=4.0, steps=2.0, precision=0.5)
    assert err.non_converged_value() == 1.0
    assert err.two_sigma_error() == 2 * expectation.mean_standard_deviation(4.0, 2.0)
    assert err.desired_precision() == 0.5
    assert isinstance(err, Exception) and err.args[0] == str(err)