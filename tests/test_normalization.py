"""
Tests for min-max normalization
"""

import numpy as np
import pytest

from minmaxgd.errors import EmptyInputError, InvalidInputError
from minmaxgd.normalization import Normalizer, Range, denormalize, normalize


@pytest.fixture
def values():
    return np.array([3.0, -2.0, 7.5, 0.0, 12.0, 4.25])


def test_normalize_spans_unit_interval(values):
    """Normalized values run from exactly 0 to exactly 1"""
    normalized, bounds = normalize(values)
    assert normalized.shape == values.shape
    assert normalized.min() == 0.0
    assert normalized.max() == 1.0
    assert bounds == Range(-2.0, 12.0)


def test_normalize_preserves_order(values):
    """Each output element corresponds to the input element at the same index"""
    normalized, bounds = normalize(values)
    expected = (values - bounds.min) / (bounds.max - bounds.min)
    np.testing.assert_allclose(normalized, expected)
    assert np.array_equal(np.argsort(normalized), np.argsort(values))


def test_normalize_accepts_lists():
    normalized, bounds = normalize([0, 5, 10])
    np.testing.assert_allclose(normalized, [0.0, 0.5, 1.0])
    assert bounds == Range(0.0, 10.0)


def test_renormalizing_is_identity(values):
    """A second normalization of already normalized values changes nothing"""
    once, _ = normalize(values)
    twice, bounds = normalize(once)
    np.testing.assert_array_equal(once, twice)
    assert bounds == Range(0.0, 1.0)


def test_constant_input_produces_nan():
    """Degenerate ranges are not guarded and yield NaN for every element"""
    normalized, bounds = normalize([4.0, 4.0, 4.0])
    assert bounds == Range(4.0, 4.0)
    assert normalized.shape == (3,)
    assert np.isnan(normalized).all()


def test_bounds_ignore_non_finite_values():
    normalized, bounds = normalize([1.0, np.nan, 3.0, np.inf])
    assert bounds == Range(1.0, 3.0)
    assert normalized[0] == 0.0
    assert np.isnan(normalized[1])
    assert normalized[2] == 1.0
    assert np.isinf(normalized[3])


def test_empty_input_raises():
    with pytest.raises(EmptyInputError):
        normalize([])


def test_no_finite_values_raises():
    with pytest.raises(InvalidInputError):
        normalize([np.nan, np.inf])


def test_denormalize_inverts_normalize(values):
    normalized, bounds = normalize(values)
    np.testing.assert_allclose(denormalize(normalized, bounds), values)


def test_normalizer_starts_with_empty_range():
    normalizer = Normalizer()
    assert normalizer.min == 0.0
    assert normalizer.max == 0.0


def test_normalizer_remembers_most_recent_range(values):
    """Each call overwrites the stored bounds"""
    normalizer = Normalizer()
    normalizer.normalize(values)
    assert (normalizer.min, normalizer.max) == (-2.0, 12.0)
    normalized = normalizer.normalize([10.0, 20.0, 15.0])
    np.testing.assert_allclose(normalized, [0.0, 1.0, 0.5])
    assert normalizer.range == Range(10.0, 20.0)


def test_normalizer_keeps_range_when_input_is_rejected(values):
    normalizer = Normalizer()
    normalizer.normalize(values)
    with pytest.raises(EmptyInputError):
        normalizer.normalize([])
    assert normalizer.range == Range(-2.0, 12.0)
