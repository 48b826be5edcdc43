import numpy as np
from collections import namedtuple
from minmaxgd.errors import InvalidInputError, EmptyInputError

# Bounds retained from a single min-max normalization
Range = namedtuple('Range', ['min', 'max'])

def normalize(values):
    """
    Map values into [0, 1] using the bounds of their finite entries

    Keywords
    --------
    values: array-like
        One-dimensional sequence of real numbers

    Returns
    -------
    normalized: numpy.ndarray
        Mapped values, same length and order as the input
    bounds: Range
        Minimum and maximum finite value of the input

    Notes
    -----
    Constant input (max == min) is not guarded against and produces NaN for
    every element.
    """

    values = np.asarray(values, dtype=np.float64).reshape(-1)
    if values.size == 0:
        raise EmptyInputError('Cannot normalize an empty sequence')
    finite = values[np.isfinite(values)]
    if finite.size == 0:
        raise InvalidInputError('Cannot normalize a sequence without any finite values')

    bounds = Range(float(finite.min()), float(finite.max()))
    with np.errstate(divide='ignore', invalid='ignore'):
        normalized = (values - bounds.min) / np.float64(bounds.max - bounds.min)

    return normalized, bounds

def denormalize(values, bounds):
    """
    Map normalized values back into the units described by bounds
    """

    values = np.asarray(values, dtype=np.float64)

    return values * (bounds.max - bounds.min) + bounds.min

class Normalizer():
    """
    Remembers the range of the most recent sequence it normalized
    """

    def __init__(self):
        """
        """

        self.range = Range(0.0, 0.0)

        return

    @property
    def min(self):
        return self.range.min

    @property
    def max(self):
        return self.range.max

    def normalize(self, values):
        """
        """

        normalized, self.range = normalize(values)

        return normalized
