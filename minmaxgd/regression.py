import numpy as np
from numbers import Integral, Real
from sklearn.base import BaseEstimator, RegressorMixin
from minmaxgd.normalization import Range, normalize
from minmaxgd.errors import InvalidInputError, EmptyInputError, LengthMismatchError

def _initializeInterceptAsZero(xn, yn):
    return 0.0

def _initializeInterceptAsMeanOfX(xn, yn):
    return float(np.mean(xn))

def _initializeInterceptAsMeanOfY(xn, yn):
    return float(np.mean(yn))

interceptInitializers = {
    'zero': _initializeInterceptAsZero,
    'mean-of-x': _initializeInterceptAsMeanOfX,
    'mean-of-y': _initializeInterceptAsMeanOfY,
}

def _asSamples(a, name):
    """
    Coerce a 1-D or single-column 2-D array into a flat float array
    """

    a = np.asarray(a, dtype=np.float64)
    if a.ndim == 2 and a.shape[1] == 1:
        a = a.reshape(-1)
    if a.ndim != 1:
        raise InvalidInputError(f'{name} must be one-dimensional or a single column (got shape {a.shape})')

    return a

def _validateParams(iterations, learningRate, interceptInitialization):
    """
    """

    if isinstance(iterations, bool) or not isinstance(iterations, Integral) or iterations < 1:
        raise InvalidInputError(f'iterations must be a positive integer (got {iterations!r})')
    if isinstance(learningRate, bool) or not isinstance(learningRate, Real) or not learningRate > 0:
        raise InvalidInputError(f'learningRate must be a positive number (got {learningRate!r})')
    if interceptInitialization not in interceptInitializers:
        raise InvalidInputError(f'interceptInitialization must be one of {list(interceptInitializers)} (got {interceptInitialization!r})')

    return

def _validateSamples(X, y):
    """
    """

    X = _asSamples(X, 'X')
    y = _asSamples(y, 'y')
    if X.size == 0 or y.size == 0:
        raise EmptyInputError('X and y must contain at least one sample')
    if X.size != y.size:
        raise LengthMismatchError(f'X and y must have the same number of samples (got {X.size} and {y.size})')

    return X, y

class GradientDescentRegressor(RegressorMixin, BaseEstimator):
    """
    Univariate linear regression fit with batch gradient descent

    Both X and y are min-max normalized independently before fitting, and the
    slope and intercept are kept in normalized space. Use denormalizeParams to
    recover the parameters in the original units.

    Keywords
    --------
    iterations: int
        Number of gradient descent steps, always run to completion
    learningRate: float
        Step size applied to both gradients
    interceptInitialization: str
        Starting value for the intercept, one of 'mean-of-x' (the mean of the
        normalized X values), 'mean-of-y' or 'zero'
    verbose: bool
        Print the mean squared error after every iteration
    callback: callable or None
        Called as callback(iIteration, mse) once per iteration, after slope
        and intercept have been updated, with the mean squared error in the
        original units of X and y
    """

    def __init__(
        self,
        iterations,
        learningRate,
        interceptInitialization='mean-of-x',
        verbose=True,
        callback=None
        ):
        """
        """

        _validateParams(iterations, learningRate, interceptInitialization)

        self.iterations = iterations
        self.learningRate = learningRate
        self.interceptInitialization = interceptInitialization
        self.verbose = verbose
        self.callback = callback
        self.slope = 0.0
        self.intercept = 0.0
        self.xRange = Range(0.0, 0.0)
        self.yRange = Range(0.0, 0.0)
        self.performance = None

        return

    def fit(self, X, y):
        """
        """

        _validateParams(self.iterations, self.learningRate, self.interceptInitialization)
        X, y = _validateSamples(X, y)
        xn, xRange = normalize(X)
        yn, yRange = normalize(y)
        self.xRange, self.yRange = xRange, yRange
        n = xn.size
        self.slope = 0.0
        self.intercept = interceptInitializers[self.interceptInitialization](xn, yn)
        self.performance = np.full(self.iterations, np.nan)

        # Main loop
        for iIteration in range(self.iterations):

            # Gradient of the mean squared error in normalized space (overflow
            # from a diverging learning rate propagates as inf or NaN)
            with np.errstate(over='ignore', invalid='ignore'):
                error = self.slope * xn + self.intercept - yn
                slopeGradient = 2 / n * np.sum(xn * error)
                interceptGradient = 2 / n * np.sum(error)
                self.slope = float(self.slope - self.learningRate * slopeGradient)
                self.intercept = float(self.intercept - self.learningRate * interceptGradient)

            # Report performance in the original units
            mse = self.mse(X, y)
            self.performance[iIteration] = mse
            if self.callback is not None:
                self.callback(iIteration, mse)
            if self.verbose:
                end = '\r' if iIteration + 1 != self.iterations else '\n'
                print(f'Iteration {iIteration + 1} out of {self.iterations}: MSE={mse:.6f}', end=end)

        return self

    def denormalizeParams(self):
        """
        Map the normalized slope and intercept back into the original units

        Returns
        -------
        slope: float
        intercept: float
        """

        xMin, xSpan = self.xRange.min, np.float64(self.xRange.max - self.xRange.min)
        yMin, ySpan = self.yRange.min, np.float64(self.yRange.max - self.yRange.min)
        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            slope = self.slope * (ySpan / xSpan)
            intercept = self.intercept * ySpan + yMin - self.slope * xMin

        return float(slope), float(intercept)

    def mse(self, X, y):
        """
        Mean squared error of the denormalized model evaluated on raw X and y
        """

        X, y = _validateSamples(X, y)
        slope, intercept = self.denormalizeParams()
        with np.errstate(over='ignore', invalid='ignore'):
            residuals = slope * X + intercept - y
            mse = np.mean(np.power(residuals, 2))

        return float(mse)

    def predict(self, X):
        """
        """

        X = _asSamples(X, 'X')
        slope, intercept = self.denormalizeParams()

        return slope * X + intercept
