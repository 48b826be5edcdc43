import numpy as np
from minmaxgd.errors import InvalidInputError
from minmaxgd.regression import GradientDescentRegressor

def generateLinearDataset(
    nSamples=100000,
    slope=100.0,
    intercept=0.0,
    perturbation='sine',
    ):
    """
    Generate samples along a line

    Keywords
    --------
    nSamples: int
        Number of samples, x takes the values 0, 1, ..., nSamples - 1
    slope: float
    intercept: float
    perturbation: str or None
        'sine' adds sin(x) to every target value, None gives an exact line

    Returns
    -------
    x: numpy.ndarray
    y: numpy.ndarray
    """

    if nSamples < 1:
        raise InvalidInputError(f'nSamples must be a positive integer (got {nSamples!r})')

    x = np.arange(nSamples, dtype=np.float64)
    y = slope * x + intercept
    if perturbation == 'sine':
        y = y + np.sin(x)
    elif perturbation is not None:
        raise InvalidInputError(f'Unknown perturbation {perturbation!r}')

    return x, y

def runDemo(
    nSamples=100000,
    iterations=1000,
    learningRate=0.7,
    verbose=True,
    ):
    """
    Fit a regressor to the sine-perturbed line y = 100x + sin(x)
    """

    x, y = generateLinearDataset(nSamples)
    regressor = GradientDescentRegressor(
        iterations=iterations,
        learningRate=learningRate,
        verbose=verbose
    )
    regressor.fit(x, y)
    slope, intercept = regressor.denormalizeParams()
    print(f'Final slope = {slope:.6f}')
    print(f'Final intercept = {intercept:.6f}')

    return regressor
