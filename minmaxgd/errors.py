class InvalidInputError(ValueError):
    """
    Raised when a sample array or a hyperparameter violates the model's contract
    """

    pass

class EmptyInputError(InvalidInputError):
    """
    Raised when a zero-length sample array is passed
    """

    pass

class LengthMismatchError(InvalidInputError):
    """
    Raised when X and y do not have the same number of samples
    """

    pass
