# yavml/errors.py


class IntegerDivisionByZero(ZeroDivisionError):
    """
    Raised when an integer vector is divided by a zero component or scalar.

    This is a programming error rather than a recoverable condition, so the
    package never catches it.
    """
    def __init__(self, message: str = "attempt to divide by zero"):
        super().__init__(message)
