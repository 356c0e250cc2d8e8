"""Exceptions raised by the mclmath package."""


class DivideByZeroError(ZeroDivisionError):
    """Raised when a calculation would need a division by zero."""