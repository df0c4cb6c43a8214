"""
Custom exceptions for ``colorpipe``
"""


class ColorPipeError(Exception):
    """
    Base exception for all exceptions in colorpipe
    """
    pass


class InvalidArgument(ColorPipeError, ValueError):
    """
    Raised when a numeric precondition of an operation is violated
    (e.g. a negative luminosity factor)
    """
    pass


class ParseError(ColorPipeError, ValueError):
    """
    Raised when a color string cannot be parsed
    """
    def __init__(self, value, reason):
        self.value = value
        self.reason = reason
        super().__init__(self._generate_message())

    def _generate_message(self):
        return f'Cannot parse color {self.value!r}: {self.reason}'
