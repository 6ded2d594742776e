"""Exceptions raised when a volume cannot be loaded into, or transformed by,
a :py:class:`cdf97.CDF97` instance.

Both concrete errors derive from :py:class:`ValueError` so code which
already guards against bad input in the usual NumPy way keeps working.

"""

__all__ = [
    'CDF97Error',
    'WrongDimsError',
    'InvalidParamError',
]

class CDF97Error(Exception):
    """Base class for all errors raised by this package."""

class WrongDimsError(CDF97Error, ValueError):
    """The number of samples does not match the product of the dimensions,
    or one of the dimensions is zero.

    """

class InvalidParamError(CDF97Error, ValueError):
    """The requested transform does not match the dimensionality of the
    loaded volume, or no volume has been loaded.

    """
