__all__ = [
    '__version__',

    'CDF97',
    'Policy',

    'Transform1d',
    'Transform2d',
    'Transform3d',

    'lifting',
    'num_of_xforms',

    'CDF97Error',
    'WrongDimsError',
    'InvalidParamError',
]

from cdf97._version import __version__

from cdf97.coeffs import lifting
from cdf97.engine import CDF97
from cdf97.errors import CDF97Error, WrongDimsError, InvalidParamError
from cdf97.transform1d import Transform1d
from cdf97.transform2d import Transform2d
from cdf97.transform3d import Policy, Transform3d
from cdf97.utils import num_of_xforms
