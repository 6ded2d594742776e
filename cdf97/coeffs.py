import math
from collections import namedtuple

__all__ = [
    'CDF97_FILTER_BANK',
    'LiftingCoefficients',
    'from_filter_bank',
    'lifting',
]

LiftingCoefficients = namedtuple('LiftingCoefficients',
        ('alpha', 'beta', 'gamma', 'delta', 'epsilon', 'inv_epsilon'))
LiftingCoefficients.__doc__ = """The six constants which parameterise every
lifting step: the two predict/update pairs (*alpha*, *beta*) and (*gamma*,
*delta*), the band scale *epsilon* and its reciprocal *inv_epsilon*.

"""

# Filter bank coefficients from "Biorthogonal Bases of Compactly Supported
# Wavelets", Cohen, Daubechies and Feauveau, page 551.
CDF97_FILTER_BANK = (
    0.602949018236,
    0.266864118443,
    -0.078223266529,
    -0.016864118443,
    0.026748757411,
)

# Constants used by QccPack. These are slightly different from the ones
# factored out of the filter bank above.
_QCCPACK = (
    -1.58615986717275,
    -0.05297864003258,
    0.88293362717904,
    0.44350482244527,
    1.14960430535816,
)

COEFF_CACHE = {}

def from_filter_bank(h):
    """Factor five biorthogonal filter bank coefficients *h* into lifting
    steps following Daubechies and Sweldens, "Factoring Wavelet Transforms
    into Lifting Steps", page 19.

    :param h: a sequence of the five coefficients h[0] ... h[4]
    :returns: a :py:class:`LiftingCoefficients` instance

    """
    if len(h) != 5:
        raise ValueError('Filter bank must have 5 coefficients, not {0}'.format(len(h)))
    h0, h1, h2, h3, h4 = (float(v) for v in h)

    r0 = h0 - 2.0 * h4 * h1 / h3
    r1 = h2 - h4 - h4 * h1 / h3
    s0 = h1 - h3 - h3 * r0 / r1
    t0 = h0 - 2.0 * (h2 - h4)

    epsilon = math.sqrt(2.0) * t0
    return LiftingCoefficients(
        alpha=h4 / h3,
        beta=h3 / r1,
        gamma=r1 / s0,
        delta=s0 / t0,
        epsilon=epsilon,
        inv_epsilon=1.0 / epsilon,
    )

def _from_constants(alpha, beta, gamma, delta, epsilon):
    return LiftingCoefficients(alpha, beta, gamma, delta, epsilon, 1.0 / epsilon)

_LOADERS = {
    'cdf97': lambda: from_filter_bank(CDF97_FILTER_BANK),
    'qccpack': lambda: _from_constants(*_QCCPACK),
}

def lifting(name):
    """Load a set of CDF 9/7 lifting constants by name.

    :param name: a string specifying the coefficient set
    :returns: a :py:class:`LiftingCoefficients` instance

    ============ ==================================================
    Name         Coefficients
    ============ ==================================================
    cdf97        Factored from the Cohen-Daubechies-Feauveau filter
                 bank (the default).
    qccpack      The rounded constants used by QccPack.
    ============ ==================================================

    :raises TypeError: if *name* is not a string.
    :raises ValueError: if *name* does not correspond to a known set.

    """
    if not isinstance(name, str):
        raise TypeError('Coefficient set name must be a string')

    try:
        return COEFF_CACHE[name]
    except KeyError:
        pass

    try:
        loader = _LOADERS[name]
    except KeyError:
        raise ValueError('No such coefficient set: {0}'.format(name))

    coeffs = loader()
    COEFF_CACHE[name] = coeffs
    return coeffs

# vim:sw=4:sts=4:et
