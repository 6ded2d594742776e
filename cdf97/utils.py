""" Useful utilities for sizing multi-level decompositions. """

__all__ = (
    'asfarray',
    'num_of_xforms',
    'num_of_partitions',
    'approx_detail_len',
)

import math

import numpy as np

from cdf97.defaults import MIN_XFORM_LENGTH, MAX_XFORM_LEVELS

def asfarray(X):
    """Similar to :py:func:`numpy.asfarray` except that this function only
    accepts real input and always yields a float64 array. A copy is only
    made when *X* is not already a float64 array.

    :raises TypeError: if *X* is complex or not numeric.

    """
    X = np.asanyarray(X)
    if np.iscomplexobj(X) or not np.issubdtype(X.dtype, np.number):
        raise TypeError('Expected real numeric input, got {0}'.format(X.dtype))
    return np.asarray(X, dtype=np.float64)

def num_of_xforms(length):
    """Return the number of levels of transform applied to an axis of
    *length* samples.

    Axes shorter than 8 samples are not transformed. Every doubling of the
    length past 8 adds one level until six levels are reached, which is
    the maximum for any input size.

    """
    if length < 0:
        raise ValueError('Axis length must be non-negative, not {0}'.format(length))
    if length < MIN_XFORM_LENGTH:
        return 0
    num = int(math.log2(length / float(MIN_XFORM_LENGTH))) + 1
    return min(num, MAX_XFORM_LEVELS)

def num_of_partitions(length):
    """Return how many times *length* can be split into (ceiling, floor)
    halves before the leading half has a single element.

    """
    num = 0
    while length > 1:
        num += 1
        length -= length // 2
    return num

def approx_detail_len(length, level):
    """Return the lengths of the approximation and detail bands of an axis
    of *length* samples after *level* levels of transform. The
    approximation band always takes the extra sample of an odd length.

    >>> approx_detail_len(15, 2)
    (4, 4)

    """
    low = length
    high = 0
    for _ in range(level):
        high = low // 2
        low -= high
    return low, high

# vim:sw=4:sts=4:et
