"""
Single-level CDF 9/7 lifting on deinterleaved signals.

The four lifting routines follow the symmetric boundary handling of the
QccPack routines ``QccWAVCDF97{Analysis,Synthesis}Symmetric{EvenEven,OddEven}``
by James Fowler. Each routine takes the low (even-indexed) and high
(odd-indexed) samples of a signal as two separate arrays and works along
their last axis, so a stack of rows can be transformed with one call. The
arithmetic of every sample, including the order in which terms are
combined, matches the reference routines so results agree to the bit.

Writing *s* for the low samples and *d* for the high samples, the analysis
applies::

    d[k] += alpha * (s[k] + s[k+1])
    s[k] += beta * (d[k] + d[k-1])
    d[k] += gamma * (s[k] + s[k+1])
    s[k] = epsilon * (s[k] + delta * (d[k] + d[k-1]))
    d[k] *= -inv_epsilon

with whole-sample symmetric extension at the signal ends, where a missing
neighbour is replaced by doubling the one which is present.

"""

__all__ = [
    'gather',
    'scatter',
    'analysis_even_even',
    'analysis_odd_even',
    'synthesis_even_even',
    'synthesis_odd_even',
]

def _check_lengths(low, high, odd):
    n_low, n_high = low.shape[-1], high.shape[-1]
    if n_high < 1:
        raise ValueError('Signals must have at least 2 samples')
    if n_low != n_high + (1 if odd else 0):
        raise ValueError('Low band of {0} and high band of {1} samples do not '
                         'come from an {2} length signal'.format(
                             n_low, n_high, 'odd' if odd else 'even'))

def gather(X, out):
    """Copy the even-indexed samples of *X* to the front of *out* and the
    odd-indexed samples to the back, along the last axis. An odd length
    signal puts one extra sample in the front.

    :param X: input array
    :param out: array with the same shape as *X* which receives the result
    :returns: a (low, high) pair of views into *out*

    """
    n_low = X.shape[-1] - X.shape[-1] // 2
    out[..., :n_low] = X[..., 0::2]
    out[..., n_low:] = X[..., 1::2]
    return out[..., :n_low], out[..., n_low:]

def scatter(X, out):
    """The inverse of :py:func:`gather`: interleave the front and back
    partitions of *X* into the even and odd positions of *out*.

    """
    n_low = X.shape[-1] - X.shape[-1] // 2
    out[..., 0::2] = X[..., :n_low]
    out[..., 1::2] = X[..., n_low:]
    return out

def analysis_even_even(low, high, coeffs):
    """Forward lifting of an even length signal, in place. *low* and *high*
    must have the same length.

    """
    _check_lengths(low, high, odd=False)
    alpha, beta, gamma, delta, epsilon, inv_epsilon = coeffs

    high[..., :-1] += alpha * (low[..., :-1] + low[..., 1:])
    high[..., -1] += 2.0 * alpha * low[..., -1]

    low[..., 0] += 2.0 * beta * high[..., 0]
    low[..., 1:] += beta * (high[..., 1:] + high[..., :-1])

    high[..., :-1] += gamma * (low[..., :-1] + low[..., 1:])
    high[..., -1] += 2.0 * gamma * low[..., -1]

    low[..., 0] = epsilon * (low[..., 0] + 2.0 * delta * high[..., 0])
    low[..., 1:] = epsilon * (low[..., 1:] + delta * (high[..., 1:] + high[..., :-1]))

    high *= -inv_epsilon

def synthesis_even_even(low, high, coeffs):
    """Inverse of :py:func:`analysis_even_even`, in place."""
    _check_lengths(low, high, odd=False)
    alpha, beta, gamma, delta, epsilon, inv_epsilon = coeffs

    high *= -epsilon

    low[..., 0] = low[..., 0] * inv_epsilon - 2.0 * delta * high[..., 0]
    low[..., 1:] = low[..., 1:] * inv_epsilon - delta * (high[..., 1:] + high[..., :-1])

    high[..., :-1] -= gamma * (low[..., :-1] + low[..., 1:])
    high[..., -1] -= 2.0 * gamma * low[..., -1]

    low[..., 0] -= 2.0 * beta * high[..., 0]
    low[..., 1:] -= beta * (high[..., 1:] + high[..., :-1])

    high[..., :-1] -= alpha * (low[..., :-1] + low[..., 1:])
    high[..., -1] -= 2.0 * alpha * low[..., -1]

def analysis_odd_even(low, high, coeffs):
    """Forward lifting of an odd length signal, in place. *low* must have
    one more sample than *high*. Both ends of the signal are low samples so
    every high sample has two neighbours and only the low band needs
    boundary terms.

    """
    _check_lengths(low, high, odd=True)
    alpha, beta, gamma, delta, epsilon, inv_epsilon = coeffs

    high += alpha * (low[..., :-1] + low[..., 1:])

    low[..., 0] += 2.0 * beta * high[..., 0]
    low[..., 1:-1] += beta * (high[..., 1:] + high[..., :-1])
    low[..., -1] += 2.0 * beta * high[..., -1]

    high += gamma * (low[..., :-1] + low[..., 1:])

    low[..., 0] = epsilon * (low[..., 0] + 2.0 * delta * high[..., 0])
    low[..., 1:-1] = epsilon * (low[..., 1:-1] + delta * (high[..., 1:] + high[..., :-1]))
    low[..., -1] = epsilon * (low[..., -1] + 2.0 * delta * high[..., -1])

    high *= -inv_epsilon

def synthesis_odd_even(low, high, coeffs):
    """Inverse of :py:func:`analysis_odd_even`, in place."""
    _check_lengths(low, high, odd=True)
    alpha, beta, gamma, delta, epsilon, inv_epsilon = coeffs

    high *= -epsilon

    low[..., 0] = low[..., 0] * inv_epsilon - 2.0 * delta * high[..., 0]
    low[..., 1:-1] = low[..., 1:-1] * inv_epsilon - delta * (high[..., 1:] + high[..., :-1])
    low[..., -1] = low[..., -1] * inv_epsilon - 2.0 * delta * high[..., -1]

    high -= gamma * (low[..., :-1] + low[..., 1:])

    low[..., 0] -= 2.0 * beta * high[..., 0]
    low[..., 1:-1] -= beta * (high[..., 1:] + high[..., :-1])
    low[..., -1] -= 2.0 * beta * high[..., -1]

    high -= alpha * (low[..., :-1] + low[..., 1:])

# vim:sw=4:sts=4:et
