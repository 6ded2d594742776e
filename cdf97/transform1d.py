import numpy as np

from cdf97.coeffs import lifting as _lifting, LiftingCoefficients
from cdf97.common import ScratchBuffers
from cdf97.defaults import DEFAULT_WAVELET
from cdf97.lowlevel import (
    gather, scatter,
    analysis_even_even, analysis_odd_even,
    synthesis_even_even, synthesis_odd_even,
)
from cdf97.utils import approx_detail_len

def _leading(X, axis, n):
    """Return a view of the first *n* entries of *X* along *axis*."""
    index = [slice(None)] * X.ndim
    index[axis] = slice(0, n)
    return X[tuple(index)]

class Transform1d(object):
    """
    An implementation of the 1D CDF 9/7 lifting transform via NumPy.
    *wavelet* is either the name of a coefficient set (see
    :py:func:`cdf97.coeffs.lifting`) or a :py:class:`LiftingCoefficients`
    compatible sequence of six constants.

    All methods work in place on a writable array. When *X* has more than one
    dimension every 1D signal along *axis* is transformed independently.

    """
    def __init__(self, wavelet=DEFAULT_WAVELET, scratch=None):
        try:
            self.coeffs = _lifting(wavelet)
        except TypeError:
            self.coeffs = LiftingCoefficients(*wavelet)

        self.scratch = scratch if scratch is not None else ScratchBuffers()

    def forward_one_level(self, X, axis=-1):
        """Apply one level of analysis along *axis* of *X*. Afterwards the
        low band occupies the leading ceil(L/2) entries along *axis* and the
        high band the trailing floor(L/2).

        """
        signal = np.moveaxis(X, axis, -1)
        buf = self.scratch.lifting_buffer(signal.shape)

        low, high = gather(signal, buf)
        if signal.shape[-1] % 2 == 0:
            analysis_even_even(low, high, self.coeffs)
        else:
            analysis_odd_even(low, high, self.coeffs)

        signal[...] = buf

    def inverse_one_level(self, X, axis=-1):
        """Undo :py:meth:`forward_one_level` along *axis* of *X*."""
        signal = np.moveaxis(X, axis, -1)
        buf = self.scratch.lifting_buffer(signal.shape)
        buf[...] = signal

        n_low = signal.shape[-1] - signal.shape[-1] // 2
        low, high = buf[..., :n_low], buf[..., n_low:]
        if signal.shape[-1] % 2 == 0:
            synthesis_even_even(low, high, self.coeffs)
        else:
            synthesis_odd_even(low, high, self.coeffs)

        scatter(buf, signal)

    def forward(self, X, nlevels, axis=-1):
        """Perform an *nlevels* decomposition along *axis* of *X*. Level
        *k* (1-indexed) transforms the approximation band left by level
        *k-1*, i.e. the leading ceil(L / 2^(k-1)) entries.

        :param X: writable array
        :param nlevels: number of levels of decomposition, see :py:func:`cdf97.utils.num_of_xforms`
        :param axis: the axis along which to transform

        """
        length = X.shape[axis]
        for level in range(nlevels):
            approx, _ = approx_detail_len(length, level)
            self.forward_one_level(_leading(X, axis, approx), axis)

    def inverse(self, X, nlevels, axis=-1):
        """Reconstruct *X* from an *nlevels* decomposition along *axis*,
        coarsest level first.

        """
        length = X.shape[axis]
        for level in reversed(range(nlevels)):
            approx, _ = approx_detail_len(length, level)
            self.inverse_one_level(_leading(X, axis, approx), axis)

# vim:sw=4:sts=4:et
