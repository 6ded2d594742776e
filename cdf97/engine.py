import logging

import numpy as np

from cdf97.common import ScratchBuffers
from cdf97.defaults import DEFAULT_POLICY, DEFAULT_WAVELET
from cdf97.errors import InvalidParamError, WrongDimsError
from cdf97.transform3d import Policy, Transform3d
from cdf97.utils import asfarray, num_of_xforms

def _as_dims(dims):
    dims = tuple(dims)
    if any(int(d) != d for d in dims):
        raise WrongDimsError('Dimensions must be whole numbers, got {0}'.format(dims))
    dims = tuple(int(d) for d in dims)
    if not 1 <= len(dims) <= 3:
        raise WrongDimsError('Expected 1 to 3 dimensions, got {0}'.format(len(dims)))
    dims = dims + (1,) * (3 - len(dims))
    if any(d <= 0 for d in dims):
        raise WrongDimsError('Dimensions must be positive, got {0}'.format(dims))
    return dims

class CDF97(object):
    """
    Holds one volume of samples and applies the CDF 9/7 wavelet transform
    to it in place.

    :param wavelet: lifting constants, see :py:class:`cdf97.Transform1d`.

    The volume is stored as a flat float64 buffer with dimensions (x, y, z),
    x varying fastest. Unused trailing dimensions are 1. A typical round
    trip looks like::

        engine = CDF97()
        engine.copy_data(samples, (nx, ny, nz))
        engine.dwt3d(Policy.DYADIC)
        coeffs = engine.release_data()

    Loading new data with :py:meth:`copy_data` or :py:meth:`take_data`
    discards the previous volume, so one instance can be reused for many
    volumes. The caller picks the transform matching the dimensionality of
    the data; the engine only checks that the choice is consistent.

    """
    def __init__(self, wavelet=DEFAULT_WAVELET):
        self._scratch = ScratchBuffers()
        self._xfm3d = Transform3d(wavelet, self._scratch)
        self._xfm2d = self._xfm3d.xfm2d
        self._xfm1d = self._xfm3d.xfm1d

        self._data = np.empty(0)
        self._dims = (0, 0, 0)

    @property
    def coeffs(self):
        """The :py:class:`cdf97.coeffs.LiftingCoefficients` in use."""
        return self._xfm1d.coeffs

    #
    # Input
    #

    def copy_data(self, buf, dims, length=None):
        """Load a copy of the first *length* samples of *buf*.

        :param buf: real numeric array-like; converted to float64
        :param dims: sequence of 1 to 3 dimensions (x, y, z)
        :param length: number of samples to use, default all of *buf*

        :raises WrongDimsError: if *length* does not equal the product of
            *dims*, *buf* is too short or a dimension is zero.
        :raises TypeError: if *buf* is not real and numeric.

        """
        dims = _as_dims(dims)
        buf = np.ravel(asfarray(buf))
        if length is None:
            length = buf.shape[0]
        if length != dims[0] * dims[1] * dims[2]:
            raise WrongDimsError('{0} samples do not fill a {1} volume'.format(
                length, 'x'.join(str(d) for d in dims)))
        if buf.shape[0] < length:
            raise WrongDimsError('Only {0} samples available, {1} requested'.format(
                buf.shape[0], length))

        self._load(np.array(buf[:length], dtype=np.float64), dims)

    def take_data(self, buf, dims):
        """Adopt *buf*, a float64 NumPy array, without copying it. The caller
        should not use *buf* afterwards. A read-only *buf*, such as the
        result of :py:meth:`view_data`, is copied instead.

        :raises WrongDimsError: as for :py:meth:`copy_data`.
        :raises TypeError: if *buf* is not a float64 :py:class:`numpy.ndarray`.

        """
        if not isinstance(buf, np.ndarray) or buf.dtype != np.float64:
            raise TypeError('take_data() requires a float64 ndarray')
        dims = _as_dims(dims)
        if buf.size != dims[0] * dims[1] * dims[2]:
            raise WrongDimsError('{0} samples do not fill a {1} volume'.format(
                buf.size, 'x'.join(str(d) for d in dims)))

        # Only copies if buf is not contiguous or not writeable.
        if not buf.flags.writeable:
            buf = buf.copy()
        self._load(np.ravel(buf), dims)

    def _load(self, data, dims):
        self._data = data
        self._dims = dims
        self._scratch.reserve(dims)
        logging.debug('Loaded {0} samples as a {1} volume'.format(
            data.shape[0], 'x'.join(str(d) for d in dims)))

    #
    # Output
    #

    def view_data(self):
        """Return a read-only view of the current buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def release_data(self):
        """Hand the buffer to the caller and leave the container empty."""
        data = self._data
        self._data = np.empty(0)
        self._dims = (0, 0, 0)
        return data

    def get_dims(self):
        """Return the dimensions (x, y, z) of the loaded volume. In the 2D
        case z is 1; (0, 0, 0) means nothing is loaded.

        """
        return self._dims

    #
    # Action items
    #

    def dwt1d(self):
        nlevels = self._levels_1d()
        self._xfm1d.forward(self._data, nlevels)

    def idwt1d(self):
        nlevels = self._levels_1d()
        self._xfm1d.inverse(self._data, nlevels)

    def dwt2d(self):
        nlevels = self._levels_2d()
        self._xfm2d.forward(self._plane(), nlevels)

    def idwt2d(self):
        nlevels = self._levels_2d()
        self._xfm2d.inverse(self._plane(), nlevels)

    def dwt3d(self, policy=DEFAULT_POLICY):
        """Decompose the loaded volume with the given :py:class:`Policy`."""
        policy = Policy(policy)
        self._xfm3d.forward(self._volume(), policy)

    def idwt3d(self, policy=DEFAULT_POLICY):
        """Reconstruct the loaded volume. *policy* must match the one given
        to :py:meth:`dwt3d`.

        """
        policy = Policy(policy)
        self._xfm3d.inverse(self._volume(), policy)

    def dwt3d_dyadic(self):
        self.dwt3d(Policy.DYADIC)

    def idwt3d_dyadic(self):
        self.idwt3d(Policy.DYADIC)

    def dwt3d_wavelet_packet(self):
        self.dwt3d(Policy.WAVELET_PACKET)

    def idwt3d_wavelet_packet(self):
        self.idwt3d(Policy.WAVELET_PACKET)

    #
    # Validation. Everything here runs before the buffer is touched.
    #

    def _check_loaded(self):
        if self._data.shape[0] == 0:
            raise InvalidParamError('No data has been loaded')

    def _levels_1d(self):
        self._check_loaded()
        x, y, z = self._dims
        if y != 1 or z != 1:
            raise InvalidParamError('1D transform requested on a {0}x{1}x{2} volume'.format(x, y, z))
        return self._levels_for(x, '1D')

    def _levels_2d(self):
        self._check_loaded()
        x, y, z = self._dims
        if z != 1:
            raise InvalidParamError('2D transform requested on a {0}x{1}x{2} volume'.format(x, y, z))
        return self._levels_for(min(x, y), '2D')

    def _levels_for(self, length, name):
        nlevels = num_of_xforms(length)
        if nlevels == 0:
            logging.warning('{0} transform skipped: an axis of {1} samples is too short'.format(
                name, length))
        else:
            logging.debug('{0} transform with {1} levels'.format(name, nlevels))
        return nlevels

    def _plane(self):
        x, y, _ = self._dims
        return self._data.reshape(y, x)

    def _volume(self):
        self._check_loaded()
        x, y, z = self._dims
        if z == 1:
            raise InvalidParamError('3D transform requested on a {0}x{1}x1 volume'.format(x, y))
        return self._data.reshape(z, y, x)

# vim:sw=4:sts=4:et
