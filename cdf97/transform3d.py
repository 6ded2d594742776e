import enum
import logging

from cdf97.defaults import DEFAULT_POLICY, DEFAULT_WAVELET
from cdf97.transform2d import Transform2d
from cdf97.utils import approx_detail_len, num_of_xforms

class Policy(enum.Enum):
    """How a volume is decomposed beyond the first level.

    ``DYADIC`` recursively transforms only the low-low-low octant.
    ``WAVELET_PACKET`` fully decomposes along z and then fully decomposes
    every resulting xy slice, so the z detail bands are split further in x
    and y.

    A volume must be inverted with the policy it was transformed with;
    mixing policies does not raise but silently yields garbage.

    """
    DYADIC = 'dyadic'
    WAVELET_PACKET = 'wavelet_packet'

class Transform3d(object):
    """
    An implementation of the 3D CDF 9/7 transform via NumPy. A volume is a
    writable array of shape (nz, ny, nx) where x varies fastest. *wavelet*
    and *scratch* are as for :py:class:`cdf97.Transform1d`.

    """
    def __init__(self, wavelet=DEFAULT_WAVELET, scratch=None):
        self.xfm2d = Transform2d(wavelet, scratch)
        self.xfm1d = self.xfm2d.xfm1d

    @property
    def scratch(self):
        return self.xfm1d.scratch

    def forward(self, X, policy=DEFAULT_POLICY):
        """Decompose the volume *X* in place.

        :param X: writable 3D array
        :param policy: a :py:class:`Policy` or its string value

        """
        policy = Policy(policy)
        if policy is Policy.DYADIC:
            self._forward_dyadic(X)
        else:
            self._forward_wavelet_packet(X)

    def inverse(self, X, policy=DEFAULT_POLICY):
        """Reconstruct the volume *X* in place. *policy* must be the one
        used by :py:meth:`forward`.

        """
        policy = Policy(policy)
        if policy is Policy.DYADIC:
            self._inverse_dyadic(X)
        else:
            self._inverse_wavelet_packet(X)

    def forward_one_level(self, X, len_xyz):
        """Transform the top-left-front *len_xyz* = (len_x, len_y, len_z)
        region of *X* once along each axis: x and y slice by slice, then z.

        """
        len_x, len_y, len_z = len_xyz
        for z in range(len_z):
            self.xfm2d.forward_one_level(X[z], (len_x, len_y))

        # One xz plane at a time keeps the lifting buffer within one slice.
        for y in range(len_y):
            self.xfm1d.forward_one_level(X[:len_z, y, :len_x], axis=0)

    def inverse_one_level(self, X, len_xyz):
        """Undo :py:meth:`forward_one_level`: z first, then every slice."""
        len_x, len_y, len_z = len_xyz
        for y in range(len_y):
            self.xfm1d.inverse_one_level(X[:len_z, y, :len_x], axis=0)

        for z in range(len_z):
            self.xfm2d.inverse_one_level(X[z], (len_x, len_y))

    def _dyadic_levels(self, X):
        nlevels = num_of_xforms(min(X.shape))
        if nlevels == 0:
            logging.warning('Dyadic transform skipped: an axis of {0} samples is too short'.format(
                min(X.shape)))
        logging.debug('Dyadic transform of {0} volume with {1} levels'.format(
            'x'.join(str(n) for n in X.shape[::-1]), nlevels))
        return nlevels

    def _forward_dyadic(self, X):
        len_z, len_y, len_x = X.shape
        for level in range(self._dyadic_levels(X)):
            self.forward_one_level(X, (
                approx_detail_len(len_x, level)[0],
                approx_detail_len(len_y, level)[0],
                approx_detail_len(len_z, level)[0],
            ))

    def _inverse_dyadic(self, X):
        len_z, len_y, len_x = X.shape
        for level in reversed(range(self._dyadic_levels(X))):
            self.inverse_one_level(X, (
                approx_detail_len(len_x, level)[0],
                approx_detail_len(len_y, level)[0],
                approx_detail_len(len_z, level)[0],
            ))

    def _wavelet_packet_levels(self, X):
        len_z, len_y, len_x = X.shape
        nlevels_z = num_of_xforms(len_z)
        nlevels_xy = num_of_xforms(min(len_x, len_y))
        if nlevels_z == 0:
            logging.warning('Wavelet packet skips z: an axis of {0} samples is too short'.format(len_z))
        if nlevels_xy == 0:
            logging.warning('Wavelet packet skips xy: an axis of {0} samples is too short'.format(
                min(len_x, len_y)))
        logging.debug('Wavelet packet transform with {0} levels along z and {1} in xy'.format(
            nlevels_z, nlevels_xy))
        return nlevels_z, nlevels_xy

    def _forward_wavelet_packet(self, X):
        len_z, len_y, len_x = X.shape
        nlevels_z, nlevels_xy = self._wavelet_packet_levels(X)

        # Every z pencil of one xz plane is staged in the slice buffer and
        # decomposed there; the lifting buffer is used by each level.
        staged = self.scratch.slice_buffer((len_z, len_x))
        for y in range(len_y):
            staged[...] = X[:, y, :]
            self.xfm1d.forward(staged, nlevels_z, axis=0)
            X[:, y, :] = staged

        for z in range(len_z):
            self.xfm2d.forward(X[z], nlevels_xy)

    def _inverse_wavelet_packet(self, X):
        len_z, len_y, len_x = X.shape
        nlevels_z, nlevels_xy = self._wavelet_packet_levels(X)

        for z in range(len_z):
            self.xfm2d.inverse(X[z], nlevels_xy)

        staged = self.scratch.slice_buffer((len_z, len_x))
        for y in range(len_y):
            staged[...] = X[:, y, :]
            self.xfm1d.inverse(staged, nlevels_z, axis=0)
            X[:, y, :] = staged

# vim:sw=4:sts=4:et
