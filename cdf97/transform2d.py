from cdf97.defaults import DEFAULT_WAVELET
from cdf97.transform1d import Transform1d
from cdf97.utils import approx_detail_len

class Transform2d(object):
    """
    An implementation of the separable 2D CDF 9/7 transform via NumPy. A
    plane is a writable array of shape (ny, nx) where x varies fastest.
    *wavelet* and *scratch* are as for :py:class:`cdf97.Transform1d`.

    """
    def __init__(self, wavelet=DEFAULT_WAVELET, scratch=None):
        self.xfm1d = Transform1d(wavelet, scratch)

    @property
    def scratch(self):
        return self.xfm1d.scratch

    def forward_one_level(self, plane, len_xy):
        """Transform every row, then every column, of the top-left region
        of *plane* which is *len_xy* = (len_x, len_y) in size.

        """
        len_x, len_y = len_xy
        region = plane[:len_y, :len_x]
        self.xfm1d.forward_one_level(region, axis=1)
        self.xfm1d.forward_one_level(region, axis=0)

    def inverse_one_level(self, plane, len_xy):
        """Undo :py:meth:`forward_one_level`: columns first, then rows."""
        len_x, len_y = len_xy
        region = plane[:len_y, :len_x]
        self.xfm1d.inverse_one_level(region, axis=0)
        self.xfm1d.inverse_one_level(region, axis=1)

    def forward(self, plane, nlevels):
        """Perform an *nlevels* decomposition of *plane*. Each level after the
        first transforms the low-low quadrant left by the previous one.

        """
        len_y, len_x = plane.shape
        for level in range(nlevels):
            approx_x, _ = approx_detail_len(len_x, level)
            approx_y, _ = approx_detail_len(len_y, level)
            self.forward_one_level(plane, (approx_x, approx_y))

    def inverse(self, plane, nlevels):
        """Reconstruct *plane* from an *nlevels* decomposition."""
        len_y, len_x = plane.shape
        for level in reversed(range(nlevels)):
            approx_x, _ = approx_detail_len(len_x, level)
            approx_y, _ = approx_detail_len(len_y, level)
            self.inverse_one_level(plane, (approx_x, approx_y))

# vim:sw=4:sts=4:et
