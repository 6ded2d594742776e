import numpy as np

class ScratchBuffers(object):
    """Temporary storage shared by the transform engines of one
    :py:class:`cdf97.CDF97` instance.

    .. py:attribute:: lifting

        Used only by single-level operations: it receives the deinterleaved
        copy of whatever rows, columns or pencils are being lifted. Big
        enough for twice the longest axis or one whole 2D slice.

    .. py:attribute:: slice

        Used only by the wavelet-packet policy to stage a slice of the
        volume while a multi-level transform runs on it.

    Buffers only ever grow. Their content is meaningless outside of the
    operation which filled it.

    """
    def __init__(self):
        self.lifting = np.empty(0)
        self.slice = np.empty(0)

    def reserve(self, dims):
        """Grow the buffers so that a volume of *dims* (x, y, z) can be
        transformed without further allocation.

        """
        x, y, z = dims
        plane = max(x * y, x * z, y * z)
        column = 2 * max(x, y, z)
        self.lifting = self._grow(self.lifting, max(column, plane))
        self.slice = self._grow(self.slice, plane)

    def lifting_buffer(self, shape):
        """Return a view of the lifting buffer with the given shape."""
        n = int(np.prod(shape))
        self.lifting = self._grow(self.lifting, n)
        return self.lifting[:n].reshape(shape)

    def slice_buffer(self, shape):
        """Return a view of the slice buffer with the given shape."""
        n = int(np.prod(shape))
        self.slice = self._grow(self.slice, n)
        return self.slice[:n].reshape(shape)

    @staticmethod
    def _grow(buf, n):
        if buf.shape[0] >= n:
            return buf
        return np.empty(n)

# vim:sw=4:sts=4:et
