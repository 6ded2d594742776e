import numpy as np

from cdf97 import Transform1d, Transform2d, num_of_xforms
from cdf97.common import ScratchBuffers

TOLERANCE = 1e-10

def test_perfect_recon():
    for shape in ((8, 8), (9, 17), (31, 64), (3, 100), (128, 128), (1, 1)):
        plane = np.random.rand(*shape)
        X = plane.copy()
        nlevels = num_of_xforms(min(shape))
        xfm = Transform2d()
        xfm.forward(X, nlevels)
        xfm.inverse(X, nlevels)
        assert np.max(np.abs(X - plane)) < TOLERANCE

def test_perfect_recon_qccpack():
    plane = np.random.rand(40, 50)
    X = plane.copy()
    xfm = Transform2d('qccpack')
    xfm.forward(X, 3)
    xfm.inverse(X, 3)
    assert np.max(np.abs(X - plane)) < TOLERANCE

def test_rows_then_columns():
    plane = np.random.rand(12, 20)
    X = plane.copy()
    Transform2d().forward_one_level(X, (20, 12))

    Y = plane.copy()
    xfm1d = Transform1d()
    xfm1d.forward_one_level(Y, axis=1)
    xfm1d.forward_one_level(Y, axis=0)
    assert np.array_equal(X, Y)

def test_one_level_region_only():
    plane = np.random.rand(16, 16)
    X = plane.copy()
    Transform2d().forward_one_level(X, (10, 9))
    assert np.all(X[9:, :] == plane[9:, :])
    assert np.all(X[:, 10:] == plane[:, 10:])

def test_levels_recurse_on_low_low_quadrant():
    plane = np.random.rand(32, 24)
    X = plane.copy()
    xfm = Transform2d()
    xfm.forward(X, 2)

    Y = plane.copy()
    xfm.forward_one_level(Y, (24, 32))
    details = Y.copy()
    xfm.forward_one_level(Y, (12, 16))
    assert np.array_equal(X, Y)

    # Only the low-low quadrant changes at level 2
    assert np.all(X[16:, :] == details[16:, :])
    assert np.all(X[:, 12:] == details[:, 12:])

def test_constant_plane():
    X = np.ones((16, 32))
    Transform2d().forward(X, 1)
    assert np.allclose(X[:8, :16], 2.0, rtol=1e-6)
    assert np.max(np.abs(X[8:, :])) < 1e-6
    assert np.max(np.abs(X[:, 16:])) < 1e-6

def test_lifting_buffer_fits_one_plane():
    scratch = ScratchBuffers()
    scratch.reserve((30, 20, 1))
    buf = scratch.lifting
    Transform2d(scratch=scratch).forward(np.random.rand(20, 30), 2)
    assert scratch.lifting is buf

# vim:sw=4:sts=4:et
