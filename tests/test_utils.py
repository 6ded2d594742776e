import numpy as np
from pytest import raises

from cdf97.utils import approx_detail_len, asfarray, num_of_partitions, num_of_xforms

def test_short_axes_have_no_levels():
    for length in range(0, 8):
        assert num_of_xforms(length) == 0

def test_level_count():
    assert num_of_xforms(8) == 1
    assert num_of_xforms(15) == 1
    assert num_of_xforms(16) == 2
    assert num_of_xforms(31) == 2
    assert num_of_xforms(32) == 3
    assert num_of_xforms(255) == 5

def test_level_count_saturates():
    assert num_of_xforms(256) == 6
    assert num_of_xforms(511) == 6
    assert num_of_xforms(512) == 6
    assert num_of_xforms(100000) == 6

def test_level_count_negative():
    with raises(ValueError):
        num_of_xforms(-1)

def test_approx_detail_len():
    assert approx_detail_len(16, 0) == (16, 0)
    assert approx_detail_len(16, 1) == (8, 8)
    assert approx_detail_len(17, 1) == (9, 8)
    assert approx_detail_len(17, 2) == (5, 4)
    assert approx_detail_len(15, 2) == (4, 4)

def test_approx_detail_len_sums():
    for length in (8, 9, 63, 100, 511):
        for level in range(1, num_of_xforms(length) + 1):
            approx, detail = approx_detail_len(length, level)
            prev, _ = approx_detail_len(length, level - 1)
            assert approx + detail == prev
            assert approx == int(np.ceil(length / 2.0 ** level))

def test_num_of_partitions():
    assert num_of_partitions(0) == 0
    assert num_of_partitions(1) == 0
    assert num_of_partitions(2) == 1
    assert num_of_partitions(3) == 2
    assert num_of_partitions(8) == 3
    assert num_of_partitions(9) == 4

def test_asfarray_integer():
    X = asfarray([1, 2, 3])
    assert X.dtype == np.float64
    assert np.all(X == (1.0, 2.0, 3.0))

def test_asfarray_no_copy():
    X = np.zeros(5)
    assert asfarray(X) is X

def test_asfarray_complex():
    with raises(TypeError):
        asfarray(np.ones(3, dtype=np.complex128))

def test_asfarray_strings():
    with raises(TypeError):
        asfarray(['a', 'b'])

# vim:sw=4:sts=4:et
