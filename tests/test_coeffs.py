import math

import numpy as np
from pytest import raises

from cdf97.coeffs import CDF97_FILTER_BANK, LiftingCoefficients, from_filter_bank, lifting

TOLERANCE = 1e-7

def test_cdf97_reference_values():
    c = lifting('cdf97')
    assert abs(c.alpha - -1.586134342) < TOLERANCE
    assert abs(c.beta - -0.05298011854) < TOLERANCE
    assert abs(c.gamma - 0.8829110762) < TOLERANCE
    assert abs(c.delta - 0.4435068522) < TOLERANCE
    assert abs(c.epsilon - 1.149604398) < TOLERANCE

def test_reciprocal():
    for name in ('cdf97', 'qccpack'):
        c = lifting(name)
        assert c.inv_epsilon == 1.0 / c.epsilon

def test_epsilon_is_scaled_t0():
    h0, h1, h2, h3, h4 = CDF97_FILTER_BANK
    t0 = h0 - 2.0 * (h2 - h4)
    assert lifting('cdf97').epsilon == math.sqrt(2.0) * t0

def test_default_is_factored_filter_bank():
    assert lifting('cdf97') == from_filter_bank(CDF97_FILTER_BANK)

def test_qccpack():
    c = lifting('qccpack')
    assert c.alpha == -1.58615986717275
    assert c.epsilon == 1.14960430535816

    # QccPack's constants are close to, but not the same as, the factored ones
    d = lifting('cdf97')
    assert c != d
    assert np.allclose(c, d, atol=1e-3)

def test_cached():
    assert lifting('cdf97') is lifting('cdf97')

def test_named_fields():
    c = lifting('cdf97')
    assert isinstance(c, LiftingCoefficients)
    assert len(c) == 6
    alpha, beta, gamma, delta, epsilon, inv_epsilon = c
    assert alpha == c.alpha and inv_epsilon == c.inv_epsilon

def test_unknown_name():
    with raises(ValueError):
        lifting('haar')

def test_non_string_name():
    with raises(TypeError):
        lifting(lifting('cdf97'))

def test_short_filter_bank():
    with raises(ValueError):
        from_filter_bank(CDF97_FILTER_BANK[:4])

# vim:sw=4:sts=4:et
