from importlib import reload

import cdf97.defaults as defaults
from cdf97 import Policy

def test_default_policy():
    assert Policy(defaults.DEFAULT_POLICY) in (Policy.DYADIC, Policy.WAVELET_PACKET)

def test_policy_from_environment(monkeypatch):
    monkeypatch.setenv('CDF97_POLICY', 'wavelet_packet')
    try:
        reload(defaults)
        assert Policy(defaults.DEFAULT_POLICY) is Policy.WAVELET_PACKET
    finally:
        monkeypatch.delenv('CDF97_POLICY')
        reload(defaults)
    assert defaults.DEFAULT_POLICY == 'dyadic'

# vim:sw=4:sts=4:et
