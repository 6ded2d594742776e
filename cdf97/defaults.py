import os

DEFAULT_WAVELET = 'cdf97'

# Shortest axis which receives one level of transform and the maximum number
# of levels applied to any axis.
MIN_XFORM_LENGTH = 8
MAX_XFORM_LEVELS = 6

# Default 3D decomposition policy. Can be overridden by setting the
# CDF97_POLICY environment variable to 'dyadic' or 'wavelet_packet'.
DEFAULT_POLICY = os.getenv('CDF97_POLICY', 'dyadic')
