import os
import re

from setuptools import setup, find_packages

# Utility function to read the README file.
# Used for the long_description.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()

# Read metadata from version file
metadata = dict(re.findall("__([a-z]+)__ = '([^']+)'", read(os.path.join('cdf97', '_version.py'))))

setup(
    name = 'cdf97',
    version = metadata['version'],
    description = ("In-place CDF 9/7 lifting wavelet transform for 1D, 2D and 3D "
                   "scientific data compression."),
    license = "BSD",
    keywords = "numpy, wavelet, CDF 9/7, lifting, compression",
    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests"]),
    long_description=read('README.rst'),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.6',

    install_requires=[ 'numpy', ],

    extras_require={
        'test': [ 'pytest', 'coverage', ],
    },
)

# vim:sw=4:sts=4:et
