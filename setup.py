"""
Setup script for pyWheelKF
"""
from setuptools import find_packages
import sys
from setuptools import setup

if sys.version_info.major < 3:
    sys.exit('Sorry, Python 2 is not supported')

name = "pyWheelKF"
version = "1.0"
description = "A linear Kalman filter and reference simulator for a throttle driven wheeled vehicle"
license = "BSD"
keywords = 'kalman filter estimation joseph form simulation vehicle'
install_requires = ['numpy', 'scipy', 'termcolor']
extras_require = {'test': ['pytest']}
packages = find_packages(exclude=['examples', 'docs', 'tests', 'tests.*'])

setup(
    name=name,
    version=version,
    description=description,
    license=license,
    keywords=keywords,
    packages=packages,
    install_requires=install_requires,
    extras_require=extras_require
)
