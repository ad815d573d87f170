#! /usr/bin/python
from setuptools import setup
import os
import re

here = os.path.abspath(os.path.dirname(__file__))

# Read the version number from a source file.
def find_version(*file_paths):
    with open(os.path.join(here, *file_paths), mode='r', encoding='utf_8') as f:
        version_file = f.read()

    # The version line must have the form
    # __version__ = 'ver'
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


# Use README.txt as the long description
with open(os.path.join(here, 'README.txt'), mode='r', encoding='utf_8') as f:
    long_description = f.read()


setup(
    name             = 'qcgates',
    version          = find_version('qcgates', '__init__.py'),
    description      = 'Single-qubit quantum gate catalogue',
    long_description = long_description,
    classifiers      =
    [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Physics',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    keywords = 'quantum computing, quantum gates, qubit',
    packages         = ['qcgates'],
    python_requires  = '>=3.8',
    install_requires = ['numpy>=1.18.4', 'scipy>=1.4.1', 'matplotlib>=3.2.1'],
    extras_require   = {'test': ['pytest']},
)
