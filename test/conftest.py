"""
Shared fixtures for the qcgates unit tests
"""

import os
import sys

import numpy as np
import pytest

# no display needed for the plotting tests
os.environ.setdefault('MPLBACKEND', 'Agg')

np.set_printoptions(precision=4)

# Always import qcgates from the local source tree, see https://docs.python-guide.org/en/latest/writing/structure/#test-suite
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import qcgates


@pytest.fixture(scope="session")
def tol():
    """Tolerance for numerical errors in single precision."""
    return qcgates.tol
