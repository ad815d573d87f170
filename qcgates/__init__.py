# -*- coding: utf-8 -*-
"""Single-qubit quantum gate catalogue

See the README.txt file included in this distribution.
"""

from .base import *
from .gate import Gate
from .plot import *
from . import gate, examples


# package version number
__version__ = '0.1.0'

def version():
    """Returns the qcgates version number (as a string)."""
    return __version__
