# -*- coding: utf-8 -*-
"""Basic definitions module."""


import numpy as np
from numpy import finfo

__all__ = ['dtype', 'real_dtype', 'FRAC_1_SQRT_2', 'E', 'PI', 'tol']


# scalar types of the gate elements
dtype = np.complex64
real_dtype = np.float32

# closed-form constants, rounded once to single precision
FRAC_1_SQRT_2 = real_dtype(1 / np.sqrt(2))
E = real_dtype(np.e)
PI = real_dtype(np.pi)

# error tolerance
tol = max(1e-6, 8 * finfo(real_dtype).eps)
