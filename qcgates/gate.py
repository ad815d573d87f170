# -*- coding: utf-8 -*-
r"""
Single-qubit gates (:mod:`qcgates.gate`)
========================================

All the gates are 2x2 complex matrices stored in row-major order,

.. math::

   G = \begin{pmatrix} a & b \\ c & d \end{pmatrix},

with every element a single precision complex number (:data:`qcgates.base.dtype`).


.. currentmodule:: qcgates.gate

Contents
--------

.. autosummary::

   Gate
   id
   h
   negh
   x
   y
   z
   s
   t
   r
   dist
"""

from collections import namedtuple
import warnings

import numpy as np
from numpy import trace, angle, exp
from scipy.linalg import norm

from .base import dtype, real_dtype, FRAC_1_SQRT_2, E


__all__ = ['Gate', 'id', 'h', 'negh', 'x', 'y', 'z', 's', 't', 'r', 'dist']



class Gate(namedtuple('Gate', ['a', 'b', 'c', 'd'])):
    """Single-qubit gate.

    Immutable 2x2 complex matrix

    ::

      [a, b]
      [c, d]

    The elements are cast to :data:`qcgates.base.dtype` on construction.
    Nothing checks that the matrix is unitary, the caller is trusted.

    Variables:
    a, b, c, d:  the matrix elements, row by row
    """
    __slots__ = ()

    def __new__(cls, a, b, c, d):
        return super().__new__(cls, dtype(a), dtype(b), dtype(c), dtype(d))

    @classmethod
    def from_array(cls, A):
        """Construct a gate from a 2x2 array-like.

        Non-finite elements are accepted, but produce a RuntimeWarning.
        """
        try:
            A = np.asarray(A, dtype=complex)
        except (TypeError, ValueError) as e:
            raise ValueError('Gate matrix elements must be numbers.') from e
        if A.shape != (2, 2):
            raise ValueError('A single-qubit gate must be a 2x2 matrix, got shape {0}.'.format(A.shape))
        if not np.isfinite(A).all():
            warnings.warn('Gate matrix contains non-finite elements.', RuntimeWarning, stacklevel=2)
        return cls(*A.flat)

    def __str__(self):
        """Display the gate as [[a, b], [c, d]]."""
        return '[[{0}, {1}], [{2}, {3}]]'.format(*map(str, self))

    @property
    def data(self):
        """The gate as a new 2x2 ndarray."""
        return np.array([[self.a, self.b], [self.c, self.d]], dtype=dtype)

    def __array__(self, dtype=None, copy=None):
        A = self.data
        if dtype is not None:
            A = A.astype(dtype)
        return A


# linear algebra

    def conj(self):
        """Complex conjugate."""
        return Gate(self.a.conj(), self.b.conj(), self.c.conj(), self.d.conj())

    def transpose(self):
        """Transpose."""
        return Gate(self.a, self.c, self.b, self.d)

    def ctranspose(self):
        """Hermitian conjugate."""
        return self.conj().transpose()



def id():
    """Identity gate.

    ::

      [1, 0]
      [0, 1]
    """
    return Gate(1, 0, 0, 1)


def h():
    """Hadamard gate.

    ::

      [1/sqrt(2),  1/sqrt(2)]
      [1/sqrt(2), -1/sqrt(2)]
    """
    c = FRAC_1_SQRT_2
    return Gate(c, c, c, -c)


def negh():
    """Negative Hadamard gate.

    The Hadamard gate with a global phase of -1.

    ::

      [-1/sqrt(2), -1/sqrt(2)]
      [-1/sqrt(2),  1/sqrt(2)]
    """
    c = FRAC_1_SQRT_2
    return Gate(-c, -c, -c, c)


def x():
    """Pauli X (NOT) gate.

    ::

      [0, 1]
      [1, 0]
    """
    return Gate(0, 1, 1, 0)


def y():
    """Pauli Y gate.

    ::

      [0, -i]
      [i,  0]
    """
    return Gate(0, complex(0, -1), 1j, 0)


def z():
    """Pauli Z gate.

    ::

      [1,  0]
      [0, -1]
    """
    return Gate(1, 0, 0, -1)


def s():
    """S (phase) gate.

    ::

      [1, 0]
      [0, i]
    """
    return Gate(1, 0, 0, 1j)


def t():
    """T gate.

    ::

      [1, 0]
      [0, (1+i)/sqrt(2)]
    """
    c = FRAC_1_SQRT_2
    return Gate(1, 0, 0, dtype(complex(c, c)))


def r(angle):
    r"""Phase shift gate.

    Returns the gate

    ::

      [1, 0]
      [0, e^(i*angle)]

    angle is the rotation angle in radians, cast to single precision.
    The phase factor is computed as :math:`e` raised to the complex power
    :math:`i \theta`, so r(pi/2) == s(), r(pi/4) == t() and r(pi) == z()
    up to rounding. NaN and infinite angles propagate into the result.
    """
    with np.errstate(all='ignore'):
        theta = real_dtype(angle)
        d = np.power(dtype(E), dtype(complex(0, theta)))
    return Gate(1, 0, 0, d)



def _as_matrix(A):
    """Gate or 2x2 array-like into a double precision ndarray."""
    A = np.asarray(A, dtype=complex)
    if A.shape != (2, 2):
        raise ValueError('Expected a 2x2 matrix, got shape {0}.'.format(A.shape))
    return A


def dist(A, B):
    r"""Distance between two single-qubit gates, ignoring the global phase.

    Returns :math:`\inf_{\phi \in \reals} \|A - e^{i \phi} B\|_F^2`.
    The infimum is attained at :math:`\phi = -\arg \trace(A^\dagger B)`.
    For unitary A and B this equals :math:`2 (2 - |\trace(A^\dagger B)|)`.

    A and B can be Gates or 2x2 arrays.
    """
    A = _as_matrix(A)
    B = _as_matrix(B)
    phi = -angle(trace(A.conj().transpose() @ B))
    return norm(A - exp(1j * phi) * B) ** 2
