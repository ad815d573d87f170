# -*- coding: utf-8 -*-
"""Examples and demos."""


from numpy import pi

from . import gate
from .gate import dist

__all__ = ['catalogue']


def catalogue():
    """Tour of the single-qubit gate catalogue.

    Prints every named gate, and the phase shift gates that reproduce some of them.
    Returns a dict of the gates printed.
    """
    print('\n\n=== Single-qubit gate catalogue ===\n')

    gates = {
        'I': gate.id(),
        'H': gate.h(),
        '-H': gate.negh(),
        'X': gate.x(),
        'Y': gate.y(),
        'Z': gate.z(),
        'S': gate.s(),
        'T': gate.t(),
        'R(pi/8)': gate.r(pi / 8),
    }
    for name, G in gates.items():
        print('{0:>8}: {1}'.format(name, G))

    print('\nThe phase shift gate R(theta) contains Z, S and T as special cases:')
    for name, theta in [('Z', pi), ('S', pi / 2), ('T', pi / 4)]:
        print('  dist(R({0:.4g}), {1}) = {2:.3g}'.format(theta, name, dist(gate.r(theta), gates[name])))

    print('\nH and -H differ only by a global phase: dist(H, -H) = {0:.3g}'.format(dist(gates['H'], gates['-H'])))
    return gates
