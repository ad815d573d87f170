# -*- coding: utf-8 -*-
"""Plots."""


import numpy as np
from numpy import angle, pi
import matplotlib.pyplot as plt

__all__ = ['plot_gate']


def plot_gate(G, ax=None):
    """Pseudocolor plot of a single-qubit gate.

    The color of each cell gives the magnitude of the matrix element,
    the text in it the phase in units of pi.
    Plots into ax, or the current axes if ax is None.

    Returns the plot object.
    """
    if ax is None:
        ax = plt.gca()

    W = np.asarray(G)
    p = ax.pcolormesh(np.abs(W), vmin=0, vmax=1, cmap='Blues')
    for (row, col), w in np.ndenumerate(W):
        if np.abs(w) == 0:
            continue
        ax.text(col + 0.5, row + 0.5, '{0:+.3g}$\\pi$'.format(angle(w) / pi),
                ha='center', va='center')

    # row-major, so row 0 on top
    ax.set_xticks([0.5, 1.5])
    ax.set_yticks([0.5, 1.5])
    ax.set_xticklabels(['0', '1'])
    ax.set_yticklabels(['0', '1'])
    ax.invert_yaxis()
    ax.set_aspect('equal')
    plt.colorbar(p, ax=ax)
    return p
