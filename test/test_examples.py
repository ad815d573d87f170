"""
Unit tests for qcgates.examples and the package interface
"""

import qcgates
from qcgates.examples import catalogue


def test_version():
    assert qcgates.version() == qcgates.__version__
    assert isinstance(qcgates.Gate, type)


def test_catalogue(capsys):
    gates = catalogue()
    out = capsys.readouterr().out
    assert 'Single-qubit gate catalogue' in out
    assert len(gates) == 9
    for G in gates.values():
        assert str(G) in out
