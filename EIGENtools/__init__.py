"""
EIGENtools

A toolkit (JIT compiled) for dense real eigen decompositions, A V = V D.
"""

from .funcs.eigen_decomp import (
    EigenDecompositionOperations,
    EigenDecomposition,
    eigendecomposition,
    NonConvergenceError,
    NonConvergenceWarning
)
from .funcs.matrix import MatrixOperations

__version__ = "0.1.0"

__all__ = [
    'EigenDecompositionOperations',
    'EigenDecomposition',
    'eigendecomposition',
    'NonConvergenceError',
    'NonConvergenceWarning',
    'MatrixOperations'
]
