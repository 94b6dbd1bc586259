"""
EIGENtools Eigen Decomposition Module

Provides the eigenvalue / eigenvector decomposition A V = V D of dense real
square matrices, with real eigenvalues in 1x1 blocks of D and complex
conjugate pairs in 2x2 blocks [[a, b], [-b, a]], so that V stays real.

Features:
- Householder tridiagonalisation + implicit shift QL for symmetric matrices
- Hessenberg reduction + Francis double shift QR for general matrices
- Numba-compiled kernels that release the GIL, with call-local scratch
- Exact power of two scaling, so entries far from unit magnitude do not overflow
- Explicit iteration cap with a warn / ignore / raise non-convergence policy
- Point-by-point decomposition of matrix fields (n, n, Nx, Ny, Nz)

Adapted from the algorithms in Wilkinson & Reinsch (1971), Handbook for
Automatic Computation II, as carried by JAMA / TNT.
"""

# Import main classes
from .operations import EigenDecompositionOperations, eigendecomposition
from .result import EigenDecomposition
from .errors import NonConvergenceError, NonConvergenceWarning


# Import core functions for advanced users
from .core_functions import (
    cdiv_nb_core,
    tred2_nb_core,
    tql2_nb_core,
    orthes_nb_core,
    hqr2_nb_core,
    power_of_two_scale_nb_core,
    eigendecomposition_nb_core,
    eigendecomposition_field_nb_core,
    eigendecomposition_np_core
)

# Version info
__version__ = "1.0.0"
__author__ = "James R. Beattie"

# Define public API
__all__ = [
    'EigenDecompositionOperations',
    'EigenDecomposition',
    'eigendecomposition',
    'NonConvergenceError',
    'NonConvergenceWarning',
    # Core functions for advanced use
    'cdiv_nb_core',
    'tred2_nb_core',
    'tql2_nb_core',
    'orthes_nb_core',
    'hqr2_nb_core',
    'power_of_two_scale_nb_core',
    'eigendecomposition_nb_core',
    'eigendecomposition_field_nb_core',
    'eigendecomposition_np_core'
]
