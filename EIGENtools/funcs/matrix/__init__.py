"""
EIGENtools Matrix Operations Module

Provides the dense matrix primitives (symmetric part, symmetry test, norms,
block diagonal assembly and residuals) consumed by the eigen decomposition module.
"""

# Import main classes
from .operations import MatrixOperations


# Import core functions for advanced users
from .core_functions import (
    symmetric_part_nb_core,
    is_symmetric_nb_core,
    frobenius_norm_nb_core,
    block_diagonal_nb_core,
    symmetric_part_np_core,
    is_symmetric_np_core,
    frobenius_norm_np_core,
    block_diagonal_np_core,
    residual_np_core
)

# Version info
__version__ = "1.0.0"
__author__ = "James R. Beattie"

# Define public API
__all__ = [
    'MatrixOperations',
    # Core functions for advanced use
    'symmetric_part_nb_core',
    'is_symmetric_nb_core',
    'frobenius_norm_nb_core',
    'block_diagonal_nb_core',
    'symmetric_part_np_core',
    'is_symmetric_np_core',
    'frobenius_norm_np_core',
    'block_diagonal_np_core',
    'residual_np_core'
]
