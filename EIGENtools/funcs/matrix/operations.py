"""
EIGENtools: Matrix Operations

This module provides the dense matrix primitives used by the eigen decomposition kernels,
including symmetric parts, symmetry tests, norms, block diagonal assembly and residuals.
The Numba core functions are used by default, with NumPy fallbacks.

Author: James R. Beattie

"""

import numpy as np
from typing import Optional
from .core_functions import *


def _kernel_array(
    array: np.ndarray) -> np.ndarray:
    """Numba signatures take writable arrays, so read-only views are copied."""
    if not array.flags.writeable:
        return array.copy()
    return array


class MatrixOperations:
    """
    A class to perform operations on dense square matrices.
    No data objects. Only methods.

    """
    def __init__(
        self,
        use_numba: bool = True):
        """
        Initialize the MatrixOperations class.

        Args:
            use_numba (bool, optional): use Numba core functions. Defaults to True.
        """
        self.use_numba = use_numba


    def symmetric_part(
        self,
        matrix: np.ndarray,
        out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Symmetric part 0.5*(A_ij + A_ji) of a square matrix.

        Args:
            matrix (np.ndarray): square matrix (n, n)
            out (np.ndarray, optional): (n, n) float64 buffer to fill. A new
                array is allocated if None.

        Returns:
            np.ndarray: the symmetric part (out if given)
        """
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError("Matrix must be square")
        if out is None:
            out = np.empty(matrix.shape, dtype=np.float64)
        elif out.shape != matrix.shape or out.dtype != np.float64:
            raise ValueError(f"Output buffer must be float64 with shape {matrix.shape}")

        if self.use_numba:
            symmetric_part_nb_core(
                _kernel_array(np.asarray(matrix, dtype=np.float64)),
                out)
        else:
            out[...] = symmetric_part_np_core(matrix)
        return out


    def is_symmetric(
        self,
        matrix: np.ndarray,
        tolerance: float = 0.0) -> bool:
        """
        Check whether A_ij == A_ji within tolerance * max|A|.

        Args:
            matrix (np.ndarray): square matrix (n, n)
            tolerance (float, optional): relative tolerance. Defaults to 0 (exact).

        Returns:
            bool: True if the matrix is symmetric within tolerance
        """
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
            raise ValueError("Matrix must be square")
        if self.use_numba and matrix.dtype in (np.float32, np.float64):
            return bool(is_symmetric_nb_core(_kernel_array(matrix), float(tolerance)))
        else:
            return is_symmetric_np_core(matrix, tolerance)


    def frobenius_norm(
        self,
        matrix: np.ndarray) -> float:
        """Frobenius norm sqrt(A_ij A_ij)"""
        if self.use_numba and matrix.dtype in (np.float32, np.float64):
            return float(frobenius_norm_nb_core(_kernel_array(matrix)))
        else:
            return frobenius_norm_np_core(matrix)


    def block_diagonal(
        self,
        d: np.ndarray,
        e: np.ndarray,
        out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Assemble the block diagonal eigenvalue matrix D from eigenvalue pairs.

        Args:
            d (np.ndarray): real parts of the eigenvalues (n,)
            e (np.ndarray): imaginary parts of the eigenvalues (n,)
            out (np.ndarray, optional): (n, n) float64 buffer to fill. A new
                array is allocated if None.

        Returns:
            np.ndarray: D, the (n, n) block diagonal matrix (out if given)
        """
        n = d.shape[0]
        if e.shape != d.shape:
            raise ValueError("Real and imaginary parts must have the same shape")
        if out is None:
            out = np.empty((n, n), dtype=np.float64)
        elif out.shape != (n, n):
            raise ValueError(f"Output buffer must have shape {(n, n)}, got {out.shape}")
        elif out.dtype != np.float64:
            raise ValueError("Output buffer must be float64")

        if self.use_numba:
            block_diagonal_nb_core(
                np.array(d, dtype=np.float64),
                np.array(e, dtype=np.float64),
                out)
        else:
            out[...] = block_diagonal_np_core(d, e)
        return out


    def residual(
        self,
        matrix: np.ndarray,
        eigenvectors: np.ndarray,
        eigenvalue_matrix: np.ndarray) -> np.ndarray:
        """Residual A V - V D"""
        return residual_np_core(matrix, eigenvectors, eigenvalue_matrix)
