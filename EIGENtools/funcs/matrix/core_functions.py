from numba import njit
import numpy as np
from .constants import *

##########################################################################################
# Core numba JIT functions for matrix operations
##########################################################################################


@njit(sig_symmetric_part_64, nogil=True, cache=True)
def symmetric_part_nb_core(matrix, out):
    """
    Write the symmetric part 0.5*(A_ij + A_ji) of a square matrix into out.

    The result is exactly symmetric in floating point, since addition commutes.
    """
    n = matrix.shape[ROW]

    for m in range(n):
        for k in range(n):
            out[m, k] = 0.5 * (matrix[m, k] + matrix[k, m])


@njit([sig_is_symmetric_32, sig_is_symmetric_64], nogil=True, cache=True)
def is_symmetric_nb_core(matrix, tolerance):
    """
    Test A_ij == A_ji for a square matrix.

    Two entries are treated as equal when |A_ij - A_ji| <= tolerance * max|A|,
    so tolerance = 0 asks for exact symmetry.

    Args:
        matrix: Input square matrix (n, n)
        tolerance: Relative tolerance against the largest entry magnitude

    Returns:
        True if the matrix is symmetric within tolerance
    """
    n = matrix.shape[ROW]

    scale = 0.0
    for m in range(n):
        for k in range(n):
            a = abs(matrix[m, k])
            if a > scale:
                scale = a
    threshold = tolerance * scale

    for m in range(n):
        for k in range(m + 1, n):
            if abs(matrix[m, k] - matrix[k, m]) > threshold:
                return False
    return True


@njit([sig_frobenius_norm_32, sig_frobenius_norm_64], nogil=True, cache=True)
def frobenius_norm_nb_core(matrix):
    """
    Frobenius norm sqrt(A_ij A_ij), accumulated in double precision.

    Entries are divided by max|A| before squaring, so the sum neither
    overflows nor underflows for entries far from unit magnitude.
    """
    scale = 0.0
    for m in range(matrix.shape[ROW]):
        for n in range(matrix.shape[COL]):
            a = abs(float(matrix[m, n]))
            if a > scale:
                scale = a
    if scale == 0.0:
        return 0.0

    total = 0.0
    for m in range(matrix.shape[ROW]):
        for n in range(matrix.shape[COL]):
            a = float(matrix[m, n]) / scale
            total += a * a
    return scale * np.sqrt(total)


@njit(sig_block_diagonal_64, nogil=True, cache=True)
def block_diagonal_nb_core(d, e, out):
    """
    Fill out with the block diagonal eigenvalue matrix D.

    Real eigenvalues (e[k] == 0) give a 1x1 block [d[k]]. A complex conjugate
    pair stored at (k, k+1) gives the 2x2 block

        [[ d[k],   e[k]  ],
         [ -e[k],  d[k+1]]]

    and the partner at k+1 does not emit a block of its own.

    Args:
        d: Real parts of the eigenvalues (n,)
        e: Imaginary parts of the eigenvalues (n,)
        out: Output matrix (n, n), overwritten
    """
    n = d.shape[0]

    for m in range(n):
        for k in range(n):
            out[m, k] = 0.0

    k = 0
    while k < n:
        if e[k] != 0.0 and k + 1 < n:
            out[k, k] = d[k]
            out[k, k + 1] = e[k]
            out[k + 1, k] = -e[k]
            out[k + 1, k + 1] = d[k + 1]
            k += 2
        else:
            out[k, k] = d[k]
            k += 1


##########################################################################################
# Core numpy functions for matrix operations
##########################################################################################


def symmetric_part_np_core(
    matrix : np.ndarray) -> np.ndarray:
    """
    Compute the symmetric part 0.5*(A_ij + A_ji) of a square matrix.

    The result is exactly symmetric in floating point, since addition commutes.
    """
    return 0.5 * (matrix + matrix.T)


def is_symmetric_np_core(
    matrix : np.ndarray,
    tolerance : float) -> bool:
    """
    NumPy version of is_symmetric_nb_core.
    """
    threshold = tolerance * np.max(np.abs(matrix))
    return bool(np.all(np.abs(matrix - matrix.T) <= threshold))


def frobenius_norm_np_core(
    matrix : np.ndarray) -> float:
    """
    Frobenius norm of a matrix, scaled by max|A| like frobenius_norm_nb_core.
    """
    scale = float(np.max(np.abs(matrix))) if matrix.size else 0.0
    if scale == 0.0:
        return 0.0
    scaled = matrix / scale
    return scale * float(np.sqrt(np.einsum('ij,ij->',
                                           scaled,
                                           scaled)))


def block_diagonal_np_core(
    d : np.ndarray,
    e : np.ndarray) -> np.ndarray:
    """
    NumPy version of block_diagonal_nb_core, returning a new (n, n) array.
    """
    n = d.shape[0]
    out = np.diag(d).astype(np.float64)
    k = 0
    while k < n:
        if e[k] != 0.0 and k + 1 < n:
            out[k, k + 1] = e[k]
            out[k + 1, k] = -e[k]
            k += 2
        else:
            k += 1
    return out


def residual_np_core(
    matrix : np.ndarray,
    eigenvectors : np.ndarray,
    eigenvalue_matrix : np.ndarray) -> np.ndarray:
    """
    Compute the residual A V - V D of an eigen decomposition.
    Args:
        matrix (np.ndarray)             : (n,n) input matrix A
        eigenvectors (np.ndarray)       : (n,n) eigenvector matrix V, one eigenvector per column
        eigenvalue_matrix (np.ndarray)  : (n,n) block diagonal eigenvalue matrix D
    Returns:
        A V - V D: (n,n) residual matrix
    """
    return matrix @ eigenvectors - eigenvectors @ eigenvalue_matrix
