"""
EIGENtools: Eigen Decomposition Result

Immutable record holding the eigenvalues and eigenvectors of one dense matrix.

Author: James R. Beattie

"""

import numpy as np
from dataclasses import dataclass, field
from typing import Optional
from ..matrix.operations import MatrixOperations


@dataclass(frozen=True, eq=False)
class EigenDecomposition:
    """
    Eigen decomposition A V = V D of a real square matrix.

    D is block diagonal: real eigenvalues give 1x1 blocks [d_k] and a complex
    conjugate pair d_k +/- i e_k, stored at (k, k+1) with e_k > 0, gives the
    2x2 block [[d_k, e_k], [-e_k, d_k]]. This keeps V real in both the
    symmetric and nonsymmetric case.

    For symmetric input V is orthogonal and the eigenvalues are sorted in
    ascending order. For nonsymmetric input V may be badly conditioned or even
    singular, so A = V D V^-1 only holds as well as V can be inverted; A V = V D
    holds regardless.

    Attributes:
        d (np.ndarray): real parts of the eigenvalues (n,), read only
        e (np.ndarray): imaginary parts of the eigenvalues (n,), read only
        V (np.ndarray): eigenvectors, one per column (n, n), read only
        symmetric (bool): whether the symmetric algorithm was used
        converged (bool): False if an iteration cap was hit and the values are approximate
        use_numba (bool): whether the helper methods run the Numba core functions
    """
    d: np.ndarray
    e: np.ndarray
    V: np.ndarray
    symmetric: bool
    converged: bool
    use_numba: bool = field(default=True, repr=False)


    def __post_init__(self):
        for array in (self.d, self.e, self.V):
            array.flags.writeable = False


    @property
    def n(self) -> int:
        """Matrix dimension"""
        return self.d.shape[0]


    @property
    def eigenvalues(self) -> np.ndarray:
        """Eigenvalues as complex numbers d + i e"""
        return self.d + 1j * self.e


    def eigenvalue_matrix(
        self,
        out: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Build the block diagonal eigenvalue matrix D.

        Args:
            out (np.ndarray, optional): (n, n) float64 buffer to fill. A new array
                is returned if None.

        Returns:
            np.ndarray: D (the out buffer when given)
        """
        return MatrixOperations(
            use_numba=self.use_numba).block_diagonal(self.d, self.e, out=out)


    def residual_norm(
        self,
        matrix: np.ndarray) -> float:
        """
        Relative residual ||A V - V D||_F / ||A||_F of the decomposition.

        Args:
            matrix (np.ndarray): the decomposed matrix A (n, n)

        Returns:
            float: relative residual, or the absolute residual if A is zero
        """
        matrix_ops = MatrixOperations(
            use_numba=self.use_numba)
        matrix = np.asarray(matrix, dtype=np.float64)
        residual = matrix_ops.residual(matrix, self.V, self.eigenvalue_matrix())
        scale = matrix_ops.frobenius_norm(matrix)
        if scale == 0.0:
            return matrix_ops.frobenius_norm(residual)
        return matrix_ops.frobenius_norm(residual) / scale


    def condition_number(self) -> float:
        """2-norm condition number of V. Exactly 1 up to roundoff for symmetric input."""
        return float(np.linalg.cond(self.V))


    def reconstruct(self) -> np.ndarray:
        """
        Rebuild A = V D V^-1.

        Only meaningful when V is well conditioned, see condition_number().

        Raises:
            numpy.linalg.LinAlgError: if V is exactly singular
        """
        D = self.eigenvalue_matrix()
        if self.symmetric:
            return self.V @ D @ self.V.T
        # solve X V = V D for X
        return np.linalg.solve(self.V.T, (self.V @ D).T).T
