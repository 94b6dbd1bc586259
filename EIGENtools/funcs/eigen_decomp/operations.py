"""
EIGENtools: Eigen Decomposition Operations

This module provides the eigenvalue and eigenvector decomposition of dense real square
matrices, A V = V D, using Numba compiled versions of the classical Wilkinson-Reinsch
algorithms:

- symmetric matrices: Householder tridiagonalisation + implicit shift QL,
- general matrices: Householder reduction to Hessenberg form + Francis double shift QR
  to real Schur form, with back-substitution for the eigenvectors.

The decomposition is computed eagerly and returned as an immutable EigenDecomposition.
Fields of matrices (n, n, ...) and lists of matrices can be decomposed in parallel.

Author: James R. Beattie

"""

import warnings
import numpy as np
from joblib import Parallel, delayed
from typing import List, Optional, Sequence, Tuple
from .core_functions import *
from .errors import NonConvergenceError, NonConvergenceWarning
from .result import EigenDecomposition
from ..matrix.operations import MatrixOperations


class EigenDecompositionOperations:
    """
    A class to perform eigen decompositions of dense real square matrices.

    This class provides methods for:
    - Decomposing a single matrix into eigenvalues and eigenvectors
    - Decomposing a list of matrices (possibly of different sizes) across threads
    - Decomposing a matrix field of shape (n, n, ...) point by point

    Every call owns its own scratch buffers, so one instance can be shared
    between threads.
    """

    def __init__(
        self,
        use_numba: bool = True,
        max_iterations: int = MAX_ITERATIONS,
        symmetry_tol: float = SYMMETRY_TOL,
        on_nonconvergence: str = DEFAULT_NONCONVERGENCE_POLICY,
        debug: bool = False):
        """
        Initialize the EigenDecompositionOperations class.

        Args:
            use_numba (bool, optional): Use Numba core functions. When False the same
                kernels run as interpreted Python. Defaults to True.
            max_iterations (int, optional): QL / QR sweeps allowed per eigenvalue
                before the decomposition is declared not converged. Defaults to 30.
            symmetry_tol (float, optional): |A_ij - A_ji| <= symmetry_tol * max|A|
                selects the symmetric algorithm. Defaults to 16 machine epsilon.
            on_nonconvergence (str, optional): what to do when the iteration cap is hit.
                "warn" keeps the approximate result, flags it and issues a
                NonConvergenceWarning; "ignore" does the same silently; "raise" raises
                NonConvergenceError carrying the partial result. Defaults to "warn".
            debug (bool, optional): print diagnostics. Defaults to False.
        """
        if int(max_iterations) < 1:
            raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
        if symmetry_tol < 0:
            raise ValueError(f"symmetry_tol must be non-negative, got {symmetry_tol}")
        if on_nonconvergence not in NONCONVERGENCE_POLICIES:
            raise ValueError(
                f"on_nonconvergence must be one of {NONCONVERGENCE_POLICIES}, got {on_nonconvergence!r}")

        self.use_numba = use_numba
        self.max_iterations = int(max_iterations)
        self.symmetry_tol = float(symmetry_tol)
        self.on_nonconvergence = on_nonconvergence
        self.debug = debug
        self.matrix_ops = MatrixOperations(
            use_numba=use_numba)


    def _prepare_matrix(
        self,
        matrix: np.ndarray) -> np.ndarray:
        """
        Validate a matrix and return a private float64 copy of it.
        """
        matrix = np.asarray(matrix)
        if matrix.ndim != 2:
            raise ValueError(f"Matrix must be two dimensional, got shape {matrix.shape}")
        if matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Matrix must be square, got shape {matrix.shape}")
        if matrix.shape[0] == 0:
            raise ValueError("Matrix must have at least one row")
        if np.iscomplexobj(matrix):
            raise ValueError("Complex matrices are not supported")
        if matrix.dtype != np.float64 and self.debug:
            print(f"Converting {matrix.dtype} matrix to float64")
        matrix = np.array(matrix, dtype=np.float64, order="C")
        if not np.all(np.isfinite(matrix)):
            raise ValueError("Matrix contains NaN or infinite entries")
        return matrix


    def _handle_nonconvergence(
        self,
        d: np.ndarray,
        e: np.ndarray,
        V: np.ndarray,
        what: str = "matrix",
        converged: Optional[np.ndarray] = None,
        stacklevel: int = 3) -> None:
        """
        Apply the non-convergence policy.

        stacklevel is counted from this method, so that the warning points at
        the caller of the public entry point.
        """
        message = (f"Eigen decomposition of {what} did not converge within "
                   f"{self.max_iterations} iterations per eigenvalue; "
                   "results are approximate")
        if self.on_nonconvergence == "raise":
            raise NonConvergenceError(
                message, d=d, e=e, V=V, max_iterations=self.max_iterations,
                converged=converged)
        if self.on_nonconvergence == "warn":
            warnings.warn(message, NonConvergenceWarning, stacklevel=stacklevel)
        if self.debug:
            print(f"Warning: {message}")


    def is_symmetric(
        self,
        matrix: np.ndarray) -> bool:
        """
        Whether decompose() would treat the matrix as symmetric (within symmetry_tol).
        """
        return self.matrix_ops.is_symmetric(
            self._prepare_matrix(matrix),
            tolerance=self.symmetry_tol)


    def decompose(
        self,
        matrix: np.ndarray) -> EigenDecomposition:
        """
        Compute the eigen decomposition A V = V D of a dense real square matrix.

        Args:
            matrix (np.ndarray): real square matrix (n, n), n >= 1. Not modified.

        Returns:
            EigenDecomposition: immutable result with d, e, V and the D builder

        Raises:
            ValueError: if the matrix is not square, is empty, complex or not finite
            NonConvergenceError: if on_nonconvergence="raise" and an iteration cap was hit
        """
        return self._decompose(matrix, stacklevel=4)


    def _decompose(
        self,
        matrix: np.ndarray,
        stacklevel: int) -> EigenDecomposition:
        matrix = self._prepare_matrix(matrix)
        n = matrix.shape[0]

        d = np.zeros(n, dtype=np.float64)
        e = np.zeros(n, dtype=np.float64)
        V = np.zeros((n, n), dtype=np.float64)

        if self.use_numba:
            symmetric, converged = eigendecomposition_nb_core(
                matrix, d, e, V, self.max_iterations, self.symmetry_tol)
        else:
            symmetric, converged = eigendecomposition_np_core(
                matrix, d, e, V, self.max_iterations, self.symmetry_tol)

        if self.debug:
            pipeline = "tridiagonal QL" if symmetric else "Hessenberg QR"
            print(f"Decomposed {n}x{n} matrix with {pipeline} (converged: {converged})")

        if not converged:
            self._handle_nonconvergence(
                d, e, V, what=f"{n}x{n} matrix", stacklevel=stacklevel)

        return EigenDecomposition(
            d=d,
            e=e,
            V=V,
            symmetric=bool(symmetric),
            converged=bool(converged),
            use_numba=self.use_numba)


    def decompose_batch(
        self,
        matrices: Sequence[np.ndarray],
        n_jobs: int = -1) -> List[EigenDecomposition]:
        """
        Decompose a sequence of independent matrices on a pool of threads.

        The matrices may have different sizes. The compiled kernels release the
        GIL, so the decompositions run concurrently.

        Args:
            matrices (Sequence[np.ndarray]): square matrices to decompose
            n_jobs (int, optional): number of joblib workers. Defaults to -1 (all cores).

        Returns:
            List[EigenDecomposition]: one result per matrix, in input order
        """
        return Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(self.decompose)(matrix) for matrix in matrices)


    def decompose_field(
        self,
        tensor_field: np.ndarray,
        return_converged: bool = False) -> Tuple[np.ndarray, ...]:
        """
        Decompose a field of matrices point by point.

        Args:
            tensor_field (np.ndarray): field of shape (n, n, ...) where the first two
                indices are the matrix components, e.g. (3, 3, Nx, Ny, Nz)
            return_converged (bool, optional): also return the per point convergence
                mask. Defaults to False.

        Returns:
            eigenvalues_real: Array of shape (n, ...)
            eigenvalues_imag: Array of shape (n, ...)
            eigenvectors: Array of shape (n, n, ...), with eigenvectors[:, k, ...]
                          the k-th eigenvector (the columns of V at each point)
            converged: Boolean array of shape (...), False where an iteration cap
                       was hit. Only returned if return_converged is True.

        Raises:
            NonConvergenceError: if on_nonconvergence="raise" and any point hit an
                iteration cap. The convergence mask travels on the error.
        """
        tensor_field = np.asarray(tensor_field)
        if tensor_field.ndim < 2 or tensor_field.shape[0] != tensor_field.shape[1]:
            raise ValueError("Tensor must be square (first two dimensions must match)")
        n = tensor_field.shape[0]
        if n == 0:
            raise ValueError("Tensor must have at least one component")
        if np.iscomplexobj(tensor_field):
            raise ValueError("Complex tensor fields are not supported")
        spatial_shape = tensor_field.shape[2:]

        # Move tensor indices to the end and flatten the grid
        matrices = np.ascontiguousarray(
            np.moveaxis(tensor_field, [0, 1], [-2, -1]).reshape(-1, n, n),
            dtype=np.float64)
        if not np.all(np.isfinite(matrices)):
            raise ValueError("Tensor field contains NaN or infinite entries")
        n_points = matrices.shape[0]

        d = np.zeros((n_points, n), dtype=np.float64)
        e = np.zeros((n_points, n), dtype=np.float64)
        V = np.zeros((n_points, n, n), dtype=np.float64)
        symmetric = np.zeros(n_points, dtype=np.bool_)
        converged = np.zeros(n_points, dtype=np.bool_)

        if self.use_numba:
            eigendecomposition_field_nb_core(
                matrices, d, e, V, symmetric, converged,
                self.max_iterations, self.symmetry_tol)
        else:
            for p in range(n_points):
                symmetric[p], converged[p] = eigendecomposition_np_core(
                    matrices[p], d[p], e[p], V[p],
                    self.max_iterations, self.symmetry_tol)

        if self.debug:
            print(f"Decomposed {n_points} {n}x{n} matrices "
                  f"({np.count_nonzero(symmetric)} symmetric)")

        # Rearrange axes to match the input field layout
        eigenvalues_real = d.T.reshape((n,) + spatial_shape)
        eigenvalues_imag = e.T.reshape((n,) + spatial_shape)
        eigenvectors = np.moveaxis(
            V.reshape(spatial_shape + (n, n)), [-2, -1], [0, 1])

        converged = converged.reshape(spatial_shape)

        n_failed = n_points - np.count_nonzero(converged)
        if n_failed:
            self._handle_nonconvergence(
                eigenvalues_real, eigenvalues_imag, eigenvectors,
                what=f"{n_failed} of {n_points} grid points",
                converged=converged)

        if return_converged:
            return eigenvalues_real, eigenvalues_imag, eigenvectors, converged
        return eigenvalues_real, eigenvalues_imag, eigenvectors


def eigendecomposition(
    matrix: np.ndarray,
    max_iterations: int = MAX_ITERATIONS,
    symmetry_tol: float = SYMMETRY_TOL,
    on_nonconvergence: str = DEFAULT_NONCONVERGENCE_POLICY,
    use_numba: bool = True,
    debug: bool = False) -> EigenDecomposition:
    """
    Compute the eigen decomposition A V = V D of a dense real square matrix.

    Shortcut for EigenDecompositionOperations(...).decompose(matrix), see there
    for the arguments.
    """
    return EigenDecompositionOperations(
        use_numba=use_numba,
        max_iterations=max_iterations,
        symmetry_tol=symmetry_tol,
        on_nonconvergence=on_nonconvergence,
        debug=debug)._decompose(matrix, stacklevel=4)
