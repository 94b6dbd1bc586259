"""
Exceptions and warnings raised by the eigen decomposition module.
"""

import numpy as np
from typing import Optional


class NonConvergenceWarning(RuntimeWarning):
    """Issued when a QL/QR window hit the iteration cap and the result is approximate."""


class NonConvergenceError(RuntimeError):
    """
    Raised (with on_nonconvergence="raise") when a QL/QR window hit the iteration cap.

    The partially converged eigenvalues and eigenvectors are carried on the
    exception so callers can inspect or reuse them.

    Attributes:
        d (np.ndarray): real parts of the eigenvalues computed so far
        e (np.ndarray): imaginary parts of the eigenvalues computed so far
        V (np.ndarray): eigenvector matrix computed so far
        max_iterations (int): the cap that was exceeded
        converged (np.ndarray): per point convergence mask, for field decompositions
    """

    def __init__(
        self,
        message: str,
        d: Optional[np.ndarray] = None,
        e: Optional[np.ndarray] = None,
        V: Optional[np.ndarray] = None,
        max_iterations: Optional[int] = None,
        converged: Optional[np.ndarray] = None):
        super().__init__(message)
        self.d = d
        self.e = e
        self.V = V
        self.max_iterations = max_iterations
        self.converged = converged
