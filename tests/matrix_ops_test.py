#!/usr/bin/env python3
import numpy as np
import pytest

from EIGENtools import MatrixOperations


def test_symmetric_part_kernels(rng):
    A = rng.standard_normal((5, 5))
    for use_numba in (True, False):
        mo = MatrixOperations(use_numba=use_numba)
        S = mo.symmetric_part(A)
        assert np.array_equal(S, S.T), "Symmetric part must be exactly symmetric"
        assert np.allclose(S, 0.5 * (A + A.T)), "Symmetric part failed!"

        out = np.full((5, 5), np.nan)
        assert mo.symmetric_part(A, out=out) is out
        assert np.array_equal(out, S)

        with pytest.raises(ValueError):
            mo.symmetric_part(np.zeros((2, 3)))
        with pytest.raises(ValueError):
            mo.symmetric_part(A, out=np.zeros((4, 4)))
    print("Symmetric part passed.")


def test_is_symmetric(rng):
    B = rng.standard_normal((5, 5))
    S = B + B.T
    for use_numba in (True, False):
        mo = MatrixOperations(use_numba=use_numba)
        assert mo.is_symmetric(S)
        assert not mo.is_symmetric(B)

        # perturb one entry at roundoff level
        P = S.copy()
        P[1, 3] += 4 * np.finfo(np.float64).eps * np.max(np.abs(S))
        assert not mo.is_symmetric(P), "Zero tolerance must ask for exact symmetry"
        assert mo.is_symmetric(P, tolerance=16 * np.finfo(np.float64).eps)

        assert mo.is_symmetric(np.zeros((3, 3))), "Zero matrix is symmetric"
        assert mo.is_symmetric(np.array([[7.0]]))

        with pytest.raises(ValueError):
            mo.is_symmetric(np.zeros((2, 3)))


def test_frobenius_norm(rng):
    A = rng.standard_normal((7, 3))
    for use_numba in (True, False):
        mo = MatrixOperations(use_numba=use_numba)
        assert np.isclose(mo.frobenius_norm(A), np.linalg.norm(A)), "Frobenius norm failed!"

        # squares of these entries overflow or underflow, the norm must not
        for s in (1e-200, 1e200, 1e300):
            assert np.isclose(mo.frobenius_norm(A * s) / s, np.linalg.norm(A)), \
                f"Frobenius norm lost at scale {s}"
        assert mo.frobenius_norm(np.zeros((2, 2))) == 0.0
    A32 = A.astype(np.float32)
    assert np.isclose(MatrixOperations().frobenius_norm(A32), np.linalg.norm(A32), rtol=1e-6)


def test_block_diagonal():
    d = np.array([3.0, 1.0, 1.0, -2.0])
    e = np.array([0.0, 2.0, -2.0, 0.0])
    expected = np.array([[3.0, 0.0, 0.0, 0.0],
                         [0.0, 1.0, 2.0, 0.0],
                         [0.0, -2.0, 1.0, 0.0],
                         [0.0, 0.0, 0.0, -2.0]])
    for use_numba in (True, False):
        mo = MatrixOperations(use_numba=use_numba)
        assert np.array_equal(mo.block_diagonal(d, e), expected), "Block diagonal D failed!"

        # stale contents of the buffer must be overwritten
        out = np.full((4, 4), np.nan)
        assert mo.block_diagonal(d, e, out=out) is out
        assert np.array_equal(out, expected)

        # real only: D is diagonal
        assert np.array_equal(mo.block_diagonal(d, np.zeros(4)), np.diag(d))


def test_block_diagonal_errors():
    mo = MatrixOperations()
    d = np.zeros(3)
    with pytest.raises(ValueError):
        mo.block_diagonal(d, np.zeros(2))
    with pytest.raises(ValueError):
        mo.block_diagonal(d, np.zeros(3), out=np.zeros((2, 2)))
    with pytest.raises(ValueError):
        mo.block_diagonal(d, np.zeros(3), out=np.zeros((3, 3), dtype=np.float32))


def test_read_only_inputs(rng):
    A = rng.standard_normal((4, 4))
    A = A + A.T
    A.flags.writeable = False
    mo = MatrixOperations()
    assert mo.is_symmetric(A)
    assert np.array_equal(mo.symmetric_part(A), A)
    assert np.isclose(mo.frobenius_norm(A), np.linalg.norm(A))

    d = np.array([1.0, 2.0])
    e = np.zeros(2)
    d.flags.writeable = False
    assert np.array_equal(mo.block_diagonal(d, e), np.diag([1.0, 2.0]))


def test_residual(rng):
    # A V = V D for a rotation block with V = I
    A = np.array([[0.5, 2.0],
                  [-2.0, 0.5]])
    mo = MatrixOperations()
    D = mo.block_diagonal(np.array([0.5, 0.5]), np.array([2.0, -2.0]))
    assert np.array_equal(mo.residual(A, np.eye(2), D), np.zeros((2, 2)))

    B = rng.standard_normal((3, 3))
    assert np.allclose(mo.residual(B, np.eye(3), np.zeros((3, 3))), B)
