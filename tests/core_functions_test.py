#!/usr/bin/env python3
import numpy as np

from EIGENtools.funcs.eigen_decomp import (
    cdiv_nb_core,
    tred2_nb_core,
    tql2_nb_core,
    orthes_nb_core,
    power_of_two_scale_nb_core
)


def test_cdiv(rng):
    for _ in range(20):
        xr, xi, yr, yi = rng.standard_normal(4)
        real, imag = cdiv_nb_core(xr, xi, yr, yi)
        q = complex(xr, xi) / complex(yr, yi)
        assert np.isclose(real, q.real) and np.isclose(imag, q.imag), "Complex division failed!"


def test_cdiv_no_overflow():
    # |y|^2 overflows, the scaled division does not
    real, imag = cdiv_nb_core(1e300, 0.0, 1e300, 1e300)
    assert np.isclose(real, 0.5) and np.isclose(imag, -0.5)


def test_cdiv_zero_divisor():
    real, imag = cdiv_nb_core(1.0, 1.0, 0.0, 0.0)
    assert np.isfinite(real) and np.isfinite(imag)


def test_tred2(rng):
    n = 6
    B = rng.standard_normal((n, n))
    A = B + B.T
    V = A.copy()
    d = np.zeros(n)
    e = np.zeros(n)
    tred2_nb_core(V, d, e)

    T = np.diag(d) + np.diag(e[1:], -1) + np.diag(e[1:], 1)
    assert np.allclose(V.T @ V, np.eye(n), atol=1e-12), "Householder transform not orthogonal!"
    assert np.allclose(V.T @ A @ V, T, atol=1e-12), "Tridiagonal form failed!"


def test_tql2_on_tridiagonal(rng):
    # tridiagonal input, eigenvectors start from the identity
    n = 5
    d = rng.standard_normal(n)
    sub = rng.standard_normal(n - 1)
    T = np.diag(d) + np.diag(sub, -1) + np.diag(sub, 1)
    e = np.concatenate(([0.0], sub))
    V = np.eye(n)
    converged = tql2_nb_core(V, d, e, 30)

    assert converged
    assert np.allclose(d, np.linalg.eigvalsh(T), atol=1e-12)
    assert np.allclose(T @ V, V @ np.diag(d), atol=1e-12)


def test_orthes(rng):
    n = 6
    A = rng.standard_normal((n, n))
    H = A.copy()
    V = np.zeros((n, n))
    ort = np.zeros(n)
    orthes_nb_core(H, V, ort)

    assert np.allclose(V.T @ V, np.eye(n), atol=1e-12), "Householder transform not orthogonal!"
    assert np.allclose(V.T @ A @ V, np.triu(H, -1), atol=1e-12), "Hessenberg form failed!"


def test_power_of_two_scale():
    for amax in (1.0, 3.0, 0.75, 1e-200, 1e300, np.finfo(np.float64).max, 5e-324):
        A = np.array([[amax, -0.5 * amax],
                      [0.0, 0.25 * amax]])
        scale = power_of_two_scale_nb_core(A)
        assert np.isfinite(scale) and scale > 0.0, f"Bad scale for {amax}"
        mantissa, _ = np.frexp(scale)
        assert mantissa == 0.5, "Scale must be an exact power of two"
        assert scale <= amax < 2.0 * scale, f"Scale {scale} does not bracket {amax}"
    assert power_of_two_scale_nb_core(np.zeros((3, 3))) == 1.0
    assert power_of_two_scale_nb_core(np.array([[-8.0]])) == 8.0
