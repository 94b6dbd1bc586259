import math
from numba import njit, prange
import numpy as np
from .constants import *
from ..matrix.core_functions import (
    is_symmetric_nb_core,
    is_symmetric_np_core,
    symmetric_part_nb_core,
    symmetric_part_np_core
)

##########################################################################################
# Core numba JIT functions for dense eigen decomposition
#
# Householder tridiagonalisation + implicit QL (symmetric) and Hessenberg reduction +
# Francis double shift QR (nonsymmetric), following
#   Wilkinson, J. H. & Reinsch, C. (1971), Handbook for Automatic Computation II
# as carried by the JAMA / TNT libraries.
#
# Every kernel works in place on buffers owned by the caller and allocates any scratch
# locally, so independent decompositions can run on separate threads (nogil=True).
# No fastmath: the deflation tests rely on strict IEEE comparisons.
##########################################################################################


@njit(cache=True, nogil=True)
def cdiv_nb_core(xr, xi, yr, yi):
    """
    Complex division (xr + i xi) / (yr + i yi) without intermediate overflow.

    Scales by the larger of |yr|, |yi| before dividing (Smith's algorithm).
    A zero divisor is replaced by machine epsilon so the quotient stays finite.

    Returns:
        (real, imag) parts of the quotient
    """
    if yr == 0.0 and yi == 0.0:
        yr = EPSILON
    if abs(yr) > abs(yi):
        r = yi / yr
        den = yr + r * yi
        return (xr + r * xi) / den, (xi - r * xr) / den
    r = yr / yi
    den = yi + r * yr
    return (r * xr + xi) / den, (r * xi - xr) / den


@njit(cache=True, nogil=True)
def tred2_nb_core(V, d, e):
    """
    Householder reduction of a symmetric matrix to tridiagonal form.

    Args:
        V: On entry the symmetric matrix (n, n). On exit the accumulated
           orthogonal transform.
        d: Output diagonal of the tridiagonal matrix (n,)
        e: Output subdiagonal in e[1:], with e[0] = 0 (n,)
    """
    n = V.shape[0]

    for j in range(n):
        d[j] = V[n - 1, j]

    for i in range(n - 1, 0, -1):
        # scale to avoid under/overflow
        scale = 0.0
        h = 0.0
        for k in range(i):
            scale += abs(d[k])

        if scale == 0.0:
            # row already reduced, skip the reflection
            e[i] = d[i - 1]
            for j in range(i):
                d[j] = V[i - 1, j]
                V[i, j] = 0.0
                V[j, i] = 0.0
        else:
            # generate Householder vector
            for k in range(i):
                d[k] /= scale
                h += d[k] * d[k]
            f = d[i - 1]
            g = np.sqrt(h)
            if f > 0:
                g = -g
            e[i] = scale * g
            h = h - f * g
            d[i - 1] = f - g
            for j in range(i):
                e[j] = 0.0

            # apply similarity transformation to remaining columns
            for j in range(i):
                f = d[j]
                V[j, i] = f
                g = e[j] + V[j, j] * f
                for k in range(j + 1, i):
                    g += V[k, j] * d[k]
                    e[k] += V[k, j] * f
                e[j] = g
            f = 0.0
            for j in range(i):
                e[j] /= h
                f += e[j] * d[j]
            hh = f / (h + h)
            for j in range(i):
                e[j] -= hh * d[j]
            for j in range(i):
                f = d[j]
                g = e[j]
                for k in range(j, i):
                    V[k, j] -= (f * e[k] + g * d[k])
                d[j] = V[i - 1, j]
                V[i, j] = 0.0
        d[i] = h

    # accumulate transformations
    for i in range(n - 1):
        V[n - 1, i] = V[i, i]
        V[i, i] = 1.0
        h = d[i + 1]
        if h != 0.0:
            for k in range(i + 1):
                d[k] = V[k, i + 1] / h
            for j in range(i + 1):
                g = 0.0
                for k in range(i + 1):
                    g += V[k, i + 1] * V[k, j]
                for k in range(i + 1):
                    V[k, j] -= g * d[k]
        for k in range(i + 1):
            V[k, i + 1] = 0.0

    for j in range(n):
        d[j] = V[n - 1, j]
        V[n - 1, j] = 0.0
    V[n - 1, n - 1] = 1.0
    e[0] = 0.0


@njit(cache=True, nogil=True)
def tql2_nb_core(V, d, e, max_iterations):
    """
    Symmetric tridiagonal QL algorithm with implicit shifts.

    Drives the tridiagonal matrix (d, e) from tred2_nb_core to diagonal form,
    rotating the columns of V alongside, then sorts the eigenvalues ascending
    (ties keep their index order) and permutes V's columns to match.

    Args:
        V: Orthogonal transform from tred2_nb_core (n, n), overwritten with eigenvectors
        d: Diagonal (n,), overwritten with the eigenvalues
        e: Subdiagonal in e[1:] (n,), overwritten with zeros
        max_iterations: QL sweeps allowed per eigenvalue

    Returns:
        False if any eigenvalue hit max_iterations, True otherwise
    """
    n = V.shape[0]
    converged = True

    for i in range(1, n):
        e[i - 1] = e[i]
    e[n - 1] = 0.0

    f = 0.0
    tst1 = 0.0
    for l in range(n):
        # find small subdiagonal element
        tst1 = max(tst1, abs(d[l]) + abs(e[l]))
        m = l
        while m < n - 1:
            if abs(e[m]) <= EPSILON * tst1:
                break
            m += 1

        # m == l means d[l] is already an eigenvalue, otherwise iterate
        if m > l:
            iteration = 0
            while True:
                iteration += 1

                # compute implicit shift
                g = d[l]
                p = (d[l + 1] - g) / (2.0 * e[l])
                r = np.hypot(p, 1.0)
                if p < 0:
                    r = -r
                d[l] = e[l] / (p + r)
                d[l + 1] = e[l] * (p + r)
                dl1 = d[l + 1]
                h = g - d[l]
                for i in range(l + 2, n):
                    d[i] -= h
                f = f + h

                # implicit QL transformation
                p = d[m]
                c = 1.0
                c2 = c
                c3 = c
                el1 = e[l + 1]
                s = 0.0
                s2 = 0.0
                for i in range(m - 1, l - 1, -1):
                    c3 = c2
                    c2 = c
                    s2 = s
                    g = c * e[i]
                    h = c * p
                    r = np.hypot(p, e[i])
                    e[i + 1] = s * r
                    s = e[i] / r
                    c = p / r
                    p = c * d[i] - s * g
                    d[i + 1] = h + s * (c * g + s * d[i])

                    # accumulate transformation
                    for k in range(n):
                        h = V[k, i + 1]
                        V[k, i + 1] = s * V[k, i] + c * h
                        V[k, i] = c * V[k, i] - s * h

                p = -s * s2 * c3 * el1 * e[l] / dl1
                e[l] = s * p
                d[l] = c * p

                # check for convergence
                if abs(e[l]) <= EPSILON * tst1:
                    break
                if iteration >= max_iterations:
                    converged = False
                    break

        d[l] = d[l] + f
        e[l] = 0.0

    # sort eigenvalues and corresponding vectors, stable on ties
    order = np.argsort(d, kind='mergesort')
    d_sorted = np.empty(n)
    V_sorted = np.empty((n, n))
    for j in range(n):
        d_sorted[j] = d[order[j]]
        for i in range(n):
            V_sorted[i, j] = V[i, order[j]]
    for j in range(n):
        d[j] = d_sorted[j]
        for i in range(n):
            V[i, j] = V_sorted[i, j]

    return converged


@njit(cache=True, nogil=True)
def orthes_nb_core(H, V, ort):
    """
    Nonsymmetric reduction to upper Hessenberg form by orthogonal similarity.

    Each working column is scaled by the sum of its magnitudes before the
    Householder vector is formed. The orthogonal transform is accumulated
    into V in reverse order once the reduction is complete.

    Args:
        H: On entry the matrix (n, n). On exit its Hessenberg form; entries
           below the first subdiagonal hold Householder data.
        V: Output accumulated orthogonal transform (n, n)
        ort: Householder scratch vector (n,)
    """
    n = H.shape[0]
    low = 0
    high = n - 1

    for m in range(low + 1, high):
        scale = 0.0
        for i in range(m, high + 1):
            scale += abs(H[i, m - 1])

        if scale != 0.0:
            # compute Householder transformation
            h = 0.0
            for i in range(high, m - 1, -1):
                ort[i] = H[i, m - 1] / scale
                h += ort[i] * ort[i]
            g = np.sqrt(h)
            if ort[m] > 0:
                g = -g
            h = h - ort[m] * g
            ort[m] = ort[m] - g

            # apply Householder similarity transformation
            # H = (I - u u'/h) H (I - u u'/h)
            for j in range(m, n):
                f = 0.0
                for i in range(high, m - 1, -1):
                    f += ort[i] * H[i, j]
                f = f / h
                for i in range(m, high + 1):
                    H[i, j] -= f * ort[i]

            for i in range(high + 1):
                f = 0.0
                for j in range(high, m - 1, -1):
                    f += ort[j] * H[i, j]
                f = f / h
                for j in range(m, high + 1):
                    H[i, j] -= f * ort[j]

            ort[m] = scale * ort[m]
            H[m, m - 1] = scale * g

    # accumulate transformations (Algol's ortran)
    for i in range(n):
        for j in range(n):
            V[i, j] = 1.0 if i == j else 0.0

    for m in range(high - 1, low, -1):
        if H[m, m - 1] != 0.0:
            for i in range(m + 1, high + 1):
                ort[i] = H[i, m - 1]
            for j in range(m, high + 1):
                g = 0.0
                for i in range(m, high + 1):
                    g += ort[i] * V[i, j]
                # double division avoids possible underflow
                g = (g / ort[m]) / H[m, m - 1]
                for i in range(m, high + 1):
                    V[i, j] += g * ort[i]


@njit(cache=True, nogil=True)
def hqr2_nb_core(H, V, d, e, max_iterations):
    """
    Reduction from upper Hessenberg to real Schur form by Francis double shift QR,
    followed by back-substitution for the eigenvectors.

    Works on the active window [l, n] of H. A window that has not split after
    WILKINSON_SHIFT_ITERATION or MATLAB_SHIFT_ITERATION sweeps gets an exceptional
    shift. A window that reaches max_iterations sweeps is deflated by force at its
    trailing 2x2 block and the decomposition is flagged as not converged.

    Args:
        H: Hessenberg matrix from orthes_nb_core (n, n), destroyed
        V: Transform from orthes_nb_core (n, n), overwritten with eigenvectors
        d: Output real parts of the eigenvalues (n,)
        e: Output imaginary parts of the eigenvalues (n,), conjugate pairs
           stored as (+v, -v) at adjacent indices
        max_iterations: QR sweeps allowed per deflation window

    Returns:
        False if any window hit max_iterations, True otherwise
    """
    nn = H.shape[0]
    n = nn - 1
    low = 0
    high = nn - 1
    converged = True
    exshift = 0.0
    p = 0.0
    q = 0.0
    r = 0.0
    s = 0.0
    z = 0.0
    t = 0.0
    w = 0.0
    x = 0.0
    y = 0.0

    # matrix norm, used when the local scale vanishes
    norm = 0.0
    for i in range(nn):
        for j in range(max(i - 1, 0), nn):
            norm += abs(H[i, j])

    # outer loop over eigenvalue index
    iteration = 0
    while n >= low:

        # look for single small subdiagonal element
        l = n
        while l > low:
            s = abs(H[l - 1, l - 1]) + abs(H[l, l])
            if s == 0.0:
                s = norm
            if abs(H[l, l - 1]) < EPSILON * s:
                break
            l -= 1

        if l < n - 1 and iteration >= max_iterations:
            # iteration cap reached, split off the trailing 2x2 block
            converged = False
            l = n - 1
            H[l, l - 1] = 0.0

        if l == n:
            # one root found
            H[n, n] = H[n, n] + exshift
            d[n] = H[n, n]
            e[n] = 0.0
            n -= 1
            iteration = 0

        elif l == n - 1:
            # two roots found
            w = H[n, n - 1] * H[n - 1, n]
            p = (H[n - 1, n - 1] - H[n, n]) / 2.0
            q = p * p + w
            z = np.sqrt(abs(q))
            H[n, n] = H[n, n] + exshift
            H[n - 1, n - 1] = H[n - 1, n - 1] + exshift
            x = H[n, n]

            if q >= 0:
                # real pair
                if p >= 0:
                    z = p + z
                else:
                    z = p - z
                d[n - 1] = x + z
                d[n] = d[n - 1]
                if z != 0.0:
                    d[n] = x - w / z
                e[n - 1] = 0.0
                e[n] = 0.0
                x = H[n, n - 1]
                s = abs(x) + abs(z)
                # s == 0 only for an all-zero block, which is already triangular
                if s != 0.0:
                    p = x / s
                    q = z / s
                    r = np.sqrt(p * p + q * q)
                    p = p / r
                    q = q / r

                    # row modification
                    for j in range(n - 1, nn):
                        z = H[n - 1, j]
                        H[n - 1, j] = q * z + p * H[n, j]
                        H[n, j] = q * H[n, j] - p * z

                    # column modification
                    for i in range(n + 1):
                        z = H[i, n - 1]
                        H[i, n - 1] = q * z + p * H[i, n]
                        H[i, n] = q * H[i, n] - p * z

                    # accumulate transformations
                    for i in range(low, high + 1):
                        z = V[i, n - 1]
                        V[i, n - 1] = q * z + p * V[i, n]
                        V[i, n] = q * V[i, n] - p * z

            else:
                # complex pair
                d[n - 1] = x + p
                d[n] = x + p
                e[n - 1] = z
                e[n] = -z
            n = n - 2
            iteration = 0

        else:
            # no convergence yet, form shift
            x = H[n, n]
            y = 0.0
            w = 0.0
            if l < n:
                y = H[n - 1, n - 1]
                w = H[n, n - 1] * H[n - 1, n]

            # Wilkinson's original ad hoc shift
            if iteration == WILKINSON_SHIFT_ITERATION:
                exshift += x
                for i in range(low, n + 1):
                    H[i, i] -= x
                s = abs(H[n, n - 1]) + abs(H[n - 1, n - 2])
                x = 0.75 * s
                y = x
                w = -0.4375 * s * s

            # MATLAB's ad hoc shift
            if iteration == MATLAB_SHIFT_ITERATION:
                s = (y - x) / 2.0
                s = s * s + w
                if s > 0:
                    s = np.sqrt(s)
                    if y < x:
                        s = -s
                    s = x - w / ((y - x) / 2.0 + s)
                    for i in range(low, n + 1):
                        H[i, i] -= s
                    exshift += s
                    x = 0.964
                    y = x
                    w = x

            iteration += 1

            # look for two consecutive small subdiagonal elements
            m = n - 2
            while m >= l:
                z = H[m, m]
                r = x - z
                s = y - z
                p = (r * s - w) / H[m + 1, m] + H[m, m + 1]
                q = H[m + 1, m + 1] - z - r - s
                r = H[m + 2, m + 1]
                s = abs(p) + abs(q) + abs(r)
                p = p / s
                q = q / s
                r = r / s
                if m == l:
                    break
                if (abs(H[m, m - 1]) * (abs(q) + abs(r)) <
                        EPSILON * (abs(p) * (abs(H[m - 1, m - 1]) + abs(z) + abs(H[m + 1, m + 1])))):
                    break
                m -= 1

            for i in range(m + 2, n + 1):
                H[i, i - 2] = 0.0
                if i > m + 2:
                    H[i, i - 3] = 0.0

            # double QR step involving rows l:n and columns m:n
            for k in range(m, n):
                notlast = k != n - 1
                if k != m:
                    p = H[k, k - 1]
                    q = H[k + 1, k - 1]
                    r = H[k + 2, k - 1] if notlast else 0.0
                    x = abs(p) + abs(q) + abs(r)
                    if x == 0.0:
                        continue
                    p = p / x
                    q = q / x
                    r = r / x

                s = np.sqrt(p * p + q * q + r * r)
                if p < 0:
                    s = -s
                if s != 0:
                    if k != m:
                        H[k, k - 1] = -s * x
                    elif l != m:
                        H[k, k - 1] = -H[k, k - 1]
                    p = p + s
                    x = p / s
                    y = q / s
                    z = r / s
                    q = q / p
                    r = r / p

                    # row modification
                    for j in range(k, nn):
                        p = H[k, j] + q * H[k + 1, j]
                        if notlast:
                            p = p + r * H[k + 2, j]
                            H[k + 2, j] = H[k + 2, j] - p * z
                        H[k, j] = H[k, j] - p * x
                        H[k + 1, j] = H[k + 1, j] - p * y

                    # column modification
                    for i in range(min(n, k + 3) + 1):
                        p = x * H[i, k] + y * H[i, k + 1]
                        if notlast:
                            p = p + z * H[i, k + 2]
                            H[i, k + 2] = H[i, k + 2] - p * r
                        H[i, k] = H[i, k] - p
                        H[i, k + 1] = H[i, k + 1] - p * q

                    # accumulate transformations
                    for i in range(low, high + 1):
                        p = x * V[i, k] + y * V[i, k + 1]
                        if notlast:
                            p = p + z * V[i, k + 2]
                            V[i, k + 2] = V[i, k + 2] - p * r
                        V[i, k] = V[i, k] - p
                        V[i, k + 1] = V[i, k + 1] - p * q

    # back-substitute to find vectors of upper triangular form
    if norm == 0.0:
        return converged

    for n in range(nn - 1, -1, -1):
        p = d[n]
        q = e[n]

        if q == 0:
            # real vector
            l = n
            H[n, n] = 1.0
            for i in range(n - 1, -1, -1):
                w = H[i, i] - p
                r = 0.0
                for j in range(l, n + 1):
                    r = r + H[i, j] * H[j, n]
                if e[i] < 0.0:
                    z = w
                    s = r
                else:
                    l = i
                    if e[i] == 0.0:
                        if w != 0.0:
                            H[i, n] = -r / w
                        else:
                            H[i, n] = -r / (EPSILON * norm)
                    else:
                        # solve real equations
                        x = H[i, i + 1]
                        y = H[i + 1, i]
                        q = (d[i] - p) * (d[i] - p) + e[i] * e[i]
                        t = (x * s - z * r) / q
                        H[i, n] = t
                        if abs(x) > abs(z):
                            H[i + 1, n] = (-r - w * t) / x
                        else:
                            H[i + 1, n] = (-s - y * t) / z

                    # overflow control
                    t = abs(H[i, n])
                    if (EPSILON * t) * t > 1:
                        for j in range(i, n + 1):
                            H[j, n] = H[j, n] / t

        elif q < 0:
            # complex vector, last component chosen imaginary so the system is triangular
            l = n - 1
            if abs(H[n, n - 1]) > abs(H[n - 1, n]):
                H[n - 1, n - 1] = q / H[n, n - 1]
                H[n - 1, n] = -(H[n, n] - p) / H[n, n - 1]
            else:
                H[n - 1, n - 1], H[n - 1, n] = cdiv_nb_core(
                    0.0, -H[n - 1, n], H[n - 1, n - 1] - p, q)
            H[n, n - 1] = 0.0
            H[n, n] = 1.0
            for i in range(n - 2, -1, -1):
                ra = 0.0
                sa = 0.0
                for j in range(l, n + 1):
                    ra = ra + H[i, j] * H[j, n - 1]
                    sa = sa + H[i, j] * H[j, n]
                w = H[i, i] - p

                if e[i] < 0.0:
                    z = w
                    r = ra
                    s = sa
                else:
                    l = i
                    if e[i] == 0:
                        H[i, n - 1], H[i, n] = cdiv_nb_core(-ra, -sa, w, q)
                    else:
                        # solve complex equations
                        x = H[i, i + 1]
                        y = H[i + 1, i]
                        vr = (d[i] - p) * (d[i] - p) + e[i] * e[i] - q * q
                        vi = (d[i] - p) * 2.0 * q
                        if vr == 0.0 and vi == 0.0:
                            vr = EPSILON * norm * (abs(w) + abs(q) + abs(x) + abs(y) + abs(z))
                        H[i, n - 1], H[i, n] = cdiv_nb_core(
                            x * r - z * ra + q * sa,
                            x * s - z * sa - q * ra,
                            vr, vi)
                        if abs(x) > (abs(z) + abs(q)):
                            H[i + 1, n - 1] = (-ra - w * H[i, n - 1] + q * H[i, n]) / x
                            H[i + 1, n] = (-sa - w * H[i, n] - q * H[i, n - 1]) / x
                        else:
                            H[i + 1, n - 1], H[i + 1, n] = cdiv_nb_core(
                                -r - y * H[i, n - 1], -s - y * H[i, n], z, q)

                    # overflow control
                    t = max(abs(H[i, n - 1]), abs(H[i, n]))
                    if (EPSILON * t) * t > 1:
                        for j in range(i, n + 1):
                            H[j, n - 1] = H[j, n - 1] / t
                            H[j, n] = H[j, n] / t

    # back transformation to get eigenvectors of the original matrix
    for j in range(nn - 1, low - 1, -1):
        for i in range(low, high + 1):
            z = 0.0
            for k in range(low, min(j, high) + 1):
                z = z + V[i, k] * H[k, j]
            V[i, j] = z

    return converged


@njit(cache=True, nogil=True)
def power_of_two_scale_nb_core(matrix):
    """
    Power of two 2**k with 2**k <= max|A| < 2**(k+1), or 1 for a zero matrix.

    Dividing by it is exact and brings the entries to unit magnitude, so the
    products formed by the QL / QR sweeps cannot overflow or underflow.
    """
    amax = 0.0
    for i in range(matrix.shape[0]):
        for j in range(matrix.shape[1]):
            a = abs(matrix[i, j])
            if a > amax:
                amax = a
    if amax == 0.0:
        return 1.0
    exponent = math.frexp(amax)[1] - 1
    return math.ldexp(1.0, exponent)


@njit(eigendecomposition_sig_64, cache=True, nogil=True)
def eigendecomposition_nb_core(matrix, d, e, V, max_iterations, symmetry_tol):
    """
    Eigen decomposition A V = V D of a dense real square matrix.

    Symmetric input (within symmetry_tol) goes through tred2 + tql2 on the
    symmetric part of the matrix. Anything else goes through orthes + hqr2 on a
    local Hessenberg buffer. The input matrix is only read.

    Both pipelines run on A / 2**k with 2**k from power_of_two_scale_nb_core;
    the eigenvalues are scaled back at the end and V is unaffected.

    Args:
        matrix: Input matrix (n, n)
        d: Output real parts of the eigenvalues (n,)
        e: Output imaginary parts of the eigenvalues (n,)
        V: Output eigenvectors, one per column (n, n)
        max_iterations: QL / QR sweeps allowed per eigenvalue
        symmetry_tol: relative tolerance for the symmetry test

    Returns:
        (symmetric, converged)
    """
    n = matrix.shape[0]
    symmetric = is_symmetric_nb_core(matrix, symmetry_tol)
    scale = power_of_two_scale_nb_core(matrix)

    if symmetric:
        symmetric_part_nb_core(matrix, V)
        for i in range(n):
            for j in range(n):
                V[i, j] = V[i, j] / scale
        tred2_nb_core(V, d, e)
        converged = tql2_nb_core(V, d, e, max_iterations)
    else:
        H = np.empty((n, n))
        ort = np.zeros(n)
        for i in range(n):
            for j in range(n):
                H[i, j] = matrix[i, j] / scale
        orthes_nb_core(H, V, ort)
        converged = hqr2_nb_core(H, V, d, e, max_iterations)

    for i in range(n):
        d[i] = d[i] * scale
        e[i] = e[i] * scale

    return symmetric, converged


@njit(eigendecomposition_field_sig_64, parallel=True, cache=True)
def eigendecomposition_field_nb_core(
    matrices,
    d,
    e,
    V,
    symmetric,
    converged,
    max_iterations,
    symmetry_tol):
    """
    Independent eigen decompositions of a stack of matrices, one per grid point.

    Args:
        matrices: Input matrices (Npoints, n, n)
        d: Output real parts (Npoints, n)
        e: Output imaginary parts (Npoints, n)
        V: Output eigenvectors (Npoints, n, n)
        symmetric: Output symmetry flags (Npoints,)
        converged: Output convergence flags (Npoints,)
        max_iterations: QL / QR sweeps allowed per eigenvalue
        symmetry_tol: relative tolerance for the symmetry test
    """
    for p in prange(matrices.shape[0]):
        sym, conv = eigendecomposition_nb_core(
            matrices[p], d[p], e[p], V[p], max_iterations, symmetry_tol)
        symmetric[p] = sym
        converged[p] = conv


##########################################################################################
# Interpreted fallback, same kernels run as plain Python
##########################################################################################


def eigendecomposition_np_core(
    matrix : np.ndarray,
    d : np.ndarray,
    e : np.ndarray,
    V : np.ndarray,
    max_iterations : int,
    symmetry_tol : float) -> tuple:
    """
    Interpreted version of eigendecomposition_nb_core, for debugging the kernels.

    Runs the Python source of each stage (.py_func) instead of the compiled code.
    """
    n = matrix.shape[0]
    symmetric = is_symmetric_np_core(matrix, symmetry_tol)
    scale = power_of_two_scale_nb_core.py_func(matrix)

    if symmetric:
        V[...] = symmetric_part_np_core(matrix) / scale
        tred2_nb_core.py_func(V, d, e)
        converged = tql2_nb_core.py_func(V, d, e, max_iterations)
    else:
        H = matrix.astype(np.float64, copy=True) / scale
        ort = np.zeros(n)
        orthes_nb_core.py_func(H, V, ort)
        converged = hqr2_nb_core.py_func(H, V, d, e, max_iterations)

    d *= scale
    e *= scale
    return symmetric, bool(converged)
