from numba import types

##############################################################################
# Global constants
##############################################################################

EPSILON = 2.0**-52             # double precision unit roundoff
MAX_ITERATIONS = 30            # QL / QR sweeps allowed per eigenvalue (deflation window)
WILKINSON_SHIFT_ITERATION = 10 # sweep at which Wilkinson's ad hoc shift is injected
MATLAB_SHIFT_ITERATION = 20    # sweep at which the MATLAB ad hoc shift is injected
SYMMETRY_TOL = 16 * EPSILON    # |A_ij - A_ji| <= SYMMETRY_TOL * max|A| selects the symmetric path

# Policies when a window exceeds MAX_ITERATIONS
NONCONVERGENCE_POLICIES = ("warn", "ignore", "raise")
DEFAULT_NONCONVERGENCE_POLICY = "warn"


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Signature for a single dense decomposition, returns (symmetric, converged)
eigendecomposition_sig_64 = types.UniTuple(types.boolean, 2)(
    types.float64[:,:],           # matrix: (n, n), read only
    types.float64[:],             # d: (n,) real parts
    types.float64[:],             # e: (n,) imaginary parts
    types.float64[:,:],           # V: (n, n) eigenvectors, one per column
    types.int64,                  # max_iterations
    types.float64,                # symmetry_tol
)

# Signature for a field of independent decompositions
eigendecomposition_field_sig_64 = types.void(
    types.float64[:,:,:],         # matrices: (Npoints, n, n)
    types.float64[:,:],           # d: (Npoints, n)
    types.float64[:,:],           # e: (Npoints, n)
    types.float64[:,:,:],         # V: (Npoints, n, n)
    types.boolean[:],             # symmetric: (Npoints,)
    types.boolean[:],             # converged: (Npoints,)
    types.int64,                  # max_iterations
    types.float64,                # symmetry_tol
)
