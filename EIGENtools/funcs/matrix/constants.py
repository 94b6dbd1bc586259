from numba import types

##############################################################################
# Global constants
##############################################################################

ROW, COL = 0, 1      # indexes
EPSILON = 2.0**-52   # double precision unit roundoff


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Signature for the symmetric part, written into a caller buffer
sig_symmetric_part_64 = types.void(
    types.float64[:,:],           # matrix: (n, n)
    types.float64[:,:],           # out: (n, n)
    )

# Signatures for the symmetry test
sig_is_symmetric_32 = types.boolean(
    types.float32[:,:],           # matrix: (n, n)
    types.float64,                # tolerance relative to max |a_ij|
    )
sig_is_symmetric_64 = types.boolean(
    types.float64[:,:],           # matrix: (n, n)
    types.float64,                # tolerance relative to max |a_ij|
    )

# Signatures for the Frobenius norm
sig_frobenius_norm_32 = types.float64(
    types.float32[:,:]
    )
sig_frobenius_norm_64 = types.float64(
    types.float64[:,:]
    )

# Signatures for block diagonal assembly from eigenvalue pairs
sig_block_diagonal_64 = types.void(
    types.float64[:],             # real parts d: (n,)
    types.float64[:],             # imaginary parts e: (n,)
    types.float64[:,:],           # out: (n, n)
    )
