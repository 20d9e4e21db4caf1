"""Global configuration for fftfield."""

import os

# ---------- Finite-field prime (FFT-friendly 32-bit prime) ----------
# p = 2^32 - 2^20 + 1, so p - 1 = 2^20 * 4095.  All arithmetic is mod MODULUS.
MODULUS = 4293918721

# ---------- Roots of unity (consumed by transform layers) ----------
GENERATOR = 3925978153   # generator for the multiplicative subgroup
N_ROOTS = 1 << 20        # number of primitive roots

# ---------- Raw integer conversion ----------
U32_MAX = (1 << 32) - 1

# ---------- Wire encoding ----------
ENCODED_SIZE = 4         # bytes per element
BYTE_ORDER = "little"

# "reduce" folds raw values >= MODULUS back into the field,
# "reject" refuses them.  Override with FFTFIELD_DECODE_POLICY.
DECODE_POLICIES = ("reduce", "reject")
DECODE_POLICY = os.environ.get("FFTFIELD_DECODE_POLICY", "reduce")
