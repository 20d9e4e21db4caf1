"""Field parameters exposed to transform and protocol layers.

``FieldParams`` bundles the modulus, the multiplicative generator and the
number of primitive roots into one validated, read-only object.  Layers
that build roots of unity take these values from here (or from
``fftfield.config``) rather than hard-coding them.

The modulus is fixed: only MODULUS is accepted.  ``generator`` must have
multiplicative order exactly ``n_roots``; ``FieldParams.for_roots(n)``
derives the matching generator of a smaller 2-power subgroup.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from fftfield.config import GENERATOR, MODULUS, N_ROOTS


class FieldParams(BaseModel):
    """Constants of the prime field."""

    model_config = ConfigDict(frozen=True)

    modulus: int = MODULUS
    generator: int = GENERATOR
    n_roots: int = N_ROOTS

    @model_validator(mode="after")
    def _check(self) -> "FieldParams":
        if self.modulus != MODULUS:
            raise ValueError(f"modulus is fixed to {MODULUS}, got {self.modulus}")
        if not 1 <= self.generator < self.modulus:
            raise ValueError(f"generator must lie in [1, modulus), got {self.generator}")
        if self.n_roots < 1 or self.n_roots & (self.n_roots - 1):
            raise ValueError(f"n_roots must be a power of two, got {self.n_roots}")
        if (self.modulus - 1) % self.n_roots:
            raise ValueError(
                f"n_roots={self.n_roots} does not divide modulus - 1 = {self.modulus - 1}"
            )
        # order is a power of two, so it is exactly n_roots iff
        # g^n == 1 and g^(n/2) == -1
        if pow(self.generator, self.n_roots, self.modulus) != 1:
            raise ValueError(
                f"generator {self.generator} does not have order dividing n_roots={self.n_roots}"
            )
        if self.n_roots > 1 and pow(self.generator, self.n_roots // 2, self.modulus) != self.modulus - 1:
            raise ValueError(
                f"generator {self.generator} has order smaller than n_roots={self.n_roots}"
            )
        return self

    @classmethod
    def for_roots(cls, n_roots: int) -> "FieldParams":
        """Parameters for the subgroup of order *n_roots* (a power of two <= N_ROOTS)."""
        if n_roots < 1 or N_ROOTS % n_roots:
            raise ValueError(f"n_roots must be a power of two dividing {N_ROOTS}, got {n_roots}")
        return cls(generator=pow(GENERATOR, N_ROOTS // n_roots, MODULUS), n_roots=n_roots)

    @property
    def two_adicity(self) -> int:
        """Largest k such that 2^k divides modulus - 1."""
        k = 0
        m = self.modulus - 1
        while m % 2 == 0:
            m //= 2
            k += 1
        return k


DEFAULT_PARAMS = FieldParams()
