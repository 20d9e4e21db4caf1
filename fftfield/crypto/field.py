"""Prime-field arithmetic F_p for the FFT-friendly prime p = 2^32 - 2^20 + 1.

A ``Field`` always holds its canonical representative in [0, MODULUS).
Every operation on two elements is total and never raises:

    inv(0) == 0        x / 0 == 0

These are deliberate conventions, not field axioms.  Code that needs a
real division-by-zero fault has to check for zero before dividing.

Exponents are field elements as well, so ``x ** e`` computes with
``e mod MODULUS``: an exponent of MODULUS behaves like 0.

API
---
from_u32(x) / to_u32(a)       conversion to and from raw u32 values
add, sub, mul, div, neg       arithmetic (same as the operators)
inv(a), exp(a, e)             inverse and exponentiation
random_element()              uniform sample via ``secrets``
"""

from __future__ import annotations

import secrets
from functools import total_ordering
from typing import Union

from fftfield.config import MODULUS, U32_MAX

Operand = Union["Field", int]


# --------------------------------------------------------------------------
# Arithmetic on canonical representatives
# --------------------------------------------------------------------------


def _sub(l: int, r: int) -> int:
    """l - r mod p.  *r* may be MODULUS itself (see ``_add``)."""
    if l >= r:
        return l - r
    return MODULUS - r + l


def _add(l: int, r: int) -> int:
    # a + b == a - (p - b); for b == 0 the subtrahend is p, which
    # _sub consumes without storing.
    return _sub(l, MODULUS - r)


def _mul(l: int, r: int) -> int:
    return (l * r) % MODULUS


def _inv(a: int) -> int:
    """Modular inverse by the extended Euclidean algorithm.

    Only the Bezout coefficient of *a* is tracked.  For a == 0 the loop
    ends with coefficient 0, which is the inverse-of-zero convention.
    """
    r0, r1 = a, MODULUS
    s0, s1 = 1, 0
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
    # |s0| < MODULUS, so one addition lands in range
    if s0 < 0:
        s0 += MODULUS
    return s0


def _pow(base: int, e: int) -> int:
    """Square-and-multiply, least significant bit first."""
    result = 1
    while e > 0:
        while e & 1 == 0:
            e >>= 1
            base = _mul(base, base)
        e -= 1
        result = _mul(result, base)
    return result


def _canonical(value: int) -> "Field":
    # Only for values already in [0, MODULUS).
    elem = object.__new__(Field)
    object.__setattr__(elem, "_value", value)
    return elem


def _coerce(other: object) -> "Field | None":
    """Turn an operand into a Field, or None if the type is unsupported."""
    if isinstance(other, Field):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return from_u32(other)
    return None


# --------------------------------------------------------------------------
# Field element
# --------------------------------------------------------------------------


@total_ordering
class Field:
    """Immutable element of F_p.

    ``Field(x)`` reduces any int with ``x % MODULUS``, so negative ints
    map to their residue.  ``Field()`` is zero.

    Comparing against a plain int does **not** reduce the int first:
    ``Field(0) == MODULUS`` is False.  Pass reduced literals.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Field value must be an int, got {type(value).__name__}")
        object.__setattr__(self, "_value", value % MODULUS)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Field elements are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Field elements are immutable")

    def __reduce__(self):
        return (Field, (self._value,))

    @property
    def value(self) -> int:
        """Canonical representative in [0, MODULUS)."""
        return self._value

    # ---- arithmetic ----

    def __add__(self, other: Operand) -> "Field":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _canonical(_add(self._value, rhs._value))

    def __radd__(self, other: int) -> "Field":
        return self.__add__(other)

    def __sub__(self, other: Operand) -> "Field":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _canonical(_sub(self._value, rhs._value))

    def __rsub__(self, other: int) -> "Field":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _canonical(_sub(lhs._value, self._value))

    def __mul__(self, other: Operand) -> "Field":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _canonical(_mul(self._value, rhs._value))

    def __rmul__(self, other: int) -> "Field":
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> "Field":
        """Multiply by the inverse.  Division by zero yields zero."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return _canonical(_mul(self._value, _inv(rhs._value)))

    def __rtruediv__(self, other: int) -> "Field":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return _canonical(_mul(lhs._value, _inv(self._value)))

    def __neg__(self) -> "Field":
        return _canonical(_sub(0, self._value))

    def __pow__(self, exponent: Operand, modulo: None = None) -> "Field":
        if modulo is not None:
            return NotImplemented
        e = _coerce(exponent)
        if e is None:
            return NotImplemented
        return _canonical(_pow(self._value, e._value))

    def pow(self, exponent: Operand) -> "Field":
        """Modular exponentiation.

        The exponent is a field element, so exponents >= MODULUS wrap.
        ``x.pow(0) == 1`` for every x, zero included.
        """
        e = _coerce(exponent)
        if e is None:
            raise TypeError(f"exponent must be Field or int, got {type(exponent).__name__}")
        return _canonical(_pow(self._value, e._value))

    def inv(self) -> "Field":
        """Modular inverse.  The inverse of 0 is defined as 0."""
        return _canonical(_inv(self._value))

    # ---- comparison / conversion ----

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Field):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: "Field") -> bool:
        if not isinstance(other, Field):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Field({self._value})"


ZERO = Field(0)
ONE = Field(1)


# --------------------------------------------------------------------------
# Functional API
# --------------------------------------------------------------------------


def from_u32(x: int) -> Field:
    """Reduce an unsigned 32-bit integer into the field."""
    if not isinstance(x, int) or isinstance(x, bool):
        raise TypeError(f"expected an int, got {type(x).__name__}")
    if x < 0 or x > U32_MAX:
        raise ValueError(f"Not an unsigned 32-bit integer: {x}")
    return _canonical(x % MODULUS)


def to_u32(a: Field) -> int:
    """Return the canonical representative of *a*."""
    return a.value


def add(a: Field, b: Field) -> Field:
    """Field addition."""
    return a + b


def sub(a: Field, b: Field) -> Field:
    """Field subtraction."""
    return a - b


def mul(a: Field, b: Field) -> Field:
    """Field multiplication."""
    return a * b


def div(a: Field, b: Field) -> Field:
    """Field division; ``div(a, 0) == 0``."""
    return a / b


def inv(a: Field) -> Field:
    """Multiplicative inverse via extended Euclid; ``inv(0) == 0``."""
    return a.inv()


def neg(a: Field) -> Field:
    """Additive inverse."""
    return -a


def exp(base: Field, exponent: Field) -> Field:
    """Modular exponentiation; the exponent is taken mod MODULUS."""
    return base.pow(exponent)


def random_element() -> Field:
    """Return a uniform random element in [0, MODULUS)."""
    return _canonical(secrets.randbelow(MODULUS))


def random_nonzero() -> Field:
    """Return a uniform random element in [1, MODULUS)."""
    return _canonical(1 + secrets.randbelow(MODULUS - 1))
