"""Prime-field arithmetic F_p on plain ints.

All results are Python ints reduced into [0, PRIME).  ``Finite`` builds
its operators on these helpers.
"""

from __future__ import annotations

from modfield.arith.power import mod_pow
from modfield.config import PRIME


def reduce(a: int) -> int:
    """Reduce an integer into [0, PRIME)."""
    return a % PRIME


def add(a: int, b: int) -> int:
    """Field addition."""
    return (a + b) % PRIME


def sub(a: int, b: int) -> int:
    """Field subtraction."""
    return (a - b) % PRIME


def mul(a: int, b: int) -> int:
    """Field multiplication."""
    return (a * b) % PRIME


def neg(a: int) -> int:
    """Additive inverse."""
    return (-a) % PRIME


def inv(a: int) -> int:
    """Multiplicative inverse via Fermat's little theorem (p is prime)."""
    if a % PRIME == 0:
        raise ZeroDivisionError("Cannot invert zero in F_p")
    return mod_pow(a, PRIME - 2)


def div(a: int, b: int) -> int:
    """Field division ``a * b**-1``."""
    return mul(a, inv(b))
