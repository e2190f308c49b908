"""Fast modular exponentiation over F_p."""

from __future__ import annotations

from modfield.config import PRIME


def mod_pow(x: int, n: int) -> int:
    """Return ``x**n mod PRIME`` by binary exponentiation.

    ``x`` may be any int (it is reduced first); ``n`` must be non-negative.
    ``mod_pow(0, 0)`` is 1.  By Fermat's little theorem the inverse of a
    nonzero ``x`` is ``mod_pow(x, PRIME - 2)``.
    """
    if n < 0:
        raise ValueError(f"Exponent must be non-negative, got n={n}")
    x %= PRIME
    y = 1
    # y * x**n stays congruent to the original x**n
    while n > 0:
        if n % 2 != 0:
            y = (y * x) % PRIME
            n -= 1
        x = (x * x) % PRIME
        n //= 2
    return y
