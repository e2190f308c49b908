"""Batch modular inverses of 1 … n-1 in linear time.

From ``PRIME = (PRIME // i) * i + PRIME % i`` taken mod PRIME:

    inv(i) = -(PRIME // i) * inv(PRIME % i)

and ``PRIME % i < i``, so each entry only needs one already computed.
"""

from __future__ import annotations

from typing import List

from modfield.config import PRIME


def inverse_table(n: int) -> List[int]:
    """Return a list of length *n* whose entry ``i`` is ``i**-1 mod PRIME``.

    Entry 0 has no inverse and is left as 0.
    """
    if n < 0:
        raise ValueError(f"Table size must be non-negative, got n={n}")
    table = [0] * n
    if n >= 2:
        table[1] = 1
        for i in range(2, n):
            z = (PRIME - table[PRIME % i]) % PRIME
            table[i] = (z * (PRIME // i)) % PRIME
    return table
