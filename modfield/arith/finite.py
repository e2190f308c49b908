"""Finite-field element type over F_p.

``Finite`` wraps a residue in [0, PRIME) and overloads the arithmetic
operators.  The right-hand operand of every binary operator may be another
``Finite`` or a plain int, which is reduced first:

    x = Finite(PRIME + 2)   # -> 2
    x += 7                  # -> 9
    x /= 3                  # -> 3

Instances are immutable; compound assignment rebinds the name to a new
element.  Division by a zero residue raises ``ZeroDivisionError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from modfield.arith import field
from modfield.arith.power import mod_pow

Operand = Union["Finite", int]


def _coerce(other: Any) -> int | None:
    """Return the residue of *other*, or None for unsupported types."""
    if isinstance(other, Finite):
        return other.value
    if isinstance(other, int):
        return field.reduce(other)
    return None


@dataclass(frozen=True, order=True)
class Finite:
    """An element of the prime field F_p."""

    value: int = 0

    def __post_init__(self) -> None:
        v = self.value
        if isinstance(v, Finite):
            v = v.value
        elif not isinstance(v, int):
            raise TypeError(f"Cannot interpret {type(v).__name__} as a field element")
        object.__setattr__(self, "value", field.reduce(v))

    # ---- arithmetic ----

    def __add__(self, other: Operand) -> Finite:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return Finite(field.add(self.value, b))

    def __sub__(self, other: Operand) -> Finite:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return Finite(field.sub(self.value, b))

    def __mul__(self, other: Operand) -> Finite:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return Finite(field.mul(self.value, b))

    def __truediv__(self, other: Operand) -> Finite:
        b = _coerce(other)
        if b is None:
            return NotImplemented
        return Finite(field.div(self.value, b))

    # int on the left: 7 - x, 7 / x, ...

    def __radd__(self, other: int) -> Finite:
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return Finite(field.add(a, self.value))

    def __rsub__(self, other: int) -> Finite:
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return Finite(field.sub(a, self.value))

    def __rmul__(self, other: int) -> Finite:
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return Finite(field.mul(a, self.value))

    def __rtruediv__(self, other: int) -> Finite:
        a = _coerce(other)
        if a is None:
            return NotImplemented
        return Finite(field.div(a, self.value))

    def __neg__(self) -> Finite:
        return Finite(field.neg(self.value))

    def pow(self, e: int) -> Finite:
        """Return ``self**e``; a negative *e* raises the inverse instead.

        Unlike ``mod_pow``, which rejects negative exponents, this accepts
        any int and raises ``ZeroDivisionError`` for ``0**-k``.
        """
        if e < 0:
            return Finite(mod_pow(field.inv(self.value), -e))
        return Finite(mod_pow(self.value, e))

    def __pow__(self, e: int) -> Finite:
        if not isinstance(e, int):
            return NotImplemented
        return self.pow(e)

    def inverse(self) -> Finite:
        """Multiplicative inverse (Fermat)."""
        return Finite(field.inv(self.value))

    # ---- conversion / display ----

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    # Debug output is the bare residue as well.
    __repr__ = __str__

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    # ---- pydantic ----

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from ``Finite`` or int; serialize as the int residue."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )

    @classmethod
    def _validate(cls, v: Any) -> Finite:
        if isinstance(v, Finite):
            return v
        if isinstance(v, int):
            return cls(v)
        raise ValueError(f"Cannot interpret {type(v).__name__} as a field element")
