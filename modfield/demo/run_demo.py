#!/usr/bin/env python3
"""modfield walkthrough.

Usage:
    python -m modfield.demo.run_demo

The script:
1. Normalizes an out-of-range value into F_p.
2. Runs a chain of compound assignments on a field element.
3. Prints the first entries of the batch inverse table and checks them.
4. Dumps the recorded chain as JSON through a pydantic model.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from modfield.arith.finite import Finite
from modfield.arith.inverse import inverse_table
from modfield.arith.power import mod_pow
from modfield.config import DEMO_TABLE_SIZE, PRIME

# (operator, operand) applied in order to the starting element
CHAIN = [("+=", 7), ("-=", 5), ("*=", 6), ("/=", 3)]


class ChainStep(BaseModel):
    op: str
    operand: int
    result: Finite


class ChainRecord(BaseModel):
    start: Finite
    steps: List[ChainStep] = []


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def run_chain(start: Finite) -> ChainRecord:
    """Apply ``CHAIN`` to *start*, recording each intermediate value."""
    record = ChainRecord(start=start)
    x = start
    for op, operand in CHAIN:
        if op == "+=":
            x += operand
        elif op == "-=":
            x -= operand
        elif op == "*=":
            x *= operand
        elif op == "/=":
            x /= operand
        else:
            raise ValueError(f"Unknown operator '{op}'")
        record.steps.append(ChainStep(op=op, operand=operand, result=x))
    return record


def main() -> None:
    banner("1) Normalization")
    x = Finite(PRIME + 2)
    print(f"   Finite(PRIME + 2) = {x}")
    print(f"   Finite(-1)        = {Finite(-1)}")

    banner("2) Compound assignment chain")
    record = run_chain(x)
    value = record.start
    for step in record.steps:
        print(f"   {value} {step.op} {step.operand} -> {step.result}")
        value = step.result

    size = int(DEMO_TABLE_SIZE)
    banner(f"3) Inverse table (n={size})")
    table = inverse_table(size)
    for i in range(1, size):
        ok = (i * table[i]) % PRIME == 1
        print(f"   1/{i} = {table[i]}  ({'ok' if ok else 'MISMATCH'})")
    print(f"   Fermat check 2^(p-2) = {mod_pow(2, PRIME - 2)}")

    banner("4) JSON record")
    print(f"   {record.model_dump_json()}")

    banner("DEMO COMPLETE")


if __name__ == "__main__":
    main()
