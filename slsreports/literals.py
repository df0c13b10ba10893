"""Encoding of CNF literals as integers: a variable v maps to 2v (positive) and 2v+1 (negative)."""

from __future__ import annotations

from typing import Sequence


def pos_lit(var: int) -> int:
    """Positive literal of a variable."""
    return var << 1


def neg_lit(var: int) -> int:
    """Negative literal of a variable."""
    return (var << 1) + 1


def negated_lit(lit: int) -> int:
    """The literal of opposite sign on the same variable."""
    return lit ^ 1


def lit_sign(lit: int) -> int:
    """0 for a positive literal, 1 for a negative one."""
    return lit & 1


def var_of_lit(lit: int) -> int:
    """The variable a literal refers to."""
    return lit >> 1


def lit_from_dimacs(value: int) -> int:
    """Encode a signed DIMACS literal (e.g. -3 or 3)."""
    if value < 0:
        return ((-value) << 1) + 1
    return value << 1


def is_lit_true(lit: int, values: Sequence[int]) -> bool:
    """Whether a literal is satisfied by an assignment indexed by variable."""
    return bool(int(values[lit >> 1]) ^ (lit & 1))


def true_lit(var: int, values: Sequence[int]) -> int:
    """The literal of a variable that the assignment makes true."""
    return (var << 1) + 1 - int(values[var])


def false_lit(var: int, values: Sequence[int]) -> int:
    """The literal of a variable that the assignment makes false."""
    return (var << 1) + int(values[var])