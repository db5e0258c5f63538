"""Operator dispatch across the three logic domains.

Every function picks the domain from its operands:

* two ``TernaryValue`` operands use the 3-valued "don't know" logic;
* two ``BaseValue`` operands use Belnap's 4-valued logic;
* as soon as one operand is an ``ExtendedValue`` (or a bare
  ``UnknownSet``) the 15-valued tables answer, with a ``BaseValue``
  next to it looked up in the 4x15 mixed table.

Mixing the ternary domain with the Belnap ones is a ``TypeError``.
"""
from __future__ import annotations

from typing import Tuple, Union

from belnapian.core.belnap import OPERATORS, BaseValue
from belnapian.core.extended import ExtendedValue, Known, Unknown, dispatch
from belnapian.core.ternary import TernaryValue
from belnapian.core.unknown import UnknownSet

Value = Union[TernaryValue, BaseValue, ExtendedValue, UnknownSet]

BINARY_OPERATORS: Tuple[str, ...] = tuple(OPERATORS)
TERNARY_OPERATORS: Tuple[str, ...] = ("and", "or", "xor", "eq")

_BELNAP_TYPES = (BaseValue, ExtendedValue, UnknownSet)


def apply(op: str, a: Value, b: Value) -> Value:
    if op not in OPERATORS:
        raise ValueError(f"Unknown operator '{op}'. Known operators: {', '.join(BINARY_OPERATORS)}")

    if isinstance(a, TernaryValue) or isinstance(b, TernaryValue):
        if not (isinstance(a, TernaryValue) and isinstance(b, TernaryValue)):
            raise TypeError(f"Cannot mix 3-valued and Belnap operands: {a!r}, {b!r}")
        if op not in TERNARY_OPERATORS:
            raise TypeError(f"'{op}' is not defined for 3-valued logic")
        return getattr(a, _method_name(op))(b)

    if not isinstance(a, _BELNAP_TYPES) or not isinstance(b, _BELNAP_TYPES):
        raise TypeError(f"Unsupported operands for '{op}': {a!r}, {b!r}")

    if isinstance(a, BaseValue) and isinstance(b, BaseValue):
        return OPERATORS[op](a, b)

    if isinstance(a, UnknownSet):
        a = Unknown(a)
    if isinstance(a, BaseValue):
        # b is extended here; keep the plain value on the mixed-table side
        a, b = _promote(b), a
    return dispatch(op, a, b)


def _promote(value) -> ExtendedValue:
    if isinstance(value, UnknownSet):
        return Unknown(value)
    return value


def _method_name(op: str) -> str:
    return f"{op}_" if op in ("and", "or") else op


def and_(a: Value, b: Value) -> Value:
    return apply("and", a, b)


def or_(a: Value, b: Value) -> Value:
    return apply("or", a, b)


def xor(a: Value, b: Value) -> Value:
    return apply("xor", a, b)


def superposition(a: Value, b: Value) -> Value:
    return apply("superposition", a, b)


def annihilation(a: Value, b: Value) -> Value:
    return apply("annihilation", a, b)


def eq(a: Value, b: Value) -> Value:
    return apply("eq", a, b)


def not_(a: Value) -> Value:
    if isinstance(a, UnknownSet):
        a = Unknown(a)
    if isinstance(a, (TernaryValue, BaseValue, ExtendedValue)):
        return a.not_()
    raise TypeError(f"Unsupported operand for 'not': {a!r}")


def known(value: BaseValue) -> Known:
    return Known(value)


def unknown(value: Union[UnknownSet, str]) -> Unknown:
    """``unknown(UnknownSet.NF)`` or ``unknown("NF__")``."""
    if isinstance(value, str):
        return Unknown(UnknownSet.from_pattern(value))
    return Unknown(value)
