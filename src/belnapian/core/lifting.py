"""Possible-worlds lifting of Belnap operators.

An operand stands for the set of Belnap values it could be. Applying a
base operator to two such operands means applying it to every pair of
worlds and collecting whatever comes out: the result covers each
outcome reachable from some consistent choice of the operands' worlds.

This is the slow, obviously-correct path. Runtime dispatch goes through
the tables in ``core.tables``, which ``belnapian.tablegen`` builds from
these functions.
"""
from __future__ import annotations

from typing import Callable, Tuple

from .belnap import BaseValue, BinaryOp
from .extended import ExtendedValue, Operand, canonicalize, to_extended
from .unknown import EMPTY_MASK, members

UnaryOp = Callable[[BaseValue], BaseValue]


def denote(value: Operand) -> Tuple[BaseValue, ...]:
    return to_extended(value).members


def combine_masks(op: BinaryOp, x_mask: int, y_mask: int) -> int:
    result = EMPTY_MASK
    for a in members(x_mask):
        for b in members(y_mask):
            result |= op(a, b).mask
    return result


def map_mask(op: UnaryOp, mask: int) -> int:
    result = EMPTY_MASK
    for a in members(mask):
        result |= op(a).mask
    return result


def lift_binary(op: BinaryOp) -> Callable[[Operand, Operand], ExtendedValue]:
    def lifted(x: Operand, y: Operand) -> ExtendedValue:
        return canonicalize(combine_masks(op, to_extended(x).mask, to_extended(y).mask))

    lifted.__name__ = f"lifted_{getattr(op, '__name__', 'op')}"
    return lifted


def lift_unary(op: UnaryOp) -> Callable[[Operand], ExtendedValue]:
    def lifted(x: Operand) -> ExtendedValue:
        return canonicalize(map_mask(op, to_extended(x).mask))

    lifted.__name__ = f"lifted_{getattr(op, '__name__', 'op')}"
    return lifted
