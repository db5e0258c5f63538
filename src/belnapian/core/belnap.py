"""Belnap's four-valued logic.

``NEITHER`` marks propositions that get no classical value at all
(ill-formed or self-referential ones); ``BOTH`` marks propositions that
could consistently be taken as either true or false, e.g. statements
independent of the axioms in use. Neither value expresses *our*
ignorance: that is what the extended (15-valued) logic adds on top.

Each member's value is its one-bit world mask, in the fixed order
Neither, False, True, Both.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict


class BaseValue(Enum):
    NEITHER = 0b0001
    FALSE = 0b0010
    TRUE = 0b0100
    BOTH = 0b1000

    @classmethod
    def from_bool(cls, value: bool) -> BaseValue:
        return cls.TRUE if value else cls.FALSE

    def to_bool(self) -> bool:
        from .conversions import base_to_bool

        return base_to_bool(self)

    @property
    def mask(self) -> int:
        return self.value

    @property
    def tag(self) -> str:
        return self.name[0]

    def and_(self, other: BaseValue) -> BaseValue:
        # Branch order matters: FALSE first, then the NEITHER/BOTH conflict.
        if BaseValue.FALSE in (self, other):
            return BaseValue.FALSE
        if {self, other} == {BaseValue.NEITHER, BaseValue.BOTH}:
            return BaseValue.FALSE
        if BaseValue.NEITHER in (self, other):
            return BaseValue.NEITHER
        if BaseValue.BOTH in (self, other):
            return BaseValue.BOTH
        return BaseValue.TRUE

    def or_(self, other: BaseValue) -> BaseValue:
        if BaseValue.TRUE in (self, other):
            return BaseValue.TRUE
        if {self, other} == {BaseValue.NEITHER, BaseValue.BOTH}:
            return BaseValue.TRUE
        if BaseValue.BOTH in (self, other):
            return BaseValue.BOTH
        if BaseValue.NEITHER in (self, other):
            return BaseValue.NEITHER
        return BaseValue.FALSE

    def not_(self) -> BaseValue:
        if self is BaseValue.FALSE:
            return BaseValue.TRUE
        if self is BaseValue.TRUE:
            return BaseValue.FALSE
        return self

    def xor(self, other: BaseValue) -> BaseValue:
        """``(a AND NOT b) OR (NOT a AND b)``.

        Unlike classical logic this is not interchangeable with
        ``(a OR b) AND NOT (a AND b)``; the two have different truth
        tables over four values. This form stays closest to the natural
        language reading of "exactly one of".
        """
        return self.and_(other.not_()).or_(self.not_().and_(other))

    def superposition(self, other: BaseValue) -> BaseValue:
        """Merge two independent pieces of evidence.

        ``NEITHER`` adds nothing, ``BOTH`` already holds everything, and
        evidence for ``TRUE`` combined with evidence for ``FALSE`` gives
        ``BOTH``.
        """
        if BaseValue.BOTH in (self, other):
            return BaseValue.BOTH
        if {self, other} == {BaseValue.TRUE, BaseValue.FALSE}:
            return BaseValue.BOTH
        if BaseValue.TRUE in (self, other):
            return BaseValue.TRUE
        if BaseValue.FALSE in (self, other):
            return BaseValue.FALSE
        return BaseValue.NEITHER

    def annihilation(self, other: BaseValue) -> BaseValue:
        """Keep only what two pieces of evidence agree on.

        ``NEITHER`` wipes everything, ``BOTH`` constrains nothing, and
        contradicting ``TRUE``/``FALSE`` cancel out to ``NEITHER``.
        """
        if BaseValue.NEITHER in (self, other):
            return BaseValue.NEITHER
        if {self, other} == {BaseValue.TRUE, BaseValue.FALSE}:
            return BaseValue.NEITHER
        if BaseValue.FALSE in (self, other):
            return BaseValue.FALSE
        if BaseValue.TRUE in (self, other):
            return BaseValue.TRUE
        return BaseValue.BOTH

    def eq(self, other: BaseValue) -> BaseValue:
        return BaseValue.from_bool(self is other)

    def __and__(self, other):
        if not isinstance(other, BaseValue):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, BaseValue):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other):
        if not isinstance(other, BaseValue):
            return NotImplemented
        return self.xor(other)

    def __invert__(self) -> BaseValue:
        return self.not_()

    def __bool__(self):
        raise TypeError(f"{self!r} has no implicit truth value; use to_bool()")

    def __str__(self) -> str:
        return self.tag


BASE_VALUES = tuple(BaseValue)

BinaryOp = Callable[[BaseValue, BaseValue], BaseValue]

# Every binary operator the extended logic lifts and tabulates, in table order.
OPERATORS: Dict[str, BinaryOp] = {
    "and": BaseValue.and_,
    "or": BaseValue.or_,
    "xor": BaseValue.xor,
    "superposition": BaseValue.superposition,
    "annihilation": BaseValue.annihilation,
    "eq": BaseValue.eq,
}

UNARY_OPERATORS: Dict[str, Callable[[BaseValue], BaseValue]] = {
    "not": BaseValue.not_,
}
