from __future__ import annotations

from enum import Enum


class TernaryValue(Enum):
    """Three-valued logic of subjective knowledge.

    ``UNKNOWN`` means *we* do not know which of ``FALSE``/``TRUE`` holds.
    It is unrelated to the objective uncertainty sets of the Belnap
    extension.
    """

    FALSE = "0"
    TRUE = "1"
    UNKNOWN = "?"

    @classmethod
    def from_bool(cls, value: bool) -> TernaryValue:
        return cls.TRUE if value else cls.FALSE

    def to_bool(self) -> bool:
        from .conversions import ternary_to_bool

        return ternary_to_bool(self)

    @property
    def is_unknown(self) -> bool:
        return self is TernaryValue.UNKNOWN

    def and_(self, other: TernaryValue) -> TernaryValue:
        # FALSE forces the result whatever the other operand is
        if TernaryValue.FALSE in (self, other):
            return TernaryValue.FALSE
        if TernaryValue.UNKNOWN in (self, other):
            return TernaryValue.UNKNOWN
        return TernaryValue.TRUE

    def or_(self, other: TernaryValue) -> TernaryValue:
        if TernaryValue.TRUE in (self, other):
            return TernaryValue.TRUE
        if TernaryValue.UNKNOWN in (self, other):
            return TernaryValue.UNKNOWN
        return TernaryValue.FALSE

    def xor(self, other: TernaryValue) -> TernaryValue:
        if TernaryValue.UNKNOWN in (self, other):
            return TernaryValue.UNKNOWN
        if self is other:
            return TernaryValue.FALSE
        return TernaryValue.TRUE

    def not_(self) -> TernaryValue:
        if self is TernaryValue.FALSE:
            return TernaryValue.TRUE
        if self is TernaryValue.TRUE:
            return TernaryValue.FALSE
        return TernaryValue.UNKNOWN

    def eq(self, other: TernaryValue) -> TernaryValue:
        if TernaryValue.UNKNOWN in (self, other):
            return TernaryValue.UNKNOWN
        return TernaryValue.from_bool(self is other)

    def __and__(self, other):
        if not isinstance(other, TernaryValue):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, TernaryValue):
            return NotImplemented
        return self.or_(other)

    def __xor__(self, other):
        if not isinstance(other, TernaryValue):
            return NotImplemented
        return self.xor(other)

    def __invert__(self) -> TernaryValue:
        return self.not_()

    def __bool__(self):
        raise TypeError(f"{self!r} has no implicit truth value; use to_bool()")

    def __str__(self) -> str:
        return self.value
