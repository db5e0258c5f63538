"""Sets of possible Belnap values and their canonical names.

A set of possible worlds is held as a 4-bit mask, one bit per
``BaseValue`` (Neither, False, True, Both from the low bit up). Its
display pattern spells the present values' tags and ``_`` for absent
ones, e.g. ``0b0011`` is ``NF__`` and ``0b1110`` is ``_FTB``.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from .belnap import BASE_VALUES, BaseValue

EMPTY_MASK = 0
FULL_MASK = 0b1111
MASKS = tuple(range(1, FULL_MASK + 1))

_PLACEHOLDER = "_"


def _check_mask(mask: int) -> None:
    if isinstance(mask, bool) or not isinstance(mask, int) or not EMPTY_MASK <= mask <= FULL_MASK:
        raise ValueError(f"World mask must be an int in 0..{FULL_MASK}, got {mask!r}")


def mask_of(values: Iterable[BaseValue]) -> int:
    mask = EMPTY_MASK
    for value in values:
        mask |= value.mask
    return mask


def members(mask: int) -> Tuple[BaseValue, ...]:
    _check_mask(mask)
    return tuple(v for v in BASE_VALUES if mask & v.mask)


def cardinality(mask: int) -> int:
    _check_mask(mask)
    return bin(mask).count("1")


def pattern(mask: int) -> str:
    _check_mask(mask)
    return "".join(v.tag if mask & v.mask else _PLACEHOLDER for v in BASE_VALUES)


def parse_pattern(text: str) -> int:
    """Inverse of :func:`pattern`. The empty pattern ``____`` is rejected."""
    if not isinstance(text, str) or len(text) != len(BASE_VALUES):
        raise ValueError(f"Malformed world pattern: {text!r}")
    mask = EMPTY_MASK
    for char, value in zip(text, BASE_VALUES):
        if char == value.tag:
            mask |= value.mask
        elif char != _PLACEHOLDER:
            raise ValueError(f"Malformed world pattern: {text!r}")
    if mask == EMPTY_MASK:
        raise ValueError("The empty world pattern names no value")
    return mask


class UnknownSet(Enum):
    """The 11 ways of not knowing which Belnap value holds.

    These are the subsets of {Neither, False, True, Both} with at least
    two elements: 16 subsets minus the empty set minus 4 singletons.
    """

    NF = 0b0011
    NT = 0b0101
    FT = 0b0110
    NFT = 0b0111
    NB = 0b1001
    FB = 0b1010
    NFB = 0b1011
    TB = 0b1100
    NTB = 0b1101
    FTB = 0b1110
    NFTB = 0b1111

    @classmethod
    def from_mask(cls, mask: int) -> UnknownSet:
        _check_mask(mask)
        if cardinality(mask) < 2:
            raise ValueError(f"Mask {mask:#06b} ({pattern(mask)}) is not an unknown set")
        return cls(mask)

    @classmethod
    def from_pattern(cls, text: str) -> UnknownSet:
        return cls.from_mask(parse_pattern(text))

    @property
    def mask(self) -> int:
        return self.value

    @property
    def pattern(self) -> str:
        return pattern(self.value)

    @property
    def members(self) -> Tuple[BaseValue, ...]:
        return members(self.value)

    @property
    def is_unknown(self) -> bool:
        return True

    def could_be(self, value: BaseValue) -> bool:
        return bool(self.value & value.mask)

    def could_be_neither(self) -> bool:
        return self.could_be(BaseValue.NEITHER)

    def could_be_false(self) -> bool:
        return self.could_be(BaseValue.FALSE)

    def could_be_true(self) -> bool:
        return self.could_be(BaseValue.TRUE)

    def could_be_both(self) -> bool:
        return self.could_be(BaseValue.BOTH)

    def to_extended(self):
        from .extended import Unknown

        return Unknown(self)

    # operators go through the extended logic; the result may be Known
    def and_(self, other):
        return self.to_extended().and_(other)

    def or_(self, other):
        return self.to_extended().or_(other)

    def xor(self, other):
        return self.to_extended().xor(other)

    def superposition(self, other):
        return self.to_extended().superposition(other)

    def annihilation(self, other):
        return self.to_extended().annihilation(other)

    def eq(self, other):
        return self.to_extended().eq(other)

    def not_(self):
        return self.to_extended().not_()

    def __and__(self, other):
        return self.to_extended() & other

    def __or__(self, other):
        return self.to_extended() | other

    def __xor__(self, other):
        return self.to_extended() ^ other

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __invert__(self):
        return self.not_()

    def __bool__(self):
        raise TypeError(f"{self!r} has no implicit truth value")

    def __str__(self) -> str:
        return self.pattern
