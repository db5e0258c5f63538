"""The 15-valued extended Belnap logic.

An ``ExtendedValue`` is either a ``Known`` Belnap value or an ``Unknown``
set of Belnap values we cannot tell apart. ``Known(v)`` stands for the
single world ``{v}``, ``Unknown(s)`` for every world in ``s``.

Binary operators are answered from the precomputed tables in
``core.tables``; ``core.lifting`` computes the same results from first
principles and is what the tables are generated from.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from loguru import logger

from .belnap import BASE_VALUES, BaseValue
from .errors import EmptyWorldSetError
from .tables import TABLES
from .unknown import EMPTY_MASK, FULL_MASK, UnknownSet, mask_of, parse_pattern, pattern


class ExtendedValue:
    __slots__ = ()

    @property
    def mask(self) -> int:
        raise NotImplementedError

    @property
    def pattern(self) -> str:
        return pattern(self.mask)

    @property
    def members(self) -> Tuple[BaseValue, ...]:
        return tuple(v for v in BASE_VALUES if self.mask & v.mask)

    @property
    def is_unknown(self) -> bool:
        return isinstance(self, Unknown)

    def could_be(self, value: BaseValue) -> bool:
        return bool(self.mask & value.mask)

    def could_be_neither(self) -> bool:
        return self.could_be(BaseValue.NEITHER)

    def could_be_false(self) -> bool:
        return self.could_be(BaseValue.FALSE)

    def could_be_true(self) -> bool:
        return self.could_be(BaseValue.TRUE)

    def could_be_both(self) -> bool:
        return self.could_be(BaseValue.BOTH)

    def to_bool(self) -> bool:
        from .conversions import extended_to_bool

        return extended_to_bool(self)

    def and_(self, other: Operand) -> ExtendedValue:
        return dispatch("and", self, other)

    def or_(self, other: Operand) -> ExtendedValue:
        return dispatch("or", self, other)

    def xor(self, other: Operand) -> ExtendedValue:
        return dispatch("xor", self, other)

    def superposition(self, other: Operand) -> ExtendedValue:
        return dispatch("superposition", self, other)

    def annihilation(self, other: Operand) -> ExtendedValue:
        return dispatch("annihilation", self, other)

    def eq(self, other: Operand) -> ExtendedValue:
        return dispatch("eq", self, other)

    def not_(self) -> ExtendedValue:
        return canonicalize(TABLES.unary["not"][self.mask])

    def __and__(self, other):
        return _operator("and", self, other)

    def __or__(self, other):
        return _operator("or", self, other)

    def __xor__(self, other):
        return _operator("xor", self, other)

    # every lifted operator is commutative, so reflected forms are the same lookups
    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __invert__(self) -> ExtendedValue:
        return self.not_()

    def __bool__(self):
        raise TypeError(f"{self!r} has no implicit truth value; use to_bool()")

    def __str__(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class Known(ExtendedValue):
    value: BaseValue

    def __post_init__(self):
        if not isinstance(self.value, BaseValue):
            raise TypeError(f"Known wraps a BaseValue, got {self.value!r}")

    @property
    def mask(self) -> int:
        return self.value.mask

    def __repr__(self):
        return f"Known({self.value.name})"


@dataclass(frozen=True)
class Unknown(ExtendedValue):
    value: UnknownSet

    def __post_init__(self):
        if not isinstance(self.value, UnknownSet):
            raise TypeError(f"Unknown wraps an UnknownSet, got {self.value!r}")

    @property
    def mask(self) -> int:
        return self.value.mask

    def __repr__(self):
        return f"Unknown({self.value.name})"


Operand = Union[ExtendedValue, BaseValue, UnknownSet]


def _build_canonical() -> List[Optional[ExtendedValue]]:
    by_mask: List[Optional[ExtendedValue]] = [None] * (FULL_MASK + 1)
    for v in BASE_VALUES:
        by_mask[v.mask] = Known(v)
    for s in UnknownSet:
        by_mask[s.mask] = Unknown(s)
    return by_mask


_BY_MASK = _build_canonical()

# canonical order: by world mask, N___ first and NFTB last
DOMAIN: Tuple[ExtendedValue, ...] = tuple(v for v in _BY_MASK if v is not None)
KNOWN_VALUES: Tuple[Known, ...] = tuple(Known(v) for v in BASE_VALUES)
UNKNOWN_VALUES: Tuple[Unknown, ...] = tuple(Unknown(s) for s in UnknownSet)


def canonicalize(mask: int) -> ExtendedValue:
    """Reduce a non-empty set of possible worlds to its unique value.

    A single world collapses to ``Known``; two or more become ``Unknown``.
    An empty set cannot come out of total operators and is reported as an
    invariant violation.
    """
    if isinstance(mask, bool):
        raise ValueError(f"World mask must be an int, got {mask!r}")
    if mask == EMPTY_MASK:
        logger.critical("Canonicalization reached the empty world set")
        raise EmptyWorldSetError("No possible world left to canonicalize")
    if not isinstance(mask, int) or not 0 < mask <= FULL_MASK:
        raise ValueError(f"World mask must be an int in 1..{FULL_MASK}, got {mask!r}")
    return _BY_MASK[mask]


def canonicalize_values(values: Iterable[BaseValue]) -> ExtendedValue:
    return canonicalize(mask_of(values))


def from_pattern(text: str) -> ExtendedValue:
    return canonicalize(parse_pattern(text))


def to_extended(value: Operand) -> ExtendedValue:
    if isinstance(value, ExtendedValue):
        return value
    if isinstance(value, BaseValue):
        return Known(value)
    if isinstance(value, UnknownSet):
        return Unknown(value)
    raise TypeError(f"{value!r} is not a Belnap value")


def dispatch(op: str, x: ExtendedValue, y: Operand) -> ExtendedValue:
    if isinstance(y, ExtendedValue):
        return canonicalize(TABLES.binary[op].lookup(x.mask, y.mask))
    if isinstance(y, BaseValue):
        # plain Belnap operand: use the 4x15 table with it as the row
        return canonicalize(TABLES.mixed[op].lookup(y.mask, x.mask))
    if isinstance(y, UnknownSet):
        return canonicalize(TABLES.binary[op].lookup(x.mask, y.mask))
    raise TypeError(f"Unsupported operand for '{op}': {y!r}")


def _operator(op: str, x: ExtendedValue, y):
    if not isinstance(y, (ExtendedValue, BaseValue, UnknownSet)):
        return NotImplemented
    return dispatch(op, x, y)
