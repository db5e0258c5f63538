"""Operation tables for the 15-valued logic.

A table is a flat row-major grid of world masks, 16 cells per row so a
lookup is ``cells[x * 16 + y]`` for operand masks ``x`` and ``y``. Cells
outside the declared rows/columns hold 0 (the empty set), which never
names a value.

The tables the library dispatches through are loaded once, at import,
from the generated module ``_generated_tables`` (see
``belnapian.tablegen``) and are read-only afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType, ModuleType
from typing import Callable, Iterator, Mapping, Sequence, Tuple

from loguru import logger

from . import _generated_tables
from .belnap import BASE_VALUES, OPERATORS, UNARY_OPERATORS
from .unknown import EMPTY_MASK, MASKS, parse_pattern, pattern

WIDTH = 16
BASE_MASKS = tuple(v.mask for v in BASE_VALUES)


class OperationTable:
    def __init__(self, name: str, rows: Sequence[int], cols: Sequence[int], cells: bytes):
        if len(cells) != WIDTH * WIDTH:
            raise ValueError(f"Table '{name}' must have {WIDTH * WIDTH} cells, got {len(cells)}")
        self.name = name
        self.rows = tuple(rows)
        self.cols = tuple(cols)
        self._cells = bytes(cells)

    @classmethod
    def from_function(
        cls,
        name: str,
        rows: Sequence[int],
        cols: Sequence[int],
        fn: Callable[[int, int], int],
    ) -> OperationTable:
        grid = bytearray(WIDTH * WIDTH)
        for x in rows:
            for y in cols:
                grid[x * WIDTH + y] = fn(x, y)
        return cls(name, rows, cols, bytes(grid))

    @classmethod
    def from_patterns(
        cls,
        name: str,
        row_patterns: Sequence[str],
        col_patterns: Sequence[str],
        grid: Sequence[Sequence[str]],
    ) -> OperationTable:
        rows = [parse_pattern(p) for p in row_patterns]
        cols = [parse_pattern(p) for p in col_patterns]
        if len(grid) != len(rows):
            raise ValueError(f"Table '{name}' has {len(grid)} rows, expected {len(rows)}")

        cells = bytearray(WIDTH * WIDTH)
        for x, line in zip(rows, grid):
            if len(line) != len(cols):
                raise ValueError(
                    f"Table '{name}' row {pattern(x)} has {len(line)} cells, expected {len(cols)}"
                )
            for y, text in zip(cols, line):
                cells[x * WIDTH + y] = parse_pattern(text)
        return cls(name, rows, cols, bytes(cells))

    def lookup(self, x: int, y: int) -> int:
        return self._cells[x * WIDTH + y]

    def row(self, x: int) -> Tuple[int, ...]:
        return tuple(self.lookup(x, y) for y in self.cols)

    def items(self) -> Iterator[Tuple[Tuple[int, int], int]]:
        for x in self.rows:
            for y in self.cols:
                yield (x, y), self.lookup(x, y)

    def undefined(self) -> Iterator[Tuple[int, int]]:
        for key, result in self.items():
            if result == EMPTY_MASK:
                yield key

    def patterns(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(pattern(r) for r in self.row(x)) for x in self.rows)

    def __len__(self) -> int:
        return len(self.rows) * len(self.cols)

    def __eq__(self, other):
        if not isinstance(other, OperationTable):
            return NotImplemented
        return (self.name, self.rows, self.cols, self._cells) == (
            other.name,
            other.rows,
            other.cols,
            other._cells,
        )

    def __hash__(self):
        return hash((self.name, self.rows, self.cols, self._cells))

    def __repr__(self):
        return f"OperationTable({self.name!r}, {len(self.rows)}x{len(self.cols)})"


@dataclass(frozen=True)
class TableSet:
    binary: Mapping[str, OperationTable]
    mixed: Mapping[str, OperationTable]
    # unary[name][mask] -> mask, index 0 unused
    unary: Mapping[str, Tuple[int, ...]]

    @property
    def operators(self) -> Tuple[str, ...]:
        return tuple(self.binary)

    @classmethod
    def freeze(cls, binary, mixed, unary) -> TableSet:
        return cls(
            binary=MappingProxyType(dict(binary)),
            mixed=MappingProxyType(dict(mixed)),
            unary=MappingProxyType({name: tuple(t) for name, t in unary.items()}),
        )


def load_tables(module: ModuleType = _generated_tables) -> TableSet:
    domain = module.DOMAIN
    base_domain = module.BASE_DOMAIN
    if tuple(parse_pattern(p) for p in domain) != MASKS:
        raise ValueError(f"{module.__name__}.DOMAIN is not the canonical mask order")
    if tuple(parse_pattern(p) for p in base_domain) != BASE_MASKS:
        raise ValueError(f"{module.__name__}.BASE_DOMAIN is not the canonical base order")
    # dispatch looks up every operator, so a partial module is unusable
    for group, expected in (
        ("BINARY_TABLES", set(OPERATORS)),
        ("MIXED_TABLES", set(OPERATORS)),
        ("UNARY_TABLES", set(UNARY_OPERATORS)),
    ):
        found = set(getattr(module, group))
        if found != expected:
            raise ValueError(
                f"{module.__name__}.{group} covers {sorted(found)}, expected {sorted(expected)}"
            )

    binary = {
        name: OperationTable.from_patterns(name, domain, domain, grid)
        for name, grid in module.BINARY_TABLES.items()
    }
    mixed = {
        name: OperationTable.from_patterns(name, base_domain, domain, grid)
        for name, grid in module.MIXED_TABLES.items()
    }
    unary = {}
    for name, line in module.UNARY_TABLES.items():
        if len(line) != len(domain):
            raise ValueError(f"Unary table '{name}' has {len(line)} cells, expected {len(domain)}")
        unary[name] = (EMPTY_MASK,) + tuple(parse_pattern(p) for p in line)

    logger.debug(
        "Loaded operation tables binary={binary} mixed={mixed} unary={unary}",
        binary=list(binary),
        mixed=list(mixed),
        unary=list(unary),
    )
    return TableSet.freeze(binary, mixed, unary)


TABLES = load_tables()
