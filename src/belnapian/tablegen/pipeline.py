from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from loguru import logger

from belnapian.core.belnap import OPERATORS, UNARY_OPERATORS
from belnapian.core.extended import canonicalize
from belnapian.core.lifting import combine_masks, map_mask
from belnapian.core.tables import BASE_MASKS, OperationTable, TableSet
from belnapian.core.unknown import EMPTY_MASK, MASKS

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "core" / "_generated_tables.py"


class DiagnosticSeverity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass
class Diagnostic:
    severity: DiagnosticSeverity
    code: str
    message: str
    location: Optional[str] = None


class DiagnosticSink:
    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def error(self, code: str, message: str, location: Optional[str] = None):
        self.diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, code, message, location))

    def warning(self, code: str, message: str, location: Optional[str] = None):
        self.diagnostics.append(Diagnostic(DiagnosticSeverity.WARNING, code, message, location))

    @property
    def has_errors(self) -> bool:
        return any(d.severity == DiagnosticSeverity.ERROR for d in self.diagnostics)


@dataclass
class TableGenConfig:
    operators: Sequence[str] = tuple(OPERATORS)
    output: Path = DEFAULT_OUTPUT
    # verify the embedded module instead of writing a new one
    check: bool = False


@dataclass
class GenResult:
    success: bool
    diagnostics: List[Diagnostic]
    tables: Optional[TableSet] = None


class Pass(ABC):
    name: str

    @abstractmethod
    def run(self, tables: TableSet, diag: DiagnosticSink) -> None:
        ...


def _canonical_mask(mask: int) -> int:
    # goes through canonicalization so an empty result is caught here, not at runtime
    return canonicalize(mask).mask


class TableGenPipeline:
    def __init__(self, config: TableGenConfig):
        self.config = config
        self.passes: List[Pass] = []

    def add_pass(self, p: Pass):
        self.passes.append(p)

    def build_tables(self) -> TableSet:
        binary: Dict[str, OperationTable] = {}
        mixed: Dict[str, OperationTable] = {}

        for name in self.config.operators:
            if name not in OPERATORS:
                raise ValueError(f"Unknown operator '{name}'")
            op = OPERATORS[name]

            def cell(x: int, y: int, op=op) -> int:
                return _canonical_mask(combine_masks(op, x, y))

            binary[name] = OperationTable.from_function(name, MASKS, MASKS, cell)
            mixed[name] = OperationTable.from_function(name, BASE_MASKS, MASKS, cell)
            logger.debug(
                "Built '{name}' tables cells={full}+{mixed}",
                name=name,
                full=len(binary[name]),
                mixed=len(mixed[name]),
            )

        unary = {
            name: (EMPTY_MASK,) + tuple(_canonical_mask(map_mask(op, m)) for m in MASKS)
            for name, op in UNARY_OPERATORS.items()
        }
        return TableSet.freeze(binary, mixed, unary)

    def run_passes(self, tables: TableSet) -> GenResult:
        diag = DiagnosticSink()

        for p in self.passes:
            p.run(tables, diag)
            logger.debug("Pass {name} done diagnostics={count}", name=p.name, count=len(diag.diagnostics))

        return GenResult(success=not diag.has_errors, diagnostics=diag.diagnostics, tables=tables)
