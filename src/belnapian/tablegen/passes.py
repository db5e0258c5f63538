from typing import List, Optional

from belnapian.core.belnap import BASE_VALUES, OPERATORS, UNARY_OPERATORS
from belnapian.core.lifting import combine_masks, map_mask
from belnapian.core.tables import BASE_MASKS, TableSet
from belnapian.core.unknown import EMPTY_MASK, MASKS, UnknownSet, pattern
from belnapian.tablegen.pipeline import DiagnosticSink, Pass, TableGenConfig, TableGenPipeline

FULL_CELLS = len(MASKS) * len(MASKS)
MIXED_CELLS = len(BASE_MASKS) * len(MASKS)


def _cell(name: str, x: int, y: int) -> str:
    return f"{name}[{pattern(x)}, {pattern(y)}]"


class TotalityPass(Pass):
    name = "TotalityPass"

    def run(self, tables: TableSet, diag: DiagnosticSink) -> None:
        for kind, group, rows, expected in (
            ("full", tables.binary, MASKS, FULL_CELLS),
            ("mixed", tables.mixed, BASE_MASKS, MIXED_CELLS),
        ):
            for name, table in group.items():
                if table.rows != rows or table.cols != MASKS or len(table) != expected:
                    diag.error(
                        "TOTAL002",
                        f"{kind} table '{name}' covers {len(table)} cells, expected {expected}",
                        location=name,
                    )
                for x, y in table.undefined():
                    diag.error("TOTAL001", f"Undefined cell in {kind} table", location=_cell(name, x, y))

        for name, line in tables.unary.items():
            if len(line) != len(MASKS) + 1:
                diag.error("TOTAL002", f"Unary table '{name}' has {len(line) - 1} cells", location=name)
                continue
            for m in MASKS:
                if line[m] == EMPTY_MASK:
                    diag.error("TOTAL001", "Undefined cell in unary table", location=f"{name}[{pattern(m)}]")

        missing = set(tables.binary) ^ set(tables.mixed)
        for name in sorted(missing):
            diag.error("TOTAL003", f"Operator '{name}' lacks either its full or its mixed table", location=name)


class SymmetryPass(Pass):
    name = "SymmetryPass"

    def run(self, tables: TableSet, diag: DiagnosticSink) -> None:
        for name, table in tables.binary.items():
            for x in MASKS:
                for y in MASKS:
                    if y <= x:
                        continue
                    if table.lookup(x, y) != table.lookup(y, x):
                        diag.error(
                            "SYM001",
                            f"'{name}' is not commutative: {pattern(table.lookup(x, y))} vs {pattern(table.lookup(y, x))}",
                            location=_cell(name, x, y),
                        )

            mixed = tables.mixed.get(name)
            if mixed is None:
                continue
            for x in BASE_MASKS:
                if mixed.row(x) != table.row(x):
                    diag.error(
                        "SYM002",
                        f"Mixed row {pattern(x)} of '{name}' disagrees with the full table",
                        location=name,
                    )


class BaseAgreementPass(Pass):
    name = "BaseAgreementPass"

    def run(self, tables: TableSet, diag: DiagnosticSink) -> None:
        for name, table in tables.binary.items():
            op = OPERATORS.get(name)
            if op is None:
                diag.warning("BASE003", f"No base operator named '{name}'", location=name)
                continue
            for a in BASE_VALUES:
                for b in BASE_VALUES:
                    expected = op(a, b).mask
                    got = table.lookup(a.mask, b.mask)
                    if got != expected:
                        diag.error(
                            "BASE001",
                            f"Expected {pattern(expected)}, table has {pattern(got)}",
                            location=_cell(name, a.mask, b.mask),
                        )

        for name, line in tables.unary.items():
            op = UNARY_OPERATORS.get(name)
            if op is None:
                diag.warning("BASE003", f"No base operator named '{name}'", location=name)
                continue
            for a in BASE_VALUES:
                if a.mask < len(line) and line[a.mask] != op(a).mask:
                    diag.error("BASE002", f"'{name}' disagrees on {a.name}", location=f"{name}[{a.tag}]")


class LiftingPass(Pass):
    name = "LiftingPass"

    def run(self, tables: TableSet, diag: DiagnosticSink) -> None:
        for group in (tables.binary, tables.mixed):
            for name, table in group.items():
                op = OPERATORS.get(name)
                if op is None:
                    continue
                for (x, y), got in table.items():
                    expected = combine_masks(op, x, y)
                    if got != expected:
                        diag.error(
                            "LIFT001",
                            f"Expected {pattern(expected)}, table has {pattern(got)}",
                            location=_cell(name, x, y),
                        )

        for name, line in tables.unary.items():
            op = UNARY_OPERATORS.get(name)
            if op is None or len(line) != len(MASKS) + 1:
                continue
            for m in MASKS:
                if line[m] != map_mask(op, m):
                    diag.error("LIFT001", f"'{name}' is not the pointwise image", location=f"{name}[{pattern(m)}]")


class NamingPass(Pass):
    name = "NamingPass"

    def run(self, tables: TableSet, diag: DiagnosticSink) -> None:
        names = [pattern(m) for m in MASKS]
        if len(set(names)) != len(MASKS):
            diag.error("NAME001", f"Canonical names collide: {names}")

        unknown = [m for m in MASKS if bin(m).count("1") > 1]
        if sorted(unknown) != sorted(s.mask for s in UnknownSet):
            diag.error("NAME001", "Unknown sets do not match the multi-element masks")
        if len(MASKS) - len(unknown) != len(BASE_VALUES):
            diag.error("NAME001", "Singleton masks do not match the base values")

        seen = set()
        for table in tables.binary.values():
            seen.update(r for _, r in table.items())
        for m in MASKS:
            if m not in seen:
                diag.error(
                    "NAME002",
                    f"{pattern(m)} never appears as a result of any full table",
                    location=pattern(m),
                )


class FreshnessPass(Pass):
    """Compares the tables under check with a freshly generated set."""

    name = "FreshnessPass"

    def __init__(self, reference: Optional[TableSet] = None, operators: Optional[List[str]] = None):
        self.reference = reference
        self.operators = operators

    def run(self, tables: TableSet, diag: DiagnosticSink) -> None:
        reference = self.reference
        if reference is None:
            config = TableGenConfig(operators=tuple(self.operators or OPERATORS))
            reference = TableGenPipeline(config).build_tables()

        for name in reference.binary:
            if name not in tables.binary:
                diag.error("STALE001", f"Embedded tables lack operator '{name}'", location=name)
                continue
            if tables.binary[name] != reference.binary[name] or tables.mixed.get(name) != reference.mixed[name]:
                diag.error("STALE001", f"Embedded '{name}' tables differ from a fresh build", location=name)
        for name in tables.binary:
            if name not in reference.binary:
                diag.warning("STALE002", f"Embedded tables carry unexpected operator '{name}'", location=name)
        if dict(tables.unary) != dict(reference.unary):
            diag.error("STALE001", "Embedded unary tables differ from a fresh build", location="unary")


def default_passes() -> List[Pass]:
    return [TotalityPass(), SymmetryPass(), BaseAgreementPass(), LiftingPass(), NamingPass()]
