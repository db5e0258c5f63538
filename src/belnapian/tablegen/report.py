from typing import List

from belnapian.core.tables import TableSet
from belnapian.tablegen.pipeline import Diagnostic, DiagnosticSeverity


class TableReport:
    def __init__(self, tables: TableSet, diagnostics: List[Diagnostic]):
        self.tables = tables
        self.diagnostics = diagnostics

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == DiagnosticSeverity.WARNING]

    def __str__(self):
        lines = []
        lines.append("Belnapian Table Report")
        lines.append("======================")
        lines.append(f"Operators: {', '.join(self.tables.operators)}")
        for name in self.tables.operators:
            full = len(self.tables.binary[name])
            mixed = len(self.tables.mixed[name]) if name in self.tables.mixed else 0
            lines.append(f"  {name}: {full} full cells, {mixed} mixed cells")
        for name in self.tables.unary:
            lines.append(f"  {name}: {len(self.tables.unary[name]) - 1} unary cells")

        lines.append(f"Errors: {len(self.errors)}")
        lines.append(f"Warnings: {len(self.warnings)}")

        if self.errors:
            lines.append("\nErrors:")
            for e in self.errors:
                lines.append(f"  [{e.code}] {e.message} @ {e.location}")

        if self.warnings:
            lines.append("\nWarnings:")
            for w in self.warnings:
                lines.append(f"  [{w.code}] {w.message} @ {w.location}")

        return "\n".join(lines)
