from typing import Iterable, List

from belnapian.core.tables import BASE_MASKS, TableSet
from belnapian.core.unknown import MASKS, pattern

HEADER = '''# Generated by belnapian-tablegen. Do not edit by hand.
"""Precomputed operation tables for the 15-valued extended Belnap logic.

Rows and columns of ``BINARY_TABLES`` follow ``DOMAIN``. ``MIXED_TABLES``
hold one row per entry of ``BASE_DOMAIN`` (a plain Belnap operand on the
left) against every entry of ``DOMAIN``.
"""
'''


def _row(cells: Iterable[str]) -> str:
    return ", ".join(repr(c) for c in cells)


def _domain(name: str, masks) -> List[str]:
    lines = [f"{name} = ("]
    lines.extend(f"    {pattern(m)!r}," for m in masks)
    lines.append(")")
    return lines


def _grids(name: str, group) -> List[str]:
    lines = [f"{name} = {{"]
    for op, table in group.items():
        lines.append(f"    {op!r}: (")
        for row in table.patterns():
            lines.append(f"        ({_row(row)}),")
        lines.append("    ),")
    lines.append("}")
    return lines


def render_module(tables: TableSet) -> str:
    """Python source for the embedded table module. Same tables, same text."""
    lines = HEADER.splitlines()
    lines.append("")
    lines.extend(_domain("DOMAIN", MASKS))
    lines.append("")
    lines.extend(_domain("BASE_DOMAIN", BASE_MASKS))
    lines.append("")
    lines.extend(_grids("BINARY_TABLES", tables.binary))
    lines.append("")
    lines.extend(_grids("MIXED_TABLES", tables.mixed))
    lines.append("")
    lines.append("UNARY_TABLES = {")
    for op, line in tables.unary.items():
        lines.append(f"    {op!r}: (")
        lines.append(f"        {_row(pattern(line[m]) for m in MASKS)},")
        lines.append("    ),")
    lines.append("}")
    return "\n".join(lines) + "\n"
