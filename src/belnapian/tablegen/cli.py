"""Build-time generator for the embedded 15-valued operation tables.

    belnapian-tablegen              # regenerate core/_generated_tables.py
    belnapian-tablegen --check      # verify the embedded tables, exit 1 if stale
    belnapian-tablegen --stdout     # print the module instead of writing it
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from belnapian.core.belnap import OPERATORS
from belnapian.core.tables import TABLES
from belnapian.logging_config import configure_logging
from belnapian.tablegen.passes import FreshnessPass, default_passes
from belnapian.tablegen.pipeline import DEFAULT_OUTPUT, TableGenConfig, TableGenPipeline
from belnapian.tablegen.render import render_module
from belnapian.tablegen.report import TableReport


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="belnapian-tablegen",
        description="Generate and verify the 15-valued extended Belnap operation tables.",
    )
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT, help="module file to write")
    parser.add_argument("--stdout", action="store_true", help="print the module instead of writing it")
    parser.add_argument("--check", action="store_true", help="verify the embedded tables instead of generating")
    parser.add_argument(
        "--operators",
        nargs="+",
        choices=list(OPERATORS),
        default=list(OPERATORS),
        help="binary operators to tabulate (default: all)",
    )
    parser.add_argument("--verbose", action="store_true", help="print the full report")
    return parser


def run(config: TableGenConfig, stdout: bool = False, verbose: bool = False) -> int:
    writes_embedded = not (config.check or stdout) and Path(config.output).resolve() == DEFAULT_OUTPUT
    if writes_embedded and set(config.operators) != set(OPERATORS):
        logger.error(
            "Refusing to write a partial table module over {path} operators={ops}",
            path=str(DEFAULT_OUTPUT),
            ops=list(config.operators),
        )
        print("error: the embedded module needs every operator; pass --output or --stdout", file=sys.stderr)
        return 1

    pipeline = TableGenPipeline(config)
    for p in default_passes():
        pipeline.add_pass(p)

    if config.check:
        pipeline.add_pass(FreshnessPass(operators=list(config.operators)))
        tables = TABLES
    else:
        tables = pipeline.build_tables()

    result = pipeline.run_passes(tables)
    report = TableReport(tables, result.diagnostics)

    if not result.success:
        logger.error("Table verification failed:\n{report}", report=report)
        print(report, file=sys.stderr)
        return 1
    for w in report.warnings:
        logger.warning("[{code}] {message} @ {location}", code=w.code, message=w.message, location=w.location)
    if verbose:
        print(report)

    if config.check:
        logger.info("Embedded tables are up to date operators={ops}", ops=list(tables.operators))
        return 0

    source = render_module(tables)
    if stdout:
        sys.stdout.write(source)
        return 0

    config.output.parent.mkdir(parents=True, exist_ok=True)
    config.output.write_text(source, encoding="utf-8")
    logger.info("Wrote operation tables path={path} bytes={size}", path=str(config.output), size=len(source))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(service="belnapian-tablegen")
    logger.enable("belnapian")

    config = TableGenConfig(operators=tuple(args.operators), output=args.output, check=args.check)
    return run(config, stdout=args.stdout, verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())
