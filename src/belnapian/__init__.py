from loguru import logger

from belnapian.api import (
    BINARY_OPERATORS,
    and_,
    annihilation,
    apply,
    eq,
    known,
    not_,
    or_,
    superposition,
    unknown,
    xor,
)
from belnapian.core.belnap import BaseValue
from belnapian.core.errors import ConversionError, EmptyWorldSetError
from belnapian.core.extended import (
    DOMAIN,
    ExtendedValue,
    Known,
    Unknown,
    canonicalize,
    canonicalize_values,
    from_pattern,
)
from belnapian.core.ternary import TernaryValue
from belnapian.core.unknown import UnknownSet

# Library default: stay silent until an application opts in.
logger.disable("belnapian")

__all__ = [
    "BINARY_OPERATORS",
    "BaseValue",
    "ConversionError",
    "DOMAIN",
    "EmptyWorldSetError",
    "ExtendedValue",
    "Known",
    "TernaryValue",
    "Unknown",
    "UnknownSet",
    "and_",
    "annihilation",
    "apply",
    "canonicalize",
    "canonicalize_values",
    "eq",
    "from_pattern",
    "known",
    "not_",
    "or_",
    "superposition",
    "unknown",
    "xor",
]


def main() -> None:
    from belnapian.tablegen.cli import main as tablegen_main

    raise SystemExit(tablegen_main())
