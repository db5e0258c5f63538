"""Conversions between bool and the three logic domains.

Only the classical values travel freely. The ternary ``UNKNOWN`` maps to
the extended ``Unknown(FT)`` (it could be false or true, nothing else);
anything without a counterpart raises ``ConversionError``.
"""
from __future__ import annotations

from .belnap import BaseValue
from .errors import ConversionError
from .extended import ExtendedValue, Known, Unknown
from .ternary import TernaryValue
from .unknown import UnknownSet


def base_to_bool(value: BaseValue) -> bool:
    if value is BaseValue.FALSE:
        return False
    if value is BaseValue.TRUE:
        return True
    raise ConversionError(value, "bool")


def ternary_to_bool(value: TernaryValue) -> bool:
    if value is TernaryValue.FALSE:
        return False
    if value is TernaryValue.TRUE:
        return True
    raise ConversionError(value, "bool")


def extended_from_bool(value: bool) -> ExtendedValue:
    return Known(BaseValue.from_bool(value))


def extended_to_bool(value: ExtendedValue) -> bool:
    if isinstance(value, Known) and value.value in (BaseValue.FALSE, BaseValue.TRUE):
        return value.value is BaseValue.TRUE
    raise ConversionError(value, "bool")


def ternary_to_base(value: TernaryValue) -> BaseValue:
    if value is TernaryValue.UNKNOWN:
        raise ConversionError(value, "BaseValue")
    return BaseValue.from_bool(value is TernaryValue.TRUE)


def base_to_ternary(value: BaseValue) -> TernaryValue:
    if value not in (BaseValue.FALSE, BaseValue.TRUE):
        raise ConversionError(value, "TernaryValue")
    return TernaryValue.from_bool(value is BaseValue.TRUE)


def ternary_to_extended(value: TernaryValue) -> ExtendedValue:
    if value is TernaryValue.UNKNOWN:
        return Unknown(UnknownSet.FT)
    return Known(ternary_to_base(value))


def extended_to_ternary(value: ExtendedValue) -> TernaryValue:
    if isinstance(value, Unknown):
        return unknown_to_ternary(value.value)
    try:
        return base_to_ternary(value.value)
    except ConversionError:
        raise ConversionError(value, "TernaryValue") from None


def unknown_to_ternary(value: UnknownSet) -> TernaryValue:
    if value is not UnknownSet.FT:
        raise ConversionError(value, "TernaryValue")
    return TernaryValue.UNKNOWN


def ternary_to_unknown(value: TernaryValue) -> UnknownSet:
    if value is not TernaryValue.UNKNOWN:
        raise ConversionError(value, "UnknownSet")
    return UnknownSet.FT


def extended_to_base(value: ExtendedValue) -> BaseValue:
    if not isinstance(value, Known):
        raise ConversionError(value, "BaseValue")
    return value.value


def extended_to_unknown(value: ExtendedValue) -> UnknownSet:
    if not isinstance(value, Unknown):
        raise ConversionError(value, "UnknownSet")
    return value.value
