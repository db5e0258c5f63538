import pytest
from belnapian.core.belnap import BaseValue
from belnapian.core.conversions import (
    base_to_ternary,
    extended_from_bool,
    extended_to_base,
    extended_to_bool,
    extended_to_ternary,
    extended_to_unknown,
    ternary_to_base,
    ternary_to_extended,
    ternary_to_unknown,
    unknown_to_ternary,
)
from belnapian.core.errors import ConversionError
from belnapian.core.extended import Known, Unknown
from belnapian.core.ternary import TernaryValue
from belnapian.core.unknown import UnknownSet

def test_bool_roundtrip():
    assert extended_from_bool(True) == Known(BaseValue.TRUE)
    assert extended_from_bool(False) == Known(BaseValue.FALSE)
    assert extended_to_bool(Known(BaseValue.TRUE)) is True
    assert Known(BaseValue.FALSE).to_bool() is False

@pytest.mark.parametrize("value", [Known(BaseValue.NEITHER), Known(BaseValue.BOTH), Unknown(UnknownSet.FT)])
def test_non_classical_values_have_no_bool(value):
    with pytest.raises(ConversionError):
        extended_to_bool(value)
    with pytest.raises(ValueError):
        value.to_bool()

def test_ternary_and_base():
    assert ternary_to_base(TernaryValue.TRUE) is BaseValue.TRUE
    assert base_to_ternary(BaseValue.FALSE) is TernaryValue.FALSE
    with pytest.raises(ConversionError):
        ternary_to_base(TernaryValue.UNKNOWN)
    with pytest.raises(ConversionError):
        base_to_ternary(BaseValue.BOTH)

def test_ternary_unknown_is_false_or_true():
    assert ternary_to_extended(TernaryValue.UNKNOWN) == Unknown(UnknownSet.FT)
    assert ternary_to_extended(TernaryValue.TRUE) == Known(BaseValue.TRUE)
    assert extended_to_ternary(Unknown(UnknownSet.FT)) is TernaryValue.UNKNOWN
    assert extended_to_ternary(Known(BaseValue.FALSE)) is TernaryValue.FALSE
    assert ternary_to_unknown(TernaryValue.UNKNOWN) is UnknownSet.FT
    assert unknown_to_ternary(UnknownSet.FT) is TernaryValue.UNKNOWN

def test_ternary_has_no_room_for_other_sets():
    with pytest.raises(ConversionError):
        extended_to_ternary(Unknown(UnknownSet.NF))
    with pytest.raises(ConversionError):
        extended_to_ternary(Known(BaseValue.NEITHER))
    with pytest.raises(ConversionError):
        unknown_to_ternary(UnknownSet.FTB)
    with pytest.raises(ConversionError):
        ternary_to_unknown(TernaryValue.TRUE)

def test_extended_projections():
    assert extended_to_base(Known(BaseValue.BOTH)) is BaseValue.BOTH
    assert extended_to_unknown(Unknown(UnknownSet.NB)) is UnknownSet.NB
    with pytest.raises(ConversionError):
        extended_to_base(Unknown(UnknownSet.NB))
    with pytest.raises(ConversionError):
        extended_to_unknown(Known(BaseValue.BOTH))

def test_error_message():
    err = ConversionError(BaseValue.BOTH, "bool")
    assert str(err) == "<BaseValue.BOTH: 8> cannot be converted to bool"
    assert err.target == "bool"
