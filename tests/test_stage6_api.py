import pytest
import belnapian
from belnapian import (
    BINARY_OPERATORS,
    BaseValue,
    Known,
    TernaryValue,
    Unknown,
    UnknownSet,
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

N = BaseValue.NEITHER
F = BaseValue.FALSE
T = BaseValue.TRUE
B = BaseValue.BOTH

def test_public_surface():
    assert BINARY_OPERATORS == ("and", "or", "xor", "superposition", "annihilation", "eq")
    for name in belnapian.__all__:
        assert hasattr(belnapian, name)

def test_ternary_operands_stay_ternary():
    assert and_(TernaryValue.TRUE, TernaryValue.UNKNOWN) is TernaryValue.UNKNOWN
    assert or_(TernaryValue.TRUE, TernaryValue.UNKNOWN) is TernaryValue.TRUE
    assert xor(TernaryValue.TRUE, TernaryValue.TRUE) is TernaryValue.FALSE
    assert eq(TernaryValue.FALSE, TernaryValue.FALSE) is TernaryValue.TRUE
    assert not_(TernaryValue.UNKNOWN) is TernaryValue.UNKNOWN

def test_base_operands_stay_base():
    assert and_(N, B) is F
    assert or_(N, B) is T
    assert superposition(T, F) is B
    assert annihilation(T, F) is N
    assert eq(B, B) is T
    assert not_(F) is T

def test_extended_operands():
    assert and_(unknown("NF__"), unknown("__TB")) == Unknown(UnknownSet.NF)
    assert or_(Known(T), Unknown(UnknownSet.NFTB)) == Known(T)
    assert superposition(Known(T), Known(F)) == Known(B)
    assert eq(Known(T), Known(T)) == Known(T)
    assert eq(Unknown(UnknownSet.FT), Known(T)) == Unknown(UnknownSet.FT)
    assert not_(Unknown(UnknownSet.NT)) == Unknown(UnknownSet.NF)

def test_mixed_operands_use_the_mixed_table():
    assert and_(T, Unknown(UnknownSet.NF)) == Unknown(UnknownSet.NF)
    assert and_(Unknown(UnknownSet.NF), T) == Unknown(UnknownSet.NF)
    assert or_(F, Unknown(UnknownSet.TB)) == Unknown(UnknownSet.TB)
    assert annihilation(N, Unknown(UnknownSet.NFTB)) == Known(N)

def test_bare_unknown_sets_are_promoted():
    assert and_(UnknownSet.NF, UnknownSet.TB) == Unknown(UnknownSet.NF)
    assert and_(F, UnknownSet.TB) == Known(F)
    assert or_(UnknownSet.FT, Known(T)) == Known(T)
    assert not_(UnknownSet.FT) == Unknown(UnknownSet.FT)

@pytest.mark.parametrize("op", BINARY_OPERATORS)
def test_apply_is_commutative_across_representations(op):
    for a in BaseValue:
        for s in UnknownSet:
            expected = apply(op, Known(a), Unknown(s))
            assert apply(op, a, Unknown(s)) == expected
            assert apply(op, Unknown(s), a) == expected
            assert apply(op, s, a) == expected

def test_operator_dunders():
    assert Known(T) & Unknown(UnknownSet.FT) == Unknown(UnknownSet.FT)
    assert Known(F) | UnknownSet.NF == Unknown(UnknownSet.NF)
    assert T & Unknown(UnknownSet.NF) == Unknown(UnknownSet.NF)
    assert UnknownSet.FT ^ Known(T) == Unknown(UnknownSet.FT)
    assert ~Known(T) == Known(F)
    assert Known(T).superposition(F) == Known(B)

def test_unknown_operator():
    with pytest.raises(ValueError):
        apply("nand", T, T)

def test_mixing_ternary_and_belnap_is_rejected():
    with pytest.raises(TypeError):
        and_(TernaryValue.TRUE, T)
    with pytest.raises(TypeError):
        or_(Known(T), TernaryValue.FALSE)
    with pytest.raises(TypeError):
        Known(T) & TernaryValue.TRUE

def test_belnap_only_operators_reject_ternary():
    with pytest.raises(TypeError):
        superposition(TernaryValue.TRUE, TernaryValue.FALSE)
    with pytest.raises(TypeError):
        annihilation(TernaryValue.TRUE, TernaryValue.FALSE)

def test_foreign_operands_are_rejected():
    with pytest.raises(TypeError):
        and_(True, Known(T))
    with pytest.raises(TypeError):
        not_(None)
    with pytest.raises(TypeError):
        Known(T) & 1

def test_no_implicit_truthiness():
    with pytest.raises(TypeError):
        bool(Known(T))
    with pytest.raises(TypeError):
        bool(Unknown(UnknownSet.FT))

def test_constructors():
    assert known(T) == Known(T)
    assert unknown(UnknownSet.TB) == Unknown(UnknownSet.TB)
    assert unknown("N_T_") == Unknown(UnknownSet.NT)
    with pytest.raises(ValueError):
        unknown("__T_")
    assert str(unknown("N_T_")) == "N_T_"

def test_unknown_sets_carry_operators():
    assert UnknownSet.NF & UnknownSet.TB == Unknown(UnknownSet.NF)
    assert UnknownSet.NF.and_(UnknownSet.TB) == Unknown(UnknownSet.NF)
    assert T & UnknownSet.NF == Unknown(UnknownSet.NF)
    assert UnknownSet.FT | T == Known(T)
    assert UnknownSet.FT.superposition(B) == Known(B)
    assert ~UnknownSet.NT == Unknown(UnknownSet.NF)
    with pytest.raises(TypeError):
        UnknownSet.FT & TernaryValue.TRUE
    with pytest.raises(TypeError):
        bool(UnknownSet.FT)
