import pytest
from belnapian.core.belnap import BaseValue
from belnapian.core.errors import EmptyWorldSetError
from belnapian.core.extended import (
    DOMAIN,
    KNOWN_VALUES,
    UNKNOWN_VALUES,
    Known,
    Unknown,
    canonicalize,
    canonicalize_values,
    from_pattern,
)
from belnapian.core.unknown import MASKS, UnknownSet, cardinality, members, parse_pattern, pattern

N = BaseValue.NEITHER
F = BaseValue.FALSE
T = BaseValue.TRUE
B = BaseValue.BOTH

def test_domain_sizes():
    assert len(UnknownSet) == 11
    assert len(KNOWN_VALUES) == 4
    assert len(UNKNOWN_VALUES) == 11
    assert len(DOMAIN) == 15
    assert len(set(DOMAIN)) == 15

def test_domain_order_follows_masks():
    assert [v.mask for v in DOMAIN] == list(MASKS)
    assert DOMAIN[0] == Known(N)
    assert DOMAIN[-1] == Unknown(UnknownSet.NFTB)

def test_patterns():
    assert pattern(0b0011) == "NF__"
    assert pattern(0b1110) == "_FTB"
    assert pattern(0) == "____"
    assert UnknownSet.TB.pattern == "__TB"
    assert str(UnknownSet.NFTB) == "NFTB"
    assert Known(T).pattern == "__T_"

@pytest.mark.parametrize("mask", MASKS)
def test_pattern_roundtrip(mask):
    assert parse_pattern(pattern(mask)) == mask

@pytest.mark.parametrize("text", ["", "NF", "NFTBX", "FN__", "nf__", "N-__"])
def test_parse_pattern_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_pattern(text)

def test_parse_pattern_rejects_empty_set():
    with pytest.raises(ValueError):
        parse_pattern("____")

@pytest.mark.parametrize("mask", MASKS)
def test_canonicalize_is_a_bijection(mask):
    value = canonicalize(mask)
    assert value.mask == mask
    if cardinality(mask) == 1:
        assert isinstance(value, Known)
        assert not value.is_unknown
    else:
        assert isinstance(value, Unknown)
        assert value.is_unknown
    assert value.members == members(mask)

def test_canonicalize_values():
    assert canonicalize_values([T]) == Known(T)
    assert canonicalize_values([T, T]) == Known(T)
    assert canonicalize_values([F, T]) == Unknown(UnknownSet.FT)
    assert canonicalize_values([B, N, T, F]) == Unknown(UnknownSet.NFTB)

def test_canonicalize_empty_is_invariant_violation():
    with pytest.raises(EmptyWorldSetError):
        canonicalize(0)
    with pytest.raises(AssertionError):
        canonicalize_values([])

@pytest.mark.parametrize("bad", [16, -1, "NF__", 2.0])
def test_canonicalize_rejects_non_masks(bad):
    with pytest.raises(ValueError):
        canonicalize(bad)

def test_from_pattern():
    assert from_pattern("N___") == Known(N)
    assert from_pattern("_FT_") == Unknown(UnknownSet.FT)

def test_unknown_set_from_mask():
    assert UnknownSet.from_mask(0b0101) is UnknownSet.NT
    assert UnknownSet.from_pattern("N__B") is UnknownSet.NB
    for single in (1, 2, 4, 8):
        with pytest.raises(ValueError):
            UnknownSet.from_mask(single)
    with pytest.raises(ValueError):
        UnknownSet.from_mask(0)

def test_could_be_queries():
    s = UnknownSet.FTB
    assert not s.could_be_neither()
    assert s.could_be_false()
    assert s.could_be_true()
    assert s.could_be_both()
    assert s.members == (F, T, B)

    v = Unknown(UnknownSet.NF)
    assert v.could_be_neither()
    assert v.could_be_false()
    assert not v.could_be_true()
    assert Known(B).could_be(B)
    assert not Known(B).could_be(N)

def test_known_and_unknown_reject_wrong_payloads():
    with pytest.raises(TypeError):
        Known(UnknownSet.NF)
    with pytest.raises(TypeError):
        Unknown(BaseValue.TRUE)

def test_values_are_hashable_and_distinct():
    assert Known(T) == Known(T)
    assert Known(T) != Unknown(UnknownSet.FT)
    assert len({Known(T), Known(T), Unknown(UnknownSet.FT)}) == 2
    assert repr(Known(T)) == "Known(TRUE)"
    assert repr(Unknown(UnknownSet.NB)) == "Unknown(NB)"

@pytest.mark.parametrize("flag", [True, False])
def test_bools_are_not_masks(flag):
    with pytest.raises(ValueError):
        canonicalize(flag)
    with pytest.raises(ValueError):
        pattern(flag)
    with pytest.raises(ValueError):
        UnknownSet.from_mask(flag)
