import itertools
import types

import pytest
from belnapian.core import _generated_tables
from belnapian.core.belnap import BASE_VALUES, OPERATORS, BaseValue
from belnapian.core.extended import DOMAIN, Known, dispatch, from_pattern
from belnapian.core.lifting import lift_binary, lift_unary
from belnapian.core.tables import BASE_MASKS, TABLES, WIDTH, OperationTable, TableSet, load_tables
from belnapian.core.unknown import MASKS, UnknownSet
from belnapian.tablegen.pipeline import TableGenConfig, TableGenPipeline
from belnapian.tablegen.render import render_module

def test_embedded_tables_cover_every_operator():
    assert TABLES.operators == tuple(OPERATORS)
    assert set(TABLES.mixed) == set(OPERATORS)
    assert set(TABLES.unary) == {"not"}

@pytest.mark.parametrize("name", list(OPERATORS))
def test_table_sizes(name):
    assert len(TABLES.binary[name]) == 225
    assert len(TABLES.mixed[name]) == 60
    assert not list(TABLES.binary[name].undefined())
    assert not list(TABLES.mixed[name].undefined())

@pytest.mark.parametrize("name", list(OPERATORS))
def test_table_dispatch_matches_lifting(name):
    lifted = lift_binary(OPERATORS[name])
    for x, y in itertools.product(DOMAIN, repeat=2):
        assert dispatch(name, x, y) == lifted(x, y)

@pytest.mark.parametrize("name", list(OPERATORS))
def test_mixed_dispatch_matches_lifting(name):
    lifted = lift_binary(OPERATORS[name])
    for a, y in itertools.product(BASE_VALUES, DOMAIN):
        assert dispatch(name, y, a) == lifted(Known(a), y)

def test_unary_table_matches_lifting():
    lifted = lift_unary(BaseValue.not_)
    for x in DOMAIN:
        assert x.not_() == lifted(x)

def test_embedded_module_is_what_the_generator_renders():
    fresh = TableGenPipeline(TableGenConfig()).build_tables()
    with open(_generated_tables.__file__, encoding="utf-8") as fh:
        assert render_module(fresh) == fh.read()

def test_loaded_tables_equal_fresh_build():
    fresh = TableGenPipeline(TableGenConfig()).build_tables()
    for name in OPERATORS:
        assert TABLES.binary[name] == fresh.binary[name]
        assert TABLES.mixed[name] == fresh.mixed[name]
    assert dict(TABLES.unary) == dict(fresh.unary)

def test_tables_are_read_only():
    with pytest.raises(TypeError):
        TABLES.binary["and"] = TABLES.binary["or"]
    with pytest.raises(AttributeError):
        TABLES.binary = {}

def test_operation_table_layout():
    table = OperationTable.from_function("first", MASKS, MASKS, lambda x, y: x)
    assert table.lookup(3, 12) == 3
    assert table.row(5) == (5,) * 15
    assert len(table) == 225
    assert repr(table) == "OperationTable('first', 15x15)"

    mixed = OperationTable.from_function("first", BASE_MASKS, MASKS, lambda x, y: x)
    assert len(mixed) == 60
    # cells outside the declared rows stay empty
    assert mixed.lookup(3, 3) == 0

def test_operation_table_rejects_bad_sizes():
    with pytest.raises(ValueError):
        OperationTable("short", MASKS, MASKS, bytes(WIDTH))

def test_from_patterns():
    table = OperationTable.from_patterns(
        "tiny",
        ["N___", "_F__"],
        ["N___", "_F__"],
        [["N___", "NF__"], ["NF__", "_F__"]],
    )
    assert table.lookup(1, 2) == 3
    assert table.patterns() == (("N___", "NF__"), ("NF__", "_F__"))
    with pytest.raises(ValueError):
        OperationTable.from_patterns("bad", ["N___"], ["N___"], [["N___", "_F__"]])
    with pytest.raises(ValueError):
        OperationTable.from_patterns("bad", ["N___"], ["N___"], [["____"]])

def _module():
    return types.ModuleType("fake_tables")

def test_load_tables_rejects_reordered_domain():
    fake = _module()
    fake.DOMAIN = tuple(reversed(_generated_tables.DOMAIN))
    fake.BASE_DOMAIN = _generated_tables.BASE_DOMAIN
    fake.BINARY_TABLES = {}
    fake.MIXED_TABLES = {}
    fake.UNARY_TABLES = {}
    with pytest.raises(ValueError):
        load_tables(fake)

def test_load_tables_rejects_short_unary_line():
    fake = _module()
    fake.DOMAIN = _generated_tables.DOMAIN
    fake.BASE_DOMAIN = _generated_tables.BASE_DOMAIN
    fake.BINARY_TABLES = _generated_tables.BINARY_TABLES
    fake.MIXED_TABLES = _generated_tables.MIXED_TABLES
    fake.UNARY_TABLES = {"not": ("N___",)}
    with pytest.raises(ValueError):
        load_tables(fake)

def test_load_tables_from_module():
    tables = load_tables(_generated_tables)
    assert isinstance(tables, TableSet)
    assert tables.binary["and"].lookup(UnknownSet.NF.mask, UnknownSet.TB.mask) == UnknownSet.NF.mask
    assert tables.binary["superposition"].lookup(4, 2) == 8

def _rendered(tables):
    module = types.ModuleType("rendered_tables")
    exec(render_module(tables), module.__dict__)
    return module

def test_load_tables_rejects_partial_module():
    partial = TableGenPipeline(TableGenConfig(operators=("and",))).build_tables()
    with pytest.raises(ValueError):
        load_tables(_rendered(partial))

def test_load_tables_rejects_missing_unary_table():
    fake = _module()
    fake.DOMAIN = _generated_tables.DOMAIN
    fake.BASE_DOMAIN = _generated_tables.BASE_DOMAIN
    fake.BINARY_TABLES = _generated_tables.BINARY_TABLES
    fake.MIXED_TABLES = _generated_tables.MIXED_TABLES
    fake.UNARY_TABLES = {}
    with pytest.raises(ValueError):
        load_tables(fake)

def test_load_tables_accepts_full_render():
    tables = load_tables(_rendered(TableGenPipeline(TableGenConfig()).build_tables()))
    assert set(tables.operators) == set(OPERATORS)

@pytest.mark.parametrize("name", list(OPERATORS))
def test_known_operands_agree_with_base_logic(name):
    op = OPERATORS[name]
    for a, b in itertools.product(BASE_VALUES, repeat=2):
        assert dispatch(name, Known(a), Known(b)) == Known(op(a, b))
        assert dispatch(name, Known(a), b) == Known(op(a, b))

@pytest.mark.parametrize("name", list(OPERATORS))
def test_embedded_tables_are_symmetric(name):
    for x, y in itertools.product(DOMAIN, repeat=2):
        assert dispatch(name, x, y) == dispatch(name, y, x)

def test_xor_cells_with_both():
    T = Known(BaseValue.TRUE)
    B = Known(BaseValue.BOTH)
    assert dispatch("xor", T, B) == B
    assert dispatch("xor", B, T) == B
    assert dispatch("xor", T, BaseValue.BOTH) == B
    # {T} xor {N, B} -> {N, B}
    assert dispatch("xor", T, from_pattern("N__B")) == from_pattern("N__B")
    assert dispatch("xor", T, from_pattern("_F_B")) == from_pattern("__TB")
