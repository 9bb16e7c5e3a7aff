import pytest

from kitforge.domain.records import ClassRecord, ScalarValue, SequenceValue
from kitforge.domain.slots import SEQUENCE_SLOTS
from kitforge.parser import parse_universe
from kitforge.parser.errors import FieldTypeError, InheritanceCycleError, UnknownParentError
from kitforge.services import resolve_text, resolve_universe

_CHAIN = """
class root
{
    displayName = "Root";
    vest[] = {"root_vest"};
    items[] = {"bandage"};
    code = "root_hook";
};
class mid : root
{
    vest[] = {"mid_vest_a", "mid_vest_b"};
};
class leaf : mid
{
    displayName = "Leaf";
    items[] = {};
};
"""


def test_child_declaration_replaces_parent_value_wholesale() -> None:
    universe = resolve_text(_CHAIN)

    assert universe.get("mid").sequence("vest") == ("mid_vest_a", "mid_vest_b")
    assert universe.get("leaf").sequence("vest") == ("mid_vest_a", "mid_vest_b")


def test_omitted_field_inherits_parent_value() -> None:
    universe = resolve_text(_CHAIN)

    assert universe.get("mid").display_name == "Root"
    assert universe.get("mid").sequence("items") == ("bandage",)
    assert universe.get("leaf").code == "root_hook"


def test_explicit_empty_sequence_overrides_non_empty_parent() -> None:
    universe = resolve_text(_CHAIN)

    assert universe.get("leaf").fields["items"] == SequenceValue(())
    assert universe.get("mid").sequence("items") == ("bandage",)


def test_every_known_slot_has_a_value() -> None:
    resolved = resolve_text("class lonely {};").get("lonely")

    for slot in SEQUENCE_SLOTS:
        assert resolved.fields[slot] == SequenceValue(())
    assert resolved.fields["displayName"] == ScalarValue("")
    assert resolved.fields["code"] == ScalarValue("")


def test_children_may_be_declared_before_parents() -> None:
    universe = resolve_text('class child : parent {}; class parent { vest[] = {"v"}; };')

    assert universe.get("child").sequence("vest") == ("v",)
    order = universe.resolution_order
    assert order.index("parent") < order.index("child")


def test_lineage_and_table_export() -> None:
    universe = resolve_text(_CHAIN)

    assert universe.get("leaf").lineage == ("leaf", "mid", "root")
    table = universe.as_table()
    assert table["leaf"]["vest"] == ["mid_vest_a", "mid_vest_b"]
    assert table["leaf"]["displayName"] == "Leaf"
    assert set(table) == {"root", "mid", "leaf"}


def test_resolution_is_idempotent() -> None:
    first = resolve_text(_CHAIN)
    second = resolve_text(_CHAIN)

    assert first.as_table() == second.as_table()


def test_override_law_over_every_slot() -> None:
    for slot in SEQUENCE_SLOTS:
        text = f'class p {{ {slot}[] = {{"parent"}}; }}; class c : p {{ {slot}[] = {{"child"}}; }}; class d : p {{}};'
        universe = resolve_text(text)
        assert universe.get("c").sequence(slot) == ("child",)
        assert universe.get("d").sequence(slot) == ("parent",)


def test_two_class_cycle_raises_with_path() -> None:
    with pytest.raises(InheritanceCycleError) as excinfo:
        resolve_text("class A : B {}; class B : A {};")

    assert excinfo.value.cycle == ("A", "B", "A")
    assert "A -> B -> A" in str(excinfo.value)


def test_self_inheritance_is_a_cycle() -> None:
    with pytest.raises(InheritanceCycleError) as excinfo:
        resolve_text("class A : A {};")

    assert excinfo.value.cycle == ("A", "A")


def test_cycle_behind_a_valid_prefix_reports_only_the_loop() -> None:
    with pytest.raises(InheritanceCycleError) as excinfo:
        resolve_text("class start : x {}; class x : y {}; class y : z {}; class z : x {};")

    assert excinfo.value.cycle == ("x", "y", "z", "x")


def test_unknown_parent_raises() -> None:
    with pytest.raises(UnknownParentError) as excinfo:
        resolve_text("class orphan : missing {};")

    assert excinfo.value.parent_name == "missing"
    assert excinfo.value.line == 1


def test_inherited_kind_mismatch_raises() -> None:
    with pytest.raises(FieldTypeError) as excinfo:
        resolve_text('class p { extra = "x"; }; class c : p { extra[] = {"y"}; };')

    assert excinfo.value.class_name == "c"
    assert excinfo.value.field_name == "extra"


def test_resolver_accepts_hand_built_records() -> None:
    records = {
        "base": ClassRecord(name="base", parent=None, fields={"hmd": SequenceValue(("nvg",))}),
        "scout": ClassRecord(name="scout", parent="base", fields={}),
    }

    universe = resolve_universe(records)

    assert universe.get("scout").sequence("hmd") == ("nvg",)
    assert "scout" in universe
    assert len(universe) == 2


def test_get_unknown_class_raises_key_error() -> None:
    universe = resolve_universe(parse_universe("class a {};"))

    with pytest.raises(KeyError):
        universe.get("b")


def test_child_of_forward_declared_class_resolves() -> None:
    universe = resolve_text('class Base;\nclass Using : Base { vest[] = {"v"}; };')

    assert universe.get("Using").sequence("vest") == ("v",)
    assert universe.get("Using").lineage == ("Using", "Base")
    assert universe.get("Base").sequence("vest") == ()
    assert universe.resolution_order == ("Base", "Using")
