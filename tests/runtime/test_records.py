from program.runtime.closures import make_closure
from program.runtime.nodes import FuncDecl
from program.runtime.records import ActivationRecord


def test_declare_and_lookup_local():
    g = ActivationRecord.create()
    b = g.declare("x", 1)
    assert g.lookup_local("x") is b
    assert b.owner is g
    assert g.lookup_local("y") is None
    assert g.is_global


def test_redeclare_in_same_record_replaces_for_new_lookups():
    g = ActivationRecord.create()
    old = g.declare("z", 10)
    new = g.declare("z", 5)
    assert old is not new
    assert g.lookup_local("z") is new
    assert old.value == 10  # la ligadura vieja no se toca


def test_view_hides_later_declarations():
    g = ActivationRecord.create()
    old = g.declare("z", 10)
    view = g.view()
    g.declare("z", 5)
    g.declare("w", 1)
    assert view.record is g
    assert view.lookup("z") is old
    assert view.lookup("w") is None


def test_view_shares_binding_objects():
    g = ActivationRecord.create()
    b = g.declare("n", 0)
    view = g.view()
    b.value = 41
    assert view.lookup("n").value == 41


def test_child_declaration_does_not_touch_parent():
    g = ActivationRecord.create()
    g.declare("x", 1)
    child = ActivationRecord.create(g.view(), label="f#0")
    child.declare("x", 2)
    assert g.lookup_local("x").value == 1
    assert child.lookup_local("x").value == 2
    assert list(child.chain()) == [child, g]


def test_closures_from_same_decl_capture_distinct_records():
    decl = FuncDecl("bar", ["c"], [])
    g = ActivationRecord.create()
    r1 = ActivationRecord.create(g.view(), label="foo#0")
    r2 = ActivationRecord.create(g.view(), label="foo#1")
    r1.declare("x", 3)
    r2.declare("x", 1)
    c1, c2 = make_closure(decl, r1), make_closure(decl, r2)
    assert c1.decl is c2.decl
    assert c1.captured is r1 and c2.captured is r2
    assert c1.parent.lookup("x").value == 3
    assert c2.parent.lookup("x").value == 1
    assert c1.arity == 1
