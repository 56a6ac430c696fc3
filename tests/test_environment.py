import pytest

from cadr import errors
from cadr.types.environment import Environment
from cadr.types.literal import Integer
from cadr.types.symbol import Symbol

A, B, C = Symbol("a"), Symbol("b"), Symbol("c")


@pytest.fixture
def chain():
    root = Environment()
    root.define(A, Integer(1))
    middle = Environment(root)
    middle.define(B, Integer(2))
    leaf = Environment(middle)
    leaf.define(A, Integer(10))
    return root, middle, leaf


def test_lookup_walks_outward(chain):
    root, middle, leaf = chain
    assert leaf.lookup(A) == Integer(10)
    assert leaf.lookup(B) == Integer(2)
    assert middle.lookup(A) == Integer(1)
    assert leaf.get(C) is None
    with pytest.raises(errors.CadrUnboundSymbol):
        leaf.lookup(C)


def test_contains_local(chain):
    _, middle, leaf = chain
    assert leaf.contains_local(A)
    assert not leaf.contains_local(B)
    assert middle.contains_local(B)


def test_define_is_local_and_overwrites(chain):
    root, middle, leaf = chain
    middle.define(A, Integer(5))
    assert root.lookup(A) == Integer(1)
    assert middle.lookup(A) == Integer(5)
    middle.define(A, Integer(6))
    assert middle.lookup(A) == Integer(6)


def test_define_rejects_non_symbols():
    with pytest.raises(errors.CadrTypeError):
        Environment().define("a", Integer(1))


def test_define_global_binds_in_root(chain):
    root, middle, leaf = chain
    leaf.define_global(C, Integer(3))
    assert root.contains_local(C)
    assert not leaf.contains_local(C)
    assert leaf.root() is root


def test_set_updates_nearest_binding(chain):
    root, middle, leaf = chain
    leaf.set(B, Integer(20))
    assert middle.lookup(B) == Integer(20)
    assert not leaf.contains_local(B)
    leaf.set(A, Integer(11))
    assert root.lookup(A) == Integer(1)
    with pytest.raises(errors.CadrUnboundSymbol):
        leaf.set(C, Integer(0))


def test_copy_duplicates_locals_and_keeps_parent(chain):
    _, middle, leaf = chain
    clone = leaf.copy()
    assert clone.outer is middle
    clone.define(A, Integer(99))
    assert leaf.lookup(A) == Integer(10)


def test_collapse_flattens_with_inner_precedence(chain):
    root, _, leaf = chain
    flat = leaf.collapse()
    assert flat.outer is None
    assert flat.vars == {A: Integer(10), B: Integer(2)}
    # Later definitions in the collapsed chain are not seen by the snapshot
    root.define(C, Integer(3))
    assert flat.get(C) is None


def test_reparent_shares_bindings(chain):
    root, _, leaf = chain
    flat = leaf.collapse()
    view = flat.reparent(root)
    assert view.outer is root
    view.set(B, Integer(7))
    assert flat.lookup(B) == Integer(7)
    root.define(C, Integer(3))
    assert view.lookup(C) == Integer(3)


def test_str_and_repr(chain):
    root, _, leaf = chain
    assert str(root) == "{a: 1}"
    assert str(leaf) == "{a: 10} -> ..."
    assert repr(leaf) == "<Environment chain: {a: 10} -> {b: 2} -> {a: 1}>"
