import pytest

from cadr import errors
from cadr.types.literal import FALSE, TRUE, Boolean, Integer, String
from cadr.types.nil import Nil, NilType
from cadr.types.pair import Pair, delink, link
from cadr.types.procedure import Else, ElseMarker, Quoted
from cadr.types.symbol import Symbol


def test_nil_is_a_singleton_distinct_from_false():
    assert NilType() is Nil
    assert Nil != FALSE
    assert FALSE != Nil
    assert str(Nil) == "()"


def test_else_is_a_singleton():
    assert ElseMarker() is Else


def test_literal_equality_follows_payload_and_kind():
    assert Integer(1) == Integer(1)
    assert hash(Integer(1)) == hash(Integer(1))
    assert Integer(1) != String("1")
    assert Integer(1) != TRUE
    assert Boolean(True) == TRUE
    assert {Integer(3): "x"}[Integer(3)] == "x"


@pytest.mark.parametrize(
    "node,text",
    [
        (Integer(-4), "-4"),
        (TRUE, "#t"),
        (FALSE, "#f"),
        (String("a b"), '"a b"'),
        (Symbol("foo"), "foo"),
        (Quoted(Symbol("foo")), "'foo"),
        (link([Integer(1), Integer(2)]), "(1 2)"),
        (Pair(Integer(1), Integer(2)), "(1 . 2)"),
        (link([Integer(1), Integer(2)], Integer(3)), "(1 2 . 3)"),
        (link([link([]), Quoted(Nil)]), "(() '())"),
    ],
)
def test_printed_form(node, text):
    assert str(node) == text


def test_link_and_delink():
    items = [Integer(1), Symbol("a"), String("s")]
    chain = link(items)
    assert delink(chain) == items
    assert link([]) is Nil
    assert delink(Nil) == []


def test_delink_rejects_dotted_tail():
    with pytest.raises(errors.CadrTypeError):
        delink(Pair(Integer(1), Integer(2)))
    with pytest.raises(errors.CadrTypeError):
        delink(Integer(1))


def test_pair_children_are_required():
    with pytest.raises(errors.CadrTypeError):
        Pair(Integer(1), None)


def test_pairs_compare_structurally():
    assert link([Integer(1), link([Integer(2)])]) == link([Integer(1), link([Integer(2)])])
    assert link([Integer(1)]) != link([Integer(2)])
    assert Pair(Integer(1), Nil) != Pair(Integer(1), Integer(2))


def test_long_lists_compare_and_hash_without_deep_recursion():
    first = link([Integer(i) for i in range(3000)])
    second = link([Integer(i) for i in range(3000)])
    assert first == second
    assert hash(first) == hash(second)
    assert first != link([Integer(i) for i in range(2999)])
    assert link([Integer(1)], Integer(2)) != link([Integer(1)], Integer(3))
