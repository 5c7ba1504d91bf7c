import pytest

from egg.errors import EggReferenceError
from egg.types.environment import Environment


@pytest.fixture
def chain():
    root = Environment()
    root.define("x", 1)
    middle = root.child()
    inner = middle.child()
    return root, middle, inner


def test_lookup_walks_outward(chain):
    root, middle, inner = chain
    assert inner.lookup("x") == 1
    assert "x" in inner
    assert inner.find("x") is root


def test_define_shadows_without_touching_outer(chain):
    root, middle, inner = chain
    inner.define("x", 2)
    assert inner.lookup("x") == 2
    assert middle.lookup("x") == 1
    assert root.vars == {"x": 1}


def test_define_overwrites_in_same_frame(chain):
    root, _, _ = chain
    root.define("x", 5)
    assert root.lookup("x") == 5


def test_set_mutates_nearest_owner(chain):
    root, middle, inner = chain
    middle.define("x", 10)
    inner.set("x", 20)
    assert middle.vars["x"] == 20
    assert root.vars["x"] == 1
    assert "x" not in inner.vars


def test_set_never_creates_a_binding(chain):
    _, _, inner = chain
    with pytest.raises(EggReferenceError, match="y"):
        inner.set("y", 1)
    assert "y" not in inner


def test_lookup_unbound(chain):
    _, _, inner = chain
    with pytest.raises(EggReferenceError, match="Undefined variable: nope"):
        inner.lookup("nope")


def test_values_may_be_false(chain):
    root, _, inner = chain
    root.define("f", False)
    assert inner.lookup("f") is False


def test_update_and_root(chain):
    root, _, inner = chain
    inner.update({"a": 1, "b": 2})
    assert inner.vars == {"a": 1, "b": 2}
    assert inner.root() is root


def test_str_and_repr(chain):
    root, middle, _ = chain
    middle.define("y", "hi")
    assert str(root) == "{x: 1}"
    assert str(middle) == "{y: 'hi'} -> ..."
    assert repr(middle) == "<Environment chain: {y: 'hi'} -> {x: 1}>"
