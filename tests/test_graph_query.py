import pytest

from nodegraph.graph.graph_query import get

from conftest import ids, make_node


def test_generation_bound(chain):
    a, _, _ = chain

    assert ids(get([a], "children", None, 0)) == [2]
    assert ids(get([a], "children", None, 1)) == [2, 3]
    assert ids(get([a], "children", None, 5)) == [2, 3]
    assert ids(get([a], "children")) == [2, 3]


def test_walks_either_relation(chain):
    _, _, c = chain

    assert ids(get([c], "parents")) == [2, 1]
    assert ids(get([c], "parents", None, 0)) == [2]


def test_filter_does_not_stop_descent(chain):
    a, _, _ = chain

    assert ids(get([a], "children", {"id": 3})) == [3]
    assert get([a], "children", {"id": 3}, 0) == []


def test_direct_matches_come_before_deeper_ones():
    a = make_node(1)
    b1, b2, c1 = make_node(21), make_node(22), make_node(31)
    a["children"].extend([b1, b2])
    b1["children"].append(c1)

    assert ids(get([a], "children")) == [21, 22, 31]


def test_each_node_is_finished_before_the_next():
    a1, a2 = make_node(11), make_node(12)
    b1, b2, c1 = make_node(21), make_node(22), make_node(31)
    a1["children"].append(b1)
    b1["children"].append(c1)
    a2["children"].append(b2)

    assert ids(get([a1, a2], "children")) == [21, 31, 22]


def test_predicate_filter():
    a = make_node(1)
    a["children"].extend([make_node(1), make_node(2), make_node(3)])

    assert ids(get([a], "children", lambda n: n["id"] >= 2)) == [2, 3]


def test_duplicates_are_reported_per_link():
    a, b = make_node(1), make_node(2)
    a["children"].extend([b, b])

    assert ids(get([a], "children")) == [2, 2]


def test_cycle_terminates_with_a_finite_bound():
    a, b = make_node(1), make_node(2)
    a["children"].append(b)
    b["children"].append(a)

    assert ids(get([a], "children", None, 2)) == [2, 1, 2]


def test_long_chain_is_walked_without_recursion():
    head = make_node(0)
    node = head
    for i in range(1, 5000):
        nxt = make_node(i)
        node["children"].append(nxt)
        node = nxt

    found = get([head], "children")

    assert len(found) == 4999
    assert found[-1] is node


def test_query_does_not_touch_nodes():
    bare = {"id": 1}

    assert get([bare], "children") == []
    assert "children" not in bare


def test_result_is_a_new_list(chain):
    a, b, _ = chain

    found = get([a], "children", None, 0)
    found.clear()

    assert a["children"] == [b]


@pytest.mark.parametrize("bad", [1.5, "2", True])
def test_generations_must_be_an_int(chain, bad):
    a, _, _ = chain
    with pytest.raises(TypeError):
        get([a], "children", None, bad)


def test_negative_generations_rejected(chain):
    a, _, _ = chain
    with pytest.raises(ValueError):
        get([a], "children", None, -1)


def test_invalid_filter_rejected(chain):
    a, _, _ = chain
    with pytest.raises(TypeError):
        get([a], "children", 7)
