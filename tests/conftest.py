from __future__ import annotations

from typing import Any, Dict, Iterable, List

import pytest

from nodegraph.config.settings import default_keys


def make_node(node_id: int, **fields: Any) -> Dict[str, Any]:
    node: Dict[str, Any] = {"id": node_id, "parents": [], "children": []}
    node.update(fields)
    return node


def ids(nodes: Iterable[Dict[str, Any]]) -> List[int]:
    return [n["id"] for n in nodes]


@pytest.fixture(autouse=True)
def _reset_default_keys():
    default_keys.reset()
    yield
    default_keys.reset()


@pytest.fixture()
def chain():
    """
    a -> b -> c along the children relation, linked both ways.
    """
    a, b, c = make_node(1), make_node(2), make_node(3)
    a["children"].append(b)
    b["parents"].append(a)
    b["children"].append(c)
    c["parents"].append(b)
    return a, b, c
