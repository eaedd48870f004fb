from __future__ import annotations

from typing import Any, Iterable, List, Mapping, MutableMapping, Union

# A node is any caller-owned mutable record. Relation lists are stored on
# it under the configured parents/children keys.
Node = MutableMapping[str, Any]

NodeOrNodes = Union[Node, Iterable[Node]]


def to_nodes(value: NodeOrNodes) -> List[Node]:
    """
    Normalize a single node or a collection of nodes into a list.

    A list is returned as-is so callers keep working on the same object.
    """
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, list):
        return value
    return list(value)


def relation_list(node: Node, relation_key: str) -> List[Node]:
    """
    Return the node's relation list, creating an empty one when missing.
    """
    return node.setdefault(relation_key, [])


def peek_relations(node: Node, relation_key: str) -> List[Node]:
    """
    Read-only counterpart of ``relation_list``: a missing field reads as empty.
    """
    return node.get(relation_key) or []
