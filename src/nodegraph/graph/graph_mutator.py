from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping

from nodegraph.graph.graph_schema import Node, relation_list


def add(nodes: List[Node], relation_key: str, related_nodes: Iterable[Node]) -> List[Node]:
    """
    Append ``related_nodes`` to the ``relation_key`` list of every node.

    E.g. add(ys, "children", xs) records xs as children of each y. Existing
    entries keep their order and duplicates are kept.
    """
    related = list(related_nodes)

    for node in nodes:
        relation_list(node, relation_key).extend(related)

    logging.getLogger("nodegraph.mutate").debug(
        "add %s: nodes=%s related=%s",
        relation_key,
        len(nodes),
        len(related),
    )
    return nodes


def remove(nodes: List[Node], relation_key: str, related_nodes: Iterable[Node]) -> List[Node]:
    """
    Drop the first occurrence of each of ``related_nodes`` from the
    ``relation_key`` list of every node.

    Records are matched by identity, any other value by equality.
    Missing entries are skipped silently.
    """
    related = list(related_nodes)
    removed = 0

    for node in nodes:
        entries = relation_list(node, relation_key)
        for target in related:
            index = _index_of(entries, target)
            if index is not None:
                del entries[index]
                removed += 1

    logging.getLogger("nodegraph.mutate").debug(
        "remove %s: nodes=%s related=%s removed=%s",
        relation_key,
        len(nodes),
        len(related),
        removed,
    )
    return nodes


def _index_of(entries: List[Any], target: Any) -> int | None:
    by_value = not isinstance(target, Mapping)
    for index, entry in enumerate(entries):
        if entry is target or (by_value and entry == target):
            return index
    return None
