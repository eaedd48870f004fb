from __future__ import annotations

import logging
from typing import Dict, List

import networkx as nx

from nodegraph.config.settings import RelationKeys, default_keys
from nodegraph.graph.graph_schema import Node, NodeOrNodes, peek_relations, to_nodes


def to_digraph(nodes: NodeOrNodes, keys: RelationKeys | None = None) -> nx.DiGraph:
    """
    Snapshot everything reachable from ``nodes`` into a NetworkX DiGraph.

    Graph nodes are keyed by ``id(record)`` and carry the record under
    ``data``. Edges point parent -> child. Both relation directions are
    followed, and each record is visited once, so cycles are fine here.
    The records themselves are not modified.
    """
    keys = keys or default_keys.current()

    g = nx.DiGraph()
    seen: Dict[int, Node] = {}
    pending: List[Node] = list(to_nodes(nodes))

    while pending:
        node = pending.pop()
        if id(node) in seen:
            continue
        seen[id(node)] = node
        g.add_node(id(node), data=node)

        for child in peek_relations(node, keys.children):
            g.add_edge(id(node), id(child))
            pending.append(child)
        for parent in peek_relations(node, keys.parents):
            g.add_edge(id(parent), id(node))
            pending.append(parent)

    logging.getLogger("nodegraph.export").debug(
        "to_digraph: nodes=%s edges=%s",
        g.number_of_nodes(),
        g.number_of_edges(),
    )
    return g
