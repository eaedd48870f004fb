from __future__ import annotations

from typing import Any, List, Optional

import networkx as nx

from nodegraph.config.settings import RelationKeys, default_keys
from nodegraph.graph import graph_mutator, graph_query
from nodegraph.graph.graph_export import to_digraph
from nodegraph.graph.graph_schema import Node, NodeOrNodes, to_nodes


class GraphHandle:
    """
    Relation operations over a fixed set of caller-owned nodes.

    The handle stores nothing but the node list and the relation keys it
    was built with. Relations live on the nodes, so two handles over the
    same records see each other's changes immediately.
    """

    def __init__(self, nodes: NodeOrNodes, keys: RelationKeys | None = None) -> None:
        self._nodes = to_nodes(nodes)
        self._keys = keys or default_keys.current()

    @property
    def nodes(self) -> List[Node]:
        return self._nodes

    @property
    def keys(self) -> RelationKeys:
        return self._keys

    def __repr__(self) -> str:
        return (
            f"GraphHandle(nodes={len(self._nodes)}, "
            f"parents={self._keys.parents!r}, children={self._keys.children!r})"
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def parents(self, filter: Any = None, generations: Optional[int] = None) -> List[Node]:
        """
        Ancestors of the bound nodes, nearest first for each node.

        ``filter`` is a partial record or a predicate; ``generations`` limits
        how far above the direct parents the search goes (None: no limit).
        """
        return graph_query.get(self._nodes, self._keys.parents, filter, generations)

    def children(self, filter: Any = None, generations: Optional[int] = None) -> List[Node]:
        """
        Descendants of the bound nodes, nearest first for each node.
        """
        return graph_query.get(self._nodes, self._keys.children, filter, generations)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_parents(self, parents: NodeOrNodes) -> List[Node]:
        linked = graph_mutator.add(to_nodes(parents), self._keys.children, self._nodes)
        return graph_mutator.add(self._nodes, self._keys.parents, linked)

    def add_children(self, children: NodeOrNodes) -> List[Node]:
        linked = graph_mutator.add(to_nodes(children), self._keys.parents, self._nodes)
        return graph_mutator.add(self._nodes, self._keys.children, linked)

    def remove_parents(self, parents: NodeOrNodes) -> List[Node]:
        unlinked = graph_mutator.remove(to_nodes(parents), self._keys.children, self._nodes)
        return graph_mutator.remove(self._nodes, self._keys.parents, unlinked)

    def remove_children(self, children: NodeOrNodes) -> List[Node]:
        unlinked = graph_mutator.remove(to_nodes(children), self._keys.parents, self._nodes)
        return graph_mutator.remove(self._nodes, self._keys.children, unlinked)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_digraph(self) -> nx.DiGraph:
        return to_digraph(self._nodes, self._keys)


def create_handle(
    nodes: NodeOrNodes,
    parents_key: str | None = None,
    children_key: str | None = None,
) -> GraphHandle:
    """
    Build a GraphHandle over ``nodes``.

    Keys given here become the process-wide defaults for every later call
    that leaves them out. Use ``GraphHandle(nodes, keys=...)`` to pick keys
    for one handle without touching the defaults.
    """
    return GraphHandle(nodes, default_keys.resolve(parents_key, children_key))
