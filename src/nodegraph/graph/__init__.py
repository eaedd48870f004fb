"""
Graph subsystem for nodegraph.

Relations are stored on the caller's own records:
- graph_filter: structural and predicate node filters
- graph_mutator: add/remove entries on one relation list
- graph_query: generation-bounded relation traversal
- graph_handle: the six parent/child operations over a node set
- graph_export: NetworkX snapshots of a relation graph
"""

from nodegraph.graph.graph_schema import Node, to_nodes
from nodegraph.graph.graph_filter import (
    StructuralFilter,
    PredicateFilter,
    as_filter,
    resembles,
)
from nodegraph.graph.graph_export import to_digraph
from nodegraph.graph.graph_handle import GraphHandle, create_handle

__all__ = [
    "Node",
    "to_nodes",
    "StructuralFilter",
    "PredicateFilter",
    "as_filter",
    "resembles",
    "to_digraph",
    "GraphHandle",
    "create_handle",
]
