"""
nodegraph
=========

Bidirectional parent/child relations between plain records.

Relations are kept on the records themselves, under a "parents" and a
"children" list, and are traversed across any number of generations with
structural or predicate filters::

    from nodegraph import create_handle

    root, leaf = {"id": 1}, {"id": 2}
    create_handle(root).add_children(leaf)
    create_handle(leaf).parents({"id": 1})   # [root]

Public API:
- create_handle
- GraphHandle
- RelationKeys
- StructuralFilter / PredicateFilter
- resembles
- to_digraph
"""

from nodegraph.config.settings import RelationKeys
from nodegraph.graph.graph_filter import PredicateFilter, StructuralFilter, resembles
from nodegraph.graph.graph_export import to_digraph
from nodegraph.graph.graph_handle import GraphHandle, create_handle

__all__ = [
    "create_handle",
    "GraphHandle",
    "RelationKeys",
    "StructuralFilter",
    "PredicateFilter",
    "resembles",
    "to_digraph",
]

__version__ = "0.1.0"
