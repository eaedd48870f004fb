from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Tuple

from nodegraph.graph.graph_filter import as_filter
from nodegraph.graph.graph_schema import Node, peek_relations

_DONE = object()


def get(
    nodes: List[Node],
    relation_key: str,
    filter: Any = None,
    generations: Optional[int] = None,
) -> List[Node]:
    """
    Collect relatives of ``nodes`` along ``relation_key``.

    Each node contributes its direct relatives that pass ``filter``, followed
    by the matches found below every one of those relatives, before the next
    node is visited. Relatives that fail the filter are still descended into.

    ``generations`` bounds how many extra hops are taken below the direct
    relatives: 0 stops at direct relatives, None walks until the relation
    lists run out. There is no cycle guard, so an unbounded walk over a
    cyclic graph never returns.
    """
    matches = as_filter(filter)
    _check_generations(generations)

    found: List[Node] = []

    # Each frame is a frontier iterator plus the hop budget left below it.
    stack: List[Tuple[Iterator[Node], Optional[int]]] = [(iter(nodes), generations)]

    while stack:
        frontier, remaining = stack[-1]
        node = next(frontier, _DONE)
        if node is _DONE:
            stack.pop()
            continue

        related = peek_relations(node, relation_key)
        found.extend(r for r in related if matches(r))

        if remaining is None:
            stack.append((iter(related), None))
        elif remaining > 0:
            stack.append((iter(related), remaining - 1))

    logging.getLogger("nodegraph.query").debug(
        "get %s: nodes=%s generations=%s found=%s",
        relation_key,
        len(nodes),
        generations,
        len(found),
    )
    return found


def _check_generations(generations: Optional[int]) -> None:
    if generations is None:
        return
    if isinstance(generations, bool) or not isinstance(generations, int):
        raise TypeError(
            f"generations must be an int or None, got {type(generations).__name__}"
        )
    if generations < 0:
        raise ValueError(f"generations must be >= 0, got {generations}")
