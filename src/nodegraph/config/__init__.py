"""
Configuration layer for nodegraph.

Relation key names are resolved in this order:
- built-in DEFAULTS ("parents" / "children")
- NODEGRAPH_PARENTS_KEY / NODEGRAPH_CHILDREN_KEY from the environment or .env
- the most recent create_handle(...) call that named keys explicitly

The last step is process-wide and lives in ``default_keys``.
"""

from nodegraph.config.settings import (
    RelationKeys,
    RelationKeyRegistry,
    default_keys,
    settings,
)

__all__ = [
    "RelationKeys",
    "RelationKeyRegistry",
    "default_keys",
    "settings",
]
