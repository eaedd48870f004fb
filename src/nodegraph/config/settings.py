from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from dynaconf import Dynaconf

from nodegraph.config.constants import DEFAULTS

settings = Dynaconf(
    envvar_prefix="NODEGRAPH",
    load_dotenv=True,
    settings_files=[],
)


# ---------------------------------------------------------------------
# Relation vocabulary
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class RelationKeys:
    """
    Names of the two node fields that hold relation lists.
    """

    parents: str = DEFAULTS["PARENTS_KEY"]
    children: str = DEFAULTS["CHILDREN_KEY"]

    @staticmethod
    def from_settings(source: Any = None) -> "RelationKeys":
        source = settings if source is None else source
        return RelationKeys(
            parents=str(source.get("PARENTS_KEY", DEFAULTS["PARENTS_KEY"])),
            children=str(source.get("CHILDREN_KEY", DEFAULTS["CHILDREN_KEY"])),
        )


# ---------------------------------------------------------------------
# Process-wide defaults
# ---------------------------------------------------------------------


class RelationKeyRegistry:
    """
    Holds the relation keys used by handles that do not name their own.

    Any key supplied to ``resolve`` replaces the stored default and sticks
    for every later call that omits it (last write wins, per key).
    """

    def __init__(self, initial: RelationKeys | None = None) -> None:
        self._initial = initial or RelationKeys.from_settings()
        self._current = self._initial

    def current(self) -> RelationKeys:
        return self._current

    def resolve(
        self,
        parents_key: str | None = None,
        children_key: str | None = None,
    ) -> RelationKeys:
        """
        Fold explicitly supplied keys into the defaults and return the result.

        Empty or ``None`` keys leave the stored value untouched.
        """
        updated = self._current
        if parents_key:
            updated = replace(updated, parents=parents_key)
        if children_key:
            updated = replace(updated, children=children_key)

        if updated != self._current:
            logging.getLogger("nodegraph.config").info(
                "default relation keys changed: parents=%s children=%s",
                updated.parents,
                updated.children,
            )
            self._current = updated

        return self._current

    def reset(self) -> RelationKeys:
        self._current = self._initial
        return self._current


default_keys = RelationKeyRegistry()
