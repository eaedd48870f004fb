from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

_MISSING = object()


def resembles(pattern: Mapping[str, Any], candidate: Mapping[str, Any]) -> bool:
    """
    True when every field of ``pattern`` is present in ``candidate``
    with an equal value. The empty pattern resembles everything.

    A field missing from ``candidate`` never matches, not even a pattern
    value of None: {"colour": None} does not resemble {"id": 1}.
    """
    for key in pattern:
        expected = pattern[key]
        actual = candidate.get(key, _MISSING)
        if actual is _MISSING:
            return False
        if actual is not expected and actual != expected:
            return False
    return True


@dataclass(frozen=True)
class StructuralFilter:
    """
    Matches nodes that resemble a partial record.
    """

    pattern: Mapping[str, Any]

    def __call__(self, node: Mapping[str, Any]) -> bool:
        return resembles(self.pattern, node)


@dataclass(frozen=True)
class PredicateFilter:
    """
    Matches nodes for which a caller-supplied function returns True.
    """

    predicate: Callable[[Mapping[str, Any]], bool]

    def __call__(self, node: Mapping[str, Any]) -> bool:
        return bool(self.predicate(node))


Filter = Union[StructuralFilter, PredicateFilter]

MATCH_ALL = StructuralFilter({})


def as_filter(value: Any = None) -> Filter:
    """
    Normalize the loose filter forms accepted by queries.

    ``None`` matches everything, a mapping becomes a StructuralFilter and a
    callable becomes a PredicateFilter.
    """
    if value is None:
        return MATCH_ALL
    if isinstance(value, (StructuralFilter, PredicateFilter)):
        return value
    if isinstance(value, Mapping):
        return StructuralFilter(value)
    if callable(value):
        return PredicateFilter(value)
    raise TypeError(
        f"filter must be a mapping or a callable, got {type(value).__name__}"
    )
