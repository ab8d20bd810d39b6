"""Grouping of functions in a scope by name."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import groupby
from operator import attrgetter

from refdoc.corpus import Corpus
from refdoc.symbols import FunctionInfo, Scope


@dataclass
class OverloadSet:
    """Functions in one scope that share a name."""

    name: str
    functions: list[FunctionInfo] = field(default_factory=list)


def make_overload_sets(
    corpus: Corpus,
    scope: Scope,
    predicate: Callable[[FunctionInfo], bool],
) -> list[OverloadSet]:
    """Return the functions of ``scope`` accepted by ``predicate``, grouped by name."""
    selected = [
        info
        for info in (corpus.get(ref.usr) for ref in scope.functions)
        if predicate(info)
    ]
    selected.sort(key=attrgetter("name"))
    return [
        OverloadSet(name, list(group))
        for name, group in groupby(selected, key=attrgetter("name"))
    ]