"""Hierarchical index of references, sorted by name."""

from __future__ import annotations

from dataclasses import dataclass, field

from refdoc.info import Reference


def _ascii_lower(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


@dataclass
class Index(Reference):
    """A reference with nested child entries."""

    children: list[Index] = field(default_factory=list)

    def __lt__(self, other: Index) -> bool:
        # Case-insensitive; on a tie, lower case sorts before upper case.
        for a, b in zip(self.name, other.name):
            la, lb = _ascii_lower(a), _ascii_lower(b)
            if la != lb:
                return la < lb
        if len(self.name) == len(other.name):
            return self.name > other.name
        return len(self.name) < len(other.name)

    def sort(self) -> None:
        """Sort the children, recursively."""
        self.children.sort()
        for child in self.children:
            child.sort()