"""The collection of all symbols gathered from the sources."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from refdoc.info import Info

_T = TypeVar("_T", bound=Info)


def reduce_infos(values: Sequence[Info | None]) -> Info:
    """Merge several infos describing one symbol into a fresh info."""
    if not values or values[0] is None:
        raise ValueError("no value to reduce")
    first = values[0]
    merged = type(first)(usr=first.usr)
    for value in values:
        merged.merge(value)
    return merged


class Corpus:
    """All documented symbols, keyed by symbol id."""

    def __init__(self) -> None:
        self._infos: dict[bytes, Info] = {}
        self.all_symbols: list[bytes] = []

    def add(self, info: Info) -> Info:
        """Add ``info``, merging it into an existing entry with the same id."""
        existing = self._infos.get(info.usr)
        if existing is None:
            self._infos[info.usr] = info
            self.all_symbols.append(info.usr)
            return info
        existing.merge(info)
        return existing

    def get(self, symbol_id: bytes) -> Info:
        """Return the info for ``symbol_id``; raise KeyError if unknown."""
        try:
            return self._infos[symbol_id]
        except KeyError:
            raise KeyError(f"unknown symbol {bytes(symbol_id).hex()}") from None

    def find(self, symbol_id: bytes, kind: type[_T]) -> _T | None:
        """Return the info if it exists and is a ``kind``, else None."""
        info = self._infos.get(symbol_id)
        return info if isinstance(info, kind) else None

    def exists(self, symbol_id: bytes) -> bool:
        """Return True if ``symbol_id`` is known."""
        return symbol_id in self._infos

    def __contains__(self, symbol_id: object) -> bool:
        return symbol_id in self._infos

    def __len__(self) -> int:
        return len(self._infos)

    def __iter__(self) -> Iterator[Info]:
        return (self._infos[sid] for sid in self.all_symbols)