"""Base classes that walk a corpus and call formatting hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from refdoc.corpus import Corpus
from refdoc.info import EMPTY_SID, Info, InfoType
from refdoc.symbols import (
    EnumInfo,
    FunctionInfo,
    NamespaceInfo,
    RecordInfo,
    Scope,
    TypedefInfo,
)


class FlatWriter:
    """Visits every symbol of a corpus in order, without nesting."""

    def __init__(self, out: TextIO, corpus: Corpus) -> None:
        self.out = out
        self.corpus = corpus

    def visit_all_symbols(self) -> None:
        """Visit each symbol of the corpus."""
        for symbol_id in self.corpus.all_symbols:
            self.visit(symbol_id)

    def visit(self, symbol_id: bytes) -> None:
        """Dispatch the symbol with ``symbol_id`` to its hook."""
        info = self.corpus.get(symbol_id)
        if info.info_type is InfoType.NAMESPACE:
            return
        if info.info_type is InfoType.RECORD:
            self.write_record(info)
        elif info.info_type is InfoType.FUNCTION:
            self.write_function(info)
        else:
            raise ValueError(f"unsupported info type: {info.info_type.value}")

    def _visit_scope(self, scope: Scope) -> None:
        for ref in scope.namespaces:
            self.visit(ref.usr)
        for ref in scope.records:
            self.visit(ref.usr)
        for ref in scope.functions:
            self.visit(ref.usr)
        for enum in scope.enums:
            self.write_enum(enum)
        for typedef in scope.typedefs:
            self.write_typedef(typedef)

    def begin_file(self) -> None:
        """Called before any symbol is written."""

    def end_file(self) -> None:
        """Called after every symbol is written."""

    def write_namespace(self, info: NamespaceInfo) -> None:
        """Write a namespace by visiting each of its members."""
        self._visit_scope(info.children)

    def write_record(self, info: RecordInfo) -> None:
        """Write a record."""

    def write_function(self, info: FunctionInfo) -> None:
        """Write a function."""

    def write_enum(self, info: EnumInfo) -> None:
        """Write an enum."""

    def write_typedef(self, info: TypedefInfo) -> None:
        """Write a typedef."""


@dataclass
class AllSymbol:
    """Summary of one symbol for a symbol listing."""

    fq_name: str
    symbol_type: str
    id: bytes

    @classmethod
    def from_info(cls, info: Info) -> AllSymbol:
        """Summarise ``info``."""
        return cls(info.fully_qualified_name(), info.symbol_type(), info.usr)


class RecursiveWriter:
    """Walks the namespace tree from the global namespace down."""

    def __init__(self, out: TextIO, corpus: Corpus) -> None:
        self.out = out
        self.corpus = corpus
        self._indent = ""

    def indent(self) -> TextIO:
        """Write the current indentation and return the output stream."""
        self.out.write(self._indent)
        return self.out

    def adjust_nesting(self, levels: int) -> None:
        """Change the indentation by ``levels`` steps of two spaces."""
        if levels >= 0:
            self._indent += "  " * levels
            return
        remove = -2 * levels
        if remove > len(self._indent):
            raise ValueError("nesting level would become negative")
        self._indent = self._indent[: len(self._indent) - remove]

    def write(self) -> None:
        """Write the whole corpus."""
        self.begin_file()
        self.write_all_symbols(self.make_all_symbols())
        root = self.corpus.find(EMPTY_SID, NamespaceInfo)
        if root is None:
            raise KeyError("the corpus has no global namespace")
        self._visit_namespace(root)
        self.end_file()

    def make_all_symbols(self) -> list[AllSymbol]:
        """Return a summary of every symbol in the corpus."""
        return [
            AllSymbol.from_info(self.corpus.get(symbol_id))
            for symbol_id in self.corpus.all_symbols
        ]

    def _visit_namespace(self, info: NamespaceInfo) -> None:
        self.begin_namespace(info)
        self.adjust_nesting(1)
        self.write_namespace(info)
        self.adjust_nesting(-1)
        self.end_namespace(info)

    def _visit_record(self, info: RecordInfo) -> None:
        self.begin_record(info)
        self.adjust_nesting(1)
        self.write_record(info)
        self._visit_scope(info.children)
        self.adjust_nesting(-1)
        self.end_record(info)

    def _visit_function(self, info: FunctionInfo) -> None:
        self.begin_function(info)
        self.adjust_nesting(1)
        self.write_function(info)
        self.adjust_nesting(-1)
        self.end_function(info)

    def _visit_scope(self, scope: Scope) -> None:
        for ref in scope.namespaces:
            self._visit_namespace(self.corpus.get(ref.usr))
        for ref in scope.records:
            self._visit_record(self.corpus.get(ref.usr))
        for ref in scope.functions:
            self._visit_function(self.corpus.get(ref.usr))
        for enum in scope.enums:
            self.write_enum(enum)
        for typedef in scope.typedefs:
            self.write_typedef(typedef)

    def begin_file(self) -> None:
        """Called before anything is written."""

    def end_file(self) -> None:
        """Called after everything is written."""

    def write_all_symbols(self, symbols: list[AllSymbol]) -> None:
        """Write the listing of all symbols."""

    def begin_namespace(self, info: NamespaceInfo) -> None:
        """Open a namespace."""

    def write_namespace(self, info: NamespaceInfo) -> None:
        """Write a namespace's content by visiting each of its members."""
        self._visit_scope(info.children)

    def end_namespace(self, info: NamespaceInfo) -> None:
        """Close a namespace."""

    def begin_record(self, info: RecordInfo) -> None:
        """Open a record."""

    def write_record(self, info: RecordInfo) -> None:
        """Write a record's own content."""

    def end_record(self, info: RecordInfo) -> None:
        """Close a record."""

    def begin_function(self, info: FunctionInfo) -> None:
        """Open a function."""

    def write_function(self, info: FunctionInfo) -> None:
        """Write a function's own content."""

    def end_function(self, info: FunctionInfo) -> None:
        """Close a function."""

    def write_enum(self, info: EnumInfo) -> None:
        """Write an enum."""

    def write_typedef(self, info: TypedefInfo) -> None:
        """Write a typedef."""