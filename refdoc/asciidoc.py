"""Asciidoc output format."""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import TextIO

from refdoc.corpus import Corpus
from refdoc.generator import Generator
from refdoc.info import (
    EMPTY_SID,
    AccessSpecifier,
    Location,
    SymbolInfo,
    access_spelling,
    tag_type_kind_name,
)
from refdoc.javadoc import Block, Kind, Node, Paragraph, Style, StyledText, Text
from refdoc.overloads import OverloadSet, make_overload_sets
from refdoc.symbols import (
    BaseRecordInfo,
    EnumInfo,
    FieldTypeInfo,
    FunctionInfo,
    RecordInfo,
    TypedefInfo,
    TypeInfo,
)
from refdoc.writers import FlatWriter

_MAX_MARKUP_LEVEL = 6

_STYLE_MARKS = {
    Style.BOLD: "*",
    Style.MONO: "`",
    Style.ITALIC: "_",
}

_FUNCTION_SECTIONS = (
    ("Member Functions", AccessSpecifier.PUBLIC),
    ("Protected Member Functions", AccessSpecifier.PROTECTED),
    ("Private Member Functions", AccessSpecifier.PRIVATE),
)


class AsciidocWriter(FlatWriter):
    """Writes a corpus as a single Asciidoc page."""

    def __init__(self, out: TextIO, corpus: Corpus) -> None:
        super().__init__(out, corpus)
        self._level = 0
        self._markup = ""

    def write(self) -> None:
        """Write the whole page."""
        self.begin_file()
        self.visit_all_symbols()
        self.end_file()

    def begin_file(self) -> None:
        """Open the page with its title."""
        self._open_title("Reference")
        self.out.write(":role: mrdox\n")

    def end_file(self) -> None:
        """Close the page title section."""
        self._close_section()

    # Symbols

    def write_record(self, info: RecordInfo) -> None:
        self._open_section(info.name)
        self._write_brief(info.javadoc.brief)

        self._open_section("Synopsis")
        self._write_location(info)
        self.out.write(
            f"\n[,cpp]\n----\n{tag_type_kind_name(info.tag_type)} {info.name}"
        )
        for position, base in enumerate(info.bases):
            self.out.write("\n    : " if position == 0 else "\n    , ")
            self._write_base(base)
        self.out.write(";\n----\n")
        self._close_section()

        self._write_description(info.javadoc.blocks)

        for title, access in _FUNCTION_SECTIONS:
            self._write_overload_sets(
                title,
                make_overload_sets(
                    self.corpus,
                    info.children,
                    lambda fn, access=access: fn.access is access,
                ),
            )
        self._close_section()

    def write_function(self, info: FunctionInfo) -> None:
        self._open_section(info.name)
        self._write_brief(info.javadoc.brief)

        self._open_section("Synopsis")
        self._write_location(info)
        self.out.write("\n[,cpp]\n----\n")
        return_type = self._type_name(info.return_type)
        if info.params:
            params = ",\n    ".join(self._formal_param(p) for p in info.params)
            self.out.write(f"{return_type}\n{info.name}(\n    {params});\n")
        else:
            self.out.write(f"{return_type}\n{info.name}();\n")
        self.out.write("----\n")
        self._close_section()

        self._write_description(info.javadoc.blocks)
        self._close_section()

    def write_enum(self, info: EnumInfo) -> None:
        self._write_simple_symbol(info)

    def write_typedef(self, info: TypedefInfo) -> None:
        self._write_simple_symbol(info)

    def _write_simple_symbol(self, info: SymbolInfo) -> None:
        self._open_section(info.name)
        self._write_brief(info.javadoc.brief)
        self._write_location(info)
        self._write_description(info.javadoc.blocks)
        self._close_section()

    # Pieces of symbols

    @staticmethod
    def _symbol_location(info: SymbolInfo) -> Location:
        if info.def_loc is not None:
            return info.def_loc
        if info.loc:
            return info.loc[0]
        raise ValueError(f"symbol {info.name!r} has no source location")

    def _write_location(self, info: SymbolInfo) -> None:
        filename = self._symbol_location(info).filename
        self.out.write(f"\n#include <file:///{filename}[{filename}]>\n")

    def _write_base(self, base: BaseRecordInfo) -> None:
        self.out.write(f"{access_spelling(base.access)} {base.name}")

    def _write_overload_sets(self, title: str, sets: list[OverloadSet]) -> None:
        if not sets:
            return
        self._open_section(title)
        self.out.write("\n[,cols=2]\n|===\n|Name |Description\n\n")
        for overloads in sets:
            self.out.write(f"|`{overloads.name}`\n|")
            for function in overloads.functions:
                self._write_brief(function.javadoc.brief)
        self.out.write("|===\n\n")
        self._close_section()

    def _formal_param(self, param: FieldTypeInfo) -> str:
        return f"{param.type.name} {param.name}"

    def _type_name(self, info: TypeInfo) -> str:
        ref = info.type
        if ref.usr == EMPTY_SID:
            return ref.name
        record = self.corpus.find(ref.usr, RecordInfo)
        if record is not None:
            return f"{record.path}::{record.name}"
        return f"{ref.path}::{ref.name}"

    # Documentation comments

    def _write_brief(self, brief: Paragraph | None) -> None:
        if brief is None or brief.is_empty():
            return
        self.out.write("\n")
        self._write_node(brief)

    def _write_description(self, blocks: list[Block]) -> None:
        if not blocks:
            return
        self.out.write("\n")
        self._open_section("Description")
        for block in blocks:
            self._write_node(block)
        self._close_section()

    def _write_node(self, node: Node) -> None:
        kind = node.kind
        if kind is Kind.TEXT:
            self._write_text(node)
        elif kind is Kind.STYLED:
            self._write_styled_text(node)
        elif kind in (Kind.BRIEF, Kind.PARAGRAPH, Kind.ADMONITION):
            for child in node.children:
                self._write_node(child)
        elif kind is Kind.CODE:
            self.out.write("[,cpp]\n----\n")
            for child in node.children:
                self._write_node(child)
            self.out.write("----\n")
        elif kind in (Kind.PARAM, Kind.TPARAM, Kind.RETURNS):
            pass
        else:
            raise ValueError(f"unexpected documentation node: {kind.value}")

    def _write_text(self, text: Text) -> None:
        self.out.write(f"{text.string}\n")

    def _write_styled_text(self, text: StyledText) -> None:
        mark = _STYLE_MARKS.get(text.style, "")
        self.out.write(f"{mark}{text.string}{mark}\n")

    # Sections

    def _push_level(self) -> None:
        self._level += 1
        if self._level <= _MAX_MARKUP_LEVEL:
            self._markup += "="

    def _open_title(self, name: str) -> None:
        if self._level != 0:
            raise RuntimeError("the title must open the outermost section")
        self._push_level()
        self.out.write(f"{self._markup} {name}\n")

    def _open_section(self, name: str) -> None:
        self._push_level()
        self.out.write(f"\n{self._markup} {name}\n")

    def _close_section(self) -> None:
        if self._level <= 0:
            raise RuntimeError("no open section to close")
        if self._level <= _MAX_MARKUP_LEVEL:
            self._markup = self._markup[:-1]
        self._level -= 1


class AsciidocGenerator(Generator):
    """Generates a single Asciidoc reference page."""

    name = "Asciidoc"
    extension = "adoc"

    def build(self, output_path: str | os.PathLike[str], corpus: Corpus) -> Path:
        """Write ``reference.adoc`` inside ``output_path`` and return its path."""
        file_name = Path(output_path) / "reference.adoc"
        self.build_one(file_name, corpus)
        return file_name

    def build_one(self, file_name: str | os.PathLike[str], corpus: Corpus) -> None:
        """Write the page to ``file_name``, replacing any existing file."""
        with open(file_name, "w", encoding="utf-8", newline="") as stream:
            AsciidocWriter(stream, corpus).write()

    def build_string(self, corpus: Corpus) -> str:
        """Return the page as a string."""
        buffer = io.StringIO()
        AsciidocWriter(buffer, corpus).write()
        return buffer.getvalue()