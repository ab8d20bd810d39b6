"""XML output format."""

from __future__ import annotations

import io
import os
from collections.abc import Iterable
from typing import TextIO

from refdoc.b64 import to_base64
from refdoc.corpus import Corpus
from refdoc.generator import Generator
from refdoc.info import (
    EMPTY_SID,
    AccessSpecifier,
    Info,
    Location,
    SymbolInfo,
    TemplateParamInfo,
    access_spelling,
    tag_type_kind_name,
)
from refdoc.javadoc import (
    Admonish,
    Admonition,
    Code,
    Javadoc,
    Kind,
    Node,
    Paragraph,
    Param,
    Returns,
    Style,
    StyledText,
    Text,
    TParam,
)
from refdoc.symbols import (
    BaseRecordInfo,
    EnumInfo,
    FieldTypeInfo,
    FunctionInfo,
    MemberTypeInfo,
    NamespaceInfo,
    RecordInfo,
    TypedefInfo,
    TypeInfo,
)
from refdoc.writers import AllSymbol, RecursiveWriter

_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE mrdox SYSTEM "mrdox.dtd">\n'
    "<mrdox>\n"
)

_ESCAPES = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
        "'": "&apos;",
        '"': "&quot;",
    }
)

_STYLE_CLASS = {
    Style.BOLD: "bold",
    Style.ITALIC: "italic",
    Style.MONO: "mono",
}

_ADMONITION_CLASS = {
    Admonish.NOTE: "note",
    Admonish.TIP: "tip",
    Admonish.IMPORTANT: "important",
    Admonish.CAUTION: "caution",
    Admonish.WARNING: "warning",
}

# An attribute: name, value, and whether it is written at all.
_Attr = tuple[str, str, bool]


def xml_escape(text: str) -> str:
    """Replace the XML special characters in ``text`` with entities."""
    return text.translate(_ESCAPES)


def _id_attr(symbol_id: bytes) -> _Attr:
    present = symbol_id != EMPTY_SID
    return ("id", to_base64(symbol_id) if present else "", present)


def _access_attr(access: AccessSpecifier) -> _Attr:
    return ("access", access_spelling(access), access is not AccessSpecifier.NONE)


class XMLWriter(RecursiveWriter):
    """Writes a corpus as an XML document."""

    def __init__(self, out: TextIO, corpus: Corpus) -> None:
        super().__init__(out, corpus)

    # File and symbol listing

    def begin_file(self) -> None:
        self.out.write(_HEADER)

    def end_file(self) -> None:
        self.out.write("</mrdox>\n")

    def write_all_symbols(self, symbols: list[AllSymbol]) -> None:
        self._open_tag("all")
        self.adjust_nesting(1)
        for symbol in symbols:
            self._write_tag(
                "symbol",
                [
                    ("name", symbol.fq_name, True),
                    ("tag", symbol.symbol_type, True),
                    _id_attr(symbol.id),
                ],
            )
        self.adjust_nesting(-1)
        self._close_tag("all")

    # Namespaces

    def begin_namespace(self, info: NamespaceInfo) -> None:
        self._open_tag("namespace", [("name", info.name, True), _id_attr(info.usr)])

    def end_namespace(self, info: NamespaceInfo) -> None:
        self._close_tag("namespace")

    # Records

    def begin_record(self, info: RecordInfo) -> None:
        self._open_tag(
            tag_type_kind_name(info.tag_type),
            [("name", info.name, True), _id_attr(info.usr)],
        )

    def write_record(self, info: RecordInfo) -> None:
        self._write_info(info)
        self._write_symbol(info)
        for base in info.bases:
            self._write_base_record(base)
        for member in info.members:
            self._write_member_type(member)

    def end_record(self, info: RecordInfo) -> None:
        self._close_tag(tag_type_kind_name(info.tag_type))

    # Functions

    def begin_function(self, info: FunctionInfo) -> None:
        self._open_tag(
            "function",
            [("name", info.name, True), _access_attr(info.access), _id_attr(info.usr)],
        )

    def write_function(self, info: FunctionInfo) -> None:
        self._write_symbol(info)
        self._write_return_type(info.return_type)
        for param in info.params:
            self._write_param(param)
        if info.template is not None:
            for tparam in info.template.params:
                self._write_template_param(tparam)
        self._write_javadoc(info.javadoc)

    def end_function(self, info: FunctionInfo) -> None:
        self._close_tag("function")

    # Enums and typedefs

    def write_enum(self, info: EnumInfo) -> None:
        self._open_tag("enum", [("name", info.name, True), _id_attr(info.usr)])
        self.adjust_nesting(1)
        self._write_info(info)
        for value in info.members:
            self._write_tag(
                "element", [("name", value.name, True), ("value", value.value, True)]
            )
        self.adjust_nesting(-1)
        self._close_tag("enum")

    def write_typedef(self, info: TypedefInfo) -> None:
        self._open_tag("typedef", [("name", info.name, True), _id_attr(info.usr)])
        self.adjust_nesting(1)
        self._write_info(info)
        self._write_symbol(info)
        if info.underlying.type.usr != EMPTY_SID:
            self._write_tag_line("qualusr", to_base64(info.underlying.type.usr))
        self.adjust_nesting(-1)
        self._close_tag("typedef")

    # Pieces of symbols

    def _write_info(self, info: Info) -> None:
        self._write_javadoc(info.javadoc)

    def _write_symbol(self, info: SymbolInfo) -> None:
        if info.def_loc is not None:
            self._write_location(info.def_loc, True)
        for loc in info.loc:
            self._write_location(loc, False)

    def _write_location(self, loc: Location, is_def: bool = False) -> None:
        self._write_tag(
            "file",
            [
                ("path", loc.filename, True),
                ("line", str(loc.line_number), True),
                ("class", "def", is_def),
            ],
        )

    def _write_base_record(self, info: BaseRecordInfo) -> None:
        self._write_tag(
            "base",
            [
                ("name", info.name, True),
                _access_attr(info.access),
                ("modifier", "virtual", info.is_virtual),
                _id_attr(info.usr),
            ],
        )

    def _write_param(self, info: FieldTypeInfo) -> None:
        self._write_tag(
            "param",
            [
                ("name", info.name, bool(info.name)),
                ("default", info.default_value, bool(info.default_value)),
                ("type", info.type.name, True),
                _id_attr(info.type.usr),
            ],
        )

    def _write_template_param(self, info: TemplateParamInfo) -> None:
        self._write_tag("tparam", [("decl", info.contents, True)])

    def _write_member_type(self, info: MemberTypeInfo) -> None:
        self._write_tag(
            "data",
            [
                ("name", info.name, True),
                ("type", info.type.name, True),
                ("value", info.default_value, bool(info.default_value)),
                _access_attr(info.access),
                _id_attr(info.type.usr),
            ],
        )

    def _write_return_type(self, info: TypeInfo) -> None:
        if info.type.name == "void":
            return
        self._write_tag(
            "return", [("name", info.type.name, True), _id_attr(info.type.usr)]
        )

    # Documentation comments

    def _write_javadoc(self, doc: Javadoc) -> None:
        if doc.is_empty():
            return
        self._open_tag("doc")
        self.adjust_nesting(1)
        if doc.brief is not None and not doc.brief.is_empty():
            self._write_paragraph(doc.brief, "brief")
        self._write_nodes(doc.blocks)
        self._write_returns(doc.returns)
        self._write_nodes(doc.params)
        self._write_nodes(doc.tparams)
        self.adjust_nesting(-1)
        self._close_tag("doc")

    def _write_nodes(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self._write_node(node)

    def _write_node(self, node: Node) -> None:
        kind = node.kind
        if kind is Kind.TEXT:
            self._write_text(node)
        elif kind is Kind.STYLED:
            self._write_styled_text(node)
        elif kind is Kind.PARAGRAPH:
            self._write_paragraph(node)
        elif kind is Kind.ADMONITION:
            self._write_admonition(node)
        elif kind is Kind.CODE:
            self._write_code(node)
        elif kind is Kind.PARAM:
            self._write_param_doc(node)
        elif kind is Kind.TPARAM:
            self._write_tparam_doc(node)
        else:
            raise ValueError(f"unexpected documentation node: {kind.value}")

    def _write_text(self, text: Text, tag: str = "") -> None:
        self.indent().write("<text")
        self._write_attrs([("class", tag, bool(tag))])
        self.out.write(f">{xml_escape(text.string)}</text>\n")

    def _write_styled_text(self, text: StyledText) -> None:
        try:
            tag = _STYLE_CLASS[text.style]
        except KeyError:
            raise ValueError(f"unknown text style: {text.style.value}") from None
        self._write_text(text, tag)

    def _write_paragraph(self, para: Paragraph, tag: str = "") -> None:
        self._open_tag("para", [("class", tag, bool(tag))])
        self.adjust_nesting(1)
        self._write_nodes(para.children)
        self.adjust_nesting(-1)
        self._close_tag("para")

    def _write_admonition(self, admonition: Admonition) -> None:
        try:
            tag = _ADMONITION_CLASS[admonition.style]
        except KeyError:
            raise ValueError(
                f"unknown admonition style: {admonition.style.value}"
            ) from None
        self._write_paragraph(admonition, tag)

    def _write_code(self, code: Code) -> None:
        self._write_paragraph(code, "code")

    def _write_returns(self, returns: Returns) -> None:
        if returns.is_empty():
            return
        self._open_tag("returns")
        self.adjust_nesting(1)
        self._write_nodes(returns.children)
        self.adjust_nesting(-1)
        self._close_tag("returns")

    def _write_param_doc(self, param: Param) -> None:
        self._open_tag("param", [("name", param.name, bool(param.name))])
        self.adjust_nesting(1)
        self._write_nodes(param.children)
        self.adjust_nesting(-1)
        self._close_tag("param")

    def _write_tparam_doc(self, tparam: TParam) -> None:
        self._open_tag("tparam", [("name", tparam.name, bool(tparam.name))])
        self.adjust_nesting(1)
        self._write_nodes(tparam.children)
        self.adjust_nesting(-1)
        self._close_tag("tparam")

    # Tag primitives

    def _open_tag(self, tag: str, attrs: Iterable[_Attr] = ()) -> None:
        self.indent().write(f"<{tag}")
        self._write_attrs(attrs)
        self.out.write(">\n")

    def _close_tag(self, tag: str) -> None:
        self.indent().write(f"</{tag}>\n")

    def _write_tag(self, tag: str, attrs: Iterable[_Attr] = ()) -> None:
        self.indent().write(f"<{tag}")
        self._write_attrs(attrs)
        self.out.write("/>\n")

    def _write_tag_line(
        self, tag: str, value: str, attrs: Iterable[_Attr] = ()
    ) -> None:
        self.indent().write(f"<{tag}")
        self._write_attrs(attrs)
        self.out.write(f">{xml_escape(value)}</{tag}>\n")

    def _write_attrs(self, attrs: Iterable[_Attr]) -> None:
        for name, value, present in attrs:
            if present:
                self.out.write(f' {name}="{xml_escape(value)}"')


class XMLGenerator(Generator):
    """Generates a single XML document."""

    name = "XML"
    extension = "xml"

    def build_one(self, file_name: str | os.PathLike[str], corpus: Corpus) -> None:
        """Write the XML document to ``file_name``, replacing any existing file."""
        with open(file_name, "w", encoding="utf-8", newline="") as stream:
            XMLWriter(stream, corpus).write()

    def build_string(self, corpus: Corpus) -> str:
        """Return the XML document as a string."""
        buffer = io.StringIO()
        XMLWriter(buffer, corpus).write()
        return buffer.getvalue()