"""Metadata for each kind of documented symbol, and how duplicates merge."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from refdoc.info import (
    AccessSpecifier,
    Info,
    InfoType,
    Reference,
    SymbolInfo,
    TagTypeKind,
    TemplateInfo,
)


class _Mergeable(Protocol):
    usr: bytes

    def merge(self, other) -> None: ...


_M = TypeVar("_M", bound=_Mergeable)


def reduce_children(children: list[_M], children_to_merge: list[_M]) -> None:
    """Merge each new child into the entry with the same id, or append it."""
    for child in children_to_merge:
        existing = next((c for c in children if c.usr == child.usr), None)
        if existing is None:
            children.append(child)
        else:
            existing.merge(child)


@dataclass
class TypeInfo:
    """A reference to a type."""

    type: Reference = field(default_factory=Reference)


@dataclass
class FieldTypeInfo(TypeInfo):
    """A typed, named field such as a function parameter."""

    name: str = ""
    default_value: str = ""


@dataclass
class MemberTypeInfo(FieldTypeInfo):
    """A data member of a record."""

    access: AccessSpecifier = AccessSpecifier.PUBLIC


@dataclass
class EnumValueInfo:
    """One enumerator."""

    name: str = ""
    value: str = ""
    value_expr: str = ""


@dataclass
class Scope:
    """The children declared inside a namespace or record."""

    namespaces: list[Reference] = field(default_factory=list)
    records: list[Reference] = field(default_factory=list)
    functions: list[Reference] = field(default_factory=list)
    enums: list[EnumInfo] = field(default_factory=list)
    typedefs: list[TypedefInfo] = field(default_factory=list)


@dataclass
class EnumInfo(SymbolInfo):
    """An enumeration."""

    info_type: InfoType = InfoType.ENUM
    scoped: bool = False
    members: list[EnumValueInfo] = field(default_factory=list)

    def merge(self, other: EnumInfo) -> None:
        """Fill empty fields from ``other``."""
        self._check_merge(other)
        if not self.scoped:
            self.scoped = other.scoped
        if not self.members:
            self.members = other.members
        super().merge(other)


@dataclass
class FunctionInfo(SymbolInfo):
    """A free function or a method."""

    info_type: InfoType = InfoType.FUNCTION
    is_method: bool = False
    parent: Reference = field(default_factory=Reference)
    return_type: TypeInfo = field(default_factory=TypeInfo)
    params: list[FieldTypeInfo] = field(default_factory=list)
    access: AccessSpecifier = AccessSpecifier.PUBLIC
    template: TemplateInfo | None = None

    def merge(self, other: FunctionInfo) -> None:
        """Fill empty fields from ``other``."""
        self._check_merge(other)
        if not self.is_method:
            self.is_method = other.is_method
        # Public is the zero value of the access level and counts as unset.
        if self.access is AccessSpecifier.PUBLIC:
            self.access = other.access
        if _is_unset(self.return_type.type):
            self.return_type = other.return_type
        if _is_unset(self.parent):
            self.parent = other.parent
        if not self.params:
            self.params = other.params
        super().merge(other)
        if self.template is None:
            self.template = other.template


def _is_unset(ref: Reference) -> bool:
    return ref.usr == bytes(len(ref.usr)) and ref.name == ""


@dataclass
class NamespaceInfo(Info):
    """A namespace and the symbols declared in it."""

    info_type: InfoType = InfoType.NAMESPACE
    children: Scope = field(default_factory=Scope)

    def merge(self, other: NamespaceInfo) -> None:
        """Merge children and base fields from ``other``."""
        self._check_merge(other)
        _reduce_scope(self.children, other.children, namespaces=True)
        self.merge_base(other)


def _reduce_scope(target: Scope, source: Scope, *, namespaces: bool) -> None:
    if namespaces:
        reduce_children(target.namespaces, source.namespaces)
    reduce_children(target.records, source.records)
    reduce_children(target.functions, source.functions)
    reduce_children(target.enums, source.enums)
    reduce_children(target.typedefs, source.typedefs)


@dataclass
class RecordInfo(SymbolInfo):
    """A struct, class or union."""

    info_type: InfoType = InfoType.RECORD
    tag_type: TagTypeKind = TagTypeKind.STRUCT
    is_type_def: bool = False
    members: list[MemberTypeInfo] = field(default_factory=list)
    bases: list[BaseRecordInfo] = field(default_factory=list)
    parents: list[Reference] = field(default_factory=list)
    virtual_parents: list[Reference] = field(default_factory=list)
    children: Scope = field(default_factory=Scope)
    template: TemplateInfo | None = None

    def merge(self, other: RecordInfo) -> None:
        """Fill empty fields from ``other`` and merge children."""
        self._check_merge(other)
        # Struct is the zero value of the tag kind and counts as unset.
        if self.tag_type is TagTypeKind.STRUCT:
            self.tag_type = other.tag_type
        self.is_type_def = self.is_type_def or other.is_type_def
        if not self.members:
            self.members = other.members
        if not self.bases:
            self.bases = other.bases
        if not self.parents:
            self.parents = other.parents
        if not self.virtual_parents:
            self.virtual_parents = other.virtual_parents
        _reduce_scope(self.children, other.children, namespaces=False)
        super().merge(other)
        if self.template is None:
            self.template = other.template


@dataclass
class BaseRecordInfo(RecordInfo):
    """A base class of a record."""

    is_virtual: bool = False
    access: AccessSpecifier = AccessSpecifier.PUBLIC
    is_parent: bool = False


@dataclass
class TypedefInfo(SymbolInfo):
    """A typedef or alias declaration."""

    info_type: InfoType = InfoType.TYPEDEF
    underlying: TypeInfo = field(default_factory=TypeInfo)
    is_using: bool = False

    def merge(self, other: TypedefInfo) -> None:
        """Fill empty fields from ``other``."""
        self._check_merge(other)
        if not self.is_using:
            self.is_using = other.is_using
        if self.underlying.type.name == "":
            self.underlying = other.underlying
        super().merge(other)