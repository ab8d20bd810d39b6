"""Common metadata carried by every documented symbol."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from refdoc.javadoc import Javadoc

SYMBOL_ID_SIZE = 20
EMPTY_SID = bytes(SYMBOL_ID_SIZE)


class InfoType(Enum):
    """Kind of a documented symbol."""

    DEFAULT = "default"
    NAMESPACE = "namespace"
    RECORD = "record"
    FUNCTION = "function"
    ENUM = "enum"
    TYPEDEF = "typedef"


class AccessSpecifier(Enum):
    """Member access level."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    NONE = ""


class TagTypeKind(Enum):
    """Keyword introducing a record or enum."""

    STRUCT = "struct"
    INTERFACE = "__interface"
    UNION = "union"
    CLASS = "class"
    ENUM = "enum"


def to_hex(symbol_id: bytes) -> str:
    """Return the upper-case hexadecimal form of a symbol id."""
    return bytes(symbol_id).hex().upper()


def access_spelling(access: AccessSpecifier) -> str:
    """Return the keyword for ``access``, empty for no access."""
    return access.value


def tag_type_kind_name(kind: TagTypeKind) -> str:
    """Return the keyword for a tag kind."""
    return kind.value


def _components(path: str) -> list[str]:
    parts = []
    if path.startswith("/"):
        parts.append("/")
    parts.extend(segment for segment in path.split("/") if segment)
    if len(path) > 1 and path.endswith("/"):
        parts.append(".")
    return parts


def calculate_relative_file_path(
    info_type: InfoType, path: str, name: str, current_path: str
) -> str:
    """Return the relative path from ``current_path`` to a symbol's file."""
    pieces: list[str] = []
    if current_path != path:
        pieces.extend(".." for _ in _components(current_path))
        pieces.append(path)
    # Namespace files live in a subdirectory named after the namespace.
    if info_type is InfoType.NAMESPACE:
        pieces.append(name)
    return "/".join(p.strip("/") for p in pieces if p.strip("/"))


@dataclass(frozen=True, order=True)
class Location:
    """A position in a source file."""

    line_number: int = 0
    filename: str = ""


@dataclass
class Reference:
    """A link to another symbol."""

    usr: bytes = EMPTY_SID
    name: str = ""
    ref_type: InfoType = InfoType.DEFAULT
    path: str = ""

    def can_merge(self, other: Reference) -> bool:
        """Return True if both refer to the same symbol."""
        return self.ref_type is other.ref_type and self.usr == other.usr

    def merge(self, other: Reference) -> None:
        """Fill empty fields from ``other``."""
        if not self.can_merge(other):
            raise ValueError("cannot merge references to different symbols")
        if not self.name:
            self.name = other.name
        if not self.path:
            self.path = other.path

    def relative_file_path(self, current_path: str) -> str:
        """Return the relative path from ``current_path`` to this target."""
        return calculate_relative_file_path(
            self.ref_type, self.path, self.name, current_path
        )


@dataclass
class TemplateParamInfo:
    """Source text of one template parameter or argument."""

    contents: str = ""


@dataclass
class TemplateInfo:
    """Template parameters of a symbol."""

    params: list[TemplateParamInfo] = field(default_factory=list)
    specialization_of: bytes | None = None


_ANONYMOUS_PREFIX = {
    InfoType.RECORD: "@nonymous_record_",
    InfoType.ENUM: "@nonymous_enum_",
    InfoType.TYPEDEF: "@nonymous_typedef_",
    InfoType.FUNCTION: "@nonymous_function_",
    InfoType.DEFAULT: "@nonymous_",
}


@dataclass
class Info:
    """Metadata shared by all symbols."""

    info_type: InfoType = InfoType.DEFAULT
    usr: bytes = EMPTY_SID
    name: str = ""
    path: str = ""
    namespace: list[Reference] = field(default_factory=list)
    javadoc: Javadoc = field(default_factory=Javadoc)

    def can_merge(self, other: Info) -> bool:
        """Return True if both describe the same symbol."""
        return self.info_type is other.info_type and self.usr == other.usr

    def _check_merge(self, other: Info) -> None:
        if not self.can_merge(other):
            raise ValueError("cannot merge infos of different symbols")

    def merge_base(self, other: Info) -> None:
        """Fill empty fields from ``other`` and append its documentation."""
        self._check_merge(other)
        if self.usr == EMPTY_SID:
            self.usr = other.usr
        if not self.name:
            self.name = other.name
        if not self.path:
            self.path = other.path
        if not self.namespace:
            self.namespace = other.namespace
        self.javadoc.merge(other.javadoc)

    def extract_name(self) -> str:
        """Return the name, or a generated one for anonymous symbols."""
        if self.name:
            return self.name
        if self.info_type is InfoType.NAMESPACE:
            return ""
        return _ANONYMOUS_PREFIX[self.info_type] + to_hex(self.usr)

    def relative_file_path(self, current_path: str) -> str:
        """Return the relative path from ``current_path`` to this symbol."""
        return calculate_relative_file_path(
            self.info_type, self.path, self.extract_name(), current_path
        )

    def fully_qualified_name(self) -> str:
        """Return the name qualified by its enclosing namespaces."""
        prefix = "".join(ns.name + "::" for ns in reversed(self.namespace))
        return prefix + self.extract_name()

    def symbol_type(self) -> str:
        """Return a word naming the kind of symbol."""
        if self.info_type is InfoType.RECORD:
            return tag_type_kind_name(getattr(self, "tag_type", TagTypeKind.STRUCT))
        return self.info_type.value


@dataclass
class SymbolInfo(Info):
    """Info for symbols that have source locations."""

    def_loc: Location | None = None
    loc: list[Location] = field(default_factory=list)

    def merge(self, other: SymbolInfo) -> None:
        """Merge locations and base fields from ``other``."""
        self._check_merge(other)
        if self.def_loc is None:
            self.def_loc = other.def_loc
        self.loc = sorted(set(self.loc) | set(other.loc))
        self.merge_base(other)