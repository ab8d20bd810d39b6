"""Documentation comment tree attached to symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class Kind(Enum):
    """Kind of a documentation node."""

    TEXT = "text"
    STYLED = "styled"
    PARAGRAPH = "paragraph"
    BRIEF = "brief"
    ADMONITION = "admonition"
    CODE = "code"
    PARAM = "param"
    TPARAM = "tparam"
    RETURNS = "returns"


class Style(Enum):
    """Inline text style."""

    NONE = "none"
    BOLD = "bold"
    MONO = "mono"
    ITALIC = "italic"


class Admonish(Enum):
    """Flavour of an admonition paragraph."""

    NONE = "none"
    NOTE = "note"
    TIP = "tip"
    IMPORTANT = "important"
    CAUTION = "caution"
    WARNING = "warning"


@dataclass
class Node:
    """Base of every documentation node."""

    kind: ClassVar[Kind]


@dataclass
class Text(Node):
    """A run of plain text."""

    kind: ClassVar[Kind] = Kind.TEXT
    string: str = ""


@dataclass
class StyledText(Text):
    """A run of text with an inline style."""

    kind: ClassVar[Kind] = Kind.STYLED
    style: Style = Style.NONE


@dataclass
class Block(Node):
    """A node holding a sequence of text runs."""

    children: list[Text] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True if the block has no children."""
        return not self.children


@dataclass
class Paragraph(Block):
    """A paragraph of text."""

    kind: ClassVar[Kind] = Kind.PARAGRAPH


@dataclass
class Brief(Paragraph):
    """An explicit brief description."""

    kind: ClassVar[Kind] = Kind.BRIEF


@dataclass
class Admonition(Paragraph):
    """A paragraph flagged as a note, warning and so on."""

    kind: ClassVar[Kind] = Kind.ADMONITION
    style: Admonish = Admonish.NONE


@dataclass
class Code(Paragraph):
    """A block of preformatted code."""

    kind: ClassVar[Kind] = Kind.CODE


@dataclass
class Param(Paragraph):
    """Documentation of a function parameter."""

    kind: ClassVar[Kind] = Kind.PARAM
    name: str = ""


@dataclass
class TParam(Paragraph):
    """Documentation of a template parameter."""

    kind: ClassVar[Kind] = Kind.TPARAM
    name: str = ""


@dataclass
class Returns(Paragraph):
    """Documentation of a return value."""

    kind: ClassVar[Kind] = Kind.RETURNS


@dataclass
class Javadoc:
    """A parsed documentation comment."""

    blocks: list[Block] = field(default_factory=list)
    params: list[Param] = field(default_factory=list)
    tparams: list[TParam] = field(default_factory=list)
    returns: Returns = field(default_factory=Returns)
    brief: Paragraph | None = None

    def is_empty(self) -> bool:
        """Return True if nothing at all is documented."""
        return (
            self.brief is None
            and not self.blocks
            and not self.params
            and not self.tparams
            and self.returns.is_empty()
        )

    def merge(self, other: Javadoc) -> None:
        """Append the content of ``other`` to this comment."""
        self.blocks.extend(other.blocks)
        self.params.extend(other.params)
        self.tparams.extend(other.tparams)
        if self.returns.is_empty():
            self.returns = other.returns

    def calculate_brief(self) -> None:
        """Move the brief paragraph out of the blocks.

        An explicit brief wins; otherwise the first plain paragraph is used.
        """
        chosen = None
        for position, block in enumerate(self.blocks):
            if block.kind is Kind.BRIEF:
                chosen = position
                break
            if block.kind is Kind.PARAGRAPH and chosen is None:
                chosen = position
        if chosen is not None:
            self.brief = self.blocks.pop(chosen)