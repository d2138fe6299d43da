"""Shared data models: parsed nodes, slides and the parse result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# Leading character whose run length gives the heading level.
HEADING_MARKER = ord("#")
MAX_HEADING_LEVEL = 6

NEWLINE = ord("\n")
SPACE = ord(" ")


class ScanError(RuntimeError):
    """The scanner was asked to move past the end of its input."""


class ParseError(RuntimeError):
    """The parser reached a state none of its line rules cover."""


@dataclass(frozen=True)
class Heading:
    level: int
    start: int
    end: int


@dataclass(frozen=True)
class Paragraph:
    start: int
    end: int


Node = Union[Heading, Paragraph]


@dataclass(frozen=True)
class Document:
    """Result of one parse pass.

    Nodes only hold byte offsets; ``source`` is the UTF-8 buffer they point
    into.  Offsets always fall on ASCII bytes (``#``, space, newline or the
    buffer ends), so every range decodes cleanly on its own.
    """

    source: bytes
    nodes: tuple[Node, ...] = ()

    def text(self, node: Node) -> str:
        return self.source[node.start:node.end].decode("utf-8", errors="surrogatepass")


@dataclass
class Slide:
    title: str = ""
    paragraphs: list[str] = field(default_factory=list)
