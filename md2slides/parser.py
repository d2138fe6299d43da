"""Line-level markdown parser — headings and paragraphs only."""

from __future__ import annotations

import logging
from typing import Optional

from .models import (
    HEADING_MARKER,
    MAX_HEADING_LEVEL,
    NEWLINE,
    SPACE,
    Document,
    Heading,
    Node,
    Paragraph,
    ParseError,
)
from .scanner import Scanner

logger = logging.getLogger(__name__)


def _not_newline(byte: int) -> bool:
    return byte != NEWLINE


def _heading(scanner: Scanner) -> Optional[Heading]:
    level_start = scanner.cursor
    scanner.take_while(lambda b: b == HEADING_MARKER)
    level = scanner.cursor - level_start
    if not 1 <= level <= MAX_HEADING_LEVEL:
        return None

    scanner.take_while(lambda b: b == SPACE)

    # A heading must carry a title: "###" alone is not one.
    start = scanner.cursor
    if not scanner.take_while(_not_newline):
        return None
    return Heading(level=level, start=start, end=scanner.cursor)


def _paragraph(scanner: Scanner) -> Optional[Paragraph]:
    start = scanner.cursor
    if not scanner.take_while(_not_newline):
        return None
    return Paragraph(start=start, end=scanner.cursor)


def parse(text: str) -> Document:
    """Parse *text* into a flat sequence of heading and paragraph nodes.

    Each non-blank line becomes exactly one node.  Headings are tried
    before paragraphs, so ``## Title`` is always a level-2 heading even
    though it would also match as paragraph text.  Blank lines are skipped
    and produce nothing.  Trailing newlines are never part of a node.
    """
    source = text.encode("utf-8", errors="surrogatepass")
    scanner = Scanner(source)
    nodes: list[Node] = []

    while True:
        node = scanner.attempt(_heading) or scanner.attempt(_paragraph)
        if node is not None:
            logger.debug("%s at %d..%d", type(node).__name__, node.start, node.end)
            nodes.append(node)
        elif scanner.peek() == NEWLINE:
            scanner.advance()
        elif scanner.at_end():
            break
        else:
            raise ParseError(f"No rule matches input at offset {scanner.cursor}")

    logger.debug("Parsed %d byte(s) into %d node(s)", len(source), len(nodes))
    return Document(source=source, nodes=tuple(nodes))
