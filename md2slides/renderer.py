"""Serialise parsed nodes and slides to HTML fragments."""

from __future__ import annotations

import html
import logging

from .models import Document, Heading, Slide
from .parser import parse

logger = logging.getLogger(__name__)

# Slide titles are always shown at this level, whatever the source heading.
SLIDE_TITLE_LEVEL = 2


def _text(value: str, escape: bool) -> str:
    return html.escape(value, quote=False) if escape else value


def render_document(doc: Document, escape: bool = False) -> str:
    """Render every node of *doc*, one tag per line.

    Headings keep their source level (``<h1>`` .. ``<h6>``).  Text is
    embedded verbatim unless *escape* is set, so authors can use inline
    HTML in their slides.
    """
    parts: list[str] = []
    for node in doc.nodes:
        text = _text(doc.text(node), escape)
        if isinstance(node, Heading):
            parts.append(f"<h{node.level}>{text}</h{node.level}>\n")
        else:
            parts.append(f"<p>{text}</p>\n")
    return "".join(parts)


def md_to_html(text: str, escape: bool = False) -> str:
    """Parse *text* and render the whole node stream."""
    return render_document(parse(text), escape=escape)


def render_slide(slide: Slide, escape: bool = False) -> str:
    """Render one slide: an ``<h2>`` title followed by its paragraphs."""
    level = SLIDE_TITLE_LEVEL
    parts = [f"<h{level}>{_text(slide.title, escape)}</h{level}>\n"]
    parts.extend(f"<p>{_text(p, escape)}</p>\n" for p in slide.paragraphs)
    logger.debug("Rendered slide %r with %d paragraph(s)", slide.title, len(slide.paragraphs))
    return "".join(parts)
