"""Group parsed nodes into slides and navigate the resulting deck."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

from .models import Document, Heading, Slide
from .parser import parse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotStarted:
    """Cursor position before the first ``next()``."""


@dataclass(frozen=True)
class At:
    index: int


Position = Union[NotStarted, At]

NOT_STARTED = NotStarted()


def group_slides(doc: Document) -> list[Slide]:
    """Fold the flat node sequence of *doc* into slides.

    Every heading closes the slide being built, even one with no
    paragraphs, and starts a new slide titled with the heading text.
    Paragraphs before the first heading go on a slide with an empty title.
    """
    slides: list[Slide] = []
    pending: Optional[Slide] = None

    for node in doc.nodes:
        if isinstance(node, Heading):
            if pending is not None:
                slides.append(pending)
            pending = Slide(title=doc.text(node))
        else:
            if pending is None:
                pending = Slide()
            pending.paragraphs.append(doc.text(node))

    if pending is not None:
        slides.append(pending)

    logger.debug("Grouped %d node(s) into %d slide(s)", len(doc.nodes), len(slides))
    return slides


class Deck:
    """Ordered slides plus a clamped navigation cursor.

    ``next()`` never moves past the last slide and ``previous()`` never
    moves before the first one; both keep returning the slide at the edge.
    Before the first ``next()`` the cursor is ``NotStarted`` and
    ``previous()`` returns ``None``.
    """

    def __init__(self, slides: Sequence[Slide] = ()) -> None:
        self._slides = tuple(slides)
        self.position: Position = NOT_STARTED

    def __len__(self) -> int:
        return len(self._slides)

    def __iter__(self) -> Iterator[Slide]:
        return iter(self._slides)

    def __getitem__(self, index: int) -> Slide:
        return self._slides[index]

    @property
    def current(self) -> Optional[Slide]:
        if isinstance(self.position, At):
            return self._slides[self.position.index]
        return None

    def reset(self) -> None:
        self.position = NOT_STARTED

    def next(self) -> Optional[Slide]:
        if not self._slides:
            return None
        if isinstance(self.position, NotStarted):
            self.position = At(0)
        elif self.position.index < len(self._slides) - 1:
            self.position = At(self.position.index + 1)
        return self.current

    def previous(self) -> Optional[Slide]:
        if isinstance(self.position, At) and self.position.index > 0:
            self.position = At(self.position.index - 1)
        return self.current


def md_to_slides(text: str) -> Deck:
    """Parse *text* and return a fresh, not-yet-started deck."""
    deck = Deck(group_slides(parse(text)))
    logger.info("Built deck with %d slide(s)", len(deck))
    return deck
