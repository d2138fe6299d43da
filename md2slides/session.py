"""Presentation session — wires the deck to an editor, a display and key events."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from .models import Slide
from .renderer import render_slide
from .slides import Deck, md_to_slides

logger = logging.getLogger(__name__)

SAMPLE_TEXT = """# Example slideshow

Hello world

## Second slide

A paragraph

Another paragraph

## Third slide

A paragraph

Another paragraph

## Fourth slide

A paragraph

Another paragraph

## Fifth slide

This is great."""

PREVIOUS_KEYS = frozenset({"ArrowLeft", "ArrowUp", "KeyA"})
NEXT_KEYS = frozenset({"Space", "ArrowRight", "ArrowDown", "KeyD"})
STOP_KEYS = frozenset({"Escape"})


class InputSource(Protocol):
    def read_text(self) -> str: ...


class DisplayTarget(Protocol):
    def set_content(self, markup: str) -> None: ...


class ViewSwitcher(Protocol):
    def show_presenting(self) -> None: ...

    def show_editing(self) -> None: ...


class PresentationSession:
    """Owns the current deck and reacts to navigation keys while presenting.

    Key events that arrive while the editing view is shown are ignored, so
    restarting a presentation never leaves a stale handler behind.
    """

    def __init__(
        self,
        source: InputSource,
        display: DisplayTarget,
        views: ViewSwitcher,
        escape: bool = False,
    ) -> None:
        self.source = source
        self.display = display
        self.views = views
        self.escape = escape
        self.deck = Deck()
        self.presenting = False

    def start(self) -> None:
        """Build a new deck from the editor text and show its first slide."""
        self.deck = md_to_slides(self.source.read_text())
        self.presenting = True
        self.views.show_presenting()
        logger.info("Presentation started with %d slide(s)", len(self.deck))
        self.show_next()

    def stop(self) -> None:
        self.presenting = False
        self.views.show_editing()
        logger.info("Presentation stopped")

    def show_next(self) -> None:
        self._show(self.deck.next())

    def show_previous(self) -> None:
        self._show(self.deck.previous())

    def _show(self, slide: Optional[Slide]) -> None:
        if slide is None:
            return
        self.display.set_content(render_slide(slide, escape=self.escape))

    def handle_key(self, code: str) -> bool:
        """Dispatch a key code; returns whether it was acted on."""
        if not self.presenting:
            return False
        if code in NEXT_KEYS:
            self.show_next()
        elif code in PREVIOUS_KEYS:
            self.show_previous()
        elif code in STOP_KEYS:
            self.stop()
        else:
            logger.debug("Ignoring key %s", code)
            return False
        return True
