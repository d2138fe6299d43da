"""Shared fixtures for md2slides tests."""

from __future__ import annotations

import textwrap

import pytest


# ---------------------------------------------------------------------------
# Sample documents (strings) used across multiple test modules
# ---------------------------------------------------------------------------

THREE_SLIDES = textwrap.dedent("""\
    # One

    First body

    ## Two

    Second body

    Second body, again

    ### Three
    """)

PREAMBLE_THEN_HEADING = textwrap.dedent("""\
    Intro text

    # Title

    Body
    """)

NO_HEADINGS = "alpha\n\nbeta\ngamma\n"


@pytest.fixture
def tmp_doc(tmp_path):
    """Write THREE_SLIDES to a temp file and return its path."""
    p = tmp_path / "talk.md"
    p.write_text(THREE_SLIDES)
    return p
