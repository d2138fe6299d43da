"""Tests for md2slides.scanner — byte cursor and backtracking."""

from __future__ import annotations

import pytest

from md2slides.models import ScanError
from md2slides.scanner import Scanner


# ---------------------------------------------------------------------------
# peek / advance
# ---------------------------------------------------------------------------

class TestPeekAdvance:
    def test_peek_does_not_consume(self):
        s = Scanner(b"ab")
        assert s.peek() == ord("a")
        assert s.peek() == ord("a")
        assert s.cursor == 0

    def test_advance_moves_one_byte(self):
        s = Scanner(b"ab")
        s.advance()
        assert s.peek() == ord("b")

    def test_peek_at_end_is_none(self):
        s = Scanner(b"a")
        s.advance()
        assert s.peek() is None
        assert s.at_end()

    def test_empty_input(self):
        s = Scanner(b"")
        assert s.peek() is None
        assert s.at_end()

    def test_advance_past_end_raises(self):
        s = Scanner(b"")
        with pytest.raises(ScanError, match="past end"):
            s.advance()


# ---------------------------------------------------------------------------
# take_while
# ---------------------------------------------------------------------------

class TestTakeWhile:
    def test_consumes_maximal_run(self):
        s = Scanner(b"###x")
        assert s.take_while(lambda b: b == ord("#")) is True
        assert s.cursor == 3

    def test_zero_length_returns_false_and_stays(self):
        s = Scanner(b"x##")
        assert s.take_while(lambda b: b == ord("#")) is False
        assert s.cursor == 0

    def test_stops_at_end_of_input(self):
        s = Scanner(b"abc")
        assert s.take_while(lambda b: True) is True
        assert s.cursor == 3
        assert s.peek() is None

    def test_at_end_returns_false(self):
        s = Scanner(b"a")
        s.advance()
        assert s.take_while(lambda b: True) is False


# ---------------------------------------------------------------------------
# save / restore / attempt
# ---------------------------------------------------------------------------

class TestBacktracking:
    def test_restore_returns_to_mark(self):
        s = Scanner(b"hello")
        s.advance()
        s.save()
        s.take_while(lambda b: True)
        s.restore()
        assert s.cursor == 1

    def test_save_overwrites_previous_mark(self):
        s = Scanner(b"hello")
        s.save()
        s.advance()
        s.advance()
        s.save()
        s.advance()
        s.restore()
        assert s.cursor == 2

    def test_attempt_commits_on_result(self):
        s = Scanner(b"abc\n")

        def rule(sc):
            sc.take_while(lambda b: b != ord("\n"))
            return "ok"

        assert s.attempt(rule) == "ok"
        assert s.cursor == 3

    def test_attempt_rewinds_on_none(self):
        s = Scanner(b"abc\n")

        def rule(sc):
            sc.take_while(lambda b: b != ord("\n"))
            return None

        assert s.attempt(rule) is None
        assert s.cursor == 0
