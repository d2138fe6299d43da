"""md2slides — Turn a simple markdown document into HTML slides."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .renderer import md_to_html, render_slide
from .session import SAMPLE_TEXT, PresentationSession
from .slides import md_to_slides

logger = logging.getLogger(__name__)

# Terminal commands for --present, mapped onto the browser key codes.
_COMMAND_KEYS = {
    "": "Space",
    "n": "Space",
    "p": "ArrowLeft",
    "q": "Escape",
}


class _TextSource:
    def __init__(self, text: str) -> None:
        self.text = text

    def read_text(self) -> str:
        return self.text


class _StdoutDisplay:
    def set_content(self, markup: str) -> None:
        print(markup, end="")


class _TerminalViews:
    def show_presenting(self) -> None:
        print("[presenting] n/Enter: next, p: previous, q: quit", file=sys.stderr)

    def show_editing(self) -> None:
        print("[stopped]", file=sys.stderr)


def _configure_logging(verbose: bool, log_file: str | None) -> None:
    pkg_logger = logging.getLogger("md2slides")
    pkg_logger.setLevel(logging.DEBUG)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        pkg_logger.addHandler(file_handler)


def _read_input(args: argparse.Namespace) -> str:
    if args.sample:
        return SAMPLE_TEXT
    if args.input is None:
        print("Error: an input file (or --sample) is required.", file=sys.stderr)
        sys.exit(1)
    if args.input == "-":
        return sys.stdin.read()
    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: {input_path} not found.", file=sys.stderr)
        sys.exit(1)
    try:
        return input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        print(f"Error: {input_path} is not valid UTF-8 ({exc}).", file=sys.stderr)
        sys.exit(1)


def _present(text: str, escape: bool) -> None:
    """Run an interactive session on the terminal, one command per line."""
    session = PresentationSession(_TextSource(text), _StdoutDisplay(), _TerminalViews(), escape=escape)
    session.start()
    for line in sys.stdin:
        command = line.strip().lower()
        key = _COMMAND_KEYS.get(command)
        if key is None:
            print(f"Unknown command: {command!r}", file=sys.stderr)
            continue
        session.handle_key(key)
        if not session.presenting:
            break


def _render(text: str, args: argparse.Namespace) -> str:
    if args.mode == "html":
        return md_to_html(text, escape=args.escape)

    deck = md_to_slides(text)
    if args.slide is not None:
        if not 1 <= args.slide <= len(deck):
            print(f"Error: slide {args.slide} requested but the deck has {len(deck)} slide(s).",
                  file=sys.stderr)
            sys.exit(1)
        return render_slide(deck[args.slide - 1], escape=args.escape)
    return "\n".join(render_slide(slide, escape=args.escape) for slide in deck)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="md2slides",
        description="Turn a simple markdown document into HTML slides.",
    )
    parser.add_argument("input", nargs="?", help="Path to the markdown file, or - for stdin")
    parser.add_argument("--sample", action="store_true",
                        help="Use the built-in example document instead of a file")
    parser.add_argument("--mode", choices=["slides", "html"], default="slides",
                        help="slides: one <h2> block per slide; html: every node with its "
                             "heading level (default: slides)")
    parser.add_argument("--output", help="Write markup here instead of stdout")
    parser.add_argument("--slide", type=int, default=None, metavar="N",
                        help="Render only slide N (1-based)")
    parser.add_argument("--present", action="store_true",
                        help="Step through the slides interactively on the terminal")
    parser.add_argument("--escape", action="store_true",
                        help="HTML-escape slide text instead of embedding it verbatim")
    parser.add_argument("--log-file", help="Also write a debug log to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")

    args = parser.parse_args()
    _configure_logging(args.verbose, args.log_file)
    logger.info("CLI arguments: %s", vars(args))

    if args.present and args.input == "-":
        print("Error: --present reads commands from stdin; pass a file or --sample.", file=sys.stderr)
        sys.exit(1)
    if args.present:
        conflicting = [flag for flag, used in (
            ("--output", args.output is not None),
            ("--slide", args.slide is not None),
            ("--mode html", args.mode == "html"),
        ) if used]
        if conflicting:
            print(f"Error: --present cannot be combined with {', '.join(conflicting)}.", file=sys.stderr)
            sys.exit(1)

    text = _read_input(args)

    try:
        if args.present:
            _present(text, args.escape)
            return
        markup = _render(text, args)
    except Exception:
        logger.exception("Conversion failed")
        raise

    if args.output:
        Path(args.output).write_text(markup, encoding="utf-8")
        print(f"Output: {args.output}")
    else:
        sys.stdout.write(markup)


if __name__ == "__main__":
    main()
