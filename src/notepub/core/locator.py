"""Markdown note discovery and interactive selection."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

import click

from notepub.core.errors import (
    NoMarkdownFilesError,
    NotesDirNotFoundError,
    SelectionAbortedError,
)

logger = logging.getLogger(__name__)

SELECT_HEADER = "Select the markdown file to publish:"
SELECT_PROMPT = "Enter number: "
INVALID_INPUT = "❌ Invalid input, please try again"


def find_markdown_files(root: Path, ext: str = ".md") -> list[Path]:
    """Recursively list every file under ``root`` whose name ends with ``ext``.

    Raises:
        NotesDirNotFoundError: If ``root`` is missing or not a directory.
        NoMarkdownFilesError: If no matching file exists.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotesDirNotFoundError(f"notes directory does not exist: {root}")

    files = sorted(
        path for path in root.rglob("*") if path.is_file() and path.name.endswith(ext)
    )
    if not files:
        raise NoMarkdownFilesError(f"no markdown files found in {root}")

    logger.debug("Found %d markdown files under %s", len(files), root)
    return files


def format_listing(files: list[Path]) -> list[str]:
    """Number files from 1, one line per file."""
    return [f"[{i}] {path}" for i, path in enumerate(files, start=1)]


def parse_selection(text: str, count: int) -> int | None:
    """Convert a 1-based numeric answer into a 0-based index.

    Returns None for anything that is not a number in ``[1, count]``.
    """
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    number = int(text)
    if number < 1 or number > count:
        return None
    return number - 1


def choose_file(
    files: list[Path],
    lines: Iterable[str],
    echo: Callable[..., None] = click.echo,
) -> Path:
    """List ``files`` and return the one picked by the first valid line.

    Invalid lines are reported and another line is read. The loop only
    ends on valid input or when ``lines`` is exhausted.

    Raises:
        SelectionAbortedError: If ``lines`` ends before a valid answer.
    """
    echo(SELECT_HEADER)
    for line in format_listing(files):
        echo(line)

    answers = iter(lines)
    while True:
        echo(SELECT_PROMPT, nl=False)
        try:
            answer = next(answers)
        except StopIteration:
            echo()
            raise SelectionAbortedError("no file selected") from None
        index = parse_selection(answer, len(files))
        if index is None:
            logger.debug("Rejected selection %r", answer)
            echo(INVALID_INPUT)
            continue
        return files[index]


def select_markdown_file(
    root: Path,
    ext: str = ".md",
    lines: Iterable[str] | None = None,
    echo: Callable[..., None] = click.echo,
) -> Path:
    """Interactively pick a markdown file under ``root``.

    Reads answers from standard input unless ``lines`` is given.
    """
    files = find_markdown_files(root, ext)
    if lines is None:
        lines = click.get_text_stream("stdin")
    return choose_file(files, lines, echo)
