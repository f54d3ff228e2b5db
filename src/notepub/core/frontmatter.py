"""Front matter detection, generation and insertion for markdown notes."""

import logging
import re
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from notepub.core.errors import FrontMatterError
from notepub.core.models import FrontMatter

logger = logging.getLogger(__name__)

DELIMITER = "---"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

FRONTMATTER_PATTERN = re.compile(
    r"^---\s*\n(.*?)\n---\s*(?:\n|$)",
    re.DOTALL,
)


def has_front_matter(text: str) -> bool:
    """Return True if the text already starts with a header delimiter."""
    return text.startswith(DELIMITER)


def title_from_path(path: Path) -> str:
    """Derive a post title from the file name, without its last extension.

    Everything from the final dot is dropped, so a file named ``.md`` has
    an empty title.
    """
    name = Path(path).name
    dot = name.rfind(".")
    return name[:dot] if dot != -1 else name


def build_front_matter(title: str, now: datetime, tag: str | None = None) -> str:
    """Render the header block, including the trailing blank line."""
    tags = f"tags: [{tag}]" if tag else "tags:"
    return (
        f"{DELIMITER}\n"
        f"title: {title}\n"
        f"date: {now.strftime(DATE_FORMAT)}\n"
        f"{tags}\n"
        f"{DELIMITER}\n"
        "\n"
    )


def read_front_matter(text: str) -> FrontMatter | None:
    """Parse the YAML header of a note.

    Returns None when the note has no header, or when the header is not
    a valid YAML mapping.
    """
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return None
    try:
        data = yaml.safe_load(match.group(1)) or {}
        if not isinstance(data, dict):
            return None
        return FrontMatter(**data)
    except (yaml.YAMLError, TypeError, ValidationError):
        logger.debug("Ignoring malformed front matter")
        return None


def ensure_front_matter(
    path: Path, tag: str | None = None, now: datetime | None = None
) -> bool:
    """Prepend a header to the note at ``path`` unless it already has one.

    The note body is handled as raw bytes, so notes in any encoding are
    left byte-for-byte intact after the header.

    Args:
        path: Markdown file to inspect and, if needed, rewrite in place.
        tag: Optional single tag for the ``tags`` field.
        now: Timestamp for the ``date`` field. Defaults to the current time.

    Returns:
        True if a header was inserted, False if the file was left untouched.

    Raises:
        FrontMatterError: If the file cannot be read or written.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FrontMatterError(f"failed to read file: {exc}") from exc

    if data.startswith(DELIMITER.encode("ascii")):
        logger.debug("Front matter already present in %s", path)
        return False

    header = build_front_matter(title_from_path(path), now or datetime.now(), tag)
    try:
        path.write_bytes(header.encode("utf-8") + data)
    except OSError as exc:
        raise FrontMatterError(f"failed to write file: {exc}") from exc

    logger.info("Inserted front matter into %s", path)
    return True
