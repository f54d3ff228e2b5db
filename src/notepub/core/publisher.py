"""Publish pipeline: front matter, copy, generate, deploy."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import click

from notepub.config import Settings
from notepub.core.copier import copy_file
from notepub.core.errors import SourceNotFoundError
from notepub.core.frontmatter import ensure_front_matter, read_front_matter
from notepub.core.models import PublishRequest, PublishResult
from notepub.core.runner import SiteBuilder

logger = logging.getLogger(__name__)


class Publisher:
    """Runs the publish sequence for one note.

    Steps run in order and the first failure stops the sequence. Steps
    already completed are not undone, so a failed deploy leaves the
    rewritten note and the copied post in place.
    """

    def __init__(
        self,
        settings: Settings,
        builder: SiteBuilder,
        echo: Callable[..., None] = click.echo,
    ):
        self.settings = settings
        self.builder = builder
        self.echo = echo

    def destination_for(self, source: Path) -> Path:
        """Path the note is copied to inside the posts directory."""
        return self.settings.posts_dir / source.name

    def publish(
        self, request: PublishRequest, now: datetime | None = None
    ) -> PublishResult:
        """Publish the note described by ``request``."""
        source = request.md_path
        if not source.is_file():
            raise SourceNotFoundError(f"file does not exist: {source}")

        added = ensure_front_matter(source, request.tag, now=now)
        if logger.isEnabledFor(logging.DEBUG):
            text = source.read_bytes().decode("utf-8", errors="replace")
            meta = read_front_matter(text)
            if meta is not None:
                logger.debug("Post title %r, tags %s", meta.title, meta.tags)

        destination = self.destination_for(source)
        copy_file(source, destination)
        self.echo(f"✅ Copied {source} -> {destination}")

        self.builder.generate()
        self.builder.deploy()

        logger.info("Published %s", source)
        return PublishResult(
            source=source,
            destination=destination,
            front_matter_added=added,
        )
