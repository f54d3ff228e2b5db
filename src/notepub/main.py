"""notepub command line interface."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from notepub.config import Settings
from notepub.core.errors import PublishError
from notepub.core.locator import (
    find_markdown_files,
    format_listing,
    select_markdown_file,
)
from notepub.core.models import PublishRequest
from notepub.core.publisher import Publisher
from notepub.core.runner import SiteBuilder, SubprocessRunner

logger = logging.getLogger(__name__)


class ReportedError(click.ClickException):
    """A failure reported on stdout with the error marker."""

    def show(self, file=None) -> None:
        click.echo(f"❌ Error: {self.format_message()}")


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def build_publisher(settings: Settings) -> Publisher:
    """Wire a Publisher that runs the real generator."""
    builder = SiteBuilder(
        SubprocessRunner(),
        settings.generator,
        settings.blog_dir,
        generate_arg=settings.generate_arg,
        deploy_arg=settings.deploy_arg,
    )
    return Publisher(settings, builder)


@click.group(help="Publish markdown notes to a static blog.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    try:
        settings = Settings()
    except ValidationError as exc:
        raise ReportedError(f"invalid configuration: {exc}") from exc
    setup_logging(verbose or settings.debug)
    ctx.obj = settings


@cli.command("publish")
@click.argument("md_path", type=click.Path(path_type=Path))
@click.argument("tag", required=False)
@click.option(
    "--select",
    "-s",
    "use_select",
    is_flag=True,
    help="Select the file interactively from the notes repository.",
)
@click.pass_obj
def publish_cmd(settings: Settings, md_path: Path, tag: str | None, use_select: bool) -> None:
    """Publish MD_PATH to the blog, optionally tagged with TAG."""
    try:
        if use_select:
            md_path = select_markdown_file(settings.notes_dir, settings.markdown_ext)
        request = PublishRequest(md_path=md_path, tag=tag)
        build_publisher(settings).publish(request)
    except PublishError as exc:
        logger.debug("Publish failed", exc_info=True)
        raise ReportedError(str(exc)) from exc
    click.echo("🚀 Blog published successfully!")


@cli.command("list")
@click.pass_obj
def list_cmd(settings: Settings) -> None:
    """List the markdown notes available for publishing."""
    try:
        files = find_markdown_files(settings.notes_dir, settings.markdown_ext)
    except PublishError as exc:
        raise ReportedError(str(exc)) from exc
    for line in format_listing(files):
        click.echo(line)


def main() -> None:
    """Console entry point; every failure exits with status 1."""
    try:
        cli.main(prog_name="notepub", standalone_mode=False)
    except click.ClickException as exc:
        click.echo(f"❌ Error: {exc.format_message()}")
        sys.exit(1)
    except click.Abort:
        click.echo("❌ Error: aborted")
        sys.exit(1)


if __name__ == "__main__":
    main()
