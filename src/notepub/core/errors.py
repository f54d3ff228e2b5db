"""Exceptions raised while publishing a note."""


class PublishError(Exception):
    """Base class for every failure reported by the CLI."""


class SourceNotFoundError(PublishError):
    """The note to publish does not exist."""


class NotesDirNotFoundError(PublishError):
    """The notes repository root cannot be traversed."""


class NoMarkdownFilesError(PublishError):
    """The notes repository holds no markdown files."""


class SelectionAbortedError(PublishError):
    """Input ended before a valid selection was made."""


class FrontMatterError(PublishError):
    """Reading or rewriting a note failed."""


class CopyError(PublishError):
    """Copying a note into the posts directory failed."""


class CommandNotFoundError(PublishError):
    """The generator executable could not be started."""


class CommandFailedError(PublishError):
    """The generator exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int):
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"command '{' '.join(command)}' exited with status {returncode}"
        )
