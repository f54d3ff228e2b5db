"""Shared fixtures and fakes."""

from pathlib import Path

import pytest

from notepub.core.runner import CommandRunner


class FakeRunner(CommandRunner):
    """Records invocations and returns scripted exit statuses."""

    def __init__(self, statuses: dict[str, int] | None = None):
        self.statuses = statuses or {}
        self.calls: list[tuple[str, list[str], Path]] = []

    def run(self, command: str, args: list[str], cwd: Path) -> int:
        self.calls.append((command, list(args), cwd))
        return self.statuses.get(args[0], 0)

    @property
    def args_run(self) -> list[str]:
        return [args[0] for _, args, _ in self.calls]


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def blog_env(tmp_path, monkeypatch):
    """Notes and blog directories wired through NOTEPUB_* variables."""
    notes = tmp_path / "class"
    blog = tmp_path / "blog"
    posts = blog / "source" / "_posts"
    notes.mkdir()
    posts.mkdir(parents=True)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("NOTEPUB_NOTES_DIR", str(notes))
    monkeypatch.setenv("NOTEPUB_BLOG_DIR", str(blog))
    monkeypatch.delenv("NOTEPUB_DEBUG", raising=False)
    return {"notes": notes, "blog": blog, "posts": posts}
