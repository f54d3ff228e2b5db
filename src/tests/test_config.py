"""Unit tests for application configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from notepub.config import Settings


class TestSettings:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            assert s.notes_dir == Path("notes")
            assert s.blog_dir == Path("blog")
            assert s.generator == "hexo"
            assert s.generate_arg == "g"
            assert s.deploy_arg == "d"
            assert s.markdown_ext == ".md"
            assert s.debug is False

    def test_from_env(self):
        env = {
            "NOTEPUB_NOTES_DIR": "/tmp/class",
            "NOTEPUB_BLOG_DIR": "/tmp/blog",
            "NOTEPUB_GENERATOR": "hugo",
            "NOTEPUB_DEBUG": "true",
        }
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.notes_dir == Path("/tmp/class")
            assert s.blog_dir == Path("/tmp/blog")
            assert s.generator == "hugo"
            assert s.debug is True

    def test_posts_dir_derived_from_blog_dir(self):
        with patch.dict("os.environ", {"NOTEPUB_BLOG_DIR": "/srv/blog"}, clear=True):
            s = Settings(_env_file=None)
            assert s.posts_dir == Path("/srv/blog/source/_posts")

    def test_posts_subdir_override(self):
        env = {"NOTEPUB_BLOG_DIR": "/srv/blog", "NOTEPUB_POSTS_SUBDIR": "content/posts"}
        with patch.dict("os.environ", env, clear=True):
            s = Settings(_env_file=None)
            assert s.posts_dir == Path("/srv/blog/content/posts")

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("NOTEPUB_NOTES_DIR=/from/dotenv\n", encoding="utf-8")
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=env_file)
            assert s.notes_dir == Path("/from/dotenv")

    def test_settings_are_immutable(self):
        with patch.dict("os.environ", {}, clear=True):
            s = Settings(_env_file=None)
            with pytest.raises(ValidationError):
                s.generator = "hugo"
