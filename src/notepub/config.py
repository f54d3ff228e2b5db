"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Publisher settings loaded from environment variables."""

    notes_dir: Path = Path("notes")
    blog_dir: Path = Path("blog")
    posts_subdir: Path = Path("source/_posts")
    generator: str = "hexo"
    generate_arg: str = "g"
    deploy_arg: str = "d"
    markdown_ext: str = ".md"
    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="NOTEPUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    @property
    def posts_dir(self) -> Path:
        """Directory the blog generator reads posts from."""
        return self.blog_dir / self.posts_subdir
