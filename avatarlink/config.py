"""Configuration management for avatarlink."""

import os

from dotenv import load_dotenv

from avatarlink.generator import DEFAULT_BASE_URL, Generator, RenderOptions

# Load environment variables from .env file
load_dotenv()


def _optional_int(value: str | None) -> int | str | None:
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        # RenderOptions rejects the raw string when options are built
        return value


class Config:
    """Application configuration, read from the environment on creation."""

    def __init__(self) -> None:
        # Application
        self.DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

        # Avatar service
        self.BASE_URL: str = os.getenv("AVATARLINK_BASE_URL", DEFAULT_BASE_URL)
        self.FILE_EXTENSION: str = os.getenv("AVATARLINK_FILE_EXTENSION", "")

        # Default render options
        self.DEFAULT_IMAGE: str | None = os.getenv("AVATARLINK_DEFAULT_IMAGE") or None
        self.RATING: str | None = os.getenv("AVATARLINK_RATING") or None
        self.SIZE: int | str | None = _optional_int(os.getenv("AVATARLINK_SIZE"))

    def generator(self) -> Generator:
        """Build a generator from the configured base URL and extension."""
        return Generator(base_url=self.BASE_URL, file_extension=self.FILE_EXTENSION)

    def render_options(
        self,
        *,
        default: str | None = None,
        rating: str | None = None,
        size: int | None = None,
        force_default: bool = False,
    ) -> RenderOptions:
        """Build render options, filling unset arguments from the configuration."""
        return RenderOptions(
            default=default if default is not None else self.DEFAULT_IMAGE,
            rating=rating if rating is not None else self.RATING,
            size=size if size is not None else self.SIZE,  # type: ignore[arg-type]
            force_default=force_default,
        )


config = Config()
