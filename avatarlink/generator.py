"""Gravatar URL generation.

Email addresses are normalized (trimmed and lowercased), hashed with MD5 and
appended to a base URL. Optional render options become query parameters in a
fixed order so equal inputs always produce byte-identical URLs.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, replace
from typing import Final
from urllib.parse import quote

from avatarlink.exceptions import InvalidRenderOptionError

DEFAULT_BASE_URL: Final[str] = "https://www.gravatar.com/avatar/"
LIBRAVATAR_BASE_URL: Final[str] = "https://cdn.libravatar.org/avatar/"

MIN_SIZE: Final[int] = 1
MAX_SIZE: Final[int] = 2048


def normalize_email(email: str) -> str:
    """Trim surrounding whitespace and lowercase an email address."""
    return email.strip().lower()


def hash_email(email: str) -> str:
    """Return the 32 character hex MD5 digest of a normalized email."""
    normalized = normalize_email(email).encode("utf-8")
    return hashlib.md5(normalized).hexdigest()  # noqa: S324


def _encode(value: object) -> str:
    return quote(str(value), safe="")


@dataclass(frozen=True)
class RenderOptions:
    """Optional query parameters understood by the avatar service.

    Fields left as ``None`` or ``""`` (or ``False`` for ``force_default``) are
    omitted from the generated URL.
    """

    default: str | None = None
    rating: str | None = None
    size: int | None = None
    force_default: bool = False

    def __post_init__(self) -> None:
        if self.size is None:
            return
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise InvalidRenderOptionError("size", self.size, "must be an integer")
        if not MIN_SIZE <= self.size <= MAX_SIZE:
            raise InvalidRenderOptionError(
                "size", self.size, f"must be between {MIN_SIZE} and {MAX_SIZE}"
            )

    def query_parameters(self) -> list[tuple[str, str]]:
        """Return the present options as ordered ``(key, encoded value)`` pairs."""
        parameters: list[tuple[str, str]] = []
        if self.default:
            parameters.append(("default", _encode(self.default)))
        if self.rating:
            parameters.append(("rating", _encode(self.rating)))
        if self.size is not None:
            parameters.append(("size", _encode(self.size)))
        if self.force_default:
            parameters.append(("forcedefault", "y"))
        return parameters

    def is_empty(self) -> bool:
        return not self.query_parameters()


@dataclass(frozen=True)
class Generator:
    """Builds avatar URLs for email addresses.

    ``base_url`` is used verbatim and must already end so that the hash becomes
    the final path segment. It is not validated.
    """

    base_url: str = DEFAULT_BASE_URL
    file_extension: str = ""

    @classmethod
    def for_host(cls, host: str, *, file_extension: str = "") -> Generator:
        """Create a generator for a Gravatar compatible host, e.g. Libravatar."""
        return cls(base_url=f"https://{host}/avatar/", file_extension=file_extension)

    def with_base_url(self, base_url: str) -> Generator:
        return replace(self, base_url=base_url)

    def with_file_extension(self, file_extension: str) -> Generator:
        return replace(self, file_extension=file_extension)

    def generate(self, email: str) -> str:
        """Return the avatar URL for ``email`` without a query string."""
        return f"{self.base_url}{hash_email(email)}{self.file_extension}"

    def generate_with_options(self, email: str, options: RenderOptions) -> str:
        """Return the avatar URL for ``email`` with ``options`` as query string."""
        return f"{self.generate(email)}{self.query_string(options)}"

    @staticmethod
    def query_string(options: RenderOptions) -> str:
        """Render ``options`` as ``?key=value&...``, or an empty string."""
        parameters = options.query_parameters()
        if not parameters:
            return ""
        return "?" + "&".join(f"{key}={value}" for key, value in parameters)


def avatar_url(
    email: str,
    options: RenderOptions | None = None,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Return an avatar URL for an email address."""
    generator = Generator(base_url=base_url)
    if options is None:
        return generator.generate(email)
    return generator.generate_with_options(email, options)
