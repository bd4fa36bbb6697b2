"""Gravatar and Libravatar image URLs for email addresses."""

from avatarlink.exceptions import AvatarLinkError, InvalidRenderOptionError
from avatarlink.generator import (
    DEFAULT_BASE_URL,
    LIBRAVATAR_BASE_URL,
    Generator,
    RenderOptions,
    avatar_url,
    hash_email,
    normalize_email,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "LIBRAVATAR_BASE_URL",
    "AvatarLinkError",
    "Generator",
    "InvalidRenderOptionError",
    "RenderOptions",
    "avatar_url",
    "hash_email",
    "normalize_email",
]
