"""Jinja2 helpers for rendering avatar URLs in templates."""

from __future__ import annotations

from jinja2 import Environment

from avatarlink.config import config
from avatarlink.generator import hash_email


def avatar_url_filter(
    email: str | None,
    size: int | None = None,
    default: str | None = None,
    rating: str | None = None,
    force_default: bool = False,
) -> str:
    """Return the avatar URL for ``email`` using the configured generator.

    Arguments left unset fall back to the configured render options.
    """
    options = config.render_options(
        default=default, rating=rating, size=size, force_default=force_default
    )
    return config.generator().generate_with_options(email or "", options)


def avatar_hash_filter(email: str | None) -> str:
    return hash_email(email or "")


def register_filters(env: Environment) -> Environment:
    """Install the ``avatar_url`` and ``avatar_hash`` filters on ``env``."""
    env.filters["avatar_url"] = avatar_url_filter
    env.filters["avatar_hash"] = avatar_hash_filter
    return env
