"""Exceptions raised by avatarlink."""


class AvatarLinkError(Exception):
    """Base class for avatarlink errors."""


class InvalidRenderOptionError(AvatarLinkError, ValueError):
    """A render option holds a value the avatar service does not accept."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r}: {reason}")
