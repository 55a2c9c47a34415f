from __future__ import annotations

from typing import Optional


class NullInputError(TypeError):
    """A required argument was None."""


class InvalidOptionError(ValueError):
    """A file option value could not be converted."""

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class OptionRegistryError(LookupError):
    """An option name has no provider, or more than one."""


def require_not_none(value, what: str):
    if value is None:
        raise NullInputError(f"{what} must not be None")
    return value
