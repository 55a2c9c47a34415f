"""
The ``zip:charset`` file option.

Holds the character set a ZIP file system uses for entry names and
comments. Instances are immutable and can be shared between threads.

Values are validated against Python's codec registry and reported under
their preferred IANA name, so aliases compare equal::

    >>> ZipCharset("utf8") == ZipCharset("UTF-8")
    True
    >>> str(ZipCharset("latin_1"))
    '{"zip:charset":"ISO-8859-1"}'
"""

from __future__ import annotations

import codecs
import logging
from typing import Any

from charset_normalizer import from_bytes

from .errors import InvalidOptionError, require_not_none
from .fsoptions import FileSystemOptions, ZipFileSystemConfigBuilder
from .options import FileOption, file_option
from .rules import (
    CANONICAL_CHARSET_NAMES,
    CHARSET_OPTION_NAME,
    CONVERTIBLE_MESSAGE,
    LEGAL_CHARSET_NAME,
)

logger = logging.getLogger(__name__)

_NOT_CONVERTIBLE = CONVERTIBLE_MESSAGE.format(name=CHARSET_OPTION_NAME, kind="charset")

# Canonical name -> codec name; some, like windows-31j, have no Python alias
_CANONICAL_LABELS = {v.lower(): k for k, v in CANONICAL_CHARSET_NAMES.items()}


def _not_convertible() -> InvalidOptionError:
    return InvalidOptionError(_NOT_CONVERTIBLE, name=CHARSET_OPTION_NAME)


def _require_text_encoding(label: str) -> None:
    # str.encode refuses bytes-to-bytes codecs such as base64 or zlib;
    # "undefined" is a text codec that refuses everything with UnicodeError
    try:
        "".encode(label)
    except (LookupError, UnicodeError):
        raise _not_convertible() from None


def lookup_charset(value: Any) -> codecs.CodecInfo:
    """Resolve a JSON value to a text codec, or raise InvalidOptionError."""
    if not isinstance(value, str) or not LEGAL_CHARSET_NAME.fullmatch(value):
        raise _not_convertible()

    label = _CANONICAL_LABELS.get(value.lower(), value)
    try:
        info = codecs.lookup(label)
    except LookupError:
        raise _not_convertible() from None

    _require_text_encoding(label)
    return info


def canonical_name(charset: codecs.CodecInfo) -> str:
    return CANONICAL_CHARSET_NAMES.get(charset.name, charset.name.upper())


@file_option(CHARSET_OPTION_NAME)
class ZipCharset(FileOption):
    """Character set of a ZIP file system.

    ``ZipCharset(value)`` takes a decoded JSON value, which must be a string
    naming a text encoding. Use ``from_charset`` for an already resolved
    ``codecs.CodecInfo`` and ``detect`` to guess one from raw bytes.

    Raises:
        InvalidOptionError: ``value`` is not a string, or names no known
            text encoding.
    """

    __slots__ = ("_charset",)

    def __init__(self, value: Any):
        object.__setattr__(self, "_charset", lookup_charset(value))

    @classmethod
    def from_charset(cls, charset: codecs.CodecInfo) -> "ZipCharset":
        require_not_none(charset, "charset")
        if not isinstance(charset, codecs.CodecInfo):
            raise TypeError(f"charset must be a codecs.CodecInfo, not {type(charset).__name__}")
        _require_text_encoding(charset.name)

        option = cls.__new__(cls)
        object.__setattr__(option, "_charset", charset)
        return option

    @classmethod
    def detect(cls, sample: bytes) -> "ZipCharset":
        """Guess the charset of ``sample`` (e.g. raw entry names) with charset-normalizer."""
        require_not_none(sample, "sample")
        if not isinstance(sample, (bytes, bytearray, memoryview)):
            raise TypeError(f"sample must be bytes-like, not {type(sample).__name__}")

        match = from_bytes(bytes(sample)).best()
        if match is None:
            logger.warning("no charset detected in %d byte sample", len(sample))
            raise _not_convertible()

        logger.debug("detected charset %s", match.encoding)
        return cls(match.encoding)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return type(self), (self._charset.name,)

    @property
    def charset(self) -> codecs.CodecInfo:
        return self._charset

    @property
    def value(self) -> str:
        return canonical_name(self._charset)

    def apply(self, opts: FileSystemOptions) -> None:
        require_not_none(opts, "opts")
        ZipFileSystemConfigBuilder.get_instance().set_charset(opts, self._charset)
