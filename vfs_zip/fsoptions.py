"""
File-system options bag and the config builders that own its slots.

Builders never hold state of their own; every setting lives in the
FileSystemOptions instance handed to them by the caller. The caller is
responsible for any locking around a shared bag.
"""

from __future__ import annotations

import codecs
import logging
from typing import Any, Dict, Optional, Tuple

from .errors import require_not_none
from .rules import ZIP_CONFIG_PREFIX, ZIP_CONFIG_SCOPE

logger = logging.getLogger(__name__)


class FileSystemOptions:
    def __init__(self):
        self._options: Dict[Tuple[str, str], Any] = {}

    def set_option(self, scope: str, name: str, value: Any) -> None:
        self._options[(scope, name)] = value

    def get_option(self, scope: str, name: str, default: Any = None) -> Any:
        return self._options.get((scope, name), default)

    def has_option(self, scope: str, name: str) -> bool:
        return (scope, name) in self._options

    def copy(self) -> "FileSystemOptions":
        clone = FileSystemOptions()
        clone._options = dict(self._options)
        return clone

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        keys = ", ".join(f"{s}:{n}" for s, n in sorted(self._options))
        return f"FileSystemOptions({keys})"


class FileSystemConfigBuilder:
    """Stores params for one file-system scope under ``prefix + name``."""

    scope = "default"
    prefix = ""

    def set_param(self, opts: FileSystemOptions, name: str, value: Any) -> None:
        require_not_none(opts, "opts")
        opts.set_option(self.scope, self.prefix + name, value)

    def get_param(self, opts: FileSystemOptions, name: str) -> Any:
        require_not_none(opts, "opts")
        return opts.get_option(self.scope, self.prefix + name)

    def has_param(self, opts: FileSystemOptions, name: str) -> bool:
        require_not_none(opts, "opts")
        return opts.has_option(self.scope, self.prefix + name)


class ZipFileSystemConfigBuilder(FileSystemConfigBuilder):
    scope = ZIP_CONFIG_SCOPE
    prefix = ZIP_CONFIG_PREFIX

    _instance: Optional["ZipFileSystemConfigBuilder"] = None

    @classmethod
    def get_instance(cls) -> "ZipFileSystemConfigBuilder":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_charset(self, opts: FileSystemOptions, charset: codecs.CodecInfo) -> None:
        logger.debug("zip charset -> %s", charset.name if charset is not None else None)
        self.set_param(opts, ".charset", charset)

    def get_charset(self, opts: FileSystemOptions) -> Optional[codecs.CodecInfo]:
        return self.get_param(opts, ".charset")
