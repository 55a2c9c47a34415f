"""
File options and the registry that builds them from JSON by name.

An option type becomes discoverable in two ways:

- decorating the class with ``@file_option("<name>")``, which registers it
  in the module-level ``registry`` when its module is imported;
- an entry point in the ``vfs_zip.file_options`` group whose name is the
  option name, which ``OptionRegistry.discover`` loads on first lookup.

Each name has exactly one provider. Registering the same class twice is a
no-op; registering a different one under a taken name is an error.
"""

from __future__ import annotations

import importlib
import json
import logging
import threading
from abc import ABC, abstractmethod
from importlib.metadata import entry_points
from typing import Any, Callable, Dict, List, Mapping, Optional

from .errors import InvalidOptionError, OptionRegistryError
from .fsoptions import FileSystemOptions
from .rules import OPTION_ENTRY_POINT_GROUP

logger = logging.getLogger(__name__)

# Modules shipping options with this package; imported before entry points
BUILTIN_OPTION_MODULES = ("vfs_zip.charset",)

OptionFactory = Callable[[Any], "FileOption"]


class FileOption(ABC):
    """A named, JSON-valued setting that can be applied to FileSystemOptions."""

    __slots__ = ()

    name: str = ""

    @property
    @abstractmethod
    def value(self) -> Any:
        """JSON form of this option's value."""

    @abstractmethod
    def apply(self, opts: FileSystemOptions) -> None:
        """Write this option into ``opts``."""

    def to_json(self) -> Dict[str, Any]:
        return {self.name: self.value}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileOption):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, self.value))

    def __str__(self) -> str:
        return json.dumps(self.to_json(), separators=(",", ":"), ensure_ascii=False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class OptionRegistry:
    def __init__(self, group: str = OPTION_ENTRY_POINT_GROUP,
                 builtin_modules: tuple = BUILTIN_OPTION_MODULES):
        self.group = group
        self.builtin_modules = builtin_modules
        self._factories: Dict[str, OptionFactory] = {}
        self._discovered = False
        self._lock = threading.Lock()

    def register(self, name: str, factory: OptionFactory) -> OptionFactory:
        if not name:
            raise OptionRegistryError("option name must not be empty")

        current = self._factories.get(name)
        if current is not None and current is not factory:
            raise OptionRegistryError(
                f"FileOption [{name}] already provided by {_qualname(current)}, "
                f"refusing {_qualname(factory)}"
            )

        if current is None:
            logger.debug("registered file option %s -> %s", name, _qualname(factory))
        self._factories[name] = factory
        return factory

    def discover(self) -> None:
        """Import built-in option modules and load entry points, once."""
        if self._discovered:
            return

        with self._lock:
            if self._discovered:
                return
            self._load_providers()
            # set only after a complete scan, so a failed one is retried
            self._discovered = True

        logger.debug("file options available: %s", ", ".join(sorted(self._factories)))

    def _load_providers(self) -> None:
        for module in self.builtin_modules:
            importlib.import_module(module)

        for ep in entry_points(group=self.group):
            try:
                factory = ep.load()
            except Exception as exc:
                logger.exception("failed to load file option entry point %s", ep.name)
                raise OptionRegistryError(f"cannot load FileOption [{ep.name}]") from exc

            declared = getattr(factory, "name", ep.name)
            if declared != ep.name:
                raise OptionRegistryError(
                    f"entry point [{ep.name}] provides FileOption [{declared}]"
                )
            self.register(ep.name, factory)

    def get(self, name: str) -> OptionFactory:
        self.discover()
        try:
            return self._factories[name]
        except KeyError:
            raise OptionRegistryError(f"unknown FileOption [{name}]") from None

    def names(self) -> List[str]:
        self.discover()
        return sorted(self._factories)

    def providers(self, prefix: str = "") -> List[OptionFactory]:
        self.discover()
        return [f for n, f in sorted(self._factories.items()) if n.startswith(prefix)]

    def create(self, name: str, value: Any) -> FileOption:
        return self.get(name)(value)

    def create_all(self, options: Mapping[str, Any]) -> List[FileOption]:
        """Build every option in a JSON object of ``{name: value}`` pairs."""
        if not isinstance(options, Mapping):
            raise InvalidOptionError("FileOptions must be a JSON object.")
        return [self.create(name, value) for name, value in options.items()]


def _qualname(obj: Any) -> str:
    return f"{getattr(obj, '__module__', '?')}.{getattr(obj, '__qualname__', repr(obj))}"


registry = OptionRegistry()


def file_option(name: str, target: Optional[OptionRegistry] = None):
    """Class decorator declaring an option's name and registering its factory."""

    def decorate(cls):
        cls.name = name
        (target or registry).register(name, cls)
        return cls

    return decorate
