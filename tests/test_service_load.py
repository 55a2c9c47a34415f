import threading
from importlib.metadata import EntryPoint, entry_points

import pytest

from vfs_zip.charset import ZipCharset
from vfs_zip.errors import OptionRegistryError
from vfs_zip.options import OptionRegistry, registry
from vfs_zip.rules import OPTION_ENTRY_POINT_GROUP

GROUP = "vfs_zip.tests.file_options"


def plugin(name, value):
    return EntryPoint(name=name, value=value, group=GROUP)


def plugins(monkeypatch, *eps):
    monkeypatch.setattr("vfs_zip.options.entry_points", lambda group: list(eps) if group == GROUP else [])


def test_load():
    names = [factory.__name__ for factory in registry.providers("zip:")]

    assert names == ["ZipCharset"]


def test_entry_point():
    eps = [ep for ep in entry_points(group=OPTION_ENTRY_POINT_GROUP) if ep.name.startswith("zip:")]
    if not eps:
        pytest.skip("vfs-zip is not installed")

    assert [ep.name for ep in eps] == ["zip:charset"]
    assert eps[0].load() is ZipCharset


def test_entry_point_registers_factory(monkeypatch):
    plugins(monkeypatch, plugin("zip:charset", "vfs_zip.charset:ZipCharset"))
    reg = OptionRegistry(group=GROUP, builtin_modules=())

    assert reg.providers("zip:") == [ZipCharset]
    assert reg.create("zip:charset", "utf8") == ZipCharset("UTF-8")


def test_entry_point_broken_import(monkeypatch):
    plugins(monkeypatch, plugin("zip:broken", "vfs_zip.no_such_module:Option"))
    reg = OptionRegistry(group=GROUP, builtin_modules=())

    with pytest.raises(OptionRegistryError, match=r"cannot load FileOption \[zip:broken\]") as exc:
        reg.names()
    assert isinstance(exc.value.__cause__, ImportError)


def test_entry_point_name_mismatch(monkeypatch):
    plugins(monkeypatch, plugin("zip:other", "vfs_zip.charset:ZipCharset"))
    reg = OptionRegistry(group=GROUP, builtin_modules=())

    with pytest.raises(OptionRegistryError, match=r"\[zip:other\] provides FileOption \[zip:charset\]"):
        reg.get("zip:charset")


def test_failed_discovery_keeps_failing(monkeypatch):
    plugins(
        monkeypatch,
        plugin("zip:charset", "vfs_zip.charset:ZipCharset"),
        plugin("zip:broken", "vfs_zip.no_such_module:Option"),
    )
    reg = OptionRegistry(group=GROUP, builtin_modules=())

    with pytest.raises(OptionRegistryError):
        reg.names()
    with pytest.raises(OptionRegistryError):
        reg.names()
    with pytest.raises(OptionRegistryError):
        reg.create("zip:charset", "UTF-8")


def test_discovery_retried_after_fix(monkeypatch):
    plugins(monkeypatch, plugin("zip:broken", "vfs_zip.no_such_module:Option"))
    reg = OptionRegistry(group=GROUP, builtin_modules=())

    with pytest.raises(OptionRegistryError):
        reg.names()

    plugins(monkeypatch, plugin("zip:charset", "vfs_zip.charset:ZipCharset"))

    assert reg.names() == ["zip:charset"]


def test_concurrent_first_lookup(monkeypatch):
    started = threading.Event()
    release = threading.Event()

    def slow_entry_points(group):
        started.set()
        release.wait(5)
        return [plugin("zip:charset", "vfs_zip.charset:ZipCharset")]

    monkeypatch.setattr("vfs_zip.options.entry_points", slow_entry_points)
    reg = OptionRegistry(group=GROUP, builtin_modules=())
    results = []

    first = threading.Thread(target=lambda: results.append(reg.names()))
    first.start()
    started.wait(5)

    second = threading.Thread(target=lambda: results.append(reg.names()))
    second.start()
    release.set()
    first.join(5)
    second.join(5)

    assert results == [["zip:charset"], ["zip:charset"]]
