from pathlib import Path

import pytest

from sysbro.autostart import AutoStartManager, DesktopInfo, default_autostart_dir
from sysbro.desktop_properties import DesktopProperties


@pytest.fixture
def manager(tmp_path):
    return AutoStartManager(tmp_path / "autostart", locale="zh_CN")


def entry(directory: Path, filename: str, text: str) -> Path:
    path = directory / filename
    path.write_text(text, encoding="utf-8")
    return path


def test_creates_directory(tmp_path):
    target = tmp_path / "nested" / "autostart"
    AutoStartManager(target, locale="C")
    assert target.is_dir()


def test_default_dir_uses_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_autostart_dir() == tmp_path / "autostart"


def test_add_new_app_writes_entry(manager):
    path = manager.add_new_app("Notes", "notes --tray")
    props = DesktopProperties(path, "Desktop Entry")
    assert props.value("Name") == "Notes"
    assert props.value("Exec") == "notes --tray"
    assert props.value("Icon") == "notes --tray"
    assert props.value("Type") == "Application"
    assert [a.name for a in manager.apps] == ["Notes"]
    assert manager.apps[0].command == "notes --tray"


def test_localized_name_preferred(manager):
    entry(manager.autostart_dir, "a.desktop",
          "[Desktop Entry]\nName=Mail\nName[zh_CN]=Post\nExec=mail\n")
    apps = manager.load_apps()
    assert apps[0].name == "Post"


def test_non_desktop_files_ignored(manager):
    entry(manager.autostart_dir, "readme.txt", "Name=x\n")
    entry(manager.autostart_dir, "a.b.desktop", "[Desktop Entry]\nName=x\n")
    assert manager.load_apps() == []


def test_removed_files_dropped_and_entries_updated(manager):
    first = manager.add_new_app("One", "one")
    manager.add_new_app("Two", "two")
    assert len(manager.apps) == 2
    first.unlink()
    manager.load_apps()
    assert [a.name for a in manager.apps] == ["Two"]


def test_set_value_updates_name_locale_and_icon(manager):
    path = entry(manager.autostart_dir, "a.desktop",
                 "[Desktop Entry]\nName=Old\nName[zh_CN]=Old\nExec=old\n")
    manager.set_value(path, "Name", "Fresh")
    manager.set_value(path, "Exec", "fresh-cmd")
    props = DesktopProperties(path, "Desktop Entry")
    assert props.value("Name") == "Fresh"
    assert props.value("Name[zh_CN]") == "Fresh"
    assert props.value("Icon") == "fresh-cmd"
    assert manager.apps[0].command == "fresh-cmd"


def test_set_value_does_not_add_missing_local_name(manager):
    path = manager.add_new_app("App", "app")
    manager.set_value(path, "Name", "Renamed")
    assert not DesktopProperties(path, "Desktop Entry").contains("Name[zh_CN]")


def test_remove_app(manager):
    path = manager.add_new_app("Gone", "gone")
    manager.remove_app(path)
    assert not path.exists()
    assert manager.apps == []
    manager.remove_app(path)
    assert manager.apps == []


def test_delete_all(manager):
    manager.add_new_app("A", "a")
    entry(manager.autostart_dir, "other.txt", "x")
    manager.delete_all()
    assert list(manager.autostart_dir.iterdir()) == []
    assert manager.apps == []


def test_import_files_copies_desktop_only_without_overwrite(manager, tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    good = entry(src, "tool.desktop", "[Desktop Entry]\nName=Tool\nExec=tool\n")
    bad = entry(src, "tool.txt", "ignored")
    copied = manager.import_files([good, bad])
    assert copied == [manager.autostart_dir / "tool.desktop"]
    assert [a.name for a in manager.apps] == ["Tool"]
    assert manager.import_files([good]) == []


def test_listeners_notified(manager):
    calls = []
    manager.listeners.append(lambda: calls.append(len(manager.apps)))
    manager.add_new_app("X", "x")
    assert calls == [1]


def test_desktop_info_equality_by_path():
    assert DesktopInfo("/p/a.desktop", name="A") == DesktopInfo("/p/a.desktop", name="B")
    assert DesktopInfo("/p/a.desktop") != DesktopInfo("/p/b.desktop")