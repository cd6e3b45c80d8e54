"""Management of the user's autostart ``.desktop`` entries."""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .desktop_properties import DesktopProperties

__all__ = ["DesktopInfo", "AutoStartManager", "default_autostart_dir"]

_GROUP = "Desktop Entry"


def default_autostart_dir() -> Path:
    """Return the user's autostart directory (``$XDG_CONFIG_HOME/autostart``)."""
    config = os.environ.get("XDG_CONFIG_HOME") or os.path.join(Path.home(), ".config")
    return Path(config) / "autostart"


def _system_locale_name() -> str:
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            return value.split(".", 1)[0].split("@", 1)[0]
    return "C"


def _complete_suffix(path: Path) -> str:
    return path.name.partition(".")[2]


@dataclass
class DesktopInfo:
    """One autostart entry; entries are identified by their file path."""

    file_path: str
    name: str = field(default="", compare=False)
    icon_name: str = field(default="", compare=False)
    command: str = field(default="", compare=False)
    generic_name: str = field(default="", compare=False)


class AutoStartManager:
    """Keeps a list of the ``.desktop`` entries in an autostart directory."""

    def __init__(self, autostart_dir: str | os.PathLike[str] | None = None,
                 locale: str | None = None) -> None:
        self.autostart_dir = Path(autostart_dir) if autostart_dir is not None else default_autostart_dir()
        self.locale = locale if locale is not None else _system_locale_name()
        self.listeners: list[Callable[[], None]] = []
        self._apps: list[DesktopInfo] = []
        self.autostart_dir.mkdir(parents=True, exist_ok=True)
        self.load_apps()

    @property
    def apps(self) -> list[DesktopInfo]:
        """The current entries, in directory order."""
        return list(self._apps)

    def _visible_files(self) -> list[Path]:
        return sorted(
            p for p in self.autostart_dir.iterdir()
            if p.is_file() and not p.name.startswith(".")
        )

    def load_apps(self) -> list[DesktopInfo]:
        """Re-read the directory, update the entry list and notify listeners."""
        found: list[DesktopInfo] = []
        for path in self._visible_files():
            if _complete_suffix(path) != "desktop":
                continue
            file_path = str(path.resolve())
            desktop = DesktopProperties(file_path, _GROUP)
            name = desktop.value(f"Name[{self.locale}]", "") or desktop.value("Name", "")
            info = DesktopInfo(
                file_path=file_path,
                name=name,
                icon_name=desktop.value("Icon", ""),
                command=desktop.value("Exec", ""),
            )
            found.append(info)
            try:
                existing = self._apps[self._apps.index(info)]
            except ValueError:
                self._apps.append(info)
            else:
                existing.name = info.name
                existing.command = info.command
                existing.icon_name = info.icon_name

        self._apps = [app for app in self._apps if app in found]
        for listener in self.listeners:
            listener()
        return self.apps

    def add_new_app(self, app_name: str, app_exec: str) -> Path:
        """Create (or update) ``<app_name>.desktop`` launching ``app_exec``."""
        path = self.autostart_dir / f"{app_name}.desktop"
        desktop = DesktopProperties(path, _GROUP)
        desktop.set("Name", app_name)
        desktop.set("Exec", app_exec)
        desktop.set("Icon", app_exec)
        desktop.set("Type", "Application")
        desktop.save(path, _GROUP)
        self.load_apps()
        return path

    def set_value(self, file_path: str | os.PathLike[str], key: str, value: str) -> None:
        """Change one key of an entry, keeping localized name and icon in step."""
        desktop = DesktopProperties(file_path, _GROUP)
        desktop.set(key, value)
        if key == "Name":
            local_key = f"Name[{self.locale}]"
            if desktop.contains(local_key):
                desktop.set(local_key, value)
        if key == "Exec":
            desktop.set("Icon", value)
        desktop.save(file_path, _GROUP)
        self.load_apps()

    def remove_app(self, file_path: str | os.PathLike[str]) -> None:
        """Delete an entry's file; a file already gone is not an error."""
        Path(file_path).unlink(missing_ok=True)
        self.load_apps()

    def delete_all(self) -> None:
        """Delete every file in the autostart directory."""
        for path in self._visible_files():
            path.unlink(missing_ok=True)
        self.load_apps()

    def import_files(self, paths: Iterable[str | os.PathLike[str]]) -> list[Path]:
        """Copy ``.desktop`` files into the directory without overwriting; return the copies."""
        copied: list[Path] = []
        for source in map(Path, paths):
            if _complete_suffix(source) != "desktop":
                continue
            target = self.autostart_dir / source.name
            if target.exists():
                continue
            shutil.copyfile(source, target)
            copied.append(target)
        self.load_apps()
        return copied