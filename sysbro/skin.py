"""Conversion and management of input-method skins converted from ``.ssf`` files."""

from __future__ import annotations

import argparse
import shutil
import subprocess
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

__all__ = ["SkinManager", "delete_directory", "main"]


def _default_install_dir() -> Path:
    return Path.home() / ".config" / "fcitx" / "skin"


def _default_converter() -> Path:
    return Path(sys.argv[0]).resolve().parent / "ssf2skin"


def delete_directory(path: str | Path) -> bool:
    """Remove a directory tree; an empty path fails, a missing directory succeeds."""
    if not str(path):
        return False
    target = Path(path)
    if not target.is_dir():
        return True
    shutil.rmtree(target, ignore_errors=True)
    return not target.exists()


class SkinManager:
    """Converts ``.ssf`` skins with an external converter and manages the results."""

    def __init__(self, install_dir: str | Path | None = None,
                 converter: str | Path | None = None) -> None:
        self.install_dir = Path(install_dir) if install_dir is not None else _default_install_dir()
        self.converter = Path(converter) if converter is not None else _default_converter()
        self.install_dir.mkdir(parents=True, exist_ok=True)

    def output_path(self, ssf_file: str | Path) -> Path:
        """Return where the skin converted from ``ssf_file`` is installed."""
        name = str(ssf_file).rsplit("/", 1)[-1].replace(".ssf", "")
        return self.install_dir / name

    def convert(self, ssf_files: Iterable[str | Path]) -> list[Path]:
        """Run the converter on each file and return the output directories.

        Raises ``FileNotFoundError`` when the converter is missing.
        """
        if not self.converter.is_file():
            raise FileNotFoundError(f"converter not found: {self.converter}")
        outputs: list[Path] = []
        for ssf_file in ssf_files:
            out = self.output_path(ssf_file)
            subprocess.run([str(self.converter), "-i", str(ssf_file), "-o", str(out)],
                           check=False)
            outputs.append(out)
        return outputs

    def installed_skins(self) -> list[str]:
        """Return the names of the installed skin directories, sorted by name."""
        names = (p.name for p in self.install_dir.iterdir()
                 if p.is_dir() and not p.name.startswith("."))
        return sorted(names, key=lambda n: (n.lower(), n))

    def delete_skins(self, names: Iterable[str]) -> list[str]:
        """Delete the named skins and return the names that could not be deleted."""
        failed: list[str] = []
        for name in names:
            if not delete_directory(self.install_dir / name):
                failed.append(name)
        return failed


def main(argv: Sequence[str] | None = None) -> int:
    """Convert, list or delete skins from the command line."""
    parser = argparse.ArgumentParser(prog="ssf2fcitx", description="Manage converted skins.")
    parser.add_argument("--install-dir", help="skin directory")
    parser.add_argument("--converter", help="path of the ssf2skin converter")
    commands = parser.add_subparsers(dest="command", required=True)
    convert = commands.add_parser("convert", help="convert .ssf files")
    convert.add_argument("files", nargs="+")
    commands.add_parser("list", help="list installed skins")
    delete = commands.add_parser("delete", help="delete installed skins")
    delete.add_argument("names", nargs="+")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    manager = SkinManager(args.install_dir, args.converter)
    if args.command == "convert":
        try:
            manager.convert(args.files)
        except FileNotFoundError as exc:
            print(exc, file=sys.stderr)
            return 1
        print("转换完毕！请检查！")
    elif args.command == "list":
        for name in manager.installed_skins():
            print(name)
    else:
        failed = manager.delete_skins(args.names)
        for name in failed:
            print(f"删除“{manager.install_dir / name}”失败！", file=sys.stderr)
        if failed:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())