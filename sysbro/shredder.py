"""Shredding of files and folders: a list of chosen paths and a privileged deleter."""

from __future__ import annotations

import argparse
import os
import shutil
import subprocess
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

__all__ = ["FileList", "DeleteResult", "delete_paths", "main", "DEFAULT_DELETE_COMMAND"]

DEFAULT_DELETE_COMMAND: tuple[str, ...] = ("pkexec", "sysbro-delete-files")


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of deleting one path."""

    path: str
    is_dir: bool
    ok: bool


class FileList:
    """An ordered list of distinct paths waiting to be shredded."""

    def __init__(self) -> None:
        self._paths: list[str] = []

    def append(self, paths: Iterable[str | os.PathLike[str]]) -> None:
        """Add paths that are not yet in the list, keeping their order."""
        for path in map(os.fspath, paths):
            if path not in self._paths:
                self._paths.append(path)

    def remove(self, path: str | os.PathLike[str]) -> None:
        """Drop ``path`` from the list; an absent path is ignored."""
        path = os.fspath(path)
        if path in self._paths:
            self._paths.remove(path)

    def clear(self) -> None:
        """Empty the list."""
        self._paths.clear()

    def remove_all_files(self, command: Sequence[str] = DEFAULT_DELETE_COMMAND) -> int:
        """Delete every listed path with ``command`` and return how many there were.

        The list is emptied only when the command succeeds; otherwise
        ``subprocess.CalledProcessError`` is raised and the list is kept.
        """
        if not self._paths:
            return 0
        count = len(self._paths)
        subprocess.run([*command, *self._paths], check=True)
        self.clear()
        return count

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, (str, os.PathLike)) and os.fspath(path) in self._paths


def delete_paths(paths: Iterable[str | os.PathLike[str]]) -> list[DeleteResult]:
    """Delete each path: directories recursively, anything else as a single file."""
    results: list[DeleteResult] = []
    for path in map(os.fspath, paths):
        if Path(path).is_dir():
            shutil.rmtree(path, ignore_errors=True)
            results.append(DeleteResult(path, True, not os.path.exists(path)))
            continue
        try:
            os.remove(path)
        except OSError:
            results.append(DeleteResult(path, False, False))
        else:
            results.append(DeleteResult(path, False, True))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Delete the paths given on the command line, reporting each file."""
    parser = argparse.ArgumentParser(prog="sysbro-delete-files",
                                     description="Delete files and folders.")
    parser.add_argument("paths", nargs="*", help="files or folders to delete")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    for result in delete_paths(args.paths):
        if not result.is_dir:
            print("finished" if result.ok else "error")
    return 0


if __name__ == "__main__":
    sys.exit(main())