"""Filesystem query capability used by the resolver and the style prelude."""

from __future__ import annotations

import os
import stat
from pathlib import Path, PurePosixPath
from typing import Iterable, Mapping, Protocol

from bankthemes.errors import classify_os_error

_MISSING_ERRORS = (FileNotFoundError, NotADirectoryError)


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def list_dirs(self, path: Path) -> list[str]: ...

    def read_text(self, path: Path) -> str | None: ...


class LocalFileSystem:
    """Read-only view of the real disk.

    "Does not exist" answers False/None; every other OSError is raised as a
    FilesystemAccessError naming the path and the operation.
    """

    def exists(self, path: Path) -> bool:
        return self._stat(path, operation="check") is not None

    def is_file(self, path: Path) -> bool:
        st = self._stat(path, operation="probe")
        return st is not None and stat.S_ISREG(st.st_mode)

    def list_dirs(self, path: Path) -> list[str]:
        try:
            with os.scandir(path) as entries:
                return sorted(entry.name for entry in entries if entry.is_dir())
        except OSError as exc:
            raise classify_os_error(exc, path, "list directory") from exc

    def read_text(self, path: Path) -> str | None:
        try:
            return path.read_text(encoding="utf-8")
        except _MISSING_ERRORS:
            return None
        except OSError as exc:
            raise classify_os_error(exc, path, "read") from exc
        except UnicodeDecodeError as exc:
            raise classify_os_error(OSError(str(exc)), path, "decode") from exc

    @staticmethod
    def _stat(path: Path, *, operation: str) -> os.stat_result | None:
        try:
            return os.stat(path)
        except _MISSING_ERRORS:
            return None
        except OSError as exc:
            raise classify_os_error(exc, path, operation) from exc


class MemoryFileSystem:
    """In-memory file tree keyed by POSIX path, for tests and dry runs."""

    def __init__(self, files: Mapping[str, str] | Iterable[str] = ()) -> None:
        self._files: dict[PurePosixPath, str] = {}
        if isinstance(files, Mapping):
            for name, content in files.items():
                self.add_file(name, content)
        else:
            for name in files:
                self.add_file(name)

    def add_file(self, path: str | Path, content: str = "") -> None:
        self._files[self._key(path)] = content

    def exists(self, path: Path) -> bool:
        key = self._key(path)
        return key in self._files or any(key in f.parents for f in self._files)

    def is_file(self, path: Path) -> bool:
        return self._key(path) in self._files

    def list_dirs(self, path: Path) -> list[str]:
        key = self._key(path)
        names = {
            f.relative_to(key).parts[0]
            for f in self._files
            if key in f.parents and len(f.relative_to(key).parts) > 1
        }
        return sorted(names)

    def read_text(self, path: Path) -> str | None:
        return self._files.get(self._key(path))

    @staticmethod
    def _key(path: str | Path) -> PurePosixPath:
        return PurePosixPath(Path(path).as_posix())
