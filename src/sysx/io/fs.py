"""
File helpers: a path-bound text file wrapper, lexical path normalization,
octal permission strings and recursive directory sizes.
"""

import os
import re
import stat
from pathlib import Path, PurePath
from typing import List, Union

from ..core.exceptions import FileSystemError, InvalidPermissionsError, Utf8DecodeError
from ..core.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]

_OCTAL_MODE = re.compile(r"[0-7]{1,4}")


def normalize_path(path: PathLike) -> Path:
    """
    Resolve ``.`` and ``..`` components without touching the filesystem.

    ``..`` removes the previous component (and is dropped when there is
    nothing left to remove); ``.`` is skipped. Symlinks are not followed.

    >>> normalize_path("./dir/../dir/./file.txt")
    PosixPath('dir/file.txt')
    >>> normalize_path("/home/user/../user/./file.txt")
    PosixPath('/home/user/file.txt')
    """
    pure = PurePath(path)
    parts: List[str] = []
    for part in pure.parts[1:] if pure.anchor else pure.parts:
        if part == "..":
            if parts:
                parts.pop()
        elif part != ".":
            parts.append(part)
    return Path(pure.anchor, *parts)


def get_dir_size(path: PathLike) -> int:
    """
    Return the total size in bytes of all files below ``path``.

    Symlinks are counted by their own size and never followed.

    Raises:
        FileSystemError: If the directory or one of its entries cannot be read
    """
    total = 0
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    total += get_dir_size(entry.path)
                else:
                    total += entry.stat(follow_symlinks=False).st_size
    except OSError as e:
        raise FileSystemError(
            f"Failed to read directory {path}: {e}", {"path": str(path)}
        ) from e
    return total


class TextFile:
    """
    UTF-8 text file bound to an absolute, normalized path.

    The file need not exist yet; writes create missing parent directories.

    Example:
        >>> f = TextFile("notes/todo.txt")
        >>> f.write("first\\n")
        >>> f.append("second")
        >>> f.read()
        'first\\nsecond'
    """

    def __init__(self, path: PathLike) -> None:
        self._path = self._absolute(Path(path), Path.cwd())

    @staticmethod
    def _absolute(path: Path, base: Path) -> Path:
        if not path.is_absolute():
            path = base / path
        return normalize_path(path)

    def _error(self, action: str, error: OSError) -> FileSystemError:
        return FileSystemError(
            f"Failed to {action} {self._path}: {error}", {"path": str(self._path)}
        )

    @property
    def path(self) -> Path:
        """Absolute path of the file."""
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read(self) -> str:
        """
        Read the whole file.

        Raises:
            FileSystemError: If the file cannot be read
            Utf8DecodeError: If the content is not valid UTF-8
        """
        try:
            data = self._path.read_bytes()
        except OSError as e:
            raise self._error("read", e) from e
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise Utf8DecodeError(
                f"Invalid UTF-8 sequence in {self._path}: {e.reason}",
                {"path": str(self._path), "position": e.start},
            ) from e

    def write(self, data: str) -> None:
        """Replace the file's content, creating parent directories as needed."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(data, encoding="utf-8")
        except OSError as e:
            raise self._error("write", e) from e
        logger.debug("Wrote %d characters to %s", len(data), self._path)

    def append(self, data: str) -> None:
        """Append to the file, creating it if missing."""
        try:
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(data)
        except OSError as e:
            raise self._error("append to", e) from e

    def delete(self) -> None:
        """Remove the file; a missing file is not an error."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            raise self._error("delete", e) from e
        logger.debug("Deleted %s", self._path)

    def rename(self, new_path: PathLike) -> None:
        """
        Move the file and rebind this wrapper to the new location.

        A relative ``new_path`` is taken relative to the file's current
        directory. An existing target is replaced.

        Raises:
            FileSystemError: If the file cannot be moved
        """
        target = self._absolute(Path(new_path), self._path.parent)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            self._path.replace(target)
        except OSError as e:
            raise self._error("rename", e) from e
        logger.debug("Renamed %s to %s", self._path, target)
        self._path = target

    def get_permissions(self) -> str:
        """
        Return the permission bits as an octal string, e.g. ``"644"``.

        Raises:
            FileSystemError: If the file cannot be inspected
        """
        mode = self.get_metadata().st_mode
        return format(stat.S_IMODE(mode) & 0o777, "o")

    def set_permissions(self, permissions: str) -> None:
        """
        Set the mode from an octal string such as ``"755"``.

        Raises:
            InvalidPermissionsError: If the string is not 1-4 octal digits
            FileSystemError: If the mode cannot be applied
        """
        if not _OCTAL_MODE.fullmatch(permissions):
            raise InvalidPermissionsError(
                f"Invalid Unix permission string: {permissions!r}",
                {"permissions": permissions},
            )
        try:
            self._path.chmod(int(permissions, 8))
        except OSError as e:
            raise self._error("change permissions of", e) from e

    def get_metadata(self) -> os.stat_result:
        """
        Return ``os.stat`` results for the file.

        Raises:
            FileSystemError: If the file cannot be inspected
        """
        try:
            return self._path.stat()
        except OSError as e:
            raise self._error("stat", e) from e

    def __repr__(self) -> str:
        return f"TextFile({str(self._path)!r})"
