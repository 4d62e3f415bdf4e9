"""
Environment-variable cache and command-line argument helpers.

The cache is an explicit object owned by the caller rather than process-wide
state, so its lifetime and contents are under the caller's control.
"""

import os
import sys
import threading
from typing import Dict, Iterator, List, Mapping, Optional

from ..core.exceptions import EnvVarNotFoundError
from ..core.logging import get_logger

logger = get_logger(__name__)


class EnvCache:
    """
    Thread-safe cache of environment variables.

    Seeded from a snapshot of ``os.environ`` (or a supplied mapping). When
    ``export`` is enabled, writes also update the process environment and
    reads consult it first.
    """

    def __init__(
        self, environ: Optional[Mapping[str, str]] = None, export: bool = True
    ) -> None:
        """
        Initialize the cache.

        Args:
            environ: Initial variables; defaults to a copy of ``os.environ``
            export: Mirror writes into ``os.environ`` and read it first
        """
        self._lock = threading.Lock()
        self._export = export
        self._vars: Dict[str, str] = dict(os.environ if environ is None else environ)

    def set(self, key: str, value: str) -> None:
        """Store a variable in the cache (and the process environment when exporting)."""
        if self._export:
            os.environ[key] = value
        with self._lock:
            self._vars[key] = value
        logger.debug("Set environment variable %s", key)

    def get(self, key: str) -> str:
        """
        Look up a variable.

        Args:
            key: Variable name

        Returns:
            The variable's value

        Raises:
            EnvVarNotFoundError: If the variable is not set anywhere
        """
        if self._export:
            value = os.environ.get(key)
            if value is not None:
                return value
        with self._lock:
            try:
                return self._vars[key]
            except KeyError:
                raise EnvVarNotFoundError(
                    f"Environment variable not found: {key}"
                ) from None

    def get_or(self, key: str, default: str) -> str:
        """Look up a variable, falling back to ``default``."""
        try:
            return self.get(key)
        except EnvVarNotFoundError:
            return default

    def remove(self, key: str) -> None:
        """Remove a variable from the cache (and the process environment when exporting)."""
        if self._export:
            os.environ.pop(key, None)
        with self._lock:
            self._vars.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of every cached variable."""
        with self._lock:
            return dict(self._vars)

    def refresh(self) -> None:
        """Re-seed the cache from the current process environment."""
        with self._lock:
            self._vars = dict(os.environ)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        if self._export and key in os.environ:
            return True
        with self._lock:
            return key in self._vars

    def __len__(self) -> int:
        with self._lock:
            return len(self._vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())


def get_full_args() -> List[str]:
    """Command-line arguments, including the program name."""
    return list(sys.argv)


def get_args() -> List[str]:
    """Command-line arguments, excluding the program name."""
    return list(sys.argv[1:])


def get_full_str_args() -> str:
    """All command-line arguments joined by spaces."""
    return " ".join(get_full_args())


def get_str_args() -> str:
    """Command-line arguments (without the program name) joined by spaces."""
    return " ".join(get_args())
