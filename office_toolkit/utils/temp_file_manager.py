"""
Temporary file management utilities.

Conversions that need an intermediate file (the HTML rendered on the way to a
PDF) create it through a TempFileManager so it is removed on every exit path.
Anything still tracked when the interpreter exits is removed then.
"""

from __future__ import annotations

import atexit
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .. import config


class TempFileManager:
    """Create, track and delete temporary files for the converters."""

    def __init__(self, prefix: str = config.TEMP_FILE_PREFIX, dir: str | None = None) -> None:
        self._lock = threading.Lock()
        self._tracked_paths: set[str] = set()
        self.prefix = prefix
        self.dir = dir
        atexit.register(self.cleanup_all)

    @property
    def tracked_paths(self) -> list[str]:
        with self._lock:
            return sorted(self._tracked_paths)

    def create_temp_file(self, *, suffix: str = "") -> str:
        """
        Create a new empty temporary file and track it for cleanup.

        Returns:
            Path to the created file.
        """
        if self.dir:
            Path(self.dir).mkdir(parents=True, exist_ok=True)
        fd, path = tempfile.mkstemp(suffix=suffix, prefix=self.prefix, dir=self.dir)
        os.close(fd)
        with self._lock:
            self._tracked_paths.add(path)
        return path

    @contextmanager
    def temporary_file(self, *, suffix: str = "") -> Iterator[str]:
        """Yield a fresh temporary file path and delete the file when the block exits."""
        path = self.create_temp_file(suffix=suffix)
        try:
            yield path
        finally:
            self.cleanup_file(path)

    def cleanup_file(self, path: str) -> None:
        """Delete a tracked temp file; a file that is already gone is not an error."""
        try:
            Path(path).unlink(missing_ok=True)
        finally:
            with self._lock:
                self._tracked_paths.discard(path)

    def cleanup_all(self) -> None:
        """Best-effort cleanup of all tracked temp files."""
        with self._lock:
            paths = list(self._tracked_paths)
            self._tracked_paths.clear()

        for path in paths:
            try:
                Path(path).unlink(missing_ok=True)
            except OSError:
                pass


_global_temp_manager: TempFileManager | None = None
_global_lock = threading.Lock()


def get_temp_manager() -> TempFileManager:
    """Get the process-wide TempFileManager shared by converters."""
    global _global_temp_manager
    with _global_lock:
        if _global_temp_manager is None:
            _global_temp_manager = TempFileManager()
        return _global_temp_manager
