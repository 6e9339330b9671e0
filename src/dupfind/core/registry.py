"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/registry.py
Builds the set of candidate files from paths given on the command line or read
from a stream.
Features:
- One record per distinct path (repeated names are reported and ignored)
- Optional recursion into directories
- lstat() by default, stat() when following symbolic links
- Optional exclusion of zero-length files
"""

import os
import stat
import logging
from typing import Dict, List, TextIO

from dupfind.core.models import FileRecord
from dupfind.core.interfaces import FileRegistry

logger = logging.getLogger(__name__)


class FileRegistryImpl(FileRegistry):
    """
    Collects regular files and their stat metadata.

    Attributes:
        recurse: Descend into directories instead of ignoring them
        follow_symlinks: Record the target of a symbolic link rather than skipping it
        include_empty: Record zero-length files
        quiet: Do not warn about names given more than once
    """

    def __init__(
        self,
        recurse: bool = False,
        follow_symlinks: bool = False,
        include_empty: bool = True,
        quiet: bool = False,
    ):
        self.recurse = recurse
        self.follow_symlinks = follow_symlinks
        self.include_empty = include_empty
        self.quiet = quiet
        self._records: Dict[str, FileRecord] = {}

    @property
    def records(self) -> List[FileRecord]:
        """Registered records ordered by path."""
        return [self._records[path] for path in sorted(self._records)]

    def __len__(self) -> int:
        return len(self._records)

    def add_path(self, path: str) -> int:
        """
        Registers a file, or the files below a directory when recursing.
        Returns:
            Number of paths that could not be inspected
        """
        try:
            st = os.stat(path) if self.follow_symlinks else os.lstat(path)
        except OSError as e:
            logger.error(f"unable to stat '{path}' - {e.strerror or e}")
            return 1

        if stat.S_ISREG(st.st_mode):
            self._add_file(path, st)
            return 0

        if stat.S_ISDIR(st.st_mode):
            if self.recurse:
                return self._add_directory(path)
            logger.warning(f"{path} is a directory - ignored")
            return 0

        logger.debug(f"Skipping {path}: not a regular file")
        return 0

    def add_from_stream(self, stream: TextIO) -> int:
        """Registers every path read from `stream`, one per line."""
        failures = 0
        for line in stream:
            path = line.rstrip("\r\n")
            if path:
                failures += self.add_path(path)
        return failures

    def _add_file(self, path: str, st: os.stat_result) -> None:
        if st.st_size == 0 and not self.include_empty:
            logger.debug(f"Skipping zero-byte file: {path}")
            return

        if path in self._records:
            if not self.quiet:
                logger.warning(f"filename '{path}' already seen")
            return

        self._records[path] = FileRecord.from_stat(path, st)
        logger.debug(f"Accepted file: {path} ({st.st_size} bytes)")

    def _add_directory(self, path: str) -> int:
        try:
            with os.scandir(path) as it:
                names = [entry.name for entry in it]
        except OSError as e:
            logger.error(f"unable to read directory '{path}' - {e.strerror or e}")
            return 1

        failures = 0
        for name in sorted(names):
            failures += self.add_path(os.path.join(path, name))
        return failures
