"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

comparator.py
Exact byte-by-byte comparison of two files.
"""

import logging

from dupfind.core.models import FileRecord
from dupfind.core.interfaces import ByteComparator
from dupfind.core.hasher import CHUNK_SIZE

logger = logging.getLogger(__name__)


class ByteComparatorImpl(ByteComparator):
    """
    Reads both files in lockstep, CHUNK_SIZE bytes at a time, and stops at the
    first difference. Any failure to open or read counts as "not equal".
    """

    def __init__(self, chunk_size: int = CHUNK_SIZE):
        self.chunk_size = chunk_size

    def compare(self, file_a: FileRecord, file_b: FileRecord) -> bool:
        try:
            fa = open(file_a.path, 'rb')
        except OSError as e:
            logger.error(f"unable to open file '{file_a.path}' for reading - {e.strerror or e}")
            return False

        with fa:
            try:
                fb = open(file_b.path, 'rb')
            except OSError as e:
                logger.error(f"unable to open file '{file_b.path}' for reading - {e.strerror or e}")
                return False

            with fb:
                return self._compare_streams(fa, file_a.path, fb, file_b.path)

    def _compare_streams(self, fa, name_a: str, fb, name_b: str) -> bool:
        while True:
            try:
                chunk_a = fa.read(self.chunk_size)
            except OSError as e:
                logger.error(f"read error on file '{name_a}' - {e.strerror or e}")
                return False
            try:
                chunk_b = fb.read(self.chunk_size)
            except OSError as e:
                logger.error(f"read error on file '{name_b}' - {e.strerror or e}")
                return False

            if not chunk_a and not chunk_b:
                return True
            # Covers a short read on one side as well as differing bytes
            if chunk_a != chunk_b:
                return False
