"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Computes whole-file content digests with pluggable incremental hash algorithms.

The digest is only a bucketing key: files sharing a digest are still compared
byte by byte before anything is done to them.
"""

import logging
from typing import Optional

import xxhash

from dupfind.core.models import FileRecord
from dupfind.core.interfaces import DigestComputer, DigestState, HashAlgorithm

logger = logging.getLogger(__name__)

# Amount of data read at a time when digesting or comparing files
CHUNK_SIZE = 8192


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh64"

    def new(self) -> DigestState:
        return xxhash.xxh64()


class DigestComputerImpl(DigestComputer):
    """
    Streams a file through the configured algorithm, CHUNK_SIZE bytes at a time.
    A fresh digest state is created for every file.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, chunk_size: int = CHUNK_SIZE):
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size

    def compute(self, record: FileRecord) -> Optional[str]:
        try:
            f = open(record.path, 'rb')
        except OSError as e:
            logger.warning(f"unable to open file '{record.path}' for reading - {e.strerror or e}")
            return None

        state = self.algorithm.new()
        with f:
            try:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    state.update(chunk)
            except OSError as e:
                logger.error(f"read error on file '{record.path}' - {e.strerror or e}")
                return None

        return state.hexdigest()
