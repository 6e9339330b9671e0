"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate search pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so that
stages can be swapped in tests (e.g. a hash algorithm that forces digest collisions).

Key Components:
---------------
- HashAlgorithm: Factory of incremental digest states (xxHash64 by default).
- DigestComputer: Streams a file's bytes into a content digest.
- ByteComparator: Exact two-file comparison.
- EquivalenceResolver: Splits one digest bucket into groups of identical files.
- FileRegistry: Collects candidate files and their stat metadata.
- GroupAction: Applies a disposition (list, link, delete) to one group.
"""

from typing import Protocol, Iterator, List, Optional, TextIO
from dupfind.core.models import FileRecord, DigestBucket, EquivalenceGroup


# ===== Interfaces =====

class DigestState(Protocol):
    """Running digest: the subset of the hashlib/xxhash object API we rely on."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for incremental hash algorithms.

    Every call to `new()` must return a freshly reset state; states are never
    shared between files.
    """
    name: str

    def new(self) -> DigestState:
        ...


class DigestComputer(Protocol):
    """Interface for computing the content digest of a whole file."""
    def compute(self, record: FileRecord) -> Optional[str]:
        """Hex digest of the file, or None if the file could not be read."""
        ...


class ByteComparator(Protocol):
    """Interface for exact comparison of two files."""
    def compare(self, file_a: FileRecord, file_b: FileRecord) -> bool:
        """True only if both files were read completely and are byte-identical."""
        ...


class EquivalenceResolver(Protocol):
    """
    Interface for turning a digest bucket into confirmed groups of identical files.
    """
    def resolve(self, bucket: DigestBucket) -> Iterator[EquivalenceGroup]:
        ...


class FileRegistry(Protocol):
    """
    Interface for collecting candidate files.

    Methods return the number of failures (unstattable paths, unreadable
    directories) so the caller can derive the exit status.
    """
    def add_path(self, path: str) -> int: ...
    def add_from_stream(self, stream: TextIO) -> int: ...

    @property
    def records(self) -> List[FileRecord]: ...


class GroupAction(Protocol):
    """Interface for one disposition applied to a confirmed group."""
    def apply(self, group: EquivalenceGroup) -> None:
        ...
