"""
Core duplicate search engine — registry, digester, index, comparator and resolver.

This package contains the algorithmic part of dupfind:
- FileRegistryImpl: collects candidate files with their stat metadata
- DigestComputerImpl + XXHashAlgorithmImpl: streaming xxHash64 content digests
- DigestIndex: digest → bucket of records
- ByteComparatorImpl: exact two-file comparison
- EquivalenceResolverImpl: hard-link filtering and byte-confirmed grouping
- Models: FileRecord, DigestBucket, EquivalenceGroup and the run configuration

Nothing here writes to stdout or changes the filesystem; see dupfind.services.
"""

from .models import (
    FileRecord, DigestBucket, EquivalenceGroup, DeleteDecision, Disposition,
    DupfindParams, RunStats, ConfigurationError)
from .hasher import DigestComputerImpl, XXHashAlgorithmImpl, CHUNK_SIZE
from .index import DigestIndex
from .comparator import ByteComparatorImpl
from .resolver import EquivalenceResolverImpl
from .registry import FileRegistryImpl

__all__ = [
    "FileRecord",
    "DigestBucket",
    "EquivalenceGroup",
    "DeleteDecision",
    "Disposition",
    "DupfindParams",
    "RunStats",
    "ConfigurationError",
    "DigestComputerImpl",
    "XXHashAlgorithmImpl",
    "CHUNK_SIZE",
    "DigestIndex",
    "ByteComparatorImpl",
    "EquivalenceResolverImpl",
    "FileRegistryImpl",
]
