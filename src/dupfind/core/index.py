"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

index.py
Maps content digests to buckets of file records.
"""

from typing import Dict, Iterator, Optional

from dupfind.core.models import DigestBucket, FileRecord


class DigestIndex:
    """
    Digest → bucket mapping. Buckets keep records in insertion order and are
    iterated in the order their digest was first seen.
    """

    def __init__(self):
        self._buckets: Dict[str, DigestBucket] = {}

    def insert(self, digest: str, record: FileRecord) -> DigestBucket:
        """Adds a record to the bucket for `digest`, creating the bucket on first use."""
        bucket = self._buckets.get(digest)
        if bucket is None:
            bucket = DigestBucket(digest=digest, records=[record])
            self._buckets[digest] = bucket
        else:
            bucket.append(record)
        return bucket

    def get(self, digest: str) -> Optional[DigestBucket]:
        return self._buckets.get(digest)

    def for_each(self) -> Iterator[DigestBucket]:
        """Yields every bucket exactly once."""
        yield from self._buckets.values()

    def candidate_buckets(self) -> Iterator[DigestBucket]:
        """Yields only the buckets that could contain duplicates (two or more records)."""
        return (b for b in self._buckets.values() if b.has_candidates())

    def __iter__(self) -> Iterator[DigestBucket]:
        return self.for_each()

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self):
        return f"<DigestIndex buckets={len(self._buckets)}>"
