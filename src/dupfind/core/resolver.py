"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

resolver.py
Splits a digest bucket into groups of byte-identical files.

For each bucket with two or more records:
    1. order records by link count (descending), then path (ascending)
    2. unless hard links count as distinct, keep one record per (device, inode)
    3. take the first record as master, compare every other record with it;
       identical ones form a group, the rest go through the next round
"""

import logging
from typing import Iterator, List, Optional

from dupfind.core.models import DigestBucket, EquivalenceGroup, FileRecord
from dupfind.core.interfaces import ByteComparator, EquivalenceResolver
from dupfind.core.comparator import ByteComparatorImpl

logger = logging.getLogger(__name__)


class EquivalenceResolverImpl(EquivalenceResolver):
    """
    Master-per-round clustering over one bucket. Each round removes one full
    equivalence class, so digest collisions end up in separate groups.
    """

    def __init__(self, comparator: Optional[ByteComparator] = None, hard_links_distinct: bool = False):
        self.comparator = comparator or ByteComparatorImpl()
        self.hard_links_distinct = hard_links_distinct

    @staticmethod
    def order_candidates(records: List[FileRecord]) -> List[FileRecord]:
        """Most-linked records first so an established copy becomes the master."""
        return sorted(records, key=lambda r: (-r.link_count, r.path))

    @staticmethod
    def filter_hard_links(records: List[FileRecord]) -> List[FileRecord]:
        """Keeps the first record seen for every (device, inode) pair, preserving order."""
        seen = set()
        result = []
        for record in records:
            if record.identity in seen:
                logger.debug(f"Skipping hard link: {record.path}")
                continue
            seen.add(record.identity)
            result.append(record)
        return result

    def candidates(self, bucket: DigestBucket) -> List[FileRecord]:
        """Sorted and, unless hard links count as distinct, link-filtered records of a bucket."""
        ordered = self.order_candidates(bucket.records)
        if not self.hard_links_distinct:
            ordered = self.filter_hard_links(ordered)
        return ordered

    def resolve(self, bucket: DigestBucket) -> Iterator[EquivalenceGroup]:
        """
        Yields confirmed groups for one bucket. Groups are produced lazily, one
        per round, so the caller may act on a group before the next round runs.
        """
        if not bucket.has_candidates():
            return

        remaining = self.candidates(bucket)
        while remaining:
            master, rest = remaining[0], remaining[1:]
            good: List[FileRecord] = []
            bad: List[FileRecord] = []
            for candidate in rest:
                if self.comparator.compare(master, candidate):
                    good.append(candidate)
                else:
                    bad.append(candidate)

            if good:
                yield EquivalenceGroup(master=master, duplicates=good, digest=bucket.digest)
            elif rest:
                logger.debug(f"No identical file for {master.path} in bucket {bucket.digest}")
            remaining = bad
