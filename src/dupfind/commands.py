"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

Pipeline orchestrator for one duplicate search run.
Used by the CLI; pure Python with no terminal handling of its own.
"""
import logging
import sys
import time
from typing import Callable, Optional, TextIO

from dupfind.core.models import DupfindParams, RunStats
from dupfind.core.registry import FileRegistryImpl
from dupfind.core.hasher import DigestComputerImpl
from dupfind.core.index import DigestIndex
from dupfind.core.resolver import EquivalenceResolverImpl
from dupfind.core.interfaces import DigestComputer, ByteComparator
from dupfind.services.actions import ActionDispatcher

logger = logging.getLogger(__name__)


class DupfindCommand:
    """
    Orchestrates the whole duplicate search:
    1. Build the file list (registry)
    2. Digest every file into a DigestIndex
    3. Resolve every bucket into groups and dispatch each group

    Usage:
        params = DupfindParams.from_flags(paths=["photos"], recurse=True)
        stats = DupfindCommand().execute(params)
        sys.exit(1 if stats.registry_failures else 0)
    """

    def __init__(
            self,
            digester: Optional[DigestComputer] = None,
            comparator: Optional[ByteComparator] = None,
            input_stream: Optional[TextIO] = None,
            output: Optional[TextIO] = None,
    ):
        self._digester = digester or DigestComputerImpl()
        self._comparator = comparator
        self._input_stream = input_stream
        self._output = output

    def execute(
            self,
            params: DupfindParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
    ) -> RunStats:
        """
        Run the pipeline with the given parameters.

        Args:
            params: Validated run parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Statistics of the run; `registry_failures` decides the exit status
        """
        stats = RunStats()
        start_time = time.time()
        input_stream = self._input_stream or sys.stdin

        # Phase one - build the file list
        logger.info("building file list")
        registry = FileRegistryImpl(
            recurse=params.recurse,
            follow_symlinks=params.follow_symlinks,
            include_empty=params.include_empty,
            quiet=params.quiet,
        )
        for path in params.paths:
            stats.registry_failures += registry.add_path(path)
        if params.read_stdin:
            stats.registry_failures += registry.add_from_stream(input_stream)
        records = registry.records
        stats.files_registered = len(records)

        # Phase two - group files by content digest
        logger.info("calculating digests")
        index = self.build_index(records, stats, progress_callback)

        # Phase three - check for exact match and carry out actions
        logger.info("performing required actions")
        resolver = EquivalenceResolverImpl(
            comparator=self._comparator,
            hard_links_distinct=params.hard_links_distinct,
        )
        dispatcher = ActionDispatcher(
            params,
            input_stream=input_stream,
            output=self._output,
            stats=stats,
        )
        buckets = list(index.candidate_buckets())
        for i, bucket in enumerate(buckets, 1):
            stats.buckets_examined += 1
            for group in resolver.resolve(bucket):
                dispatcher.dispatch(group)
            if progress_callback:
                progress_callback("resolving", i, len(buckets))

        stats.total_time = time.time() - start_time
        return stats

    def build_index(self, records, stats: RunStats, progress_callback=None) -> DigestIndex:
        """Digests every record; unreadable files are left out of the index."""
        index = DigestIndex()
        total = len(records)
        for i, record in enumerate(records, 1):
            digest = self._digester.compute(record)
            if digest is None:
                stats.files_skipped += 1
            else:
                index.insert(digest, record)
                stats.files_digested += 1
            if progress_callback:
                progress_callback("digesting", i, total)
        return index
