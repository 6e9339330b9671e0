"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for the duplicate search pipeline: file records, digest buckets,
equivalence groups and the run configuration.
"""

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from dupfind.utils.convert_utils import ConvertUtils


class ConfigurationError(ValueError):
    """Raised when the run configuration is inconsistent. Fatal before any work starts."""


# =============================
# Enums
# =============================

class Disposition(Enum):
    """
    What to do with every confirmed group of identical files.
    """
    LIST = "list"
    LINK = "link"
    DELETE = "delete"

    @property
    def display_name(self) -> str:
        """Human-readable name for log messages."""
        mapping = {
            Disposition.LIST: "List",
            Disposition.LINK: "Hard link",
            Disposition.DELETE: "Interactive delete",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    Immutable snapshot of one candidate path, taken when the file was registered.
    Two records with the same (device_id, inode) name the same physical storage.
    """
    path: str
    size: int  # in bytes
    link_count: int = 1
    mode: int = stat.S_IFREG
    device_id: int = 0
    inode: int = 0

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> "FileRecord":
        return cls(
            path=path,
            size=st.st_size,
            link_count=st.st_nlink,
            mode=st.st_mode,
            device_id=st.st_dev,
            inode=st.st_ino,
        )

    @property
    def identity(self) -> Tuple[int, int]:
        """Hard-link identity of the underlying storage."""
        return self.device_id, self.inode

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}, links={self.link_count}>"


@dataclass
class DigestBucket:
    """
    All records sharing one content digest, in insertion order.
    Sharing a digest does not make files duplicates; the resolver confirms byte by byte.
    """
    digest: str
    records: List[FileRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.records)

    def append(self, record: FileRecord) -> None:
        self.records.append(record)

    def has_candidates(self) -> bool:
        """True if the bucket holds at least two records worth comparing."""
        return self.count > 1

    def __repr__(self):
        return f"<DigestBucket digest={self.digest}, count={self.count}>"


@dataclass
class EquivalenceGroup:
    """
    A master record plus the records confirmed byte-identical to it.
    """
    master: FileRecord
    duplicates: List[FileRecord]
    digest: str = ""

    @property
    def files(self) -> List[FileRecord]:
        """Master first, then the duplicates in comparison order."""
        return [self.master] + list(self.duplicates)

    @property
    def duplicate_bytes(self) -> int:
        return sum(d.size for d in self.duplicates)

    def __repr__(self):
        return f"<EquivalenceGroup master={self.master.path}, duplicates={len(self.duplicates)}>"


@dataclass
class DeleteDecision:
    """One line of the interactive delete listing."""
    record: FileRecord
    keep: bool = False

    def toggle(self) -> None:
        self.keep = not self.keep


@dataclass
class RunStats:
    """
    Counters collected while the pipeline runs.
    """
    files_registered: int = 0
    files_digested: int = 0
    files_skipped: int = 0
    buckets_examined: int = 0
    groups_found: int = 0
    duplicates_found: int = 0
    duplicate_bytes: int = 0
    files_linked: int = 0
    files_deleted: int = 0
    action_failures: int = 0
    registry_failures: int = 0
    total_time: float = 0.0

    def record_group(self, group: EquivalenceGroup) -> None:
        self.groups_found += 1
        self.duplicates_found += len(group.duplicates)
        self.duplicate_bytes += group.duplicate_bytes

    def as_dict(self) -> Dict[str, float]:
        return dict(self.__dict__)

    def print_summary(self) -> str:
        lines = [
            "Duplicate Search Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"Files registered: {self.files_registered}",
            f"Files digested: {self.files_digested} (skipped: {self.files_skipped})",
            f"Digest buckets examined: {self.buckets_examined}",
            f"Duplicate groups: {self.groups_found} / duplicates: {self.duplicates_found} "
            f"({ConvertUtils.bytes_to_human(self.duplicate_bytes)})",
        ]
        if self.files_linked:
            lines.append(f"Files hard linked: {self.files_linked}")
        if self.files_deleted:
            lines.append(f"Files deleted: {self.files_deleted}")
        if self.action_failures:
            lines.append(f"Failed actions: {self.action_failures}")
        if self.registry_failures:
            lines.append(f"Unreadable paths: {self.registry_failures}")
        return "\n".join(lines)


"""
Run configuration with built-in validation.
Replaces the option bitmask: every stage receives this one immutable value.
"""

@dataclass(frozen=True)
class DupfindParams:
    """Parameters for one duplicate search run with validation."""
    paths: Tuple[str, ...] = ()
    read_stdin: bool = False
    recurse: bool = False
    follow_symlinks: bool = False
    hard_links_distinct: bool = False
    include_empty: bool = True
    same_line: bool = False
    omit_first: bool = False
    show_size: bool = False
    disposition: Disposition = Disposition.LIST
    use_trash: bool = False
    quiet: bool = False
    verbose: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        # Accept any iterable of paths but store a tuple so the value stays hashable
        object.__setattr__(self, "paths", tuple(self.paths))

        if not self.paths and not self.read_stdin:
            raise ConfigurationError("nothing to do - try 'dupfind --help'")

        if self.use_trash and self.disposition != Disposition.DELETE:
            raise ConfigurationError("--trash can only be used with --delete")

    @staticmethod
    def from_flags(
            paths: Iterable[str] = (),
            link: bool = False,
            delete: bool = False,
            **options,
    ) -> "DupfindParams":
        """
        Factory method to create params from independent on/off switches.
        Link and delete are mutually exclusive.
        """
        if link and delete:
            raise ConfigurationError("link and delete are mutually exclusive")

        if link:
            disposition = Disposition.LINK
        elif delete:
            disposition = Disposition.DELETE
        else:
            disposition = Disposition.LIST

        return DupfindParams(paths=tuple(paths), disposition=disposition, **options)


def format_record(record: FileRecord, show_size: bool = False) -> str:
    """Path of a record, optionally annotated with its size in bytes."""
    if show_size:
        return f"{record.path} ({record.size})"
    return record.path
