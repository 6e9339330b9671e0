"""
dupfind — find duplicate files and list or operate upon them.

Core features:
- Content digests (xxHash64) to bucket candidate files cheaply
- Byte-by-byte confirmation before any file is reported or touched
- Hard-link awareness: names sharing storage are not reported as duplicates
- Three dispositions: list, replace with hard links, interactive delete
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("dupfind")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli
    from pathlib import Path as _Path

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from dupfind.commands import DupfindCommand
from dupfind.core import (
    DupfindParams, Disposition, FileRecord, EquivalenceGroup, RunStats, ConfigurationError)
from dupfind.services import ActionDispatcher, FileService

__all__ = [
    "DupfindCommand",
    "DupfindParams",
    "Disposition",
    "FileRecord",
    "EquivalenceGroup",
    "RunStats",
    "ConfigurationError",
    "ActionDispatcher",
    "FileService",
    "__version__",
]
