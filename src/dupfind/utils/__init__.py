"""Small formatting helpers shared by the CLI and the statistics summary."""

from .convert_utils import ConvertUtils

__all__ = ["ConvertUtils"]
