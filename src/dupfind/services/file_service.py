"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Filesystem mutations performed on confirmed duplicates: removal, trashing and
replacement by a hard link.
"""
import os
from send2trash import send2trash


class FileService:
    """
    Destructive file operations. Every failure is raised as RuntimeError with
    the underlying OSError chained, so callers can report and carry on.
    """

    @staticmethod
    def delete(file_path: str):
        """Removes the directory entry of a file."""
        try:
            os.unlink(file_path)
        except OSError as e:
            raise RuntimeError(f"unable to delete '{file_path}' - {e.strerror or e}") from e

    @staticmethod
    def move_to_trash(file_path: str):
        """
        Moves the named directory entry to the system trash.
        A symbolic link is trashed itself, never the file it points to.
        """
        path = os.fspath(file_path)

        if not os.path.lexists(path):
            raise RuntimeError(f"File not found: {path}")

        try:
            send2trash(path)
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e

    @classmethod
    def remove(cls, file_path: str, use_trash: bool = False):
        """Deletes or trashes a file depending on `use_trash`."""
        if use_trash:
            cls.move_to_trash(file_path)
        else:
            cls.delete(file_path)

    @staticmethod
    def replace_with_link(master_path: str, duplicate_path: str):
        """
        Removes `duplicate_path` and recreates it as a hard link to `master_path`.
        If linking fails after the removal, the duplicate name is gone; its content
        is still reachable through the master.
        """
        try:
            os.unlink(duplicate_path)
        except OSError as e:
            raise RuntimeError(f"unable to unlink '{duplicate_path}' - {e.strerror or e}") from e

        try:
            os.link(master_path, duplicate_path)
        except OSError as e:
            raise RuntimeError(
                f"unable to link '{master_path}' to '{duplicate_path}' - {e.strerror or e}"
            ) from e
