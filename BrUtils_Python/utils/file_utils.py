import re
from typing import Optional


class FileUtils:
    """Utilities for file names and extensions."""

    DIRECTORY_PREFIX = re.compile(r"^.*[\\/]")

    @staticmethod
    def file_name(path: str) -> str:
        """Get the file name (with extension) from a POSIX or Windows path."""
        return FileUtils.DIRECTORY_PREFIX.sub("", path)

    @staticmethod
    def extension(file_name: str) -> Optional[str]:
        """Text after the last dot, or None when there is none."""
        _, dot, ext = file_name.rpartition(".")
        if not dot or not ext:
            return None
        return ext

    @staticmethod
    def remove_extension(file_name: str) -> str:
        last_dot = file_name.rfind(".")
        return file_name[:last_dot] if last_dot != -1 else file_name
