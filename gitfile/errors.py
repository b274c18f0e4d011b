"""
Exceptions raised by the downloader core
"""

from typing import List, Optional


DOWNLOAD_ERROR_MESSAGE = "Error while downloading file. Please check options and token."


class GitFileError(Exception):
    """Base class for every error raised by gitfile."""


class RequestValidationError(GitFileError):
    """Options failed validation before any network activity."""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []


class TransportError(GitFileError):
    """Network failure or non-2xx (including redirect) response."""

    def __init__(self, reason: Optional[BaseException] = None, status_code: Optional[int] = None):
        super().__init__(DOWNLOAD_ERROR_MESSAGE)
        self.reason = reason
        self.status_code = status_code


class FilesystemError(GitFileError):
    phase = ""

    def __init__(self, path: str, reason: OSError):
        super().__init__(f"Failed to {self.phase} {path}: {reason}")
        self.path = path
        self.reason = reason


class DirectoryCreateError(FilesystemError):
    phase = "create"


class FileWriteError(FilesystemError):
    phase = "write"


class ConfigError(GitFileError):
    """Explicit configuration file is missing or malformed."""
