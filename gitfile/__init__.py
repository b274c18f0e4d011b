"""gitfile

Download a single raw file from Github or Gitlab.
Run as module: python -m gitfile <repository> <file>
"""

__version__ = "1.0.0"

from .downloader import Content, GitFileDownloader, OutputSpec, Written, download_file, retrieve
from .errors import (
    DirectoryCreateError,
    FileWriteError,
    FilesystemError,
    GitFileError,
    RequestValidationError,
    TransportError,
)
from .providers import ResolvedRequest, resolve
from .request import DownloadRequest, Provider

__all__ = [
    "Content",
    "Written",
    "OutputSpec",
    "GitFileDownloader",
    "download_file",
    "retrieve",
    "resolve",
    "ResolvedRequest",
    "DownloadRequest",
    "Provider",
    "GitFileError",
    "RequestValidationError",
    "TransportError",
    "FilesystemError",
    "DirectoryCreateError",
    "FileWriteError",
]
