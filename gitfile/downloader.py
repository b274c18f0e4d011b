"""
Retrieve a raw file and either hand back its text or write it to disk.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import structlog

from .errors import DirectoryCreateError, FileWriteError, TransportError
from .fetcher import HTTPFetcher
from .providers import mask_url, resolve
from .request import DownloadRequest

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OutputSpec:
    directory: str
    file: str
    keep_original_path: bool = False


@dataclass(frozen=True)
class Content:
    text: str

    @property
    def value(self) -> str:
        return self.text


@dataclass(frozen=True)
class Written:
    path: str

    @property
    def value(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True


DownloadResult = Union[Content, Written]


def target_path(output: OutputSpec) -> str:
    """Where the file lands under the output directory."""
    if output.keep_original_path:
        # absolute repository paths still land under the output directory
        return os.path.join(output.directory, output.file.lstrip("/" + os.sep))
    return os.path.join(output.directory, os.path.basename(output.file))


def write_file(path: str, text: str, create_parents: bool) -> str:
    parent = os.path.dirname(path)
    if create_parents and parent:
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(parent, e) from e

    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise FileWriteError(path, e) from e
    return path


async def retrieve(
    url: str,
    headers: Dict[str, str],
    basic_auth: Optional[Tuple[str, str]],
    output: Optional[OutputSpec],
    fetcher: Optional[HTTPFetcher] = None,
) -> DownloadResult:
    """Fetch ``url`` once and return Content or Written.

    Raises TransportError on any network failure or non-2xx response,
    DirectoryCreateError / FileWriteError when persisting fails.
    """
    fetcher = fetcher or HTTPFetcher()
    result = await fetcher.fetch(url, headers=headers, basic_auth=basic_auth)

    if not result.success:
        status_code = result.status_code or None
        raise TransportError(result.error, status_code=status_code) from result.error

    logger.info("download_succeeded", url=mask_url(url), size=result.size,
                fetch_time=round(result.fetch_time, 3))

    if output is None:
        return Content(result.text)

    path = write_file(target_path(output), result.text,
                      create_parents=output.keep_original_path)
    logger.info("file_written", path=path)
    return Written(path)


class GitFileDownloader:
    """Download a single raw file from Github or Gitlab.

    Options are validated and the URL resolved at construction time, so
    invalid options fail before any network activity::

        downloader = GitFileDownloader({"provider": "github", "repository": "foo/bar", "file": "README.md"})
        result = await downloader.run()
    """

    def __init__(self, options: Union[DownloadRequest, Mapping[str, Any], None] = None,
                 fetcher: Optional[HTTPFetcher] = None):
        if isinstance(options, DownloadRequest):
            self.request = options
        else:
            self.request = DownloadRequest.from_options(options)

        resolved = resolve(self.request)
        self.url = resolved.url
        self.headers = resolved.headers
        self.basic_auth = resolved.basic_auth
        self.fetcher = fetcher

    @property
    def output(self) -> Optional[OutputSpec]:
        if self.request.output is None:
            return None
        return OutputSpec(self.request.output, self.request.file, self.request.keep_original_path)

    async def run(self) -> DownloadResult:
        return await retrieve(self.url, self.headers, self.basic_auth, self.output,
                              fetcher=self.fetcher)


async def download_file(fetcher: Optional[HTTPFetcher] = None, **options) -> DownloadResult:
    """Convenience wrapper: ``await download_file(provider="github", repository=..., file=...)``."""
    return await GitFileDownloader(options, fetcher=fetcher).run()
