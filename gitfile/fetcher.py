import logging
import time
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

import httpx

from .providers import mask_url

logger = logging.getLogger(__name__)


class FetchResult:
    def __init__(
        self,
        url: str,
        status_code: int,
        content: bytes = b'',
        headers: Optional[Dict[str, str]] = None,
        fetch_time: float = 0.0,
        error: Optional[BaseException] = None,
        encoding: Optional[str] = None
    ):
        """Hold the buffered response body and metadata of a single GET."""
        self.url = url
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}
        self.fetch_time = fetch_time
        self.error = error
        self.encoding = encoding
        self.timestamp = datetime.now(timezone.utc)

    @property
    def success(self) -> bool:
        """No transport error and a 2xx status code."""
        return self.error is None and 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        """Decode the body with the response encoding, falling back to utf-8."""
        if not self.content:
            return ""
        encoding = self.encoding or 'utf-8'
        try:
            return self.content.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            return self.content.decode('utf-8', errors='replace')

    @property
    def size(self) -> int:
        return len(self.content)


class HTTPFetcher:
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Single-shot GET fetcher. Redirects are never followed."""
        self.user_agent = 'gitfile/1.0'
        self.timeout = 30.0
        self.transport = transport

    async def fetch(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        basic_auth: Optional[Tuple[str, str]] = None
    ) -> FetchResult:
        """GET a URL and return a FetchResult; errors are captured, not raised."""
        merged_headers = {'User-Agent': self.user_agent}
        if headers:
            merged_headers.update(headers)

        start_time = time.time()

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=False,
                transport=self.transport,
            ) as client:
                response = await client.get(url, headers=merged_headers, auth=basic_auth)
                response.raise_for_status()

                return FetchResult(
                    url=url,
                    status_code=response.status_code,
                    content=response.content,
                    headers=dict(response.headers),
                    fetch_time=time.time() - start_time,
                    encoding=response.encoding
                )

        except httpx.HTTPStatusError as e:
            logger.debug(f"HTTP {e.response.status_code} for {mask_url(url)}")
            return FetchResult(
                url=url,
                status_code=e.response.status_code,
                headers=dict(e.response.headers),
                fetch_time=time.time() - start_time,
                error=e
            )

        except httpx.TimeoutException as e:
            logger.debug(f"Timeout after {self.timeout}s for {mask_url(url)}: {e}")
            error = e

        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.debug(f"Request error for {mask_url(url)}: {e}")
            error = e

        return FetchResult(
            url=url,
            status_code=0,
            fetch_time=time.time() - start_time,
            error=error
        )
