"""
Raw-content URL and auth resolution, one resolver per provider.

Path segments are joined with "/" as given; nothing is percent-encoded.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import structlog

from .request import DownloadRequest, Provider

logger = structlog.get_logger(__name__)

GITHUB_RAW_BASE_URL = "https://raw.githubusercontent.com/"
GITLAB_RAW_BASE_URL = "https://gitlab.com/"
GITHUB_RAW_MEDIA_TYPE = "application/vnd.github.v3.raw"


@dataclass(frozen=True)
class ResolvedRequest:
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    basic_auth: Optional[Tuple[str, str]] = None


class GithubResolver:
    base_url = GITHUB_RAW_BASE_URL

    def resolve(self, request: DownloadRequest) -> ResolvedRequest:
        url = self.base_url + "/".join([request.repository, request.branch, request.file])

        headers = {"Accept": GITHUB_RAW_MEDIA_TYPE}
        if request.oauth2_token is not None:
            headers["Authorization"] = "token " + request.oauth2_token

        return ResolvedRequest(url=url, headers=headers, basic_auth=request.basic_auth)


class GitlabResolver:
    base_url = GITLAB_RAW_BASE_URL

    def resolve(self, request: DownloadRequest) -> ResolvedRequest:
        url = self.base_url + "/".join([request.repository, "raw", request.branch, request.file])
        if request.private_token is not None:
            url += "?private_token=" + request.private_token
        return ResolvedRequest(url=url)


RESOLVERS = {
    Provider.GITHUB: GithubResolver(),
    Provider.GITLAB: GitlabResolver(),
}


def resolve(request: DownloadRequest) -> ResolvedRequest:
    """Build the URL, headers and basic-auth pair for a validated request."""
    resolved = RESOLVERS[request.provider].resolve(request)
    logger.debug("resolved_url",
                 provider=request.provider.value,
                 url=mask_url(resolved.url),
                 basic_auth=resolved.basic_auth is not None)
    return resolved


def mask_url(url: str) -> str:
    """Hide the private_token query value for logging."""
    base, sep, query = url.partition("?private_token=")
    if not sep:
        return url
    return base + sep + "***"
