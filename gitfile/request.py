"""
DownloadRequest model: one validated, immutable request per invocation.
"""

from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import RequestValidationError


class Provider(str, Enum):
    GITHUB = "github"
    GITLAB = "gitlab"


class DownloadRequest(BaseModel):
    """Options for fetching a single raw file.

    Credential fields are flat and provider-scoped: ``oauth2_token`` and
    ``basic_username``/``basic_password`` are only honored for GitHub,
    ``private_token`` only for GitLab.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    provider: Provider
    repository: str = Field(min_length=1)
    branch: str = Field(default="master", min_length=1)
    file: str = Field(min_length=1)
    output: Optional[str] = None
    keep_original_path: bool = False

    private_token: Optional[str] = None   # Gitlab
    oauth2_token: Optional[str] = None    # Github
    basic_username: Optional[str] = None  # Github
    basic_password: Optional[str] = None  # Github

    @field_validator("branch", "keep_original_path", mode="before")
    @classmethod
    def _none_means_default(cls, value: Any, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def basic_auth(self) -> Optional[Tuple[str, str]]:
        if self.basic_username is None or self.basic_password is None:
            return None
        return (self.basic_username, self.basic_password)

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "DownloadRequest":
        """Validate a plain options mapping, raising RequestValidationError."""
        if options is None:
            options = {}
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise RequestValidationError(
                f"GitFileDownloader options validation error: {details}", fields=fields
            ) from e
