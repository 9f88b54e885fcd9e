"""Authentication-related Pydantic models."""

import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from socialpass.config import Settings
from socialpass.constants import GITHUB_API_BASE_URL, GITHUB_OAUTH_BASE_URL


class Identity(BaseModel):
    """User identity produced by a successful login."""

    model_config = ConfigDict(frozen=True)

    urn: str
    properties: Mapping[str, str]

    @field_validator("properties")
    @classmethod
    def freeze_properties(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        """Copy into a read-only view so the caller's dict cannot leak in."""
        return MappingProxyType(dict(v))

    @field_serializer("properties")
    def serialize_properties(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)

    def __hash__(self) -> int:
        return hash((self.urn, frozenset(self.properties.items())))


class GithubPassConfig(BaseModel):
    """OAuth app credentials and endpoints for the GitHub pass.

    Two configs are equal when they hold the same credentials, whatever
    endpoints they point at.
    """

    model_config = ConfigDict(frozen=True)

    app: str
    key: str = Field(repr=False)
    github_url: str = GITHUB_OAUTH_BASE_URL
    api_url: str = GITHUB_API_BASE_URL

    @field_validator("github_url", "api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "GithubPassConfig":
        return cls(
            app=settings.github_client_id,
            key=settings.github_client_secret,
            github_url=settings.github_oauth_url,
            api_url=settings.github_api_url,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GithubPassConfig):
            return NotImplemented
        return (self.app, self.key) == (other.app, other.key)

    def __hash__(self) -> int:
        return hash((self.app, self.key))


class GitHubUser(BaseModel):
    """GitHub user data from the /user endpoint."""

    id: int
    login: str | None = None
    avatar_url: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def truncate_number(cls, v: Any) -> Any:
        """Accept any finite JSON number, dropping the fraction."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("id must be a JSON number")
        if isinstance(v, float):
            if not math.isfinite(v):
                raise ValueError("id must be a finite number")
            return int(v)
        return v

    @field_validator("login", "avatar_url", mode="before")
    @classmethod
    def ignore_non_strings(cls, v: Any) -> str | None:
        """Treat values of the wrong type as missing."""
        return v if isinstance(v, str) else None
