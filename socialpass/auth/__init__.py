"""Authentication module."""

from socialpass.auth.base import (
    MalformedProviderPayload,
    MissingCodeParameter,
    Pass,
    PassError,
    UpstreamError,
)
from socialpass.auth.dependencies import get_github_pass
from socialpass.auth.github import GithubPass
from socialpass.auth.models import GithubPassConfig, Identity

__all__ = [
    "GithubPass",
    "GithubPassConfig",
    "Identity",
    "MalformedProviderPayload",
    "MissingCodeParameter",
    "Pass",
    "PassError",
    "UpstreamError",
    "get_github_pass",
]
