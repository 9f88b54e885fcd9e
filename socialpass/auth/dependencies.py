"""Authentication dependencies for FastAPI."""

from functools import lru_cache

from socialpass.auth.github import GithubPass
from socialpass.auth.models import GithubPassConfig
from socialpass.config import get_settings


@lru_cache
def get_github_pass() -> GithubPass:
    """Get the GitHub pass configured from settings."""
    return GithubPass(GithubPassConfig.from_settings(get_settings()))
