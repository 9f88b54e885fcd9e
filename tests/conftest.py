"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("GITHUB_CLIENT_ID", "test-client-id")
os.environ.setdefault("GITHUB_CLIENT_SECRET", "test-client-secret")

from collections.abc import AsyncGenerator, Generator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
import respx  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from socialpass.auth import GithubPass, GithubPassConfig, get_github_pass  # noqa: E402
from socialpass.main import app  # noqa: E402


@pytest.fixture
def github_config() -> GithubPassConfig:
    """OAuth app pointing at the real GitHub endpoints."""
    return GithubPassConfig(app="test-client-id", key="test-client-secret")


@pytest.fixture
def github_pass(github_config: GithubPassConfig) -> GithubPass:
    return GithubPass(github_config)


@pytest.fixture
def github_api() -> Generator[respx.MockRouter, None, None]:
    """Mock GitHub; any unmocked outbound request fails the test."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def client(github_pass: GithubPass) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client wired to the test GitHub pass."""
    app.dependency_overrides[get_github_pass] = lambda: github_pass

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
