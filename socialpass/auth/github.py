"""GitHub OAuth login pass.

Completes the authorization code flow: the code GitHub appends to the
callback URL is exchanged for an access token, and the token is used to read
the authenticated user's profile.
Documentation: https://docs.github.com/en/apps/oauth-apps/building-oauth-apps/authorizing-oauth-apps
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError
from starlette.responses import Response

from socialpass.auth.base import (
    MalformedProviderPayload,
    MissingCodeParameter,
    Pass,
    UpstreamError,
)
from socialpass.auth.models import GitHubUser, GithubPassConfig, Identity
from socialpass.constants import (
    DEFAULT_AVATAR,
    DEFAULT_LOGIN,
    GITHUB_AUTHORIZE_PATH,
    GITHUB_TOKEN_PATH,
    GITHUB_URN_PREFIX,
    GITHUB_USER_PATH,
    HTTPX_TIMEOUT,
)
from socialpass.utils.secrets import mask_secret

logger = logging.getLogger(__name__)


class GithubPass(Pass):
    """GitHub OAuth landing/callback pass.

    Holds nothing but immutable configuration, so one instance can serve any
    number of concurrent logins.

    Usage:
        github = GithubPass(GithubPassConfig(app="client-id", key="client-secret"))

        # Send the browser to GitHub
        url = github.authorize_url("https://example.com/api/auth/github/callback")

        # On the callback
        identity = await github.enter("https://example.com/api/auth/github/callback?code=...")
    """

    def __init__(
        self,
        config: GithubPassConfig,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the pass.

        Args:
            config: OAuth app credentials and GitHub endpoints
            client: Shared HTTP client; a short-lived one is opened per login when omitted
        """
        self.config = config
        self._client = client

    def authorize_url(self, redirect_uri: str) -> str:
        """Build the GitHub authorization page URL for this OAuth app."""
        params = {
            "client_id": self.config.app,
            "redirect_uri": redirect_uri,
        }
        return f"{self.config.github_url}{GITHUB_AUTHORIZE_PATH}?{urlencode(params)}"

    async def enter(self, request_uri: str) -> Identity | None:
        """Complete the login for a callback request.

        Args:
            request_uri: Full URI of the callback request, query string included

        Returns:
            The identity of the GitHub user

        Raises:
            MissingCodeParameter: If the URI has no `code` parameter
            UpstreamError: If GitHub fails or answers with an unreadable body
            MalformedProviderPayload: If the user profile has no numeric id
        """
        params = httpx.URL(request_uri).params
        if "code" not in params:
            raise MissingCodeParameter("code is not provided by Github")
        code = params["code"]

        if self._client is not None:
            return await self._login(self._client, request_uri, code)
        async with httpx.AsyncClient(timeout=HTTPX_TIMEOUT) as client:
            return await self._login(client, request_uri, code)

    def exit(self, response: Response, identity: Identity) -> Response:
        return response

    async def _login(self, client: httpx.AsyncClient, home: str, code: str) -> Identity:
        token = await self._token(client, home, code)
        identity = self.parse(await self._fetch(client, token))
        logger.info(f"GitHub login completed for {identity.urn}")
        return identity

    async def _token(self, client: httpx.AsyncClient, home: str, code: str) -> str:
        """Exchange the authorization code for an access token."""
        response = await self._send(
            client,
            "POST",
            f"{self.config.github_url}{GITHUB_TOKEN_PATH}",
            headers={"Accept": "application/xml"},
            data={
                "client_id": self.config.app,
                "redirect_uri": home,
                "client_secret": self.config.key,
                "code": code,
            },
        )
        if response.status_code != 200:
            raise UpstreamError(
                f"GitHub token exchange failed with HTTP {response.status_code}"
            )

        try:
            root = ET.fromstring(response.text)
        except ET.ParseError as e:
            raise UpstreamError(f"GitHub token response is not valid XML: {e}") from e

        node = root.find("access_token") if root.tag == "OAuth" else None
        token = node.text.strip() if node is not None and node.text else ""
        if not token:
            raise UpstreamError(self._token_error(root))

        logger.debug(f"GitHub issued access token {mask_secret(token)}")
        return token

    async def _fetch(self, client: httpx.AsyncClient, token: str) -> Any:
        """Get the authenticated user's profile with the token provided."""
        # Query-string tokens are deprecated by GitHub, the header is required
        response = await self._send(
            client,
            "GET",
            f"{self.config.api_url}{GITHUB_USER_PATH}",
            headers={
                "Accept": "application/json",
                "Authorization": f"token {token}",
            },
        )
        if response.status_code != 200:
            raise UpstreamError(
                f"GitHub user request failed with HTTP {response.status_code}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"GitHub user response is not valid JSON: {e}") from e

    @staticmethod
    async def _send(
        client: httpx.AsyncClient, method: str, url: str, **kwargs: Any
    ) -> httpx.Response:
        try:
            return await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise UpstreamError(f"GitHub request to {url} failed: {e}") from e

    @staticmethod
    def _token_error(root: ET.Element) -> str:
        message = "GitHub token response has no /OAuth/access_token"
        error = root.findtext("error")
        if error:
            description = root.findtext("error_description")
            message = f"{message} ({error}: {description})" if description else f"{message} ({error})"
        return message

    @staticmethod
    def parse(payload: Any) -> Identity:
        """Make an identity from the GitHub user JSON."""
        if not isinstance(payload, dict):
            raise MalformedProviderPayload("GitHub user payload is not a JSON object")

        try:
            user = GitHubUser.model_validate(payload)
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise MalformedProviderPayload(f"GitHub user payload is invalid: {fields}") from e

        return Identity(
            urn=f"{GITHUB_URN_PREFIX}{user.id}",
            properties={
                "login": user.login if user.login is not None else DEFAULT_LOGIN,
                "avatar": user.avatar_url if user.avatar_url is not None else DEFAULT_AVATAR,
            },
        )
