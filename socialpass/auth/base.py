"""Login pass contract and the errors raised while entering a pass."""

from abc import ABC, abstractmethod

from starlette.responses import Response

from socialpass.auth.models import Identity


class PassError(Exception):
    """Base exception for login pass errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingCodeParameter(PassError):
    """Callback request without an authorization code."""

    status_code = 400


class UpstreamError(PassError):
    """OAuth provider failed or answered with an unreadable body."""

    status_code = 502


class MalformedProviderPayload(PassError):
    """Provider payload lacks a required field or has it with the wrong type."""

    status_code = 502


class Pass(ABC):
    """A login provider.

    `enter` turns an incoming request into an identity, `exit` gets a chance
    to decorate the response sent back once the identity is known. Each
    provider is a sibling implementation of this contract.
    """

    @abstractmethod
    async def enter(self, request_uri: str) -> Identity | None:
        """Authenticate the request, returning None when nobody is logged in."""

    @abstractmethod
    def exit(self, response: Response, identity: Identity) -> Response:
        """Finalize the response for an authenticated identity."""
