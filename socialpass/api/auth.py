"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from socialpass.auth import GithubPass, PassError, get_github_pass
from socialpass.config import get_settings
from socialpass.utils.logging import LogContext

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


# ============== GitHub OAuth ==============

@router.get("/github/login")
async def github_login(
    github: Annotated[GithubPass, Depends(get_github_pass)],
) -> RedirectResponse:
    """Initiate GitHub OAuth login."""
    if not github.config.app:
        raise HTTPException(status_code=503, detail="GitHub OAuth is not configured")

    # No state parameter: CSRF binding is left to the hosting application
    redirect_uri = f"{settings.app_url}/api/auth/github/callback"
    return RedirectResponse(url=github.authorize_url(redirect_uri), status_code=302)


@router.get("/github/callback")
async def github_callback(
    request: Request,
    github: Annotated[GithubPass, Depends(get_github_pass)],
) -> Response:
    """Handle GitHub OAuth callback and return the logged-in identity."""
    log = LogContext(logger, provider="github")
    try:
        identity = await github.enter(str(request.url))
    except PassError as e:
        log.warning(f"Login failed with {e.status_code}: {e.message}")
        raise

    if identity is None:
        raise HTTPException(status_code=401, detail="Not authenticated")

    log.info(f"Logged in {identity.urn}")
    response = JSONResponse(content=identity.model_dump())
    return github.exit(response, identity)
