"""Browser-facing auth routes: OAuth callback and logout.

Mounted at the application root (``/auth/...``), outside the JSON API.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from hausdog.config import get_settings
from hausdog.application.services import AuthService
from hausdog.domain.entities import AuthSession
from hausdog.infrastructure.dependencies import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    get_auth_service,
)
from hausdog.infrastructure.supabase import code_verifier_cookie_name

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

LOGIN_PATH = "/login"
HOME_PATH = "/"
REFRESH_TOKEN_MAX_AGE = 60 * 60 * 24 * 30


def _redirect(location: str) -> RedirectResponse:
    return RedirectResponse(location, status_code=status.HTTP_302_FOUND)


def _store_session(response: RedirectResponse, session: AuthSession) -> None:
    secure = get_settings().node_env == "production"
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        session.access_token,
        max_age=session.expires_in,
        path="/",
        httponly=True,
        secure=secure,
        samesite="lax",
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        session.refresh_token,
        max_age=REFRESH_TOKEN_MAX_AGE,
        path="/",
        httponly=True,
        secure=secure,
        samesite="lax",
    )


@router.get("/callback")
async def auth_callback(
    request: Request,
    code: str | None = None,
    error: str | None = None,
    auth_service: AuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """Complete the sign-in redirect from the identity provider.

    Any failure sends the browser back to the login page; there is no retry.
    """
    if error:
        logger.warning(
            "Identity provider returned an error",
            extra={"reason": error, "description": request.query_params.get("error_description")},
        )
        return _redirect(LOGIN_PATH)

    verifier_cookie = code_verifier_cookie_name(get_settings().supabase_url)
    session = await auth_service.complete_login(code, request.cookies.get(verifier_cookie))
    if session is None:
        return _redirect(LOGIN_PATH)

    response = _redirect(HOME_PATH)
    _store_session(response, session)
    response.delete_cookie(verifier_cookie, path="/")
    return response


@router.post("/logout")
async def logout() -> RedirectResponse:
    """Drop the session cookies and return to the login page."""
    response = RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(ACCESS_TOKEN_COOKIE, path="/")
    response.delete_cookie(REFRESH_TOKEN_COOKIE, path="/")
    return response
