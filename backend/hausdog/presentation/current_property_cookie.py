"""Read/write the last-selected property, kept client-side in a cookie.

The cookie holds URL-encoded JSON ``{"id": ..., "name": ...}``. Anything
that fails to decode or validate reads back as "no current property".
"""

import logging
from urllib.parse import quote, unquote

from fastapi import Request, Response

from hausdog.application.schemas import CurrentProperty

logger = logging.getLogger(__name__)

COOKIE_NAME = "hausdog_current_property"
COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def get_current_property(request: Request) -> CurrentProperty | None:
    raw = request.cookies.get(COOKIE_NAME)
    if not raw:
        return None
    try:
        return CurrentProperty.model_validate_json(unquote(raw))
    except ValueError:
        logger.debug("Ignoring malformed current-property cookie")
        return None


def set_current_property(response: Response, value: CurrentProperty | None) -> None:
    """Store value in the cookie, or clear the cookie when value is None."""
    if value is None:
        response.set_cookie(COOKIE_NAME, "", max_age=0, path="/", samesite="lax")
        return
    response.set_cookie(
        COOKIE_NAME,
        quote(value.model_dump_json(), safe=""),
        max_age=COOKIE_MAX_AGE,
        path="/",
        samesite="lax",
    )
