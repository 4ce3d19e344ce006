"""
Fashion Catalog API — HTTP Basic Authentication Middleware
===========================================================

What:  Gate in front of every route: requests must carry the configured
       Basic credentials.
How:   For each request:
         1. Documentation paths (DOCS_URL prefix) and PUBLIC_PATHS pass through
         2. Otherwise the Authorization header is parsed as
            `Basic base64(username:password)`
         3. Missing/malformed header  → 401 "Authentication required"
            Wrong username/password   → 401 "Invalid credentials"
            Both carry `WWW-Authenticate: Basic realm="<realm>"`
         4. Match → request continues; no session state is kept

Credentials come from settings (AUTH_USERNAME / AUTH_PASSWORD). Comparison
uses secrets.compare_digest.
"""

import base64
import binascii
import logging
import secrets
from typing import Tuple

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from catalog_api.config import Settings, settings
from catalog_api.constants import DOCS_URL, PUBLIC_PATHS
from catalog_api.exceptions import AuthenticationError
from catalog_api.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

AUTH_REQUIRED = "Authentication required"
INVALID_CREDENTIALS = "Invalid credentials"


def is_public_path(path: str) -> bool:
    return path.startswith(DOCS_URL) or path in PUBLIC_PATHS


def parse_basic_credentials(header: str) -> Tuple[str, str]:
    """
    Decode an `Authorization: Basic ...` header value into (username, password).

    Only the first ':' separates the two, so passwords may contain colons.

    Raises:
        AuthenticationError: header absent, not Basic, not base64, or no ':'
    """
    if not header or not header.startswith("Basic "):
        raise AuthenticationError(AUTH_REQUIRED)

    token = header[len("Basic "):].strip()
    try:
        decoded = base64.b64decode(token, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        raise AuthenticationError(AUTH_REQUIRED, context={"reason": "undecodable credentials"})

    username, sep, password = decoded.partition(":")
    if not sep:
        raise AuthenticationError(AUTH_REQUIRED, context={"reason": "missing ':' separator"})
    return username, password


def verify_basic_auth(header: str, config: Settings = settings) -> str:
    """
    Check an Authorization header against the configured account.

    Returns:
        The authenticated username.

    Raises:
        AuthenticationError: with AUTH_REQUIRED or INVALID_CREDENTIALS
    """
    username, password = parse_basic_credentials(header)

    # Both comparisons always run so timing does not reveal which part failed
    user_ok = secrets.compare_digest(username.encode("utf-8"), config.auth_username.encode("utf-8"))
    password_ok = secrets.compare_digest(password.encode("utf-8"), config.auth_password.encode("utf-8"))
    if not (user_ok and password_ok):
        raise AuthenticationError(INVALID_CREDENTIALS, context={"username": username})
    return username


def challenge_response(exc: AuthenticationError, realm: str) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers={"WWW-Authenticate": f'Basic realm="{realm}"'},
    )


class BasicAuthMiddleware(BaseHTTPMiddleware):
    """
    Rejects unauthenticated requests before they reach a route.

    Runs inside the CORS middleware, so preflight OPTIONS requests are
    answered by CORS without credentials.
    """

    def __init__(self, app, config: Settings = settings):
        super().__init__(app)
        self.config = config

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if is_public_path(request.url.path):
            return await call_next(request)

        try:
            username = verify_basic_auth(request.headers.get("Authorization", ""), self.config)
        except AuthenticationError as exc:
            logger.warning(
                "[%s] %s %s rejected: %s",
                request_id_var.get(""),
                request.method,
                request.url.path,
                exc.message,
            )
            return challenge_response(exc, self.config.auth_realm)

        request.state.username = username
        return await call_next(request)
