"""Caller identity: trusted `userid` header or JWT bearer token (AUTH_MODE)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskflow.core.config import get_settings
from taskflow.domain.exceptions import AuthenticationException
from taskflow.infrastructure.security.jwt import verify_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the caller's user id; raise AuthenticationException (401) when absent.

    In header mode the id is read from USER_ID_HEADER (default `userid`), which an
    upstream gateway is trusted to set. In jwt mode it is the token's `sub` claim.
    """
    settings = get_settings()
    if settings.auth_mode == "jwt":
        if credentials is None:
            raise AuthenticationException("Not authenticated")
        try:
            payload = verify_token(credentials.credentials)
        except ValueError as e:
            raise AuthenticationException("Invalid or expired token") from e
        user_id = payload.get("sub")
        if not user_id:
            raise AuthenticationException("Token has no subject")
        return str(user_id)

    user_id = (request.headers.get(settings.user_id_header) or "").strip()
    if not user_id:
        raise AuthenticationException("Missing caller identity")
    return user_id
