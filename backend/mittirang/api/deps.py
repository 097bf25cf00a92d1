from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer

from mittirang.adapters.media_storage import LocalMediaStorage
from mittirang.config import Settings
from mittirang.utils.security import decode_access_token

ADMIN_COOKIE = "admin-token"

# Authorization: Bearer <token>; the admin-token cookie is checked as a fallback
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> LocalMediaStorage:
    return request.app.state.storage


def require_admin(
    request: Request,
    bearer: Optional[str] = Depends(oauth2_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    token = bearer or request.cookies.get(ADMIN_COOKIE)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )

    payload = decode_access_token(token, settings)
    if payload is None or not payload.get("sub"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return payload["sub"]
