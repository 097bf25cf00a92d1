import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from mittirang.api.deps import ADMIN_COOKIE, get_settings, require_admin
from mittirang.config import Settings
from mittirang.db import get_db
from mittirang.repositories.admin_repo import AdminRepository
from mittirang.schemas.auth_schema import LoginIn, TokenOut
from mittirang.utils.security import create_access_token, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenOut)
def login(
    credentials: LoginIn,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = AdminRepository(db).get_by_email(credentials.email.strip().lower())
    if not user or not verify_password(credentials.password, user.password):
        logger.warning("Failed admin login for %r", credentials.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    token = create_access_token({"sub": user.email}, settings)
    response.set_cookie(
        ADMIN_COOKIE,
        token,
        httponly=True,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    logger.info("Admin %s logged in", user.email)
    return TokenOut(access_token=token, email=user.email)


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(ADMIN_COOKIE)
    return {"message": "Logged out"}


@router.get("/me")
def me(email: str = Depends(require_admin)):
    return {"email": email}
