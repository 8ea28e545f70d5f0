"""Auth Service 도메인 서비스 레이어입니다. 관리자 자격 증명 확인과 토큰 발급을 담당합니다."""

import hmac
from datetime import datetime, timedelta

from fastapi import HTTPException, status
from jose import jwt

from portfolio.config import settings

ALGORITHM = "HS256"
ADMIN_ROLE = "admin"


def create_access_token(email: str, role: str = ADMIN_ROLE) -> str:
    expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": email, "role": role, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def authenticate_admin(email: str, password: str) -> str:
    email_ok = (email or "").strip().lower() == settings.ADMIN_EMAIL.strip().lower()
    password_ok = hmac.compare_digest((password or "").encode("utf-8"), settings.ADMIN_PASSWORD.encode("utf-8"))
    if not (email_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password.",
        )
    return settings.ADMIN_EMAIL
