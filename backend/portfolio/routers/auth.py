"""Auth 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends

from portfolio.middleware.auth_middleware import get_current_user
from portfolio.schemas.auth import LoginRequest, Principal, TokenResponse
from portfolio.services.auth_service import ADMIN_ROLE, authenticate_admin, create_access_token

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest):
    email = authenticate_admin(request.email, request.password)
    token = create_access_token(email, ADMIN_ROLE)
    return TokenResponse(access_token=token, user=Principal(email=email, role=ADMIN_ROLE))


@router.post("/logout")
def logout(current_user: Principal = Depends(get_current_user)):
    return {"message": "Logged out."}


@router.get("/me", response_model=Principal)
def me(current_user: Principal = Depends(get_current_user)):
    return current_user
