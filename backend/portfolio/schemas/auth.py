"""인증 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    email: str
    password: str


class Principal(BaseModel):
    email: str
    role: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: Principal
