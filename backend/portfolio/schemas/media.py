"""Media 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from typing import Optional

from pydantic import BaseModel


class UploadedImageOut(BaseModel):
    url: str
    public_id: str
    filename: Optional[str] = None
    size: Optional[int] = None


class Base64UploadRequest(BaseModel):
    image: str
    folder: str = "general"


class DeleteImageRequest(BaseModel):
    public_id: Optional[str] = None
    url: Optional[str] = None
