"""환경 변수 기반 애플리케이션 설정을 중앙에서 관리합니다."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./portfolio.db"
    DATABASE_TIMEOUT_SECONDS: float = 10.0
    # 사이트 전체에서 단 하나의 콘텐츠 문서를 가리키는 고정 키
    CONTENT_DOCUMENT_KEY: str = "content"

    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Admin account (호스팅 인증 공급자 대신 단일 관리자 계정)
    ADMIN_EMAIL: str = "admin@portfolio.dev"
    ADMIN_PASSWORD: str = "change-me"

    # Media CDN (Cloudinary)
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""
    CLOUDINARY_API_BASE_URL: str = "https://api.cloudinary.com/v1_1"
    MEDIA_ROOT_FOLDER: str = "portfolio"
    MEDIA_TIMEOUT_SECONDS: float = 15.0

    # File upload
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10 MB
    ALLOWED_IMAGE_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif", "webp"]

    def media_configured(self) -> bool:
        return all(
            str(value or "").strip()
            for value in (self.CLOUDINARY_CLOUD_NAME, self.CLOUDINARY_API_KEY, self.CLOUDINARY_API_SECRET)
        )

    class Config:
        # 실행 cwd와 무관하게 backend/.env를 로드한다.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
