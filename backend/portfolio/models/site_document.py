"""사이트 콘텐츠 단일 문서를 저장하는 SQLAlchemy 모델 정의입니다."""

from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func

from portfolio.database import Base


class SiteDocument(Base):
    __tablename__ = "site_document"

    document_key = Column(String(50), primary_key=True)
    data = Column(JSON, nullable=False)  # camelCase 키의 SiteContent 문서
    updated_by = Column(String(100), nullable=True)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
