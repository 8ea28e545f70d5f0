"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from portfolio.models.site_document import SiteDocument

__all__ = [
    "SiteDocument",
]
