"""서비스 레이어 패키지 초기화 모듈입니다."""

from portfolio.services import (
    auth_service,
    content_store,
    content_editor,
    defaults,
    media_service,
    site_view,
)
