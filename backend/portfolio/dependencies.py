"""애플리케이션 시작 시 생성한 저장소/미디어 클라이언트를 라우터에 주입합니다."""

from typing import Optional

from fastapi import Request

from portfolio.services.content_store import ContentStore
from portfolio.services.media_service import MediaClient


def get_content_store(request: Request) -> ContentStore:
    store = getattr(request.app.state, "content_store", None)
    if store is None:
        # 초기화 전이면 읽기는 기본 콘텐츠로, 쓰기는 StoreNotInitializedError로 이어진다.
        return ContentStore(None)
    return store


def get_media_client(request: Request) -> Optional[MediaClient]:
    return getattr(request.app.state, "media_client", None)
