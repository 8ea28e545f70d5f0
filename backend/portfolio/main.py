"""FastAPI 애플리케이션 진입점. 미들웨어, API 라우터, 저장소/미디어 클라이언트 수명 주기를 등록합니다."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portfolio.config import settings
from portfolio.database import Base, SessionLocal, engine
import portfolio.models  # noqa: F401 - 모델 import로 metadata 등록
from portfolio.routers import auth, content, media
from portfolio.services.content_store import ContentStore
from portfolio.services.media_service import MediaClient

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Portfolio Site API",
    description="포트폴리오 사이트 콘텐츠 문서와 관리자 편집 API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(content.router)
app.include_router(media.router)


@app.on_event("startup")
def init_clients():
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    Base.metadata.create_all(bind=engine)
    app.state.content_store = ContentStore(SessionLocal, document_key=settings.CONTENT_DOCUMENT_KEY)
    app.state.media_client = MediaClient.from_settings()
    if app.state.media_client is None:
        logger.warning("[media] Cloudinary credentials missing, media endpoints disabled")


@app.on_event("shutdown")
def close_clients():
    app.state.content_store = None
    app.state.media_client = None
    engine.dispose()


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Portfolio Site API"}
