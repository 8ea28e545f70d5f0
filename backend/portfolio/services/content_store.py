"""사이트 콘텐츠 단일 문서의 읽기/쓰기를 담당하는 저장소 어댑터입니다.

읽기 실패는 기본 콘텐츠로 대체하고 호출자에게 노출하지 않는다.
쓰기 실패는 관리자가 다시 시도할 수 있도록 반드시 예외로 올린다.
동시 관리자 세션 사이의 충돌은 감지하지 않는다(필드 단위 last-write-wins).
"""

import logging
from typing import Callable, Optional

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from portfolio.models.site_document import SiteDocument
from portfolio.schemas.content import SiteContent, SiteContentUpdate
from portfolio.services.defaults import default_document, get_default

logger = logging.getLogger(__name__)

PERMISSION_ERROR_MARKERS = (
    "permission denied",
    "access denied",
    "readonly database",
    "read-only",
    "insufficient privilege",
)


class ContentStoreError(Exception):
    """콘텐츠 문서 저장 실패."""


class StoreNotInitializedError(ContentStoreError):
    pass


class StorePermissionError(ContentStoreError):
    pass


class StoreUnavailableError(ContentStoreError):
    pass


def _classify_write_error(exc: SQLAlchemyError) -> ContentStoreError:
    text = str(exc).lower()
    if any(marker in text for marker in PERMISSION_ERROR_MARKERS):
        return StorePermissionError(f"콘텐츠 저장 권한이 없습니다: {exc}")
    return StoreUnavailableError(f"콘텐츠 저장소에 연결할 수 없습니다: {exc}")


class ContentStore:
    def __init__(
        self,
        session_factory: Optional[Callable[[], Session]],
        document_key: str = "content",
    ):
        self.session_factory = session_factory
        self.document_key = document_key

    @property
    def initialized(self) -> bool:
        return self.session_factory is not None

    def load(self) -> SiteContent:
        if not self.initialized:
            logger.warning("[content] store not initialized, returning default content")
            return get_default()

        try:
            db = self.session_factory()
            try:
                row = db.get(SiteDocument, self.document_key)
                data = row.data if row is not None else None
            finally:
                db.close()
        except (SQLAlchemyError, ValueError) as exc:
            # JSON 컬럼 역직렬화 실패는 행을 읽는 시점에 ValueError로 올라온다.
            logger.error("[content] read failed, using default content: %s", exc)
            return get_default()

        if data is None:
            return get_default()
        try:
            return SiteContent.model_validate(data)
        except ValidationError as exc:
            logger.error("[content] stored document is malformed, using default content: %s", exc)
            return get_default()

    def save(self, content: SiteContent | SiteContentUpdate, updated_by: Optional[str] = None) -> None:
        if not self.initialized:
            raise StoreNotInitializedError("콘텐츠 저장소가 초기화되지 않았습니다.")

        fields = content.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)
        try:
            try:
                self._write(fields, updated_by)
            except IntegrityError:
                # 동시에 최초 생성을 시도한 다른 요청이 먼저 insert 했다면 부분 갱신으로 처리한다.
                logger.info("[content] document created concurrently, retrying as update")
                self._write(fields, updated_by)
        except SQLAlchemyError as exc:
            logger.error("[content] save failed: %s", exc)
            raise _classify_write_error(exc) from exc

    def _write(self, fields: dict, updated_by: Optional[str]) -> None:
        db = self.session_factory()
        try:
            row = (
                db.query(SiteDocument)
                .filter(SiteDocument.document_key == self.document_key)
                .with_for_update()
                .first()
            )
            if row is None:
                row = SiteDocument(
                    document_key=self.document_key,
                    data={**default_document(), **fields},
                    updated_by=updated_by,
                )
                db.add(row)
                logger.info("[content] creating document '%s'", self.document_key)
            else:
                # JSON 컬럼 변경 감지를 위해 새 dict로 교체한다.
                current = row.data if isinstance(row.data, dict) else default_document()
                row.data = {**current, **fields}
                row.updated_by = updated_by
                logger.info("[content] updating fields %s", sorted(fields))
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        finally:
            db.close()
