"""사이트 콘텐츠 API 라우터입니다. 공개 조회와 관리자 저장을 제공합니다."""

from fastapi import APIRouter, Depends, HTTPException, Query

from portfolio.dependencies import get_content_store
from portfolio.middleware.auth_middleware import require_roles
from portfolio.schemas.auth import Principal
from portfolio.schemas.content import SiteContent, SiteContentUpdate, SiteView
from portfolio.services.content_store import (
    ContentStore,
    StoreNotInitializedError,
    StorePermissionError,
    StoreUnavailableError,
)
from portfolio.services.defaults import backfill_missing_sections
from portfolio.services.site_view import build_site_view

router = APIRouter(tags=["content"])

ID_LIST_FIELDS = ("experiences", "projects", "socials")


def _validate_unique_ids(data: SiteContentUpdate) -> None:
    for field in ID_LIST_FIELDS:
        items = getattr(data, field)
        if not items:
            continue
        ids = [item.id for item in items]
        if any(not item_id for item_id in ids):
            raise HTTPException(status_code=422, detail=f"Every {field} entry needs an id.")
        if len(set(ids)) != len(ids):
            raise HTTPException(status_code=422, detail=f"Duplicate id in {field}.")


def _load_content(store: ContentStore) -> SiteContent:
    return backfill_missing_sections(store.load())


@router.get("/api/content", response_model=SiteContent)
def get_content(store: ContentStore = Depends(get_content_store)):
    return _load_content(store)


@router.get("/api/site", response_model=SiteView)
def get_site(
    changelog_limit: int | None = Query(None, ge=0),
    store: ContentStore = Depends(get_content_store),
):
    return build_site_view(_load_content(store), changelog_limit=changelog_limit)


@router.put("/api/admin/content", response_model=SiteContent)
def save_content(
    data: SiteContentUpdate,
    store: ContentStore = Depends(get_content_store),
    current_user: Principal = Depends(require_roles("admin")),
):
    _validate_unique_ids(data)
    try:
        store.save(data, updated_by=current_user.email)
    except StoreNotInitializedError:
        raise HTTPException(status_code=503, detail="Content store is not initialized.")
    except StorePermissionError:
        raise HTTPException(status_code=403, detail="Permission denied while saving content.")
    except StoreUnavailableError:
        raise HTTPException(status_code=503, detail="Content store is unavailable. Please try again.")
    return _load_content(store)
