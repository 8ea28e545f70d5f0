"""Media 기능 API 라우터입니다. 업로드/삭제 요청을 검증하고 미디어 CDN 클라이언트로 위임합니다."""

import base64
import binascii
import re
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from portfolio.dependencies import get_media_client
from portfolio.middleware.auth_middleware import require_roles
from portfolio.schemas.auth import Principal
from portfolio.schemas.media import Base64UploadRequest, DeleteImageRequest, UploadedImageOut
from portfolio.services.media_service import MEDIA_SECTIONS, MediaClient, MediaError, public_id_from_url
from portfolio.config import settings
from portfolio.utils.helpers import read_upload

router = APIRouter(prefix="/api/media", tags=["media"])

FOLDER_RE = re.compile(r"^[a-z0-9_-]+(/[a-z0-9_-]+)*$")
DATA_URI_RE = re.compile(r"^data:image/[a-z0-9.+-]+;base64,", re.IGNORECASE)


def _validate_folder(folder: str) -> str:
    folder = (folder or "general").strip().strip("/").lower()
    if not FOLDER_RE.match(folder) or folder.split("/", 1)[0] not in MEDIA_SECTIONS:
        raise HTTPException(status_code=400, detail="Invalid upload folder.")
    return folder


def _require_media(media: Optional[MediaClient]) -> MediaClient:
    if media is None:
        raise HTTPException(status_code=503, detail="Media storage is not configured.")
    return media


def _decoded_size(image: str) -> int:
    payload = DATA_URI_RE.sub("", image, count=1)
    try:
        return len(base64.b64decode(payload, validate=True))
    except (binascii.Error, ValueError):
        raise HTTPException(status_code=400, detail="Image must be base64 encoded.")


@router.post("/images", response_model=UploadedImageOut)
async def upload_image(
    file: UploadFile = File(...),
    folder: str = Form("general"),
    media: Optional[MediaClient] = Depends(get_media_client),
    _current_user: Principal = Depends(require_roles("admin")),
):
    client = _require_media(media)
    target = _validate_folder(folder)
    content = await read_upload(file)
    try:
        result = await run_in_threadpool(client.upload, content, target, file.filename or "upload")
    except MediaError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return UploadedImageOut(**result, filename=file.filename, size=len(content))


@router.post("/upload", response_model=UploadedImageOut)
def upload_base64_image(
    data: Base64UploadRequest,
    media: Optional[MediaClient] = Depends(get_media_client),
    _current_user: Principal = Depends(require_roles("admin")),
):
    client = _require_media(media)
    target = _validate_folder(data.folder)
    if not data.image:
        raise HTTPException(status_code=400, detail="No image data provided.")
    size = _decoded_size(data.image)
    if size > settings.MAX_UPLOAD_SIZE:
        raise HTTPException(status_code=400, detail="Image exceeds upload size limit.")
    image = data.image if DATA_URI_RE.match(data.image) else f"data:image/png;base64,{data.image}"
    try:
        result = client.upload(image, target)
    except MediaError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return UploadedImageOut(**result, size=size)


@router.post("/delete")
def delete_image(
    data: DeleteImageRequest,
    media: Optional[MediaClient] = Depends(get_media_client),
    _current_user: Principal = Depends(require_roles("admin")),
):
    client = _require_media(media)
    public_id = data.public_id
    if not public_id and data.url:
        try:
            public_id = public_id_from_url(data.url)
        except MediaError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    if not public_id:
        raise HTTPException(status_code=400, detail="No public_id provided.")
    try:
        client.delete(public_id)
    except MediaError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return {"success": True}
