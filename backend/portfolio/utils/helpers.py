"""업로드 파일 검증 공용 헬퍼입니다."""

from fastapi import UploadFile, HTTPException

from portfolio.config import settings


def file_extension(filename: str | None) -> str:
    name = filename or ""
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""


def validate_image_file(file: UploadFile) -> None:
    ext = file_extension(file.filename)
    allowed = {item.lower() for item in settings.ALLOWED_IMAGE_EXTENSIONS}
    if ext not in allowed:
        raise HTTPException(
            status_code=400,
            detail=f"Only image files are allowed: {', '.join(sorted(allowed))}",
        )


async def read_upload(file: UploadFile) -> bytes:
    validate_image_file(file)
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Empty file")
    if len(content) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File exceeds {limit_mb} MB limit")
    return content
