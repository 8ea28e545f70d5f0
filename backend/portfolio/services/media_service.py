"""Media Service 도메인 서비스 레이어입니다. Cloudinary 업로드/삭제 API를 서명된 요청으로 호출합니다."""

import hashlib
import logging
import re
import time
from typing import Any, Dict, Optional

import httpx

from portfolio.config import settings

logger = logging.getLogger(__name__)

_VERSION_SEGMENT_RE = re.compile(r"^v\d+$")

# 업로드 폴더의 최상위 경로로 허용되는 섹션 이름
MEDIA_SECTIONS = {"hero", "about", "gallery", "projects", "general"}


class MediaError(Exception):
    """미디어 CDN 호출 실패."""


class MediaNotConfiguredError(MediaError):
    pass


def public_id_from_url(url: str) -> str:
    """Cloudinary 전송 URL에서 public_id를 추출한다.

    https://res.cloudinary.com/<cloud>/image/upload/v1712/portfolio/hero/images/abc.jpg
    -> portfolio/hero/images/abc
    """
    path = (url or "").split("?", 1)[0]
    if "/upload/" in path:
        path = path.split("/upload/", 1)[1]
    else:
        path = "/".join(path.rstrip("/").split("/")[-2:])
    segments = [segment for segment in path.split("/") if segment]
    if segments and _VERSION_SEGMENT_RE.match(segments[0]):
        segments = segments[1:]
    if not segments:
        raise MediaError(f"URL에서 public_id를 찾을 수 없습니다: {url}")
    segments[-1] = segments[-1].rsplit(".", 1)[0]
    return "/".join(segments)


class MediaClient:
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        *,
        base_url: Optional[str] = None,
        root_folder: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.base_url = (base_url or settings.CLOUDINARY_API_BASE_URL).rstrip("/")
        self.root_folder = (root_folder if root_folder is not None else settings.MEDIA_ROOT_FOLDER).strip("/")
        self.timeout = float(timeout if timeout is not None else settings.MEDIA_TIMEOUT_SECONDS)

    @classmethod
    def from_settings(cls) -> Optional["MediaClient"]:
        if not settings.media_configured():
            return None
        return cls(
            settings.CLOUDINARY_CLOUD_NAME,
            settings.CLOUDINARY_API_KEY,
            settings.CLOUDINARY_API_SECRET,
        )

    def _endpoint(self, resource_type: str, action: str) -> str:
        return f"{self.base_url}/{self.cloud_name}/{resource_type}/{action}"

    def _sign(self, params: Dict[str, Any]) -> str:
        to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params) if params[key] not in (None, ""))
        return hashlib.sha1(f"{to_sign}{self.api_secret}".encode("utf-8")).hexdigest()

    def _signed_params(self, **params: Any) -> Dict[str, Any]:
        params["timestamp"] = int(time.time())
        params["signature"] = self._sign(params)
        params["api_key"] = self.api_key
        return params

    def target_folder(self, folder: str) -> str:
        folder = (folder or "").strip("/")
        if not self.root_folder:
            return folder
        return f"{self.root_folder}/{folder}" if folder else self.root_folder

    def upload(self, data: bytes | str, folder: str, filename: str = "upload") -> Dict[str, str]:
        """이미지를 업로드하고 {url, public_id}를 돌려준다. data는 바이트 또는 data URI 문자열."""
        params = self._signed_params(folder=self.target_folder(folder))
        files = None
        if isinstance(data, (bytes, bytearray)):
            files = {"file": (filename, bytes(data))}
        else:
            params["file"] = data
        try:
            response = httpx.post(
                self._endpoint("auto", "upload"),
                data=params,
                files=files,
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("[media] upload failed: %s", exc)
            raise MediaError(f"이미지 업로드에 실패했습니다: {exc}") from exc

        url = body.get("secure_url") or body.get("url")
        if not url:
            raise MediaError("업로드 응답에 URL이 없습니다.")
        logger.info("[media] uploaded %s", body.get("public_id"))
        return {"url": url, "public_id": str(body.get("public_id") or "")}

    def delete(self, public_id: str) -> None:
        if not public_id:
            raise MediaError("public_id가 필요합니다.")
        params = self._signed_params(public_id=public_id)
        try:
            response = httpx.post(
                self._endpoint("image", "destroy"),
                data=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("[media] delete failed for %s: %s", public_id, exc)
            raise MediaError(f"이미지 삭제에 실패했습니다: {exc}") from exc

        result = body.get("result")
        if result != "ok":
            raise MediaError(f"이미지 삭제에 실패했습니다: {result}")
        logger.info("[media] deleted %s", public_id)

    def delete_url(self, url: str) -> None:
        self.delete(public_id_from_url(url))
