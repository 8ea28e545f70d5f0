"""미디어 CDN 클라이언트와 업로드/삭제 API를 검증합니다."""

import base64

import httpx
import pytest

from portfolio.config import settings
from portfolio.services.media_service import MediaClient, MediaError, public_id_from_url
from tests.conftest import auth_headers


class _FakeResponse:
    def __init__(self, body, status_code=200):
        self._body = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            request = httpx.Request("POST", "https://api.cloudinary.com")
            raise httpx.HTTPStatusError("error", request=request, response=httpx.Response(self.status_code, request=request))

    def json(self):
        return self._body


def _client():
    return MediaClient("demo", "key", "secret", base_url="https://api.cloudinary.com/v1_1", root_folder="portfolio", timeout=5)


def test_public_id_from_url():
    url = "https://res.cloudinary.com/demo/image/upload/v1712/portfolio/hero/images/abc.jpg"
    assert public_id_from_url(url) == "portfolio/hero/images/abc"
    assert public_id_from_url("https://res.cloudinary.com/demo/image/upload/portfolio/x.png?a=1") == "portfolio/x"
    assert public_id_from_url("https://cdn.example.com/folder/file.webp") == "folder/file"


def test_public_id_from_empty_url_fails():
    with pytest.raises(MediaError):
        public_id_from_url("https://res.cloudinary.com/demo/image/upload/")


def test_upload_sends_signed_request(monkeypatch):
    captured = {}

    def _fake_post(url, data=None, files=None, timeout=None):  # noqa: ANN001
        captured.update(url=url, data=data, files=files, timeout=timeout)
        return _FakeResponse({"secure_url": "https://res.cloudinary.com/demo/a.png", "public_id": "portfolio/hero/images/a"})

    monkeypatch.setattr("httpx.post", _fake_post)

    result = _client().upload(b"\x89PNG", folder="hero/images", filename="a.png")

    assert result == {"url": "https://res.cloudinary.com/demo/a.png", "public_id": "portfolio/hero/images/a"}
    assert captured["url"] == "https://api.cloudinary.com/v1_1/demo/auto/upload"
    assert captured["data"]["folder"] == "portfolio/hero/images"
    assert captured["data"]["api_key"] == "key"
    assert len(captured["data"]["signature"]) == 40
    assert captured["files"]["file"][0] == "a.png"
    assert captured["timeout"] == 5


def test_upload_http_error_raises_media_error(monkeypatch):
    monkeypatch.setattr("httpx.post", lambda *args, **kwargs: _FakeResponse({}, status_code=500))
    with pytest.raises(MediaError):
        _client().upload("data:image/png;base64,AAAA", folder="gallery/images")


def test_delete_requires_ok_result(monkeypatch):
    monkeypatch.setattr("httpx.post", lambda *args, **kwargs: _FakeResponse({"result": "not found"}))
    with pytest.raises(MediaError):
        _client().delete("portfolio/hero/images/a")

    monkeypatch.setattr("httpx.post", lambda *args, **kwargs: _FakeResponse({"result": "ok"}))
    _client().delete("portfolio/hero/images/a")


def test_from_settings_requires_credentials(monkeypatch):
    monkeypatch.setattr(settings, "CLOUDINARY_CLOUD_NAME", "")
    assert MediaClient.from_settings() is None


def test_upload_image_requires_auth(client, media):
    files = {"file": ("test.png", b"\x89PNG\r\n\x1a\n", "image/png")}
    resp = client.post("/api/media/images", files=files)
    assert resp.status_code in (401, 403)


def test_upload_image_success(client, media):
    headers = auth_headers(client)
    files = {"file": ("test.png", b"\x89PNG\r\n\x1a\n", "image/png")}
    resp = client.post("/api/media/images", headers=headers, files=files, data={"folder": "gallery/images"})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["url"].startswith("https://res.cloudinary.com/")
    assert data["public_id"] == "portfolio/gallery/images/asset1"
    assert data["filename"] == "test.png"
    assert data["size"] == 8


def test_upload_image_rejects_non_image_extension(client, media):
    headers = auth_headers(client)
    files = {"file": ("test.pdf", b"%PDF-1.4", "application/pdf")}
    resp = client.post("/api/media/images", headers=headers, files=files)
    assert resp.status_code == 400
    assert media.uploads == []


def test_upload_image_rejects_invalid_folder(client, media):
    headers = auth_headers(client)
    files = {"file": ("test.png", b"\x89PNG\r\n\x1a\n", "image/png")}
    resp = client.post("/api/media/images", headers=headers, files=files, data={"folder": "../secrets"})
    assert resp.status_code == 400


def test_upload_base64_image(client, media):
    headers = auth_headers(client)
    image = "data:image/png;base64," + base64.b64encode(b"\x89PNG\r\n\x1a\n").decode()
    resp = client.post("/api/media/upload", headers=headers, json={"image": image, "folder": "about/photo"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["public_id"] == "portfolio/about/photo/asset1"


def test_upload_base64_rejects_garbage(client, media):
    headers = auth_headers(client)
    resp = client.post("/api/media/upload", headers=headers, json={"image": "not base64!!", "folder": "hero"})
    assert resp.status_code == 400


def test_delete_image_by_url(client, media):
    headers = auth_headers(client)
    url = "https://res.cloudinary.com/demo/image/upload/v3/portfolio/hero/images/abc.png"
    resp = client.post("/api/media/delete", headers=headers, json={"url": url})
    assert resp.status_code == 200
    assert media.deleted == ["portfolio/hero/images/abc"]


def test_delete_image_without_id(client, media):
    headers = auth_headers(client)
    resp = client.post("/api/media/delete", headers=headers, json={})
    assert resp.status_code == 400


def test_media_not_configured(client):
    headers = auth_headers(client)
    resp = client.post("/api/media/delete", headers=headers, json={"public_id": "x"})
    assert resp.status_code == 503
