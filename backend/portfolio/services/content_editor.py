"""관리자 편집기 서비스입니다. 불러온 콘텐츠 문서의 작업 사본을 메모리에서 수정하고 명시적으로 저장합니다."""

import logging
import threading
import uuid
from datetime import date
from typing import List, Optional

from pydantic import ValidationError

from portfolio.schemas.content import (
    ChangelogItem,
    Experience,
    Project,
    SiteContent,
    Social,
    icon_for_platform,
)
from portfolio.services.content_store import ContentStore
from portfolio.services.defaults import backfill_missing_sections, get_default
from portfolio.services.media_service import MediaClient, MediaError, MediaNotConfiguredError

logger = logging.getLogger(__name__)

SAVE_SUCCESS_MESSAGE = "Changes saved successfully!"
SAVE_FAILURE_MESSAGE = "Error saving changes. Please try again."

IMAGE_LIST_SECTIONS = {"hero", "gallery"}
IMAGE_FIELD_SECTIONS = {"about", "project"}

# 편집기 섹션별 업로드 폴더. 최상위 경로는 MEDIA_SECTIONS 중 하나다.
UPLOAD_FOLDERS = {
    "hero": "hero/images",
    "gallery": "gallery/images",
    "about": "about/photo",
    "project": "projects/image",
}


class EditorValidationError(ValueError):
    """입력 폼이 불완전해 추가/수정 동작을 막았을 때 발생한다."""


class SaveInProgressError(RuntimeError):
    pass


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _new_id(existing: List[str]) -> str:
    taken = set(existing)
    while True:
        candidate = uuid.uuid4().hex
        if candidate not in taken:
            return candidate


def _check_index(items: list, index: int, label: str) -> None:
    if index < 0 or index >= len(items):
        raise IndexError(f"{label} index {index} out of range")


class ContentEditor:
    def __init__(self, store: ContentStore, media: Optional[MediaClient] = None, content: Optional[SiteContent] = None):
        self.store = store
        self.media = media
        self.content = content if content is not None else backfill_missing_sections(get_default())
        self.message = ""
        self._save_lock = threading.Lock()

    @property
    def is_saving(self) -> bool:
        return self._save_lock.locked()

    def load(self) -> SiteContent:
        self.content = backfill_missing_sections(self.store.load())
        return self.content

    def dismiss_message(self) -> None:
        self.message = ""

    def _reject(self, message: str):
        self.message = message
        raise EditorValidationError(message)

    # 섹션 필드 수정

    def _revalidated(self, current, fields: dict):
        model = type(current)
        names = {}
        for name, info in model.model_fields.items():
            names[name] = name
            if info.alias:
                names[info.alias] = name
        unknown = sorted(key for key in fields if key not in names)
        if unknown:
            self._reject(f"Unknown field(s) for {model.__name__}: {', '.join(unknown)}")
        data = current.model_dump()
        data.update({names[key]: value for key, value in fields.items()})
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            self._reject(f"Invalid {model.__name__} fields: {exc.error_count()} error(s)")

    def _update_section(self, section: str, fields: dict):
        current = getattr(self.content, section)
        updated = self._revalidated(current, fields)
        self.content = self.content.model_copy(update={section: updated})
        return updated

    def update_hero(self, **fields):
        return self._update_section("hero", fields)

    def update_about(self, **fields):
        return self._update_section("about", fields)

    def update_contact(self, **fields):
        return self._update_section("contact", fields)

    def update_gallery(self, **fields):
        return self._update_section("gallery", fields)

    # 스킬

    def add_skill(self, skill: str = "") -> None:
        self.update_about(skills=[*self.content.about.skills, skill])

    def update_skill(self, index: int, value: str) -> None:
        skills = list(self.content.about.skills)
        _check_index(skills, index, "skill")
        skills[index] = value
        self.update_about(skills=skills)

    def remove_skill(self, index: int) -> None:
        skills = list(self.content.about.skills)
        _check_index(skills, index, "skill")
        del skills[index]
        self.update_about(skills=skills)

    # 목록 항목

    def _append(self, field: str, entry) -> None:
        items = list(getattr(self.content, field))
        items.append(entry)
        self.content = self.content.model_copy(update={field: items})

    def _remove_at(self, field: str, index: int):
        items = list(getattr(self.content, field))
        _check_index(items, index, field)
        removed = items.pop(index)
        self.content = self.content.model_copy(update={field: items})
        return removed

    def _update_entry(self, field: str, entry_id: str, fields: dict):
        items = list(getattr(self.content, field))
        for position, item in enumerate(items):
            if item.id == entry_id:
                items[position] = self._revalidated(item, fields)
                self.content = self.content.model_copy(update={field: items})
                return items[position]
        raise KeyError(f"{field} entry '{entry_id}' not found")

    def add_experience(self, company: str, position: str, duration: str = "", description: str = "") -> Experience:
        if not _clean(company) or not _clean(position):
            self._reject("Company and position are required.")
        entry = Experience(
            id=_new_id([item.id for item in self.content.experiences]),
            company=_clean(company),
            position=_clean(position),
            duration=_clean(duration),
            description=description or "",
        )
        self._append("experiences", entry)
        return entry

    def update_experience(self, entry_id: str, **fields) -> Experience:
        return self._update_entry("experiences", entry_id, fields)

    def remove_experience(self, index: int) -> Experience:
        return self._remove_at("experiences", index)

    def add_project(
        self,
        title: str,
        description: str,
        image: str = "",
        tags: Optional[List[str]] = None,
        link: str = "",
        github: Optional[str] = None,
    ) -> Project:
        if not _clean(title) or not _clean(description):
            self._reject("Project title and description are required.")
        entry = Project(
            id=_new_id([item.id for item in self.content.projects]),
            title=_clean(title),
            description=description,
            image=image or "",
            tags=[tag.strip() for tag in (tags or []) if tag and tag.strip()],
            link=_clean(link),
            github=_clean(github) or None,
        )
        self._append("projects", entry)
        return entry

    def update_project(self, entry_id: str, **fields) -> Project:
        return self._update_entry("projects", entry_id, fields)

    def remove_project(self, index: int) -> Project:
        return self._remove_at("projects", index)

    def add_social(self, platform: str, link: str) -> Social:
        if not _clean(platform) or not _clean(link):
            self._reject("Platform and link are required.")
        entry = Social(
            id=_new_id([item.id for item in self.content.socials]),
            platform=_clean(platform),
            link=_clean(link),
            icon=icon_for_platform(platform),
        )
        self._append("socials", entry)
        return entry

    def update_social(self, entry_id: str, **fields) -> Social:
        if "platform" in fields:
            fields["icon"] = icon_for_platform(fields["platform"])
        return self._update_entry("socials", entry_id, fields)

    def remove_social(self, index: int) -> Social:
        return self._remove_at("socials", index)

    def add_changelog_entry(
        self,
        version: str,
        title: str,
        changes: List[str],
        entry_date: Optional[str] = None,
    ) -> ChangelogItem:
        cleaned = [change.strip() for change in changes if change and change.strip()]
        if not _clean(version) or not _clean(title) or not cleaned:
            self._reject("Version, title and at least one change are required.")
        entry = ChangelogItem(
            date=entry_date or date.today().isoformat(),
            version=_clean(version),
            title=_clean(title),
            changes=cleaned,
        )
        # 최신 항목이 맨 앞에 온다.
        self.content = self.content.model_copy(update={"changelog": [entry, *self.content.changelog]})
        return entry

    def remove_changelog_entry(self, index: int) -> ChangelogItem:
        return self._remove_at("changelog", index)

    # 이미지 참조

    def add_image(self, section: str, url: str, project_id: Optional[str] = None) -> None:
        if section in IMAGE_LIST_SECTIONS:
            current = getattr(self.content, section)
            self._update_section(section, {"images": [*current.images, url]})
        elif section == "about":
            self.update_about(photo=url)
        elif section == "project":
            if not project_id:
                raise ValueError("project_id is required for project images")
            self.update_project(project_id, image=url)
        else:
            raise ValueError(f"unsupported image section: {section}")

    def upload_image(
        self,
        section: str,
        data: bytes | str,
        filename: str = "upload",
        project_id: Optional[str] = None,
    ) -> str:
        if section not in IMAGE_LIST_SECTIONS | IMAGE_FIELD_SECTIONS:
            raise ValueError(f"unsupported image section: {section}")
        if section == "project" and not project_id:
            raise ValueError("project_id is required for project images")
        if self.media is None:
            raise MediaNotConfiguredError("미디어 CDN이 설정되지 않았습니다.")
        url = self.media.upload(data, folder=UPLOAD_FOLDERS[section], filename=filename)["url"]
        self.add_image(section, url, project_id=project_id)
        return url

    def remove_image(self, section: str, index: int = 0, delete_remote: bool = True) -> str:
        if section in IMAGE_LIST_SECTIONS:
            images = list(getattr(self.content, section).images)
            _check_index(images, index, f"{section} image")
            url = images.pop(index)
            self._update_section(section, {"images": images})
        elif section == "about":
            url = self.content.about.photo
            self.update_about(photo="")
        else:
            raise ValueError(f"unsupported image section: {section}")

        if delete_remote and url and self.media is not None:
            try:
                self.media.delete_url(url)
            except MediaError as exc:
                logger.warning("[editor] remote image delete failed, reference removed anyway: %s", exc)
        return url

    # 저장

    def save(self, updated_by: Optional[str] = None) -> None:
        if not self._save_lock.acquire(blocking=False):
            raise SaveInProgressError("A save is already in progress.")
        try:
            self.store.save(self.content, updated_by=updated_by)
            self.message = SAVE_SUCCESS_MESSAGE
        except Exception:
            self.message = SAVE_FAILURE_MESSAGE
            raise
        finally:
            self._save_lock.release()
