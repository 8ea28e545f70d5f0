"""사이트 콘텐츠 문서 요청/응답 계약을 위한 Pydantic 스키마입니다.

저장소와 API 모두 camelCase 키(`buttonText`, `showEmail` 등)를 사용하고,
파이썬 코드에서는 snake_case 속성으로 접근합니다.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

SOCIAL_ICON_KEYS = {"github", "linkedin", "twitter", "instagram", "facebook"}
DEFAULT_SOCIAL_ICON = "globe"


def icon_for_platform(platform: str | None) -> str:
    key = (platform or "").strip().lower()
    if key in SOCIAL_ICON_KEYS:
        return key
    return DEFAULT_SOCIAL_ICON


class ContentModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Hero(ContentModel):
    title: str
    subtitle: str
    button_text: str
    button_link: str
    images: List[str] = []


class About(ContentModel):
    title: str
    description: str
    photo: str = ""
    skills: List[str] = []


class Experience(ContentModel):
    id: str
    company: str
    position: str
    duration: str = ""
    description: str = ""


class Project(ContentModel):
    id: str
    title: str
    description: str
    image: str = ""
    tags: List[str] = []
    link: str = ""
    github: Optional[str] = None


class Social(ContentModel):
    id: str
    platform: str
    link: str
    icon: str = ""

    @model_validator(mode="after")
    def _derive_icon(self):
        if not self.icon:
            self.icon = icon_for_platform(self.platform)
        return self


class Contact(ContentModel):
    email: str = ""
    phone: str = ""
    address: str = ""
    show_email: Optional[bool] = None
    show_phone: Optional[bool] = None
    show_address: Optional[bool] = None

    def email_visible(self) -> bool:
        return self.show_email is not False

    def phone_visible(self) -> bool:
        return self.show_phone is True

    def address_visible(self) -> bool:
        return self.show_address is not False


class Gallery(ContentModel):
    title: str
    description: str
    images: List[str] = []


class ChangelogItem(ContentModel):
    date: str
    version: str
    title: str
    changes: List[str] = []


class SiteContent(ContentModel):
    hero: Hero
    about: About
    experiences: List[Experience] = []
    projects: List[Project] = []
    socials: List[Social] = []
    contact: Contact
    # 초기 배포 이후 추가된 섹션이라 저장된 문서에는 없을 수 있다.
    gallery: Optional[Gallery] = None
    changelog: List[ChangelogItem] = []


class SiteContentUpdate(ContentModel):
    hero: Optional[Hero] = None
    about: Optional[About] = None
    experiences: Optional[List[Experience]] = None
    projects: Optional[List[Project]] = None
    socials: Optional[List[Social]] = None
    contact: Optional[Contact] = None
    gallery: Optional[Gallery] = None
    changelog: Optional[List[ChangelogItem]] = None


class SiteView(ContentModel):
    """공개 페이지가 그대로 렌더링하는 읽기 전용 투영."""

    hero: Hero
    about: About
    experiences: List[Experience]
    projects: List[Project]
    socials: List[Social]
    contact: dict
    gallery: Gallery
    gallery_images: List[str]
    changelog: List[ChangelogItem]
    changelog_total: int
