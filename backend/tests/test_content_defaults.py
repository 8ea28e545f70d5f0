"""기본 콘텐츠와 누락 섹션 보충 동작을 검증합니다."""

from portfolio.schemas.content import SiteContent, icon_for_platform
from portfolio.services.defaults import (
    CHANGELOG_HISTORY,
    backfill_missing_sections,
    default_document,
    get_default,
)


def test_default_content_is_fully_populated():
    content = get_default()
    assert content.hero.title == "Shihab Hossain"
    assert content.hero.images == []
    assert content.about.photo == ""
    assert content.about.skills
    assert len(content.experiences) == 2
    assert len(content.projects) == 2
    assert len(content.socials) == 2
    assert content.gallery is not None
    assert content.gallery.images == []
    assert len(content.changelog) == 2
    assert content.changelog[0].version == "1.1.0"


def test_default_content_returns_fresh_copies():
    first = get_default()
    first.hero.images.append("https://example.com/a.png")
    first.changelog.pop()

    second = get_default()
    assert second.hero.images == []
    assert len(second.changelog) == 2
    assert len(CHANGELOG_HISTORY) == 2


def test_default_document_uses_camel_case_keys():
    doc = default_document()
    assert doc["hero"]["buttonText"] == "View My Work"
    assert "button_text" not in doc["hero"]
    # 선택 항목이 비어 있으면 문서에 키를 남기지 않는다.
    assert "github" not in doc["projects"][1]
    assert "showPhone" not in doc["contact"]


def test_backfill_adds_missing_gallery():
    doc = default_document()
    doc.pop("gallery")
    content = SiteContent.model_validate(doc)
    assert content.gallery is None

    filled = backfill_missing_sections(content)
    assert filled.gallery is not None
    assert filled.gallery.title == "Photo Gallery"
    assert content.gallery is None


def test_backfill_keeps_existing_gallery():
    doc = default_document()
    doc["gallery"] = {"title": "Trips", "description": "", "images": ["https://example.com/1.jpg"]}
    content = SiteContent.model_validate(doc)
    assert backfill_missing_sections(content).gallery.title == "Trips"


def test_contact_visibility_defaults():
    contact = get_default().contact
    assert contact.email_visible()
    assert contact.address_visible()
    assert not contact.phone_visible()

    contact = contact.model_copy(update={"show_email": False, "show_phone": True})
    assert not contact.email_visible()
    assert contact.phone_visible()


def test_social_icon_derived_from_platform():
    assert icon_for_platform("GitHub") == "github"
    assert icon_for_platform(" LinkedIn ") == "linkedin"
    assert icon_for_platform("Mastodon") == "globe"

    doc = default_document()
    doc["socials"] = [{"id": "9", "platform": "Instagram", "link": "https://instagram.com/x"}]
    content = SiteContent.model_validate(doc)
    assert content.socials[0].icon == "instagram"
