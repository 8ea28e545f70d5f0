"""공개 페이지용 읽기 모델을 구성합니다."""

from portfolio.schemas.content import SiteContent, SiteView, icon_for_platform
from portfolio.services.defaults import backfill_missing_sections

PLACEHOLDER_GALLERY_IMAGES = [
    "/images/hero-1.jpg",
    "/images/hero-2.jpg",
    "/images/hero-3.jpg",
]


def visible_contact(content: SiteContent) -> dict:
    contact = content.contact
    fields = {}
    if contact.email_visible() and contact.email:
        fields["email"] = contact.email
    if contact.phone_visible() and contact.phone:
        fields["phone"] = contact.phone
    if contact.address_visible() and contact.address:
        fields["address"] = contact.address
    return fields


def build_site_view(content: SiteContent, changelog_limit: int | None = None) -> SiteView:
    content = backfill_missing_sections(content)
    socials = [
        social.model_copy(update={"icon": icon_for_platform(social.platform)})
        for social in content.socials
    ]
    changelog = content.changelog if changelog_limit is None else content.changelog[: max(changelog_limit, 0)]
    return SiteView(
        hero=content.hero,
        about=content.about,
        experiences=content.experiences,
        projects=content.projects,
        socials=socials,
        contact=visible_contact(content),
        gallery=content.gallery,
        gallery_images=content.gallery.images or list(PLACEHOLDER_GALLERY_IMAGES),
        changelog=changelog,
        changelog_total=len(content.changelog),
    )
