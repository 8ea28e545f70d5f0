"""기본 사이트 콘텐츠와 스키마 진화(누락 섹션 보충) 규칙을 정의합니다."""

import copy

from portfolio.schemas.content import SiteContent

# 문서 구조가 바뀔 때마다 올린다. 늦게 추가된 섹션은 LATE_ADDED_SECTIONS에 등록한다.
CONTENT_SCHEMA_VERSION = 2

CHANGELOG_HISTORY = [
    {
        "date": "2023-04-15",
        "version": "1.1.0",
        "title": "Performance & Reliability Improvements",
        "changes": [
            "Fixed Firebase permissions issues",
            "Added image loading fallbacks for better reliability",
            "Improved error handling throughout the application",
            "Optimized images for faster loading",
            "Added CORS support for better API communication",
        ],
    },
    {
        "date": "2023-04-10",
        "version": "1.0.0",
        "title": "Initial Release",
        "changes": [
            "Launched portfolio website",
            "Added hero section with image carousel",
            "Created about section with skills",
            "Implemented projects showcase",
            "Added contact form functionality",
        ],
    },
]

DEFAULT_GALLERY = {
    "title": "Photo Gallery",
    "description": "A collection of moments and memories captured throughout my journey.",
    "images": [],
}

DEFAULT_CONTENT = {
    "hero": {
        "title": "Shihab Hossain",
        "subtitle": "Electronics Engineer & Web Developer",
        "buttonText": "View My Work",
        "buttonLink": "#projects",
        "images": [],
    },
    "about": {
        "title": "About Me",
        "description": (
            "I'm a passionate Electronics Engineer with a diverse background in embedded systems, "
            "web development, digital marketing, and IT service. I thrive on learning, building, and "
            "leading, with a strong focus on practical innovation and real-world impact.\n\n"
            "Currently, I'm working at Genex (Grameenphone Digital), where I handle live chat and "
            "email-based customer support, gaining hands-on experience in communication, customer "
            "service, and IT operations.\n\n"
            "My journey into web development began with a curiosity to bring ideas to life on the "
            "internet. I started by building full-stack applications with a clear separation between "
            "the frontend and backend for better structure and scalability."
        ),
        "photo": "",
        "skills": ["Electronics Engineering", "Web Development", "IoT", "Digital Marketing"],
    },
    "experiences": [
        {
            "id": "1",
            "company": "Genex (Grameenphone Digital)",
            "position": "Customer Support Specialist",
            "duration": "2023 - Present",
            "description": (
                "Handle live chat and email-based customer support, gaining hands-on experience in "
                "communication, customer service, and IT operations."
            ),
        },
        {
            "id": "2",
            "company": "Mirro Tech",
            "position": "Founder",
            "duration": "2021 - 2023",
            "description": (
                "Led projects involving digital subscription products like Canva and Netflix. "
                "Experience in client handling, digital product delivery, and team coordination."
            ),
        },
    ],
    "gallery": DEFAULT_GALLERY,
    "projects": [
        {
            "id": "1",
            "title": "CSV Search Tool",
            "description": "Developed a CSV search tool with clean UI, efficient search logic, and smooth user interaction.",
            "image": "",
            "tags": ["React", "Node.js", "CSV"],
            "link": "#",
            "github": "#",
        },
        {
            "id": "2",
            "title": "IoT Weather Station",
            "description": "Built an IoT-based weather station using Arduino and ESP8266 with Blynk platform integration.",
            "image": "",
            "tags": ["IoT", "Arduino", "ESP8266", "Blynk"],
            "link": "#",
        },
    ],
    "socials": [
        {"id": "1", "platform": "GitHub", "link": "https://github.com/SHIHABSSS1", "icon": "github"},
        {"id": "2", "platform": "LinkedIn", "link": "#", "icon": "linkedin"},
    ],
    "contact": {
        "email": "shihabhossain596@gmail.com",
        "phone": "01745368299",
        "address": "Bangladesh",
    },
    "changelog": CHANGELOG_HISTORY,
}

# 섹션 이름 -> 처음 도입된 스키마 버전
LATE_ADDED_SECTIONS = {
    "gallery": 2,
}


def get_default() -> SiteContent:
    return SiteContent.model_validate(copy.deepcopy(DEFAULT_CONTENT))


def default_document() -> dict:
    """저장용 camelCase 딕셔너리 형태의 기본 문서."""
    return get_default().model_dump(mode="json", by_alias=True, exclude_none=True)


def backfill_missing_sections(content: SiteContent) -> SiteContent:
    """저장된 문서에 없는 늦게 추가된 섹션을 기본값으로 채운 사본을 돌려준다."""
    defaults = get_default()
    missing = {
        section: getattr(defaults, section)
        for section in LATE_ADDED_SECTIONS
        if getattr(content, section) is None
    }
    if not missing:
        return content
    return content.model_copy(update=missing, deep=True)
