"""
Demo content for a fresh database.

`seed_database` runs at startup when `SEED_ON_STARTUP` is enabled. It is a
no-op once a profile exists, so admin edits are never overwritten.
"""

import logging

from portfolio_site.database.core.content_store import ContentStore

logger = logging.getLogger(__name__)

DEMO_PROFILE = {
    "name": "Alex Morgan",
    "title": "Principal Engineer & Prototyping Lead",
    "subtitle": "R&D engineer turning research ideas into shipped products across mobile, media and embedded platforms.",
    "bio": "Engineer with over a decade of experience building media pipelines and mobile apps used at global scale.",
    "email": "hello@example.com",
    "linkedin": "https://www.linkedin.com/in/example",
    "github_username": "example",
    "location": "Austin, TX",
    "years_experience": 12,
    "patent_count": 2,
    "devices_deployed": "500M+",
}

DEMO_RECORDS = {
    "skills": [
        {
            "category": "Mobile Development",
            "title": "Mobile Development",
            "icon": "Smartphone",
            "color": "text-primary",
            "items": ["Swift", "Objective-C", "SwiftUI", "AVFoundation", "Kotlin"],
            "specializations": ["AVFoundation", "Swift"],
            "sort_order": 0,
        },
        {
            "category": "Backend & APIs",
            "title": "Backend & APIs",
            "icon": "Server",
            "color": "text-chart-3",
            "items": ["Python", "FastAPI", "PostgreSQL", "REST APIs", "WebSockets"],
            "specializations": [],
            "sort_order": 1,
        },
    ],
    "experiences": [
        {
            "company": "Example Media Co.",
            "role": "Principal Engineer",
            "period": "2019 - Present",
            "location": "Remote",
            "type": "Full-time",
            "achievements": [
                "Led the rewrite of the video capture pipeline shipped to 500M+ devices",
                "Built the prototyping group that delivered three patented features",
            ],
            "sort_order": 0,
        },
        {
            "company": "Startup Labs",
            "role": "Senior iOS Engineer",
            "period": "2014 - 2019",
            "location": "Austin, TX",
            "type": "Full-time",
            "achievements": ["Shipped the first real-time collaboration feature on iOS"],
            "sort_order": 1,
        },
    ],
    "patents": [
        {
            "number": "US 10,000,001",
            "title": "Adaptive Frame Scheduling for Mobile Video Capture",
            "year": "2021",
            "company": "Example Media Co.",
            "status": "Awarded",
            "description": "Schedules capture frames around thermal headroom to keep recording smooth.",
            "category": "Media",
            "sort_order": 0,
        },
        {
            "number": "US 10,000,002",
            "title": "Low-Latency Audio Routing Between Devices",
            "year": "2022",
            "company": "Example Media Co.",
            "status": "Contributor",
            "description": "Routes audio between paired devices with sub-frame latency.",
            "category": "Audio",
            "sort_order": 1,
        },
    ],
    "projects": [
        {
            "title": "Realtime Capture Engine",
            "company": "Example Media Co.",
            "role": "Tech Lead",
            "description": "A capture and encoding engine shared by every camera surface of the flagship app.",
            "impact": "Cut dropped frames by 80% on low-end devices.",
            "icon": "Video",
            "color": "text-primary",
            "technologies": ["Swift", "Metal", "AVFoundation"],
            "featured": True,
            "sort_order": 0,
        },
    ],
    "companies": [
        {"name": "Example Media Co.", "sort_order": 0},
        {"name": "Startup Labs", "sort_order": 1},
    ],
    "chat_prompts": [
        {"prompt": "What kind of projects has Alex worked on?", "sort_order": 0},
        {"prompt": "Tell me about Alex's patents.", "sort_order": 1},
        {"prompt": "What are Alex's strongest technical skills?", "sort_order": 2},
    ],
}


def seed_database(store: ContentStore) -> bool:
    """
    Populate demo content when the store has no profile yet.

    Parameters
    ----------
    store : ContentStore
        Target store.

    Returns
    -------
    bool
        True if demo content was written, False if the store was already seeded.
    """
    if store.has_profile():
        logger.info("Database already seeded")
        return False

    logger.info("Seeding database...")
    store.create_profile(DEMO_PROFILE)
    for resource, records in DEMO_RECORDS.items():
        for fields in records:
            store.create_record(resource, fields)
    logger.info("Seeded demo profile and %d records", sum(len(r) for r in DEMO_RECORDS.values()))
    return True
