"""
Grounding context for the chat assistant.

`build_context` flattens the current content store into one markdown-like
text document. Sections appear in a fixed order and are omitted entirely when
they have no records:

1. ``# About <name>``              (profile)
2. ``# Work Experience``
3. ``# Patents``
4. ``# Notable Projects``
5. ``# Technical Skills``
6. ``# Additional Context Documents``

The document is rebuilt on every chat turn; a store failure propagates as
`StoreReadError` instead of producing a partial document.
"""

from typing import List, Optional

from portfolio_site.database.core.content_store import ContentStore


def _profile_section(profile: Optional[dict]) -> List[str]:
    if not profile:
        return []
    lines = [f"# About {profile.get('name') or 'Me'}", f"Title: {profile.get('title') or 'N/A'}"]
    optional = [
        ("Subtitle", "subtitle"),
        ("Bio", "bio"),
        ("Location", "location"),
        ("Years of Experience", "years_experience"),
        ("Number of Patents", "patent_count"),
        ("Devices Deployed", "devices_deployed"),
    ]
    for label, key in optional:
        if profile.get(key):
            lines.append(f"{label}: {profile[key]}")
    lines.append("")
    return lines


def _experience_section(experiences: List[dict]) -> List[str]:
    if not experiences:
        return []
    lines = ["# Work Experience"]
    for exp in experiences:
        lines.append(f"## {exp['company']} - {exp['role']}")
        lines.append(f"Period: {exp['period']}")
        if exp.get("location"):
            lines.append(f"Location: {exp['location']}")
        if exp.get("type"):
            lines.append(f"Type: {exp['type']}")
        if exp.get("achievements"):
            lines.append("Achievements:")
            lines.extend(f"- {achievement}" for achievement in exp["achievements"])
        lines.append("")
    return lines


def _patent_section(patents: List[dict]) -> List[str]:
    if not patents:
        return []
    lines = ["# Patents"]
    for patent in patents:
        lines.append(f"## {patent['title']}")
        lines.append(f"Number: {patent['number']}")
        lines.append(f"Status: {patent['status']}")
        lines.append(f"Year: {patent['year']}")
        if patent.get("description"):
            lines.append(f"Description: {patent['description']}")
        if patent.get("category"):
            lines.append(f"Category: {patent['category']}")
        lines.append("")
    return lines


def _project_section(projects: List[dict]) -> List[str]:
    if not projects:
        return []
    lines = ["# Notable Projects"]
    for project in projects:
        lines.append(f"## {project['title']}")
        lines.append(project["description"])
        if project.get("impact"):
            lines.append(f"Impact: {project['impact']}")
        if project.get("technologies"):
            lines.append(f"Technologies: {', '.join(project['technologies'])}")
        lines.append("")
    return lines


def _skill_section(skills: List[dict]) -> List[str]:
    if not skills:
        return []
    lines = ["# Technical Skills"]
    for skill in skills:
        lines.append(f"## {skill['category']}")
        if skill.get("items"):
            lines.append(", ".join(skill["items"]))
        if skill.get("specializations"):
            lines.append(f"Specializations: {', '.join(skill['specializations'])}")
        lines.append("")
    return lines


def _context_doc_section(docs: List[dict]) -> List[str]:
    if not docs:
        return []
    lines = ["# Additional Context Documents"]
    for doc in docs:
        lines.append(f"## {doc['label']}")
        lines.append(doc["body"])
        if doc.get("source"):
            lines.append(f"Source: {doc['source']}")
        lines.append("")
    return lines


def render_context(snapshot: dict) -> str:
    """
    Render a store snapshot (see `ContentStore.read_context_snapshot`).

    Pure function: the same snapshot always yields the same text.
    """
    parts: List[str] = []
    parts += _profile_section(snapshot.get("profile"))
    parts += _experience_section(snapshot.get("experiences", []))
    parts += _patent_section(snapshot.get("patents", []))
    parts += _project_section(snapshot.get("projects", []))
    parts += _skill_section(snapshot.get("skills", []))
    parts += _context_doc_section(snapshot.get("context_docs", []))
    return "\n".join(parts)


def build_context(store: ContentStore) -> str:
    """
    Read the whole content store and render the grounding document.

    Raises
    ------
    StoreReadError
        If the store cannot be read.
    """
    return render_context(store.read_context_snapshot())
