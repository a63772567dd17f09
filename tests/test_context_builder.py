from portfolio_site.chat.context_builder import build_context, render_context


def test_single_experience_without_patents(store):
    store.create_profile({"name": "Jane Doe", "title": "Staff Engineer"})
    store.create_record(
        "experiences",
        {"company": "Acme", "role": "Engineer", "period": "2020 - 2024", "achievements": ["Shipped X"]},
    )

    context = build_context(store)

    assert "# About Jane Doe" in context
    assert "Title: Staff Engineer" in context
    assert "## Acme - Engineer" in context
    assert "- Shipped X" in context
    assert "# Patents" not in context
    assert "# Notable Projects" not in context


def test_empty_store_renders_nothing(store):
    assert build_context(store) == ""


def test_sections_follow_fixed_order():
    snapshot = {
        "profile": {"name": "Jane Doe", "title": "Engineer"},
        "experiences": [{"company": "Acme", "role": "Engineer", "period": "2020", "achievements": []}],
        "patents": [{"title": "Widget", "number": "US1", "status": "Awarded", "year": "2021"}],
        "projects": [{"title": "Rocket", "description": "Goes up", "technologies": ["Python", "C"]}],
        "skills": [{"category": "Backend", "items": ["FastAPI"], "specializations": ["APIs"]}],
        "context_docs": [{"label": "Resume", "body": "Long resume text", "source": "resume.pdf"}],
    }

    context = render_context(snapshot)

    headers = [
        "# About Jane Doe",
        "# Work Experience",
        "# Patents",
        "# Notable Projects",
        "# Technical Skills",
        "# Additional Context Documents",
    ]
    positions = [context.index(header) for header in headers]
    assert positions == sorted(positions)
    assert "Technologies: Python, C" in context
    assert "Specializations: APIs" in context
    assert "Source: resume.pdf" in context


def test_optional_profile_fields_are_omitted():
    context = render_context({"profile": {"name": "Jane", "title": "Engineer", "bio": None, "location": ""}})

    assert "Bio:" not in context
    assert "Location:" not in context


def test_records_follow_sort_order(store):
    store.create_record("projects", {"title": "Second", "company": "A", "description": "b", "icon": "Zap", "sort_order": 2})
    store.create_record("projects", {"title": "First", "company": "A", "description": "a", "icon": "Zap", "sort_order": 1})

    context = build_context(store)

    assert context.index("## First") < context.index("## Second")


def test_admin_context_docs_are_included(store):
    store.create_record("chat_context_docs", {"label": "Talks", "body": "Spoke at PyCon about codecs."})

    assert "Spoke at PyCon about codecs." in build_context(store)
