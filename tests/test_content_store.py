import uuid

import pytest

from portfolio_site.database.config.connection_engine import Database
from portfolio_site.database.core.content_store import ContentStore, slugify
from portfolio_site.database.core.seed import DEMO_PROFILE, seed_database
from portfolio_site.errors import ConversationNotFound, RecordNotFound, StoreReadError


def test_records_are_listed_by_sort_order(store):
    store.create_record("companies", {"name": "Beta", "sort_order": 2})
    store.create_record("companies", {"name": "Alpha", "sort_order": 1})

    assert [c["name"] for c in store.list_records("companies")] == ["Alpha", "Beta"]


def test_update_and_delete_unknown_record(store):
    missing = uuid.uuid4()

    with pytest.raises(RecordNotFound):
        store.update_record("skills", missing, {"title": "x"})
    with pytest.raises(RecordNotFound):
        store.delete_record("skills", missing)


def test_unknown_resource_is_rejected(store):
    with pytest.raises(ValueError):
        store.list_records("secrets")


def test_messages_get_sequential_positions(store):
    conversation = store.create_conversation()

    store.add_message(conversation["id"], "user", "q1")
    store.add_message(conversation["id"], "assistant", "a1")
    store.add_message(conversation["id"], "user", "q2")

    messages = store.list_messages(conversation["id"])
    assert [(m["position"], m["content"]) for m in messages] == [(0, "q1"), (1, "a1"), (2, "q2")]
    assert store.get_last_message(conversation["id"])["content"] == "q2"


def test_message_for_unknown_conversation(store):
    with pytest.raises(ConversationNotFound):
        store.add_message(uuid.uuid4(), "user", "hello")


def test_unreachable_tables_raise_store_read_error():
    database = Database("sqlite://")  # schema never created
    try:
        with pytest.raises(StoreReadError):
            ContentStore(database).list_records("skills")
    finally:
        database.dispose()


def test_context_snapshot_shape(store):
    store.create_profile({"name": "Jane", "title": "Engineer"})

    snapshot = store.read_context_snapshot()

    assert snapshot["profile"]["name"] == "Jane"
    assert set(snapshot) == {"profile", "experiences", "patents", "projects", "skills", "context_docs"}


def test_seed_runs_once(store):
    assert seed_database(store) is True
    assert store.get_profile()["name"] == DEMO_PROFILE["name"]
    skills = len(store.list_records("skills"))

    assert seed_database(store) is False
    assert len(store.list_records("skills")) == skills


@pytest.mark.parametrize(
    "title, slug",
    [("Hello, World!", "hello-world"), ("Ünïcode Títle", "unicode-title"), ("!!!", "post")],
)
def test_slugify(title, slug):
    assert slugify(title) == slug


def test_update_post_with_empty_slug_reslugs_from_title(store):
    post = store.create_post({"title": "Release Notes", "content": "x", "slug": "custom"})

    updated = store.update_post(post["id"], {"slug": ""})

    assert updated["slug"] == "release-notes"
