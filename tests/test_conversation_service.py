import asyncio
import uuid

import pytest

from portfolio_site.chat.conversation_service import FALLBACK_REPLY, ConversationService, build_system_prompt
from portfolio_site.errors import CompletionFailed, ConversationNotFound, NothingToRetry, StoreReadError


class TestSendMessage:
    """One chat turn: persist, ground, complete, persist."""

    async def test_round_trip(self, service, store, completion):
        store.create_profile({"name": "Jane Doe", "title": "Engineer"})
        completion.replies = ["Jane has two patents."]
        conversation = await service.start_conversation()

        result = await service.send_message(conversation["id"], "What patents does Jane hold?")

        assert result["user_message"]["role"] == "user"
        assert result["user_message"]["content"] == "What patents does Jane hold?"
        assert result["assistant_message"]["role"] == "assistant"
        assert result["assistant_message"]["content"] == "Jane has two patents."
        history = await service.list_messages(conversation["id"])
        assert [m["role"] for m in history] == ["user", "assistant"]

    async def test_request_has_system_prompt_then_history(self, service, store, completion, settings):
        store.create_profile({"name": "Jane Doe", "title": "Engineer"})
        conversation = await service.start_conversation()

        await service.send_message(conversation["id"], "Hi")

        call = completion.calls[0]
        assert call["model"] == settings.OPENAI_MODEL
        assert call["temperature"] == 0.7
        assert call["max_tokens"] == 2000
        system, user = call["messages"]
        assert system["role"] == "system"
        assert "# About Jane Doe" in system["content"]
        assert "Jane Doe's background" in system["content"]
        assert user == {"role": "user", "content": "Hi"}

    async def test_user_message_is_persisted_before_completion(self, service, store, completion):
        conversation = await service.start_conversation()
        seen = []

        async def inspect_store(messages):
            seen.extend(await asyncio.to_thread(store.list_messages, conversation["id"]))

        completion.on_call = inspect_store

        await service.send_message(conversation["id"], "Hello?")

        assert [(m["role"], m["content"]) for m in seen] == [("user", "Hello?")]

    async def test_failed_completion_keeps_only_user_message(self, service, completion):
        conversation = await service.start_conversation()
        completion.error = CompletionFailed("upstream timeout")

        with pytest.raises(CompletionFailed):
            await service.send_message(conversation["id"], "Anyone there?")

        history = await service.list_messages(conversation["id"])
        assert [(m["role"], m["content"]) for m in history] == [("user", "Anyone there?")]

    @pytest.mark.parametrize("reply", [None, ""])
    async def test_empty_completion_stores_fallback(self, service, completion, reply):
        conversation = await service.start_conversation()
        completion.replies = [reply]

        result = await service.send_message(conversation["id"], "Hi")

        assert result["assistant_message"]["content"] == FALLBACK_REPLY

    async def test_unknown_conversation_persists_nothing(self, service, store, completion):
        missing = uuid.uuid4()

        with pytest.raises(ConversationNotFound):
            await service.send_message(missing, "Hi")

        assert store.list_messages(missing) == []
        assert completion.calls == []

    async def test_unreadable_context_propagates_without_completion(self, service, store, completion, monkeypatch):
        conversation = await service.start_conversation()

        def unreadable():
            raise StoreReadError("snapshot read failed")

        monkeypatch.setattr(store, "read_context_snapshot", unreadable)

        with pytest.raises(StoreReadError):
            await service.send_message(conversation["id"], "Hi")

        assert completion.calls == []
        assert [(m["role"], m["content"]) for m in store.list_messages(conversation["id"])] == [("user", "Hi")]

    async def test_failing_context_builder_propagates(self, store, completion, settings):
        def failing_builder(_store):
            raise StoreReadError("context unavailable")

        service = ConversationService(store, completion, model=settings.OPENAI_MODEL, context_builder=failing_builder)
        conversation = await service.start_conversation()

        with pytest.raises(StoreReadError):
            await service.send_message(conversation["id"], "Hi")

        assert completion.calls == []

    async def test_full_history_is_replayed_in_order(self, service, completion):
        conversation = await service.start_conversation()
        completion.replies = ["first answer", "second answer"]

        await service.send_message(conversation["id"], "first question")
        await service.send_message(conversation["id"], "second question")

        replayed = [(m["role"], m["content"]) for m in completion.calls[1]["messages"][1:]]
        assert replayed == [
            ("user", "first question"),
            ("assistant", "first answer"),
            ("user", "second question"),
        ]

    async def test_concurrent_turns_alternate(self, service, completion):
        conversation = await service.start_conversation()
        completion.delay = 0.05

        await asyncio.gather(
            service.send_message(conversation["id"], "one"),
            service.send_message(conversation["id"], "two"),
        )

        history = await service.list_messages(conversation["id"])
        assert [m["role"] for m in history] == ["user", "assistant", "user", "assistant"]
        assert [m["position"] for m in history] == [0, 1, 2, 3]


class TestRetryLastTurn:
    """Answering a dangling user message without re-appending it."""

    async def test_retry_answers_dangling_message(self, service, completion):
        conversation = await service.start_conversation()
        completion.error = CompletionFailed("rate limited")
        with pytest.raises(CompletionFailed):
            await service.send_message(conversation["id"], "Tell me about Acme")

        completion.error = None
        completion.replies = ["Acme is where Jane shipped X."]
        result = await service.retry_last_turn(conversation["id"])

        assert result["assistant_message"]["content"] == "Acme is where Jane shipped X."
        history = await service.list_messages(conversation["id"])
        assert [(m["role"], m["content"]) for m in history] == [
            ("user", "Tell me about Acme"),
            ("assistant", "Acme is where Jane shipped X."),
        ]
        retried_request = completion.calls[-1]["messages"]
        assert [m["role"] for m in retried_request] == ["system", "user"]

    async def test_nothing_to_retry_when_answered(self, service):
        conversation = await service.start_conversation()
        await service.send_message(conversation["id"], "Hi")

        with pytest.raises(NothingToRetry):
            await service.retry_last_turn(conversation["id"])

    async def test_nothing_to_retry_when_empty(self, service):
        conversation = await service.start_conversation()

        with pytest.raises(NothingToRetry):
            await service.retry_last_turn(conversation["id"])

    async def test_retry_unknown_conversation(self, service):
        with pytest.raises(ConversationNotFound):
            await service.retry_last_turn(uuid.uuid4())


def test_system_prompt_falls_back_without_profile():
    prompt = build_system_prompt("", None)

    assert "learn about the site owner" in prompt
    assert "politely let the user know" in prompt
