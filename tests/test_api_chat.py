import uuid

import httpx

from portfolio_site.chat.conversation_service import FALLBACK_REPLY
from portfolio_site.chat.voice_gateway import ElevenLabsVoiceGateway
from portfolio_site.errors import CompletionFailed


def start(client):
    response = client.post("/api/chat/conversations")
    assert response.status_code == 201
    return response.json()["id"]


class TestConversations:
    def test_create_and_fetch(self, client):
        conversation_id = start(client)

        response = client.get(f"/api/chat/conversations/{conversation_id}")

        assert response.status_code == 200
        assert response.json()["id"] == conversation_id
        assert client.get(f"/api/chat/conversations/{conversation_id}/messages").json() == []

    def test_unknown_conversation_is_404(self, client):
        missing = uuid.uuid4()

        assert client.get(f"/api/chat/conversations/{missing}").status_code == 404
        response = client.post(f"/api/chat/conversations/{missing}/messages", json={"content": "Hi"})
        assert response.status_code == 404
        assert response.json() == {"detail": "Conversation not found"}

    def test_malformed_id_is_422(self, client):
        assert client.get("/api/chat/conversations/not-a-uuid").status_code == 422


class TestMessages:
    def test_send_message_returns_both_messages(self, client, completion):
        completion.replies = ["Happy to help."]
        conversation_id = start(client)

        response = client.post(f"/api/chat/conversations/{conversation_id}/messages", json={"content": "Hi"})

        assert response.status_code == 200
        body = response.json()
        assert body["user_message"]["content"] == "Hi"
        assert body["assistant_message"]["content"] == "Happy to help."
        history = client.get(f"/api/chat/conversations/{conversation_id}/messages").json()
        assert [m["role"] for m in history] == ["user", "assistant"]

    def test_empty_content_is_rejected(self, client):
        conversation_id = start(client)

        for content in ["", "   "]:
            response = client.post(f"/api/chat/conversations/{conversation_id}/messages", json={"content": content})
            assert response.status_code == 422

    def test_content_is_stored_verbatim(self, client, completion):
        conversation_id = start(client)

        response = client.post(f"/api/chat/conversations/{conversation_id}/messages", json={"content": "  Hi\n"})

        assert response.json()["user_message"]["content"] == "  Hi\n"
        assert completion.calls[0]["messages"][-1] == {"role": "user", "content": "  Hi\n"}

    def test_completion_failure_is_502_and_keeps_user_message(self, client, completion):
        completion.error = CompletionFailed("openai said: invalid key sk-live-123")
        conversation_id = start(client)

        response = client.post(f"/api/chat/conversations/{conversation_id}/messages", json={"content": "Hi"})

        assert response.status_code == 502
        assert response.json() == {"detail": "Couldn't get a response, try again"}
        history = client.get(f"/api/chat/conversations/{conversation_id}/messages").json()
        assert [m["role"] for m in history] == ["user"]

    def test_retry_after_failure(self, client, completion):
        completion.error = CompletionFailed("timeout")
        conversation_id = start(client)
        client.post(f"/api/chat/conversations/{conversation_id}/messages", json={"content": "Hi"})

        completion.error = None
        completion.replies = [""]
        response = client.post(f"/api/chat/conversations/{conversation_id}/retry")

        assert response.status_code == 200
        assert response.json()["assistant_message"]["content"] == FALLBACK_REPLY
        second = client.post(f"/api/chat/conversations/{conversation_id}/retry")
        assert second.status_code == 409


class TestPromptsAndVoice:
    def test_suggested_prompts_are_strings_in_order(self, client, store):
        store.create_record("chat_prompts", {"prompt": "What patents?", "sort_order": 2})
        store.create_record("chat_prompts", {"prompt": "Where have you worked?", "sort_order": 1})

        response = client.get("/api/chat/prompts")

        assert response.json() == ["Where have you worked?", "What patents?"]

    def test_voice_unconfigured(self, client):
        assert client.get("/api/chat/voice-status").json() == {"available": False}

        response = client.post("/api/chat/text-to-speech", json={"text": "Hello"})

        assert response.status_code == 503
        assert response.json() == {"detail": "Voice synthesis is not configured"}

    def test_text_to_speech_returns_audio(self, client, context):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"mpeg-bytes"))
        context.voice = ElevenLabsVoiceGateway(api_key="xi-key", voice_id="v", transport=transport)

        response = client.post("/api/chat/text-to-speech", json={"text": "Hello"})

        assert response.status_code == 200
        assert response.headers["content-type"] == "audio/mpeg"
        assert response.content == b"mpeg-bytes"
        assert client.get("/api/chat/voice-status").json() == {"available": True}

    def test_upstream_voice_error_is_502_without_body(self, client, context):
        transport = httpx.MockTransport(lambda request: httpx.Response(429, content=b"quota exceeded for acct 42"))
        context.voice = ElevenLabsVoiceGateway(api_key="xi-key", voice_id="v", transport=transport)

        response = client.post("/api/chat/text-to-speech", json={"text": "Hello"})

        assert response.status_code == 502
        assert "quota" not in response.text
