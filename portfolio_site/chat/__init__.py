"""
The `chat` package implements the "ask about my work" assistant.

Contents
--------
- context_builder
    `build_context(store)`: flattens profile, experience, patents, projects,
    skills and admin context documents into one grounding document.
- conversation_service
    `ConversationService`: persists turns and calls the completion gateway
    with the grounded system prompt; `retry_last_turn` answers a dangling
    user message.
- completion_gateway
    `OpenAICompletionGateway`: one chat-completion call, no retries.
- voice_gateway
    `ElevenLabsVoiceGateway`: text-to-speech, audio bytes passed through.
"""
