"""Tests for ollama_acp.endpoints - request translation, no I/O."""

from ollama_acp.config import DEFAULT_SYSTEM_PROMPT
from ollama_acp.endpoints import (
    build_chat_messages,
    chat_call,
    embed_call,
    generate_call,
    tags_call,
)
from ollama_acp.schemas import ChatRequest


class TestBuildChatMessages:
    """Tests for message synthesis from prompt/system/messages."""

    def test_prompt_without_system_uses_default(self):
        """{prompt: "Hi"} → [default system, user Hi]."""
        messages = build_chat_messages(ChatRequest(prompt="Hi"))

        assert messages == [
            {"role": "system", "content": DEFAULT_SYSTEM_PROMPT},
            {"role": "user", "content": "Hi"},
        ]

    def test_prompt_with_system(self):
        messages = build_chat_messages(ChatRequest(prompt="Hi", system="Answer in French."))

        assert messages[0] == {"role": "system", "content": "Answer in French."}
        assert messages[1] == {"role": "user", "content": "Hi"}

    def test_messages_take_precedence_over_prompt(self):
        """When both are given, prompt is ignored."""
        history = [
            {"role": "user", "content": "What is 2+2?"},
            {"role": "assistant", "content": "4"},
            {"role": "user", "content": "And 3+3?"},
        ]

        messages = build_chat_messages(ChatRequest(messages=history, prompt="ignored"))

        assert messages == history

    def test_messages_passed_through_verbatim(self):
        """Extra keys on message objects are not stripped."""
        history = [{"role": "user", "content": "look", "images": ["aGVsbG8="]}]

        assert build_chat_messages(ChatRequest(messages=history)) == history

    def test_empty_prompt_is_unusable(self):
        assert build_chat_messages(ChatRequest(prompt="")) is None

    def test_nothing_given(self):
        assert build_chat_messages(ChatRequest()) is None


class TestApiCalls:
    """Tests for per-endpoint call builders."""

    def test_chat_call(self):
        call = chat_call("llama3.2", [{"role": "user", "content": "Hi"}])

        assert call.method == "POST"
        assert call.path == "/api/chat"
        assert call.body == {
            "model": "llama3.2",
            "messages": [{"role": "user", "content": "Hi"}],
            "stream": False,
        }
        assert call.headers == {"Content-Type": "application/json"}

    def test_generate_call(self):
        call = generate_call("llama3.2", "Write a haiku")

        assert call.method == "POST"
        assert call.path == "/api/generate"
        assert call.body == {"model": "llama3.2", "prompt": "Write a haiku", "stream": False}

    def test_embed_call(self):
        call = embed_call("nomic-embed-text", "some text")

        assert call.method == "POST"
        assert call.path == "/api/embed"
        assert call.body == {"model": "nomic-embed-text", "input": "some text"}

    def test_tags_call_has_no_body(self):
        call = tags_call()

        assert call.method == "GET"
        assert call.path == "/api/tags"
        assert call.body is None
        assert call.headers == {"Accept": "application/json"}
