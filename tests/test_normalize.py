"""Tests for ollama_acp.normalize - response shape handling."""

from ollama_acp.normalize import (
    normalize_chat,
    normalize_embeddings,
    normalize_generate,
    normalize_models,
)

from tests.conftest import (
    MOCK_CHAT_RESPONSE,
    MOCK_EMBED_RESPONSE,
    MOCK_GENERATE_RESPONSE,
    MOCK_MODEL,
    MOCK_TAGS_RESPONSE,
)


class TestNormalizeChat:
    """Tests for /api/chat normalization."""

    def test_full_response(self):
        result = normalize_chat(MOCK_CHAT_RESPONSE, MOCK_MODEL).to_envelope()

        assert result == {
            "content": "The capital of France is Paris.",
            "model": MOCK_MODEL,
            "done": True,
            "total_duration": 4883583458,
            "eval_count": 8,
        }

    def test_missing_done_defaults_true(self):
        data = {"model": "x", "message": {"content": "hi"}}

        assert normalize_chat(data, "x").done is True

    def test_done_false_preserved(self):
        data = {"message": {"content": "partial"}, "done": False}

        assert normalize_chat(data, "x").done is False

    def test_missing_model_uses_request_model(self):
        data = {"message": {"content": "hi"}, "done": True}

        assert normalize_chat(data, "requested-model").model == "requested-model"

    def test_missing_message_gives_empty_content(self):
        result = normalize_chat({"done": True}, "x")

        assert result.content == ""

    def test_optional_counters_present_as_none(self):
        """total_duration / eval_count keys exist even when the server omits them."""
        envelope = normalize_chat({"message": {"content": "hi"}}, "x").to_envelope()

        assert envelope["total_duration"] is None
        assert envelope["eval_count"] is None

    def test_wrong_types_fall_back(self):
        data = {"message": "not-an-object", "model": 42, "done": "yes"}

        result = normalize_chat(data, "x")

        assert result.content == ""
        assert result.model == "x"
        assert result.done is True

    def test_non_object_response(self):
        result = normalize_chat(["unexpected"], "x")

        assert result.content == ""
        assert result.model == "x"


class TestNormalizeGenerate:
    """Tests for /api/generate normalization."""

    def test_full_response(self):
        envelope = normalize_generate(MOCK_GENERATE_RESPONSE, MOCK_MODEL).to_envelope()

        assert envelope == {
            "response": "def add(a, b):\n    return a + b",
            "model": MOCK_MODEL,
            "done": True,
        }

    def test_empty_response_falls_back(self):
        envelope = normalize_generate({}, "x").to_envelope()

        assert envelope == {"response": "", "model": "x", "done": True}


class TestNormalizeEmbeddings:
    """Tests for /api/embed normalization."""

    def test_full_response(self):
        envelope = normalize_embeddings(MOCK_EMBED_RESPONSE, MOCK_MODEL).to_envelope()

        assert envelope == {
            "embeddings": [[0.010071029, -0.0017594862, 0.05007221]],
            "model": MOCK_MODEL,
        }

    def test_missing_embeddings_is_none(self):
        envelope = normalize_embeddings({}, "nomic-embed-text").to_envelope()

        assert envelope == {"embeddings": None, "model": "nomic-embed-text"}


class TestNormalizeModels:
    """Tests for /api/tags passthrough."""

    def test_passthrough_unchanged(self):
        assert normalize_models(MOCK_TAGS_RESPONSE) == MOCK_TAGS_RESPONSE

    def test_passthrough_unexpected_shape(self):
        assert normalize_models({"whatever": [1, 2]}) == {"whatever": [1, 2]}
