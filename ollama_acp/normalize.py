"""
Response normalization: raw Ollama JSON -> uniform result models.

Ollama's response shapes differ per endpoint and fields may be missing.
Any field that is absent or of the wrong type falls back to a default;
normalization never raises.
"""

from typing import Any

from ollama_acp.schemas import ChatResult, EmbeddingsResult, GenerateResult


def _as_object(data: Any) -> dict[str, Any]:
    return data if isinstance(data, dict) else {}


def _str_field(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else default


def _bool_field(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else default


def normalize_chat(data: Any, model: str) -> ChatResult:
    """
    Normalize an /api/chat response.

    Content comes from message.content; timing counters pass through as-is.
    """
    data = _as_object(data)
    message = _as_object(data.get("message"))
    return ChatResult(
        content=_str_field(message, "content", ""),
        model=_str_field(data, "model", model),
        done=_bool_field(data, "done", True),
        total_duration=data.get("total_duration"),
        eval_count=data.get("eval_count"),
    )


def normalize_generate(data: Any, model: str) -> GenerateResult:
    """Normalize an /api/generate response."""
    data = _as_object(data)
    return GenerateResult(
        response=_str_field(data, "response", ""),
        model=_str_field(data, "model", model),
        done=_bool_field(data, "done", True),
    )


def normalize_embeddings(data: Any, model: str) -> EmbeddingsResult:
    """Normalize an /api/embed response. Vectors pass through untouched."""
    data = _as_object(data)
    return EmbeddingsResult(
        embeddings=data.get("embeddings"),
        model=_str_field(data, "model", model),
    )


def normalize_models(data: Any) -> Any:
    """/api/tags is returned exactly as the server sent it."""
    return data
