"""
Endpoint translation: validated requests -> Ollama API calls.

Pure functions, no I/O. Each builder returns the method, path and body
for one Ollama endpoint. Streaming is always disabled.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ollama_acp.client import ACCEPT_JSON, JSON_HEADERS
from ollama_acp.config import DEFAULT_SYSTEM_PROMPT
from ollama_acp.schemas import ChatRequest

CHAT_PATH = "/api/chat"
GENERATE_PATH = "/api/generate"
EMBED_PATH = "/api/embed"
TAGS_PATH = "/api/tags"


@dataclass(frozen=True)
class ApiCall:
    """One HTTP call against the Ollama API."""
    method: str
    path: str
    body: Optional[dict[str, Any]] = None
    headers: dict[str, str] = field(default_factory=dict)


def build_chat_messages(request: ChatRequest) -> Optional[list[Any]]:
    """
    Resolve the message list for a chat request.

    `messages` wins when present and is passed through untouched.
    Otherwise a non-empty `prompt` becomes [system, user].
    Returns None when neither is usable.
    """
    if request.messages is not None:
        return request.messages
    if request.prompt:
        system = request.system if request.system is not None else DEFAULT_SYSTEM_PROMPT
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": request.prompt},
        ]
    return None


def chat_call(model: str, messages: list[Any]) -> ApiCall:
    return ApiCall(
        method="POST",
        path=CHAT_PATH,
        body={"model": model, "messages": messages, "stream": False},
        headers=dict(JSON_HEADERS),
    )


def generate_call(model: str, prompt: str) -> ApiCall:
    return ApiCall(
        method="POST",
        path=GENERATE_PATH,
        body={"model": model, "prompt": prompt, "stream": False},
        headers=dict(JSON_HEADERS),
    )


def embed_call(model: str, text: str) -> ApiCall:
    # /api/embed takes "input" (string or list); we only send one string
    return ApiCall(
        method="POST",
        path=EMBED_PATH,
        body={"model": model, "input": text},
        headers=dict(JSON_HEADERS),
    )


def tags_call() -> ApiCall:
    return ApiCall(method="GET", path=TAGS_PATH, headers=dict(ACCEPT_JSON))
