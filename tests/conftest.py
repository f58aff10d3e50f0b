"""Shared test fixtures for ollama-acp tests."""

import pytest

from ollama_acp.config import ResolvedConfig
from ollama_acp.host import InMemoryHost, clear_host, register_host


# ─────────────────────────────────────────────────────────────────────
# MOCK DATA
# ─────────────────────────────────────────────────────────────────────

MOCK_BASE_URL = "http://ollama.test:11434"
MOCK_MODEL = "llama3.2"
MOCK_OTHER_MODEL = "qwen2.5-coder:7b"

MOCK_CHAT_RESPONSE = {
    "model": MOCK_MODEL,
    "created_at": "2024-11-02T10:00:00.000000Z",
    "message": {
        "role": "assistant",
        "content": "The capital of France is Paris."
    },
    "done_reason": "stop",
    "done": True,
    "total_duration": 4883583458,
    "load_duration": 1334875,
    "prompt_eval_count": 26,
    "eval_count": 8,
}

MOCK_GENERATE_RESPONSE = {
    "model": MOCK_MODEL,
    "created_at": "2024-11-02T10:00:00.000000Z",
    "response": "def add(a, b):\n    return a + b",
    "done": True,
    "total_duration": 1200000000,
}

MOCK_EMBED_RESPONSE = {
    "model": MOCK_MODEL,
    "embeddings": [[0.010071029, -0.0017594862, 0.05007221]],
    "total_duration": 14143917,
}

MOCK_TAGS_RESPONSE = {
    "models": [
        {
            "name": "llama3.2:latest",
            "model": "llama3.2:latest",
            "size": 2019393189,
            "digest": "a80c4f17acd55265feec403c7aef86be0c25983ab279d83f3bcd3abbcb5b8b72",
            "details": {"family": "llama", "parameter_size": "3.2B"},
        },
        {
            "name": "qwen2.5-coder:7b",
            "model": "qwen2.5-coder:7b",
            "size": 4683087332,
            "digest": "2b0496514337a3d5901f1d253d01726c890b721e891335a56d6e08cedf3e2cb0",
            "details": {"family": "qwen2", "parameter_size": "7.6B"},
        },
    ]
}

CHAT_URL = f"{MOCK_BASE_URL}/api/chat"
GENERATE_URL = f"{MOCK_BASE_URL}/api/generate"
EMBED_URL = f"{MOCK_BASE_URL}/api/embed"
TAGS_URL = f"{MOCK_BASE_URL}/api/tags"


# ─────────────────────────────────────────────────────────────────────
# FIXTURES - Environment and registry hygiene
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer OLLAMA_* variables out of the tests."""
    for key in ("OLLAMA_URL", "OLLAMA_MODEL", "OLLAMA_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_host():
    """Each test starts with no registered host."""
    clear_host()
    yield
    clear_host()


# ─────────────────────────────────────────────────────────────────────
# FIXTURES - Config and host
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture
def config():
    """Resolved config pointing at the mock server."""
    return ResolvedConfig(base_url=MOCK_BASE_URL, default_model=MOCK_MODEL)


@pytest.fixture
def host():
    """In-memory host configured for the mock server, registered globally."""
    memory_host = InMemoryHost({"ollama_url": MOCK_BASE_URL, "model": MOCK_MODEL})
    register_host(memory_host)
    return memory_host
