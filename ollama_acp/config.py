"""
Configuration constants and resolution for ollama-acp.
"""

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict


# ─────────────────────────────────────────────────────────────────────
# DEFAULTS - Overridable via host config or environment
# ─────────────────────────────────────────────────────────────────────

DEFAULT_OLLAMA_URL: str = "http://localhost:11434"
DEFAULT_MODEL: str = "llama3.2"
DEFAULT_SYSTEM_PROMPT: str = "You are a helpful assistant."
DEFAULT_TIMEOUT_SECONDS: float = 300.0  # 5 minutes


# ─────────────────────────────────────────────────────────────────────
# INTERNAL CONSTANTS
# ─────────────────────────────────────────────────────────────────────

POLL_BATCH_SIZE: int = 10
UNKNOWN_SENDER: str = "unknown"


# ─────────────────────────────────────────────────────────────────────
# ENVIRONMENT LOADING
# ─────────────────────────────────────────────────────────────────────

def get_env_ollama_url() -> Optional[str]:
    """Get Ollama base URL from OLLAMA_URL, or None if unset/blank."""
    value = os.environ.get("OLLAMA_URL", "").strip()
    return value or None


def get_env_model() -> Optional[str]:
    """Get default model from OLLAMA_MODEL, or None if unset/blank."""
    value = os.environ.get("OLLAMA_MODEL", "").strip()
    return value or None


def get_timeout_seconds() -> float:
    """
    Get HTTP timeout from environment or default.

    Set OLLAMA_TIMEOUT_SECONDS in .env (default: 300).
    """
    try:
        timeout = float(os.environ.get("OLLAMA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS
    if timeout <= 0:
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


def load_host_config_from_env() -> dict[str, str]:
    """
    Build a host-style config mapping from environment variables.

    Used by the local CLI host, which has no runtime config of its own.
    Only variables that are set appear in the result.
    """
    config = {}
    url = get_env_ollama_url()
    if url:
        config["ollama_url"] = url
    model = get_env_model()
    if model:
        config["model"] = model
    return config


# ─────────────────────────────────────────────────────────────────────
# RESOLVED CONFIGURATION
# ─────────────────────────────────────────────────────────────────────

class ResolvedConfig(BaseModel):
    """Effective base URL and default model for one invocation."""
    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_OLLAMA_URL
    default_model: str = DEFAULT_MODEL


def _config_str(host_config: Mapping[str, Any], key: str) -> Optional[str]:
    value = host_config.get(key)
    return value if isinstance(value, str) else None


def _first_set(*values: Optional[str]) -> str:
    return next(v for v in values if v is not None)


def resolve_config(host_config: Optional[Mapping[str, Any]] = None) -> ResolvedConfig:
    """
    Resolve effective configuration for one invocation.

    Precedence per field: host config > environment > built-in default.
    Host string values are used verbatim (even empty); non-string
    host values are ignored.
    """
    host_config = host_config or {}

    base_url = _first_set(
        _config_str(host_config, "ollama_url"),
        get_env_ollama_url(),
        DEFAULT_OLLAMA_URL,
    )
    model = _first_set(
        _config_str(host_config, "model"),
        get_env_model(),
        DEFAULT_MODEL,
    )
    return ResolvedConfig(base_url=base_url, default_model=model)
