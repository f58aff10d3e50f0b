"""
Action dispatch: one request envelope in, one result envelope out.

The `action` field picks the operation (default "chat"). Domain errors
come back as {"error": ...}; OllamaError propagates to the caller.
"""

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from ollama_acp import operations
from ollama_acp.client import OllamaClient
from ollama_acp.config import ResolvedConfig
from ollama_acp.host.base import HostBridge
from ollama_acp.host.registry import get_host
from ollama_acp.poll import poll_messages
from ollama_acp.schemas import ErrorResult

logger = logging.getLogger(__name__)

DEFAULT_ACTION = "chat"


class ActionKind(str, Enum):
    CHAT = "chat"
    GENERATE = "generate"
    EMBEDDINGS = "embeddings"
    LIST_MODELS = "list_models"
    POLL = "poll"

    @classmethod
    def parse(cls, action: str) -> Optional["ActionKind"]:
        """Return the matching kind, or None for an unrecognized action."""
        try:
            return cls(action)
        except ValueError:
            return None


def read_action(request: Mapping[str, Any]) -> str:
    """The request's action string; absent or non-string means chat."""
    action = request.get("action")
    return action if isinstance(action, str) else DEFAULT_ACTION


def _envelope(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.to_envelope()
    return result


def dispatch(
    request: Any,
    config: ResolvedConfig,
    host: Optional[HostBridge] = None,
    client: Optional[OllamaClient] = None,
) -> Any:
    """
    Route a request envelope to its operation.

    Args:
        request: Caller input; anything but a JSON object reads as {}
        config: Resolved base URL and default model
        host: Host for the poll action (registry host when None)
        client: Transport to use (a fresh one per call when None)

    Returns:
        The flat result envelope for the action

    Raises:
        OllamaError: On transport or decoding faults
    """
    if not isinstance(request, Mapping):
        request = {}

    action = read_action(request)
    kind = ActionKind.parse(action)
    if kind is None:
        return ErrorResult(error=f"unknown action: {action}").to_envelope()

    logger.debug("dispatch: action=%s base_url=%s", kind.value, config.base_url)

    if client is None:
        with OllamaClient(config.base_url) as owned:
            return _route(kind, request, config, host, owned)
    return _route(kind, request, config, host, client)


def _route(
    kind: ActionKind,
    request: Mapping[str, Any],
    config: ResolvedConfig,
    host: Optional[HostBridge],
    client: OllamaClient,
) -> Any:
    if kind is ActionKind.CHAT:
        return _envelope(operations.chat(request, config, client))
    if kind is ActionKind.GENERATE:
        return _envelope(operations.generate(request, config, client))
    if kind is ActionKind.EMBEDDINGS:
        return _envelope(operations.embeddings(request, config, client))
    if kind is ActionKind.LIST_MODELS:
        return operations.list_models(client)
    return poll_messages(config, host or get_host(), client).to_envelope()
