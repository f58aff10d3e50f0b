"""
Plugin entry points called by the agent-messaging host.

    describe()        static plugin metadata
    config_schema()   JSON schema for the plugin's config block
    init(input)       one-time initialization
    start()           register the agent with the host
    stop()            shutdown notice
    process(input)    run one action (see dispatcher.dispatch)

All entry points talk to the host registered via host.registry.
"""

import logging
from typing import Any

from ollama_acp.config import DEFAULT_MODEL, DEFAULT_OLLAMA_URL, resolve_config
from ollama_acp.dispatcher import dispatch
from ollama_acp.host.base import HostBridge, HostError
from ollama_acp.host.registry import get_host

logger = logging.getLogger(__name__)

PLUGIN_NAME = "ollama"
PLUGIN_VERSION = "0.1.0"
PLUGIN_DESCRIPTION = "ACP agent for local LLM inference via Ollama"
AGENT_DESCRIPTION = "Local LLM inference agent via Ollama"

CAPABILITIES: list[tuple[str, str]] = [
    ("chat-completion", "Generate chat responses via local Ollama models"),
    ("code-generation", "Generate code with local models"),
    ("embeddings", "Generate text embeddings"),
]


def describe() -> dict[str, Any]:
    return {
        "name": PLUGIN_NAME,
        "version": PLUGIN_VERSION,
        "description": PLUGIN_DESCRIPTION,
        "label": "acp",
        "capabilities": [
            {"name": name, "description": description}
            for name, description in CAPABILITIES
        ],
    }


def config_schema() -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "ollama_url": {
                "type": "string",
                "description": "Ollama API base URL",
                "default": DEFAULT_OLLAMA_URL,
            },
            "model": {
                "type": "string",
                "description": "Default model to use",
                "default": DEFAULT_MODEL,
            },
        },
    }


def init(input: Any = None) -> dict[str, Any]:
    get_host().log_info("Ollama plugin initialized")
    return {"success": True}


def start() -> dict[str, Any]:
    """Register the agent; a rejected registration is logged, not raised."""
    host = get_host()
    try:
        host.agent_register(PLUGIN_NAME, AGENT_DESCRIPTION, CAPABILITIES)
    except HostError as e:
        logger.warning("agent_register failed: %s", e)
    host.log_info("Ollama ACP agent registered")
    return {"status": "running"}


def stop() -> dict[str, Any]:
    get_host().log_info("Ollama ACP agent stopped")
    return {"status": "stopped"}


def load_config(host: HostBridge) -> dict[str, Any]:
    """Host config, or {} when the host cannot provide it."""
    try:
        config = host.get_config()
    except HostError as e:
        logger.warning("get_config failed, using defaults: %s", e)
        return {}
    return config if isinstance(config, dict) else {}


def process(input: Any) -> Any:
    """
    Run one action against the Ollama server.

    Raises:
        OllamaError: Transport failure or undecodable response
    """
    host = get_host()
    config = resolve_config(load_config(host))
    return dispatch(input, config, host=host)
