"""
ollama-acp: expose a local Ollama server to an agent-messaging host.

Usage:
    from ollama_acp import InMemoryHost, register_host, process

    register_host(InMemoryHost({"model": "llama3.2"}))
    process({"action": "chat", "prompt": "Hello"})
"""

from ollama_acp.client import OllamaClient, OllamaError
from ollama_acp.config import ResolvedConfig, resolve_config
from ollama_acp.dispatcher import ActionKind, dispatch
from ollama_acp.host import HostBridge, HostError, InMemoryHost, register_host
from ollama_acp.plugin import config_schema, describe, init, process, start, stop

__all__ = [
    "ActionKind",
    "HostBridge",
    "HostError",
    "InMemoryHost",
    "OllamaClient",
    "OllamaError",
    "ResolvedConfig",
    "config_schema",
    "describe",
    "dispatch",
    "init",
    "process",
    "register_host",
    "resolve_config",
    "start",
    "stop",
]
