"""
Host bridge for the agent-messaging runtime.

Protocol defines WHAT the runtime offers, InMemoryHost is one HOW.
"""

from .base import HostBridge, HostError
from .memory import InMemoryHost
from .registry import clear_host, get_host, register_host

__all__ = [
    "HostBridge",
    "HostError",
    "InMemoryHost",
    "clear_host",
    "get_host",
    "register_host",
]
