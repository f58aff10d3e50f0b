"""
Host Registry - central point for host dependency injection.

Usage:
    # At startup (cli.py, or the embedding runtime)
    register_host(InMemoryHost(config))

    # In plugin entry points
    host = get_host()
    host.log_info("...")
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ollama_acp.host.base import HostBridge

_host: Optional["HostBridge"] = None


def register_host(host: "HostBridge") -> None:
    """
    Register the host the plugin entry points talk to.

    Replaces any previously registered host.
    """
    global _host
    _host = host


def get_host() -> "HostBridge":
    """
    Get the registered host.

    Raises:
        RuntimeError: If no host has been registered
    """
    if _host is None:
        raise RuntimeError(
            "No host registered. Call register_host() at startup."
        )
    return _host


def clear_host() -> None:
    """
    Clear the registered host.

    Primarily useful for testing to reset state between tests.
    """
    global _host
    _host = None
