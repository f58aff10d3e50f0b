"""
HostBridge Protocol - the capabilities the plugin runtime provides.

This is the WHAT (interface), not the HOW (implementation).
See memory.py for an in-process implementation.
"""

from typing import Any, Protocol


class HostError(Exception):
    """A host capability failed (config unavailable, queue error, send rejected)."""
    pass


class HostBridge(Protocol):
    """
    Contract for the agent-messaging host this plugin runs inside.

    Every capability signals failure by raising HostError. Callers decide
    per capability whether that failure is ignored or surfaced.
    """

    def get_config(self) -> dict[str, Any]:
        """Return process-wide plugin configuration (all keys optional)."""
        ...

    def agent_receive(self, max_count: int) -> list[dict[str, Any]]:
        """
        Pull up to max_count pending inbound messages.

        Each message is {"from": sender_id, "payload": <any JSON value>}.
        Messages are returned in delivery order.
        """
        ...

    def agent_send(self, recipient: str, payload: dict[str, Any]) -> Any:
        """Deliver payload to another agent."""
        ...

    def agent_register(
        self,
        name: str,
        description: str,
        capabilities: list[tuple[str, str]],
    ) -> Any:
        """Announce this agent and its (name, description) capabilities."""
        ...

    def log_info(self, message: str) -> None:
        """Write a diagnostic line to the host log."""
        ...
