"""
InMemoryHost - HostBridge held entirely in process.

Backs the CLI and tests. Inbound messages are queued with enqueue(),
outbound relays collect in `outbox`.
"""

import logging
from collections import deque
from typing import Any, Optional

logger = logging.getLogger(__name__)


class InMemoryHost:
    """In-process implementation of HostBridge."""

    def __init__(self, config: Optional[dict[str, Any]] = None):
        self.config: dict[str, Any] = dict(config or {})
        self.inbox: deque[dict[str, Any]] = deque()
        self.outbox: list[tuple[str, dict[str, Any]]] = []
        self.registrations: list[dict[str, Any]] = []

    def enqueue(self, sender: str, payload: Any) -> None:
        """Queue an inbound message as if another agent had sent it."""
        self.inbox.append({"from": sender, "payload": payload})

    def get_config(self) -> dict[str, Any]:
        return dict(self.config)

    def agent_receive(self, max_count: int) -> list[dict[str, Any]]:
        batch = []
        while self.inbox and len(batch) < max_count:
            batch.append(self.inbox.popleft())
        return batch

    def agent_send(self, recipient: str, payload: dict[str, Any]) -> None:
        self.outbox.append((recipient, payload))

    def agent_register(
        self,
        name: str,
        description: str,
        capabilities: list[tuple[str, str]],
    ) -> None:
        self.registrations.append({
            "name": name,
            "description": description,
            "capabilities": list(capabilities),
        })

    def log_info(self, message: str) -> None:
        logger.info(message)
