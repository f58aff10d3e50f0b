"""
Poll-and-relay loop.

Drains a bounded batch of inbound messages from the host, answers each
one with a chat call and relays the answer back to its sender. Messages
are handled strictly in delivery order, one blocking call at a time.

Failure isolation:
- queue read fails      -> empty batch
- empty prompt          -> message skipped, not counted
- chat call fails       -> message skipped, not counted, nothing relayed
- relay send fails      -> ignored, message still counted
"""

import logging
from typing import Any, Optional

from ollama_acp.client import OllamaClient, OllamaError
from ollama_acp.config import POLL_BATCH_SIZE, ResolvedConfig
from ollama_acp.host.base import HostBridge, HostError
from ollama_acp.operations import chat
from ollama_acp.schemas import ChatResult, InboundMessage, PollResult, RelayResult

logger = logging.getLogger(__name__)


def receive_batch(host: HostBridge, max_count: int = POLL_BATCH_SIZE) -> list[Any]:
    """Pull pending messages; a failed read yields an empty batch."""
    try:
        return list(host.agent_receive(max_count))
    except HostError as e:
        logger.warning("agent_receive failed, treating queue as empty: %s", e)
        return []


def relay(host: HostBridge, recipient: str, content: str) -> None:
    """Send a response to `recipient`; a failed send is logged and dropped."""
    try:
        host.agent_send(recipient, {"response": content})
    except HostError as e:
        logger.warning("agent_send to %s failed, response dropped: %s", recipient, e)


def answer(message: InboundMessage, config: ResolvedConfig, client: OllamaClient) -> Optional[ChatResult]:
    """Run the chat call for one message. Returns None if it failed."""
    try:
        result = chat({"prompt": message.prompt}, config, client)
    except OllamaError as e:
        logger.warning("chat failed for message from %s, skipping: %s", message.sender, e)
        return None
    if not isinstance(result, ChatResult):
        logger.warning("chat rejected message from %s: %s", message.sender, result.error)
        return None
    return result


def poll_messages(
    config: ResolvedConfig,
    host: HostBridge,
    client: OllamaClient,
) -> PollResult:
    """
    Answer up to POLL_BATCH_SIZE queued messages.

    Returns a PollResult whose results are the relayed answers, in the
    order the messages were processed.
    """
    summary = PollResult()

    for raw in receive_batch(host):
        message = InboundMessage.model_validate(raw if isinstance(raw, dict) else {})
        if not message.prompt:
            continue

        result = answer(message, config, client)
        if result is None:
            continue

        relay(host, message.sender, result.content)
        summary.results.append(RelayResult(sender=message.sender, response=result.content))

    logger.debug("poll: processed=%d", summary.processed)
    return summary
