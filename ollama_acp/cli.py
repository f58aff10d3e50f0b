"""CLI entry point for ollama-acp.

Drives the plugin entry points from a terminal with an in-memory host,
so actions can be exercised against a local Ollama without the agent
runtime.

Entry point:
    ollama-acp describe
    ollama-acp schema
    ollama-acp process '{"action": "chat", "prompt": "Hi"}'
    ollama-acp process - < request.json
    ollama-acp poll --inbox messages.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────
# ARGUMENT PARSING
# ─────────────────────────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ollama-acp",
        description="Run ollama-acp plugin actions locally.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("describe", help="Print plugin metadata")
    sub.add_parser("schema", help="Print the plugin config schema")

    process_p = sub.add_parser("process", help="Run one request envelope")
    process_p.add_argument("request", help="Request JSON, or '-' to read stdin")
    process_p.add_argument("--inbox", default=None, help="JSON file of inbound messages to queue")

    poll_p = sub.add_parser("poll", help="Answer queued inbound messages")
    poll_p.add_argument("--inbox", default=None, help="JSON file of inbound messages to queue")

    return parser


# ─────────────────────────────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────────────────────────────


def _read_request(raw: str) -> Any:
    """Parse the request argument; '-' reads from stdin."""
    text = sys.stdin.read() if raw == "-" else raw
    return json.loads(text)


def _load_inbox(path: Optional[str]) -> list[dict]:
    """Load [{"from": ..., "payload": ...}, ...] from a JSON file."""
    if not path:
        return []
    data = json.loads(Path(path).read_text())
    if not isinstance(data, list) or not all(isinstance(m, dict) for m in data):
        raise ValueError(f"{path}: expected a JSON list of message objects")
    return data


def _emit(data: Any) -> None:
    json.dump(data, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _setup_host(inbox: list[dict]):
    from ollama_acp.config import load_host_config_from_env
    from ollama_acp.host import InMemoryHost, register_host

    host = InMemoryHost(load_host_config_from_env())
    for message in inbox:
        host.enqueue(message.get("from", "unknown"), message.get("payload"))
    register_host(host)
    return host


# ─────────────────────────────────────────────────────────────────────
# COMMANDS
# ─────────────────────────────────────────────────────────────────────


def _cmd_process(request: Any, inbox: list[dict]) -> int:
    """Run one request through plugin.process(). Returns exit code."""
    from ollama_acp import plugin
    from ollama_acp.client import OllamaError

    host = _setup_host(inbox)
    try:
        result = plugin.process(request)
    except OllamaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _emit(result)
    for recipient, payload in host.outbox:
        logger.info("relayed to %s: %s", recipient, payload)
    return 0


# ─────────────────────────────────────────────────────────────────────
# ENTRY POINT
# ─────────────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(name)s %(message)s", stream=sys.stderr)

    load_dotenv()

    from ollama_acp import plugin

    if args.command == "describe":
        _emit(plugin.describe())
        code = 0
    elif args.command == "schema":
        _emit(plugin.config_schema())
        code = 0
    elif args.command in ("process", "poll"):
        try:
            request = _read_request(args.request) if args.command == "process" else {"action": "poll"}
            inbox = _load_inbox(args.inbox)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)
        code = _cmd_process(request, inbox)
    else:
        parser.print_help()
        code = 1

    sys.exit(code)


if __name__ == "__main__":
    main()
