"""
OllamaClient - blocking JSON transport to an Ollama server.

One client lives for one invocation; nothing is pooled across invocations.
Every transport or decoding fault surfaces as OllamaError.
"""

import json
import logging
from typing import Any, Optional

import httpx

from ollama_acp.config import get_timeout_seconds

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}
ACCEPT_JSON = {"Accept": "application/json"}


class OllamaError(Exception):
    """Human-readable error from the Ollama API or the transport beneath it."""
    pass


def parse_ollama_error(response: httpx.Response) -> str:
    """Extract a user-friendly error message from an Ollama response."""
    try:
        data = response.json()
        # Ollama returns {"error": "model 'x' not found"}
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, str) and error:
                return error
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return f"HTTP {response.status_code}: {response.text[:200]}"
    except Exception:
        return f"HTTP {response.status_code}: {response.text[:200]}"


class OllamaClient:
    """
    Thin wrapper over httpx.Client for the Ollama REST API.

    Usage:
        with OllamaClient("http://localhost:11434") as client:
            data = client.post_json("/api/chat", body)
    """

    def __init__(self, base_url: str, timeout_seconds: Optional[float] = None):
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds or get_timeout_seconds()
        self._client = httpx.Client(timeout=self.timeout_seconds)

    def __enter__(self) -> "OllamaClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def post_json(
        self,
        path: str,
        body: Any,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """POST a JSON body and return the decoded JSON response."""
        try:
            content = json.dumps(body)
        except (TypeError, ValueError) as e:
            raise OllamaError(f"Request body for {path} is not JSON-serializable: {e}") from e

        return self._request(
            "POST", path,
            content=content.encode("utf-8"),
            headers={**JSON_HEADERS, **(headers or {})},
        )

    def get_json(self, path: str, headers: Optional[dict[str, str]] = None) -> Any:
        """GET a path and return the decoded JSON response."""
        return self._request("GET", path, headers={**ACCEPT_JSON, **(headers or {})})

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = self.url(path)
        logger.debug("%s %s", method, url)

        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as e:
            raise OllamaError(f"Ollama timeout for {method} {url}: {e}") from e
        except httpx.HTTPError as e:
            raise OllamaError(f"Ollama HTTP error for {method} {url}: {e}") from e
        except httpx.InvalidURL as e:
            raise OllamaError(f"Invalid Ollama URL {url!r}: {e}") from e

        # Error statuses still carry a JSON body; it is normalized like any other
        if response.status_code >= 400:
            logger.warning("%s %s returned %d: %s", method, path, response.status_code, parse_ollama_error(response))

        try:
            return response.json()
        except ValueError as e:
            raise OllamaError(f"Ollama returned invalid JSON for {method} {path}: {e}") from e
