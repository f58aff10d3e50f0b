"""
Request and result models for ollama-acp.

Requests are parsed permissively: unknown fields are ignored and a field
holding the wrong JSON type reads as absent. Results carry the exact flat
wire shape callers expect via to_envelope().
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ollama_acp.config import UNKNOWN_SENDER


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


# ─────────────────────────────────────────────────────────────────────
# REQUESTS
# ─────────────────────────────────────────────────────────────────────

class _Request(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ChatRequest(_Request):
    """Input for the chat action: either `messages` or `prompt` (+ `system`)."""
    messages: Optional[list[Any]] = None
    prompt: Optional[str] = None
    system: Optional[str] = None
    model: Optional[str] = None

    @field_validator("messages", mode="before")
    @classmethod
    def _list_or_none(cls, value: Any) -> Optional[list]:
        return value if isinstance(value, list) else None

    @field_validator("prompt", "system", "model", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)


class GenerateRequest(_Request):
    """Input for the generate action."""
    prompt: Optional[str] = None
    model: Optional[str] = None

    @field_validator("prompt", "model", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)


class EmbeddingsRequest(_Request):
    """Input for the embeddings action. Model is never overridable here."""
    text: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)


def effective_model(requested: Optional[str], default_model: str) -> str:
    """Request-level model wins whenever it is a string."""
    return requested if requested is not None else default_model


class InboundMessage(_Request):
    """A message pulled from the host queue: {"from": ..., "payload": ...}."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    sender: str = Field(default=UNKNOWN_SENDER, alias="from")
    payload: Any = None

    @field_validator("sender", mode="before")
    @classmethod
    def _sender_or_unknown(cls, value: Any) -> str:
        return value if isinstance(value, str) else UNKNOWN_SENDER

    @property
    def prompt(self) -> str:
        """payload.prompt as a string, or "" when missing."""
        if isinstance(self.payload, dict):
            prompt = self.payload.get("prompt")
            if isinstance(prompt, str):
                return prompt
        return ""


# ─────────────────────────────────────────────────────────────────────
# RESULTS
# ─────────────────────────────────────────────────────────────────────

class ErrorResult(BaseModel):
    """Domain error, returned as data rather than raised."""
    error: str

    def to_envelope(self) -> dict[str, Any]:
        return {"error": self.error}


class ChatResult(BaseModel):
    content: str = ""
    model: str
    done: bool = True
    total_duration: Any = None
    eval_count: Any = None

    def to_envelope(self) -> dict[str, Any]:
        return self.model_dump()


class GenerateResult(BaseModel):
    response: str = ""
    model: str
    done: bool = True

    def to_envelope(self) -> dict[str, Any]:
        return self.model_dump()


class EmbeddingsResult(BaseModel):
    embeddings: Any = None
    model: str

    def to_envelope(self) -> dict[str, Any]:
        return self.model_dump()


class RelayResult(BaseModel):
    """One inbound message answered and relayed back to its sender."""
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(alias="from")
    response: str

    def to_envelope(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class PollResult(BaseModel):
    results: list[RelayResult] = Field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.results)

    def to_envelope(self) -> dict[str, Any]:
        return {
            "processed": self.processed,
            "results": [r.to_envelope() for r in self.results],
        }
