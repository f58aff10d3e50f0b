"""
Ollama operations: chat, generate, embeddings, list_models.

Each operation validates its request, translates it into an Ollama call,
performs the call and normalizes the response. Missing input is returned
as an ErrorResult; transport faults raise OllamaError.
"""

import logging
from typing import Any, Mapping, Union

from ollama_acp.client import OllamaClient
from ollama_acp.config import ResolvedConfig
from ollama_acp.endpoints import (
    ApiCall,
    build_chat_messages,
    chat_call,
    embed_call,
    generate_call,
    tags_call,
)
from ollama_acp.normalize import (
    normalize_chat,
    normalize_embeddings,
    normalize_generate,
    normalize_models,
)
from ollama_acp.schemas import (
    ChatRequest,
    ChatResult,
    EmbeddingsRequest,
    EmbeddingsResult,
    ErrorResult,
    GenerateRequest,
    GenerateResult,
    effective_model,
)

logger = logging.getLogger(__name__)


def execute(client: OllamaClient, call: ApiCall) -> Any:
    """Perform one ApiCall and return the decoded JSON body."""
    if call.method == "GET":
        return client.get_json(call.path, headers=call.headers)
    return client.post_json(call.path, call.body, headers=call.headers)


def chat(
    request: Mapping[str, Any],
    config: ResolvedConfig,
    client: OllamaClient,
) -> Union[ChatResult, ErrorResult]:
    parsed = ChatRequest.model_validate(request)
    messages = build_chat_messages(parsed)
    if messages is None:
        return ErrorResult(error="prompt or messages required")

    model = effective_model(parsed.model, config.default_model)
    logger.debug("chat: model=%s messages=%d", model, len(messages))
    data = execute(client, chat_call(model, messages))
    return normalize_chat(data, model)


def generate(
    request: Mapping[str, Any],
    config: ResolvedConfig,
    client: OllamaClient,
) -> Union[GenerateResult, ErrorResult]:
    parsed = GenerateRequest.model_validate(request)
    if not parsed.prompt:
        return ErrorResult(error="prompt is required")

    model = effective_model(parsed.model, config.default_model)
    logger.debug("generate: model=%s", model)
    data = execute(client, generate_call(model, parsed.prompt))
    return normalize_generate(data, model)


def embeddings(
    request: Mapping[str, Any],
    config: ResolvedConfig,
    client: OllamaClient,
) -> Union[EmbeddingsResult, ErrorResult]:
    parsed = EmbeddingsRequest.model_validate(request)
    if not parsed.text:
        return ErrorResult(error="text is required")

    model = config.default_model
    logger.debug("embeddings: model=%s chars=%d", model, len(parsed.text))
    data = execute(client, embed_call(model, parsed.text))
    return normalize_embeddings(data, model)


def list_models(client: OllamaClient) -> Any:
    """Return /api/tags verbatim."""
    return normalize_models(execute(client, tags_call()))
