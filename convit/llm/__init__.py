"""LLM provider module for convit.

This module provides a unified interface to the supported LLM providers.
The provider is picked from the configured model.
"""

from dotenv import load_dotenv

from convit.llm.assembler import (
    GenerationMode,
    GenerationRequest,
    PromptPair,
    assemble_prompt,
)
from convit.llm.base import BaseLLMProvider
from convit.llm.exceptions import (
    EmptyCompletionError,
    LLMError,
    MissingAPIKeyError,
    RequestTimeoutError,
    TransportError,
)

# Load environment variables from .env file
load_dotenv()


def get_provider(model: str | None = None, allow_empty: bool = False) -> BaseLLMProvider:
    """Get an LLM provider instance for a model.

    Args:
        model: The configured model. Defaults to DEFAULT_MODEL.
        allow_empty: Return empty completions instead of raising.

    Returns:
        An instance of the provider serving the model.

    Raises:
        MissingAPIKeyError: If the provider's API key is not set.
        ValueError: If the provider is not supported.
    """
    from convit.config import DEFAULT_MODEL, LLMProvider, provider_for_model

    model = model or DEFAULT_MODEL
    provider = provider_for_model(model)

    if provider == LLMProvider.ANTHROPIC:
        from convit.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(model=model, allow_empty=allow_empty)

    elif provider == LLMProvider.OPENAI:
        from convit.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(model=model, allow_empty=allow_empty)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


# Export commonly used items
__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "TransportError",
    "RequestTimeoutError",
    "EmptyCompletionError",
    "GenerationMode",
    "GenerationRequest",
    "PromptPair",
    "assemble_prompt",
    "get_provider",
]
