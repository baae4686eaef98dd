"""Base class and shared utilities for LLM providers."""

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

from convit.llm.assembler import PromptPair
from convit.llm.exceptions import EmptyCompletionError, MissingAPIKeyError

logger = logging.getLogger(__name__)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers.

    Subclasses resolve their API key when constructed, send exactly one
    request per create_message call and never retry on their own.
    """

    #: Environment variable holding the provider's API key
    api_key_env_var: str = ""
    #: Human-readable provider name for error messages
    provider_name: str = ""

    def __init__(self, model: str, allow_empty: bool = False):
        """Initialize the provider.

        Args:
            model: The model to use.
            allow_empty: Return empty completions instead of raising.

        Raises:
            MissingAPIKeyError: If the API key is not set.
        """
        self.model = model
        self.allow_empty = allow_empty
        self.api_key = self.get_api_key()

    def get_api_key(self) -> str:
        """Get the API key from the environment.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not set.
        """
        api_key = os.getenv(self.api_key_env_var)
        if api_key:
            return api_key

        raise MissingAPIKeyError(
            f"{self.api_key_env_var} is not set. "
            f"Set it with: export {self.api_key_env_var}=your_key_here"
        )

    @abstractmethod
    def create_message(self, prompt: PromptPair, timeout: float) -> str:
        """Send the prompt to the backend and return the completion text.

        Args:
            prompt: The assembled system/user prompt pair.
            timeout: Seconds the request may take.

        Returns:
            The text of the first completion, verbatim.

        Raises:
            RequestTimeoutError: If the request exceeds the timeout.
            TransportError: If the backend call fails.
            EmptyCompletionError: If no text came back and empty
                completions are not allowed.
        """
        pass

    def _check_completion(self, text: Optional[str]) -> str:
        """Turn a missing or empty completion into an error unless allowed."""
        if text and text.strip():
            return text
        if self.allow_empty:
            return ""
        raise EmptyCompletionError(
            f"{self.provider_name} returned an empty completion for model {self.model}"
        )

    def _log_request(self, prompt: PromptPair, input_tokens: int, output_tokens: int) -> None:
        logger.debug("system: %s", prompt.system)
        logger.debug("prompt: %s", prompt.user)
        logger.debug(
            "usage: model=%s input_tokens=%d output_tokens=%d",
            self.model,
            input_tokens,
            output_tokens,
        )
