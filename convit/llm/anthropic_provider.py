"""Anthropic Claude provider implementation."""

import anthropic
from anthropic import Anthropic

from convit.config import (
    API_KEY_ENV_VARS,
    AVAILABLE_MODELS,
    DEFAULT_MAX_TOKENS,
    LLMProvider,
)
from convit.llm.assembler import PromptPair
from convit.llm.base import BaseLLMProvider
from convit.llm.exceptions import RequestTimeoutError, TransportError

# Anthropic takes the system prompt as a top-level field, only user and
# assistant turns go into the message list
MESSAGE_ROLE_USER = "user"


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    api_key_env_var = API_KEY_ENV_VARS[LLMProvider.ANTHROPIC]
    provider_name = "Anthropic"

    def __init__(
        self,
        model: str | None = None,
        allow_empty: bool = False,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ):
        """Initialize the Anthropic provider.

        Args:
            model: The model to use. Defaults to the first known Claude model.
            allow_empty: Return empty completions instead of raising.
            max_tokens: Upper bound on generated tokens (required by the API).
        """
        super().__init__(
            model or AVAILABLE_MODELS[LLMProvider.ANTHROPIC][0],
            allow_empty=allow_empty,
        )
        self.max_tokens = max_tokens

    def create_message(self, prompt: PromptPair, timeout: float) -> str:
        """Generate a commit message using Anthropic Claude.

        Args:
            prompt: The assembled system/user prompt pair.
            timeout: Seconds the request may take.

        Returns:
            The text of the first content block.

        Raises:
            RequestTimeoutError: If the request times out.
            TransportError: For other API errors.
            EmptyCompletionError: If the response holds no text.
        """
        client = Anthropic(api_key=self.api_key, max_retries=0)

        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=prompt.system,
                messages=[{"role": MESSAGE_ROLE_USER, "content": prompt.user}],
                timeout=timeout,
            )
        except anthropic.APITimeoutError as e:
            raise RequestTimeoutError(f"Anthropic request timed out after {timeout}s") from e
        except anthropic.AnthropicError as e:
            raise TransportError(f"Anthropic API call failed: {e}") from e

        input_tokens = message.usage.input_tokens if message.usage else 0
        output_tokens = message.usage.output_tokens if message.usage else 0
        self._log_request(prompt, input_tokens, output_tokens)

        text = None
        if message.content:
            text = getattr(message.content[0], "text", None)
        return self._check_completion(text)
