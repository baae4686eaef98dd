"""OpenAI GPT provider implementation."""

import openai
from openai import OpenAI

from convit.config import API_KEY_ENV_VARS, DEFAULT_MODEL, LLMProvider
from convit.llm.assembler import PromptPair
from convit.llm.base import BaseLLMProvider
from convit.llm.exceptions import RequestTimeoutError, TransportError

# Chat roles understood by the OpenAI API
MESSAGE_ROLE_SYSTEM = "system"
MESSAGE_ROLE_USER = "user"


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENAI]
    provider_name = "OpenAI"

    def __init__(self, model: str | None = None, allow_empty: bool = False):
        """Initialize the OpenAI provider.

        Args:
            model: The model to use. Defaults to gpt-4o-mini.
            allow_empty: Return empty completions instead of raising.
        """
        super().__init__(model or DEFAULT_MODEL, allow_empty=allow_empty)

    def create_message(self, prompt: PromptPair, timeout: float) -> str:
        """Generate a commit message using OpenAI GPT.

        Args:
            prompt: The assembled system/user prompt pair.
            timeout: Seconds the request may take.

        Returns:
            The text of the first choice.

        Raises:
            RequestTimeoutError: If the request times out.
            TransportError: For other API errors.
            EmptyCompletionError: If the response holds no text.
        """
        # Retries are decided by the generation loop
        client = OpenAI(api_key=self.api_key, max_retries=0)

        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": MESSAGE_ROLE_SYSTEM, "content": prompt.system},
                    {"role": MESSAGE_ROLE_USER, "content": prompt.user},
                ],
                timeout=timeout,
            )
        except openai.APITimeoutError as e:
            raise RequestTimeoutError(f"OpenAI request timed out after {timeout}s") from e
        except openai.OpenAIError as e:
            raise TransportError(f"OpenAI API call failed: {e}") from e

        input_tokens = response.usage.prompt_tokens if response.usage else 0
        output_tokens = response.usage.completion_tokens if response.usage else 0
        self._log_request(prompt, input_tokens, output_tokens)

        text = response.choices[0].message.content if response.choices else None
        return self._check_completion(text)
