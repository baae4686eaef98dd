"""Configuration for convit.

Defaults live here; user overrides are read from ~/.convit/config.yaml
by convit.global_config and handed around as a ConvitConfig value.
"""

from enum import Enum

from pydantic import BaseModel, field_validator

from convit.git.diff import FILES_TO_IGNORE
from convit.llm.prompts import SYSTEM_MESSAGE


class LLMProvider(Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 1024
DEFAULT_REQUEST_TIMEOUT = 30.0


# ============================================================
# AVAILABLE MODELS PER PROVIDER
# ============================================================

AVAILABLE_MODELS = {
    LLMProvider.OPENAI: [
        "gpt-4o-mini",
        "gpt-4o",
        "gpt-4-turbo",
        "gpt-3.5-turbo",
    ],
    LLMProvider.ANTHROPIC: [
        "claude-3-5-sonnet-20240620",
    ],
}

# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
}


def provider_for_model(model: str) -> LLMProvider:
    """Resolve which provider serves a model.

    Anything that is not a known Claude model falls back to OpenAI.

    Args:
        model: The configured model name.

    Returns:
        The LLMProvider for the model.
    """
    if model in AVAILABLE_MODELS[LLMProvider.ANTHROPIC] or model.startswith("claude"):
        return LLMProvider.ANTHROPIC
    return LLMProvider.OPENAI


class ConvitConfig(BaseModel):
    """Settings for a single convit invocation.

    Attributes:
        lower_case_first_letter: Lowercase the first letter of typed messages.
        prompt_for_optional_sub_type: Ask for a scope after picking a type.
        generate_model: Model used by `convit generate`.
        generate_system_message: Base instruction sent to the model.
        request_timeout: Seconds allowed for a single generation request.
        reassemble_on_regenerate: Ask for a revised message and rebuild the
            prompt before each regeneration in partial mode.
        ignore_patterns: Header substrings of diff segments to drop.
    """

    lower_case_first_letter: bool = True
    prompt_for_optional_sub_type: bool = False
    generate_model: str = DEFAULT_MODEL
    generate_system_message: str = SYSTEM_MESSAGE
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    reassemble_on_regenerate: bool = False
    ignore_patterns: list[str] = list(FILES_TO_IGNORE)

    @field_validator("request_timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: float) -> float:
        """Ensure the request timeout is a positive number of seconds."""
        if v <= 0:
            raise ValueError("request_timeout must be greater than zero")
        return v

    @field_validator("generate_model")
    @classmethod
    def model_must_not_be_empty(cls, v: str) -> str:
        """Ensure a model is configured."""
        if not v or not v.strip():
            raise ValueError("generate_model cannot be empty")
        return v.strip()

    @property
    def provider(self) -> LLMProvider:
        """The provider serving the configured model."""
        return provider_for_model(self.generate_model)
