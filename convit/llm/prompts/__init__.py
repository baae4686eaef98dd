"""LLM prompt templates for commit message generation.

- system: The configurable base instruction and the mode suffixes
"""

from convit.llm.prompts.system import (
    SYSTEM_MESSAGE,
    EXAMPLES_HEADER,
    FULL_SUFFIX,
    SHORT_SUFFIX,
)


__all__ = [
    "SYSTEM_MESSAGE",
    "EXAMPLES_HEADER",
    "FULL_SUFFIX",
    "SHORT_SUFFIX",
]
