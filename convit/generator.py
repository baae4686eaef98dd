"""Commit message generation loop.

Fetches the staged diff, assembles the prompt once, asks the provider for
a message under a deadline and keeps regenerating until the user accepts
a suggestion, which is then committed.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Optional, Sequence

from convit.commit_types import COMMIT_TYPES, CommitType
from convit.config import ConvitConfig
from convit.git import (
    DiffSegment,
    commit_with_message,
    get_staged_diff,
    remove_lock_files,
    split_diff_into_chunks,
)
from convit.llm import (
    BaseLLMProvider,
    EmptyCompletionError,
    GenerationMode,
    GenerationRequest,
    PromptPair,
    RequestTimeoutError,
    assemble_prompt,
    get_provider,
)

logger = logging.getLogger(__name__)


class GenerationState(Enum):
    """States of the generation loop."""

    ASSEMBLING = "assembling"
    REQUESTING = "requesting"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    REGENERATING = "regenerating"
    COMMITTED = "committed"


def request_with_deadline(provider: BaseLLMProvider, request: GenerationRequest) -> str:
    """Run a provider call and give up once the request's timeout passes.

    The call runs on a daemon thread, so a backend that ignores its timeout
    can neither block the caller nor keep the process alive past the
    deadline. A late response is discarded.

    Args:
        provider: The provider to call.
        request: The prompt and timeout of this attempt.

    Returns:
        The completion text.

    Raises:
        RequestTimeoutError: If no response arrived in time.
        LLMError: Whatever the provider raised.
    """
    result_holder: dict[str, str] = {}
    error_holder: list[Exception] = []

    def _runner() -> None:
        try:
            result_holder["result"] = provider.create_message(request.prompt, request.timeout)
        except Exception as exc:
            error_holder.append(exc)

    thread = threading.Thread(target=_runner, name="convit-request", daemon=True)
    thread.start()
    thread.join(request.timeout)

    if thread.is_alive():
        raise RequestTimeoutError(
            f"No response from {provider.model} within {request.timeout:g}s"
        )
    if error_holder:
        raise error_holder[0]
    return result_holder["result"]


class GenerationLoop:
    """Generate, confirm and commit a message.

    Args:
        config: The configuration of this invocation.
        provider: The provider serving the configured model.
        get_diff: Returns the staged diff as text.
        confirm: Shows a suggestion and returns True when it is accepted.
        commit: Commits the accepted message.
        revise_message: Called with the current partial message before a
            regeneration when reassemble_on_regenerate is set; returns the
            message to use from then on.
        commit_types: The commit type catalogue for the prompt.
    """

    def __init__(
        self,
        config: ConvitConfig,
        provider: BaseLLMProvider,
        get_diff: Callable[[], str],
        confirm: Callable[[str], bool],
        commit: Callable[[str], object],
        revise_message: Optional[Callable[[str], str]] = None,
        commit_types: Sequence[CommitType] = COMMIT_TYPES,
    ):
        self.config = config
        self.provider = provider
        self.get_diff = get_diff
        self.confirm = confirm
        self.commit = commit
        self.revise_message = revise_message
        self.commit_types = commit_types
        self.state = GenerationState.ASSEMBLING
        self.attempts = 0

    def _assemble(
        self,
        segments: Sequence[DiffSegment],
        mode: GenerationMode,
        partial_message: Optional[str],
    ) -> PromptPair:
        self.state = GenerationState.ASSEMBLING
        prompt = assemble_prompt(
            segments,
            self.commit_types,
            self.config.generate_system_message,
            mode,
            partial_message,
        )
        logger.debug(
            "Assembled prompt: %d system chars, %d user chars",
            len(prompt.system),
            len(prompt.user),
        )
        return prompt

    def _request(self, prompt: PromptPair, partial_message: Optional[str]) -> str:
        self.state = GenerationState.REQUESTING
        self.attempts += 1
        request = GenerationRequest(
            prompt=prompt,
            timeout=self.config.request_timeout,
            partial_message=partial_message,
        )
        logger.debug("Requesting message from %s (attempt %d)", self.provider.model, self.attempts)

        response = request_with_deadline(self.provider, request)

        # Don't bother asking for confirmation on an empty response
        if not response.strip():
            raise EmptyCompletionError("Failed to generate commit message")

        return response

    def _should_reassemble(self, mode: GenerationMode) -> bool:
        return (
            self.config.reassemble_on_regenerate
            and mode == GenerationMode.SCOPE_ONLY
            and self.revise_message is not None
        )

    def run(self, mode: GenerationMode, partial_message: Optional[str] = None) -> str:
        """Loop until a generated message is accepted and committed.

        Args:
            mode: Full generation or type/scope only.
            partial_message: The user's message, required in scope-only mode.

        Returns:
            The committed message.

        Raises:
            EmptyOrMalformedDiffError: If there is nothing to describe.
            RequestTimeoutError: If the provider missed the deadline.
            TransportError: If the provider call failed.
            EmptyCompletionError: If the provider returned no text.
        """
        mode = GenerationMode(mode)
        if mode == GenerationMode.SCOPE_ONLY and partial_message is None:
            raise ValueError("A partial message is required in scope-only mode")

        self.state = GenerationState.ASSEMBLING
        segments = remove_lock_files(
            split_diff_into_chunks(self.get_diff()),
            self.config.ignore_patterns,
        )
        prompt = self._assemble(segments, mode, partial_message)

        while True:
            response = self._request(prompt, partial_message)

            self.state = GenerationState.AWAITING_CONFIRMATION
            if self.confirm(response):
                break

            self.state = GenerationState.REGENERATING
            logger.debug("Message rejected, regenerating")

            if self._should_reassemble(mode):
                revised = self.revise_message(partial_message)
                if revised != partial_message:
                    partial_message = revised
                    prompt = self._assemble(segments, mode, partial_message)

        self.commit(response)
        self.state = GenerationState.COMMITTED
        return response


def generate_commit_message(
    mode: GenerationMode,
    partial_message: Optional[str] = None,
    *,
    config: ConvitConfig,
    confirm: Callable[[str], bool],
    provider: Optional[BaseLLMProvider] = None,
    get_diff: Optional[Callable[[], str]] = None,
    commit: Optional[Callable[[str], object]] = None,
    revise_message: Optional[Callable[[str], str]] = None,
) -> str:
    """Generate a commit message and commit it once accepted.

    This is the single entry point of the generation pipeline.

    Args:
        mode: Full generation or type/scope only.
        partial_message: The user's message, required in scope-only mode.
        config: The configuration of this invocation.
        confirm: Shows a suggestion and returns True when it is accepted.
        provider: The provider to use. Resolved from the configured model
            if not given.
        get_diff: Returns the staged diff as text. Defaults to git.
        commit: Commits the accepted message. Defaults to git.
        revise_message: See GenerationLoop.

    Returns:
        The committed message.

    Raises:
        MissingAPIKeyError: If the provider's API key is not set.
        EmptyOrMalformedDiffError: If there is nothing to describe.
        LLMError: If generation failed.
    """
    if provider is None:
        provider = get_provider(config.generate_model)

    loop = GenerationLoop(
        config=config,
        provider=provider,
        get_diff=get_diff or get_staged_diff,
        confirm=confirm,
        commit=commit or commit_with_message,
        revise_message=revise_message,
    )
    return loop.run(mode, partial_message)
