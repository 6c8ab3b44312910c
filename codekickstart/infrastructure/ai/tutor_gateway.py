"""Bridge between the chat use case and the external chat-completion service."""

import asyncio
from collections.abc import Callable

import structlog
from pydantic_ai.models import Model

from codekickstart.config import Settings, get_settings
from codekickstart.domain.catalog.entities.language import LanguageEntry
from codekickstart.domain.tutor.prompts import build_system_prompt
from codekickstart.domain.tutor.replies import (
    EMPTY_RESPONSE_MESSAGE,
    TutorOutcome,
    TutorReply,
    UpstreamFailure,
)
from codekickstart.infrastructure.ai.ai_model import get_ai_model
from codekickstart.infrastructure.ai.tutor_agent import get_tutor_agent

logger = structlog.get_logger(__name__)


class TutorGateway:
    """
    Sends one prompt to the tutor model and reports the outcome as a value.

    Upstream problems (provider not configured, connection errors, timeouts,
    error statuses, malformed responses) never raise out of ``ask``; they come
    back as ``UpstreamFailure`` so the caller decides what the user sees.
    """

    def __init__(
        self,
        model_factory: Callable[[], Model] = get_ai_model,
        settings: Settings | None = None,
    ) -> None:
        self.model_factory = model_factory
        self.settings = settings or get_settings()

    async def ask(self, prompt: str, language: LanguageEntry | None) -> TutorOutcome:
        """
        Ask the tutor a single, context-free question.

        Args:
            prompt: The user's message
            language: Catalog entry the user is viewing, spliced into the instructions

        Returns:
            TutorReply with the generated text, or UpstreamFailure
        """
        try:
            agent = get_tutor_agent(
                self.model_factory(),
                instructions=build_system_prompt(language),
                max_tokens=self.settings.AI_MAX_TOKENS,
                temperature=self.settings.AI_TEMPERATURE,
            )
            result = await asyncio.wait_for(
                agent.run(prompt), timeout=self.settings.AI_TIMEOUT_SECONDS
            )
        except TimeoutError:
            logger.warning("tutor_upstream_timeout", timeout=self.settings.AI_TIMEOUT_SECONDS)
            return UpstreamFailure(
                reason=f"No response within {self.settings.AI_TIMEOUT_SECONDS} seconds"
            )
        except Exception as e:
            logger.warning(
                "tutor_upstream_failure",
                error_type=type(e).__name__,
                error=str(e),
                exc_info=True,
            )
            return UpstreamFailure(reason=f"{type(e).__name__}: {e}")

        text = result.output
        if not text or not text.strip():
            logger.info("tutor_empty_response")
            return TutorReply(text=EMPTY_RESPONSE_MESSAGE)
        return TutorReply(text=text)
