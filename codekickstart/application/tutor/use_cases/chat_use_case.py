"""Use case for chatting with the AI tutor and reading the transcript."""

import structlog

from codekickstart.application.catalog.protocols.language_repository import (
    LanguageRepositoryProtocol,
)
from codekickstart.application.tutor.protocols.chat_message_repository import (
    ChatMessageRepositoryProtocol,
)
from codekickstart.application.tutor.protocols.tutor_gateway import TutorGatewayProtocol
from codekickstart.domain.common.caller import Anonymous, Caller, require_user_id
from codekickstart.domain.common.exceptions import ValidationError
from codekickstart.domain.tutor.entities.chat_message import ChatMessage
from codekickstart.domain.tutor.replies import APOLOGY_MESSAGE, UpstreamFailure

logger = structlog.get_logger(__name__)


class ChatUseCase:
    """Tutor round-trips and per-user chat history."""

    def __init__(
        self,
        chat_message_repository: ChatMessageRepositoryProtocol,
        language_repository: LanguageRepositoryProtocol,
        tutor_gateway: TutorGatewayProtocol,
    ) -> None:
        self.chat_message_repository = chat_message_repository
        self.language_repository = language_repository
        self.tutor_gateway = tutor_gateway

    def get_history(self, caller: Caller, language_slug: str | None = None) -> list[ChatMessage]:
        """
        Get the caller's chat history, oldest first.

        Args:
            caller: The requesting caller
            language_slug: Only return messages sent about this language.
                None or an empty string returns the whole history.

        Returns:
            The caller's messages; an empty list for anonymous callers
        """
        if isinstance(caller, Anonymous):
            return []
        return self.chat_message_repository.find_by_user(caller.user_id, language_slug or None)

    async def send_message(
        self, caller: Caller, prompt: str, language_slug: str | None = None
    ) -> str:
        """
        Ask the tutor a question and record the exchange.

        The language, when it exists in the catalog, is added to the tutor's
        instructions. An unknown slug is still stored on the message.

        Returns:
            The tutor's answer, or the apology message if the tutor could not be
            reached. Nothing is stored in the second case.

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            ValidationError: If the prompt is blank
        """
        user_id = require_user_id(caller, "send_chat_message")
        if not prompt.strip():
            raise ValidationError("Message cannot be empty", field="message")
        language_slug = language_slug or None

        language = (
            self.language_repository.find_by_slug(language_slug) if language_slug else None
        )

        outcome = await self.tutor_gateway.ask(prompt, language)
        if isinstance(outcome, UpstreamFailure):
            logger.warning(
                "tutor_reply_unavailable",
                user_id=user_id.value,
                language_slug=language_slug,
                reason=outcome.reason,
            )
            return APOLOGY_MESSAGE

        saved = self.chat_message_repository.append(
            ChatMessage.create(
                user_id=user_id,
                message=prompt,
                response=outcome.text,
                language_slug=language_slug,
            )
        )
        logger.info(
            "chat_message_saved",
            chat_message_id=saved.id.value,
            user_id=user_id.value,
            language_slug=language_slug,
        )
        return saved.response
