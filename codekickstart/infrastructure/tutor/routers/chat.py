import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from codekickstart.application.tutor.use_cases.chat_use_case import ChatUseCase
from codekickstart.core import container
from codekickstart.domain.common.exceptions import DomainError
from codekickstart.exceptions import CodeKickstartError
from codekickstart.infrastructure.common.di import inject_use_case
from codekickstart.infrastructure.identity.dependencies import CurrentCaller
from codekickstart.infrastructure.tutor.schemas import (
    ChatHistoryResponse,
    ChatMessageSchema,
    SendChatMessageRequest,
    SendChatMessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/messages", response_model=ChatHistoryResponse, status_code=status.HTTP_200_OK)
def get_chat_history(
    caller: CurrentCaller,
    language_slug: str | None = Query(None, description="Only messages about this language"),
    use_case: ChatUseCase = Depends(inject_use_case(container.chat_use_case)),
) -> ChatHistoryResponse:
    """
    Get the caller's conversation with the tutor, oldest first.

    Anonymous callers get an empty list.
    """
    messages = use_case.get_history(caller, language_slug)
    return ChatHistoryResponse(messages=[ChatMessageSchema.from_entity(m) for m in messages])


@router.post("/messages", response_model=SendChatMessageResponse, status_code=status.HTTP_200_OK)
async def send_chat_message(
    request: SendChatMessageRequest,
    caller: CurrentCaller,
    use_case: ChatUseCase = Depends(inject_use_case(container.chat_use_case)),
) -> SendChatMessageResponse:
    """
    Ask the AI tutor a question.

    When the tutor cannot be reached the response is a fixed apology and
    nothing is added to the history.

    Raises:
        AuthenticationRequiredError: If the caller is anonymous (401)
        ValidationError: If the message is blank (400)
    """
    try:
        response = await use_case.send_message(caller, request.message, request.language_slug)
        return SendChatMessageResponse(response=response)
    except (CodeKickstartError, DomainError):
        # Re-raise custom exceptions - handled by exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to send chat message: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
