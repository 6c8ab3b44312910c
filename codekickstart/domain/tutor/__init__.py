"""Tutor domain layer."""

from codekickstart.domain.tutor.entities import ChatMessage
from codekickstart.domain.tutor.prompts import build_system_prompt
from codekickstart.domain.tutor.replies import (
    APOLOGY_MESSAGE,
    EMPTY_RESPONSE_MESSAGE,
    TutorOutcome,
    TutorReply,
    UpstreamFailure,
)

__all__ = [
    "APOLOGY_MESSAGE",
    "EMPTY_RESPONSE_MESSAGE",
    "ChatMessage",
    "TutorOutcome",
    "TutorReply",
    "UpstreamFailure",
    "build_system_prompt",
]
