"""Outcomes of a tutor gateway call."""

from dataclasses import dataclass

from codekickstart.domain.common.value_object import ValueObject

# Shown to the user instead of an error when the tutor cannot be reached
APOLOGY_MESSAGE = "I'm having trouble connecting right now. Please try again in a moment! 🤖"

# Stored when the tutor answered with no text
EMPTY_RESPONSE_MESSAGE = "I'm sorry, I couldn't generate a response. Please try again."


@dataclass(frozen=True)
class TutorReply(ValueObject):
    """Text generated by the tutor."""

    text: str


@dataclass(frozen=True)
class UpstreamFailure(ValueObject):
    """The completion service could not be reached or returned an error."""

    reason: str


TutorOutcome = TutorReply | UpstreamFailure
