from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int


@dataclass(frozen=True)
class LanguageId(EntityId):
    """Strongly-typed catalog language identifier."""

    value: int


@dataclass(frozen=True)
class BookmarkId(EntityId):
    """Strongly-typed language bookmark identifier."""

    value: int


@dataclass(frozen=True)
class ChatMessageId(EntityId):
    """Strongly-typed chat message identifier."""

    value: int
