from typing import Protocol

from codekickstart.domain.common.value_objects.ids import UserId
from codekickstart.domain.tutor.entities.chat_message import ChatMessage


class ChatMessageRepositoryProtocol(Protocol):
    def find_by_user(
        self, user_id: UserId, language_slug: str | None = None
    ) -> list[ChatMessage]: ...

    def append(self, message: ChatMessage) -> ChatMessage: ...
