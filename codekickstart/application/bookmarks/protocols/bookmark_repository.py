from typing import Protocol

from codekickstart.domain.common.value_objects.ids import UserId


class BookmarkRepositoryProtocol(Protocol):
    def find_slugs_by_user(self, user_id: UserId) -> list[str]: ...

    def exists(self, user_id: UserId, language_slug: str) -> bool: ...

    def toggle(self, user_id: UserId, language_slug: str) -> bool: ...
