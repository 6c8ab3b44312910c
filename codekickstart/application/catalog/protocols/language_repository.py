from typing import Protocol

from codekickstart.domain.catalog.entities.language import LanguageEntry


class LanguageRepositoryProtocol(Protocol):
    def list_all(self) -> list[LanguageEntry]: ...

    def find_by_slug(self, slug: str) -> LanguageEntry | None: ...

    def seed_if_empty(self, entries: list[LanguageEntry]) -> bool: ...
