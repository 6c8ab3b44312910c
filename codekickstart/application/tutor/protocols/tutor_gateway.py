from typing import Protocol

from codekickstart.domain.catalog.entities.language import LanguageEntry
from codekickstart.domain.tutor.replies import TutorOutcome


class TutorGatewayProtocol(Protocol):
    async def ask(self, prompt: str, language: LanguageEntry | None) -> TutorOutcome: ...
