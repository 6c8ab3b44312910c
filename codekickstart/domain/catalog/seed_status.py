from enum import StrEnum


class SeedStatus(StrEnum):
    """Outcome of a catalog seed request."""

    SEEDED = "seeded"
    ALREADY_SEEDED = "already_seeded"

    @property
    def message(self) -> str:
        if self is SeedStatus.SEEDED:
            return "Languages seeded successfully"
        return "Languages already seeded"
