"""Tests for the LanguageEntry entity and the reference catalog."""

import pytest

from codekickstart.domain.catalog.entities.language import LanguageEntry, Resources
from codekickstart.domain.catalog.reference_languages import (
    REFERENCE_SLUGS,
    get_reference_languages,
)
from codekickstart.domain.catalog.seed_status import SeedStatus
from codekickstart.domain.common.exceptions import ValidationError


def _entry(slug: str = "go", name: str = "Go") -> LanguageEntry:
    return LanguageEntry.create(
        slug=slug,
        name=name,
        icon="🐹",
        description="A simple language",
        purpose="Cloud services",
    )


class TestLanguageEntry:
    def test_create_is_not_persisted(self) -> None:
        entry = _entry()
        assert not entry.id.is_persisted()
        assert entry.resources == Resources()
        assert entry.concepts == ()

    @pytest.mark.parametrize("slug", ["", "Go", " go", "x" * 51])
    def test_invalid_slug(self, slug: str) -> None:
        with pytest.raises(ValidationError):
            _entry(slug=slug)

    def test_empty_name(self) -> None:
        with pytest.raises(ValidationError):
            _entry(name="")


class TestReferenceLanguages:
    def test_slugs_in_display_order(self) -> None:
        assert [entry.slug for entry in get_reference_languages()] == list(REFERENCE_SLUGS)

    def test_slugs_are_unique(self) -> None:
        assert len(set(REFERENCE_SLUGS)) == len(REFERENCE_SLUGS)

    def test_every_entry_is_complete(self) -> None:
        for entry in get_reference_languages():
            assert entry.concepts, entry.slug
            assert entry.resources.websites, entry.slug
            assert entry.resources.videos, entry.slug
            assert entry.resources.books, entry.slug

    def test_entries_are_unpersisted(self) -> None:
        assert not any(entry.id.is_persisted() for entry in get_reference_languages())


class TestSeedStatus:
    def test_values(self) -> None:
        assert SeedStatus.SEEDED == "seeded"
        assert SeedStatus.ALREADY_SEEDED == "already_seeded"

    def test_messages(self) -> None:
        assert SeedStatus.SEEDED.message == "Languages seeded successfully"
        assert SeedStatus.ALREADY_SEEDED.message == "Languages already seeded"
