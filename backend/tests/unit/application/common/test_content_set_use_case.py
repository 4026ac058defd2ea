"""Tests for the shared content set store operations."""

from unittest.mock import MagicMock

import pytest

from notedeck.application.common.exceptions import DuplicateContentSetError
from notedeck.application.learning.use_cases import FlashcardSetUseCase
from notedeck.application.notes.use_cases import NoteUseCase
from notedeck.domain.common.errors import StoreErrorKind
from notedeck.domain.common.exceptions import ValidationError
from notedeck.domain.common.value_objects import CardId, FlashcardSetId, NoteId, OwnerId
from notedeck.domain.learning.entities import Card, CardDraft, FlashcardSet
from notedeck.domain.notes.entities import Note


@pytest.fixture
def repository() -> MagicMock:
    repository = MagicMock()
    repository.find_by_owner_and_name.return_value = None
    repository.add.side_effect = lambda entity: entity
    return repository


class TestCreate:
    def test_create_builds_unsaved_entity(self, repository: MagicMock) -> None:
        result = NoteUseCase(repository).create("owner-1", "Biology", "Cells.")

        note = result.unwrap()
        assert isinstance(note, Note)
        assert note.owner == OwnerId("owner-1")
        assert note.body == "Cells."
        assert not note.id.is_persisted

    def test_duplicate_detected_up_front(self, repository: MagicMock) -> None:
        repository.find_by_owner_and_name.return_value = Note.create(
            OwnerId("owner-1"), "Biology", ""
        )

        result = NoteUseCase(repository).create("owner-1", "Biology", "Cells.")

        assert result.unwrap_error().kind == StoreErrorKind.DUPLICATE_NAME
        repository.add.assert_not_called()

    def test_duplicate_from_racing_insert(self, repository: MagicMock) -> None:
        repository.add.side_effect = DuplicateContentSetError("owner-1", "Biology")

        result = NoteUseCase(repository).create("owner-1", "Biology", "Cells.")

        assert result.unwrap_error().kind == StoreErrorKind.DUPLICATE_NAME

    def test_blank_name_rejected(self, repository: MagicMock) -> None:
        with pytest.raises(ValidationError):
            NoteUseCase(repository).create("owner-1", "  ", "Cells.")

    def test_flashcard_set_cards_from_drafts(self, repository: MagicMock) -> None:
        drafts = [CardDraft("Q1", "A1"), CardDraft("Q2", "A2")]

        flashcard_set = FlashcardSetUseCase(repository).create("owner-1", "Set", drafts).unwrap()

        assert [(c.question, c.answer) for c in flashcard_set.cards] == [("Q1", "A1"), ("Q2", "A2")]


class TestRemoveAndGet:
    def test_remove_missing(self, repository: MagicMock) -> None:
        repository.delete.return_value = False

        result = NoteUseCase(repository).remove("owner-1", "Biology")

        assert result.unwrap_error().kind == StoreErrorKind.NOT_FOUND

    def test_remove(self, repository: MagicMock) -> None:
        repository.delete.return_value = True

        result = NoteUseCase(repository).remove("owner-1", "Biology")

        assert result.is_success
        repository.delete.assert_called_once_with(OwnerId("owner-1"), "Biology")

    def test_get_missing(self, repository: MagicMock) -> None:
        result = NoteUseCase(repository).get("owner-1", "Biology")

        error = result.unwrap_error()
        assert error.kind == StoreErrorKind.NOT_FOUND
        assert "Biology" in error.message

    def test_get_by_ids_empty_skips_repository(self, repository: MagicMock) -> None:
        assert NoteUseCase(repository).get_by_ids([]) == []
        repository.find_by_ids.assert_not_called()


class TestCards:
    @pytest.fixture
    def flashcard_set(self) -> FlashcardSet:
        return FlashcardSet(
            id=FlashcardSetId(3),
            owner=OwnerId("owner-1"),
            name="Capitals",
            cards=[Card(id=CardId(10), question="Q", answer="A")],
        )

    def test_remove_card_returns_card(
        self, repository: MagicMock, flashcard_set: FlashcardSet
    ) -> None:
        repository.find_by_owner_and_name.return_value = flashcard_set
        repository.remove_card.return_value = True

        result = FlashcardSetUseCase(repository).remove_card("owner-1", "Capitals", 10)

        assert result.unwrap() == Card(id=CardId(10), question="Q", answer="A")
        repository.remove_card.assert_called_once_with(FlashcardSetId(3), CardId(10))

    @pytest.mark.parametrize("card_id", [11, 0, -1])
    def test_remove_unknown_card(
        self, repository: MagicMock, flashcard_set: FlashcardSet, card_id: int
    ) -> None:
        repository.find_by_owner_and_name.return_value = flashcard_set

        result = FlashcardSetUseCase(repository).remove_card("owner-1", "Capitals", card_id)

        assert result.unwrap_error().kind == StoreErrorKind.NOT_FOUND
        repository.remove_card.assert_not_called()

    def test_add_card_to_missing_set(self, repository: MagicMock) -> None:
        result = FlashcardSetUseCase(repository).add_card("owner-1", "Capitals", "Q", "A")

        assert result.unwrap_error().kind == StoreErrorKind.NOT_FOUND
        repository.add_card.assert_not_called()
