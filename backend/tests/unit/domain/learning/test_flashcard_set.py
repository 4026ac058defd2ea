"""Tests for FlashcardSet aggregate and Card entity."""

import pytest

from notedeck.domain.common.exceptions import ValidationError
from notedeck.domain.common.value_objects import CardId, FlashcardSetId, OwnerId
from notedeck.domain.learning.entities import Card, CardDraft, FlashcardSet


class TestFlashcardSet:
    def test_create_from_drafts_keeps_order(self) -> None:
        flashcard_set = FlashcardSet.create(
            OwnerId("owner-1"),
            "Capitals",
            [CardDraft("France?", "Paris"), CardDraft("Japan?", "Tokyo")],
        )

        assert not flashcard_set.id.is_persisted
        assert [card.answer for card in flashcard_set.cards] == ["Paris", "Tokyo"]
        assert flashcard_set.card_count == 2

    def test_create_without_cards(self) -> None:
        assert FlashcardSet.create(OwnerId("owner-1"), "Empty").cards == []

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            FlashcardSet.create(OwnerId("owner-1"), " ")

        assert exc_info.value.field == "name"
        assert "Flashcard set name" in exc_info.value.message

    def test_find_card(self) -> None:
        card = Card(id=CardId(4), question="Q", answer="A")
        flashcard_set = FlashcardSet(
            id=FlashcardSetId(1), owner=OwnerId("owner-1"), name="Set", cards=[card]
        )

        assert flashcard_set.find_card(CardId(4)) is card
        assert flashcard_set.find_card(CardId(5)) is None

    def test_identity_equality(self) -> None:
        first = FlashcardSet(id=FlashcardSetId(1), owner=OwnerId("a"), name="One")
        same_id = FlashcardSet(id=FlashcardSetId(1), owner=OwnerId("a"), name="Renamed")

        assert first == same_id


class TestIds:
    def test_owner_id_cannot_be_blank(self) -> None:
        with pytest.raises(ValueError):
            OwnerId("  ")

    def test_entity_id_cannot_be_negative(self) -> None:
        with pytest.raises(ValueError):
            CardId(-1)

    def test_placeholder_id(self) -> None:
        assert CardId.generate() == CardId(0)
        assert not CardId.generate().is_persisted
        assert CardId(3).is_persisted
