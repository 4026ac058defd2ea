"""Tests for FlashcardGenerationUseCase."""

import threading
from unittest.mock import AsyncMock, MagicMock

import pytest

from notedeck.application.common.exceptions import GenerationServiceError
from notedeck.application.learning.services import GeneratedCard
from notedeck.application.learning.use_cases import FlashcardGenerationUseCase
from notedeck.domain.common.value_objects import NoteId, OwnerId
from notedeck.domain.learning.errors import GenerationErrorKind
from notedeck.domain.notes.entities import Note


def _note(body: str) -> Note:
    return Note(id=NoteId(7), owner=OwnerId("owner-1"), name="Cells", body=body)


@pytest.fixture
def note_repository() -> MagicMock:
    repository = MagicMock()
    repository.find_by_owner_and_name.return_value = _note("Mitochondria produce ATP.")
    return repository


@pytest.fixture
def generation_client() -> AsyncMock:
    client = AsyncMock()
    client.generate.return_value = (
        '{"cards": [{"id": 1, "question": "What produces ATP?", "answer": "Mitochondria"}]}'
    )
    return client


class TestFlashcardGenerationUseCase:
    @pytest.mark.asyncio
    async def test_success(
        self, note_repository: MagicMock, generation_client: AsyncMock
    ) -> None:
        use_case = FlashcardGenerationUseCase(note_repository, generation_client)

        result = await use_case.generate("owner-1", "Cells")

        assert result.unwrap() == [
            GeneratedCard(question="What produces ATP?", answer="Mitochondria")
        ]
        note_repository.find_by_owner_and_name.assert_called_once_with(
            OwnerId("owner-1"), "Cells"
        )

    @pytest.mark.asyncio
    async def test_prompt_uses_study_domain(
        self, note_repository: MagicMock, generation_client: AsyncMock
    ) -> None:
        use_case = FlashcardGenerationUseCase(
            note_repository, generation_client, study_domain="cell biology"
        )

        await use_case.generate("owner-1", "Cells")

        prompt = generation_client.generate.await_args.args[0]
        assert "The notes are about cell biology." in prompt
        assert "Mitochondria produce ATP." in prompt

    @pytest.mark.asyncio
    async def test_missing_note(
        self, note_repository: MagicMock, generation_client: AsyncMock
    ) -> None:
        note_repository.find_by_owner_and_name.return_value = None
        use_case = FlashcardGenerationUseCase(note_repository, generation_client)

        result = await use_case.generate("owner-1", "Cells")

        assert result.unwrap_error().kind == GenerationErrorKind.NOT_FOUND
        generation_client.generate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_service_error_not_retried(
        self, note_repository: MagicMock, generation_client: AsyncMock
    ) -> None:
        generation_client.generate.side_effect = GenerationServiceError("timeout")
        use_case = FlashcardGenerationUseCase(note_repository, generation_client)

        result = await use_case.generate("owner-1", "Cells")

        error = result.unwrap_error()
        assert error.kind == GenerationErrorKind.SERVICE_ERROR
        assert "timeout" in error.message
        assert generation_client.generate.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_note_still_calls_service(
        self, note_repository: MagicMock, generation_client: AsyncMock
    ) -> None:
        note_repository.find_by_owner_and_name.return_value = _note("")
        generation_client.generate.return_value = '{"cards": []}'
        use_case = FlashcardGenerationUseCase(note_repository, generation_client)

        result = await use_case.generate("owner-1", "Cells")

        assert result.unwrap() == []
        generation_client.generate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_reply(
        self, note_repository: MagicMock, generation_client: AsyncMock
    ) -> None:
        generation_client.generate.return_value = "not json"
        use_case = FlashcardGenerationUseCase(note_repository, generation_client)

        result = await use_case.generate("owner-1", "Cells")

        assert result.unwrap_error().kind == GenerationErrorKind.PARSE_ERROR

    @pytest.mark.asyncio
    async def test_note_lookup_runs_off_event_loop_thread(
        self, note_repository: MagicMock, generation_client: AsyncMock
    ) -> None:
        lookup_threads: list[int] = []

        def find_by_owner_and_name(owner: OwnerId, name: str) -> Note:
            lookup_threads.append(threading.get_ident())
            return _note("Mitochondria produce ATP.")

        note_repository.find_by_owner_and_name.side_effect = find_by_owner_and_name
        use_case = FlashcardGenerationUseCase(note_repository, generation_client)

        result = await use_case.generate("owner-1", "Cells")

        assert result.is_success
        assert lookup_threads
        assert lookup_threads[0] != threading.get_ident()
