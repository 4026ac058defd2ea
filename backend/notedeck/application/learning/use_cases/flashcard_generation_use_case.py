"""Use case that turns a note into validated flashcards."""

import asyncio

import structlog

from notedeck.application.common.exceptions import GenerationServiceError
from notedeck.application.common.result import Failure, Result, Success
from notedeck.application.learning.protocols import GenerationClientProtocol
from notedeck.application.learning.services import (
    GeneratedCard,
    build_prompt,
    parse_and_validate,
)
from notedeck.application.notes.protocols import NoteRepositoryProtocol
from notedeck.domain.common.value_objects import OwnerId
from notedeck.domain.learning.errors import GenerationError, GenerationErrorKind

logger = structlog.get_logger(__name__)


class FlashcardGenerationUseCase:
    def __init__(
        self,
        note_repository: NoteRepositoryProtocol,
        generation_client: GenerationClientProtocol,
        study_domain: str | None = None,
    ) -> None:
        self.note_repository = note_repository
        self.generation_client = generation_client
        self.study_domain = study_domain

    async def generate(self, owner: str, name: str) -> Result[list[GeneratedCard], GenerationError]:
        """
        Generate flashcards from a note's body.

        The generation service is called exactly once; failures are not retried.

        Args:
            owner: Owner of the note
            name: Name of the note

        Returns:
            Success with at most 25 validated cards (possibly none), or the
            first error encountered
        """
        owner_id = OwnerId(owner)
        # The repository is synchronous; keep its query off the event loop
        note = await asyncio.to_thread(
            self.note_repository.find_by_owner_and_name, owner_id, name
        )
        if note is None:
            return Failure(
                GenerationError(
                    GenerationErrorKind.NOT_FOUND,
                    f"Note named '{name}' not found for owner {owner_id}.",
                )
            )

        prompt = build_prompt(note.body, study_domain=self.study_domain)
        try:
            raw_text = await self.generation_client.generate(prompt)
        except GenerationServiceError as e:
            logger.error("flashcard_generation_service_failed", note_id=note.id.value, error=str(e))
            return Failure(
                GenerationError(
                    GenerationErrorKind.SERVICE_ERROR, f"Generation service failed: {e}"
                )
            )

        result = parse_and_validate(raw_text)
        if result.is_failure:
            error = result.unwrap_error()
            logger.warning(
                "flashcard_generation_rejected",
                note_id=note.id.value,
                kind=error.kind.value,
                reason=error.message,
            )
            return result

        cards = result.unwrap()
        logger.info("flashcards_generated", note_id=note.id.value, card_count=len(cards))
        return Success(cards)
