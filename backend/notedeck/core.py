from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from notedeck.application.learning.use_cases import (
    FlashcardGenerationUseCase,
    FlashcardSetUseCase,
)
from notedeck.application.notes.use_cases import NoteUseCase
from notedeck.application.search.use_cases import ContentSearchUseCase
from notedeck.config import get_settings
from notedeck.infrastructure.ai import PydanticAIGenerationClient
from notedeck.infrastructure.learning.repositories import FlashcardSetRepository
from notedeck.infrastructure.notes.repositories import NoteRepository
from notedeck.infrastructure.search import ContentSearchIndex, FullTextIndex


def _study_domain() -> str | None:
    return get_settings().GENERATION_STUDY_DOMAIN


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    note_repository = providers.Factory(NoteRepository, db=db)
    flashcard_set_repository = providers.Factory(FlashcardSetRepository, db=db)

    # Full-text indexes live as long as the engine; sessions are passed per call
    note_full_text_index = providers.Singleton(FullTextIndex, table_name="notes")
    flashcard_set_full_text_index = providers.Singleton(FullTextIndex, table_name="flashcard_sets")

    note_search_index = providers.Factory(
        ContentSearchIndex,
        db=db,
        full_text_index=note_full_text_index,
        repository=note_repository,
    )
    flashcard_set_search_index = providers.Factory(
        ContentSearchIndex,
        db=db,
        full_text_index=flashcard_set_full_text_index,
        repository=flashcard_set_repository,
    )

    # AI services
    generation_client = providers.Singleton(PydanticAIGenerationClient)

    # Notes module
    note_use_case = providers.Factory(NoteUseCase, note_repository=note_repository)
    note_search_use_case = providers.Factory(ContentSearchUseCase, search_index=note_search_index)

    # Learning module
    flashcard_set_use_case = providers.Factory(
        FlashcardSetUseCase,
        flashcard_set_repository=flashcard_set_repository,
    )
    flashcard_set_search_use_case = providers.Factory(
        ContentSearchUseCase,
        search_index=flashcard_set_search_index,
    )
    flashcard_generation_use_case = providers.Factory(
        FlashcardGenerationUseCase,
        note_repository=note_repository,
        generation_client=generation_client,
        study_domain=providers.Callable(_study_domain),
    )


# Initialize container
container = Container()
