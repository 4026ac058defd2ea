from .flashcard_generation_use_case import FlashcardGenerationUseCase
from .flashcard_set_use_case import FlashcardSetUseCase

__all__ = ["FlashcardGenerationUseCase", "FlashcardSetUseCase"]
