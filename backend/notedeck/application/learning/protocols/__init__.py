from .flashcard_set_repository import FlashcardSetRepositoryProtocol
from .generation_client import GenerationClientProtocol

__all__ = ["FlashcardSetRepositoryProtocol", "GenerationClientProtocol"]
