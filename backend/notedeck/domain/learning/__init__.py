"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Flashcard sets and their cards
- Error kinds of the flashcard generation pipeline

Aggregates:
- FlashcardSet: named, owner-scoped ordered collection of cards
"""
