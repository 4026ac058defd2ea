"""
Domain layer.

Core content model of notedeck: owner-scoped named content sets (notes and
flashcard sets), their cards, and the error values their operations return.
Nothing here depends on the database or web framework.
"""
