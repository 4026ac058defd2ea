"""notedeck: owner-scoped notes and flashcard sets with ranked search and AI card generation."""
