from .flashcard_generation_contract import (
    MAX_FIELD_LENGTH,
    MAX_GENERATED_CARDS,
    GeneratedCard,
    build_prompt,
    parse_and_validate,
)

__all__ = [
    "MAX_FIELD_LENGTH",
    "MAX_GENERATED_CARDS",
    "GeneratedCard",
    "build_prompt",
    "parse_and_validate",
]
