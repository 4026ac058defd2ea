from pydantic_ai import Agent

from notedeck.config import get_settings
from notedeck.infrastructure.ai.ai_model import get_ai_model


def get_flashcard_agent() -> Agent[None, str]:
    """
    Plain-text agent for flashcard generation.

    The prompt carries its own output format; the reply is returned verbatim
    and validated by the caller.
    """
    settings = get_settings()
    return Agent(
        get_ai_model(),
        output_type=str,
        model_settings={"max_tokens": settings.GENERATION_MAX_OUTPUT_TOKENS},
    )
