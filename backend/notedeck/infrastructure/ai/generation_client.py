"""Generation client backed by a pydantic-ai agent."""

import structlog

from notedeck.application.common.exceptions import GenerationServiceError
from notedeck.infrastructure.ai.ai_agents import get_flashcard_agent

logger = structlog.get_logger(__name__)


class PydanticAIGenerationClient:
    async def generate(self, prompt: str) -> str:
        """
        Send one prompt and return the raw reply text.

        Raises:
            GenerationServiceError: If the provider could not be reached or
                failed to answer; the call is not retried
        """
        try:
            agent = get_flashcard_agent()
            result = await agent.run(prompt)
        except Exception as e:
            logger.error("generation_request_failed", error=str(e), error_type=type(e).__name__)
            raise GenerationServiceError(str(e)) from e

        logger.debug("generation_request_completed", usage=str(result.usage()))
        return result.output
