from typing import Protocol


class GenerationClientProtocol(Protocol):
    async def generate(self, prompt: str) -> str:
        """
        Send one prompt to the generative text service.

        Returns:
            Raw reply text, unvalidated

        Raises:
            GenerationServiceError: On any transport or provider failure
        """
        ...
