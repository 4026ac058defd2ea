from .generation_client import PydanticAIGenerationClient

__all__ = ["PydanticAIGenerationClient"]
