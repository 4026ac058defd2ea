from functools import lru_cache

from anthropic import AsyncAnthropic
from google import genai
from google.genai.types import HttpOptions, HttpRetryOptions
from openai import AsyncOpenAI
from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from notedeck.config import Settings, get_settings

# A generation request is sent once; the SDKs retry twice unless told otherwise.
MAX_SDK_RETRIES = 0

# Ollama ignores the key, but the OpenAI client refuses to start without one.
OLLAMA_PLACEHOLDER_API_KEY = "ollama"


def build_model(settings: Settings) -> Model:
    """
    Build the Pydantic AI model for the configured provider.

    Every provider gets an explicitly constructed SDK client with retries
    switched off, so a failed call surfaces straight away as a service error.

    Raises:
        ValueError: If the provider is unknown
    """
    # Presence of the model name and credentials is guaranteed by the settings validator
    model_name = settings.AI_MODEL_NAME
    assert model_name is not None

    match settings.AI_PROVIDER:
        case "ollama":
            assert settings.OPENAI_BASE_URL is not None
            client = AsyncOpenAI(
                base_url=settings.OPENAI_BASE_URL,
                api_key=settings.OPENAI_API_KEY or OLLAMA_PLACEHOLDER_API_KEY,
                max_retries=MAX_SDK_RETRIES,
            )
            return OpenAIChatModel(model_name, provider=OllamaProvider(openai_client=client))
        case "openai":
            assert settings.OPENAI_API_KEY is not None
            client = AsyncOpenAI(
                api_key=settings.OPENAI_API_KEY,
                base_url=settings.OPENAI_BASE_URL,
                max_retries=MAX_SDK_RETRIES,
            )
            return OpenAIChatModel(model_name, provider=OpenAIProvider(openai_client=client))
        case "anthropic":
            assert settings.ANTHROPIC_API_KEY is not None
            anthropic_client = AsyncAnthropic(
                api_key=settings.ANTHROPIC_API_KEY, max_retries=MAX_SDK_RETRIES
            )
            return AnthropicModel(
                model_name, provider=AnthropicProvider(anthropic_client=anthropic_client)
            )
        case "google":
            assert settings.GEMINI_API_KEY is not None
            google_client = genai.Client(
                api_key=settings.GEMINI_API_KEY,
                # attempts counts the first call
                http_options=HttpOptions(retry_options=HttpRetryOptions(attempts=1)),
            )
            return GoogleModel(model_name, provider=GoogleProvider(client=google_client))
    raise ValueError(f"No such AI model provider available: {settings.AI_PROVIDER!r}")


@lru_cache
def get_ai_model() -> Model:
    """Model for the process settings, built on first use."""
    return build_model(get_settings())
