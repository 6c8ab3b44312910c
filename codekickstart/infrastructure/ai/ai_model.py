from functools import lru_cache

from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from codekickstart.config import get_settings
from codekickstart.exceptions import CodeKickstartError


class AIProviderNotConfiguredError(CodeKickstartError):
    """Raised when the tutor is used without an AI provider configured."""

    def __init__(self) -> None:
        super().__init__(
            "No AI provider configured, set AI_PROVIDER to enable the tutor",
            status_code=503,
        )


def _get_model() -> Model:
    """
    Get Pydantic AI chat-completion model depending on environment settings.
    """
    settings = get_settings()

    if settings.AI_PROVIDER == "ollama":
        # Guaranteed by the settings validator
        assert settings.OPENAI_BASE_URL is not None
        return OpenAIChatModel(
            model_name=settings.AI_MODEL_NAME,
            provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL),
        )

    if settings.AI_PROVIDER == "openai":
        # Guaranteed by the settings validator
        assert settings.OPENAI_API_KEY is not None
        return OpenAIChatModel(
            model_name=settings.AI_MODEL_NAME,
            provider=OpenAIProvider(
                api_key=settings.OPENAI_API_KEY,
                base_url=settings.OPENAI_BASE_URL,
            ),
        )

    raise AIProviderNotConfiguredError


@lru_cache
def get_ai_model() -> Model:
    """
    Get cached AI model. The model and its HTTP client are only built on the
    first tutor call, so the app starts without AI settings.
    """
    return _get_model()
