"""
Chat model client.

One client per process. It holds no per-request state, so every request
shares it; tests replace it through the ``get_chat_model`` dependency.
"""

from functools import lru_cache

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from backend.config import settings
from backend.errors import ConfigurationError


@lru_cache(maxsize=1)
def get_chat_model() -> BaseChatModel:
    """Get or create the chat model."""
    if not settings.openai_api_key:
        raise ConfigurationError("OPENAI_API_KEY not configured")

    return ChatOpenAI(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        temperature=settings.generation_temperature,  # Default, overridden per call
        timeout=settings.llm_timeout,
        max_retries=settings.llm_max_retries,
    )
