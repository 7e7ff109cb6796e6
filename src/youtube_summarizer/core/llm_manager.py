"""Unified LLM management for consistent model initialization."""

import os
from typing import Optional, Dict, Any
from dataclasses import dataclass

from langchain_anthropic import ChatAnthropic
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from ..utils.logging import get_logger
from .config import config, infer_provider

logger = get_logger("llm_manager")

SUPPORTED_PROVIDERS = ("openai", "anthropic", "google")


@dataclass
class LLMSettings:
    """Model settings for a single LLM instance."""
    model: str = config.llm.default_model
    temperature: float = config.llm.default_temperature
    max_tokens: Optional[int] = config.llm.default_max_tokens
    timeout: int = config.llm.default_timeout
    provider: Optional[str] = None

    @property
    def resolved_provider(self) -> Optional[str]:
        return self.provider or infer_provider(self.model)


class LLMManager:
    """Builds and caches LangChain chat models per provider/model/settings."""

    def __init__(self):
        self._llm_cache: Dict[str, Any] = {}

    def get_settings(self) -> LLMSettings:
        """Get LLM settings from environment or defaults."""
        return LLMSettings(
            model=os.environ.get("LLM_MODEL", config.llm.default_model),
            temperature=float(os.environ.get("LLM_TEMPERATURE", str(config.llm.default_temperature))),
            max_tokens=int(os.environ.get("LLM_MAX_TOKENS", "0")) or config.llm.default_max_tokens,
            timeout=int(os.environ.get("LLM_TIMEOUT", str(config.llm.default_timeout))),
            provider=os.environ.get("LLM_PROVIDER") or config.llm.provider
        )

    def _get_cache_key(self, settings: LLMSettings) -> str:
        """Generate cache key for LLM instance."""
        return (
            f"{settings.resolved_provider or 'default'}_{settings.model}_"
            f"{settings.temperature}_{settings.max_tokens}"
        )

    def _credentials(self, provider: str, argument: str) -> Dict[str, str]:
        """Keyword argument carrying the provider API key, empty when unset."""
        env_name = config.llm.api_key_env.get(provider)
        api_key = os.getenv(env_name) if env_name else None
        return {argument: api_key} if api_key else {}

    def get_llm(self, settings: Optional[LLMSettings] = None) -> Any:
        """
        Get a LangChain chat model for *settings*.

        Raises:
            ValueError: If the provider cannot be determined or is unsupported
        """
        settings = settings or self.get_settings()
        cache_key = self._get_cache_key(settings)
        if cache_key in self._llm_cache:
            return self._llm_cache[cache_key]

        provider = settings.resolved_provider
        if provider not in SUPPORTED_PROVIDERS:
            raise ValueError(
                f"Unsupported model/provider combination: {settings.model} with provider {provider}. "
                f"Supported providers: {', '.join(SUPPORTED_PROVIDERS)}"
            )

        logger.info(f"Creating LLM: {settings.model} (temp: {settings.temperature}, provider: {provider or 'unknown'})")

        if provider == "openai":
            llm = ChatOpenAI(
                model=settings.model,
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
                timeout=settings.timeout,
                **self._credentials("openai", "api_key")
            )
        elif provider == "anthropic":
            llm = ChatAnthropic(
                model=settings.model,
                temperature=settings.temperature,
                max_tokens=settings.max_tokens or 1024,
                timeout=settings.timeout,
                **self._credentials("anthropic", "api_key")
            )
        else:
            llm = ChatGoogleGenerativeAI(
                model=settings.model,
                temperature=settings.temperature,
                max_output_tokens=settings.max_tokens,
                timeout=settings.timeout,
                **self._credentials("google", "google_api_key")
            )

        self._llm_cache[cache_key] = llm
        return llm

    def clear_cache(self) -> None:
        """Clear LLM cache."""
        logger.info(f"Clearing LLM cache ({len(self._llm_cache)} instances)")
        self._llm_cache.clear()
