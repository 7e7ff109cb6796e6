"""
Configuration for the YouTube summarizer.
Every value can be overridden via environment variables or a local .env file.
"""

import os
import json
from pathlib import Path
from typing import Dict, List, Any, Optional
from dataclasses import dataclass, field
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path('.env')
if env_path.exists():
    load_dotenv(dotenv_path=env_path)


def _parse_list_env(name: str, default: List[str]) -> List[str]:
    """Parse a comma separated environment variable into a list."""
    raw = os.getenv(name)
    if not raw:
        return default
    return [item.strip() for item in raw.split(',') if item.strip()]


def _parse_json_env(name: str, default: Dict[str, Any]) -> Dict[str, Any]:
    """Parse a JSON object environment variable, falling back to *default*."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return default
    return value if isinstance(value, dict) else default

# =============================================================================
# CORE APPLICATION SETTINGS
# =============================================================================

@dataclass
class AppConfig:
    """Core application configuration."""
    version: str = field(default_factory=lambda: os.getenv('APP_VERSION', '0.1.0'))
    debug: bool = field(default_factory=lambda: os.getenv('DEBUG', 'false').lower() == 'true')
    environment: str = field(default_factory=lambda: os.getenv('ENVIRONMENT', 'development'))

@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = field(default_factory=lambda: os.getenv('LOG_LEVEL', 'INFO'))
    format: str = field(default_factory=lambda: os.getenv('LOG_FORMAT', '%(asctime)s [%(name)s] %(levelname)s: %(message)s'))
    date_format: str = field(default_factory=lambda: os.getenv('LOG_DATE_FORMAT', '%Y-%m-%d %H:%M:%S'))

# =============================================================================
# NETWORK CONFIGURATION
# =============================================================================

@dataclass
class NetworkConfig:
    """HTTP transport configuration."""
    http_timeout_total: int = field(default_factory=lambda: int(os.getenv('HTTP_TIMEOUT_TOTAL', '30')))
    http_timeout_connect: int = field(default_factory=lambda: int(os.getenv('HTTP_TIMEOUT_CONNECT', '10')))
    user_agent: str = field(default_factory=lambda: os.getenv(
        'HTTP_USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124 Safari/537.36'
    ))
    accept_language: str = field(default_factory=lambda: os.getenv('HTTP_ACCEPT_LANGUAGE', 'en-US,en;q=0.8'))

# =============================================================================
# YOUTUBE CONFIGURATION
# =============================================================================

@dataclass
class YouTubeConfig:
    """Endpoints and client metadata used by the transcript pipeline."""
    base_url: str = field(default_factory=lambda: os.getenv('YOUTUBE_BASE_URL', 'https://www.youtube.com'))
    player_path: str = field(default_factory=lambda: os.getenv('YOUTUBE_PLAYER_PATH', '/youtubei/v1/player'))
    client_name: str = field(default_factory=lambda: os.getenv('YOUTUBE_CLIENT_NAME', 'WEB'))
    client_version: str = field(default_factory=lambda: os.getenv('YOUTUBE_CLIENT_VERSION', '2.20240726.00.00'))
    default_language: str = field(default_factory=lambda: os.getenv('YOUTUBE_DEFAULT_LANGUAGE', 'en'))
    thumbnail_base_url: str = field(default_factory=lambda: os.getenv('YOUTUBE_THUMBNAIL_BASE_URL', 'https://img.youtube.com/vi'))

    @property
    def player_url(self) -> str:
        return f"{self.base_url}{self.player_path}"

# =============================================================================
# LLM CONFIGURATION
# =============================================================================

@dataclass
class LLMConfig:
    """LLM configuration settings."""
    provider: Optional[str] = field(default_factory=lambda: os.getenv('LLM_PROVIDER') or None)
    default_model: str = field(default_factory=lambda: os.getenv('LLM_DEFAULT_MODEL', 'gemini-1.5-pro'))
    default_temperature: float = field(default_factory=lambda: float(os.getenv('LLM_DEFAULT_TEMPERATURE', '1.0')))
    default_max_tokens: Optional[int] = field(default_factory=lambda: int(os.getenv('LLM_DEFAULT_MAX_TOKENS', '3000')) or None)
    default_timeout: int = field(default_factory=lambda: int(os.getenv('LLM_DEFAULT_TIMEOUT', '60')))

    # Available models for selection
    available_models: List[str] = field(default_factory=lambda: _parse_list_env('LLM_AVAILABLE_MODELS', [
        'gemini-2.0-flash-exp', 'gemini-1.5-flash', 'gemini-1.5-flash-8b', 'gemini-1.5-pro',
        'gpt-4o-mini', 'gpt-4o',
        'claude-3-5-sonnet', 'claude-3-haiku'
    ]))

    # Environment variable holding the API key for each provider
    api_key_env: Dict[str, str] = field(default_factory=lambda: _parse_json_env('LLM_API_KEY_ENV', {
        'openai': 'OPENAI_API_KEY',
        'anthropic': 'ANTHROPIC_API_KEY',
        'google': 'GEMINI_API_KEY',
    }))

# =============================================================================
# SETTINGS STORE CONFIGURATION
# =============================================================================

@dataclass
class SettingsConfig:
    """Location of the persisted user settings."""
    settings_file: str = field(default_factory=lambda: os.getenv(
        'SETTINGS_FILE', str(Path.home() / '.youtube_summarizer' / 'settings.json')
    ))

# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

@dataclass
class Config:
    """Aggregated configuration."""
    app: AppConfig = field(default_factory=AppConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    youtube: YouTubeConfig = field(default_factory=YouTubeConfig)
    llm: LLMConfig = field(default_factory=LLMConfig)
    settings: SettingsConfig = field(default_factory=SettingsConfig)


def infer_provider(model: str) -> Optional[str]:
    """Infer the LLM provider from a model name prefix."""
    if model.startswith("gpt") or model.startswith("o1") or model.startswith("o3"):
        return "openai"
    if model.startswith("gemini"):
        return "google"
    if model.startswith("claude"):
        return "anthropic"
    return None


def validate_config(cfg: Optional[Config] = None) -> List[str]:
    """Return a list of configuration problems; empty when usable."""
    cfg = cfg or config
    problems = []

    provider = cfg.llm.provider or infer_provider(cfg.llm.default_model)
    if provider is None:
        problems.append(f"Cannot infer LLM provider for model '{cfg.llm.default_model}'; set LLM_PROVIDER")
    else:
        key_env = cfg.llm.api_key_env.get(provider)
        if not key_env:
            problems.append(f"Unsupported LLM provider: {provider}")
        elif not os.getenv(key_env):
            problems.append(f"{key_env} is not set")

    if cfg.network.http_timeout_total <= 0:
        problems.append("HTTP_TIMEOUT_TOTAL must be positive")

    return problems


config = Config()
