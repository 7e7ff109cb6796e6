"""Key-value store for user settings, persisted as a JSON file."""

import json
from dataclasses import asdict, dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.config import config
from ..utils.logging import get_logger
from .prompt_service import DEFAULT_PROMPT

logger = get_logger("settings_store")


@dataclass
class UserSettings:
    """Settings a user can customize."""
    provider: Optional[str] = field(default_factory=lambda: config.llm.provider)
    model: str = field(default_factory=lambda: config.llm.default_model)
    custom_prompt: str = DEFAULT_PROMPT
    max_tokens: int = 3000
    temperature: float = 1.0
    language: str = field(default_factory=lambda: config.youtube.default_language)

    @classmethod
    def field_names(cls) -> set:
        return {f.name for f in fields(cls)}


def _known_settings(values: Dict[str, Any]) -> Dict[str, Any]:
    known = UserSettings.field_names()
    return {key: value for key, value in values.items() if key in known}


class SettingsStore:
    """
    Loads and saves user settings.

    The file holds ``{"settings": {...}}``; stored values are merged over
    the defaults on load, and unknown keys are dropped.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or config.settings.settings_file)
        self._settings: Optional[UserSettings] = None

    def load(self) -> UserSettings:
        """Load settings from disk, falling back to defaults."""
        defaults = UserSettings()
        if not self.path.exists():
            self._settings = defaults
            return replace(self._settings)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            stored = data.get("settings") if isinstance(data, dict) else None
            if isinstance(stored, dict):
                self._settings = replace(defaults, **_known_settings(stored))
            else:
                self._settings = defaults
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Failed to load settings from {self.path}: {e}")
            self._settings = defaults

        return replace(self._settings)

    def save(self) -> None:
        """Persist the current settings."""
        settings = self._settings or UserSettings()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump({"settings": asdict(settings)}, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"Failed to save settings to {self.path}: {e}")
            raise

    def get_settings(self) -> UserSettings:
        """Return a copy of the current settings, loading them on first use."""
        if self._settings is None:
            self.load()
        return replace(self._settings)

    def update_settings(self, **values: Any) -> UserSettings:
        """Merge *values* into the current settings and save them."""
        current = self.get_settings()
        if not values:
            return current

        self._settings = replace(current, **_known_settings(values))
        self.save()
        return replace(self._settings)
