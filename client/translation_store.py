import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional
from core.i18n import TranslationContext
from utils.logger import get_logger

logger = get_logger("Translation_Store")

LANGUAGE_KEY = "language"

class PreferenceStore:
    """Tiny JSON-file key/value store for client preferences (the chosen language)."""
    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError):
            logger.exception(f"Could not read preferences from {self.path}")
            return {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError:
            logger.exception(f"Could not write preferences to {self.path}")

class TranslationStore:
    """
    Client-side translation table with an explicit lifecycle.

    load() fetches the table for the preferred locale once; t() loads lazily
    and echoes unknown keys; set_locale() persists the choice, invalidates the
    cached table and fetches the new one.
    """
    def __init__(
        self,
        fetch: Callable[[str], Dict[str, str]],
        preferences: Optional[PreferenceStore] = None,
        default_locale: str = "es",
    ):
        self._fetch = fetch
        self._preferences = preferences
        self._default_locale = default_locale
        self._context: Optional[TranslationContext] = None

    @property
    def locale(self) -> str:
        if self._preferences is not None:
            return self._preferences.get(LANGUAGE_KEY) or self._default_locale
        return self._default_locale

    @property
    def loaded(self) -> bool:
        return self._context is not None

    def load(self) -> TranslationContext:
        if self._context is None:
            locale = self.locale
            try:
                table = self._fetch(locale) or {}
            except Exception:
                # a failed fetch leaves an empty table; keys echo back
                logger.exception(f"Failed to load translations for {locale}")
                table = {}
            self._context = TranslationContext(locale, table)
            logger.info(f"Loaded {len(table)} translations for {locale}")
        return self._context

    def invalidate(self) -> None:
        self._context = None

    def set_locale(self, locale: str) -> None:
        if self._preferences is not None:
            self._preferences.set(LANGUAGE_KEY, locale)
        else:
            self._default_locale = locale
        self.invalidate()
        self.load()

    def t(self, key: str) -> str:
        return self.load().t(key)
