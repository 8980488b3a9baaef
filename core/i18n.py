import re
from typing import Any, Dict, Optional
from fastapi import Query, Request
from settings.config import settings
from utils.logger import get_logger

logger = get_logger("I18N")

LOCALE_RE = re.compile(r"^[a-z]{2}(-[A-Z]{2})?$")

def is_valid_locale(locale: Optional[str]) -> bool:
    return bool(locale) and bool(LOCALE_RE.match(locale))

def resolve_locale(*candidates: Optional[str]) -> str:
    """First supported candidate wins, otherwise the default locale."""
    for candidate in candidates:
        if candidate and candidate in settings.SUPPORTED_LOCALES:
            return candidate
    return settings.DEFAULT_LOCALE

def get_localized_value(value: Any, locale: str) -> str:
    """
    Pick the display string for `locale` out of a per-locale map.
    Plain strings are returned unchanged; missing locales fall back to the
    fallback locale and then to "".
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return value.get(locale) or value.get(settings.FALLBACK_LOCALE) or ""
    return str(value)

def merge_localized(existing: Any, locale: str, value: str) -> Dict[str, str]:
    """Write one locale's string into a per-locale map, keeping the others."""
    if isinstance(existing, dict):
        merged = dict(existing)
    elif isinstance(existing, str) and existing:
        merged = {settings.DEFAULT_LOCALE: existing}
    else:
        merged = {}
    merged[locale] = value
    return merged

class TranslationContext:
    """
    Request-scoped translation lookup.
    Built per request from the locale's table and passed explicitly to whoever
    needs it; `t()` echoes unknown keys back.
    """
    def __init__(self, locale: str, translations: Optional[Dict[str, str]] = None):
        self.locale = locale
        self.translations = translations or {}

    def t(self, key: str) -> str:
        return self.translations.get(key) or key

    def __contains__(self, key: str) -> bool:
        return key in self.translations

async def get_request_locale(
    request: Request,
    locale: Optional[str] = Query(None),
    lang: Optional[str] = Query(None),
) -> str:
    return resolve_locale(locale, lang, request.cookies.get(settings.LANGUAGE_COOKIE_NAME))

