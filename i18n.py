from typing import Callable, Optional

from fastapi import Request

from config import get_settings
from locales import LOCALES

LOCALE_PARAM = "lng"
LOCALE_COOKIE = "lng"

Translator = Callable[[str], str]


def _lookup(tree: dict, key: str) -> Optional[str]:
    node = tree
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(locale: str, key: str) -> str:
    """Перевод ключа вида 'flash.users.create.success' с откатом на локаль по умолчанию"""
    default_locale = get_settings().default_locale
    for candidate in (locale, default_locale):
        value = _lookup(LOCALES.get(candidate, {}), key)
        if value is not None:
            return value
    return key


def get_translator(locale: str) -> Translator:
    return lambda key: translate(locale, key)


def resolve_locale(request: Request) -> str:
    """Локаль из ?lng=, затем из cookie lng, затем по умолчанию"""
    for candidate in (request.query_params.get(LOCALE_PARAM), request.cookies.get(LOCALE_COOKIE)):
        if candidate in LOCALES:
            return candidate
    return get_settings().default_locale
