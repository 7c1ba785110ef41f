"""
cli/i18n/__init__.py - Internationalization (i18n) Module

Provides translation support for the CLI.
Korean (ko) is the default language, with English (en) as an option.

Architecture:
    - Messages are organized by namespace (cli, output, errors)
    - Translation function t() supports format string interpolation
    - Language comes from --lang, then AWSFED_LANG, then DEFAULT_LANG

Usage:
    from cli.i18n import t, set_lang

    set_lang("en")
    print(t("output.access_key"))  # "Access Key:"
    print(t("errors.exit_failure", message="boom"))
"""

from __future__ import annotations

import contextlib
import os
from contextvars import ContextVar
from typing import Any

# Supported languages
SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"
LANG_ENV_VAR = "AWSFED_LANG"

_current_lang: ContextVar[str] = ContextVar("lang", default=DEFAULT_LANG)


def get_lang() -> str:
    """Get current language from context variable."""
    return _current_lang.get()


def set_lang(lang: str | None) -> None:
    """Set current language in context variable.

    Unsupported or empty values fall back to DEFAULT_LANG.
    """
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG
    _current_lang.set(lang)


def resolve_lang(lang: str | None = None) -> str:
    """Pick the language from an explicit value or the AWSFED_LANG environment variable."""
    candidate = (lang or os.environ.get(LANG_ENV_VAR) or DEFAULT_LANG).lower()
    return candidate if candidate in SUPPORTED_LANGS else DEFAULT_LANG


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Translate a message key to the current language.

    Args:
        key: Message key in namespace.key format (e.g., "output.access_key")
        lang: Optional language override. If not provided, uses context variable.
        **kwargs: Format string arguments for interpolation

    Returns:
        Translated string, or key if translation not found
    """
    from cli.i18n.messages import MESSAGES

    if lang is None:
        lang = get_lang()

    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG

    msg_dict = MESSAGES.get(key)
    if msg_dict is None:
        return key

    text = msg_dict.get(lang)
    if text is None:
        text = msg_dict.get(DEFAULT_LANG, key)

    if kwargs:
        with contextlib.suppress(KeyError, ValueError):
            text = text.format(**kwargs)

    return text


__all__ = [
    "t",
    "get_lang",
    "set_lang",
    "resolve_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
    "LANG_ENV_VAR",
]
