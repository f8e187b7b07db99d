"""Internationalization service for errorviews."""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any, cast

from errorviews.logger import get_logger
from errorviews.services.i18n.locale import normalize_locale

logger = get_logger(__name__)


class I18nService:
    """
    Locale-aware message store backed by a JSON resource file.

    Every message key maps to its translations:
    {
        "exception.defaultMessage": { "en": "Something went wrong", "zh": "系统错误" },
        "ORDER_NOT_FOUND": { "en": "Order {0} does not exist", "zh": "订单 {0} 不存在" },
        "builtins.TimeoutError": "Timed out"
    }

    Keys are looked up flat first, then as dotted paths into nested objects,
    so ``{"order": {"not_found": {...}}}`` also serves ``order.not_found``.
    A plain string value is used for every locale.
    """

    def __init__(self, messages_file: Path, fallback_locale: str | None = "en") -> None:
        """
        Initialize I18n service.

        Args:
            messages_file: Path to the JSON message file
            fallback_locale: Locale tried after the requested one and its language
        """
        self.messages_file = messages_file
        self.fallback_locale = fallback_locale
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load message data from file."""
        try:
            if self.messages_file.exists():
                with open(self.messages_file, encoding="utf-8") as f:
                    self._data = json.load(f)
                logger.info("Loaded message resources", path=str(self.messages_file))
            else:
                logger.warning("Message resource file not found", path=str(self.messages_file))
                self._data = {}
        except (OSError, ValueError) as e:
            logger.error("Failed to load message resource file", path=str(self.messages_file), error=str(e))
            self._data = {}

    def _lookup_entry(self, key: str) -> Any:  # noqa: ANN401
        if key in self._data:
            return self._data[key]

        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def candidate_locales(self, locale: str | None) -> list[str]:
        """
        Locales to try for a lookup, most specific first.

        ``zh-CN`` yields ``["zh_CN", "zh", <fallback>]``.
        """
        candidates: list[str] = []
        if locale:
            normalized = normalize_locale(locale)
            candidates.append(normalized)
            language = normalized.split("_", 1)[0]
            if language != normalized:
                candidates.append(language)
        if self.fallback_locale:
            fallback = normalize_locale(self.fallback_locale)
            if fallback not in candidates:
                candidates.append(fallback)
        return candidates

    def resolve_template(self, key: str, locale: str | None) -> str | None:
        """
        Get the raw message template for a key.

        Args:
            key: Message key (e.g., "exception.defaultMessage")
            locale: Requested locale (e.g., "zh_CN", "en")

        Returns:
            The template, or None if no locale candidate has one
        """
        entry = self._lookup_entry(key)
        if isinstance(entry, str):
            return entry
        if not isinstance(entry, dict):
            return None

        for candidate in self.candidate_locales(locale):
            text = entry.get(candidate)
            if isinstance(text, str):
                return cast(str, text)
        return None

    def get_message(
        self,
        key: str,
        args: Sequence[object] | None = None,
        default: str | None = None,
        locale: str | None = None,
    ) -> str:
        """
        Get a localized message. Never raises.

        Args:
            key: Message key
            args: Positional values for ``{0}``-style placeholders
            default: Returned (formatted with ``args``) when the key is missing
            locale: Requested locale

        Returns:
            Localized message, ``default`` if not found, or ``key`` when no default is given
        """
        template = self.resolve_template(key, locale)
        if template is None:
            if default is None:
                return key
            template = default
        return self._format(key, template, args)

    def _format(self, key: str, template: str, args: Sequence[object] | None) -> str:
        if not args:
            return template
        try:
            return template.format(*args)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
            logger.warning("Failed to format message", key=key, error=str(e))
            return template

    def reload(self) -> None:
        """Reload message data from file."""
        self._load()
