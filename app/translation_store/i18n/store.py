"""In-memory multi-locale translation store.

LocaleStore maps locale identifiers to TranslationTrees. Locales are opaque,
case-sensitive strings; there is no normalization and no fallback between
locales. Enumeration order is first-write order.

Everything crossing the store boundary is copied: writes convert caller data
into fresh Values, reads return plain Python data built from the tree.

Lifecycle: construct empty, mutate, clear_all_translations(). The store is
single-threaded and takes no locks.
"""

from typing import Any, Dict, List, Mapping, Optional

from translation_store.i18n.exceptions import (
    InvalidPathError,
    KeyNotFoundError,
    LocaleNotFoundError,
    TranslationTypeError,
)
from translation_store.i18n.formatter import format_template
from translation_store.i18n.paths import split_key
from translation_store.i18n.payloads import decode_payload
from translation_store.i18n.tree import TranslationTree
from translation_store.i18n.values import Value, ValueKind
from translation_store.logging import get_module_logger

logger = get_module_logger()


class LocaleStore:
    """Collection of translation trees keyed by locale.

    Attributes:
        locales: Locale id -> TranslationTree, in first-write order.
    """

    def __init__(self):
        self.locales: Dict[str, TranslationTree] = {}

    def __len__(self) -> int:
        return len(self.locales)

    def __contains__(self, locale: object) -> bool:
        return locale in self.locales

    def _tree(self, locale: str) -> TranslationTree:
        tree = self.locales.get(locale)
        if tree is None:
            raise LocaleNotFoundError(f"Locale not found: {locale}", locale=locale)
        return tree

    def _tree_for_write(self, locale: str) -> TranslationTree:
        tree = self.locales.get(locale)
        if tree is None:
            tree = TranslationTree()
            self.locales[locale] = tree
            logger.debug("locale_created", locale=locale)
        return tree

    @staticmethod
    def _require_object(value: Value, locale: str) -> None:
        if not value.is_object:
            logger.warning(
                "translations_not_an_object", locale=locale, kind=value.kind.value
            )
            raise TranslationTypeError(
                f"Translations for locale '{locale}' must be an object, "
                f"got {value.kind.value}",
                locale=locale,
                kind=value.kind.value,
            )

    # ---- whole-locale operations ----

    def set_translations(self, locale: str, payload: Any) -> None:
        """Bulk merge a payload into a locale, creating the locale if needed.

        Existing keys not mentioned in the payload are kept; nested objects
        are merged recursively.

        Args:
            locale: Locale identifier.
            payload: JSON text, a mapping, or an OBJECT Value.

        Raises:
            ParseError: If the payload is not valid JSON or JSON-like data.
            TranslationTypeError: If the payload's top level is not an object.
        """
        value = decode_payload(payload)
        self._require_object(value, locale)
        self._tree_for_write(locale).merge(value)
        logger.info("translations_set", locale=locale, key_count=len(value.payload))

    def apply(self, fragments: Mapping[str, Value]) -> None:
        """Bulk merge several locales at once, or none of them.

        Every fragment is checked before the first merge so a bad fragment
        leaves the store untouched.

        Args:
            fragments: Locale id -> OBJECT Value. Values become store-owned.

        Raises:
            TranslationTypeError: If any fragment is not an object.
        """
        for locale, fragment in fragments.items():
            self._require_object(fragment, locale)
        for locale, fragment in fragments.items():
            self._tree_for_write(locale).merge(fragment)
        logger.info("translations_applied", locales=list(fragments))

    def get_translations(self, locale: str) -> Dict[str, Any]:
        """Return a copy of a locale's whole tree.

        Raises:
            LocaleNotFoundError: If the locale does not exist.
        """
        return self._tree(locale).all().to_python()

    def del_translations(self, locale: str) -> bool:
        """Remove a locale entirely.

        Returns:
            True if the locale existed, False otherwise.
        """
        removed = self.locales.pop(locale, None) is not None
        if removed:
            logger.info("locale_deleted", locale=locale)
        return removed

    def has_locale(self, locale: str) -> bool:
        return locale in self.locales

    def get_all_locales(self) -> List[str]:
        return list(self.locales)

    def clear_all_translations(self) -> None:
        count = len(self.locales)
        self.locales.clear()
        logger.info("translations_cleared", locale_count=count)

    def get_all_translations(self) -> Dict[str, Dict[str, Any]]:
        """Return a snapshot of every locale's tree."""
        return {
            locale: tree.all().to_python() for locale, tree in self.locales.items()
        }

    # ---- key operations ----

    def get_translation(self, locale: str, key: str) -> Any:
        """Return a copy of the value at a dotted key (leaf or sub-object).

        Raises:
            LocaleNotFoundError: If the locale does not exist.
            KeyNotFoundError: If the key does not resolve.
            InvalidPathError: If the key is malformed.
        """
        return self._lookup(locale, key).to_python()

    def _lookup(self, locale: str, key: str) -> Value:
        node = self._tree(locale).get(key)
        if node is None:
            raise KeyNotFoundError(
                f"Key '{key}' not found in locale '{locale}'", locale=locale, key=key
            )
        return node

    def has_translation(self, locale: str, key: str) -> bool:
        """True if locale exists and key resolves; never raises."""
        tree = self.locales.get(locale)
        if tree is None:
            return False
        try:
            return tree.has(key)
        except InvalidPathError:
            return False

    def del_translation(self, locale: str, key: str) -> bool:
        """Remove the node at a dotted key.

        Returns:
            True if something was removed; False if the locale or key was absent.

        Raises:
            InvalidPathError: If the key is malformed.
        """
        tree = self.locales.get(locale)
        if tree is None:
            return False
        removed = tree.delete(key)
        if removed:
            logger.debug("translation_deleted", locale=locale, key=key)
        return removed

    def update_translation(self, locale: str, key: str, value: Any) -> None:
        """Point write a single dotted key, creating the locale if needed.

        Raises:
            InvalidPathError: If the key is malformed.
            ParseError: If value is not JSON-like data.
        """
        # Validate before _tree_for_write so a bad call never creates the locale
        split_key(key)
        converted = Value.from_python(value)
        tree = self._tree_for_write(locale)
        tree.update(key, converted)
        logger.debug("translation_updated", locale=locale, key=key)

    def format_translation(
        self,
        locale: str,
        key: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Render the string at key with {name} placeholders substituted.

        Raises:
            LocaleNotFoundError: If the locale does not exist.
            KeyNotFoundError: If the key does not resolve.
            TranslationTypeError: If the value is not a string, or a
                substituted argument is an array or object.
        """
        node = self._lookup(locale, key)
        if node.kind is not ValueKind.STRING:
            raise TranslationTypeError(
                f"Translation '{key}' in locale '{locale}' is not a string "
                f"(got {node.kind.value})",
                locale=locale,
                key=key,
                kind=node.kind.value,
            )
        return format_template(node.payload, args)
