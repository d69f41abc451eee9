"""Translation tree for a single locale."""

from typing import Optional

from translation_store.i18n.exceptions import TranslationTypeError
from translation_store.i18n.paths import (
    delete_node,
    get_node,
    has_node,
    merge_into,
    set_node,
    split_key,
)
from translation_store.i18n.values import Value


class TranslationTree:
    """One locale's translations, rooted at an OBJECT value.

    The root is always an OBJECT; a tree is never a bare leaf. Values handed
    to merge() and update() become owned by the tree, so callers pass freshly
    converted values (LocaleStore does this at its boundary).

    Attributes:
        root: The OBJECT value holding every translation of the locale.
    """

    def __init__(self, root: Optional[Value] = None):
        if root is None:
            root = Value.object()
        if not root.is_object:
            raise TranslationTypeError(
                f"Translation tree root must be an object, got {root.kind.value}"
            )
        self.root = root

    def __len__(self) -> int:
        return len(self.root.payload)

    @property
    def is_empty(self) -> bool:
        return not self.root.payload

    def merge(self, incoming: Value) -> None:
        """Bulk merge write: deep merge an OBJECT into the root.

        Args:
            incoming: OBJECT value to merge.

        Raises:
            TranslationTypeError: If incoming is not an OBJECT.
        """
        if not incoming.is_object:
            raise TranslationTypeError(
                f"Translations must be an object, got {incoming.kind.value}",
                kind=incoming.kind.value,
            )
        merge_into(self.root, incoming)

    def update(self, key: str, value: Value) -> None:
        """Point write: set exactly one dotted key, creating parents as needed.

        Raises:
            InvalidPathError: If key is malformed.
        """
        set_node(self.root, split_key(key), value)

    def get(self, key: str) -> Optional[Value]:
        """Return the node at key (leaf or sub-object), or None.

        The returned value is the tree's own node; copy it before handing it
        to callers outside the store.

        Raises:
            InvalidPathError: If key is malformed.
        """
        return get_node(self.root, split_key(key))

    def has(self, key: str) -> bool:
        return has_node(self.root, split_key(key))

    def delete(self, key: str) -> bool:
        """Remove the node at key.

        Returns:
            True if something was removed, False if the key was absent.

        Raises:
            InvalidPathError: If key is malformed.
        """
        return delete_node(self.root, split_key(key))

    def all(self) -> Value:
        """Return the whole tree as an OBJECT value (not a copy)."""
        return self.root
