"""Dotted-path addressing over Value trees.

A key such as "errors.login.expired" is split into segments, each of which
addresses one level of OBJECT nesting. Arrays are opaque leaves: a numeric
segment is an ordinary object key, never an index.

The write functions mutate OBJECT payloads in place; the root passed in must
be an OBJECT value.
"""

from typing import Optional, Tuple

from translation_store.i18n.exceptions import InvalidPathError
from translation_store.i18n.values import Value, ValueKind

PATH_SEPARATOR = "."

Segments = Tuple[str, ...]


def split_key(key: str) -> Segments:
    """Split a dotted key into path segments.

    Args:
        key: Dotted key (e.g., "errors.login.expired").

    Returns:
        Tuple of non-empty segments.

    Raises:
        InvalidPathError: If the key is empty, not a string, or contains an
            empty segment ("a..b", ".a", "a.").
    """
    if not isinstance(key, str):
        raise InvalidPathError(
            f"Translation key must be a string, got {type(key).__name__}"
        )
    if not key:
        raise InvalidPathError("Translation key must not be empty", key=key)

    segments = tuple(key.split(PATH_SEPARATOR))
    if any(segment == "" for segment in segments):
        raise InvalidPathError(
            f"Invalid translation key '{key}': empty segment", key=key
        )
    return segments


def get_node(root: Value, segments: Segments) -> Optional[Value]:
    """Walk OBJECT children by segment name.

    Returns:
        The addressed Value, or None if a segment is missing or an
        intermediate node is not an OBJECT.
    """
    current = root
    for segment in segments:
        if current.kind is not ValueKind.OBJECT:
            return None
        current = current.payload.get(segment)
        if current is None:
            return None
    return current


def has_node(root: Value, segments: Segments) -> bool:
    return get_node(root, segments) is not None


def _parent_for_write(root: Value, segments: Segments) -> Value:
    """Return the OBJECT that owns the terminal segment, creating it if needed.

    Existing intermediate objects are descended into; anything else in the
    way is replaced with a fresh OBJECT.
    """
    current = root
    for segment in segments[:-1]:
        child = current.payload.get(segment)
        if child is None or child.kind is not ValueKind.OBJECT:
            child = Value.object()
            current.payload[segment] = child
        current = child
    return current


def set_node(root: Value, segments: Segments, value: Value) -> None:
    """Point write: replace exactly the terminal key with value.

    Siblings of the terminal key are untouched.
    """
    parent = _parent_for_write(root, segments)
    parent.payload[segments[-1]] = value


def delete_node(root: Value, segments: Segments) -> bool:
    """Remove the terminal key from its parent object.

    Ancestors left empty by the removal are kept.

    Returns:
        True if a key was removed, False if nothing was there.
    """
    parent = get_node(root, segments[:-1])
    if parent is None or parent.kind is not ValueKind.OBJECT:
        return False
    return parent.payload.pop(segments[-1], None) is not None


def merge_into(target: Value, incoming: Value) -> None:
    """Deep merge an incoming OBJECT into a target OBJECT in place.

    For each incoming key: when both sides are objects the merge recurses,
    otherwise the incoming value replaces the existing one.
    """
    for key, incoming_child in incoming.payload.items():
        existing_child = target.payload.get(key)
        match (existing_child, incoming_child):
            case (
                Value(kind=ValueKind.OBJECT),
                Value(kind=ValueKind.OBJECT),
            ):
                merge_into(existing_child, incoming_child)
            case _:
                target.payload[key] = incoming_child
