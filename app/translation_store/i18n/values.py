"""Value model for translation trees.

A Value is a closed tagged variant over the JSON datum kinds. All path, merge
and formatting logic dispatches on Value.kind; plain Python data is only
inspected when converting at the store boundary (from_python / to_python).
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from translation_store.i18n.exceptions import ParseError


class ValueKind(str, Enum):
    """Kinds of JSON-like data a Value can hold."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class Value:
    """A single JSON-like datum.

    The payload depends on the kind:

    - NULL: None
    - BOOL: bool
    - NUMBER: int or float (as parsed, never NaN or infinite)
    - STRING: str
    - ARRAY: tuple of Value
    - OBJECT: dict of str -> Value, insertion ordered

    OBJECT payloads are owned by the tree holding them and mutated in place by
    the path and merge functions; everything else is immutable.

    Attributes:
        kind: ValueKind tag.
        payload: Kind-specific Python data.
    """

    kind: ValueKind
    payload: Any = None

    @classmethod
    def null(cls) -> "Value":
        return cls(ValueKind.NULL)

    @classmethod
    def boolean(cls, flag: bool) -> "Value":
        return cls(ValueKind.BOOL, bool(flag))

    @classmethod
    def number(cls, number: int | float) -> "Value":
        return cls(ValueKind.NUMBER, number)

    @classmethod
    def string(cls, text: str) -> "Value":
        return cls(ValueKind.STRING, text)

    @classmethod
    def array(cls, items: Sequence["Value"] = ()) -> "Value":
        return cls(ValueKind.ARRAY, tuple(items))

    @classmethod
    def object(cls, entries: Optional[Dict[str, "Value"]] = None) -> "Value":
        return cls(ValueKind.OBJECT, dict(entries or {}))

    @property
    def is_object(self) -> bool:
        return self.kind is ValueKind.OBJECT

    @property
    def is_leaf(self) -> bool:
        """True for every kind except OBJECT; arrays are leaves for addressing."""
        return self.kind is not ValueKind.OBJECT

    @classmethod
    def from_python(cls, data: Any) -> "Value":
        """Convert plain JSON-like Python data into a Value.

        An existing Value is deep copied so the caller never shares mutable
        state with a tree.

        Args:
            data: None, bool, int, float, str, a sequence, a mapping with
                string keys, or a Value.

        Returns:
            The converted Value.

        Raises:
            ParseError: If data (or anything nested in it) is not JSON-like,
                or is nested too deeply to convert.
        """
        try:
            return cls._convert(data)
        except RecursionError as e:
            raise ParseError("Value is nested too deeply to convert") from e

    @classmethod
    def _convert(cls, data: Any) -> "Value":
        if isinstance(data, Value):
            return data.copy()
        if data is None:
            return cls.null()
        # bool before int: bool is an int subclass
        if isinstance(data, bool):
            return cls.boolean(data)
        if isinstance(data, int):
            return cls.number(data)
        if isinstance(data, float):
            if not math.isfinite(data):
                raise ParseError(f"Non-finite number is not valid JSON: {data!r}")
            return cls.number(data)
        if isinstance(data, str):
            return cls.string(data)
        if isinstance(data, Mapping):
            entries = {}
            for key, item in data.items():
                if not isinstance(key, str):
                    raise ParseError(
                        f"Object keys must be strings, got {type(key).__name__}",
                        key=repr(key),
                    )
                entries[key] = cls._convert(item)
            return cls.object(entries)
        if isinstance(data, Sequence) and not isinstance(data, (bytes, bytearray)):
            return cls.array([cls._convert(item) for item in data])
        raise ParseError(
            f"Unsupported value type: {type(data).__name__}",
            type=type(data).__name__,
        )

    def to_python(self) -> Any:
        """Return a deep copy of this value as plain Python data.

        Objects become dicts (key order preserved) and arrays become lists.
        """
        match self.kind:
            case ValueKind.OBJECT:
                return {key: item.to_python() for key, item in self.payload.items()}
            case ValueKind.ARRAY:
                return [item.to_python() for item in self.payload]
            case _:
                return self.payload

    def copy(self) -> "Value":
        """Deep copy; only OBJECT payloads are mutable so only they are rebuilt."""
        match self.kind:
            case ValueKind.OBJECT:
                return Value.object(
                    {key: item.copy() for key, item in self.payload.items()}
                )
            case ValueKind.ARRAY:
                return Value.array([item.copy() for item in self.payload])
            case _:
                return self
