"""Decoding of translation payloads into Values.

Payloads arrive either as text (JSON, or YAML for .yml bundles) or as
already-structured Python data. Either way they end up as a Value.
"""

import json
from enum import Enum
from typing import Any, NoReturn

import yaml

from translation_store.i18n.exceptions import ParseError
from translation_store.i18n.values import Value
from translation_store.logging import get_module_logger

logger = get_module_logger()

TEXT_TYPES = (str, bytes, bytearray)


class PayloadFormat(str, Enum):
    """Text formats a translation payload can be written in."""

    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_source(cls, source: str, content_type: str = "") -> "PayloadFormat":
        """Guess the format from a path/URL and an optional content type.

        Args:
            source: File path or URL the payload came from.
            content_type: HTTP Content-Type header, if any.

        Returns:
            YAML for .yml/.yaml sources or yaml content types, JSON otherwise.
        """
        path = source.split("?", 1)[0].split("#", 1)[0].lower()
        if path.endswith((".yml", ".yaml")) or "yaml" in content_type.lower():
            return cls.YAML
        return cls.JSON


def _reject_constant(name: str) -> NoReturn:
    raise ParseError(f"Invalid JSON constant: {name}", constant=name)


def decode_text(text: str | bytes | bytearray, fmt: PayloadFormat) -> Any:
    """Parse JSON or YAML text into plain Python data.

    Raises:
        ParseError: If the text is malformed or nested too deeply.
    """
    try:
        if fmt is PayloadFormat.YAML:
            return yaml.safe_load(text)
        return json.loads(text, parse_constant=_reject_constant)
    except (
        json.JSONDecodeError,
        UnicodeDecodeError,
        yaml.YAMLError,
        RecursionError,
    ) as e:
        logger.warning(
            "translation_parse_failed",
            format=fmt.value,
            error=str(e),
            payload=text if isinstance(text, str) else None,
        )
        raise ParseError(f"Failed to parse {fmt.value} payload: {e}") from e


def decode_payload(payload: Any, fmt: PayloadFormat = PayloadFormat.JSON) -> Value:
    """Turn a payload into a Value.

    Args:
        payload: JSON/YAML text, plain Python data, or a Value.
        fmt: Text format, used only when payload is text.

    Returns:
        A freshly built Value owned by the caller.

    Raises:
        ParseError: If the payload is malformed or not JSON-like data.
    """
    if isinstance(payload, TEXT_TYPES):
        payload = decode_text(payload, fmt)
    return Value.from_python(payload)
