"""Placeholder substitution for translated strings.

Templates use single-brace placeholders: "Hello {username}". A placeholder
name is one or more characters other than braces. Arguments that are missing
leave the placeholder in the output untouched; unpaired braces pass through.
"""

import re
from typing import Any, Mapping, Optional

from translation_store.i18n.exceptions import TranslationTypeError
from translation_store.i18n.values import Value, ValueKind

PLACEHOLDER_PATTERN = re.compile(r"\{([^{}]+)\}")

# repr() switches to exponent notation from here on
EXACT_FLOAT_LIMIT = 1e16


def render_argument(name: str, value: Value) -> str:
    """Render a substitution argument as text.

    Args:
        name: Placeholder name (for error reporting).
        value: Argument value.

    Returns:
        Canonical text: strings as is, "true"/"false", decimal numbers,
        and the empty string for null.

    Raises:
        TranslationTypeError: If the argument is an array or object.
    """
    match value.kind:
        case ValueKind.STRING:
            return value.payload
        case ValueKind.NULL:
            return ""
        case ValueKind.BOOL:
            return "true" if value.payload else "false"
        case ValueKind.NUMBER:
            number = value.payload
            # Drop ".0" below the limit; larger integral floats keep the exponent form
            if (
                isinstance(number, float)
                and abs(number) < EXACT_FLOAT_LIMIT
                and number.is_integer()
            ):
                return str(int(number))
            return repr(number)
        case _:
            raise TranslationTypeError(
                f"Argument '{name}' cannot be substituted: {value.kind.value} "
                "values are not valid placeholder arguments",
                argument=name,
                kind=value.kind.value,
            )


def format_template(template: str, args: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute {name} placeholders in template.

    Substituted text is not scanned again, so argument values containing
    braces are inserted literally.

    Args:
        template: Template string.
        args: Mapping of placeholder name to argument (plain data or Value).

    Returns:
        The rendered string.

    Raises:
        TranslationTypeError: If a substituted argument is an array or object.
        ParseError: If an argument is not JSON-like data.
    """
    if not args:
        return template

    def _substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in args:
            return match.group(0)
        return render_argument(name, Value.from_python(args[name]))

    return PLACEHOLDER_PATTERN.sub(_substitute, template)
