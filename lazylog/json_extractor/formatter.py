"""
Pretty printing of raw JSON text.

The text is validated with the json module, then re-indented token by
token so strings and numbers are printed exactly as they appeared in the
log line.
"""

import json

from lazylog.utils.errors import JsonFormatError

WHITESPACE = " \t\r\n"


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not valid JSON")


def validate_json(raw: str) -> None:
    """Raise JsonFormatError unless ``raw`` is strict JSON text."""
    try:
        json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JsonFormatError(e.msg, position=e.pos) from e
    except ValueError as e:
        raise JsonFormatError(str(e)) from e
    except RecursionError as e:
        raise JsonFormatError("nesting is too deep to decode") from e


def reindent_json(raw: str, indent: int = 2) -> str:
    """Re-indent already valid JSON text, one member or element per line."""
    pad = " " * indent
    out: list[str] = []
    depth = 0
    in_string = False
    escape = False
    pending_newline = False

    for char in raw:
        if in_string:
            out.append(char)
            if escape:
                escape = False
            elif char == "\\":
                escape = True
            elif char == '"':
                in_string = False
            continue

        if char in WHITESPACE:
            continue

        # First element of a non-empty container
        if pending_newline and char not in "}]":
            out.append("\n" + pad * depth)
            pending_newline = False

        if char == '"':
            in_string = True
            out.append(char)
        elif char in "{[":
            out.append(char)
            depth += 1
            pending_newline = True
        elif char in "}]":
            depth -= 1
            if pending_newline:
                pending_newline = False
            else:
                out.append("\n" + pad * depth)
            out.append(char)
        elif char == ",":
            out.append(",\n" + pad * depth)
        elif char == ":":
            out.append(": ")
        else:
            out.append(char)

    return "".join(out)


def pretty_print_json(raw: str, indent: int = 2) -> str:
    """
    Reformat JSON text with ``indent`` spaces per nesting level.

    Args:
        raw: JSON text, possibly minified
        indent: Spaces added per nesting level

    Returns:
        Indented JSON text

    Raises:
        JsonFormatError: If ``raw`` is not valid JSON
    """
    validate_json(raw)
    return reindent_json(raw, indent=indent)
