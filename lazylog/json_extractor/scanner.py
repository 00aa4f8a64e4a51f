"""
Bracket scanning for embedded JSON.

Finds the first balanced ``{...}`` / ``[...]`` region of a string by
tracking opening brackets on a stack. Only nesting is checked here;
quoting and JSON grammar are left to the formatter.
"""

from lazylog.models import ScanResult
from lazylog.utils.errors import IncompleteJsonError, JsonNotFoundError, UnbalancedBracketError

OPENERS = "{["
CLOSER_TO_OPENER = {"}": "{", "]": "["}


def scan_brackets(text: str) -> ScanResult:
    """
    Return the first balanced bracketed region of ``text``.

    Closing brackets seen before the first opener are ignored. Scanning
    stops as soon as the stack empties again.

    Args:
        text: String to scan

    Returns:
        ScanResult with offsets relative to ``text`` (end exclusive)

    Raises:
        UnbalancedBracketError: A closer of the wrong kind was found
        IncompleteJsonError: Input ended with brackets still open
        JsonNotFoundError: Input has no opening bracket
    """
    stack: list[str] = []
    start = -1

    for index, char in enumerate(text):
        if char in OPENERS:
            if not stack:
                start = index
            stack.append(char)
            continue

        # Not inside a region yet
        if not stack:
            continue

        expected = CLOSER_TO_OPENER.get(char)
        if expected is None:
            continue

        opener = stack.pop()
        if opener != expected:
            raise UnbalancedBracketError(opener, position=index)

        if not stack:
            return ScanResult(
                value=text[start:index + 1],
                start_offset=start,
                end_offset=index + 1,
            )

    if start == -1:
        raise JsonNotFoundError()

    raise IncompleteJsonError(depth=len(stack))
