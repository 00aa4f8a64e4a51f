"""
Extraction of the first JSON object embedded in a log line.

Locates the first ``{``, scans the balanced region that starts there,
re-bases the offsets onto the full line and pretty prints the region.
"""

from typing import Optional

from lazylog.config import get_settings
from lazylog.json_extractor.formatter import pretty_print_json
from lazylog.json_extractor.scanner import scan_brackets
from lazylog.models import ExtractionResult
from lazylog.utils.errors import JsonNotFoundError
from lazylog.utils.logging import get_logger

logger = get_logger(__name__)


class EmbeddedJsonExtractor:
    """Pull the first JSON object out of arbitrary text."""

    def __init__(self, indent: Optional[int] = None) -> None:
        """
        Initialize the extractor.

        Args:
            indent: Spaces per nesting level (defaults to settings)
        """
        self.settings = get_settings()
        self.indent = self.settings.json_indent if indent is None else indent

    def extract(self, content: str) -> ExtractionResult:
        """
        Extract and pretty print the first JSON object in ``content``.

        Args:
            content: Text that may contain a JSON object

        Returns:
            ExtractionResult with offsets into ``content`` (end exclusive)

        Raises:
            JsonNotFoundError: If ``content`` has no ``{``
            UnbalancedBracketError: If brackets are mismatched
            IncompleteJsonError: If the object is never closed
            JsonFormatError: If the balanced region is not valid JSON
        """
        position = content.find("{")
        if position == -1:
            raise JsonNotFoundError()

        scanned = scan_brackets(content[position:]).shifted(position)
        logger.debug(
            "Found bracketed region",
            extra={"start": scanned.start_offset, "end": scanned.end_offset},
        )

        return ExtractionResult(
            json_text=pretty_print_json(scanned.value, indent=self.indent),
            start=scanned.start_offset,
            end=scanned.end_offset,
        )


def extract_json_from_string(content: str, indent: Optional[int] = None) -> ExtractionResult:
    """Convenience wrapper around EmbeddedJsonExtractor.extract."""
    return EmbeddedJsonExtractor(indent=indent).extract(content)
