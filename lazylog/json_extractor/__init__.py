"""
Embedded JSON extraction.

Bracket scanning, pretty printing and the extractor that composes them.
"""

from lazylog.json_extractor.extractor import EmbeddedJsonExtractor, extract_json_from_string
from lazylog.json_extractor.formatter import pretty_print_json
from lazylog.json_extractor.scanner import scan_brackets

__all__ = ["EmbeddedJsonExtractor", "extract_json_from_string", "pretty_print_json", "scan_brackets"]
