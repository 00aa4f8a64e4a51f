"""
Tests for bracket scanning.
"""

import pytest

from lazylog.json_extractor.scanner import scan_brackets
from lazylog.models import ExtractionErrorKind, ScanResult
from lazylog.utils.errors import IncompleteJsonError, JsonNotFoundError, UnbalancedBracketError


class TestScanBrackets:
    """Test the stack based bracket scanner."""

    def test_simple_object(self):
        """Whole input is one object."""
        result = scan_brackets('{"a": 1}')

        assert result == ScanResult(value='{"a": 1}', start_offset=0, end_offset=8)

    def test_stops_at_first_balanced_region(self):
        """Text after the first region is ignored, even more brackets."""
        result = scan_brackets('{"a": {"b": [1]}} tail {"c": 2}')

        assert result.value == '{"a": {"b": [1]}}'
        assert result.end_offset == 17

    def test_leading_text_is_skipped(self):
        """Offsets point at the first opener."""
        result = scan_brackets("prefix [1, 2] suffix")

        assert result.value == "[1, 2]"
        assert result.start_offset == 7
        assert result.end_offset == 13

    def test_closers_before_region_are_ignored(self):
        """Stray closers before any opener are not errors."""
        result = scan_brackets("} ] oops {\"ok\": true}")

        assert result.value == '{"ok": true}'
        assert result.start_offset == 9

    def test_array_closed_by_brace(self):
        """A '[' closed by '}' is unbalanced."""
        with pytest.raises(UnbalancedBracketError, match=r"opening \[ is not closed") as exc_info:
            scan_brackets('{"a": [1, 2}')

        assert exc_info.value.opener == "["
        assert exc_info.value.position == 11
        assert exc_info.value.kind == ExtractionErrorKind.UNBALANCED

    def test_object_closed_by_bracket(self):
        """A '{' closed by ']' is unbalanced."""
        with pytest.raises(UnbalancedBracketError, match=r"opening \{ is not closed"):
            scan_brackets('[{"a": 1]')

    def test_incomplete(self):
        """Input ending inside a region is incomplete."""
        with pytest.raises(IncompleteJsonError, match="String is not JSON, not completed") as exc_info:
            scan_brackets('{"a": {"b": 1}')

        assert exc_info.value.depth == 1
        assert exc_info.value.kind == ExtractionErrorKind.INCOMPLETE

    @pytest.mark.parametrize("text", ["", "no brackets here", "only closers } ]"])
    def test_not_found(self, text):
        """No opener means nothing to scan."""
        with pytest.raises(JsonNotFoundError):
            scan_brackets(text)

    def test_brackets_inside_strings_are_counted(self):
        """Only nesting is tracked, quoting is not."""
        result = scan_brackets('{"a": "}"}')

        assert result.value == '{"a": "}'

    def test_offsets_span_value(self):
        """end - start always equals the value length."""
        text = 'x = [[1], {"k": [2, 3]}], y'
        result = scan_brackets(text)

        assert text[result.start_offset:result.end_offset] == result.value
        assert 0 <= result.start_offset <= result.end_offset <= len(text)


class TestScanResult:
    """Test the ScanResult model."""

    def test_shifted(self):
        """Re-basing moves both offsets by the same amount."""
        result = ScanResult(value="{}", start_offset=0, end_offset=2).shifted(15)

        assert result.start_offset == 15
        assert result.end_offset == 17
        assert result.value == "{}"

    def test_rejects_inconsistent_offsets(self):
        """Offsets must match the value length."""
        with pytest.raises(ValueError):
            ScanResult(value="{}", start_offset=0, end_offset=5)

    def test_rejects_reversed_offsets(self):
        with pytest.raises(ValueError):
            ScanResult(value="", start_offset=3, end_offset=1)
