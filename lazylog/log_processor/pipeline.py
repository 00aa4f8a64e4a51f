"""
Line filter pipeline.

Applies the search pattern and the filter patterns to every line of a
log file and, in JSON mode, splices the first embedded JSON object out
of the line and prints it indented on a line of its own.
"""

import re
from pathlib import Path
from re import Pattern
from typing import Callable, List, Optional, Sequence, Union

from lazylog.config import get_settings
from lazylog.json_extractor.extractor import EmbeddedJsonExtractor
from lazylog.log_processor.source import check_log_file, iter_lines
from lazylog.models import FilterSpec, RunStats
from lazylog.utils.errors import EmptySearchPatternError, InvalidPatternError, JsonExtractionError
from lazylog.utils.logging import LogContext, get_logger, log_performance

logger = get_logger(__name__)


def compile_pattern(pattern: str) -> Pattern[str]:
    """Compile a regular expression, raising InvalidPatternError on failure."""
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def build_filter_spec(
    search: Optional[str] = None,
    patterns: Optional[Sequence[str]] = None,
    json_mode: bool = False,
    echo_pattern_matches: bool = False,
) -> FilterSpec:
    """
    Validate command line options into a FilterSpec.

    Args:
        search: Regex every emitted line must match; None disables it
        patterns: Additional regexes, applied in order
        json_mode: Whether to extract and pretty print embedded JSON
        echo_pattern_matches: Emit pattern matches when json_mode is off

    Raises:
        EmptySearchPatternError: If ``search`` is an empty string
        InvalidPatternError: If any pattern does not compile
    """
    if search is not None and search == "":
        raise EmptySearchPatternError()

    return FilterSpec(
        search_pattern=compile_pattern(search) if search is not None else None,
        patterns=tuple(compile_pattern(pattern) for pattern in patterns or ()),
        json_mode=json_mode,
        echo_pattern_matches=echo_pattern_matches,
    )


class LineFilterPipeline:
    """Filter log lines and annotate the JSON they carry."""

    def __init__(
        self,
        spec: FilterSpec,
        extractor: Optional[EmbeddedJsonExtractor] = None,
        placeholder: Optional[str] = None,
    ) -> None:
        """
        Initialize the pipeline.

        Args:
            spec: Validated filter configuration
            extractor: JSON extractor (a default one is created if omitted)
            placeholder: Token replacing the JSON in the line (defaults to settings)
        """
        self.settings = get_settings()
        self.spec = spec
        self.extractor = extractor or EmbeddedJsonExtractor()
        self.placeholder = placeholder or self.settings.placeholder
        self.stats = RunStats()

    def process_line(self, line: str, line_number: Optional[int] = None) -> List[str]:
        """
        Return the output lines for one input line, possibly none.

        Extraction errors never escape: they are logged as a warning,
        counted, and the line is passed through unchanged.
        """
        spec = self.spec
        if spec.search_pattern is not None and not spec.search_pattern.search(line):
            return []

        self.stats.lines_matched += 1

        if not spec.patterns:
            output = self._annotate(line, line_number) if spec.json_mode else [line]
        else:
            output = []
            for pattern in spec.patterns:
                if not pattern.search(line):
                    continue
                if spec.json_mode:
                    output.extend(self._annotate(line, line_number))
                elif spec.echo_pattern_matches:
                    output.append(line)

        self.stats.lines_emitted += len(output)
        return output

    def _annotate(self, line: str, line_number: Optional[int]) -> List[str]:
        try:
            result = self.extractor.extract(line)
        except JsonExtractionError as e:
            self.stats.extraction_failures += 1
            where = f"line {line_number}" if line_number is not None else "line"
            with LogContext(line_number=line_number, error_kind=e.kind.value):
                logger.warning(f"Could not extract JSON from {where}: {e}")
            return [line]

        self.stats.json_extracted += 1
        spliced = line[:result.start] + self.placeholder + line[result.end:]
        return [spliced, f"{self.placeholder} => {result.json_text}"]

    @log_performance
    def run(self, filepath: Union[str, Path], emit: Callable[[str], None]) -> RunStats:
        """
        Analyze a whole log file, passing every output line to ``emit``.

        Raises:
            LogFileNotFoundError: If the file does not exist
            LogFileReadError: If the file cannot be read
        """
        self.stats = RunStats()
        path = check_log_file(filepath)
        logger.debug(f"Analyzing {path}")

        with LogContext(log_file=str(path)):
            for line_number, line in enumerate(iter_lines(path), start=1):
                self.stats.lines_read += 1
                for output in self.process_line(line, line_number):
                    emit(output)

        return self.stats
