"""
Log file reading and line filtering.
"""

from lazylog.log_processor.pipeline import LineFilterPipeline, build_filter_spec
from lazylog.log_processor.source import check_log_file, iter_chunks, iter_lines, load_whole_file

__all__ = [
    "LineFilterPipeline",
    "build_filter_spec",
    "check_log_file",
    "iter_chunks",
    "iter_lines",
    "load_whole_file",
]
