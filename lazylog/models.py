"""
Core data models for the lazylog analyzer.

This module defines the Pydantic models shared by the extractor, the
line filter pipeline and the command line.
"""

from enum import Enum
from re import Pattern
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# Enums
# =============================================================================


class ExtractionErrorKind(str, Enum):
    """Why embedded JSON could not be extracted from a line."""

    UNBALANCED = "unbalanced"
    INCOMPLETE = "incomplete"
    NOT_FOUND = "not_found"
    FORMAT = "format"


# =============================================================================
# Extraction Models
# =============================================================================


class ScanResult(BaseModel):
    """First balanced bracketed region of a string."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Bracketed substring, brackets included")
    start_offset: int = Field(..., ge=0, description="Index of the opening bracket")
    end_offset: int = Field(..., ge=0, description="Index just past the closing bracket")

    @model_validator(mode="after")
    def validate_offsets(self) -> "ScanResult":
        """Offsets must delimit exactly the scanned value."""
        if self.start_offset > self.end_offset:
            raise ValueError("start_offset must not exceed end_offset")
        if self.end_offset - self.start_offset != len(self.value):
            raise ValueError("offsets must span the scanned value")
        return self

    def shifted(self, offset: int) -> "ScanResult":
        """Re-base offsets onto a string the scanned text was sliced from."""
        return ScanResult(
            value=self.value,
            start_offset=self.start_offset + offset,
            end_offset=self.end_offset + offset,
        )


class ExtractionResult(BaseModel):
    """Pretty printed JSON plus where it sat in the original string."""

    model_config = ConfigDict(frozen=True)

    json_text: str = Field(..., description="Indented JSON")
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)


# =============================================================================
# Filtering Models
# =============================================================================


class FilterSpec(BaseModel):
    """Validated line filter configuration, built once per run."""

    model_config = ConfigDict(frozen=True)

    search_pattern: Optional[Pattern[str]] = None
    patterns: tuple[Pattern[str], ...] = ()
    json_mode: bool = False
    echo_pattern_matches: bool = Field(
        default=False,
        description="Emit lines matched by a pattern even when json_mode is off",
    )


class RunStats(BaseModel):
    """Counters collected while analyzing one file."""

    lines_read: int = 0
    lines_matched: int = 0
    lines_emitted: int = 0
    json_extracted: int = 0
    extraction_failures: int = 0
