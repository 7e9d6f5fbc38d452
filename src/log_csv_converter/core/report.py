"""Run report models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputFileSummary(BaseModel):
    log_type: str = Field(description="Grouping key derived from the file names.")
    path: str = Field(description="CSV file written (or attempted).")
    records: int = Field(ge=0, description="Rows written, excluding the header.")
    error: str | None = Field(default=None, description="Why the file could not be written.")


class SkippedFile(BaseModel):
    path: str
    error: str


class ConversionReport(BaseModel):
    input_dir: str
    output_dir: str
    files_read: list[str] = Field(default_factory=list)
    files_skipped: list[SkippedFile] = Field(default_factory=list)
    outputs: list[OutputFileSummary] = Field(default_factory=list)
    pattern_counts: dict[str, int] = Field(
        default_factory=dict, description="Records per classification pattern."
    )
