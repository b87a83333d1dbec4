"""
Type definitions and dataclasses for pdftool.

This module defines data structures returned by the merge, split and info
operations.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class PDFInfo:
    """
    PDF document information and metadata.

    Attributes:
        path: Resolved path of the PDF file
        num_pages: Number of pages in the PDF
        file_size: File size in bytes
        is_encrypted: Whether the PDF is encrypted
        title: PDF title metadata
        author: PDF author metadata
        subject: PDF subject metadata
        creator: PDF creator application
        producer: PDF producer application
    """
    path: Path
    num_pages: int
    file_size: int
    is_encrypted: bool = False
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None


@dataclass
class MergeResult:
    """Outcome of merging several PDFs into one file."""

    output_path: Path
    input_paths: List[Path]
    total_pages: int

    @property
    def total_files(self) -> int:
        return len(self.input_paths)

    def __str__(self) -> str:
        return f"MergeResult(files={self.total_files}, pages={self.total_pages})"


class SplitMode(str, enum.Enum):
    """How a document is split."""

    PAGES = "pages"
    RANGE = "range"


@dataclass
class SplitResult:
    """
    Result of a PDF split operation.

    Attributes:
        source_path: Path to source PDF file
        mode: Whether the document was burst into pages or a range was extracted
        files_created: Created file paths, in page order
        pages: Zero-based indices of the pages that were written
    """
    source_path: Path
    mode: SplitMode
    files_created: List[Path] = field(default_factory=list)
    pages: List[int] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.files_created)

    @property
    def output_dir(self) -> Optional[Path]:
        if not self.files_created:
            return None
        return self.files_created[0].parent

    def __str__(self) -> str:
        return (
            f"SplitResult(mode={self.mode.value}, files={self.total_files}, "
            f"pages={len(self.pages)})"
        )


__all__ = ["PDFInfo", "MergeResult", "SplitMode", "SplitResult"]
