"""
pdftool - merge, split and compress PDF files.

All PDF reading and writing is done by ``pypdf``; this package adds page
range selection, input validation and a command line interface.

Quick Start:
    >>> from pdftool import PDFSplitter, merge_pdfs, compress_pdf
    >>> merge_pdfs(['a.pdf', 'b.pdf'], 'merged.pdf')
    >>> PDFSplitter('merged.pdf').extract_range('1-3,5', 'selection.pdf')
    >>> compress_pdf('merged.pdf', 'small.pdf', level='high')

Page ranges:
    >>> from pdftool import parse_page_range
    >>> parse_page_range('1,3,5-7', 10)
    [0, 2, 4, 5, 6]

For CLI usage, use the 'pdftool' command after installation.
"""

__version__ = "1.0.0"
__license__ = "MIT"

# Core operations
from pdftool.compressor import CompressionLevel, CompressionResult, compress_pdf
from pdftool.merger import merge_pdfs
from pdftool.page_range import PageRangeSelector, format_page_range, parse_page_range
from pdftool.splitter import PDFSplitter

# Data types
from pdftool.types import MergeResult, PDFInfo, SplitMode, SplitResult

# Exceptions
from pdftool.exceptions import (
    CompressionError,
    EmptyExpressionError,
    EmptyResultError,
    EncryptedPDFError,
    InvalidPDFError,
    MalformedTokenError,
    MergeError,
    PageRangeError,
    PageRangeErrorKind,
    PDFToolException,
    SplitError,
)

# Utility functions
from pdftool.document import get_pdf_info, validate_pdf
from pdftool.utils import collect_pdf_paths, format_file_size

__all__ = [
    # Operations
    "merge_pdfs",
    "PDFSplitter",
    "compress_pdf",
    "PageRangeSelector",
    "parse_page_range",
    "format_page_range",
    # Data types
    "PDFInfo",
    "MergeResult",
    "SplitMode",
    "SplitResult",
    "CompressionLevel",
    "CompressionResult",
    # Exceptions
    "PDFToolException",
    "InvalidPDFError",
    "EncryptedPDFError",
    "MergeError",
    "SplitError",
    "CompressionError",
    "PageRangeError",
    "PageRangeErrorKind",
    "EmptyExpressionError",
    "MalformedTokenError",
    "EmptyResultError",
    # Utility functions
    "get_pdf_info",
    "validate_pdf",
    "collect_pdf_paths",
    "format_file_size",
    # Version info
    "__version__",
]
