"""
Custom exceptions for pdftool.

This module defines all custom exceptions used throughout the library.
"""

from __future__ import annotations

import enum
from typing import Optional


class PDFToolException(Exception):
    """Base exception for all pdftool errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF tool error occurred."


class InvalidPDFError(PDFToolException):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PDFToolException):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class MergeError(PDFToolException):
    """Raised when merging PDF files fails."""

    @property
    def default_message(self) -> str:
        return "An error occurred while merging the PDF files."


class SplitError(PDFToolException):
    """Raised when splitting a PDF file fails."""

    @property
    def default_message(self) -> str:
        return "An error occurred during splitting."


class CompressionError(PDFToolException):
    """Raised when compression fails or produces an invalid document."""

    @property
    def default_message(self) -> str:
        return "An error occurred during compression."


class PageRangeErrorKind(enum.Enum):
    """Reasons a page range expression can be rejected."""

    EMPTY_EXPRESSION = "empty_expression"
    MALFORMED_TOKEN = "malformed_token"
    EMPTY_RESULT = "empty_result"


class PageRangeError(PDFToolException, ValueError):
    """Raised when a page range expression cannot be turned into pages.

    Subclasses identify the failure through :attr:`kind`; callers that only
    need a yes/no answer can catch this class and show one message.
    """

    kind: PageRangeErrorKind

    def __init__(
        self,
        message: str = "",
        *,
        expression: Optional[str] = None,
        token: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.expression = expression
        self.token = token

    @property
    def default_message(self) -> str:
        return (
            "Invalid page range specified. "
            "Please use formats like '1-3', '5', '1,3,5-7'."
        )


class EmptyExpressionError(PageRangeError):
    """Raised when the expression is empty or whitespace only."""

    kind = PageRangeErrorKind.EMPTY_EXPRESSION


class MalformedTokenError(PageRangeError):
    """Raised when a token or one side of a range is not an integer."""

    kind = PageRangeErrorKind.MALFORMED_TOKEN


class EmptyResultError(PageRangeError):
    """Raised when every number in the expression falls outside the document."""

    kind = PageRangeErrorKind.EMPTY_RESULT


__all__ = [
    "PDFToolException",
    "InvalidPDFError",
    "EncryptedPDFError",
    "MergeError",
    "SplitError",
    "CompressionError",
    "PageRangeErrorKind",
    "PageRangeError",
    "EmptyExpressionError",
    "MalformedTokenError",
    "EmptyResultError",
]
