"""Reading, validating and writing PDF documents with :mod:`pypdf`."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple, Type

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from .exceptions import EncryptedPDFError, InvalidPDFError, PDFToolException
from .types import PDFInfo
from .utils import PathLike, ensure_path, get_logger, is_pdf_path

LOGGER = get_logger("pdftool.document")

PRODUCER = "pdftool"


def open_pdf(pdf_path: PathLike, password: Optional[str] = None) -> PdfReader:
    """Open *pdf_path* and return a ready to use :class:`PdfReader`.

    Encrypted documents are decrypted with *password*, or with an empty
    password when none is given, which is enough for files that only carry
    owner restrictions.
    """

    path = ensure_path(pdf_path)
    if not path.exists() or not path.is_file():
        raise InvalidPDFError(f"PDF file not found: {pdf_path}")

    try:
        reader = PdfReader(str(path))
    except PdfReadError as exc:
        raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
    except OSError as exc:
        raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc
    except Exception as exc:
        raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

    if reader.is_encrypted:
        LOGGER.debug("Attempting to decrypt encrypted PDF %s", path)
        try:
            decrypted = reader.decrypt(password or "")
        except Exception as exc:
            raise EncryptedPDFError(f"Unable to decrypt PDF: {pdf_path}. Error: {exc}") from exc
        if decrypted == 0:
            if password:
                raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
            raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

    return reader


def validate_pdf(pdf_path: PathLike, password: Optional[str] = None) -> Tuple[bool, str]:
    """Perform lightweight validation of a PDF file.

    Returns a ``(is_valid, error_message)`` pair; the message is empty when
    the file is usable.
    """

    path = Path(pdf_path)
    if not path.exists():
        return False, f"File not found: {pdf_path}"

    if not path.is_file():
        return False, f"Path is not a file: {pdf_path}"

    if not is_pdf_path(path):
        return False, f"File does not have .pdf extension: {pdf_path}"

    if not os.access(path, os.R_OK):
        return False, f"Cannot read file (permission denied): {pdf_path}"

    try:
        reader = open_pdf(path, password=password)
        if len(reader.pages) == 0:
            return False, f"PDF has no pages: {pdf_path}"
    except PDFToolException as exc:
        return False, str(exc)
    except Exception as exc:
        return False, f"Unexpected error reading PDF: {exc}"

    return True, ""


def get_pdf_info(pdf_path: PathLike, password: Optional[str] = None) -> PDFInfo:
    """Return :class:`PDFInfo` describing the PDF located at *pdf_path*."""

    path = ensure_path(pdf_path)
    reader = open_pdf(path, password=password)
    metadata = reader.metadata

    info = PDFInfo(
        path=path,
        num_pages=len(reader.pages),
        file_size=path.stat().st_size,
        is_encrypted=reader.is_encrypted,
        title=getattr(metadata, "title", None),
        author=getattr(metadata, "author", None),
        subject=getattr(metadata, "subject", None),
        creator=getattr(metadata, "creator", None),
        producer=getattr(metadata, "producer", None),
    )
    LOGGER.debug(
        "PDF info: path=%s, pages=%s, encrypted=%s",
        info.path,
        info.num_pages,
        info.is_encrypted,
    )
    return info


def copy_metadata(
    reader: PdfReader,
    writer: PdfWriter,
    *,
    title_suffix: str = "",
    keywords: Optional[str] = None,
) -> None:
    """Copy core metadata of *reader* onto *writer*."""

    metadata_dict = {}
    metadata = reader.metadata

    if metadata and metadata.title:
        metadata_dict['/Title'] = f"{metadata.title}{title_suffix}"
    if metadata and metadata.author:
        metadata_dict['/Author'] = metadata.author
    if metadata and metadata.subject:
        metadata_dict['/Subject'] = metadata.subject
    if metadata and metadata.creator:
        metadata_dict['/Creator'] = metadata.creator

    if keywords:
        metadata_dict['/Keywords'] = keywords

    metadata_dict['/Producer'] = (metadata.producer if metadata and metadata.producer else PRODUCER)

    writer.add_metadata(metadata_dict)


def write_pdf(
    writer: PdfWriter,
    destination: PathLike,
    *,
    error_cls: Type[PDFToolException] = PDFToolException,
) -> Path:
    """Write *writer* to *destination*, creating parent directories."""

    path = ensure_path(destination)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            writer.write(handle)
    except Exception as exc:
        LOGGER.error("Failed to write PDF to %s: %s", path, exc)
        raise error_cls(f"Failed to write PDF to {path}. Error: {exc}") from exc
    LOGGER.debug("Wrote %s", path)
    return path


__all__ = [
    "open_pdf",
    "validate_pdf",
    "get_pdf_info",
    "copy_metadata",
    "write_pdf",
]
