"""Merge several PDF files into one document."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from pypdf import PdfReader, PdfWriter

from .document import copy_metadata, open_pdf, write_pdf
from .exceptions import MergeError, PDFToolException
from .types import MergeResult
from .utils import PathLike, ensure_path, get_logger

LOGGER = get_logger("pdftool.merge")

MIN_MERGE_INPUTS = 2


def _unique_inputs(inputs: Iterable[PathLike]) -> List[Path]:
    paths: List[Path] = []
    for item in inputs:
        path = ensure_path(item)
        if path not in paths:
            paths.append(path)
    return paths


def merge_pdfs(
    inputs: Iterable[PathLike],
    output: PathLike,
    *,
    metadata: bool = True,
) -> MergeResult:
    """Merge *inputs* into *output* and return a :class:`MergeResult`.

    Args:
        inputs: File paths to merge, in the order their pages should
            appear. Repeated paths are merged once.
        output: The output file path that will contain the merged PDF.
        metadata: When ``True`` metadata from the first input file is
            copied into the merged document.

    Raises:
        MergeError: If fewer than two PDFs are given or merging fails.
    """

    pdf_paths = _unique_inputs(inputs)
    if len(pdf_paths) < MIN_MERGE_INPUTS:
        raise MergeError("Please select at least 2 PDF files to merge.")

    output_path = ensure_path(output)
    writer = PdfWriter()
    first_reader: Optional[PdfReader] = None
    total_pages = 0

    for pdf_path in pdf_paths:
        LOGGER.debug("Processing input PDF %s", pdf_path)
        try:
            reader = open_pdf(pdf_path)
        except PDFToolException as exc:
            raise MergeError(f"Cannot merge {pdf_path.name}: {exc.message}") from exc

        try:
            for page in reader.pages:
                writer.add_page(page)
                total_pages += 1
        except Exception as exc:
            LOGGER.error("Failed to copy pages from %s: %s", pdf_path, exc)
            raise MergeError(f"Failed to copy pages from {pdf_path.name}: {exc}") from exc

        if first_reader is None:
            first_reader = reader

    if metadata and first_reader is not None:
        copy_metadata(first_reader, writer)

    write_pdf(writer, output_path, error_cls=MergeError)

    LOGGER.info("Merged %d PDFs into %s", len(pdf_paths), output_path)
    return MergeResult(
        output_path=output_path,
        input_paths=pdf_paths,
        total_pages=total_pages,
    )


__all__ = ["merge_pdfs", "MIN_MERGE_INPUTS"]
