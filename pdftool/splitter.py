"""Split a PDF into single pages or extract a selection of pages."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Union

from pypdf import PdfWriter

from .document import copy_metadata, open_pdf, write_pdf
from .exceptions import InvalidPDFError, SplitError
from .page_range import format_page_range, parse_page_range
from .types import SplitMode, SplitResult
from .utils import PathLike, ensure_path, get_logger

LOGGER = get_logger("pdftool.split")

ProgressCallback = Callable[[int, int], None]


class PDFSplitter:
    """High-level PDF splitting operations."""

    def __init__(self, input_path: PathLike, *, password: Optional[str] = None) -> None:
        self.input_path = ensure_path(input_path)
        self._reader = open_pdf(self.input_path, password=password)
        self.num_pages = len(self._reader.pages)
        if self.num_pages == 0:
            raise InvalidPDFError(f"PDF has no pages: {input_path}")

    def _new_writer(self, indices: List[int]) -> PdfWriter:
        writer = PdfWriter()
        try:
            for index in indices:
                writer.add_page(self._reader.pages[index])
        except Exception as exc:
            raise SplitError(
                f"Failed to copy pages from {self.input_path.name}: {exc}"
            ) from exc
        return writer

    def split_to_pages(
        self,
        output_dir: PathLike,
        base_name: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> SplitResult:
        """Write every page to its own ``{base_name}_page_{n}.pdf`` file."""

        output_path = ensure_path(output_dir)
        base_name = base_name or self.input_path.stem

        created_files: List[Path] = []
        for index in range(self.num_pages):
            writer = self._new_writer([index])
            copy_metadata(
                self._reader,
                writer,
                title_suffix=f" - Page {index + 1}",
                keywords=f"Page {index + 1}",
            )
            destination = output_path / f"{base_name}_page_{index + 1}.pdf"
            created_files.append(write_pdf(writer, destination, error_cls=SplitError))

            if progress_callback:
                progress_callback(index + 1, self.num_pages)

        LOGGER.info(
            "Split %s into %d page files in %s",
            self.input_path,
            len(created_files),
            output_path,
        )
        return SplitResult(
            source_path=self.input_path,
            mode=SplitMode.PAGES,
            files_created=created_files,
            pages=list(range(self.num_pages)),
        )

    def extract_range(self, expression: str, output_path: PathLike) -> SplitResult:
        """Copy the pages selected by *expression* into *output_path*.

        Raises:
            PageRangeError: If *expression* does not select any page.
        """

        indices = parse_page_range(expression, self.num_pages)
        label = format_page_range(indices)
        LOGGER.debug("Page range %r resolved to pages %s", expression, label)

        writer = self._new_writer(indices)
        noun = "Page" if len(indices) == 1 else "Pages"
        copy_metadata(
            self._reader,
            writer,
            title_suffix=f" - {noun} {label}",
            keywords=f"{noun} {label}",
        )
        destination = write_pdf(writer, output_path, error_cls=SplitError)

        LOGGER.info("Extracted %d pages from %s into %s", len(indices), self.input_path, destination)
        return SplitResult(
            source_path=self.input_path,
            mode=SplitMode.RANGE,
            files_created=[destination],
            pages=indices,
        )

    def split(
        self,
        mode: Union[SplitMode, str],
        output_path: PathLike,
        expression: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> SplitResult:
        """Split according to *mode*.

        In ``pages`` mode the page files are written next to *output_path*
        and named after its stem. In ``range`` mode *expression* is required
        and the selection is written to *output_path* itself.
        """

        mode = SplitMode(mode)
        destination = ensure_path(output_path)
        if mode is SplitMode.PAGES:
            return self.split_to_pages(
                destination.parent,
                base_name=destination.stem,
                progress_callback=progress_callback,
            )
        if expression is None:
            raise SplitError("A page range is required to split by range.")
        return self.extract_range(expression, destination)

    def get_page_count(self) -> int:
        return self.num_pages


__all__ = ["PDFSplitter"]
