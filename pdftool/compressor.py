"""Compression engine for :mod:`pdftool`."""

from __future__ import annotations

import dataclasses
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Literal, Optional

from pypdf import PdfWriter

from .document import open_pdf
from .exceptions import CompressionError, PDFToolException
from .utils import PathLike, ensure_path, get_logger

LOGGER = get_logger("pdftool.compress")

CompressionLevelName = Literal["low", "medium", "high"]


@dataclasses.dataclass(frozen=True)
class CompressionLevel:
    """Defines behavioural toggles for compression levels."""

    name: CompressionLevelName
    zlib_level: int
    image_quality: Optional[int]
    remove_duplicates: bool


@dataclasses.dataclass
class CompressionResult:
    """Represents the outcome of a compression run."""

    input_path: Path
    output_path: Path
    level: CompressionLevelName
    original_size: int
    compressed_size: int

    @property
    def bytes_saved(self) -> int:
        return max(self.original_size - self.compressed_size, 0)

    @property
    def compression_ratio(self) -> float:
        if self.original_size == 0:
            return 1.0
        return self.compressed_size / self.original_size

    @property
    def reduction_percent(self) -> float:
        """Size reduction in percent; negative when the file grew."""

        return 100.0 - self.compression_ratio * 100.0


LEVELS: Dict[str, CompressionLevel] = {
    "high": CompressionLevel("high", zlib_level=9, image_quality=60, remove_duplicates=True),
    "medium": CompressionLevel("medium", zlib_level=6, image_quality=80, remove_duplicates=True),
    "low": CompressionLevel("low", zlib_level=3, image_quality=None, remove_duplicates=False),
}


def get_level(name: str) -> CompressionLevel:
    try:
        return LEVELS[name]
    except KeyError:
        raise ValueError(
            f"Unknown compression level: {name}. Expected one of {', '.join(LEVELS)}"
        ) from None


def _reencode_images(page, quality: int) -> None:
    try:
        images = list(page.images)
    except Exception as exc:
        LOGGER.warning("Cannot list images on page: %s", exc)
        return

    for image in images:
        try:
            image.replace(image.image, quality=quality)
        except Exception as exc:
            LOGGER.warning("Skipping image %s: %s", getattr(image, "name", "?"), exc)


def _compress_with_pypdf(
    source: Path,
    destination: Path,
    level: CompressionLevel,
    password: Optional[str] = None,
) -> None:
    reader = open_pdf(source, password=password)
    writer = PdfWriter(clone_from=reader)

    for page in writer.pages:
        if level.image_quality is not None:
            _reencode_images(page, level.image_quality)
        page.compress_content_streams(level=level.zlib_level)

    if level.remove_duplicates:
        writer.compress_identical_objects()

    with destination.open("wb") as target:
        writer.write(target)


def compress_pdf(
    input_path: PathLike,
    output_path: PathLike,
    level: CompressionLevelName = "medium",
    *,
    password: Optional[str] = None,
) -> CompressionResult:
    """Compress *input_path* writing the output to *output_path*.

    The document is written to a temporary file first, so *output_path* may
    be the input file itself. Encrypted input is opened with *password*.

    Raises:
        ValueError: If *level* is not ``high``, ``medium`` or ``low``.
        FileNotFoundError: If *input_path* does not exist.
        CompressionError: If reading or rewriting the document fails.
    """

    level_config = get_level(level)
    source = ensure_path(input_path)
    destination = ensure_path(output_path)

    if not source.exists():
        raise FileNotFoundError(source)

    original_size = source.stat().st_size
    destination.parent.mkdir(parents=True, exist_ok=True)
    handle, temp_name = tempfile.mkstemp(prefix="pdftool-", suffix=".pdf", dir=destination.parent)
    os.close(handle)
    intermediate = Path(temp_name)

    try:
        LOGGER.debug("Compressing %s at level %s", source, level)
        _compress_with_pypdf(source, intermediate, level_config, password)
        shutil.move(str(intermediate), str(destination))
    except PDFToolException as exc:
        raise CompressionError(f"Compression failed: {exc.message}") from exc
    except Exception as exc:
        raise CompressionError(f"Compression failed: {exc}") from exc
    finally:
        intermediate.unlink(missing_ok=True)

    result = CompressionResult(
        input_path=source,
        output_path=destination,
        level=level,
        original_size=original_size,
        compressed_size=destination.stat().st_size,
    )
    LOGGER.info(
        "Compressed %s to %s (%d -> %d bytes)",
        source,
        destination,
        result.original_size,
        result.compressed_size,
    )
    return result


__all__ = [
    "CompressionLevelName",
    "CompressionLevel",
    "CompressionResult",
    "LEVELS",
    "get_level",
    "compress_pdf",
]
