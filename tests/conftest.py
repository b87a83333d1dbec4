from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

PdfFactory = Callable[..., Path]


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> PdfFactory:
    def _create(
        filename: str,
        pages: int = 1,
        title: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for index in range(pages):
            # Distinct widths make it possible to tell pages apart after a copy.
            writer.add_blank_page(width=100 + index, height=200)
        if title is not None:
            writer.add_metadata({"/Title": title, "/Author": "pdftool-tests"})
        if password is not None:
            writer.encrypt(user_password=password, owner_password=None, algorithm="RC4-128")
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory("sample.pdf", pages=10, title="Sample")


@pytest.fixture()
def sample_pdfs(pdf_factory: PdfFactory) -> list[Path]:
    pdf1 = pdf_factory("one.pdf", pages=2, title="Document One")
    pdf2 = pdf_factory("two.pdf", pages=3)
    return [pdf1, pdf2]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PDFTOOL_LOG_LEVEL", "PDFTOOL_COMPRESSION_LEVEL", "PDFTOOL_OPEN_RESULT"):
        monkeypatch.delenv(name, raising=False)
