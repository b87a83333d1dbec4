from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner
from pypdf import PdfReader

from pdftool import __version__
from pdftool.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    calls: list[str] = []
    monkeypatch.setattr("pdftool.cli.open_path", lambda path: calls.append(str(path)))
    return calls


def _page_count(path: Path) -> int:
    return len(PdfReader(str(path)).pages)


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_merge_command(runner: CliRunner, sample_pdfs: list[Path], tmp_path: Path, launched: list[str]) -> None:
    output = tmp_path / "merged.pdf"
    result = runner.invoke(cli, ["merge", *map(str, sample_pdfs), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Successfully merged 2 files" in result.output
    assert _page_count(output) == 5
    assert launched == []


def test_merge_command_drops_non_pdf_inputs(
    runner: CliRunner, sample_pdfs: list[Path], tmp_path: Path, launched: list[str]
) -> None:
    notes = tmp_path / "notes.txt"
    notes.write_text("skip me")
    output = tmp_path / "merged.pdf"

    result = runner.invoke(
        cli,
        ["merge", str(sample_pdfs[0]), str(notes), str(sample_pdfs[1]), str(sample_pdfs[0]), "-o", str(output), "--open"],
    )

    assert result.exit_code == 0, result.output
    assert "Ignored 2" in result.output
    assert launched == [str(output.resolve())]


def test_merge_command_needs_two_pdfs(runner: CliRunner, sample_pdfs: list[Path], tmp_path: Path) -> None:
    result = runner.invoke(cli, ["merge", str(sample_pdfs[0]), "-o", str(tmp_path / "merged.pdf")])

    assert result.exit_code == 1
    assert "at least 2" in result.output
    assert not (tmp_path / "merged.pdf").exists()


def test_merge_command_reports_broken_input(runner: CliRunner, sample_pdfs: list[Path], tmp_path: Path) -> None:
    broken = tmp_path / "broken.pdf"
    broken.write_text("not a pdf")

    result = runner.invoke(cli, ["merge", str(sample_pdfs[0]), str(broken), "-o", str(tmp_path / "m.pdf")])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_split_command_pages(runner: CliRunner, sample_pdf: Path, tmp_path: Path, launched: list[str]) -> None:
    output = tmp_path / "parts" / "doc.pdf"
    result = runner.invoke(cli, ["split", str(sample_pdf), "-o", str(output), "--open"])

    assert result.exit_code == 0, result.output
    assert "10 pages" in result.output
    assert sorted(path.name for path in output.parent.glob("doc_page_*.pdf"))[:2] == [
        "doc_page_1.pdf",
        "doc_page_10.pdf",
    ]
    assert launched == [str(output.parent.resolve())]


def test_split_command_range(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "selection.pdf"
    result = runner.invoke(cli, ["split", str(sample_pdf), "--pages", "1,3,5-7", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "extracted 5 pages" in result.output
    assert _page_count(output) == 5


def test_split_command_default_output(runner: CliRunner, sample_pdf: Path) -> None:
    result = runner.invoke(cli, ["split", str(sample_pdf), "-p", "2"])

    assert result.exit_code == 0, result.output
    assert _page_count(sample_pdf.parent / "sample_split.pdf") == 1


@pytest.mark.parametrize("pages", ["", "abc", "50", "5-3"])
def test_split_command_invalid_range(runner: CliRunner, sample_pdf: Path, tmp_path: Path, pages: str) -> None:
    output = tmp_path / "never.pdf"
    result = runner.invoke(cli, ["split", str(sample_pdf), "--pages", pages, "-o", str(output)])

    assert result.exit_code == 1
    assert "Invalid page range specified" in result.output
    assert not output.exists()


def test_split_command_rejects_non_pdf(runner: CliRunner, tmp_path: Path) -> None:
    notes = tmp_path / "notes.txt"
    notes.write_text("hello")

    result = runner.invoke(cli, ["split", str(notes)])

    assert result.exit_code == 1
    assert "extension" in result.output


def test_compress_command(runner: CliRunner, sample_pdf: Path, tmp_path: Path) -> None:
    output = tmp_path / "small.pdf"
    result = runner.invoke(cli, ["compress", str(sample_pdf), "-o", str(output), "--level", "high"])

    assert result.exit_code == 0, result.output
    assert "Compression complete" in result.output
    assert _page_count(output) == 10


def test_compress_command_uses_environment_defaults(
    runner: CliRunner, sample_pdf: Path, launched: list[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PDFTOOL_COMPRESSION_LEVEL", "low")
    monkeypatch.setenv("PDFTOOL_OPEN_RESULT", "1")

    result = runner.invoke(cli, ["compress", str(sample_pdf)])

    expected = sample_pdf.parent / "sample_compressed.pdf"
    assert result.exit_code == 0, result.output
    assert "(low)" in result.output
    assert expected.exists()
    assert launched == [str(expected.resolve())]


def test_compress_command_no_open_overrides_environment(
    runner: CliRunner, sample_pdf: Path, tmp_path: Path, launched: list[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PDFTOOL_OPEN_RESULT", "1")

    result = runner.invoke(cli, ["compress", str(sample_pdf), "-o", str(tmp_path / "c.pdf"), "--no-open"])

    assert result.exit_code == 0, result.output
    assert launched == []


def test_compress_command_invalid_level(runner: CliRunner, sample_pdf: Path) -> None:
    result = runner.invoke(cli, ["compress", str(sample_pdf), "--level", "extreme"])
    assert result.exit_code == 2


def test_info_command(runner: CliRunner, sample_pdf: Path) -> None:
    result = runner.invoke(cli, ["info", str(sample_pdf)])

    assert result.exit_code == 0, result.output
    assert "Number of Pages" in result.output
    assert "10" in result.output
    assert "Sample" in result.output


def test_encrypted_input_needs_password(runner: CliRunner, pdf_factory) -> None:
    locked = pdf_factory("locked.pdf", pages=3, password="secret")

    for command in (["info"], ["compress"], ["split", "-p", "1"]):
        result = runner.invoke(cli, [*command, str(locked)])
        assert result.exit_code == 1
        assert "Error" in result.output

    result = runner.invoke(cli, ["split", str(locked), "--password", "wrong", "-p", "1"])
    assert result.exit_code == 1


def test_password_option_opens_encrypted_input(runner: CliRunner, pdf_factory, tmp_path: Path) -> None:
    locked = pdf_factory("locked.pdf", pages=3, password="secret")

    result = runner.invoke(cli, ["info", str(locked), "--password", "secret"])
    assert result.exit_code == 0, result.output
    assert "Yes" in result.output

    selection = tmp_path / "selection.pdf"
    result = runner.invoke(
        cli, ["split", str(locked), "--password", "secret", "-p", "2-3", "-o", str(selection)]
    )
    assert result.exit_code == 0, result.output
    assert _page_count(selection) == 2

    compressed = tmp_path / "compressed.pdf"
    result = runner.invoke(
        cli, ["compress", str(locked), "--password", "secret", "-o", str(compressed)]
    )
    assert result.exit_code == 0, result.output
    assert _page_count(compressed) == 3
