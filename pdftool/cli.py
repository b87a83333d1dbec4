"""
Command-line interface for pdftool.
"""

import os
import sys

import click
from rich.console import Console
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table

from pdftool import __version__
from pdftool.compressor import LEVELS, compress_pdf
from pdftool.config import Settings
from pdftool.document import get_pdf_info, validate_pdf
from pdftool.exceptions import PageRangeError
from pdftool.merger import MIN_MERGE_INPUTS, merge_pdfs
from pdftool.page_range import format_page_range
from pdftool.splitter import PDFSplitter
from pdftool.utils import collect_pdf_paths, configure_logging, format_file_size, open_path

console = Console()

INVALID_RANGE_MESSAGE = (
    "Invalid page range specified. Please use formats like '1-3', '5', '1,3,5-7'."
)


def _fail(message):
    console.print(f"\n[bold red]✗ Error:[/bold red] {message}")
    sys.exit(1)


def _require_valid_pdf(input_pdf, password=None):
    is_valid, error_msg = validate_pdf(input_pdf, password=password)
    if not is_valid:
        _fail(error_msg)


def _launch(path):
    console.print(f"[dim]Opening {path}[/dim]")
    open_path(path)


def _default_output(input_pdf, suffix):
    stem, _ = os.path.splitext(os.path.basename(input_pdf))
    return os.path.join(os.path.dirname(os.path.abspath(input_pdf)), f"{stem}_{suffix}.pdf")


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose):
    """
    pdftool - Merge, split and compress PDF files.
    """
    settings = Settings.from_env()
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


def _open_option(func):
    return click.option(
        '--open/--no-open', 'open_result',
        default=None,
        help='Open the result when done (default from PDFTOOL_OPEN_RESULT)',
    )(func)


def _password_option(func):
    return click.option(
        '--password',
        default=None,
        help='Password for an encrypted input PDF',
    )(func)


@cli.command(name="merge")
@click.argument('inputs', nargs=-1, required=True, type=click.Path())
@click.option(
    '--output', '-o',
    default='merged.pdf',
    show_default=True,
    help='Output PDF path',
    type=click.Path()
)
@_open_option
@click.pass_obj
def merge(settings, inputs, output, open_result):
    """
    Merge two or more PDF files into one, in the order given.

    Examples:

        pdftool merge a.pdf b.pdf -o merged.pdf

        pdftool merge chapters/*.pdf --output book.pdf --open
    """
    pdf_files = collect_pdf_paths(inputs)
    skipped = len(inputs) - len(pdf_files)
    if skipped:
        console.print(f"[yellow]⚠ Ignored {skipped} non-PDF or duplicate input(s)[/yellow]")

    if len(pdf_files) < MIN_MERGE_INPUTS:
        console.print("[bold yellow]⚠ Please select at least 2 PDF files to merge.[/bold yellow]")
        sys.exit(1)

    try:
        console.print(f"\n[bold cyan]Merging {len(pdf_files)} file(s)...[/bold cyan]")
        result = merge_pdfs(pdf_files, output)
    except Exception as e:
        _fail(f"An error occurred while merging the PDF files: {e}")

    console.print(
        f"\n[bold green]✓ Successfully merged {result.total_files} files![/bold green]"
    )
    console.print(f"[dim]Output: {result.output_path} ({result.total_pages} pages)[/dim]")
    console.print()

    if settings.open_result if open_result is None else open_result:
        _launch(result.output_path)


@cli.command(name="split")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--pages', '-p',
    default=None,
    help="Pages to extract (e.g., '1-3', '5', '1,3,5-7'); omit to split every page",
    type=str
)
@click.option(
    '--output', '-o',
    default=None,
    help='Output PDF path (default: <input>_split.pdf beside the input)',
    type=click.Path()
)
@_password_option
@_open_option
@click.pass_obj
def split(settings, input_pdf, pages, output, password, open_result):
    """
    Split a PDF into single pages, or extract a page range.

    Without --pages every page is written to <output>_page_N.pdf beside
    the output path.

    Examples:

        pdftool split input.pdf

        pdftool split input.pdf -p '1-3,5' -o selection.pdf

        pdftool split locked.pdf --password secret
    """
    _require_valid_pdf(input_pdf, password)
    output = output or _default_output(input_pdf, "split")

    try:
        splitter = PDFSplitter(input_pdf, password=password)

        if pages is None:
            console.print(f"\n[bold cyan]Splitting {splitter.num_pages} pages...[/bold cyan]")
            with Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                console=console
            ) as progress:
                task = progress.add_task("Splitting pages", total=splitter.num_pages)

                def update_progress(current, total):
                    progress.update(task, completed=current)

                result = splitter.split("pages", output, progress_callback=update_progress)
            console.print(
                f"\n[bold green]✓ Successfully split the file into {result.total_files} pages.[/bold green]"
            )
        else:
            result = splitter.split("range", output, expression=pages)
            console.print(
                f"\n[bold green]✓ Successfully extracted {len(result.pages)} pages.[/bold green]"
            )
            console.print(f"[dim]Pages: {format_page_range(result.pages)}[/dim]")
    except PageRangeError:
        _fail(INVALID_RANGE_MESSAGE)
    except Exception as e:
        _fail(f"An error occurred during splitting: {e}")

    console.print(f"[dim]Output directory: {result.output_dir}[/dim]")
    console.print()

    if settings.open_result if open_result is None else open_result:
        _launch(result.output_dir)


@cli.command(name="compress")
@click.argument('input_pdf', type=click.Path(exists=True))
@click.option(
    '--output', '-o',
    default=None,
    help='Output PDF path (default: <input>_compressed.pdf beside the input)',
    type=click.Path()
)
@click.option(
    '--level', '-l',
    default=None,
    type=click.Choice(list(LEVELS), case_sensitive=False),
    help='Compression level (default from PDFTOOL_COMPRESSION_LEVEL, else medium)'
)
@_password_option
@_open_option
@click.pass_obj
def compress(settings, input_pdf, output, level, password, open_result):
    """
    Compress a PDF file.

    Examples:

        pdftool compress input.pdf

        pdftool compress input.pdf -l high -o small.pdf
    """
    _require_valid_pdf(input_pdf, password)
    output = output or _default_output(input_pdf, "compressed")
    level = (level or settings.compression_level).lower()

    try:
        console.print(f"\n[bold cyan]Compressing ({level})...[/bold cyan]")
        result = compress_pdf(input_pdf, output, level=level, password=password)
    except Exception as e:
        _fail(f"An error occurred during compression: {e}")

    if result.reduction_percent > 0:
        console.print(
            f"\n[bold green]✓ Compression complete! File size reduced by "
            f"{result.reduction_percent:.2f}%.[/bold green]"
        )
    else:
        console.print(
            "\n[bold green]✓ Compression complete![/bold green] Note: This PDF may already "
            "be optimized, so size reduction is minimal."
        )
    console.print(
        f"[dim]{format_file_size(result.original_size)} → "
        f"{format_file_size(result.compressed_size)}: {result.output_path}[/dim]"
    )
    console.print()

    if settings.open_result if open_result is None else open_result:
        _launch(result.output_path)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
@_password_option
def show_info(input_pdf, password):
    """
    Display information about a PDF file.

    Example:

        pdftool info input.pdf
    """
    _require_valid_pdf(input_pdf, password)

    try:
        info = get_pdf_info(input_pdf, password=password)
    except Exception as e:
        _fail(e)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", str(info.path))
    table.add_row("File Size", format_file_size(info.file_size))
    table.add_row("Number of Pages", str(info.num_pages))
    table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")

    if info.title:
        table.add_row("Title", info.title)
    if info.author:
        table.add_row("Author", info.author)
    if info.subject:
        table.add_row("Subject", info.subject)
    if info.creator:
        table.add_row("Creator", info.creator)
    if info.producer:
        table.add_row("Producer", info.producer)

    console.print()
    console.print(table)
    console.print()


if __name__ == '__main__':
    cli()
