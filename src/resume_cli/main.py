"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
from rich.console import Console

from resume_core.config.settings import Settings
from resume_core.exceptions import ResumeExtractorError
from resume_extractor.observability import configure_logging
from resume_extractor.service import ResumeParsingService
from resume_extractor.tools.document_reader import DocumentReader

app = typer.Typer(
    name="resume-extractor",
    help="Extract structured candidate fields from resume documents",
)
console = Console()
err_console = Console(stderr=True)

__version__ = "0.1.0"


def _load_settings(verbose: bool) -> Settings:
    """Build settings from the environment and configure logging."""
    settings = Settings()
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


@app.command()
def parse(
    document: Path = typer.Argument(..., help="Resume file (.pdf, .docx, .txt)", exists=True),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write JSON to this file instead of stdout"
    ),
    with_metadata: bool = typer.Option(
        False, "--with-metadata", help="Include source, content hash and timestamp"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Parse a resume document and print the extracted fields as JSON."""
    settings = _load_settings(verbose)
    service = ResumeParsingService(settings)

    try:
        result = asyncio.run(service.parse_file(document))
    except ResumeExtractorError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    payload: dict[str, object] = result.resume.to_json_dict()
    if with_metadata:
        payload = {
            "source": result.source,
            "contentHash": result.content_hash,
            "parsedAt": result.parsed_at.isoformat(),
            "resume": payload,
        }
    rendered = json.dumps(payload, indent=settings.json_indent, ensure_ascii=False)

    if output is not None:
        output.write_text(rendered + "\n", encoding="utf-8")
        err_console.print(f"[bold green]Wrote[/bold green] {output}")
    else:
        # Plain print keeps stdout machine-readable
        print(rendered)

    if result.resume.is_empty:
        err_console.print("[yellow]No resume fields were recognized[/yellow]")


@app.command()
def text(
    document: Path = typer.Argument(..., help="Resume file (.pdf, .docx, .txt)", exists=True),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Print the normalized text extracted from a document."""
    settings = _load_settings(verbose)
    reader = DocumentReader(settings)

    try:
        content = asyncio.run(reader.extract_text(document))
    except ResumeExtractorError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    print(content)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"resume-extractor v{__version__}")


if __name__ == "__main__":
    app()
