from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import BubbleConfig, load_config
from .models import BubbleReport, Document, InvalidConfig, ScaleLaw, SizedToken, Stats
from .pipeline import process_corpus

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Text Bubbles CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class BubblePayload(TypedDict):
    text: str
    kind: str
    alphanum_length: int
    letter_length: int
    size: float | None


class StatsPayload(TypedDict):
    token_count: int
    word_count: int
    char_count: int
    alphanum_count: int
    letter_count: int
    average_word_length: float
    longest_word: str | None


class DocumentSummary(TypedDict):
    doc_id: str
    stats: StatsPayload | None
    bubbles: List[BubblePayload]


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    law: str | None = typer.Option(
        None, "--law", "-l", help="Scale law: linear, quadratic or cubic."
    ),
    scale: float | None = typer.Option(None, "--scale", help="Bubble scale (> 0)."),
    spacing: float | None = typer.Option(
        None, "--spacing", help="Spacing between bubbles (>= 0)."
    ),
    show_breaks: bool | None = typer.Option(
        None,
        "--breaks/--no-breaks",
        help="Include line-break markers in the bubble list.",
    ),
) -> None:
    """Size every token of the input and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(cfg, law, scale, spacing, show_breaks)
    documents = _load_documents(input_path)
    results = _run(documents, cfg)
    typer.echo(json.dumps({"documents": _build_summary(results)}, indent=2))


@app.command()
def stats(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the statistics panel for each input document."""
    cfg = load_config(config)
    cfg.show_stats = True
    documents = _load_documents(input_path)
    for doc_id, report in sorted(_run(documents, cfg).items()):
        typer.echo(f"File: {doc_id}")
        if report.stats is not None:
            for line in format_stats(report.stats):
                typer.echo(f"  {line}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = BubbleConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def format_stats(stats: Stats) -> List[str]:
    """Render Stats as human-readable panel lines."""
    longest = stats.longest_word
    longest_text = (
        f"[{longest.alphanum_length}]{longest.text.strip()}" if longest else "[0]"
    )
    return [
        f"Tokens: {stats.token_count}",
        f"Words: {stats.word_count}",
        f"Characters: {stats.char_count}",
        f"Alphanumerics: {stats.alphanum_count}",
        f"Letters: {stats.letter_count}",
        f"Average length: {stats.average_word_length:.1f}",
        f"Longest: {longest_text}",
    ]


def _apply_overrides(
    config: BubbleConfig,
    law: str | None,
    scale: float | None,
    spacing: float | None,
    show_breaks: bool | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if law:
        config.law = ScaleLaw.parse(law).value
    if scale is not None:
        config.scale = scale
    if spacing is not None:
        config.spacing = spacing
    if show_breaks is not None:
        config.show_breaks = show_breaks


def _run(documents: List[Document], config: BubbleConfig) -> Dict[str, BubbleReport]:
    try:
        return process_corpus(documents, config)
    except InvalidConfig as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    if not files:
        LOGGER.warning("No .txt files found under %s", input_path)
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix())
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    # newline="" keeps \r\n so character counts match the file contents.
    with path.open("r", encoding="utf-8", newline="") as handle:
        return Document(doc_id=doc_id, text=handle.read())


def _build_summary(results: Dict[str, BubbleReport]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, report in sorted(results.items()):
        stats_payload = _stats_dict(report.stats) if report.stats is not None else None
        summary.append(
            {
                "doc_id": doc_id,
                "stats": stats_payload,
                "bubbles": [_bubble_dict(bubble) for bubble in report.bubbles],
            }
        )
    return summary


def _stats_dict(stats: Stats) -> StatsPayload:
    longest = stats.longest_word
    return {
        "token_count": stats.token_count,
        "word_count": stats.word_count,
        "char_count": stats.char_count,
        "alphanum_count": stats.alphanum_count,
        "letter_count": stats.letter_count,
        "average_word_length": stats.average_word_length,
        "longest_word": longest.text.strip() if longest else None,
    }


def _bubble_dict(bubble: SizedToken) -> BubblePayload:
    token = bubble.token
    return {
        "text": token.text,
        "kind": token.kind.value,
        "alphanum_length": token.alphanum_length,
        "letter_length": token.letter_length,
        "size": bubble.size,
    }


if __name__ == "__main__":
    main()
