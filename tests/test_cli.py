import json
from pathlib import Path

from typer.testing import CliRunner

from text_bubbles.cli import app

runner = CliRunner()


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """CLI analyze command returns JSON summary for every .txt document."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", "nested/notes.txt"]
    first = payload["documents"][0]
    assert first["stats"]["word_count"] == 11
    assert first["stats"]["longest_word"] == "Sailors"
    kinds = {bubble["kind"] for bubble in first["bubbles"]}
    assert kinds == {"word", "filler", "break"}


def test_cli_analyze_applies_overrides(tmp_path: Path):
    """Law and scale flags change the reported bubble sizes."""
    text_file = tmp_path / "single.txt"
    text_file.write_text("abcd efghijkl", encoding="utf-8")
    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(text_file),
            "--law",
            "quadratic",
            "--scale",
            "4",
            "--no-breaks",
        ],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    sizes = [bubble["size"] for bubble in payload["documents"][0]["bubbles"]]
    assert abs(sizes[1] - 8.0) < 1e-9
    assert sizes[0] < sizes[1]


def test_cli_analyze_rejects_invalid_scale(tmp_path: Path):
    text_file = tmp_path / "single.txt"
    text_file.write_text("words here", encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(text_file), "--scale", "0"]
    )
    assert result.exit_code != 0


def test_cli_stats_prints_panel(tmp_path: Path):
    text_file = tmp_path / "hello.txt"
    text_file.write_text("Hello, world! 2024", encoding="utf-8")
    result = runner.invoke(app, ["stats", "--input-path", str(text_file)])
    assert result.exit_code == 0
    assert "File: hello.txt" in result.stdout
    assert "Tokens: 5" in result.stdout
    assert "Average length: 2.8" in result.stdout
    assert "Longest: [5]Hello" in result.stdout


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "scale" in result.stdout
    assert "law: linear" in result.stdout


def _create_sample_corpus(tmp_path: Path) -> Path:
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "chapter1.txt").write_text(
        "The storm clouds rolled over the bay.\nSailors watched the winds.",
        encoding="utf-8",
    )
    (corpus_dir / "nested" / "notes.txt").write_text("Short note.", encoding="utf-8")
    (corpus_dir / "ignored.md").write_text("# not text", encoding="utf-8")
    return corpus_dir
