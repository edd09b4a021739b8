from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

import typer
import yaml

from .config import EvaluatorConfig, load_config
from .errors import EvaluatorError
from .models import AnalysisResult, Document
from .pipeline import evaluate_corpus
from .serialization import result_to_dict

app = typer.Typer(help="Writing Band Evaluator CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


@app.command()
def evaluate(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    task: str | None = typer.Option(
        None,
        "--task",
        "-t",
        help="Task category: 'short' (task1) or 'extended' (task2).",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level written to stderr."
    ),
) -> None:
    """Evaluate the input text(s) and emit a JSON report."""
    _configure_logging(log_level)
    try:
        cfg = load_config(config)
    except (EvaluatorError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    documents = _load_documents(input_path)
    try:
        results = evaluate_corpus(documents, task, cfg)
    except EvaluatorError as exc:
        raise typer.BadParameter(str(exc), param_hint="--task") from exc
    typer.echo(json.dumps({"documents": _build_summary(results)}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EvaluatorConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{level_name}'.", param_hint="--log-level"
        )
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        _document_from_file(file, str(file.relative_to(input_path))) for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, AnalysisResult]) -> List[Dict[str, object]]:
    """Create a JSON-serializable entry for each evaluated document."""
    summary: List[Dict[str, object]] = []
    for doc_id, result in sorted(results.items()):
        entry: Dict[str, object] = {"doc_id": doc_id}
        entry.update(result_to_dict(result))
        summary.append(entry)
    return summary


if __name__ == "__main__":
    main()
