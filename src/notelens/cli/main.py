"""
Typer-based CLI for NoteLens.

Runs the on-device analyzers over a transcript file or a JSON list of notes
and prints the results with Rich, or as JSON for scripting.

Commands:
- analyze: per-transcript modules (summary, sentiment, fillers, ...)
- search: concept-graph search over a notes file
- vocabulary: vocabulary statistics, optionally compared with older notes
- folders: smart folders built from note tags
- info: list the registered analysis modules
"""

import json
from pathlib import Path
from typing import Any

import typer
from rich import print
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from notelens import __version__
from notelens.core.analysis.registry import (
    get_available_modules,
    get_default_modules,
    get_module_info,
    run_modules,
)
from notelens.core.analysis.semantic_search import (
    SemanticIndexStore,
    semantic_search,
)
from notelens.core.analysis.smart_folders import SmartFolder, create_smart_folders
from notelens.core.analysis.vocabulary import (
    analyze_vocabulary,
    compare_vocabulary,
    get_readability_level,
    get_vocabulary_level,
    get_vocabulary_summary,
)
from notelens.core.models import Note
from notelens.core.utils.config import get_config, load_config
from notelens.core.utils.logger import get_logger, setup_logging
from notelens.utils.error_handling import graceful_exit

from .exit_codes import CliExit

app = typer.Typer(
    name="notelens",
    help="NoteLens - on-device text analytics for voice notes",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
logger = get_logger()

_LIST_PREVIEW = 5


@app.callback()
def callback(
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a JSON configuration file"
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """NoteLens - on-device text analytics for voice notes"""
    if config is not None:
        try:
            load_config(str(config))
        except ValueError as e:
            raise CliExit.config_error(f"Configuration error: {e}")
    logging_config = get_config().logging
    setup_logging(
        level=log_level or logging_config.level,
        log_file=logging_config.file,
        format_string=logging_config.format,
    )


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise CliExit.error(f"File not found: {path}")
    except json.JSONDecodeError as e:
        raise CliExit.error(f"Invalid JSON in {path}: {e}")


def load_notes(path: Path) -> list[Note]:
    """Load a JSON list of note objects."""
    data = _read_json(path)
    if not isinstance(data, list):
        raise CliExit.error(f"{path} must contain a JSON list of notes")
    try:
        return [Note.from_dict(item) for item in data if isinstance(item, dict)]
    except ValueError as e:
        raise CliExit.error(f"Invalid note in {path}: {e}")


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _preview(value: Any) -> str:
    if isinstance(value, list):
        items = []
        for item in value[:_LIST_PREVIEW]:
            if isinstance(item, dict):
                item = next(iter(item.values()), "")
            items.append(str(item))
        suffix = f" (+{len(value) - _LIST_PREVIEW} more)" if len(value) > _LIST_PREVIEW else ""
        return ", ".join(items) + suffix
    if isinstance(value, dict):
        return ", ".join(f"{k}: {v}" for k, v in list(value.items())[:_LIST_PREVIEW])
    return str(value)


def _render_result(name: str, payload: Any) -> None:
    table = Table(title=name.capitalize(), show_header=False, title_justify="left")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", overflow="fold")
    if isinstance(payload, dict):
        for key, value in payload.items():
            table.add_row(key, _preview(value))
    else:
        table.add_row("result", _preview(payload))
    console.print(table)


@app.command()
def analyze(
    file: Path = typer.Argument(..., help="Transcript text file"),
    modules: str = typer.Option(
        "all", "--modules", "-m", help="Comma-separated list of modules or 'all'"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    language: str | None = typer.Option(
        None, "--language", "-l", help="Transcript language for the word cloud"
    ),
):
    """
    Analyze a transcript file with the selected modules.
    """
    with graceful_exit():
        if modules.lower() == "all":
            module_list = get_default_modules()
        else:
            module_list = [m.strip() for m in modules.split(",") if m.strip()]
        unknown = [m for m in module_list if get_module_info(m) is None]
        if unknown:
            raise CliExit.error(
                f"Unknown module(s): {', '.join(unknown)}. "
                f"Available: {', '.join(get_available_modules())}"
            )

        try:
            text = file.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise CliExit.error(f"File not found: {file}")

        options = {"wordcloud": {"language": language}} if language else None
        results = run_modules(text, module_list, options)

        if as_json:
            _echo_json(results)
            return
        for name, payload in results.items():
            _render_result(name, payload)


@app.command()
def search(
    notes_file: Path = typer.Argument(..., help="JSON list of notes"),
    query: str = typer.Argument(..., help="Search query"),
    threshold: float | None = typer.Option(
        None, "--threshold", "-t", help="Minimum relevance score (0-1)"
    ),
    fast: bool = typer.Option(
        False, "--fast", help="Use the inverted index instead of full scoring"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """
    Search notes by meaning using the concept graph.
    """
    with graceful_exit():
        notes = load_notes(notes_file)
        if fast:
            results = SemanticIndexStore(notes).search(query)
        else:
            results = semantic_search(notes, query, threshold=threshold)

        if as_json:
            _echo_json([r.to_dict() for r in results])
            return
        if not results:
            print(f"[yellow]No notes match '{query}'[/yellow]")
            return
        table = Table(title=f"Results for '{query}'")
        table.add_column("Note", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("Match")
        table.add_column("Explanation", overflow="fold")
        for result in results:
            table.add_row(
                result.note.title or result.note.id,
                f"{result.relevance_score:.2f}",
                result.match_type.value,
                result.explanation,
            )
        console.print(table)


@app.command()
def vocabulary(
    notes_file: Path = typer.Argument(..., help="JSON list of notes"),
    previous: Path | None = typer.Option(
        None, "--previous", "-p", help="Older notes file to compare against"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """
    Vocabulary richness and readability across notes.
    """
    with graceful_exit():
        insights = analyze_vocabulary(load_notes(notes_file))
        comparison = None
        if previous is not None:
            comparison = compare_vocabulary(
                insights, analyze_vocabulary(load_notes(previous))
            )

        if as_json:
            payload: dict[str, Any] = {"insights": insights.to_dict()}
            if comparison is not None:
                payload["comparison"] = comparison.to_dict()
            _echo_json(payload)
            return

        print(get_vocabulary_summary(insights))
        print(f"[cyan]Level:[/cyan] {get_vocabulary_level(insights.vocabulary_richness)}")
        print(f"[cyan]Readability:[/cyan] {get_readability_level(insights.readability_index)}")
        if comparison is not None:
            print(
                f"[cyan]Trend:[/cyan] unique words {comparison.unique_words_growth:+.1f}%, "
                f"richness {comparison.richness_trend}, "
                f"sentences {comparison.sentence_length_trend}"
            )


def _add_folder(tree: Tree, folder: SmartFolder) -> None:
    branch = tree.add(
        f"[{folder.color}]{folder.name}[/{folder.color}] "
        f"[dim]{folder.description}[/dim]"
    )
    for sub in folder.sub_folders:
        _add_folder(branch, sub)


@app.command()
def folders(
    notes_file: Path = typer.Argument(..., help="JSON list of notes"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """
    Group notes into smart folders by tag.
    """
    with graceful_exit():
        structure = create_smart_folders(load_notes(notes_file))
        if as_json:
            _echo_json(structure.to_dict())
            return
        tree = Tree("Smart folders")
        for folder in structure.folders:
            _add_folder(tree, folder)
        console.print(tree)
        if structure.ungrouped:
            print(f"[dim]{len(structure.ungrouped)} ungrouped note(s)[/dim]")


@app.command()
def info():
    """
    Show the available analysis modules.
    """
    table = Table(title=f"NoteLens {__version__} modules")
    table.add_column("Module", style="cyan")
    table.add_column("Default", justify="center")
    table.add_column("Description")
    defaults = set(get_default_modules())
    for name in get_available_modules():
        module_info = get_module_info(name)
        table.add_row(
            name,
            "yes" if name in defaults else "",
            module_info.description if module_info else "",
        )
    console.print(table)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
