import asyncio
import json
import logging

from dataclasses import asdict
from pathlib import Path
from rich.console import Console
from rich.table import Table
from typing import Optional

import typer

from velo_assist import __version__
from velo_assist.code_actions import CodeActionProposer
from velo_assist.commands import VeloCommands
from velo_assist.config import load_velo_config
from velo_assist.document import TextDocument
from velo_assist.models import Position, Range
from velo_assist.parsers import get_analyzer_for_file
from velo_assist.path_utils import get_target_directory
from velo_assist.prompts import TerminalPrompter

app = typer.Typer(
    help="Velo Assist - code actions and boilerplate for Velo state management",
    no_args_is_help=True,
)

console = Console()


def _filter_none(d):
    """Drop None values so optional fields are omitted from JSON output."""
    if isinstance(d, dict):
        return {k: _filter_none(v) for k, v in d.items() if v is not None}
    elif isinstance(d, list):
        return [_filter_none(item) for item in d]
    else:
        return d


def _parse_position(value: str) -> Position:
    """Parse a zero-based "line:character" position."""
    line, sep, character = value.partition(":")
    if not sep or not line.isdigit() or not character.isdigit():
        raise ValueError(f"Invalid position '{value}', expected LINE:CHARACTER")
    return Position(line=int(line), character=int(character))


def _check_selection(document: TextDocument, selection: Range) -> None:
    """Reject selections that start past the last line or after their end."""
    start, end = selection.start, selection.end
    if start.line >= document.line_count:
        raise ValueError(
            f"Selection starts at line {start.line} but the file has {document.line_count} lines"
        )
    if (start.line, start.character) > (end.line, end.character):
        raise ValueError("Selection start is after its end")


def _load_document(file_path: Path) -> TextDocument:
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    return TextDocument.from_path(file_path)


@app.command()
def analyze(
    file_path: Path,
    state: Optional[str] = typer.Option(None, "--state", help="State class whose fields to list"),
    velo: Optional[str] = typer.Option(None, "--velo", help="Velo class whose methods to list"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Report Velo types, imports and context usages found in a Dart file.

    Args:
        file_path: Dart file to analyze
    """
    try:
        analyzer = get_analyzer_for_file(file_path)
        if analyzer is None:
            raise ValueError(f"Unsupported file type: {file_path}")
        source_code = _load_document(file_path).get_text()
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    report = {
        "has_velo_import": analyzer.has_velo_import(source_code),
        "imports": analyzer.list_imports(source_code),
        "type_bindings": [asdict(b) for b in analyzer.find_type_bindings(source_code)],
        "context_usages": [asdict(u) for u in analyzer.find_context_usages(source_code)],
    }
    if state:
        report["state_properties"] = [
            asdict(p) for p in analyzer.find_state_properties(source_code, state)
        ]
    if velo:
        report["methods"] = [asdict(m) for m in analyzer.find_methods(source_code, velo)]

    if json_output:
        typer.echo(json.dumps(_filter_none(report), indent=2))
        return

    console.print(f"Velo import: {'yes' if report['has_velo_import'] else 'no'}")

    bindings_table = Table(title="Type bindings")
    bindings_table.add_column("Line", justify="right")
    bindings_table.add_column("Velo")
    bindings_table.add_column("State")
    for binding in report["type_bindings"]:
        bindings_table.add_row(
            str(binding["line_number"]), binding["primary_type"], binding["state_type"]
        )
    console.print(bindings_table)

    usages_table = Table(title="Context usages")
    usages_table.add_column("Line", justify="right")
    usages_table.add_column("Kind")
    usages_table.add_column("Velo")
    for usage in report["context_usages"]:
        usages_table.add_row(str(usage["line_number"]), usage["kind"], usage["primary_type"])
    console.print(usages_table)

    for import_path in report["imports"]:
        console.print(f"import {import_path}")

    for prop in report.get("state_properties", []):
        console.print(f"field {prop['type']} {prop['name']}")

    for method in report.get("methods", []):
        prefix = "async " if method["is_asynchronous"] else ""
        console.print(f"method {prefix}{method['name']}")


@app.command()
def actions(
    file_path: Path,
    start: str,
    end: str,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    apply: Optional[str] = typer.Option(
        None, "--apply", help="Print the document with the labelled action applied"
    ),
):
    """Propose code actions for a selection in a Dart file.

    Args:
        file_path: Dart file containing the selection
        start: Selection start as LINE:CHARACTER (zero-based)
        end: Selection end as LINE:CHARACTER (zero-based)

    Examples:
        velo actions lib/counter_page.dart 12:4 14:5
        velo actions lib/counter_page.dart 12:4 14:5 --apply "Wrap with VeloBuilder"
    """
    try:
        selection = Range(start=_parse_position(start), end=_parse_position(end))
        document = _load_document(file_path)
        _check_selection(document, selection)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    proposer = CodeActionProposer(config=load_velo_config(file_path.parent))
    candidates = proposer.propose(document, selection)

    if apply is not None:
        chosen = next((c for c in candidates if c.label == apply), None)
        if chosen is None:
            typer.echo(f"Error: No action '{apply}' for this selection", err=True)
            raise typer.Exit(code=1)
        typer.echo(document.replace(selection, chosen.replacement_text), nl=False)
        return

    if json_output:
        typer.echo(json.dumps([asdict(c) for c in candidates], indent=2))
        return

    if not candidates:
        console.print("No code actions for this selection")
        return

    for candidate in candidates:
        console.rule(candidate.label)
        console.print(candidate.replacement_text, markup=False, highlight=False)


def _run_command(method_name: str, directory: Optional[Path]):
    target_dir = get_target_directory(directory, workspace_folders=[Path.cwd()])
    config = load_velo_config(target_dir)
    commands = VeloCommands(TerminalPrompter(), config)
    result = asyncio.run(getattr(commands, method_name)(target_dir))
    if result is None:
        raise typer.Exit(code=1)


@app.command()
def new_velo(
    directory: Optional[Path] = typer.Option(None, "--dir", help="Target directory"),
):
    """Create a new Velo class file."""
    _run_command("new_velo", directory)


@app.command()
def new_state(
    directory: Optional[Path] = typer.Option(None, "--dir", help="Target directory"),
):
    """Create a new Equatable state class file."""
    _run_command("new_state", directory)


@app.command()
def new_velo_with_state(
    directory: Optional[Path] = typer.Option(None, "--dir", help="Target directory"),
):
    """Create a Velo class and its state class from a base name."""
    _run_command("new_velo_with_state", directory)


@app.command()
def new_test(
    directory: Optional[Path] = typer.Option(None, "--dir", help="Target directory"),
):
    """Create a velo_test scaffold in the test directory."""
    _run_command("new_test", directory)


@app.command()
def mcp_server():
    """Start the MCP server exposing velo analysis and code actions.

    This command starts the Model Context Protocol server so assistants can
    query Velo types and code actions via structured JSON-RPC.
    """
    from velo_assist.mcp_server import main

    asyncio.run(main())


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"velo-assist version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
