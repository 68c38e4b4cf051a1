import json
from importlib.metadata import PackageNotFoundError, version as package_version
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from diffpack.diff import (
    AnnotatedOptions,
    CompareOptions,
    PatchOptions,
    compare,
    render_summary,
    try_diff,
)
from diffpack.diff.hunks import DEFAULT_CONTEXT_LINES

app = typer.Typer(help="diffkit CLI: line diffs with annotated and unified patch output.")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("diffkit")
    except PackageNotFoundError:
        from diffkit import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show diffkit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(payload, ensure_ascii=True, sort_keys=True, separators=(",", ":"))
    else:
        rendered = json.dumps(payload, ensure_ascii=True, sort_keys=True, indent=2)
    typer.echo(rendered, err=err, color=False)


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF and a missing final newline intact.
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _read_pair(
    command: str,
    expected: Path,
    actual: Path,
    *,
    json_output: bool,
) -> tuple[str, str]:
    try:
        return _read_text(expected), _read_text(actual)
    except (OSError, UnicodeDecodeError) as error:
        message = f"{command} failed: {error}"
        if json_output:
            _echo_json(
                {
                    "status": "error",
                    "exit_code": 1,
                    "message": message,
                    "expected_path": str(expected),
                    "actual_path": str(actual),
                }
            )
        else:
            _echo(message, err=True)
        raise typer.Exit(code=1) from error


@app.command()
def diff(
    expected: Path = typer.Argument(..., help="Path to the expected text file."),
    actual: Path = typer.Argument(..., help="Path to the actual text file."),
    context: int = typer.Option(
        DEFAULT_CONTEXT_LINES,
        "--context",
        "-U",
        min=0,
        help="Number of unchanged lines shown around each change.",
    ),
    patch: bool = typer.Option(
        False,
        "--patch",
        help="Emit a unified patch instead of the annotated report.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    expected_label: str | None = typer.Option(
        None,
        "--expected-label",
        help="Label for the '---' patch header (defaults to the expected path).",
    ),
    actual_label: str | None = typer.Option(
        None,
        "--actual-label",
        help="Label for the '+++' patch header (defaults to the actual path).",
    ),
) -> None:
    """Diff two text files."""
    expected_text, actual_text = _read_pair("diff", expected, actual, json_output=json_output)
    result = compare(expected_text, actual_text, CompareOptions(context_lines=context))

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": "diff completed",
                "expected_path": str(expected),
                "actual_path": str(actual),
            }
        )
        return

    if patch:
        rendered = result.render_patch(
            PatchOptions(
                expected_label=expected_label if expected_label is not None else str(expected),
                actual_label=actual_label if actual_label is not None else str(actual),
            )
        )
        if rendered:
            typer.echo(rendered, nl=False, color=False)
        return

    if result.is_empty():
        _echo("no differences detected")
        return
    _echo(render_summary(result))
    _echo(
        result.render_annotated(
            AnnotatedOptions(color=not _OUTPUT_OPTIONS.no_color),
        ).rstrip("\n")
    )


@app.command(name="assert")
def assert_equal(
    expected: Path = typer.Argument(..., help="Path to the expected text file."),
    actual: Path = typer.Argument(..., help="Path to the actual text file."),
    context: int = typer.Option(
        DEFAULT_CONTEXT_LINES,
        "--context",
        "-U",
        min=0,
        help="Number of unchanged lines shown around each change.",
    ),
    message: str | None = typer.Option(
        None,
        "--message",
        "-m",
        help="Headline printed above the report when files differ.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable assertion output.",
    ),
) -> None:
    """Assert that two text files have identical lines."""
    expected_text, actual_text = _read_pair("assert", expected, actual, json_output=json_output)
    result = try_diff(
        expected_text,
        actual_text,
        message or f"Found differences (expected={expected} actual={actual})",
        context_lines=context,
        color=not _OUTPUT_OPTIONS.no_color and not json_output,
    )

    if json_output:
        payload = result.to_dict()
        payload["expected_path"] = str(expected)
        payload["actual_path"] = str(actual)
        _echo_json(payload)
    elif result.passed:
        _echo(f"assert passed: expected={expected} actual={actual}")
    else:
        _echo(
            f"assert failed: differences detected (expected={expected} actual={actual})",
            force=True,
        )
        _echo(result.report.rstrip("\n"), force=True)

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


def main() -> None:
    app()
