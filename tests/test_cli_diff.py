import json
from pathlib import Path

from typer.testing import CliRunner

from diffpack.cli.app import app


def _write_pair(tmp_path: Path, expected: bytes, actual: bytes) -> tuple[Path, Path]:
    expected_path = tmp_path / "expected.txt"
    actual_path = tmp_path / "actual.txt"
    expected_path.write_bytes(expected)
    actual_path.write_bytes(actual)
    return expected_path, actual_path


def test_cli_diff_annotated_output(tmp_path: Path) -> None:
    expected, actual = _write_pair(tmp_path, b"foo\nbar\n", b"foo\nfoo\n")

    runner = CliRunner()
    result = runner.invoke(app, ["--no-color", "diff", str(expected), str(actual)])

    assert result.exit_code == 0
    assert result.stdout == (
        "identical=false hunks=1 deleted=1 inserted=1 expected_lines=2 actual_lines=2\n"
        "... ...   @@ -1,2 +1,2 @@\n"
        "001 001   foo\n"
        "002      -bar\n"
        "    002  +foo\n"
    )


def test_cli_diff_identical_files(tmp_path: Path) -> None:
    expected, actual = _write_pair(tmp_path, b"a\r\nb\r\n", b"a\nb\n")

    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(expected), str(actual)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "no differences detected"


def test_cli_diff_patch_output(tmp_path: Path) -> None:
    expected, actual = _write_pair(tmp_path, b"foo\nbar\n", b"foo\nfoo\n")

    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(expected), str(actual), "--patch"])

    assert result.exit_code == 0
    assert result.stdout == (
        f"--- {expected}\n"
        f"+++ {actual}\n"
        "@@ -1,2 +1,2 @@\n"
        " foo\n"
        "-bar\n"
        "+foo\n"
    )


def test_cli_diff_patch_labels_and_context(tmp_path: Path) -> None:
    lines = "".join(f"{n}\n" for n in range(1, 11))
    expected, actual = _write_pair(
        tmp_path,
        lines.encode("utf-8"),
        lines.replace("5\n", "five\n").encode("utf-8"),
    )

    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "diff",
            str(expected),
            str(actual),
            "--patch",
            "-U",
            "1",
            "--expected-label",
            "a/numbers.txt",
            "--actual-label",
            "b/numbers.txt",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout == (
        "--- a/numbers.txt\n"
        "+++ b/numbers.txt\n"
        "@@ -4,3 +4,3 @@\n"
        " 4\n"
        "-5\n"
        "+five\n"
        " 6\n"
    )


def test_cli_diff_patch_for_identical_files_is_empty(tmp_path: Path) -> None:
    expected, actual = _write_pair(tmp_path, b"same\n", b"same\n")

    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(expected), str(actual), "--patch"])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_cli_diff_json_output(tmp_path: Path) -> None:
    expected, actual = _write_pair(tmp_path, b"foo\nbar\n", b"foo\nfoo\n")

    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(expected), str(actual), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "ok"
    assert payload["exit_code"] == 0
    assert payload["identical"] is False
    assert payload["summary"] == {
        "hunks": 1,
        "inserted": 1,
        "deleted": 1,
        "expected_lines": 2,
        "actual_lines": 2,
    }
    assert payload["expected_path"] == str(expected)
    assert payload["actual_path"] == str(actual)


def test_cli_diff_colors_unless_disabled(tmp_path: Path) -> None:
    expected, actual = _write_pair(tmp_path, b"foo\nbar\n", b"foo\nfoo\n")

    runner = CliRunner()
    colored = runner.invoke(app, ["diff", str(expected), str(actual)], color=True)
    plain = runner.invoke(app, ["--no-color", "diff", str(expected), str(actual)], color=True)

    assert colored.exit_code == 0
    assert "\x1b[" in colored.stdout
    assert "\x1b[" not in plain.stdout


def test_cli_diff_missing_file_fails(tmp_path: Path) -> None:
    expected, _ = _write_pair(tmp_path, b"a\n", b"a\n")

    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(expected), str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "diff failed:" in result.output


def test_cli_diff_missing_file_json_error(tmp_path: Path) -> None:
    expected, _ = _write_pair(tmp_path, b"a\n", b"a\n")

    runner = CliRunner()
    result = runner.invoke(app, ["diff", str(expected), str(tmp_path / "missing.txt"), "--json"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout.strip())
    assert payload["status"] == "error"
    assert payload["exit_code"] == 1
    assert payload["message"].startswith("diff failed:")


def test_cli_quiet_suppresses_report(tmp_path: Path) -> None:
    expected, actual = _write_pair(tmp_path, b"foo\nbar\n", b"foo\nfoo\n")

    runner = CliRunner()
    result = runner.invoke(app, ["--quiet", "diff", str(expected), str(actual)])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_cli_version() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.strip() != ""
