"""Integration tests for the ``infer-sarif convert`` command."""

from __future__ import annotations

import io
import json
from contextlib import redirect_stdout
from pathlib import Path

import pytest

from infer_sarif.cli import app

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures" / "infer"
REPORT = FIXTURES / "report.json"
PROJECT = FIXTURES / "project"


def invoke_cli(args: list[str]) -> tuple[int, str]:
    """Execute the CLI with the provided arguments and capture stdout."""

    stdout = io.StringIO()
    with redirect_stdout(stdout):
        exit_code = app.main(args)
    return exit_code, stdout.getvalue()


def test_convert_prints_sarif_document() -> None:
    exit_code, output = invoke_cli(["convert", str(REPORT), "--project-root", str(PROJECT)])

    assert exit_code == 0
    payload = json.loads(output)
    assert payload["version"] == "2.0.0"
    assert len(payload["runs"]) == 1

    run = payload["runs"][0]
    assert run["tool"] == {"name": "Infer"}
    assert set(run["rules"]) == {"NULL_DEREFERENCE", "MEMORY_LEAK"}
    assert [result["level"] for result in run["results"]] == ["error", "warning", "warning"]
    assert run["results"][0]["ruleKey"] == run["results"][0]["ruleId"] == "NULL_DEREFERENCE"
    assert [location.get("kind") for location in run["results"][0]["codeFlows"][0]["locations"]] == [
        "functionEnter",
        "call",
        "functionEnter",
        "branch",
        "functionExit",
        "callReturn",
    ]
    assert all("hashes" not in record for record in run["files"].values())


def test_convert_with_md5_writes_output_file(tmp_path: Path) -> None:
    output = tmp_path / "results" / "infer.sarif"

    exit_code, stdout = invoke_cli(
        ["convert", str(REPORT), "--project-root", str(PROJECT), "--md5", "--output", str(output)]
    )

    assert exit_code == 0
    assert stdout == ""
    run = json.loads(output.read_text(encoding="utf-8"))["runs"][0]
    assert len(run["files"]) == 2
    assert all(record["hashes"][0]["algorithm"] == "md5" for record in run["files"].values())


def test_convert_reads_settings_file(tmp_path: Path) -> None:
    settings = tmp_path / "infer-sarif.yaml"
    settings.write_text(
        f"project_root: {PROJECT}\ncompute_hashes: true\ntool_name: Infer CI\n",
        encoding="utf-8",
    )

    exit_code, output = invoke_cli(["convert", str(REPORT), "--config", str(settings), "--no-md5"])

    assert exit_code == 0
    run = json.loads(output)["runs"][0]
    assert run["tool"]["name"] == "Infer CI"
    assert (PROJECT / "src" / "Main.java").as_uri() in run["files"]
    assert all("hashes" not in record for record in run["files"].values())


def test_table_format_lists_results() -> None:
    exit_code, output = invoke_cli(
        ["convert", str(REPORT), "--project-root", str(PROJECT), "--format", "table"]
    )

    assert exit_code == 0
    lines = output.splitlines()
    assert lines[0].split() == ["Level", "Rule", "ID", "Location", "Message"]
    assert "src/Main.java:11" in lines[2]
    assert "NULL_DEREFERENCE" in lines[2]
    assert "src/util.c:9" in lines[3]


def test_table_format_without_findings(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    report.write_text("[]", encoding="utf-8")

    exit_code, output = invoke_cli(["convert", str(report), "--format", "table"])

    assert exit_code == 0
    assert "No findings detected." in output


@pytest.mark.parametrize(
    ("fail_on", "expected"),
    [("never", 0), ("warning", 1), ("error", 1)],
)
def test_fail_on_threshold(fail_on: str, expected: int) -> None:
    exit_code, _ = invoke_cli(
        ["convert", str(REPORT), "--project-root", str(PROJECT), "--fail-on", fail_on]
    )

    assert exit_code == expected


def test_fail_on_error_passes_with_only_warnings(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    report.write_text(
        json.dumps([{"bug_type": "DEAD_STORE", "kind": "WARNING", "file": "a.c", "bug_trace": []}]),
        encoding="utf-8",
    )

    exit_code, _ = invoke_cli(["convert", str(report), "--project-root", str(tmp_path), "--fail-on", "error"])

    assert exit_code == 0


def test_missing_report_exits_with_error(tmp_path: Path) -> None:
    exit_code, output = invoke_cli(["convert", str(tmp_path / "missing.json")])

    assert exit_code == 2
    assert output.startswith("Error: Infer report not found")


def test_malformed_report_produces_no_output(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    report.write_text("{broken", encoding="utf-8")
    output_path = tmp_path / "out.sarif"

    exit_code, output = invoke_cli(["convert", str(report), "--output", str(output_path)])

    assert exit_code == 2
    assert output.startswith("Error: Invalid JSON")
    assert not output_path.exists()


def test_unwritable_output_exits_with_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    exit_code, output = invoke_cli(
        ["convert", str(REPORT), "--project-root", str(PROJECT), "--output", str(blocker / "out.sarif")]
    )

    assert exit_code == 2
    assert output.startswith("Error: Failed to write SARIF output")


def test_invalid_settings_exit_with_error(tmp_path: Path) -> None:
    settings = tmp_path / "settings.yaml"
    settings.write_text("compute_hashes: sometimes\n", encoding="utf-8")

    exit_code, output = invoke_cli(["convert", str(REPORT), "--config", str(settings)])

    assert exit_code == 2
    assert "compute_hashes" in output


def test_no_command_prints_help() -> None:
    exit_code, output = invoke_cli([])

    assert exit_code == 0
    assert "convert" in output


def test_table_format_ends_with_run_summary() -> None:
    exit_code, output = invoke_cli(
        ["convert", str(REPORT), "--project-root", str(PROJECT), "--format", "table"]
    )

    assert exit_code == 0
    assert output.splitlines()[-1] == "3 findings, 2 rules, 2 files"


def test_unparseable_line_numbers_do_not_abort(tmp_path: Path) -> None:
    report = tmp_path / "report.json"
    report.write_text(
        json.dumps([{"bug_type": "X", "file": "a.c", "line": "--5", "bug_trace": []}]),
        encoding="utf-8",
    )

    exit_code, output = invoke_cli(["convert", str(report), "--project-root", str(tmp_path)])

    assert exit_code == 0
    region = json.loads(output)["runs"][0]["results"][0]["locations"][0]["resultFile"]["region"]
    assert region["startLine"] is None
