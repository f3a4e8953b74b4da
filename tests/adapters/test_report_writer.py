import io
import json
from pathlib import Path

import pytest

from infer_sarif.adapters import OutputWriteError, write_document
from infer_sarif.models import Run, SarifLog, Tool


def make_document() -> SarifLog:
    return SarifLog(runs=[Run(tool=Tool(name="Infer"))])


def test_write_document_to_file(tmp_path: Path):
    output = tmp_path / "out" / "report.sarif"

    write_document(make_document(), output)

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["version"] == "2.0.0"
    assert payload["runs"] == [{"tool": {"name": "Infer"}, "rules": {}, "results": [], "files": {}}]


def test_write_document_uses_two_space_indent(tmp_path: Path):
    output = tmp_path / "report.sarif"

    write_document(make_document(), output)

    assert output.read_text(encoding="utf-8").splitlines()[1].startswith('  "version"')


def test_write_document_prints_without_destination(capsys: pytest.CaptureFixture[str]):
    write_document(make_document())

    payload = json.loads(capsys.readouterr().out)
    assert payload["runs"][0]["tool"]["name"] == "Infer"


def test_write_document_to_stream():
    stream = io.StringIO()

    write_document(make_document(), stream=stream)

    assert json.loads(stream.getvalue())["$schema"].endswith("sarif-2.0.0")


def test_write_failure_is_surfaced(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OutputWriteError) as excinfo:
        write_document(make_document(), blocker / "report.sarif")

    assert isinstance(excinfo.value.__cause__, OSError)
