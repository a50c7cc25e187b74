import os

import pytest

from code_extractor.excel import export
from code_extractor.excel.export import (
    ExportArtifact,
    ExportError,
    build_workbook_bytes,
    export_codes,
    materialize,
)
from code_extractor.excel.loader import load_codes


CODES = ["AB12CD34EF", "GH56IJ78KL90", "AB12CD34EF", "0000000000"]


def test_empty_list_has_no_artifact():
    assert export_codes([]) is None


def test_round_trip_preserves_order_and_duplicates():
    artifact = export_codes(CODES)
    assert artifact.row_count == 4
    assert artifact.filename == "extracted_codes.xlsx"
    assert load_codes(artifact.data) == CODES


def test_digit_only_codes_stay_text():
    artifact = export_codes(["1234567890"])
    assert load_codes(artifact.data) == ["1234567890"]


def test_single_sheet_single_column():
    import io
    import openpyxl

    wb = openpyxl.load_workbook(io.BytesIO(build_workbook_bytes(CODES)))
    assert wb.sheetnames == ["Codes"]
    ws = wb["Codes"]
    assert ws.max_column == 1
    assert ws.max_row == len(CODES)


def test_optional_header_row():
    data = build_workbook_bytes(["AB12CD34EF"], sheet_name="Export", header="Code")
    assert load_codes(data, sheet_name="Export") == ["Code", "AB12CD34EF"]
    assert load_codes(data, sheet_name="Export", header="Code") == ["AB12CD34EF"]


def test_each_export_gets_a_new_handle():
    first = export_codes(CODES)
    second = export_codes(CODES)
    assert first.handle != second.handle


def test_release_drops_buffer():
    artifact = export_codes(CODES)
    assert artifact.size > 0
    artifact.release()
    assert artifact.released
    assert artifact.data is None
    assert artifact.size == 0


def test_materialize_writes_fixed_filename(tmp_path):
    artifact = export_codes(CODES)
    path = materialize(artifact, str(tmp_path / "out"))
    assert path == os.path.join(str(tmp_path / "out"), "extracted_codes.xlsx")
    assert load_codes(path) == CODES


def test_materialize_is_idempotent(tmp_path):
    artifact = export_codes(CODES)
    first = materialize(artifact, str(tmp_path))
    with open(first, "rb") as f:
        first_bytes = f.read()
    second = materialize(artifact, str(tmp_path))
    with open(second, "rb") as f:
        assert f.read() == first_bytes
    assert first == second


def test_materialize_without_artifact_is_noop(tmp_path):
    assert materialize(None, str(tmp_path)) is None
    assert os.listdir(tmp_path) == []


def test_materialize_released_artifact_fails(tmp_path):
    artifact = export_codes(CODES)
    artifact.release()
    with pytest.raises(ExportError):
        materialize(artifact, str(tmp_path))


def test_encoder_failure_raises_export_error(monkeypatch):
    class BrokenWorkbook:
        def __init__(self):
            raise RuntimeError("encoder down")

    monkeypatch.setattr(export, "Workbook", BrokenWorkbook)
    with pytest.raises(ExportError):
        export_codes(CODES)


def test_repr_reports_state():
    artifact = ExportArtifact(b"abc", 1)
    assert "3 bytes" in repr(artifact)
    artifact.release()
    assert "released" in repr(artifact)
