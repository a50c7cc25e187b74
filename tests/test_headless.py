import argparse
import json
import os

import pytest

from code_extractor.excel.loader import load_codes
from code_extractor.main import headless_main


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"sheet_name": "Codes"}), encoding="utf-8")
    return str(path)


def _args(**kwargs):
    defaults = {"input": None, "output": None, "remove": None, "config": None}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


def test_headless_exports_codes(tmp_path, config_path):
    source = tmp_path / "in.txt"
    source.write_text("AB12CD34EF x GH56IJ78KL90 y AB12CD34EF", encoding="utf-8")
    out = tmp_path / "out"

    code = headless_main(_args(input=str(source), output=str(out), config=config_path))

    assert code == 0
    assert load_codes(str(out / "extracted_codes.xlsx")) == [
        "AB12CD34EF", "GH56IJ78KL90", "AB12CD34EF",
    ]


def test_headless_removes_codes(tmp_path, config_path):
    source = tmp_path / "in.txt"
    source.write_text("AB12CD34EF x GH56IJ78KL90 y AB12CD34EF", encoding="utf-8")
    out = tmp_path / "out"

    code = headless_main(_args(
        input=str(source), output=str(out), config=config_path,
        remove=["AB12CD34EF", "MISSING000"],
    ))

    assert code == 0
    assert load_codes(str(out / "extracted_codes.xlsx")) == ["GH56IJ78KL90"]


def test_headless_no_codes_writes_nothing(tmp_path, config_path, capsys):
    source = tmp_path / "in.txt"
    source.write_text("no codes here", encoding="utf-8")
    out = tmp_path / "out"

    assert headless_main(_args(input=str(source), output=str(out), config=config_path)) == 0
    assert not os.path.exists(out)
    assert "nothing to export" in capsys.readouterr().out


def test_headless_missing_input(tmp_path, config_path):
    assert headless_main(_args(input=str(tmp_path / "nope.txt"), config=config_path)) == 1


def test_headless_unreadable_input(tmp_path, config_path):
    source = tmp_path / "bad.txt"
    source.write_bytes(b"\xff\xfe\xfa")
    assert headless_main(_args(input=str(source), output=str(tmp_path), config=config_path)) == 1
