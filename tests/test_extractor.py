import re

import pytest

from code_extractor.core.extractor import DocumentReadError, extract_codes, read_document


def test_empty_text_has_no_codes():
    assert extract_codes("") == []


def test_short_run_is_ignored():
    assert extract_codes("ABC") == []
    assert extract_codes("ABCDEFGHI") == []


def test_ten_characters_match():
    assert extract_codes("ABCDEFGHIJ") == ["ABCDEFGHIJ"]


def test_long_run_matches_once():
    assert extract_codes("ABCDE12345FGHIJ") == ["ABCDE12345FGHIJ"]


def test_codes_in_document_order():
    text = "AB12CD34EF plain text GH56IJ78KL90"
    assert extract_codes(text) == ["AB12CD34EF", "GH56IJ78KL90"]


def test_duplicates_are_kept():
    text = "X1234567890, Y1234567890\nX1234567890"
    assert extract_codes(text) == ["X1234567890", "Y1234567890", "X1234567890"]


@pytest.mark.parametrize(
    "text",
    [
        "abcABCDEFGHIJK",
        "ABCDEFGHIJKxyz",
        "_ABCDEFGHIJK",
        "ABCDEFGHIJK_",
        "AbCDEFGHIJKLMNOP",
    ],
)
def test_runs_embedded_in_words_do_not_match(text):
    assert extract_codes(text) == []


def test_punctuation_and_non_ascii_are_boundaries():
    text = "(ABCDEFGHIJ);éKLMNOPQRST-1234567890."
    assert extract_codes(text) == ["ABCDEFGHIJ", "KLMNOPQRST", "1234567890"]


def test_every_code_matches_pattern_and_is_bounded():
    text = "Order AB12CD34EF shipped; ref=ZZ99ZZ99ZZ99, note: abcDEFGHIJKLM, 12345\nQWERTYUIOP"
    for code in extract_codes(text):
        assert re.fullmatch(r"[A-Z0-9]{10,}", code)
        start = text.index(code)
        before = text[start - 1] if start > 0 else ""
        after = text[start + len(code)] if start + len(code) < len(text) else ""
        assert not re.match(r"\w", before, re.ASCII)
        assert not re.match(r"\w", after, re.ASCII)


def test_read_document(tmp_path):
    path = tmp_path / "codes.txt"
    path.write_text("AB12CD34EF\n", encoding="utf-8")
    assert read_document(str(path)) == "AB12CD34EF\n"


def test_read_document_missing_file(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(DocumentReadError) as exc_info:
        read_document(str(missing))
    assert exc_info.value.path == str(missing)


def test_read_document_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(DocumentReadError):
        read_document(str(path))
