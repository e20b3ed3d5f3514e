import logging

import numpy as np
import pytest

from sequence_io import (
    EmptyPatternError,
    SequenceError,
    SequenceFileError,
    SequenceTooLargeError,
    read_pattern,
    read_sequence,
    sanitize,
    to_codes,
)


def test_sanitize():
    assert sanitize("acgt NNx-TT\nGGGG") == "ACGTTT"
    assert sanitize("") == ""


def test_read_sequence(tmp_path):
    f = tmp_path / "dna.txt"
    f.write_text("atcg ATCG\n")
    assert read_sequence(f) == "ATCGATCG"


def test_only_first_line_is_read(tmp_path, caplog):
    f = tmp_path / "dna.txt"
    f.write_text("ACGT\nTTTT\n")
    with caplog.at_level(logging.WARNING):
        assert read_sequence(f) == "ACGT"
    assert "Only the first line" in caplog.text


def test_missing_file(tmp_path):
    with pytest.raises(SequenceFileError):
        read_sequence(tmp_path / "missing.txt")


def test_too_large(tmp_path):
    f = tmp_path / "dna.txt"
    f.write_text("ACGTACGT")
    # 8 >= 9 - 1
    with pytest.raises(SequenceTooLargeError):
        read_sequence(f, max_size=9)
    assert read_sequence(f, max_size=10) == "ACGTACGT"


def test_empty_pattern(tmp_path):
    f = tmp_path / "pattern.txt"
    f.write_text("nnnn\n")
    with pytest.raises(EmptyPatternError):
        read_pattern(f)
    assert read_sequence(f) == ""


def test_errors_are_value_errors():
    assert issubclass(SequenceError, ValueError)
    assert issubclass(EmptyPatternError, SequenceError)


def test_to_codes():
    codes = to_codes("ACGT")
    assert codes.dtype == np.uint8
    assert list(codes) == [65, 67, 71, 84]
    assert list(to_codes(b"GA")) == [71, 65]
    assert to_codes("").size == 0


def test_oversized_first_line_is_not_read_whole(tmp_path):
    f = tmp_path / "dna.txt"
    f.write_text("ACGT" * 100_000 + "\n")
    with pytest.raises(SequenceTooLargeError) as exc:
        read_sequence(f, max_size=1_000)
    assert "at least" in str(exc.value)


def test_first_line_read_in_chunks(tmp_path):
    f = tmp_path / "dna.txt"
    f.write_text("ac" * 50_000 + "\nGGGG\n")
    assert read_sequence(f) == "AC" * 50_000


def test_trailing_blank_lines_do_not_warn(tmp_path, caplog):
    f = tmp_path / "dna.txt"
    f.write_text("ACGT\n\n  \n")
    with caplog.at_level(logging.WARNING):
        assert read_sequence(f) == "ACGT"
    assert "Only the first line" not in caplog.text


def test_to_codes_integer_arrays():
    assert list(to_codes(np.array([65, 84], dtype=np.int64))) == [65, 84]
    codes = to_codes("ACGT")
    assert to_codes(codes) is codes
    with pytest.raises(SequenceError):
        to_codes(np.array([65, 321]))
    with pytest.raises(SequenceError):
        to_codes(np.array([-1, 65]))
    with pytest.raises(SequenceError):
        to_codes(np.array([65.0, 67.0]))
