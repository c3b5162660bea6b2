import io

import pytest

from vikingdefense.textutil import int_to_str, iter_lines, parse_int


@pytest.mark.parametrize("value, text", [(0, "0"), (-42, "-42"), (12345, "12345"), (7, "7")])
def test_int_to_str(value, text):
    assert int_to_str(value) == text


@pytest.mark.parametrize("value", [0, 1, -1, 9, 10, 99, 500, -1234, 1999999999, -1999999999])
def test_round_trip(value):
    assert parse_int(int_to_str(value)) == value


def test_parse_skips_leading_text():
    assert parse_int("abc-12xyz") == -12


def test_parse_takes_first_run_only():
    assert parse_int("score 37 then 99") == 37


def test_parse_empty_and_no_digits():
    assert parse_int("") == 0
    assert parse_int("none") == 0


def test_parse_rejects_overlong_numbers():
    assert parse_int("12345678901") == 0
    assert parse_int("2147483647") == 0


def test_parse_accepts_ten_digits_starting_low():
    assert parse_int("1999999999") == 1999999999
    assert parse_int("0000000001") == 1


def test_iter_lines_text():
    assert list(iter_lines(io.StringIO("ab\ncd\n\nef"))) == ["ab", "cd", "", "ef"]


def test_iter_lines_bytes():
    assert list(iter_lines(io.BytesIO(b"one\ntwo\n"), 3)) == [b"one", b"two"]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""))) == []


@pytest.mark.parametrize("chunk", [1, 2, 5, 64])
def test_iter_lines_independent_of_chunk_size(chunk):
    text = "first line\nsecond\n\nlast"
    assert "\n".join(iter_lines(io.StringIO(text), chunk)) == text


def test_iter_lines_rejects_bad_chunk():
    with pytest.raises(ValueError):
        list(iter_lines(io.StringIO("x"), 0))