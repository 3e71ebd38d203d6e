import io

import pytest

from reqfile._errors import MalformedHeaderLineError
from reqfile._headers import parse_header_line, parse_headers
from reqfile._line_reader import LineReader


def reader_for(data: bytes) -> LineReader:
    return LineReader(io.BytesIO(data))


def test_value_is_trimmed():
    assert parse_header_line("X-Foo:   bar  ") == ("X-Foo", "bar")


def test_name_is_not_trimmed_or_lowered():
    assert parse_header_line("Content-Type :json") == ("Content-Type ", "json")


def test_split_on_first_colon_only():
    assert parse_header_line("Referer: http://example.com:8080/") == \
           ("Referer", "http://example.com:8080/")


def test_empty_value():
    assert parse_header_line("X-Empty:") == ("X-Empty", "")


def test_line_without_colon():
    with pytest.raises(MalformedHeaderLineError) as exc_info:
        parse_header_line("NoColonHere")
    assert exc_info.value.line == "NoColonHere"


def test_block_ends_on_blank_line():
    reader = reader_for(b"Host: a\r\nAccept: */*\r\n\r\nbody")
    assert parse_headers(reader) == {"Host": "a", "Accept": "*/*"}
    assert reader.read_to_end() == b"body"


def test_block_ends_on_end_of_stream():
    assert parse_headers(reader_for(b"Host: a\n")) == {"Host": "a"}


def test_no_headers():
    assert parse_headers(reader_for(b"\n")) == {}


def test_later_duplicate_wins():
    assert parse_headers(reader_for(b"A: 1\nA: 2\n\n")) == {"A": "2"}


def test_duplicates_differ_by_case():
    headers = parse_headers(reader_for(b"host: a\nHost: b\n\n"))
    assert headers == {"host": "a", "Host": "b"}


def test_whitespace_only_line_is_malformed():
    with pytest.raises(MalformedHeaderLineError):
        parse_headers(reader_for(b"Host: a\n   \n\n"))
