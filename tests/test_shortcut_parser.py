from uprl.errors import ParseFailure
from uprl.shortcut_parser import extract_url, read_shortcut

import pytest


def test_extract_url_basic():
    lines = ["[InternetShortcut]", "URL=https://example.com/page"]
    assert extract_url(lines) == "https://example.com/page"


def test_last_url_line_wins():
    lines = ["URL=http://a.example", "IconIndex=0", "URL=http://b.example"]
    assert extract_url(lines) == "http://b.example"


def test_key_is_case_insensitive():
    assert extract_url(["url=http://lower.example"]) == "http://lower.example"
    assert extract_url(["Url=http://mixed.example"]) == "http://mixed.example"


def test_value_keeps_everything_after_first_equals():
    assert extract_url(["URL=https://x.example/?a=1&b=2"]) == "https://x.example/?a=1&b=2"


def test_prefix_must_start_the_line():
    assert extract_url(["BaseURL=http://a.example", " URL=http://b.example"]) is None


def test_no_url_line():
    assert extract_url(["[InternetShortcut]", "IconIndex=0"]) is None
    assert extract_url([]) is None


def test_read_shortcut_keeps_raw_bytes(tmp_path):
    raw = b"[InternetShortcut]\r\nURL=https://example.com\r\nIconIndex=1\r\n"
    p = tmp_path / "a.url"
    p.write_bytes(raw)

    sc = read_shortcut(p)
    assert sc.raw == raw
    assert sc.lines == ["[InternetShortcut]", "URL=https://example.com", "IconIndex=1"]
    assert sc.url == "https://example.com"


def test_read_shortcut_ansi_and_bom(tmp_path):
    ansi = tmp_path / "ansi.url"
    ansi.write_bytes("[InternetShortcut]\nURL=http://caf\xe9.example\n".encode("latin-1"))
    assert read_shortcut(ansi).url == "http://caf\xe9.example"

    bom = tmp_path / "bom.url"
    bom.write_bytes(b"\xef\xbb\xbfURL=http://bom.example\n")
    assert read_shortcut(bom).url == "http://bom.example"


def test_read_missing_file_is_parse_failure(tmp_path):
    with pytest.raises(ParseFailure):
        read_shortcut(tmp_path / "nope.url")
