import pytest

from siegekit.cfg import is_variable_line, parse_line, read_cfg_file, read_cmd_line


def test_parse_line_drops_comment_lines():
    assert parse_line("   # a comment") == ""


def test_parse_line_strips_trailing_comment_without_slash():
    assert parse_line("  plain words # trailing  ") == "plain words"


def test_parse_line_keeps_hash_in_urls():
    text = "http://example.com/page#frag extra"
    assert parse_line(text) == text


def test_parse_line_keeps_hash_without_space():
    assert parse_line("a#b") == "a#b"


def test_parse_line_cuts_at_newline():
    assert parse_line("first\nsecond") == "first"


def test_is_variable_line_accepts_plain_names():
    assert is_variable_line("HOST_1=example.com") is True


def test_is_variable_line_rejects_spaces_before_equals():
    assert is_variable_line("HOST = example.com") is False


def test_is_variable_line_rejects_url_with_query():
    assert is_variable_line("http://example.com/?a=b") is False


def test_is_variable_line_requires_equals():
    assert is_variable_line("HOST") is False


def test_read_cfg_file_expands_variables(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text(
        "# list of urls\n"
        "\n"
        "HOST=example.com\n"
        "http://$(HOST)/index.html\n"
        "http://${HOST}/a.html\n"
        "http://$HOST/b.html\n"
    )
    assert read_cfg_file(path) == [
        "http://example.com/index.html",
        "http://example.com/a.html",
        "http://example.com/b.html",
    ]


def test_read_cfg_file_uses_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("SIEGEKIT_TEST_HOST", "example.com")
    path = tmp_path / "urls.txt"
    path.write_text("http://${SIEGEKIT_TEST_HOST}/\n")
    assert read_cfg_file(path) == ["http://example.com/"]


def test_read_cfg_file_drops_unknown_variables(tmp_path, monkeypatch):
    monkeypatch.delenv("SIEGEKIT_MISSING_VAR", raising=False)
    path = tmp_path / "urls.txt"
    path.write_text("http://example.com/${SIEGEKIT_MISSING_VAR}/x\n")
    assert read_cfg_file(path) == ["http://example.com//x"]


def test_read_cfg_file_keeps_last_line_without_newline(tmp_path):
    path = tmp_path / "urls.txt"
    path.write_text("http://example.com/one\nhttp://example.com/two")
    assert read_cfg_file(path) == ["http://example.com/one", "http://example.com/two"]


def test_read_cfg_file_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_cfg_file(tmp_path / "absent.txt")


def test_read_cmd_line_repeats_url():
    result = read_cmd_line("  http://example.com/  ")
    assert set(result) == {"http://example.com/"}
    assert len(result) == 4


def test_read_cmd_line_comment_is_empty():
    assert read_cmd_line("# nothing") == []