import io
from unittest.mock import patch

import pytest

from run_filter import build_parser, main
from src.word_filter.dictionary import build_trie
from tests.word_lists import CENSORED_TEXT, SENSITIVE_TEXT


@pytest.fixture
def base_args(tmp_path, config_file):
    return [
        "--config_path",
        str(config_file),
        "--log_file",
        str(tmp_path / "logs" / "word_filter.log"),
    ]


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.search is None
    assert args.text is None
    assert args.input is None
    assert args.replacement is None
    assert args.config_path.endswith("config.txt")


def test_parser_rejects_text_and_input_together():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--text", "a", "--input", "b.txt"])


def test_filter_text(base_args, capsys):
    assert main(base_args + ["--text", SENSITIVE_TEXT]) == 0
    assert capsys.readouterr().out == CENSORED_TEXT + "\n"


def test_filter_text_with_replacement(base_args, capsys):
    assert main(base_args + ["--text", "讨厌", "--replacement", "#"]) == 0
    assert capsys.readouterr().out == "#\n"


def test_filter_input_file(tmp_path, base_args, capsys):
    input_file = tmp_path / "input.txt"
    input_file.write_text(SENSITIVE_TEXT + "\n", encoding="utf-8")

    assert main(base_args + ["--input", str(input_file)]) == 0
    assert capsys.readouterr().out == CENSORED_TEXT + "\n"


def test_filter_missing_input_file(tmp_path, base_args, capsys):
    missing = tmp_path / "missing.txt"
    assert main(base_args + ["--input", str(missing)]) == 1
    assert "[WORD FILTER]" in capsys.readouterr().err


def test_filter_stdin(base_args, capsys):
    with patch("sys.stdin", io.StringIO("你好讨厌")):
        assert main(base_args) == 0
    assert capsys.readouterr().out == "你好***"


def test_search_words(base_args, capsys):
    assert main(base_args + ["--search", "讨厌", "讨"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "讨厌: FOUND",
        "讨: NOT FOUND",
    ]


def test_search_and_filter(base_args, capsys):
    assert main(base_args + ["--search", "王八蛋", "--text", "王八蛋"]) == 0
    assert capsys.readouterr().out.splitlines() == ["王八蛋: FOUND", "***"]


def test_missing_config(tmp_path, capsys):
    argv = [
        "--config_path",
        str(tmp_path / "missing.txt"),
        "--log_file",
        str(tmp_path / "word_filter.log"),
        "--text",
        "abc",
    ]
    assert main(argv) == 1
    assert "Missing required configuration file" in capsys.readouterr().err


def test_invalid_config(tmp_path, words_file, capsys):
    config_path = tmp_path / "bad_config.txt"
    config_path.write_text(
        f"dictionary_path = {words_file}\nlog_details = perhaps\n",
    )
    argv = [
        "--config_path",
        str(config_path),
        "--log_file",
        str(tmp_path / "word_filter.log"),
    ]
    assert main(argv) == 1
    assert "Invalid boolean value" in capsys.readouterr().err


def test_default_config_from_another_directory(tmp_path, monkeypatch, capsys):
    """The bundled config.txt works whatever the working directory is."""
    monkeypatch.chdir(tmp_path)
    argv = ["--log_file", str(tmp_path / "word_filter.log"), "--text", "讨厌"]

    assert main(argv) == 0
    assert capsys.readouterr().out == "***\n"


def test_filter_input_not_utf8(tmp_path, base_args, capsys):
    bad = tmp_path / "bad.txt"
    bad.write_bytes(b"\xff\xfe\xfa")

    assert main(base_args + ["--input", str(bad)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[WORD FILTER]" in captured.err
    assert "utf-8" in captured.err


def test_filter_input_is_a_directory(tmp_path, base_args, capsys):
    assert main(base_args + ["--input", str(tmp_path)]) == 1
    assert "[WORD FILTER]" in capsys.readouterr().err


def test_word_list_not_utf8(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_bytes(b"\xff\xfe\xfa\n")
    config_path = tmp_path / "config.txt"
    config_path.write_text(f"dictionary_path = {words}\n")
    argv = [
        "--config_path",
        str(config_path),
        "--log_file",
        str(tmp_path / "word_filter.log"),
        "--text",
        "abc",
    ]

    assert main(argv) == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_word_list_broken_on_reload(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("讨厌\n", encoding="utf-8")
    config_path = tmp_path / "config.txt"
    config_path.write_text(
        f"dictionary_path = {words}\nreload_on_query = true\n",
    )
    argv = [
        "--config_path",
        str(config_path),
        "--log_file",
        str(tmp_path / "word_filter.log"),
        "--text",
        "abc",
    ]

    with patch(
        "src.word_filter.word_filter.load_dictionary",
        side_effect=[build_trie(["讨厌"]), PermissionError("denied")],
    ):
        assert main(argv) == 1
    assert "denied" in capsys.readouterr().err
