import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import pytest
import requests

import builder
import utils
from cli import run_cli


@pytest.fixture(autouse=True)
def reset_verbose():
    yield
    utils.VERBOSE = False


def write_words(tmp_path, *words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(path)


def test_cli_reports_checks(tmp_path, capsys):
    path = write_words(tmp_path, "get", "give", "go")
    assert run_cli([path]) == 0
    result = capsys.readouterr().out
    assert "Max depth: 4" in result
    assert "Fully well-formed" in result
    assert "Suitable for iterative char search" in result


def test_cli_prints_words(tmp_path, capsys):
    path = write_words(tmp_path, "man", "army", "arm")
    assert run_cli([path, "--words"]) == 0
    result = capsys.readouterr().out
    lines = result.splitlines()
    assert lines.index("arm") < lines.index("army") < lines.index("man")
    assert "3 words" in result


def test_cli_strict_fails_on_unsuitable_tree(tmp_path, capsys):
    path = write_words(tmp_path, "arm", "army", "man")
    assert run_cli([path]) == 0
    assert run_cli([path, "--strict"]) == 1
    assert "failed strict checks" in capsys.readouterr().out


def test_cli_strict_passes(tmp_path, capsys):
    path = write_words(tmp_path, "get", "give", "go")
    assert run_cli([path, "--strict"]) == 0


def test_cli_missing_file(tmp_path, capsys):
    assert run_cli([str(tmp_path / "missing.txt")]) == 2
    assert "Could not build tree" in capsys.readouterr().out


def test_cli_invalid_utf8_file(tmp_path, capsys):
    path = tmp_path / "words.txt"
    path.write_bytes(b"arm\n\xff\xfe\n")
    assert run_cli([str(path)]) == 2
    assert "Could not build tree" in capsys.readouterr().out


def test_cli_download_error(monkeypatch, capsys):
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(builder.requests, 'get', fake_get)
    assert run_cli(["https://example.com/words.txt"]) == 2
    assert "offline" in capsys.readouterr().out


def test_cli_long_word(tmp_path, capsys):
    path = write_words(tmp_path, "a" * 3000, "a" * 10)
    assert run_cli([path, "--strict"]) == 1
    assert "Max depth: 3000" in capsys.readouterr().out


def test_cli_verbose(tmp_path, capsys):
    path = write_words(tmp_path, "a")
    assert run_cli([path, "--verbose"]) == 0
    assert utils.VERBOSE is True
    assert "took" in capsys.readouterr().out
