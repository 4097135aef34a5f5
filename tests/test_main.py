import json
from pathlib import Path

import pytest

import optbag.__main__ as optbag_main
from optbag.__main__ import get_root_parser, main

DEFINITIONS = """\
description: Copy a byte range
verbose: false
options:
  - keys: [-b, --begin]
    dest: begin
    action: number
    help: First byte
  - keys: [-v, --verbose]
    dest: verbose
    action: "true"
    help: Print progress
"""


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the root logger untouched while running the CLI."""
    monkeypatch.setattr(optbag_main, "setup_logging", lambda **kwargs: None)


@pytest.fixture
def definitions(tmp_path) -> Path:
    path = tmp_path / "optbag.yaml"
    path.write_text(DEFINITIONS, encoding="UTF-8")
    return path


def test_get_root_parser():
    parser = get_root_parser()
    args = parser.parse_args(["defs.yaml", "-b", "1", "file"])
    assert args.definitions == "defs.yaml"
    assert args.args == ["-b", "1", "file"]
    assert args.verbose is False
    assert args.show_help is False


def test_main_prints_bag(definitions, capsys):
    assert main([str(definitions), "-vb", "7", "file.bin"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output == {"input": ["file.bin"], "verbose": True, "begin": 7}


def test_main_parse_error(definitions, capsys):
    assert main([str(definitions), "-b", "-v", "7"]) == 1
    assert "Missing argument for option '-b'" in capsys.readouterr().out


def test_main_missing_definitions(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert "No such config file" in capsys.readouterr().out


def test_main_show_help(definitions, capsys):
    assert main(["--show-help", str(definitions)]) == 0
    output = capsys.readouterr().out
    assert "--------HELP--------" in output
    assert "-b, --begin: First byte" in output
    assert "-v, --verbose: Print progress" in output


def test_main_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert "optbag" in capsys.readouterr().out
