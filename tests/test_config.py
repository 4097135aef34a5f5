from pathlib import Path

import pytest

from optbag.config import ParserConfig, loader
from optbag.exceptions import ConfigError
from optbag.parser import OptionAction, OptionParser

YAML_CONFIG = """\
description: Copy a byte range
verbose: false
options:
  - keys: [-b, --begin]
    dest: begin
    action: number
    help: First byte
  - keys: -v
    dest: verbose
    action: true
  - keys: [--name]
    dest: name
    action: save_str
"""

TOML_CONFIG = """\
description = "Copy a byte range"
verbose = false

[[options]]
keys = ["-b", "--begin"]
dest = "begin"
action = "number"
help = "First byte"

[[options]]
keys = "-v"
dest = "verbose"
action = "true"

[[options]]
keys = ["--name"]
dest = "name"
action = "save_str"
"""


def write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


@pytest.mark.parametrize(
    "name, content",
    [
        ("opts.yaml", YAML_CONFIG),
        ("opts.yml", YAML_CONFIG),
        ("opts.toml", TOML_CONFIG),
    ],
)
def test_loader(tmp_path, name, content):
    parser = loader(write(tmp_path, name, content))
    assert isinstance(parser, OptionParser)
    assert parser.description == "Copy a byte range"
    assert parser.verbose is False
    assert parser.get_option("--begin").action is OptionAction.NUMBER
    assert parser.get_option("-v").action is OptionAction.TRUE
    assert parser.get_option("--name").help == "No help message."

    bag = parser.parse(["-v", "--begin", "10", "--name", "copy", "file"])
    assert bag.as_dict() == {
        "input": ["file"],
        "verbose": True,
        "begin": 10,
        "name": "copy",
    }


def test_loader_accepts_str_path(tmp_path):
    path = write(tmp_path, "opts.yaml", YAML_CONFIG)
    assert len(loader(str(path)).registry) == 3


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_loader_unsupported_suffix(tmp_path):
    with pytest.raises(ConfigError, match="Unsupported config format"):
        loader(write(tmp_path, "opts.json", "{}"))


def test_loader_not_a_mapping(tmp_path):
    with pytest.raises(ConfigError, match="must contain a dictionary"):
        loader(write(tmp_path, "opts.yaml", "- just\n- a list\n"))


def test_loader_invalid_yaml(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read config file"):
        loader(write(tmp_path, "opts.yaml", "options: [unclosed\n"))


def test_loader_invalid_option(tmp_path):
    content = "options:\n  - keys: [-i]\n    dest: input\n    action: string\n"
    with pytest.raises(ConfigError, match="reserved word 'input'"):
        loader(write(tmp_path, "opts.yaml", content))


def test_loader_duplicate_keys(tmp_path):
    content = (
        "options:\n"
        "  - {keys: [-a], dest: alpha, action: 'true'}\n"
        "  - {keys: [-a], dest: again, action: 'true'}\n"
    )
    with pytest.raises(ConfigError, match="Collision"):
        loader(write(tmp_path, "opts.yaml", content))


def test_parser_config_defaults():
    parser = ParserConfig().to_parser()
    assert parser.description == "No description"
    assert parser.verbose is True
    assert len(parser.registry) == 0
