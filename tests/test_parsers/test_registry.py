import logging

import pytest

from optbag.exceptions import ConfigError
from optbag.parser import OptionAction, OptionRegistry
from optbag.parser.option import DEFAULT_HELP
from optbag.parser.option_config import build_option_config


def test_add_option():
    registry = OptionRegistry()
    option = registry.add(
        build_option_config(["-v", "--verbose"], "verbose", "true", "Verbose output")
    )
    assert option.keys == ("-v", "--verbose")
    assert option.dest == "verbose"
    assert option.action is OptionAction.TRUE
    assert option.help == "Verbose output"
    assert registry.get("-v") is option
    assert registry.get("--verbose") is option
    assert "-v" in registry
    assert registry.keys() == ["-v", "--verbose"]
    assert len(registry) == 1
    assert str(registry) == "OptionRegistry(options=1, keys=2)"


def test_single_key_string():
    registry = OptionRegistry()
    option = registry.add(build_option_config("-regex", "regex", "string", "Pattern"))
    assert option.keys == ("-regex",)


@pytest.mark.parametrize(
    "keys",
    [
        [],
        "v",
        "-",
        "--",
        "---v",
        "-v=1",
        "--with-dash",
        "-é",
        "-v\n",
        ["-v", "bad"],
        None,
        5,
    ],
)
def test_invalid_keys(keys):
    with pytest.raises(ConfigError):
        build_option_config(keys, "dest", "true", "help")


def test_duplicate_key_within_option():
    with pytest.raises(ConfigError, match="repeated"):
        build_option_config(["-v", "-v"], "verbose", "true", "help")


@pytest.mark.parametrize("dest", ["", "input", "1abc", "with-dash", "a b", None, 3])
def test_invalid_dest(dest):
    with pytest.raises(ConfigError):
        build_option_config("-v", dest, "true", "help")


def test_reserved_dest_rejected_regardless_of_other_fields():
    with pytest.raises(ConfigError, match="reserved word 'input'"):
        build_option_config(["-i", "--input"], "input", "string", "Input file")
    with pytest.raises(ConfigError, match="reserved word 'input'"):
        build_option_config("-i", "input", "none")


def test_invalid_action():
    with pytest.raises(ConfigError, match="action"):
        build_option_config("-v", "verbose", "append", "help")


def test_key_collision():
    registry = OptionRegistry()
    registry.add(build_option_config(["-v", "--verbose"], "verbose", "true", "help"))
    with pytest.raises(ConfigError, match="already used by option 'verbose'"):
        registry.add(build_option_config(["--verbose"], "loud", "true", "help"))
    assert len(registry) == 1
    assert "loud" not in [option.dest for option in registry]


def test_dest_collision():
    registry = OptionRegistry()
    registry.add(build_option_config("-v", "verbose", "true", "help"))
    with pytest.raises(ConfigError, match="dest 'verbose'"):
        registry.add(build_option_config("-q", "verbose", "false", "help"))
    assert registry.get("-q") is None


def test_keys_and_dests_pairwise_disjoint():
    registry = OptionRegistry()
    registry.add(build_option_config(["-a", "--alpha"], "alpha", "true", "help"))
    registry.add(build_option_config(["-b", "--beta"], "beta", "false", "help"))
    registry.add(build_option_config("-c", "charlie", "number", "help"))
    keys = [key for option in registry for key in option.keys]
    dests = [option.dest for option in registry]
    assert len(keys) == len(set(keys))
    assert len(dests) == len(set(dests))


def test_missing_help_uses_placeholder_and_warns(caplog):
    registry = OptionRegistry(verbose=True)
    with caplog.at_level(logging.WARNING, logger="optbag"):
        option = registry.add(build_option_config("-v", "verbose", "true"))
    assert option.help == DEFAULT_HELP
    assert "Help message is empty" in caplog.text


def test_quiet_registry_does_not_warn(caplog):
    registry = OptionRegistry(verbose=False)
    with caplog.at_level(logging.WARNING, logger="optbag"):
        option = registry.add(build_option_config("-v", "verbose", "true", "  "))
    assert option.help == DEFAULT_HELP
    assert caplog.text == ""


def test_extra_fields_warn(caplog):
    registry = OptionRegistry(verbose=True)
    config = build_option_config("-v", "verbose", "true", "help", default=1)
    assert config.extra_fields == ["default"]
    with caplog.at_level(logging.WARNING, logger="optbag"):
        registry.add(config)
    assert "Extra parameters ignored" in caplog.text
