# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option definitions for an `OptionParser` from YAML or TOML files.

Example YAML:
    description: Copy a byte range
    verbose: true
    options:
      - keys: [-b, --begin]
        dest: begin
        action: number
        help: First byte
      - keys: -v
        dest: verbose
        action: "true"
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError

from optbag.exceptions import ConfigError
from optbag.logger import logger
from optbag.parser.option_config import OptionConfig, format_validation_error
from optbag.parser.option_parser import DEFAULT_DESCRIPTION, OptionParser


class ParserConfig(BaseModel):
    """OptBag parser configuration model."""

    description: str = DEFAULT_DESCRIPTION
    verbose: bool = True
    options: list[OptionConfig] = Field(default_factory=list)

    def to_parser(self, **kwargs: Any) -> OptionParser:
        parser = OptionParser(
            description=self.description, verbose=self.verbose, **kwargs
        )
        parser.add_options(self.options)
        return parser


def read_config_file(path: Path) -> Any:
    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(config_file)
            elif suffix == ".toml":
                return toml.load(config_file)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Cannot read config file '{path}': {error}") from error
    raise ConfigError(f"Unsupported config format: {suffix}")


def loader(file_path: Path | str, **kwargs: Any) -> OptionParser:
    """
    Load an `OptionParser` from a YAML or TOML definition file.

    The file should contain a mapping with an `options` list. Each option is a
    mapping with `keys`, `dest`, `action` and an optional `help`.

    Args:
        file_path (Path | str): Path to the definition file.
        **kwargs: Passed to `OptionParser` (e.g. `stdin`, `console`).

    Returns:
        OptionParser: A parser with every option registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be read or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = read_config_file(path)
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "description: 'My CLI'\n"
            "options:\n"
            "  - keys: ['-v', '--verbose']\n"
            "    dest: 'verbose'\n"
            "    action: 'true'"
        )

    try:
        config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(
            f"Invalid config file '{path}': {format_validation_error(error)}"
        ) from error

    logger.debug("Loaded %d option definitions from %s", len(config.options), path)
    return config.to_parser(**kwargs)
