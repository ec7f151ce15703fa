# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads a `CommandDefinition` tree from a YAML or TOML file.

Example (YAML):
    name: git
    description: The stupid content tracker
    options:
      - aliases: ["-v", "--verbose"]
        description: Be chatty
    commands:
      - name: clone
        description: Clone a repository
        argument:
          name: repository
          description: The repository to clone
          arity: one
      - name: exec
        description: Run a git subcommand
        treat_unmatched_tokens_as_errors: false
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from bindery.definitions import (
    ArgumentArity,
    ArgumentDefinition,
    CommandDefinition,
    SymbolDefinition,
)
from bindery.exceptions import ConfigError
from bindery.logger import logger

MAX_COMMAND_DEPTH = 8

VALUE_TYPES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
    "path": Path,
}


class RawArgument(BaseModel):
    """Raw argument model for a command definition file."""

    name: str | None = None
    description: str = ""
    hidden: bool = False
    type: str = "str"
    arity: ArgumentArity = ArgumentArity.ONE
    default: Any = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in VALUE_TYPES:
            valid = ", ".join(VALUE_TYPES)
            raise ValueError(
                f"Unknown argument type '{value}'. Must be one of: {valid}"
            )
        return normalized

    def to_definition(self) -> ArgumentDefinition:
        return ArgumentDefinition(
            name=self.name,
            description=self.description,
            hidden=self.hidden,
            value_type=VALUE_TYPES[self.type],
            arity=self.arity,
            default=self.default,
        )


class RawOption(BaseModel):
    """Raw option model for a command definition file."""

    aliases: list[str] = Field(min_length=1)
    description: str = ""
    hidden: bool = False
    argument: RawArgument | None = None

    def to_definition(self) -> SymbolDefinition:
        return SymbolDefinition(
            tuple(self.aliases),
            self.description,
            argument=(
                self.argument.to_definition() if self.argument else ArgumentDefinition()
            ),
            hidden=self.hidden,
        )


class RawCommand(BaseModel):
    """Raw command model for a command definition file."""

    name: str
    aliases: list[str] = Field(default_factory=list)
    description: str = ""
    hidden: bool = False
    argument: RawArgument | None = None
    treat_unmatched_tokens_as_errors: bool = True
    options: list[RawOption] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    def to_definition(self, _depth: int = 0) -> CommandDefinition:
        if _depth >= MAX_COMMAND_DEPTH:
            raise ConfigError(
                f"Maximum command depth exceeded ({MAX_COMMAND_DEPTH} levels deep)"
            )
        children: list[SymbolDefinition] = [
            option.to_definition() for option in self.options
        ]
        children.extend(
            command.to_definition(_depth=_depth + 1) for command in self.commands
        )
        return CommandDefinition(
            (self.name, *(alias for alias in self.aliases if alias != self.name)),
            self.description,
            argument=(
                self.argument.to_definition() if self.argument else ArgumentDefinition()
            ),
            hidden=self.hidden,
            name=self.name,
            children=children,
            treat_unmatched_tokens_as_errors=self.treat_unmatched_tokens_as_errors,
        )


def convert_command(raw_config: dict[str, Any]) -> CommandDefinition:
    """Validate a raw mapping and build the definition tree from it."""
    try:
        raw_command = RawCommand.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid command definition:\n{error}") from error
    return raw_command.to_definition()


def loader(file_path: Path | str) -> CommandDefinition:
    """
    Load a command definition tree from a YAML or TOML file.

    The file should contain a mapping describing the root command, with nested
    `options` and `commands` lists.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        CommandDefinition: The root of the loaded tree.

    Raises:
        TypeError: If `file_path` is not a string or Path.
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping describing the root command.\n"
            "Example:\n"
            "name: 'tool'\n"
            "options:\n"
            "  - aliases: ['-v', '--verbose']\n"
            "    description: 'Verbose output'"
        )

    logger.debug("Loading command definitions from %s", path)
    return convert_command(raw_config)
