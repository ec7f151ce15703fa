# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the static, pre-parse description tree of a command line interface.

A `CommandDefinition` owns an ordered list of child `SymbolDefinition`s (options,
arguments, or nested `CommandDefinition`s). Each child keeps a back-link to the
command that owns it, which lets help rendering walk from any command up to the
root without the tree holding cycles in its ownership.

Key Components:
- `ArgumentArity`: How many values an argument accepts.
- `ArgumentDefinition`: Name, help text, visibility, and value type of an argument.
- `SymbolDefinition`: A named symbol with raw aliases, such as `-v` / `--verbose`.
- `CommandDefinition`: A symbol with children, forming a rooted tree.

Example:
    root = CommandDefinition(
        "git",
        "The stupid content tracker",
        children=[
            SymbolDefinition(("-v", "--verbose"), "Be chatty"),
            CommandDefinition("status", "Show the working tree status"),
        ],
    )
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from bindery.exceptions import InvalidArgumentError

OPTION_PREFIXES = ("--", "-", "/")


def remove_prefix(alias: str) -> str:
    """Strip a leading option prefix (`--`, `-` or `/`) from an alias."""
    for prefix in OPTION_PREFIXES:
        if alias.startswith(prefix):
            return alias[len(prefix) :]
    return alias


class ArgumentArity(Enum):
    """Number of values an argument accepts."""

    ZERO = "zero"
    ONE = "one"
    MANY = "many"

    @classmethod
    def _missing_(cls, value: object) -> ArgumentArity:
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass
class ArgumentDefinition:
    """
    Represents the argument attached to a command or option.

    Attributes:
        name (str | None): Display name of the argument. `None` means the argument
            carries no help at all and never appears in the Arguments section.
        description (str): Help text for the argument.
        hidden (bool): True if the argument should be left out of help output.
        value_type (Any): Type of the values the parser produces for the argument.
        arity (ArgumentArity): How many values the argument accepts.
        default (Any): Value used when the argument was not supplied.
    """

    name: str | None = None
    description: str = ""
    hidden: bool = False
    value_type: Any = str
    arity: ArgumentArity = ArgumentArity.ZERO
    default: Any = None

    @property
    def is_shown(self) -> bool:
        """True if the argument has help and that help is not hidden."""
        return self.name is not None and not self.hidden


@dataclass(eq=False)
class SymbolDefinition:
    """
    Represents a named symbol of a command line: an option or an argument.

    Attributes:
        raw_aliases (tuple[str, ...]): Every spelling of the symbol, prefixes included.
        description (str): Help text for the symbol.
        argument (ArgumentDefinition): The argument the symbol accepts.
        hidden (bool): True if the symbol should be left out of help output.
        name (str): Logical name. Defaults to the longest alias without its prefix.
        parent (CommandDefinition | None): The command this symbol belongs to.
    """

    raw_aliases: tuple[str, ...] | str
    description: str = ""
    argument: ArgumentDefinition = field(default_factory=ArgumentDefinition)
    hidden: bool = False
    name: str = ""
    parent: CommandDefinition | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.raw_aliases, str):
            self.raw_aliases = (self.raw_aliases,)
        else:
            self.raw_aliases = tuple(self.raw_aliases)
        if not self.raw_aliases:
            raise InvalidArgumentError("A symbol requires at least one alias.")
        if not self.name:
            longest = max(self.raw_aliases, key=len)
            self.name = remove_prefix(longest)
        if self.argument is None:
            self.argument = ArgumentDefinition()

    def is_hidden(self) -> bool:
        return self.hidden

    def has_alias(self, alias: str) -> bool:
        """Check an alias with or without its prefix."""
        return alias in self.raw_aliases or any(
            remove_prefix(raw) == alias for raw in self.raw_aliases
        )


@dataclass(eq=False)
class CommandDefinition(SymbolDefinition):
    """
    Represents a command: a symbol that owns an ordered list of child symbols.

    Attributes:
        children (list[SymbolDefinition]): Options, arguments and subcommands in
            declaration order.
        treat_unmatched_tokens_as_errors (bool): If False, trailing tokens that do
            not match any symbol are passed through as additional arguments.
    """

    children: list[SymbolDefinition] = field(default_factory=list)
    treat_unmatched_tokens_as_errors: bool = True

    def __post_init__(self) -> None:
        super().__post_init__()
        children = list(self.children)
        self.children = []
        for child in children:
            self.add_child(child)

    def add_child(self, symbol: SymbolDefinition) -> SymbolDefinition:
        if symbol is None:
            raise InvalidArgumentError("symbol must not be None.")
        symbol.parent = self
        self.children.append(symbol)
        return symbol

    @property
    def options(self) -> list[SymbolDefinition]:
        """Visible children that are not commands."""
        return [
            child
            for child in self.children
            if not isinstance(child, CommandDefinition) and not child.is_hidden()
        ]

    @property
    def subcommands(self) -> list[CommandDefinition]:
        """Visible child commands."""
        return [
            child
            for child in self.children
            if isinstance(child, CommandDefinition) and not child.is_hidden()
        ]

    def has_subcommands(self) -> bool:
        """True if any child is a command, hidden or not."""
        return any(isinstance(child, CommandDefinition) for child in self.children)

    def iter_parents(self) -> Iterator[CommandDefinition]:
        """Yield this command followed by each ancestor up to the root."""
        command: CommandDefinition | None = self
        while command is not None:
            yield command
            command = command.parent

    def lineage(self) -> list[CommandDefinition]:
        """Return the commands from the root down to this one."""
        return list(reversed(list(self.iter_parents())))

    def find_subcommand(self, alias: str) -> CommandDefinition | None:
        for child in self.children:
            if isinstance(child, CommandDefinition) and child.has_alias(alias):
                return child
        return None
