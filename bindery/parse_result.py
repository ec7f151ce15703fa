# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the parsed symbol tree consumed by the binding layer.

A tokenizer (outside of Bindery) matches raw command line tokens against a
`CommandDefinition` tree and produces one `Symbol` per matched command, option,
or argument, each carrying values that are already converted to their target
type. The root of that tree is wrapped in a `ParseResult`.

Every `Symbol` is descriptor-like: it exposes `value_name` and `value_type` so
that it can be matched against a handler parameter with `can_bind`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from bindery.definitions import (
    OPTION_PREFIXES,
    ArgumentArity,
    CommandDefinition,
    SymbolDefinition,
)
from bindery.exceptions import InvalidArgumentError


class SymbolKind(Enum):
    """Kind of a parsed symbol."""

    COMMAND = "command"
    OPTION = "option"
    ARGUMENT = "argument"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class Symbol:
    """
    A node of the parsed command line tree.

    Attributes:
        definition (SymbolDefinition): The static definition the symbol matched.
        kind (SymbolKind): Command, option or argument. Inferred when omitted:
            definitions without any prefixed alias are arguments.
        values (list[Any]): Values produced for the symbol, already typed.
        children (list[Symbol]): Nested symbols in the order they were parsed.
        parent (Symbol | None): Enclosing symbol.
    """

    definition: SymbolDefinition
    kind: SymbolKind | None = None
    values: list[Any] = field(default_factory=list)
    children: list[Symbol] = field(default_factory=list)
    parent: Symbol | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.definition is None:
            raise InvalidArgumentError("definition must not be None.")
        if self.kind is None:
            self.kind = self._infer_kind(self.definition)
        children = list(self.children)
        self.children = []
        for child in children:
            self.add_child(child)

    @staticmethod
    def _infer_kind(definition: SymbolDefinition) -> SymbolKind:
        if isinstance(definition, CommandDefinition):
            return SymbolKind.COMMAND
        if any(alias.startswith(OPTION_PREFIXES) for alias in definition.raw_aliases):
            return SymbolKind.OPTION
        return SymbolKind.ARGUMENT

    def add_child(self, symbol: Symbol) -> Symbol:
        symbol.parent = self
        self.children.append(symbol)
        return symbol

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def aliases(self) -> tuple[str, ...]:
        return tuple(self.definition.raw_aliases)

    @property
    def value_name(self) -> str:
        return self.definition.name

    @property
    def value_type(self) -> Any:
        argument = self.definition.argument
        if argument.arity is ArgumentArity.ZERO:
            return bool
        if argument.arity is ArgumentArity.MANY:
            return list[argument.value_type]  # type: ignore[valid-type]
        return argument.value_type

    def try_get_value(self) -> tuple[bool, Any]:
        """
        Return `(found, value)` for the values captured by this symbol.

        A symbol without an argument is a flag and yields `True` by being present.
        A symbol accepting many values yields a list. Otherwise the single
        captured value is returned, falling back to the argument default.
        """
        argument = self.definition.argument
        if argument.arity is ArgumentArity.ZERO:
            return True, True
        if argument.arity is ArgumentArity.MANY:
            if self.values:
                return True, list(self.values)
            if argument.default is not None:
                return True, argument.default
            return True, []
        if self.values:
            return True, self.values[-1]
        if argument.default is not None:
            return True, argument.default
        return False, None

    def walk(self) -> Iterator[Symbol]:
        """Yield this symbol and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __str__(self) -> str:
        values = " ".join(repr(value) for value in self.values)
        return f"[{self.kind} {self.name}{' ' + values if values else ''}]"


@dataclass
class ParseResult:
    """
    The root of a parsed symbol tree for one command line invocation.

    Attributes:
        root (Symbol): The symbol for the root command.
        unmatched_tokens (list[str]): Trailing tokens that matched no symbol.
        errors (list[str]): Parse errors reported by the tokenizer.
    """

    root: Symbol
    unmatched_tokens: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.root is None:
            raise InvalidArgumentError("root must not be None.")

    def value_descriptors(self) -> Iterator[Symbol]:
        """Yield every parsed symbol, root first, children in parse order."""
        yield from self.root.walk()

    @property
    def command(self) -> Symbol:
        """The innermost command symbol that was parsed."""
        command = self.root
        while True:
            subcommand = next(
                (
                    child
                    for child in command.children
                    if child.kind is SymbolKind.COMMAND
                ),
                None,
            )
            if subcommand is None:
                return command
            command = subcommand

    def find_result_for(self, definition: SymbolDefinition) -> Symbol | None:
        return next(
            (
                symbol
                for symbol in self.value_descriptors()
                if symbol.definition is definition
            ),
            None,
        )

    def __str__(self) -> str:
        return f"ParseResult: {' '.join(str(symbol) for symbol in self.root.walk())}"
