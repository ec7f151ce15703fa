# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage and help text for a `CommandDefinition`.

`help_view()` is a pure function of the definition tree: it never mutates the
tree and returns the same string for the same tree. Output is built in a
single pass, section by section, each section skipping itself when it has
nothing to show:

    Usage: git [options] [command]

    Options:
      -v, --verbose   Be chatty

    Commands:
      status   Show the working tree status

Two-column rows share a left column width per section: the longest left text
plus a three space gutter. A left text too long for its column pushes the
description onto the next line, and multi-line descriptions keep every line
aligned to the column.

`HelpBuilder` writes the same text to a Rich console.
"""
from __future__ import annotations

import re
from io import StringIO
from typing import Sequence

from rich.console import Console

from bindery.console import console as default_console
from bindery.definitions import CommandDefinition, SymbolDefinition
from bindery.exceptions import InvalidArgumentError
from bindery.help import text

COLUMN_GUTTER_WIDTH = 3
INDENT = "  "

_LINE_BREAK = re.compile(r"[\r\n]")


def help_view(command_definition: CommandDefinition) -> str:
    """
    Return the complete help text for `command_definition`.

    Raises:
        InvalidArgumentError: If `command_definition` is None.
    """
    if command_definition is None:
        raise InvalidArgumentError("command_definition must not be None.")

    output = StringIO()
    _write_synopsis(command_definition, output)
    _write_arguments_section(command_definition, output)
    _write_options_section(command_definition, output)
    _write_subcommands_section(command_definition, output)
    _write_additional_arguments_section(command_definition, output)
    return output.getvalue()


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _write_synopsis(command: CommandDefinition, output: StringIO) -> None:
    output.write(text.Synopsis.TITLE)

    for ancestor in command.lineage():
        output.write(f" {ancestor.name}")
        argument_name = ancestor.argument.name
        if ancestor is not command and not _is_blank(argument_name):
            output.write(f" <{argument_name}>")

    if command.options:
        output.write(text.Synopsis.OPTIONS)

    argument_name = command.argument.name
    if not _is_blank(argument_name):
        output.write(f" <{argument_name}>")

    if command.has_subcommands():
        output.write(text.Synopsis.COMMAND)

    if not command.treat_unmatched_tokens_as_errors:
        output.write(text.Synopsis.ADDITIONAL_ARGUMENTS)

    output.write("\n")


def _write_arguments_section(command: CommandDefinition, output: StringIO) -> None:
    argument = command.argument
    parent_argument = command.parent.argument if command.parent else None

    show_argument = argument.is_shown
    show_parent_argument = parent_argument is not None and parent_argument.is_shown

    if not show_argument and not show_parent_argument:
        return

    output.write("\n")
    output.write(f"{text.ArgumentsSection.TITLE}\n")

    left_text = f"{INDENT}<{argument.name}>" if show_argument else ""
    parent_left_text = (
        f"{INDENT}<{parent_argument.name}>" if show_parent_argument else ""
    )
    width = COLUMN_GUTTER_WIDTH + max(len(left_text), len(parent_left_text))

    if show_parent_argument:
        write_columnized_summary(
            parent_left_text, parent_argument.description, width, output
        )
    if show_argument:
        write_columnized_summary(left_text, argument.description, width, output)


def _write_options_section(command: CommandDefinition, output: StringIO) -> None:
    options = command.options
    if not options:
        return

    output.write("\n")
    output.write(f"{text.OptionsSection.TITLE}\n")
    write_symbol_list(options, output)


def _write_subcommands_section(command: CommandDefinition, output: StringIO) -> None:
    subcommands = command.subcommands
    if not subcommands:
        return

    output.write("\n")
    output.write(f"{text.CommandsSection.TITLE}\n")
    write_symbol_list(subcommands, output)


def _write_additional_arguments_section(
    command: CommandDefinition, output: StringIO
) -> None:
    if command.treat_unmatched_tokens_as_errors:
        return
    output.write(text.ADDITIONAL_ARGUMENTS_SECTION)


def left_column_text(symbol: SymbolDefinition) -> str:
    """Aliases, shortest first, followed by the argument placeholder if named."""
    aliases = ", ".join(sorted(symbol.raw_aliases, key=len))
    left_text = f"{INDENT}{aliases}"

    argument_name = symbol.argument.name
    if not _is_blank(argument_name):
        left_text += f" <{argument_name}>"
    return left_text


def write_symbol_list(symbols: Sequence[SymbolDefinition], output: StringIO) -> None:
    """Write one aligned row per symbol, in the order given."""
    rows = [(left_column_text(symbol), symbol.description) for symbol in symbols]
    width = max(len(left_text) for left_text, _ in rows) + COLUMN_GUTTER_WIDTH

    for left_text, description in rows:
        write_columnized_summary(left_text, description, width, output)


def write_columnized_summary(
    left_text: str | None,
    right_text: str | None,
    width: int,
    output: StringIO,
) -> None:
    left_text = left_text or ""
    right_text = right_text or ""

    output.write(left_text)
    if len(left_text) <= width - 2:
        output.write(" " * (width - len(left_text)))
    else:
        output.write("\n")
        output.write(" " * width)

    lines = [line.strip() for line in _LINE_BREAK.split(right_text) if line]
    output.write(("\n" + " " * width).join(lines))
    output.write("\n")


class HelpBuilder:
    """
    Writes help text for a command definition to a console.

    Registered as a service on every `BindingContext`, so handlers can ask for
    it by annotating a parameter with `HelpBuilder`.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console: Console = console or default_console

    def write(self, command_definition: CommandDefinition) -> None:
        self.console.out(help_view(command_definition), end="", highlight=False)
