from pathlib import Path

import pytest

from bindery.definitions import (
    ArgumentArity,
    ArgumentDefinition,
    CommandDefinition,
    SymbolDefinition,
)
from bindery.parse_result import ParseResult, Symbol


@pytest.fixture
def git() -> CommandDefinition:
    """A small git-like definition tree."""
    return CommandDefinition(
        "git",
        "The stupid content tracker",
        children=[
            SymbolDefinition(("-v", "--verbose"), "Be more verbose"),
            CommandDefinition("status", "Show the working tree status"),
            CommandDefinition(
                "remote",
                "Manage set of tracked repositories",
                argument=ArgumentDefinition(
                    "name", "Name of the remote", arity=ArgumentArity.ONE
                ),
                children=[
                    CommandDefinition(
                        "add",
                        "Add a remote",
                        argument=ArgumentDefinition(
                            "url", "URL of the repository", arity=ArgumentArity.ONE
                        ),
                    )
                ],
            ),
        ],
    )


@pytest.fixture
def tool() -> CommandDefinition:
    """A command with typed options, parsed by `tool_parse_result`."""
    return CommandDefinition(
        "tool",
        "Does things",
        children=[
            SymbolDefinition(
                ("--name",),
                "Name to use",
                argument=ArgumentDefinition("name", arity=ArgumentArity.ONE),
            ),
            SymbolDefinition(
                ("-c", "--count"),
                "How many times",
                argument=ArgumentDefinition(
                    "count", value_type=int, arity=ArgumentArity.ONE
                ),
            ),
            SymbolDefinition(("-v", "--verbose"), "Be more verbose"),
            SymbolDefinition(
                ("--path",),
                "Paths to process",
                argument=ArgumentDefinition(
                    "path", value_type=Path, arity=ArgumentArity.MANY
                ),
            ),
        ],
    )


@pytest.fixture
def tool_parse_result(tool: CommandDefinition) -> ParseResult:
    """`tool --name alice -c 3 -v --path a --path b`"""
    name, count, verbose, path = tool.children
    return ParseResult(
        Symbol(
            tool,
            children=[
                Symbol(name, values=["alice"]),
                Symbol(count, values=[3]),
                Symbol(verbose),
                Symbol(path, values=[Path("a"), Path("b")]),
            ],
        )
    )
