"""binding_demo.py"""
from pathlib import Path

from bindery import (
    ArgumentArity,
    ArgumentDefinition,
    BindingContext,
    CommandDefinition,
    ParseResult,
    Symbol,
    SymbolDefinition,
)
from bindery.binding import invoke_handler
from bindery.help import HelpBuilder
from bindery.utils import setup_logging

setup_logging(log_filename=None)


class Repository:
    def __init__(self, root: Path):
        self.root = root


verbose = SymbolDefinition(("-v", "--verbose"), "Be more verbose")
paths = SymbolDefinition(
    ("--path",),
    "Paths to show",
    argument=ArgumentDefinition("path", value_type=Path, arity=ArgumentArity.MANY),
)
status = CommandDefinition(
    "status", "Show the working tree status", children=[verbose, paths]
)
git = CommandDefinition("git", "The stupid content tracker", children=[status])

parse_result = ParseResult(
    Symbol(
        git,
        children=[
            Symbol(
                status,
                children=[
                    Symbol(verbose),
                    Symbol(paths, values=[Path("src"), Path("tests")]),
                ],
            )
        ],
    )
)


def show_status(repository: Repository, verbose: bool = False, path: list[Path] = ()):
    for entry in path:
        print(f"{repository.root / entry} (verbose={verbose})")


context = BindingContext(parse_result)
context.add_service(Repository, lambda: Repository(Path.cwd()))

if __name__ == "__main__":
    invoke_handler(context, show_status)
    context.service_registry.get_service(HelpBuilder).write(status)
