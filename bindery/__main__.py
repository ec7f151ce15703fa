"""
Bindery CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from bindery.config import loader
from bindery.console import console
from bindery.definitions import CommandDefinition
from bindery.exceptions import BinderyError
from bindery.help import HelpBuilder
from bindery.logger import logger
from bindery.utils import get_program_invocation, setup_logging


def find_bindery_config() -> Path | None:
    candidates = [
        Path.cwd() / "bindery.yaml",
        Path.cwd() / "bindery.toml",
        Path.cwd() / ".bindery.yaml",
        Path.cwd() / ".bindery.toml",
        Path(os.environ.get("BINDERY_CONFIG", "bindery.yaml")),
        Path.home() / ".config" / "bindery" / "bindery.yaml",
        Path.home() / ".config" / "bindery" / "bindery.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def get_root_parser(prog: str | None = None) -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog or get_program_invocation(),
        description="Render help for a command defined in a Bindery definition file.",
        epilog="Without --config, bindery.yaml or bindery.toml is searched for in "
        "the working directory, $BINDERY_CONFIG and ~/.config/bindery/.",
    )
    parser.add_argument(
        "-c", "--config", type=Path, help="Path to a YAML or TOML definition file."
    )
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], help="Console logging format."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    parser.add_argument(
        "command",
        nargs="*",
        default=[],
        help="Path of subcommands to show help for, e.g. 'remote add'.",
    )
    return parser


def find_command(root: CommandDefinition, path: Sequence[str]) -> CommandDefinition:
    command = root
    for alias in path:
        subcommand = command.find_subcommand(alias)
        if subcommand is None:
            raise BinderyError(f"Unknown command '{alias}' under '{command.name}'.")
        command = subcommand
    return command


def run(args: Namespace) -> int:
    config_path = args.config or find_bindery_config()
    if config_path is None:
        console.print(
            "[bold red]❌ No definition file found.[/] "
            "Pass one with --config or create bindery.yaml."
        )
        return 1

    try:
        root = loader(config_path)
        command = find_command(root, args.command)
    except (BinderyError, FileNotFoundError) as error:
        logger.debug("Failed to render help from %s", config_path, exc_info=True)
        console.print(f"[bold red]❌ {escape(str(error))}[/]")
        return 1

    HelpBuilder(console).write(command)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        log_filename=None,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
