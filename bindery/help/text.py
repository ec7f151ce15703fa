# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Fixed text used by the help formatter.

These strings are part of the help output contract and must stay byte-for-byte
stable: scripts and tests compare rendered help against them.
"""


class Synopsis:
    TITLE = "Usage:"
    OPTIONS = " [options]"
    COMMAND = " [command]"
    ADDITIONAL_ARGUMENTS = " [[--] <additional arguments>...]]"


class ArgumentsSection:
    TITLE = "Arguments:"


class OptionsSection:
    TITLE = "Options:"


class CommandsSection:
    TITLE = "Commands:"


ADDITIONAL_ARGUMENTS_SECTION = (
    "\nAdditional Arguments:\n"
    "  Arguments passed to the application that is being run."
)
