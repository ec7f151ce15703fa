# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Bindery CLI framework.

Exception Hierarchy:
- BinderyError
    ├── InvalidArgumentError
    ├── MissingArgumentError
    └── ConfigError

Resolution that simply finds nothing is not an error: the binding layer
returns `None` and leaves the fallback to the caller. These exceptions cover
invalid input handed to constructors and registration methods, handler
parameters that cannot be satisfied, and malformed definition files.
"""


class BinderyError(Exception):
    """Base exception for the Bindery framework."""


class InvalidArgumentError(BinderyError, ValueError):
    """Exception raised when a required argument is missing or of the wrong kind."""


class MissingArgumentError(BinderyError):
    """Exception raised when a handler parameter has no value source and no default."""

    def __init__(self, parameter_name: str):
        super().__init__(f"Missing required argument '{parameter_name}'.")
        self.parameter_name = parameter_name


class ConfigError(BinderyError, ValueError):
    """Exception raised when a command definition file cannot be loaded."""
