"""
Bindery CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .binding import BindingContext, BoundValue, ValueDescriptor
from .definitions import (
    ArgumentArity,
    ArgumentDefinition,
    CommandDefinition,
    SymbolDefinition,
)
from .help import HelpBuilder, help_view
from .parse_result import ParseResult, Symbol, SymbolKind

logger = logging.getLogger("bindery")


__all__ = [
    "ArgumentArity",
    "ArgumentDefinition",
    "BindingContext",
    "BoundValue",
    "CommandDefinition",
    "HelpBuilder",
    "ParseResult",
    "Symbol",
    "SymbolDefinition",
    "SymbolKind",
    "ValueDescriptor",
    "help_view",
]
