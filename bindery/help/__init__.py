"""
Bindery CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .formatter import COLUMN_GUTTER_WIDTH, HelpBuilder, help_view

__all__ = [
    "COLUMN_GUTTER_WIDTH",
    "HelpBuilder",
    "help_view",
]
