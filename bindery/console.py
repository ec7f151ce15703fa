# Bindery CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Bindery applications."""
from rich.console import Console

console = Console(highlight=False)
