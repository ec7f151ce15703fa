"""help_demo.py"""
from pathlib import Path

from bindery.config import loader
from bindery.help import help_view

git = loader(Path(__file__).parent / "bindery.yaml")

if __name__ == "__main__":
    print(help_view(git))
    print(help_view(git.find_subcommand("remote").find_subcommand("add")))
