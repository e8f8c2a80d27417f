"""
EEE Helper interactive shell

Menus, prompts and the append-only calculation log around the
eee_engine formula solvers.
"""

from eee_cli.console import Console, EndOfInput
from eee_cli.log_store import FileLogStore, InMemoryLogStore
from eee_cli.menu import Calculator, MenuChoice
