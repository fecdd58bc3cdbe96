# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used by flagkit's Rich usage renderer."""
from rich.console import Console

console = Console(stderr=True, highlight=False)
