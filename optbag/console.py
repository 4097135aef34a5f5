# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for OptBag output."""
from rich.console import Console

console = Console(color_system="auto", highlight=False)
