"""Shared utilities for sanabot CLI commands."""

from rich.console import Console

console = Console()
