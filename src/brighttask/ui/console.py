"""Console output formatting utilities for brighttask."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from ..model import Recipe


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False, quiet: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
            quiet: If True, do not echo action command lines
        """
        self.debug = debug
        self.quiet = quiet

    def print_recipe_list(self, recipes: Iterable[Recipe]) -> None:
        """Print every recipe with its description, in declaration order."""
        recipes = list(recipes)
        print("Available recipes:")
        if not recipes:
            return
        width = max(len(r.name) for r in recipes)
        for r in recipes:
            if r.doc:
                print(f"    {r.name.ljust(width)} # {r.doc}")
            else:
                print(f"    {r.name}")

    def print_recipe(self, recipe: Recipe) -> None:
        """Print a recipe definition."""
        if recipe.doc:
            print(f"# {recipe.doc}")
        header = f"{recipe.name}:"
        if recipe.needs:
            header += " " + " ".join(recipe.needs)
        print(header)
        for step in recipe.steps:
            prefix = "" if step.echo else "@"
            print(f"    {prefix}{step.run}")

    def print_action(self, cmd: str, *, force: bool = False) -> None:
        """Echo a command line to stderr before it runs."""
        if self.quiet and not force:
            return
        print(cmd, file=sys.stderr, flush=True)

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__)
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
